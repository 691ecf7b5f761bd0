"""Docsmith - turns canonical LLM-oriented docs into human-readable documentation."""

__version__ = "0.1.0"
