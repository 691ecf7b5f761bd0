"""Source document discovery and grouping."""

from docsmith.analyzer.documents import (
    COMPANION_SUFFIXES,
    Document,
    FileGroup,
    discover_documents,
    group_for_merge,
    is_companion_name,
    merge_content,
    single_groups,
)

__all__ = [
    "COMPANION_SUFFIXES",
    "Document",
    "FileGroup",
    "discover_documents",
    "group_for_merge",
    "is_companion_name",
    "merge_content",
    "single_groups",
]
