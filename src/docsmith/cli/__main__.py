"""Allow ``python -m docsmith.cli``."""

from docsmith.cli import main

main()
