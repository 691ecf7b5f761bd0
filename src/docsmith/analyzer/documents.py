"""Source document discovery and companion-file grouping.

Large topics in the canonical docs are split for retrieval into a main file
and companion files (``foo.md``, ``foo-impl.md``, ``foo-testing.md``, ...).
For human-readable output they are merged back into a single document.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import logfire

DOCUMENT_SUFFIX = ".md"

# Order matters: companions are attached in this order
COMPANION_SUFFIXES = (
    "-impl",
    "-implementation",
    "-testing",
    "-test",
    "-examples",
    "-advanced",
    "-details",
)

MERGE_SEPARATOR = "\n\n---\n\n"


@dataclass(frozen=True)
class Document:
    """A source document on disk."""

    path: Path
    root: Path | None = None

    @property
    def base_name(self) -> str:
        """File name without the document extension."""
        return self.path.name.removesuffix(DOCUMENT_SUFFIX)

    @property
    def relative_path(self) -> Path:
        """Path relative to the source root (or the bare path without one)."""
        if self.root is None:
            return self.path
        return self.path.relative_to(self.root)

    @property
    def content(self) -> str:
        """Current file content, read from disk on every access."""
        return self.path.read_text(encoding="utf-8")

    @property
    def mtime(self) -> float:
        """Modification timestamp in seconds."""
        return self.path.stat().st_mtime

    @property
    def is_companion(self) -> bool:
        """Whether the name marks this document as a companion file."""
        return is_companion_name(self.base_name)


@dataclass
class FileGroup:
    """A main document plus the companion documents merged into it."""

    base_name: str
    main_file: Document
    companion_files: list[Document] = field(default_factory=list)

    @classmethod
    def single(cls, document: Document) -> FileGroup:
        """A group holding one document and no companions."""
        return cls(base_name=document.base_name, main_file=document)


def is_companion_name(base_name: str) -> bool:
    """Check whether a base name ends in a companion suffix."""
    return any(base_name.endswith(suffix) for suffix in COMPANION_SUFFIXES)


def discover_documents(root: Path) -> list[Document]:
    """Recursively list every document under ``root``.

    Returns an empty list when the root does not exist.
    """
    root = Path(root)
    documents: list[Document] = []

    if not root.is_dir():
        return documents

    def walk(directory: Path) -> None:
        for entry in sorted(directory.iterdir()):
            if entry.is_dir() and not entry.is_symlink():
                walk(entry)
            elif entry.is_file() and entry.name.endswith(DOCUMENT_SUFFIX):
                documents.append(Document(path=entry, root=root))

    walk(root)

    logfire.info("Discovered source documents", root=str(root), count=len(documents))
    return documents


def group_for_merge(documents: list[Document]) -> list[FileGroup]:
    """Group main documents with their companion documents.

    Companion documents are never main files. A companion whose main file
    does not exist appears in no group. When two documents share a base name
    the first one wins.
    """
    lookup: dict[str, Document] = {}
    for document in documents:
        lookup.setdefault(document.base_name, document)

    groups: list[FileGroup] = []
    processed: set[str] = set()

    for document in documents:
        base_name = document.base_name

        # Already claimed, either as a companion or as a duplicate base name
        if base_name in processed:
            continue

        if document.is_companion:
            continue

        companions: list[Document] = []
        for suffix in COMPANION_SUFFIXES:
            companion_name = f"{base_name}{suffix}"
            companion = lookup.get(companion_name)
            if companion is not None and companion_name not in processed:
                companions.append(companion)
                processed.add(companion_name)

        processed.add(base_name)
        groups.append(
            FileGroup(base_name=base_name, main_file=document, companion_files=companions)
        )

    orphans = [
        d.base_name for d in documents if d.is_companion and d.base_name not in processed
    ]
    if orphans:
        logfire.warn("Skipping companion files without a main file", files=orphans)

    return groups


def single_groups(documents: list[Document]) -> list[FileGroup]:
    """One group per document, used when merging is disabled."""
    return [FileGroup.single(document) for document in documents]


def merge_content(main_file: Document, companion_files: list[Document]) -> str:
    """Concatenate a main document with its companions, in the given order."""
    content = main_file.content

    for companion in companion_files:
        content += MERGE_SEPARATOR
        content += f"<!-- Merged from: {companion.base_name}{DOCUMENT_SUFFIX} -->\n\n"
        content += companion.content

    return content
