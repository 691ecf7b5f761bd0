"""Docsmith core service - orchestrates one documentation build run."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

import logfire
from rich.console import Console

from docsmith.analyzer import (
    Document,
    FileGroup,
    discover_documents,
    group_for_merge,
    merge_content,
    single_groups,
)
from docsmith.config import ProjectConfig
from docsmith.core.config import Settings, get_settings
from docsmith.core.errors import (
    ProviderUnavailableError,
    SourceFileNotFoundError,
    UnsafePathError,
)
from docsmith.generator import (
    FailedFileRecord,
    clear_failed_files,
    load_failed_files,
    needs_regeneration,
    save_failed_files,
)
from docsmith.llm import GenerateOptions, LLMProvider, get_provider
from docsmith.templates import TemplateLoader, build_prompt, get_template_dirs


class RunMode(StrEnum):
    """How the work set of a run was selected."""

    RETRY_FAILED = "retry-failed"
    SINGLE_FILE = "single-file"
    FULL_SCAN = "full-scan"


@dataclass
class RunOptions:
    """Options for a single generation run, usually straight from the CLI."""

    provider: str | None = None
    model: str | None = None
    file: str | None = None
    force: bool = False
    merge: bool = True
    retry_failed: bool = False
    clean: bool = False


@dataclass
class GenerationResult:
    """Outcome of a generation run."""

    mode: RunMode
    provider: str
    selected: int = 0
    success: int = 0
    failed: list[FailedFileRecord] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)
    cleared_history: bool = False

    @property
    def failure_count(self) -> int:
        return len(self.failed)


class DocumentationService:
    """Main service for documentation generation.

    Orchestrates one run:
    1. Resolve and health-check the provider
    2. Select the work set (retry, single file or full scan)
    3. Generate each group and write it under the target root
    4. Persist the failures for a later retry
    """

    def __init__(
        self,
        settings: Settings | None = None,
        project_config: ProjectConfig | None = None,
        provider: LLMProvider | None = None,
        source_dir: Path | None = None,
        target_dir: Path | None = None,
        console: Console | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            settings: Application settings
            project_config: Project-level overrides from .docsmith.yml
            provider: Pre-built provider, skips registry lookup
            source_dir: Source root override
            target_dir: Target root override
            console: Console for progress output
        """
        self.settings = settings or get_settings()
        self.project = project_config or ProjectConfig()
        self._provider = provider
        self.source_dir = Path(source_dir or self.project.source_dir or self.settings.source_dir)
        self.target_dir = Path(target_dir or self.project.target_dir or self.settings.target_dir)
        self.failed_files_path = Path(self.settings.failed_files_path)
        self.console = console or Console()
        self.template_loader = TemplateLoader(get_template_dirs(self.settings.prompt_template_dir))

    def resolve_provider(self, options: RunOptions) -> LLMProvider:
        """Return the injected provider or build one from the registry."""
        if self._provider is not None:
            return self._provider
        return get_provider(
            options.provider or self.project.provider,
            model=options.model or self.project.model,
            settings=self.settings,
        )

    def target_path_for(self, document: Document) -> Path:
        """Mirror a source document's relative path under the target root.

        Raises:
            UnsafePathError: If the mirrored path leaves the target root
        """
        target_path = self.target_dir / document.relative_path
        if not target_path.resolve().is_relative_to(self.target_dir.resolve()):
            raise UnsafePathError(str(document.relative_path), "target directory")
        return target_path

    def source_document(self, relative_path: str) -> Document:
        """Build a Document for a path given relative to the source root.

        The path is resolved before use, so ``..`` parts and absolute paths
        cannot reach files outside the source root.

        Raises:
            UnsafePathError: If the path resolves outside the source root
        """
        root = self.source_dir.resolve()
        resolved = (self.source_dir / relative_path).resolve()
        if not resolved.is_relative_to(root):
            logfire.warn("Rejected path outside source directory", path=relative_path)
            raise UnsafePathError(relative_path, "source directory")
        return Document(path=self.source_dir / resolved.relative_to(root), root=self.source_dir)

    def single_document(self, relative_path: str) -> Document:
        """Validate the explicitly requested single file.

        Raises:
            UnsafePathError: If the path resolves outside the source root
            SourceFileNotFoundError: If the file does not exist
        """
        document = self.source_document(relative_path)
        if not document.path.is_file():
            raise SourceFileNotFoundError(str(document.path))
        return document

    async def run(self, options: RunOptions | None = None) -> GenerationResult:
        """Run one documentation build.

        Raises:
            UnknownProviderError: If the provider name is not registered
            ProviderUnavailableError: If the provider fails its health check
            SourceFileNotFoundError: If a requested single file does not exist
            UnsafePathError: If a requested single file lies outside the source root
        """
        options = options or RunOptions()

        if options.file and not options.retry_failed:
            self.single_document(options.file)

        provider = self.resolve_provider(options)

        if not await provider.health_check():
            logfire.error("Provider health check failed", provider=provider.name)
            raise ProviderUnavailableError(provider.name, provider.remediation_hint)

        cleared = False
        if options.clean:
            cleared = clear_failed_files(self.failed_files_path)
            if cleared:
                logfire.info("Cleared failed files history", path=str(self.failed_files_path))

        logfire.info(
            "Provider ready",
            provider=provider.name,
            model=options.model or provider.default_model,
        )
        self.console.print(f'[green]✓[/green] Provider "{provider.name}" is ready')

        mode, groups, rejected = self.select_groups(options)
        result = GenerationResult(
            mode=mode,
            provider=provider.name,
            selected=len(groups) + len(rejected),
            failed=list(rejected),
            cleared_history=cleared,
        )

        for record in rejected:
            self.console.print(f"  [red]✗ Rejected:[/red] {record.error}", highlight=False)

        if not groups:
            if rejected:
                save_failed_files(self.failed_files_path, result.failed)
                return result
            if mode == RunMode.RETRY_FAILED:
                self.console.print("[green]✓[/green] No failed files to retry.")
            else:
                self.console.print(
                    "[green]✓[/green] All files are up to date. Use --force to regenerate."
                )
            return result

        self.console.print(f"\nFile groups to generate: {len(groups)}\n")

        generate_options = GenerateOptions(
            temperature=self.settings.temperature,
            max_output_tokens=self.settings.max_output_tokens,
            model=options.model,
        )

        for group in groups:
            relative_path = group.main_file.path.as_posix()
            try:
                relative_path = group.main_file.relative_path.as_posix()
                target_path = await self.generate_group(
                    provider, group, generate_options, merge=options.merge
                )
                result.written.append(target_path)
                result.success += 1
            except Exception as e:
                logfire.error(
                    "Failed to generate document",
                    path=relative_path,
                    provider=provider.name,
                    error=str(e),
                )
                self.console.print(f"  [red]✗ Failed:[/red] {relative_path}")
                self.console.print(f"     {e}", markup=False)
                result.failed.append(FailedFileRecord(relative_path=relative_path, error=str(e)))

        save_failed_files(self.failed_files_path, result.failed)

        logfire.info(
            "Documentation generation complete",
            provider=provider.name,
            mode=str(mode),
            success=result.success,
            failed=result.failure_count,
        )
        return result

    def select_groups(
        self, options: RunOptions
    ) -> tuple[RunMode, list[FileGroup], list[FailedFileRecord]]:
        """Pick the work set for a run.

        Retry and single-file modes skip the staleness check. Full-scan mode
        keeps only groups whose main file is stale. Retry records pointing
        outside the source root are returned as rejected failures.
        """
        if options.retry_failed:
            records = load_failed_files(self.failed_files_path)
            documents: list[Document] = []
            rejected: list[FailedFileRecord] = []
            for record in records:
                try:
                    documents.append(self.source_document(record.relative_path))
                except UnsafePathError as e:
                    rejected.append(
                        FailedFileRecord(relative_path=record.relative_path, error=str(e))
                    )
            if records:
                self.console.print(f"Retrying {len(records)} failed files:")
                for record in records:
                    self.console.print(f"   - {record.relative_path}", markup=False)
            groups = self._groups_for(documents, options.merge)
            return RunMode.RETRY_FAILED, groups, rejected

        if options.file:
            document = self.single_document(options.file)
            return RunMode.SINGLE_FILE, self._groups_for([document], options.merge), []

        if not self.source_dir.is_dir():
            logfire.warn("Source directory not found", path=str(self.source_dir))

        documents = discover_documents(self.source_dir)
        all_groups = group_for_merge(documents) if options.merge else single_groups(documents)

        stale = [
            group
            for group in all_groups
            if needs_regeneration(
                group.main_file.path,
                self.target_path_for(group.main_file),
                options.force,
            )
        ]
        logfire.info(
            "Selected stale documents",
            total=len(all_groups),
            stale=len(stale),
            force=options.force,
        )
        return RunMode.FULL_SCAN, stale, []

    def _groups_for(self, documents: list[Document], merge: bool) -> list[FileGroup]:
        """Build groups for explicitly chosen documents.

        With merging enabled an explicit main file still picks up its
        companions, so it renders the same as in a full scan.
        """
        if not merge or not documents:
            return single_groups(documents)

        merged = {
            group.main_file.path: group
            for group in group_for_merge(discover_documents(self.source_dir))
        }
        return [merged.get(document.path, FileGroup.single(document)) for document in documents]

    async def generate_group(
        self,
        provider: LLMProvider,
        group: FileGroup,
        generate_options: GenerateOptions,
        merge: bool = True,
    ) -> Path:
        """Generate one group and write it to its target path."""
        if merge and group.companion_files:
            self.console.print(
                f"  Merging: {group.base_name}.md + "
                f"{len(group.companion_files)} companion(s)...",
                markup=False,
            )
            content = merge_content(group.main_file, group.companion_files)
        else:
            content = group.main_file.content

        prompt = build_prompt(
            content,
            guidelines=self.project.guidelines,
            loader=self.template_loader,
        )

        self.console.print(f"  Generating: {group.main_file.path.name}...", markup=False)
        generated = await provider.generate(prompt, generate_options)

        target_path = self.target_path_for(group.main_file)
        target_path.parent.mkdir(parents=True, exist_ok=True)
        target_path.write_text(generated, encoding="utf-8")

        logfire.info(
            "Saved generated document",
            source=group.main_file.relative_path.as_posix(),
            target=str(target_path),
            companions=len(group.companion_files),
        )
        self.console.print(f"  [green]✓[/green] Saved: {target_path}")
        return target_path
