"""Generation host.

Drives one component through the generation lifecycle:

1. Reject unsupported flavors before anything is written.
2. Copy static assets (existing files are kept; ``_package.json`` is always
   refreshed).
3. Run ``after_copy_static`` hooks (manifest merge).
4. Render the component's templates plus ``src/openrpc.json``.
5. Run ``after_compile_template`` hooks (stubs and aggregator).

Every step runs sequentially and any ``ScaffoldError`` aborts the run; files
already written stay on disk.

Usage::

    python -m rpcscaffold openrpc.json --output ./my-server
    python -m rpcscaffold https://example.com/openrpc.json --name my-server
"""

from __future__ import annotations

import asyncio
import sys
from dataclasses import dataclass, field
from pathlib import Path

from rpcscaffold.components import get_component_hooks
from rpcscaffold.components.server.manifest import TEMPLATE_MANIFEST_NAME
from rpcscaffold.components.server.routing import template_context
from rpcscaffold.components.types import ArtifactAction, ArtifactRecord, ComponentHooks
from rpcscaffold.config import ComponentConfig, GeneratorConfig, UnmatchedSignaturePolicy
from rpcscaffold.errors import ScaffoldError, UnsupportedFlavorError
from rpcscaffold.openrpc import OpenRPCDocument, load_document
from rpcscaffold.templates import TemplateRenderer
from rpcscaffold.typings import MethodTypings
from rpcscaffold.utils import (
    console,
    copy_tree,
    dump_json,
    ensure_dir,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    write_text,
)

DEFAULT_STATIC_DIR = Path(__file__).parent / "static"
DOCUMENT_PATH = "src/openrpc.json"


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------


@dataclass
class GenerationReport:
    """Everything a generation run touched, in order."""

    output_dir: Path
    artifacts: list[ArtifactRecord] = field(default_factory=list)

    def by_action(self, action: ArtifactAction) -> list[ArtifactRecord]:
        return [a for a in self.artifacts if a.action is action]

    @property
    def preserved(self) -> list[ArtifactRecord]:
        """Stubs left untouched because their signature line was not found."""
        return self.by_action(ArtifactAction.PRESERVED)

    def rows(self) -> list[tuple[str, str]]:
        rows: list[tuple[str, str]] = []
        for record in self.artifacts:
            try:
                label = record.path.relative_to(self.output_dir).as_posix()
            except ValueError:
                label = str(record.path)
            rows.append((label, record.action.value))
        return rows


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ServerGenerator:
    """Runs a component's hooks and templates against an output directory."""

    def __init__(
        self,
        config: GeneratorConfig,
        document: OpenRPCDocument,
        hooks: ComponentHooks | None = None,
    ) -> None:
        self.config = config
        self.document = document
        self.hooks = hooks or get_component_hooks(config.component, config.unmatched_signature)
        self.renderer = TemplateRenderer(config.template_dir)
        self.static_root = Path(config.static_dir or DEFAULT_STATIC_DIR)

    async def generate(self) -> GenerationReport:
        """Generate (or regenerate) the project in ``config.output_dir``.

        Raises:
            UnsupportedFlavorError: If the component has no templates for
                the configured language; raised before any file is written.
            MalformedInterfaceDescriptionError: If a method name cannot be
                typed or collides with another; also raised before any write.
            ScaffoldError: Any other fatal generation error.
        """
        component = self.config.component
        language = component.language
        if language not in self.hooks.template_files:
            raise UnsupportedFlavorError(language, tuple(self.hooks.template_files))
        typings = MethodTypings(self.document)
        typings.check(language)

        dest = self.config.output_dir
        report = GenerationReport(output_dir=dest)
        await ensure_dir(dest)

        # 1. Static assets
        static_dir = self.static_root / self.hooks.static_files.get(language, language)
        if static_dir.is_dir():
            copied = await copy_tree(static_dir, dest, overwrite={TEMPLATE_MANIFEST_NAME})
            report.artifacts.extend(ArtifactRecord(p, ArtifactAction.COPIED) for p in copied)

        for hook in self.hooks.after_copy_static:
            report.artifacts.extend(await hook(dest, static_dir, component, self.document))

        # 2. Templates
        context = template_context(self.document, typings, language)
        for template_file in self.hooks.template_files[language]:
            path = await self.renderer.render_to_file(
                template_file.template, dest / template_file.path, context
            )
            report.artifacts.append(ArtifactRecord(path, ArtifactAction.WRITTEN))

        document_path = await write_text(
            dest / DOCUMENT_PATH,
            dump_json(self.document.model_dump(by_alias=True, exclude_unset=True)) + "\n",
        )
        report.artifacts.append(ArtifactRecord(document_path, ArtifactAction.WRITTEN))

        # 3. Per-method sources
        for hook in self.hooks.after_compile_template:
            report.artifacts.extend(
                await hook(dest, static_dir, component, self.document, typings)
            )

        return report


async def generate_server(
    source: OpenRPCDocument | dict | str | Path,
    config: GeneratorConfig,
) -> GenerationReport:
    """Load *source* and run ``ServerGenerator`` with *config*."""
    document = await load_document(source)
    return await ServerGenerator(config, document).generate()


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``python -m rpcscaffold``."""
    import argparse

    parser = argparse.ArgumentParser(
        description="rpcscaffold -- generate and update an OpenRPC server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m rpcscaffold openrpc.json\n"
            "  python -m rpcscaffold openrpc.yaml -o ./my-server --name my-server\n"
            "  python -m rpcscaffold openrpc.json --on-unmatched error\n"
            "  python -m rpcscaffold openrpc.json --config rpcscaffold.json\n"
        ),
    )
    parser.add_argument("document", help="Path or URL of the OpenRPC document")
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output directory (default: $RPCSCAFFOLD_OUTPUT_DIR or ./generated-server)",
    )
    parser.add_argument(
        "--name",
        default=None,
        help="Package name (default: the document's info.title)",
    )
    parser.add_argument(
        "--language",
        default=None,
        help="Output flavor (default: typescript)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Saved configuration file; loaded when present and rewritten after a successful run",
    )
    parser.add_argument(
        "--on-unmatched",
        choices=[p.value for p in UnmatchedSignaturePolicy],
        default=None,
        help="What to do when an existing stub has no recognisable signature line",
    )

    args = parser.parse_args(argv)

    config_path = Path(args.config) if args.config else None
    try:
        if config_path is not None and config_path.is_file():
            config = GeneratorConfig.load(config_path)
        else:
            config = GeneratorConfig.from_env()
    except ValueError as exc:
        print_error(f"Error: invalid configuration: {exc}")
        sys.exit(1)

    if args.output:
        config.output_dir = Path(args.output)
    if args.name or args.language:
        config.component = ComponentConfig(
            type=config.component.type,
            name=args.name or config.component.name,
            language=args.language or config.component.language,
        )
    if args.on_unmatched:
        config.unmatched_signature = UnmatchedSignaturePolicy(args.on_unmatched)

    try:
        report = asyncio.run(generate_server(args.document, config))
    except ScaffoldError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    if config_path is not None:
        config.save(config_path)

    print_summary_table(report.rows(), title=f"Generated {config.output_dir}")
    for record in report.preserved:
        print_warning(
            f"Left {record.path} untouched: no signature line for {record.method!r} found"
        )
    print_success(f"Server generated in {config.output_dir}")
    console.print()


if __name__ == "__main__":
    main()
