"""The TypeScript server component.

Generates an ``@open-rpc/server-js`` project and keeps it in sync with the
OpenRPC document across regenerations:

- ``after_copy_static``: merge ``_package.json`` into ``package.json``
- templates: ``src/generated-method-mapping.ts``, ``src/generated-typings.ts``
- ``after_compile_template``: create/patch ``src/methods/<name>.ts`` stubs
  and rewrite ``src/methods/index.ts``

Quick usage::

    from rpcscaffold.components.server import build_server_hooks

    hooks = build_server_hooks(UnmatchedSignaturePolicy.ERROR)
"""

from __future__ import annotations

from pathlib import Path

from rpcscaffold.components.server.aggregator import write_methods_index
from rpcscaffold.components.server.manifest import merge_manifest
from rpcscaffold.components.server.routing import TEMPLATE_FILES
from rpcscaffold.components.server.stubs import StubSynthesizer
from rpcscaffold.components.types import ArtifactRecord, ComponentHooks
from rpcscaffold.config import ComponentConfig, UnmatchedSignaturePolicy
from rpcscaffold.errors import UnsupportedFlavorError
from rpcscaffold.openrpc.models import OpenRPCDocument
from rpcscaffold.typings import MethodTypings

SUPPORTED_LANGUAGES: tuple[str, ...] = ("typescript",)


def only_handle_typescript(component: ComponentConfig) -> None:
    """Reject any output flavor other than TypeScript before touching disk."""
    if component.language not in SUPPORTED_LANGUAGES:
        raise UnsupportedFlavorError(component.language, SUPPORTED_LANGUAGES)


def build_server_hooks(
    policy: UnmatchedSignaturePolicy = UnmatchedSignaturePolicy.PRESERVE,
) -> ComponentHooks:
    """Return the server component's hooks, using *policy* for unmatched stubs."""

    async def after_copy_static(
        dest: Path,
        static_dir: Path,
        component: ComponentConfig,
        document: OpenRPCDocument,
    ) -> list[ArtifactRecord]:
        only_handle_typescript(component)
        return await merge_manifest(dest, component, document)

    async def after_compile_template(
        dest: Path,
        static_dir: Path,
        component: ComponentConfig,
        document: OpenRPCDocument,
        typings: MethodTypings,
    ) -> list[ArtifactRecord]:
        only_handle_typescript(component)
        methods_dir = dest / "src" / "methods"
        synthesizer = StubSynthesizer(methods_dir, typings, policy)
        records = await synthesizer.synthesize(document)
        records.append(await write_methods_index(methods_dir, document))
        return records

    return ComponentHooks(
        after_copy_static=[after_copy_static],
        after_compile_template=[after_compile_template],
        template_files=TEMPLATE_FILES,
        static_files={"typescript": "server/typescript"},
    )


__all__ = [
    "SUPPORTED_LANGUAGES",
    "build_server_hooks",
    "only_handle_typescript",
]
