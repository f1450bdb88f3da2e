"""Generator components, looked up by ``ComponentConfig.type``."""

from __future__ import annotations

from rpcscaffold.components.server import build_server_hooks
from rpcscaffold.components.types import (
    ArtifactAction,
    ArtifactRecord,
    ComponentHooks,
    TemplateFile,
)
from rpcscaffold.config import ComponentConfig, UnmatchedSignaturePolicy
from rpcscaffold.errors import ScaffoldError

COMPONENT_TYPES: tuple[str, ...] = ("server",)


def get_component_hooks(
    component: ComponentConfig,
    policy: UnmatchedSignaturePolicy = UnmatchedSignaturePolicy.PRESERVE,
) -> ComponentHooks:
    """Return the hook set for *component*.

    Raises:
        ScaffoldError: If the component type is unknown.
    """
    if component.type == "server":
        return build_server_hooks(policy)
    raise ScaffoldError(
        f"Unknown component type {component.type!r} (available: {', '.join(COMPONENT_TYPES)})"
    )


__all__ = [
    "ArtifactAction",
    "ArtifactRecord",
    "ComponentHooks",
    "TemplateFile",
    "get_component_hooks",
]
