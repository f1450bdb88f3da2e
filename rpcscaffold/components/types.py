"""Shared types for generator components.

A component contributes async hooks run at two lifecycle points of a
generation run, plus the templates rendered between them:

1. static assets copied          -> ``after_copy_static``
2. ``template_files`` rendered   -> ``after_compile_template``

Every hook returns the ``ArtifactRecord``s describing what it did, which the
host folds into its report.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Awaitable, Callable

from rpcscaffold.config import ComponentConfig
from rpcscaffold.openrpc.models import OpenRPCDocument
from rpcscaffold.typings import MethodTypings


class ArtifactAction(str, Enum):
    """What happened to a generated artifact."""
    CREATED = "created"
    PATCHED = "patched"
    UNCHANGED = "unchanged"
    PRESERVED = "preserved"
    MERGED = "merged"
    WRITTEN = "written"
    COPIED = "copied"
    REMOVED = "removed"


@dataclass(frozen=True)
class ArtifactRecord:
    """A single file touched (or deliberately left alone) during generation."""

    path: Path
    action: ArtifactAction
    method: str | None = None


@dataclass(frozen=True)
class TemplateFile:
    """A template rendered to *path* (relative to the destination root)."""

    path: str
    template: str


AfterCopyStaticHook = Callable[
    [Path, Path, ComponentConfig, OpenRPCDocument], Awaitable[list[ArtifactRecord]]
]
AfterCompileTemplateHook = Callable[
    [Path, Path, ComponentConfig, OpenRPCDocument, MethodTypings],
    Awaitable[list[ArtifactRecord]],
]


@dataclass
class ComponentHooks:
    """The hook set and templates contributed by one component type."""

    after_copy_static: list[AfterCopyStaticHook] = field(default_factory=list)
    after_compile_template: list[AfterCompileTemplateHook] = field(default_factory=list)
    template_files: dict[str, list[TemplateFile]] = field(default_factory=dict)
    static_files: dict[str, str] = field(default_factory=dict)
