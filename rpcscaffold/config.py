"""rpcscaffold configuration.

Typed configuration for a generation run.  All settings use Pydantic v2
models so they can be validated at construction time and serialised to/from
JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field


class UnmatchedSignaturePolicy(str, Enum):
    """What to do when an existing stub has no recognisable signature line.

    PRESERVE leaves the file untouched and reports it; ERROR aborts the run.
    """
    PRESERVE = "preserve"
    ERROR = "error"


class ComponentConfig(BaseModel):
    """The component being generated."""

    type: str = Field(default="server", description="Component type, selects the hook set")
    name: Optional[str] = Field(
        default=None, description="Package name; defaults to the document's info.title"
    )
    language: str = Field(default="typescript", description="Output flavor")


class GeneratorConfig(BaseModel):
    """Configuration for one generation run.

    Instances are typically created by the CLI entry point (or
    ``from_env``) and handed to ``ServerGenerator``.
    """

    output_dir: Path = Field(default=Path("./generated-server"))
    component: ComponentConfig = Field(default_factory=ComponentConfig)
    unmatched_signature: UnmatchedSignaturePolicy = Field(
        default=UnmatchedSignaturePolicy.PRESERVE,
        description="Behaviour when a stub's signature line cannot be located",
    )
    template_dir: Optional[Path] = Field(
        default=None, description="Override for the Jinja2 template root"
    )
    static_dir: Optional[Path] = Field(
        default=None, description="Override for the static asset root"
    )

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return *path*."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return path

    @classmethod
    def load(cls, path: Path) -> "GeneratorConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            RPCSCAFFOLD_OUTPUT_DIR, RPCSCAFFOLD_COMPONENT_NAME,
            RPCSCAFFOLD_LANGUAGE, RPCSCAFFOLD_UNMATCHED_SIGNATURE.
        """
        component_kwargs: dict[str, Any] = {}
        if os.environ.get("RPCSCAFFOLD_COMPONENT_NAME"):
            component_kwargs["name"] = os.environ["RPCSCAFFOLD_COMPONENT_NAME"]
        if os.environ.get("RPCSCAFFOLD_LANGUAGE"):
            component_kwargs["language"] = os.environ["RPCSCAFFOLD_LANGUAGE"]

        return cls(
            output_dir=Path(os.environ.get("RPCSCAFFOLD_OUTPUT_DIR", "./generated-server")),
            component=ComponentConfig(**component_kwargs),
            unmatched_signature=UnmatchedSignaturePolicy(
                os.environ.get("RPCSCAFFOLD_UNMATCHED_SIGNATURE", "preserve")
            ),
        )
