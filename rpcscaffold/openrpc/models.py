"""Pydantic v2 models for OpenRPC interface descriptions.

Only the subset of the OpenRPC meta-schema that drives server scaffolding is
modelled.  Unknown keys are kept (``extra="allow"``) so documents using the
full specification still load.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Examples
# ---------------------------------------------------------------------------

class Example(BaseModel):
    """A single named example value."""
    model_config = ConfigDict(extra="allow")

    name: str = Field(default="", description="Example name")
    summary: str = Field(default="", description="Short description")
    value: Any = Field(default=None, description="Embedded literal example value")

    @property
    def has_value(self) -> bool:
        """Whether ``value`` was declared in the document (``null`` counts)."""
        return "value" in self.model_fields_set


class ExamplePairing(BaseModel):
    """A request/response pairing: example params and the matching result."""
    model_config = ConfigDict(extra="allow")

    name: str = Field(default="", description="Pairing name")
    description: str = Field(default="", description="What this pairing demonstrates")
    params: list[Example] = Field(default_factory=list, description="Example request params")
    result: Optional[Example] = Field(default=None, description="Example result")


# ---------------------------------------------------------------------------
# Content descriptors & methods
# ---------------------------------------------------------------------------

class ContentDescriptor(BaseModel):
    """A named, schema-typed value (a method param or result)."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str = Field(..., description="Param/result name, used as an identifier")
    summary: str = Field(default="", description="Short description")
    description: str = Field(default="", description="Long description")
    required: bool = Field(default=False, description="Whether the param must be supplied")
    json_schema: dict[str, Any] = Field(
        default_factory=dict, alias="schema", description="JSON schema of the value"
    )


class Method(BaseModel):
    """A single RPC method."""
    model_config = ConfigDict(extra="allow")

    name: str = Field(..., description="Method name, unique within the document")
    summary: str = Field(default="", description="Short description")
    description: str = Field(default="", description="Long description")
    params: list[ContentDescriptor] = Field(
        default_factory=list, description="Ordered parameter list"
    )
    result: Optional[ContentDescriptor] = Field(default=None, description="Result descriptor")
    examples: Optional[list[ExamplePairing]] = Field(
        default=None, description="Example pairings; only the first result is used for stubs"
    )


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

class Info(BaseModel):
    """Document metadata."""
    model_config = ConfigDict(extra="allow")

    title: str = Field(..., description="API title, default package name")
    version: str = Field(..., description="API version, copied into package.json")
    description: str = Field(default="", description="API description")


class OpenRPCDocument(BaseModel):
    """The RPC contract driving generation."""
    model_config = ConfigDict(extra="allow")

    openrpc: str = Field(default="1.2.6", description="OpenRPC specification version")
    info: Info
    methods: list[Method] = Field(default_factory=list, description="Declared methods, in order")

    def method_names(self) -> list[str]:
        """Return method names in declared order."""
        return [m.name for m in self.methods]
