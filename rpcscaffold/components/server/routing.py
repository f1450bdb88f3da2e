"""Routing table and typings templates for the server component.

Both files are rendered by the host at template-compile time and fully
regenerated on every run; the routing table carries a DO NOT EDIT header.
"""

from __future__ import annotations

from typing import Any

from rpcscaffold.components.types import TemplateFile
from rpcscaffold.openrpc.models import OpenRPCDocument
from rpcscaffold.typings import MethodTypings

METHOD_MAPPING_TEMPLATE = TemplateFile(
    path="src/generated-method-mapping.ts",
    template="server/typescript/generated-method-mapping.ts.j2",
)
TYPINGS_TEMPLATE = TemplateFile(
    path="src/generated-typings.ts",
    template="server/typescript/generated-typings.ts.j2",
)

TEMPLATE_FILES: dict[str, list[TemplateFile]] = {
    "typescript": [METHOD_MAPPING_TEMPLATE, TYPINGS_TEMPLATE],
}


def template_context(
    document: OpenRPCDocument, typings: MethodTypings, language: str = "typescript"
) -> dict[str, Any]:
    """Build the Jinja2 context shared by every server template."""
    return {
        "openrpc_document": document,
        "method_typings": typings,
        "language": language,
    }

