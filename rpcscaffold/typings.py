"""TypeScript typings for OpenRPC methods.

``MethodTypings`` names the callable type of every method (used by the stub
signatures) and renders ``src/generated-typings.ts``.  JSON-schema coverage
is intentionally shallow: primitives, arrays, inline objects, enums and
unions map to TypeScript; anything else (notably ``$ref``) becomes ``any``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from rpcscaffold.errors import MalformedInterfaceDescriptionError, UnsupportedFlavorError
from rpcscaffold.openrpc.models import Method, OpenRPCDocument
from rpcscaffold.utils import is_identifier, to_pascal

SUPPORTED_LANGUAGES: tuple[str, ...] = ("typescript",)

# Stub module names taken by generated files in src/methods/.
RESERVED_METHOD_NAMES = frozenset({"index"})

_PRIMITIVES: dict[str, str] = {
    "string": "string",
    "integer": "number",
    "number": "number",
    "boolean": "boolean",
    "null": "null",
}


@dataclass(frozen=True)
class TypingNames:
    """Exported type names generated for one method."""

    method: str
    params: str
    result: str


class MethodTypings:
    """Typings for every method in an OpenRPC document."""

    def __init__(self, document: OpenRPCDocument) -> None:
        self.document = document

    def get_typing_names(self, language: str, method: Method) -> TypingNames:
        """Return the exported type names for *method*.

        Raises:
            UnsupportedFlavorError: If *language* is not ``typescript``.
            MalformedInterfaceDescriptionError: If the method name cannot be
                used as an identifier in generated code, or is reserved.
        """
        _check_language(language)
        if not is_identifier(method.name):
            raise MalformedInterfaceDescriptionError(
                "name is not a valid identifier, cannot derive a type name", method=method.name
            )
        if method.name in RESERVED_METHOD_NAMES:
            raise MalformedInterfaceDescriptionError(
                "name is reserved for the generated methods index module", method=method.name
            )
        base = to_pascal(method.name)
        if not base:
            raise MalformedInterfaceDescriptionError(
                "cannot derive a type name", method=method.name
            )
        return TypingNames(method=base, params=f"{base}Params", result=f"{base}Result")

    def check(self, language: str = "typescript") -> list[TypingNames]:
        """Derive type names for every method, in declared order.

        Raises:
            MalformedInterfaceDescriptionError: If a method cannot be typed,
                is declared twice, or maps to a type name another method
                already uses (``get_balance`` and ``getBalance``).
        """
        seen: dict[str, str] = {}
        names: list[TypingNames] = []
        for method in self.document.methods:
            typing = self.get_typing_names(language, method)
            if typing.method in seen:
                other = seen[typing.method]
                if other == method.name:
                    reason = "method is declared more than once"
                else:
                    reason = f"type name {typing.method} is already used by method '{other}'"
                raise MalformedInterfaceDescriptionError(reason, method=method.name)
            seen[typing.method] = method.name
            names.append(typing)
        return names

    def to_string(self, language: str = "typescript") -> str:
        """Render all method typings as a single source file."""
        self.check(language)
        blocks: list[str] = []
        for method in self.document.methods:
            blocks.append(self._method_block(method))
        return "\n".join(blocks)

    def __str__(self) -> str:
        return self.to_string()

    # -- Rendering ---------------------------------------------------------

    def _method_block(self, method: Method) -> str:
        names = self.get_typing_names("typescript", method)
        param_fields = [
            f"{p.name}{'?' if optional else ''}: {schema_to_ts(p.json_schema)}"
            for p, optional in zip(method.params, _optional_flags(method))
        ]
        result_type = schema_to_ts(method.result.json_schema) if method.result else "void"

        lines: list[str] = []
        doc = method.summary or method.description
        if doc:
            lines.extend(["/**", *(f" * {line}".rstrip() for line in doc.splitlines()), " */"])
        lines.append(f"export type {names.params} = [{', '.join(param_fields)}];")
        lines.append(f"export type {names.result} = {result_type};")
        lines.append(
            f"export type {names.method} = ({', '.join(param_fields)}) => Promise<{names.result}>;"
        )
        lines.append("")
        return "\n".join(lines)


def schema_to_ts(schema: Any) -> str:
    """Map a JSON schema fragment to a TypeScript type expression."""
    if not isinstance(schema, dict) or not schema:
        return "any"

    if "enum" in schema and isinstance(schema["enum"], list) and schema["enum"]:
        return " | ".join(json.dumps(v) for v in schema["enum"])

    for key in ("oneOf", "anyOf"):
        variants = schema.get(key)
        if isinstance(variants, list) and variants:
            return " | ".join(_wrap(schema_to_ts(v)) for v in variants)

    schema_type = schema.get("type")
    if isinstance(schema_type, list):
        return " | ".join(_wrap(schema_to_ts({**schema, "type": t})) for t in schema_type)

    if schema_type in _PRIMITIVES:
        return _PRIMITIVES[schema_type]

    if schema_type == "array":
        items = schema.get("items")
        if isinstance(items, list):
            return "[" + ", ".join(schema_to_ts(i) for i in items) + "]"
        return f"{_wrap(schema_to_ts(items))}[]"

    if schema_type == "object":
        properties = schema.get("properties")
        if not isinstance(properties, dict) or not properties:
            return "Record<string, any>"
        required = set(schema.get("required", []))
        fields = [
            f"{name}{'' if name in required else '?'}: {schema_to_ts(sub)}"
            for name, sub in properties.items()
        ]
        return "{ " + "; ".join(fields) + " }"

    return "any"


def _optional_flags(method: Method) -> list[bool]:
    """Mark a param optional only when it and every later param are optional.

    TypeScript rejects a required parameter after an optional one.
    """
    flags: list[bool] = []
    trailing = True
    for param in reversed(method.params):
        trailing = trailing and not param.required
        flags.append(trailing)
    return flags[::-1]


def _wrap(ts_type: str) -> str:
    """Parenthesise union types so they compose inside arrays and unions."""
    return f"({ts_type})" if " | " in ts_type else ts_type


def _check_language(language: str) -> None:
    if language not in SUPPORTED_LANGUAGES:
        raise UnsupportedFlavorError(language, SUPPORTED_LANGUAGES)
