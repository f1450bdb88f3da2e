"""Exception hierarchy for rpcscaffold.

Every failure that aborts a generation run derives from ``ScaffoldError`` so
that the CLI (and any embedding pipeline) can catch a single type.  A prior
``package.json`` that cannot be parsed is deliberately *not* represented
here: the manifest merger treats it exactly like a missing file.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every fatal generation error."""


class UnsupportedFlavorError(ScaffoldError):
    """Raised when a component is asked to generate for a language it cannot handle."""

    def __init__(self, language: str, supported: tuple[str, ...] = ("typescript",)) -> None:
        self.language = language
        self.supported = supported
        super().__init__(
            f"Cannot handle language {language!r} for server generator "
            f"(supported: {', '.join(supported)})"
        )


class GenerationIOError(ScaffoldError):
    """Raised when reading, writing or deleting an artifact fails."""

    def __init__(self, path: str | Path, operation: str, reason: str = "") -> None:
        self.path = Path(path)
        self.operation = operation
        self.reason = reason
        message = f"Failed to {operation} {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MalformedInterfaceDescriptionError(ScaffoldError):
    """Raised when the interface description cannot drive generation."""

    def __init__(self, message: str, method: str | None = None) -> None:
        self.method = method
        if method is not None:
            message = f"Method {method!r}: {message}"
        super().__init__(message)


class ManifestTemplateError(ScaffoldError):
    """Raised when the rendered ``_package.json`` template is not a JSON object."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Invalid manifest template {self.path}: {reason}")


class SignatureNotFoundError(ScaffoldError):
    """Raised under the ``error`` policy when a stub's signature line is missing.

    The stub file is left untouched; the error names the file and method so
    the user can restore the ``const <method>: <Type> = (...) => {`` line or
    delete the stub to have it recreated.
    """

    def __init__(self, path: str | Path, method: str) -> None:
        self.path = Path(path)
        self.method = method
        super().__init__(
            f"No signature line for method {method!r} found in {self.path}; "
            "restore the 'const <method>: <Type> = (...) => {' line or remove the file"
        )
