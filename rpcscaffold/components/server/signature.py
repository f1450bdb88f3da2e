"""Signature-line patching for existing method stubs.

A stub file has two regions: the signature line
``const <method>: <Type> = (<params>) => {`` which the generator owns, and
everything else, which belongs to the user.  ``patch_signature`` swaps the
signature line for the current one and leaves every other byte alone.

A line is the signature of method ``M`` when it contains ``const M:``
followed by ``= (...) =>``; the type name and parameter list are
wildcards.  Text before ``const`` (indentation, ``export``) is kept when the
line is rewritten.  Every matching line is replaced.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class PatchResult:
    """Outcome of patching one stub's source text."""

    text: str
    matches: int

    @property
    def matched(self) -> bool:
        return self.matches > 0


def signature_pattern(method_name: str) -> re.Pattern[str]:
    """Return the regex matching any signature line declared for *method_name*."""
    return re.compile(
        # prefix is empty or ends on a non-identifier character
        r"^(?P<prefix>(?:[^\r\n]*?[^\w$\r\n])?)"
        rf"const {re.escape(method_name)}: [^\r\n]*= \([^\r\n]*\) =>[^\r\n]*(?=\r?$)",
        re.MULTILINE,
    )


def signature_line(method_name: str, type_name: str, param_names: list[str]) -> str:
    """Build the canonical signature line for a method stub."""
    return f"const {method_name}: {type_name} = ({', '.join(param_names)}) => {{"


def patch_signature(source: str, method_name: str, new_signature: str) -> PatchResult:
    """Replace the signature line(s) of *method_name* in *source*.

    Returns the patched text and the number of replaced lines.  With zero
    matches the text is returned unchanged; deciding whether that is an
    error is left to the caller.
    """
    patched, count = signature_pattern(method_name).subn(
        lambda m: m.group("prefix") + new_signature, source
    )
    return PatchResult(text=patched, matches=count)
