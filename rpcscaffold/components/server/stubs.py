"""Per-method stub synthesis.

Every method in the document gets ``src/methods/<name>.ts`` holding a single
default-exported callable.  New files are created with a placeholder body
that resolves the first example result; existing files only have their
signature line refreshed (see ``signature.py``), so hand-written bodies
survive regeneration.  Stub files are never deleted.
"""

from __future__ import annotations

import json
from pathlib import Path

from rpcscaffold.components.server.signature import patch_signature, signature_line
from rpcscaffold.components.types import ArtifactAction, ArtifactRecord
from rpcscaffold.config import UnmatchedSignaturePolicy
from rpcscaffold.errors import SignatureNotFoundError
from rpcscaffold.openrpc.models import Method, OpenRPCDocument
from rpcscaffold.typings import MethodTypings
from rpcscaffold.utils import ensure_dir, path_exists, read_text, write_text

LANGUAGE = "typescript"
EXTENSION = "ts"
TYPINGS_MODULE = "../generated-typings"


def default_return_value(method: Method) -> str:
    """Return the TypeScript literal a new stub resolves with.

    Uses ``result.value`` of the first example pairing, serialised as JSON.
    No examples, or a first pairing without a result value, yields ``""``
    so the stub reads ``Promise.resolve()``.
    """
    if not method.examples:
        return ""
    result = method.examples[0].result
    if result is None or not result.has_value:
        return ""
    return json.dumps(result.value, ensure_ascii=False)


def render_new_stub(method: Method, type_name: str, signature: str) -> str:
    """Return the full source of a freshly created stub."""
    return "\n".join([
        f'import {{ {type_name} }} from "{TYPINGS_MODULE}";',
        "",
        signature,
        f"  return Promise.resolve({default_return_value(method)});",
        "};",
        "",
        f"export default {method.name};",
        "",
    ])


class StubSynthesizer:
    """Creates or patches one stub file per method.

    Methods are processed sequentially in declared order; each is read,
    patched or created, and written before the next begins.
    """

    def __init__(
        self,
        methods_dir: Path,
        typings: MethodTypings,
        policy: UnmatchedSignaturePolicy = UnmatchedSignaturePolicy.PRESERVE,
    ) -> None:
        self.methods_dir = Path(methods_dir)
        self.typings = typings
        self.policy = policy

    def stub_path(self, method: Method) -> Path:
        return self.methods_dir / f"{method.name}.{EXTENSION}"

    async def synthesize(self, document: OpenRPCDocument) -> list[ArtifactRecord]:
        """Ensure a current stub exists for every method of *document*.

        Raises:
            MalformedInterfaceDescriptionError: If a method cannot be typed;
                every method is checked before the first stub is written.
            SignatureNotFoundError: Under the ``error`` policy, when an
                existing stub has no recognisable signature line.
            GenerationIOError: On any filesystem failure.
        """
        self.typings.check(LANGUAGE)
        await ensure_dir(self.methods_dir)
        records: list[ArtifactRecord] = []
        for method in document.methods:
            records.append(await self.synthesize_method(method))
        return records

    async def synthesize_method(self, method: Method) -> ArtifactRecord:
        type_name = self.typings.get_typing_names(LANGUAGE, method).method
        signature = signature_line(method.name, type_name, [p.name for p in method.params])
        path = self.stub_path(method)

        if not await path_exists(path):
            await write_text(path, render_new_stub(method, type_name, signature))
            return ArtifactRecord(path, ArtifactAction.CREATED, method.name)

        existing = await read_text(path)
        result = patch_signature(existing, method.name, signature)

        if not result.matched:
            if self.policy is UnmatchedSignaturePolicy.ERROR:
                raise SignatureNotFoundError(path, method.name)
            return ArtifactRecord(path, ArtifactAction.PRESERVED, method.name)

        if result.text == existing:
            return ArtifactRecord(path, ArtifactAction.UNCHANGED, method.name)

        await write_text(path, result.text)
        return ArtifactRecord(path, ArtifactAction.PATCHED, method.name)
