"""The ``src/methods/index.ts`` aggregator.

Imports every stub's default export and re-exports them as one mapping,
keyed by method name, in the document's declared order.  The file is
rewritten from scratch on every run.
"""

from __future__ import annotations

from pathlib import Path

from rpcscaffold.components.types import ArtifactAction, ArtifactRecord
from rpcscaffold.openrpc.models import OpenRPCDocument
from rpcscaffold.utils import write_text

INDEX_NAME = "index.ts"


def render_methods_index(document: OpenRPCDocument) -> str:
    names = document.method_names()
    lines = [f'import {name} from "./{name}";' for name in names]
    lines.append("")
    lines.append("const methods = {")
    lines.extend(f"  {name}," for name in names)
    lines.append("};")
    lines.append("")
    lines.append("export default methods;")
    lines.append("")
    return "\n".join(lines)


async def write_methods_index(methods_dir: Path, document: OpenRPCDocument) -> ArtifactRecord:
    path = await write_text(Path(methods_dir) / INDEX_NAME, render_methods_index(document))
    return ArtifactRecord(path, ArtifactAction.WRITTEN)
