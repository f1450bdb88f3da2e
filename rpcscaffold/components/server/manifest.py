"""Manifest merging for generated servers.

The static assets ship a ``_package.json`` template.  After they are copied
into the destination, ``merge_manifest`` stamps the component name and the
document version onto it, folds in any ``package.json`` already present
(keeping user-added keys, scripts and dependencies), writes the result and
deletes the template.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rpcscaffold.components.types import ArtifactAction, ArtifactRecord
from rpcscaffold.config import ComponentConfig
from rpcscaffold.errors import GenerationIOError, ManifestTemplateError
from rpcscaffold.openrpc.models import OpenRPCDocument
from rpcscaffold.utils import dump_json, path_exists, read_text, remove_file, write_text

MANIFEST_NAME = "package.json"
TEMPLATE_MANIFEST_NAME = "_package.json"

# Keys merged entry-by-entry; every other top-level key is replaced whole.
NESTED_MERGE_KEYS: tuple[str, ...] = ("scripts", "dependencies", "devDependencies")


def merge_manifests(current: dict[str, Any], rendered: dict[str, Any]) -> dict[str, Any]:
    """Combine an existing manifest with a freshly rendered one.

    Top-level keys from *rendered* win over *current*; keys only present in
    *current* are kept in place.  For ``NESTED_MERGE_KEYS`` the two mappings
    are merged with *rendered* entries winning.  A nested key is emitted only
    when at least one side declares it.
    """
    merged = {**current, **rendered}
    for key in NESTED_MERGE_KEYS:
        if key not in current and key not in rendered:
            continue
        merged[key] = {**_as_mapping(current.get(key)), **_as_mapping(rendered.get(key))}
    return merged


async def read_prior_manifest(path: Path) -> dict[str, Any] | None:
    """Return the parsed manifest at *path*, or ``None`` if absent or malformed.

    Unreadable, unparsable or non-object content is treated exactly like a
    missing file.
    """
    if not await path_exists(path):
        return None
    try:
        data = json.loads(await read_text(path))
    except (GenerationIOError, ValueError):
        return None
    return data if isinstance(data, dict) else None


async def merge_manifest(
    dest: Path, component: ComponentConfig, document: OpenRPCDocument
) -> list[ArtifactRecord]:
    """Produce ``<dest>/package.json`` from the template and any prior manifest.

    Raises:
        GenerationIOError: If the template cannot be read, the manifest
            cannot be written, or the template cannot be removed.
        ManifestTemplateError: If the template is not a JSON object.
    """
    manifest_path = dest / MANIFEST_NAME
    template_path = dest / TEMPLATE_MANIFEST_NAME

    raw_template = await read_text(template_path)
    try:
        rendered = json.loads(raw_template)
    except ValueError as exc:
        raise ManifestTemplateError(template_path, str(exc)) from exc
    if not isinstance(rendered, dict):
        raise ManifestTemplateError(template_path, "expected a JSON object")

    rendered["name"] = component.name or document.info.title
    rendered["version"] = document.info.version

    prior = await read_prior_manifest(manifest_path)
    manifest = rendered if prior is None else merge_manifests(prior, rendered)

    await write_text(manifest_path, dump_json(manifest))
    await remove_file(template_path)

    action = ArtifactAction.WRITTEN if prior is None else ArtifactAction.MERGED
    return [
        ArtifactRecord(manifest_path, action),
        ArtifactRecord(template_path, ArtifactAction.REMOVED),
    ]


def _as_mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}
