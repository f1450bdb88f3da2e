"""Load OpenRPC documents from dicts, local files, or URLs.

Local files may be JSON or YAML.  Remote documents are fetched with
``httpx``.  Every failure surfaces as ``MalformedInterfaceDescriptionError``
so callers only need to handle one type.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

import httpx
import yaml
from pydantic import ValidationError

from rpcscaffold.errors import MalformedInterfaceDescriptionError
from rpcscaffold.openrpc.models import OpenRPCDocument

DEFAULT_FETCH_TIMEOUT = 30.0


class _DocumentLoader(yaml.SafeLoader):
    """``SafeLoader`` that keeps YAML timestamps as plain strings.

    OpenRPC documents are JSON data; an unquoted ``2024-01-01`` must stay the
    string it would be in JSON so it can be written back out.
    """


_DocumentLoader.add_constructor(
    "tag:yaml.org,2002:timestamp", _DocumentLoader.construct_yaml_str
)


async def load_document(
    source: OpenRPCDocument | dict[str, Any] | str | Path,
    *,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
) -> OpenRPCDocument:
    """Return a validated ``OpenRPCDocument`` from *source*.

    Args:
        source: An already-built document, a raw dict, a filesystem path, or
            an ``http(s)://`` URL.
        timeout: Seconds allowed for a remote fetch.

    Raises:
        MalformedInterfaceDescriptionError: If the source cannot be read,
            fetched or parsed into the model.
    """
    if isinstance(source, OpenRPCDocument):
        return source
    if isinstance(source, dict):
        return _validate(source, "<dict>")

    text = str(source)
    if text.startswith(("http://", "https://")):
        raw = await _fetch(text, timeout)
        return _validate(_parse(raw, text), text)

    path = Path(source)
    try:
        raw = await asyncio.to_thread(path.read_text, encoding="utf-8")
    except OSError as exc:
        raise MalformedInterfaceDescriptionError(
            f"Cannot read OpenRPC document {path}: {exc.strerror or exc}"
        ) from exc
    except UnicodeDecodeError as exc:
        raise MalformedInterfaceDescriptionError(
            f"Cannot read OpenRPC document {path}: not valid UTF-8"
        ) from exc
    return _validate(_parse(raw, str(path)), str(path))


async def _fetch(url: str, timeout: float) -> str:
    try:
        async with httpx.AsyncClient(timeout=httpx.Timeout(timeout, connect=10.0)) as client:
            response = await client.get(url)
            response.raise_for_status()
            return response.text
    except httpx.HTTPStatusError as exc:
        raise MalformedInterfaceDescriptionError(
            f"Fetching {url} returned HTTP {exc.response.status_code}"
        ) from exc
    except httpx.HTTPError as exc:
        raise MalformedInterfaceDescriptionError(f"Cannot fetch {url}: {exc}") from exc


def _parse(raw: str, origin: str) -> Any:
    """Parse JSON, falling back to YAML (a superset) for ``.yaml``/``.yml`` and URLs."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError as json_exc:
        if origin.endswith(".json"):
            raise MalformedInterfaceDescriptionError(
                f"{origin} is not valid JSON: {json_exc}"
            ) from json_exc
    try:
        return yaml.load(raw, Loader=_DocumentLoader)
    except yaml.YAMLError as exc:
        raise MalformedInterfaceDescriptionError(f"{origin} is not valid JSON or YAML: {exc}") from exc


def _validate(data: Any, origin: str) -> OpenRPCDocument:
    if not isinstance(data, dict):
        raise MalformedInterfaceDescriptionError(f"{origin} does not contain an OpenRPC object")
    try:
        return OpenRPCDocument.model_validate(data)
    except ValidationError as exc:
        raise MalformedInterfaceDescriptionError(
            f"{origin} is not a usable OpenRPC document: {exc.error_count()} error(s)\n{exc}"
        ) from exc
