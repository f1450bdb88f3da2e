"""Shared pytest fixtures for the rpcscaffold test suite.

Provides reusable fixtures for:
- Temporary output directories
- Sample OpenRPC documents (raw dicts and parsed models)
- Typings for the sample document
- A populated destination with a ``_package.json`` template
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from rpcscaffold.openrpc.models import OpenRPCDocument
from rpcscaffold.typings import MethodTypings


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Temporary destination directory for a generated server."""
    project_dir = tmp_path / "petstore-server"
    project_dir.mkdir()
    yield project_dir


# ---------------------------------------------------------------------------
# OpenRPC documents
# ---------------------------------------------------------------------------

def _sample_document() -> dict[str, Any]:
    return {
        "openrpc": "1.2.6",
        "info": {"title": "petstore", "version": "1.0.0"},
        "methods": [
            {
                "name": "addition",
                "summary": "Adds two numbers",
                "params": [
                    {"name": "a", "required": True, "schema": {"type": "integer"}},
                    {"name": "b", "required": True, "schema": {"type": "integer"}},
                ],
                "result": {"name": "sum", "schema": {"type": "integer"}},
                "examples": [
                    {
                        "name": "simpleAdd",
                        "params": [
                            {"name": "a", "value": 40},
                            {"name": "b", "value": 2},
                        ],
                        "result": {"name": "sum", "value": 42},
                    }
                ],
            },
            {
                "name": "listPets",
                "params": [
                    {"name": "limit", "schema": {"type": "integer"}},
                ],
                "result": {
                    "name": "pets",
                    "schema": {"type": "array", "items": {"type": "string"}},
                },
                "examples": [
                    {
                        "name": "twoPets",
                        "params": [{"name": "limit", "value": 2}],
                        "result": {"name": "pets", "value": ["rex", "tom"]},
                    }
                ],
            },
            {
                "name": "ping",
                "params": [],
                "result": {"name": "pong", "schema": {"type": "string"}},
            },
        ],
    }


@pytest.fixture
def sample_document_dict() -> dict[str, Any]:
    """Raw OpenRPC document with three methods: addition, listPets, ping."""
    return _sample_document()


@pytest.fixture
def sample_document(sample_document_dict: dict[str, Any]) -> OpenRPCDocument:
    """Parsed sample OpenRPC document."""
    return OpenRPCDocument.model_validate(sample_document_dict)


@pytest.fixture
def sample_typings(sample_document: OpenRPCDocument) -> MethodTypings:
    """Typings for the sample document."""
    return MethodTypings(sample_document)


@pytest.fixture
def make_document():
    """Factory building an ``OpenRPCDocument`` from a list of method dicts."""

    def _make(methods: list[dict[str, Any]], title: str = "petstore", version: str = "1.0.0"):
        return OpenRPCDocument.model_validate({
            "openrpc": "1.2.6",
            "info": {"title": title, "version": version},
            "methods": methods,
        })

    return _make


# ---------------------------------------------------------------------------
# Manifests
# ---------------------------------------------------------------------------

@pytest.fixture
def template_manifest() -> dict[str, Any]:
    """The ``_package.json`` contents rendered by the static assets."""
    return {
        "name": "template-server",
        "version": "0.0.0",
        "main": "build/index.js",
        "scripts": {"build": "tsc", "start": "node ./build/index.js"},
        "dependencies": {"@open-rpc/server-js": "^1.9.3"},
        "devDependencies": {"typescript": "^5.3.3"},
    }


@pytest.fixture
def dest_with_template(tmp_project_dir: Path, template_manifest: dict[str, Any]) -> Path:
    """Destination directory holding only a ``_package.json`` template."""
    (tmp_project_dir / "_package.json").write_text(
        json.dumps(template_manifest, indent=2), encoding="utf-8"
    )
    return tmp_project_dir
