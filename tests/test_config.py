"""Unit tests for GeneratorConfig and related models (rpcscaffold.config).

Tests cover:
- ComponentConfig defaults
- GeneratorConfig defaults
- save/load round trip
- from_env
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from rpcscaffold.config import ComponentConfig, GeneratorConfig, UnmatchedSignaturePolicy


class TestComponentConfig:
    @pytest.mark.unit
    def test_defaults(self):
        component = ComponentConfig()
        assert component.type == "server"
        assert component.name is None
        assert component.language == "typescript"


class TestGeneratorConfig:
    @pytest.mark.unit
    def test_defaults(self):
        config = GeneratorConfig()
        assert config.output_dir == Path("./generated-server")
        assert config.unmatched_signature is UnmatchedSignaturePolicy.PRESERVE
        assert config.template_dir is None
        assert config.static_dir is None

    @pytest.mark.unit
    def test_policy_from_string(self):
        config = GeneratorConfig(unmatched_signature="error")
        assert config.unmatched_signature is UnmatchedSignaturePolicy.ERROR

    @pytest.mark.unit
    def test_invalid_policy_rejected(self):
        with pytest.raises(ValidationError):
            GeneratorConfig(unmatched_signature="ignore")

    @pytest.mark.unit
    def test_save_and_load(self, tmp_path):
        config = GeneratorConfig(
            output_dir=tmp_path / "out",
            component=ComponentConfig(name="my-server"),
            unmatched_signature=UnmatchedSignaturePolicy.ERROR,
        )
        path = config.save(tmp_path / "cfg" / "rpcscaffold.json")
        assert path.exists()

        loaded = GeneratorConfig.load(path)
        assert loaded == config


class TestFromEnv:
    @pytest.mark.unit
    def test_defaults_without_env(self):
        with patch.dict("os.environ", {}, clear=True):
            config = GeneratorConfig.from_env()
        assert config.output_dir == Path("./generated-server")
        assert config.component.name is None
        assert config.unmatched_signature is UnmatchedSignaturePolicy.PRESERVE

    @pytest.mark.unit
    def test_reads_variables(self):
        env = {
            "RPCSCAFFOLD_OUTPUT_DIR": "/tmp/server",
            "RPCSCAFFOLD_COMPONENT_NAME": "pets",
            "RPCSCAFFOLD_LANGUAGE": "typescript",
            "RPCSCAFFOLD_UNMATCHED_SIGNATURE": "error",
        }
        with patch.dict("os.environ", env, clear=True):
            config = GeneratorConfig.from_env()
        assert config.output_dir == Path("/tmp/server")
        assert config.component.name == "pets"
        assert config.component.language == "typescript"
        assert config.unmatched_signature is UnmatchedSignaturePolicy.ERROR

    @pytest.mark.unit
    def test_invalid_policy(self):
        with patch.dict("os.environ", {"RPCSCAFFOLD_UNMATCHED_SIGNATURE": "bogus"}, clear=True):
            with pytest.raises(ValueError):
                GeneratorConfig.from_env()
