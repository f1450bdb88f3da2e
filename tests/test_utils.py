"""Tests for rpcscaffold.utils."""

from __future__ import annotations

from pathlib import Path

import pytest

from rpcscaffold.errors import GenerationIOError
from rpcscaffold.utils import (
    copy_tree,
    dump_json,
    ensure_dir,
    is_identifier,
    path_exists,
    read_text,
    remove_file,
    to_pascal,
    write_text,
)

pytestmark = pytest.mark.unit


class TestNameHelpers:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("addition", "Addition"),
            ("listPets", "ListPets"),
            ("eth_getBalance", "EthGetBalance"),
            ("some-thing", "SomeThing"),
            ("$weird", "Weird"),
            ("", ""),
        ],
    )
    def test_to_pascal(self, name, expected):
        assert to_pascal(name) == expected

    @pytest.mark.parametrize("name", ["a", "_private", "$jq", "camelCase", "x1"])
    def test_valid_identifiers(self, name):
        assert is_identifier(name)

    @pytest.mark.parametrize("name", ["", "1a", "a-b", "a b", "a.b"])
    def test_invalid_identifiers(self, name):
        assert not is_identifier(name)


class TestDumpJson:
    def test_two_space_indent(self):
        assert dump_json({"a": {"b": 1}}) == '{\n  "a": {\n    "b": 1\n  }\n}'

    def test_non_ascii_kept(self):
        assert dump_json({"author": "Zoë"}) == '{\n  "author": "Zoë"\n}'


class TestFileHelpers:
    async def test_write_creates_parents(self, tmp_path: Path):
        path = await write_text(tmp_path / "a" / "b" / "c.ts", "x")
        assert path.read_text(encoding="utf-8") == "x"

    async def test_read_write_keep_crlf(self, tmp_path: Path):
        path = tmp_path / "crlf.ts"
        await write_text(path, "a\r\nb\r\n")
        assert path.read_bytes() == b"a\r\nb\r\n"
        assert await read_text(path) == "a\r\nb\r\n"

    async def test_read_missing_raises(self, tmp_path: Path):
        with pytest.raises(GenerationIOError) as exc_info:
            await read_text(tmp_path / "missing.ts")
        assert exc_info.value.operation == "read"
        assert exc_info.value.path == tmp_path / "missing.ts"

    async def test_read_non_utf8_raises(self, tmp_path: Path):
        path = tmp_path / "latin1.ts"
        path.write_bytes(b"// caf\xe9\n")
        with pytest.raises(GenerationIOError, match="not valid UTF-8") as exc_info:
            await read_text(path)
        assert exc_info.value.operation == "read"
        assert exc_info.value.path == path

    async def test_write_into_file_path_raises(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(GenerationIOError) as exc_info:
            await write_text(blocker / "child.ts", "x")
        assert exc_info.value.operation == "write"

    async def test_remove(self, tmp_path: Path):
        path = tmp_path / "gone.json"
        path.write_text("{}", encoding="utf-8")
        await remove_file(path)
        assert not await path_exists(path)

    async def test_remove_missing_raises(self, tmp_path: Path):
        with pytest.raises(GenerationIOError, match="Failed to remove"):
            await remove_file(tmp_path / "missing.json")

    async def test_ensure_dir(self, tmp_path: Path):
        path = await ensure_dir(tmp_path / "x" / "y")
        assert path.is_dir()

    async def test_copy_tree_skips_existing(self, tmp_path: Path):
        src = tmp_path / "src"
        (src / "nested").mkdir(parents=True)
        (src / "keep.txt").write_text("new", encoding="utf-8")
        (src / "_package.json").write_text("new", encoding="utf-8")
        (src / "nested" / "file.txt").write_text("new", encoding="utf-8")

        dest = tmp_path / "dest"
        dest.mkdir()
        (dest / "keep.txt").write_text("old", encoding="utf-8")
        (dest / "_package.json").write_text("old", encoding="utf-8")

        written = await copy_tree(src, dest, overwrite={"_package.json"})

        assert (dest / "keep.txt").read_text(encoding="utf-8") == "old"
        assert (dest / "_package.json").read_text(encoding="utf-8") == "new"
        assert (dest / "nested" / "file.txt").read_text(encoding="utf-8") == "new"
        assert sorted(p.relative_to(dest).as_posix() for p in written) == [
            "_package.json",
            "nested/file.txt",
        ]
