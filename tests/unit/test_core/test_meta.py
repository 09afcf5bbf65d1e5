"""
test_meta.py - .meta sidecar 렌더/파싱 테스트

DoD:
- 렌더 → 파싱 시 identity/importer 보존
- 엔진이 쓴 "guid:" 키도 identity로 인정
- 인식 못한 줄은 재기록 시 보존
- 없음/손상 → None (에러 아님)
"""

import logging
from pathlib import Path

from src.core.meta import (
    meta_path_for,
    parse_sidecar,
    read_identity,
    read_sidecar,
    render_sidecar,
)

IDENTITY = "0123456789abcdef0123456789abcdef"


class TestMetaPathFor:

    def test_suffix_appended(self, tmp_path: Path):
        assert meta_path_for(tmp_path / "Foo.uxml") == tmp_path / "Foo.uxml.meta"

    def test_custom_suffix(self, tmp_path: Path):
        assert meta_path_for(tmp_path / "Foo.uss", ".sidecar") == tmp_path / "Foo.uss.sidecar"


class TestRenderSidecar:
    """render_sidecar 함수 테스트."""

    def test_format(self):
        text = render_sidecar(IDENTITY, "ScriptedImporter")

        assert text == (
            "fileFormatVersion: 2\n"
            f"identity: {IDENTITY}\n"
            "importer: ScriptedImporter\n"
        )

    def test_deterministic(self):
        assert render_sidecar(IDENTITY, "MonoImporter") == render_sidecar(IDENTITY, "MonoImporter")

    def test_extra_lines_appended(self):
        text = render_sidecar(IDENTITY, "ScriptedImporter", ["userData: keep-me"])
        assert text.endswith("userData: keep-me\n")


class TestParseSidecar:
    """parse_sidecar 함수 테스트."""

    def test_parse_rendered(self):
        meta = parse_sidecar(render_sidecar(IDENTITY, "ScriptedImporter"))

        assert meta is not None
        assert meta.identity == IDENTITY
        assert meta.importer_kind == "ScriptedImporter"
        assert meta.extra_lines == []

    def test_engine_guid_key(self):
        """엔진 .meta 형식 (guid + importer 블록)."""
        text = (
            "fileFormatVersion: 2\n"
            f"guid: {IDENTITY.upper()}\n"
            "ScriptedImporter:\n"
            "  internalIDToNameTable: []\n"
            "  userData: \n"
        )

        meta = parse_sidecar(text)

        assert meta is not None
        assert meta.identity == IDENTITY
        assert meta.extra_lines == [
            "ScriptedImporter:",
            "  internalIDToNameTable: []",
            "  userData: ",
        ]

    def test_nested_identity_ignored(self):
        """들여쓴 identity 줄은 키가 아님."""
        text = f"fileFormatVersion: 2\nblock:\n  identity: {IDENTITY}\n"
        assert parse_sidecar(text) is None

    def test_missing_identity(self):
        assert parse_sidecar("fileFormatVersion: 2\nimporter: MonoImporter\n") is None

    def test_malformed_identity(self):
        assert parse_sidecar("identity: 1234\n") is None

    def test_garbage(self):
        assert parse_sidecar("\x00\x01 not yaml at all") is None


class TestReadSidecar:
    """read_sidecar / read_identity (fail-soft)."""

    def test_missing_file(self, tmp_path: Path):
        assert read_sidecar(tmp_path / "Foo.uxml.meta") is None
        assert read_identity(tmp_path / "Foo.uxml.meta") is None

    def test_read_existing(self, tmp_path: Path):
        path = tmp_path / "Foo.uxml.meta"
        path.write_text(render_sidecar(IDENTITY, "ScriptedImporter"), encoding="utf-8")

        assert read_identity(path) == IDENTITY

    def test_corrupt_file_warns(self, tmp_path: Path, caplog):
        path = tmp_path / "Foo.uxml.meta"
        path.write_text("garbage", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="src.core.meta"):
            assert read_sidecar(path) is None

        assert "no valid identity" in caplog.text

    def test_undecodable_file(self, tmp_path: Path):
        path = tmp_path / "Foo.uxml.meta"
        path.write_bytes(b"\xff\xfe\xfa identity")

        assert read_sidecar(path) is None

    def test_directory_instead_of_file(self, tmp_path: Path):
        path = tmp_path / "Foo.uxml.meta"
        path.mkdir()

        assert read_sidecar(path) is None
