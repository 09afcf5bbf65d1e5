"""
Sidecar (.meta) 관리: identity 읽기/렌더.

포맷 (줄 단위):
    fileFormatVersion: 2
    identity: <32 hex>
    importer: ScriptedImporter
    <그 외 줄: 재기록 시 보존>

규칙:
- 읽기 실패는 조용히 None (손상/외부 .meta가 재생성을 막으면 안 됨)
- 렌더는 순수 함수: 같은 입력 → 같은 출력
- 엔진이 직접 쓴 .meta의 "guid:" 키도 identity로 인정
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from src.core.ids import is_valid_identity
from src.domain.constants import (
    META_FILE_FORMAT_VERSION,
    META_IDENTITY_ALIASES,
    META_IDENTITY_KEY,
    META_IMPORTER_KEY,
    META_SUFFIX,
    META_VERSION_KEY,
)
from src.domain.schemas import SidecarMetadata

logger = logging.getLogger(__name__)


def meta_path_for(primary_path: Path, suffix: str = META_SUFFIX) -> Path:
    """primary 파일 옆 .meta 경로. Foo.uxml → Foo.uxml.meta"""
    return primary_path.with_name(primary_path.name + suffix)


# =============================================================================
# Render
# =============================================================================


def render_sidecar(
    identity: str,
    importer_kind: str,
    extra_lines: Iterable[str] = (),
    file_format_version: int = META_FILE_FORMAT_VERSION,
) -> str:
    """
    .meta 본문 렌더.

    Args:
        identity: 에셋 identity
        importer_kind: importer 이름 (ScriptedImporter, MonoImporter 등)
        extra_lines: 기존 .meta에서 보존할 줄
        file_format_version: 포맷 버전

    Returns:
        .meta 본문 (마지막 줄바꿈 포함)
    """
    lines = [
        f"{META_VERSION_KEY}: {file_format_version}",
        f"{META_IDENTITY_KEY}: {identity}",
        f"{META_IMPORTER_KEY}: {importer_kind}",
    ]
    lines.extend(extra_lines)
    return "\n".join(lines) + "\n"


# =============================================================================
# Parse / Read
# =============================================================================


def parse_sidecar(text: str) -> SidecarMetadata | None:
    """
    .meta 본문 파싱.

    최상위(들여쓰기 없는) "key: value" 줄만 키로 인식.
    identity가 없거나 포맷이 틀리면 None.

    Args:
        text: .meta 본문

    Returns:
        SidecarMetadata 또는 None
    """
    identity = None
    importer_kind = ""
    extra_lines: list[str] = []

    for line in text.splitlines():
        if not line.strip():
            continue

        key, sep, value = line.partition(":")
        top_level = sep and not line[:1].isspace()

        if top_level and key.strip() in META_IDENTITY_ALIASES:
            token = value.strip().lower()
            if identity is None and is_valid_identity(token):
                identity = token
            continue

        if top_level and key.strip() == META_IMPORTER_KEY:
            importer_kind = value.strip()
            continue

        if top_level and key.strip() == META_VERSION_KEY:
            continue  # 렌더 시 다시 기록

        extra_lines.append(line)

    if identity is None:
        return None

    return SidecarMetadata(
        identity=identity,
        importer_kind=importer_kind,
        extra_lines=extra_lines,
    )


def read_sidecar(sidecar_path: Path) -> SidecarMetadata | None:
    """
    .meta 파일 읽기 (fail-soft).

    Args:
        sidecar_path: .meta 경로

    Returns:
        SidecarMetadata 또는 None (없음/읽기 실패/손상)
    """
    try:
        text = sidecar_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Unreadable sidecar {sidecar_path}: {e}. A new identity will be minted.")
        return None

    meta = parse_sidecar(text)
    if meta is None:
        logger.warning(f"Sidecar {sidecar_path} has no valid identity. A new identity will be minted.")
    return meta


def read_identity(sidecar_path: Path) -> str | None:
    """기존 .meta에서 identity 추출. 없으면 None."""
    meta = read_sidecar(sidecar_path)
    return meta.identity if meta else None
