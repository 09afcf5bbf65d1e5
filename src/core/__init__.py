"""
Core layer: 파일시스템 안전 핵심 모듈.

역할:
- 이름 정규화 + 경로 봉쇄 (naming.py)
- identity 발급 (ids.py), .meta 읽기/쓰기 (meta.py)
- 파일 탐색 (locator.py), 원자적 쓰기 (fileio.py)
- 설정 (config.py), 로깅 (logging.py)
"""

from .config import load_config, resolve_config
from .fileio import atomic_write_text, ensure_directory, read_text
from .ids import is_valid_identity, mint_identity
from .locator import find, iter_matches, list_all
from .logging import log_asset_written, log_orphaned_primary, setup_logging
from .meta import meta_path_for, parse_sidecar, read_identity, read_sidecar, render_sidecar
from .naming import UINames, resolve_within, sanitize_name, strip_extension

__all__ = [
    # naming
    "sanitize_name",
    "strip_extension",
    "resolve_within",
    "UINames",
    # ids
    "mint_identity",
    "is_valid_identity",
    # meta
    "meta_path_for",
    "render_sidecar",
    "parse_sidecar",
    "read_sidecar",
    "read_identity",
    # locator
    "iter_matches",
    "find",
    "list_all",
    # fileio
    "atomic_write_text",
    "ensure_directory",
    "read_text",
    # config
    "load_config",
    "resolve_config",
    # logging
    "setup_logging",
    "log_asset_written",
    "log_orphaned_primary",
]
