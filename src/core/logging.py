"""
로깅 설정 + 작업 이벤트 기록.

규칙:
- 모듈별 logger = logging.getLogger(__name__)
- 쓰기 이벤트 필수 컨텍스트: kind, relative_path, identity
- orphan(primary만 쓰이고 .meta 실패)은 warning으로 남김
"""

import logging
from typing import Any

from src.domain.schemas import GeneratedAsset

logger = logging.getLogger("src.scaffold")


def setup_logging(config: dict[str, Any]) -> None:
    """
    config의 logging 섹션으로 root logger 설정.

    Args:
        config: 설정 (logging.level, logging.format, logging.datefmt)
    """
    log_config = config.get("logging", {})
    level = str(log_config.get("level", "INFO")).upper()

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=log_config.get("format", "%(asctime)s [%(levelname)s] %(message)s"),
        datefmt=log_config.get("datefmt", "%Y-%m-%d %H:%M:%S"),
    )


def log_asset_written(asset: GeneratedAsset, sidecar_written: bool) -> None:
    """에셋 기록 완료 이벤트."""
    logger.info(
        f"Wrote {asset.kind.label} {asset.relative_path} "
        f"(variant={asset.variant.value}, identity={asset.identity}, "
        f"sidecar={'yes' if sidecar_written else 'no'})"
    )


def log_orphaned_primary(relative_path: str, error: Exception) -> None:
    """primary는 기록됐지만 .meta 기록 실패 (롤백 없음)."""
    logger.warning(
        f"Primary file {relative_path} was written but its sidecar failed: {error}. "
        f"The primary file is left in place without a sidecar."
    )
