"""
설정 로드: default.yaml

- 파일 없으면 DEFAULT_CONFIG 그대로 사용
- 부분 설정은 DEFAULT_CONFIG 위에 재귀 병합
"""

import copy
from pathlib import Path
from typing import Any

import yaml

from src.domain.constants import DEFAULT_CONFIG

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "default.yaml"


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """override 값을 base에 재귀 병합 (base는 수정하지 않음)."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """
    설정 파일 로드.

    Args:
        config_path: YAML 경로 (None이면 프로젝트 루트의 default.yaml)

    Returns:
        DEFAULT_CONFIG에 병합된 설정 dict
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return copy.deepcopy(DEFAULT_CONFIG)

    with open(config_path, encoding="utf-8") as f:
        data: dict[str, Any] = yaml.safe_load(f) or {}

    return _merge(DEFAULT_CONFIG, data)


def resolve_config(config: dict[str, Any] | None) -> dict[str, Any]:
    """호출자가 넘긴 부분 설정 dict → 완전한 설정."""
    if config is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    return _merge(DEFAULT_CONFIG, config)
