"""
Templates layer: UI 에셋 렌더링 + 관리.

역할:
- 변형별 스켈레톤 렌더링 (catalog.py)
- 에셋 create / update / read / list / component (manager.py)
"""

from .catalog import (
    RENDER_TABLE,
    VARIANT_AFFORDANCES,
    available_variants,
    render,
    resolve_variant,
)
from .manager import UIAssetManager, parse_kind

__all__ = [
    # catalog
    "render",
    "resolve_variant",
    "available_variants",
    "RENDER_TABLE",
    "VARIANT_AFFORDANCES",
    # manager
    "UIAssetManager",
    "parse_kind",
]
