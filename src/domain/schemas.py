"""
Data schemas for the UI scaffolder.

규칙:
- ProjectContext는 불변 (frozen) → 작업 간 공유 상태 없음
- 모든 생성/탐색 경로는 assets_path 하위여야 함
- GeneratedAsset은 일회성: 생성 → 기록 → 폐기
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from src.domain.constants import (
    ASSETS_DIR,
    MARKUP_EXTENSION,
    SCRIPT_EXTENSION,
    SCRIPTS_DIR,
    STYLESHEET_EXTENSION,
)
from src.domain.errors import InvalidParameterError, InvalidProjectError

# =============================================================================
# Enums
# =============================================================================


class AssetKind(str, Enum):
    """에셋 종류. 확장자, 대상 폴더, importer를 결정."""

    MARKUP = "markup"
    STYLESHEET = "stylesheet"
    BEHAVIOR_SCRIPT = "behavior_script"

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]

    @property
    def label(self) -> str:
        """사람이 읽는 이름 (메시지용)."""
        return _LABELS[self]


_EXTENSIONS = {
    AssetKind.MARKUP: MARKUP_EXTENSION,
    AssetKind.STYLESHEET: STYLESHEET_EXTENSION,
    AssetKind.BEHAVIOR_SCRIPT: SCRIPT_EXTENSION,
}

_LABELS = {
    AssetKind.MARKUP: "UXML",
    AssetKind.STYLESHEET: "USS",
    AssetKind.BEHAVIOR_SCRIPT: "C# script",
}


class TemplateVariant(str, Enum):
    """
    템플릿 변형 태그 (닫힌 집합).

    kind별로 지원하는 변형은 catalog의 render table이 결정.
    알 수 없는 태그 → kind 기본 변형으로 fallback.
    """

    WINDOW = "window"
    DOCUMENT = "document"
    PANEL = "panel"
    FORM = "form"
    MODAL = "modal"
    BUTTON = "button"
    THEME = "theme"
    UTILITIES = "utilities"
    COMPONENT = "component"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: "str | TemplateVariant | None") -> "TemplateVariant | None":
        """문자열 → 변형. 모르는 태그면 None (fallback은 호출자 몫)."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


# =============================================================================
# Project Context
# =============================================================================


@dataclass(frozen=True)
class ProjectContext:
    """
    대상 엔진 프로젝트 경로 묶음.

    외부 등록 과정에서 한 번 만들어져 UIAssetManager에 주입됨.
    """

    root_path: Path
    assets_path: Path
    scripts_path: Path

    def __post_init__(self) -> None:
        # 직접 생성된 컨텍스트도 절대 경로로 통일 (resolve_within 결과와 비교 가능)
        for name in ("root_path", "assets_path", "scripts_path"):
            object.__setattr__(self, name, Path(getattr(self, name)).expanduser().resolve())

    @classmethod
    def from_root(cls, root: str | Path) -> "ProjectContext":
        """
        프로젝트 루트에서 컨텍스트 생성.

        Args:
            root: 엔진 프로젝트 루트 (Assets/ 포함)

        Returns:
            ProjectContext

        Raises:
            InvalidProjectError: 루트 또는 Assets/ 폴더 없음
        """
        root_path = Path(root).expanduser().resolve()
        if not root_path.is_dir():
            raise InvalidProjectError(
                f"Project path does not exist: {root_path}",
                root_path=str(root_path),
            )

        assets_path = root_path / ASSETS_DIR
        if not assets_path.is_dir():
            raise InvalidProjectError(
                f"Not a Unity project (missing {ASSETS_DIR}/ folder): {root_path}",
                root_path=str(root_path),
            )

        return cls(
            root_path=root_path,
            assets_path=assets_path,
            scripts_path=assets_path / SCRIPTS_DIR,
        )

    def relative(self, path: Path) -> str:
        """
        assets_path 기준 상대 경로 (POSIX 구분자).

        Raises:
            InvalidParameterError: assets_path 밖의 경로
        """
        resolved = Path(path).resolve()
        if not resolved.is_relative_to(self.assets_path):
            raise InvalidParameterError(
                f"path is outside the assets folder: {path}",
                assets_path=str(self.assets_path),
                path=str(path),
            )
        return resolved.relative_to(self.assets_path).as_posix()


# =============================================================================
# Generated Asset / Sidecar
# =============================================================================


@dataclass
class GeneratedAsset:
    """생성된 에셋 한 건 (기록 후 폐기)."""

    logical_name: str
    kind: AssetKind
    variant: TemplateVariant
    body: str
    relative_path: str
    identity: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """로그용 (본문 제외)."""
        return {
            "logical_name": self.logical_name,
            "kind": self.kind.value,
            "variant": self.variant.value,
            "relative_path": self.relative_path,
            "identity": self.identity,
            "body_length": len(self.body),
        }


@dataclass
class SidecarMetadata:
    """
    .meta 파일 내용.

    extra_lines: 인식하지 못한 줄 → 재기록 시 보존
    """

    identity: str
    importer_kind: str
    extra_lines: list[str] = field(default_factory=list)


@dataclass
class UIComponent:
    """uxml + uss + cs 묶음 생성 결과."""

    logical_name: str
    directory: str
    assets: list[GeneratedAsset] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "logical_name": self.logical_name,
            "directory": self.directory,
            "assets": [a.to_dict() for a in self.assets],
        }
