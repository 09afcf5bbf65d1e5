"""
UI 에셋 관리자: create / update / read / list / component.

핵심 규칙:
- 모든 작업은 상태 없는 짧은 트랜잭션 (주입된 ProjectContext 외 상태 없음)
- 메모리 인덱스 없음 → locate/list마다 파일시스템 재스캔
- identity 불변: .meta가 있으면 재사용, 없거나 손상됐을 때만 새로 발급
- 쓰기 순서: primary → .meta (롤백 없음, 락 없음)
- 모든 경로는 assets_path 하위 (resolve_within)

구조 (assets 기준):
UI/<Name>.uxml (+ .meta)
UI/Styles/<Name>.uss (+ .meta)
Scripts/UI/<Type>.cs
UI/Components/<Name>/
├── <Name>.uxml (+ .meta)
├── <Name>.uss (+ .meta)
└── <Type>.cs

<Type>: 이름에서 파생한 C# 클래스 이름 (test-button → TestButton)
"""

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from src.core import locator
from src.core.config import resolve_config
from src.core.fileio import atomic_write_text, ensure_directory, read_text
from src.core.ids import mint_identity
from src.core.logging import log_asset_written, log_orphaned_primary
from src.core.meta import meta_path_for, read_sidecar, render_sidecar
from src.core.naming import resolve_within, sanitize_name, strip_extension, type_name
from src.domain.constants import ASSETS_DIR, EMPTY_LIST_MESSAGE
from src.domain.errors import (
    AssetNotFoundError,
    FileOperationError,
    InvalidParameterError,
    ProjectNotSetError,
)
from src.domain.schemas import (
    AssetKind,
    GeneratedAsset,
    ProjectContext,
    TemplateVariant,
    UIComponent,
)
from src.templates.catalog import render, resolve_variant

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse_kind(kind: str | AssetKind) -> AssetKind:
    """문자열 → AssetKind. "uxml"/"uss"/"cs" 확장자 표기도 허용."""
    if isinstance(kind, AssetKind):
        return kind

    value = str(kind).strip().lower().lstrip(".")
    for candidate in AssetKind:
        if value in (candidate.value, candidate.extension):
            return candidate

    raise InvalidParameterError(
        f"Unknown asset kind: {kind!r}",
        kind=str(kind),
        allowed=[k.value for k in AssetKind],
    )


class UIAssetManager:
    """
    UI 에셋 스캐폴딩 관리자.

    Usage:
        manager = UIAssetManager(ProjectContext.from_root("/path/to/project"))
        await manager.create("markup", "MainMenu", "window")
        await manager.update("markup", "MainMenu", new_body)
    """

    def __init__(
        self,
        context: ProjectContext | None = None,
        config: dict[str, Any] | None = None,
    ):
        """
        Args:
            context: 대상 프로젝트 (None이면 set_project 전까지 모든 작업 실패)
            config: 설정 (default.yaml 구조, 부분 설정 허용)
        """
        self.context = context
        self.config = resolve_config(config)

    def set_project(self, root: str | Path) -> ProjectContext:
        """
        대상 프로젝트 등록.

        Raises:
            InvalidProjectError: Assets/ 폴더 없음
        """
        self.context = ProjectContext.from_root(root)
        logger.info(f"Project set: {self.context.root_path}")
        return self.context

    # =========================================================================
    # Create
    # =========================================================================

    async def create(
        self,
        kind: str | AssetKind,
        logical_name: str,
        variant: str | TemplateVariant | None = None,
        custom_body: str | None = None,
    ) -> str:
        """
        단일 에셋 생성 (같은 이름이 있으면 identity 유지하며 재생성).

        Args:
            kind: markup / stylesheet / behavior_script
            logical_name: 논리 이름
            variant: 변형 태그 (None/모름 → 기본 변형)
            custom_body: custom 변형 본문

        Returns:
            확인 메시지

        Raises:
            ProjectNotSetError, InvalidParameterError, FileOperationError
        """
        asset_kind = parse_kind(kind)
        asset = await self._create_asset(
            asset_kind,
            logical_name,
            variant,
            custom_body,
            target_dir=self._target_dir(asset_kind),
        )
        return self._created_message(asset)

    async def create_markup(
        self,
        logical_name: str,
        variant: str | None = "document",
        custom_body: str | None = None,
    ) -> str:
        return await self.create(AssetKind.MARKUP, logical_name, variant, custom_body)

    async def create_stylesheet(
        self,
        logical_name: str,
        variant: str | None = "component",
        custom_body: str | None = None,
    ) -> str:
        return await self.create(AssetKind.STYLESHEET, logical_name, variant, custom_body)

    async def create_script(
        self,
        logical_name: str,
        variant: str | None = "component",
        custom_body: str | None = None,
    ) -> str:
        return await self.create(AssetKind.BEHAVIOR_SCRIPT, logical_name, variant, custom_body)

    async def create_component(
        self,
        logical_name: str,
        variant: str | TemplateVariant | None = None,
    ) -> str:
        """
        uxml + uss + cs 묶음 생성 (UI/Components/<Name>/).

        같은 stem을 세 렌더에 모두 전달 → 식별자 일치.
        중간 실패 시 즉시 에러 (이미 쓴 파일은 롤백하지 않음).

        Args:
            logical_name: 논리 이름
            variant: 변형 태그 (custom 불가)

        Returns:
            세 파일을 나열한 확인 메시지
        """
        if TemplateVariant.parse(variant) is TemplateVariant.CUSTOM:
            raise InvalidParameterError(
                "custom variant is not supported for components",
                variant="custom",
            )

        stem = sanitize_name(logical_name)
        for kind in AssetKind:
            stem = strip_extension(stem, kind.extension)
        stem = sanitize_name(stem)

        directory = f"{self._paths['components_dir']}/{stem}"
        component = UIComponent(logical_name=stem, directory=directory)

        for kind in (AssetKind.MARKUP, AssetKind.STYLESHEET, AssetKind.BEHAVIOR_SCRIPT):
            asset = await self._create_asset(
                kind,
                stem,
                variant,
                None,
                target_dir=directory,
                style_src=f"{stem}.{AssetKind.STYLESHEET.extension}",
                markup_path=f"{ASSETS_DIR}/{directory}/{stem}.{AssetKind.MARKUP.extension}",
            )
            component.assets.append(asset)

        logger.debug(f"Component created: {component.to_dict()}")

        lines = [f"Created UI component '{stem}' in {directory}:"]
        lines.extend(f"- {self._created_message(a)}" for a in component.assets)
        return "\n".join(lines)

    # =========================================================================
    # Update
    # =========================================================================

    async def update(
        self,
        kind: str | AssetKind,
        logical_name: str,
        new_body: str,
    ) -> str:
        """
        기존 에셋 본문 교체 (템플릿 재적용 없음, identity 유지).

        Args:
            kind: 에셋 종류
            logical_name: 논리 이름
            new_body: 새 본문 (그대로 기록)

        Returns:
            확인 메시지

        Raises:
            AssetNotFoundError: 기존 파일 없음
            FileOperationError: I/O 실패
        """
        asset_kind = parse_kind(kind)
        context = self._require_context()
        stem = sanitize_name(logical_name, asset_kind.extension)

        if not isinstance(new_body, str) or not new_body:
            raise InvalidParameterError("content cannot be empty", name=stem)

        path = await self._locate(asset_kind, stem)
        sidecar_path = meta_path_for(path, self._meta["suffix"])

        relative_path = context.relative(path)
        existing = await asyncio.to_thread(read_sidecar, sidecar_path)

        if existing is None and not self._writes_sidecar(asset_kind):
            # 엔진이 .meta를 만드는 kind → 없으면 만들지 않음
            await self._run_io("write", path, atomic_write_text, path, new_body)
            logger.info(f"Updated {asset_kind.label} {relative_path} (no sidecar)")
            return f"Updated {asset_kind.label} '{stem}' at {relative_path}"

        if existing is not None:
            identity = existing.identity
            importer = existing.importer_kind or self._importer(asset_kind)
            extra_lines = existing.extra_lines
        else:
            identity = mint_identity()
            importer = self._importer(asset_kind)
            extra_lines = []

        await self._run_io("write", path, atomic_write_text, path, new_body)
        await self._write_sidecar(
            sidecar_path,
            relative_path,
            render_sidecar(
                identity,
                importer,
                extra_lines,
                self._meta["file_format_version"],
            ),
        )

        state = "preserved" if existing is not None else "new"
        logger.info(f"Updated {asset_kind.label} {relative_path} (identity={identity}, {state})")
        return f"Updated {asset_kind.label} '{stem}' at {relative_path} (identity {identity}, {state})"

    # =========================================================================
    # Read
    # =========================================================================

    async def read(self, kind: str | AssetKind, logical_name: str) -> str:
        """
        에셋 원본 내용 반환 (부수 효과 없음).

        Raises:
            AssetNotFoundError: 파일 없음
        """
        asset_kind = parse_kind(kind)
        self._require_context()
        stem = sanitize_name(logical_name, asset_kind.extension)

        path = await self._locate(asset_kind, stem)
        return await self._run_io("read", path, read_text, path)

    async def list_all(self, kind: str | AssetKind) -> str:
        """
        kind의 모든 파일 목록 (assets 기준 상대 경로, 줄바꿈 구분).

        Returns:
            목록 또는 "No <Kind> files found."
        """
        asset_kind = parse_kind(kind)
        context = self._require_context()

        found: list[str] = []
        for rel_dir in self._search_dirs(asset_kind):
            root = resolve_within(context.assets_path, rel_dir)
            for rel_path in await asyncio.to_thread(locator.list_all, root, asset_kind.extension):
                path_str = f"{rel_dir}/{rel_path}"
                if path_str not in found:
                    found.append(path_str)

        if not found:
            return EMPTY_LIST_MESSAGE.format(kind=asset_kind.label)
        return "\n".join(found)

    # =========================================================================
    # Internal Helpers
    # =========================================================================

    @property
    def _paths(self) -> dict[str, str]:
        return self.config["paths"]

    @property
    def _meta(self) -> dict[str, Any]:
        return self.config["meta"]

    def _require_context(self) -> ProjectContext:
        if self.context is None:
            raise ProjectNotSetError()
        return self.context

    def _target_dir(self, kind: AssetKind) -> str:
        """단독 생성 시 대상 폴더 (assets 기준)."""
        return {
            AssetKind.MARKUP: self._paths["ui_dir"],
            AssetKind.STYLESHEET: self._paths["styles_dir"],
            AssetKind.BEHAVIOR_SCRIPT: self._paths["scripts_ui_dir"],
        }[kind]

    def _search_dirs(self, kind: AssetKind) -> list[str]:
        """locate/list 탐색 폴더 (assets 기준, 순서대로)."""
        if kind is AssetKind.BEHAVIOR_SCRIPT:
            return [self._paths["scripts_ui_dir"], self._paths["ui_dir"]]
        return [self._paths["ui_dir"]]

    def _importer(self, kind: AssetKind) -> str:
        return self._meta["importers"][kind.value]

    def _writes_sidecar(self, kind: AssetKind) -> bool:
        if kind is AssetKind.BEHAVIOR_SCRIPT:
            return bool(self._meta.get("script_sidecars", False))
        return True

    async def _run_io(
        self,
        action: str,
        path: Path,
        func: Callable[..., T],
        *args: Any,
    ) -> T:
        """파일 I/O를 스레드로 실행 + OSError → FileOperationError."""
        try:
            return await asyncio.to_thread(func, *args)
        except OSError as e:
            raise FileOperationError(
                f"Failed to {action} {path}: {e}",
                action=action,
                path=str(path),
            ) from e

    async def _write_sidecar(self, sidecar_path: Path, relative_path: str, text: str) -> None:
        """.meta 쓰기. 실패해도 primary는 그대로 둠 (orphan 경고)."""
        try:
            await self._run_io("write", sidecar_path, atomic_write_text, sidecar_path, text)
        except FileOperationError as e:
            log_orphaned_primary(relative_path, e)
            raise

    def _file_stem(self, kind: AssetKind, stem: str) -> str:
        """파일 이름 stem. C# 스크립트는 클래스 이름과 같아야 함 (MonoBehaviour)."""
        if kind is AssetKind.BEHAVIOR_SCRIPT:
            return type_name(stem)
        return stem

    async def _find(self, kind: AssetKind, stem: str) -> Path | None:
        """
        탐색 폴더를 순서대로 깊이 우선 탐색. 없으면 None.

        스크립트는 클래스 이름 파일을 먼저, 논리 이름 파일을 다음으로 찾음.
        """
        context = self._require_context()
        candidates = list(dict.fromkeys([self._file_stem(kind, stem), stem]))
        for rel_dir in self._search_dirs(kind):
            root = resolve_within(context.assets_path, rel_dir)
            for candidate in candidates:
                path = await asyncio.to_thread(locator.find, root, candidate, kind.extension)
                if path is not None:
                    # 심볼릭 링크 등으로 assets 밖을 가리키면 거부 (relative가 검사)
                    context.relative(path)
                    return path
        return None

    async def _locate(self, kind: AssetKind, stem: str) -> Path:
        """
        Raises:
            AssetNotFoundError: 어디에도 없음
        """
        path = await self._find(kind, stem)
        if path is None:
            raise AssetNotFoundError(f"{stem}.{kind.extension}", kind.label, name=stem)
        return path

    async def _markup_path(self, stem: str) -> str:
        """단독 스크립트가 바인딩할 uxml 경로. 같은 이름 uxml이 있으면 그 위치."""
        context = self._require_context()
        path = await self._find(AssetKind.MARKUP, stem)
        if path is not None:
            return f"{ASSETS_DIR}/{context.relative(path)}"
        return f"{ASSETS_DIR}/{self._paths['ui_dir']}/{stem}.{AssetKind.MARKUP.extension}"

    async def _create_asset(
        self,
        kind: AssetKind,
        logical_name: str,
        variant: str | TemplateVariant | None,
        custom_body: str | None,
        target_dir: str,
        style_src: str | None = None,
        markup_path: str | None = None,
    ) -> GeneratedAsset:
        """
        sanitize → render → 폴더 보장 → identity 결정 → primary → .meta.
        """
        context = self._require_context()
        stem = sanitize_name(logical_name, kind.extension)
        resolved = resolve_variant(kind, variant)
        if kind is AssetKind.BEHAVIOR_SCRIPT and markup_path is None:
            markup_path = await self._markup_path(stem)
        body = render(
            kind,
            resolved,
            stem,
            custom_body,
            style_src=style_src,
            markup_path=markup_path,
        )

        file_name = f"{self._file_stem(kind, stem)}.{kind.extension}"
        dir_path = resolve_within(context.assets_path, target_dir)
        path = resolve_within(context.assets_path, target_dir, file_name)
        relative_path = context.relative(path)

        await self._run_io("create directory", dir_path, ensure_directory, dir_path)

        asset = GeneratedAsset(
            logical_name=stem,
            kind=kind,
            variant=resolved,
            body=body,
            relative_path=relative_path,
        )

        write_sidecar = self._writes_sidecar(kind)
        sidecar_path = meta_path_for(path, self._meta["suffix"])
        existing = None
        if write_sidecar:
            # 같은 자리 재생성 → 기존 identity 유지
            existing = await asyncio.to_thread(read_sidecar, sidecar_path)
            asset.identity = existing.identity if existing else mint_identity()

        await self._run_io("write", path, atomic_write_text, path, body)

        if write_sidecar:
            await self._write_sidecar(
                sidecar_path,
                relative_path,
                render_sidecar(
                    asset.identity,
                    self._importer(kind),
                    existing.extra_lines if existing else (),
                    self._meta["file_format_version"],
                ),
            )

        log_asset_written(asset, sidecar_written=write_sidecar)
        return asset

    def _created_message(self, asset: GeneratedAsset) -> str:
        message = f"Created {asset.kind.label} '{asset.logical_name}' at {asset.relative_path}"
        if asset.identity:
            message += f" (identity {asset.identity})"
        return message
