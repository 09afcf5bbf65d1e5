#!/usr/bin/env python3
"""
scaffold_ui.py - Unity UI Toolkit 에셋 스캐폴딩 스크립트

UXML / USS / C# 스크립트를 변형(window, panel, form, ...) 템플릿으로 생성하고,
.meta identity를 유지하며 본문을 교체/조회/나열한다.

프로젝트 경로:
- --project 옵션
- 없으면 환경변수 UNITY_PROJECT_PATH (.env 지원)

사용법:
    # 윈도우 UXML 생성
    uv run python scripts/scaffold_ui.py create markup MainMenu --variant window

    # 컴포넌트 (uxml + uss + cs) 생성
    uv run python scripts/scaffold_ui.py component TestButton --variant button

    # 본문 교체 (파일 또는 stdin)
    uv run python scripts/scaffold_ui.py update stylesheet MainMenu --file MainMenu.uss

    # 조회 / 나열
    uv run python scripts/scaffold_ui.py read markup MainMenu
    uv run python scripts/scaffold_ui.py list behavior_script
"""

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import find_dotenv, load_dotenv

from src.core.config import load_config
from src.core.logging import setup_logging
from src.domain.errors import ScaffoldError
from src.domain.schemas import AssetKind
from src.templates.manager import UIAssetManager

logger = logging.getLogger(__name__)

PROJECT_ENV_VAR = "UNITY_PROJECT_PATH"

KIND_CHOICES = [k.value for k in AssetKind] + [k.extension for k in AssetKind]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Unity UI Toolkit 에셋 스캐폴딩",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--project",
        type=str,
        help=f"Unity 프로젝트 루트 (기본: ${PROJECT_ENV_VAR})",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="설정 YAML 경로 (기본: default.yaml)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="에셋 생성")
    create.add_argument("kind", choices=KIND_CHOICES)
    create.add_argument("name")
    create.add_argument("--variant", default=None, help="변형 태그 (예: window, panel)")
    create.add_argument("--body-file", type=str, help="custom 변형 본문 파일")

    update = sub.add_parser("update", help="에셋 본문 교체 (identity 유지)")
    update.add_argument("kind", choices=KIND_CHOICES)
    update.add_argument("name")
    update.add_argument("--file", type=str, help="새 본문 파일 (없으면 stdin)")

    read = sub.add_parser("read", help="에셋 내용 출력")
    read.add_argument("kind", choices=KIND_CHOICES)
    read.add_argument("name")

    list_cmd = sub.add_parser("list", help="kind별 에셋 목록")
    list_cmd.add_argument("kind", choices=KIND_CHOICES)

    component = sub.add_parser("component", help="uxml + uss + cs 묶음 생성")
    component.add_argument("name")
    component.add_argument("--variant", default=None)

    return parser


def _read_body(path: str | None) -> str:
    if path is None:
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


async def run(args: argparse.Namespace, manager: UIAssetManager) -> str:
    """서브커맨드 → manager 호출."""
    if args.command == "create":
        body = _read_body(args.body_file) if args.body_file else None
        return await manager.create(args.kind, args.name, args.variant, body)
    if args.command == "update":
        return await manager.update(args.kind, args.name, _read_body(args.file))
    if args.command == "read":
        return await manager.read(args.kind, args.name)
    if args.command == "list":
        return await manager.list_all(args.kind)
    if args.command == "component":
        return await manager.create_component(args.name, args.variant)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    # .env 파일 로드 (현재 폴더 기준)
    load_dotenv(find_dotenv(usecwd=True))

    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(Path(args.config) if args.config else None)
    setup_logging(config)

    project = args.project or os.environ.get(PROJECT_ENV_VAR)
    manager = UIAssetManager(config=config)

    try:
        if project:
            manager.set_project(project)
        output = asyncio.run(run(args, manager))
    except ScaffoldError as e:
        logger.error(str(e))
        return 1
    except OSError as e:
        logger.error(f"File error: {e}")
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    exit(main())
