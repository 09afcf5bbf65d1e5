"""
에셋 탐색 (Asset Locator): 하위 트리 깊이 우선 탐색.

동작:
- 재귀 대신 명시적 worklist (디렉터리 iterator 스택) → 깊은 트리도 안전
- 발견 순서 = 디렉터리 엔트리 순서 (OS 의존, 정렬하지 않음)
- 깊이 제한 없음, 심볼릭 링크 디렉터리는 따라가지 않음
- 폴더가 없거나 비어 있으면 에러 대신 None / []

⚠️ 알려진 한계: 서로 다른 폴더에 같은 stem이 있으면 find는
   먼저 발견된 것을 반환 (모호성 에러 아님)
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)


def _open_dir(path: Path) -> Iterator[os.DirEntry] | None:
    """디렉터리 열기. 읽을 수 없으면 None (경고 로그)."""
    try:
        return os.scandir(path)
    except FileNotFoundError:
        return None
    except OSError as e:
        logger.warning(f"Skipping unreadable directory {path}: {e}")
        return None


def iter_matches(root: Path, extension: str) -> Iterator[Path]:
    """
    root 하위의 *.<extension> 파일을 깊이 우선(pre-order)으로 순회.

    lazy generator: 다시 호출하면 처음부터 다시 스캔.

    Args:
        root: 탐색 시작 폴더
        extension: 확장자 ("uxml", ".uss" 모두 허용)

    Yields:
        매칭 파일 경로
    """
    suffix = "." + extension.lstrip(".")
    first = _open_dir(root)
    if first is None:
        return

    stack = [first]
    try:
        while stack:
            try:
                entry = next(stack[-1])
            except StopIteration:
                stack.pop().close()
                continue

            try:
                if entry.is_dir(follow_symlinks=False):
                    child = _open_dir(Path(entry.path))
                    if child is not None:
                        stack.append(child)
                elif entry.name.endswith(suffix) and entry.is_file():
                    yield Path(entry.path)
            except OSError as e:
                logger.warning(f"Skipping entry {entry.path}: {e}")
    finally:
        # generator가 중간에 닫혀도 열린 핸들 정리
        for it in stack:
            it.close()


def find(root: Path, logical_name: str, extension: str) -> Path | None:
    """
    <logical_name>.<extension> 첫 매치 반환.

    Args:
        root: 탐색 시작 폴더
        logical_name: 정리된 stem
        extension: 확장자

    Returns:
        파일 경로 또는 None
    """
    target = f"{logical_name}.{extension.lstrip('.')}"
    for path in iter_matches(root, extension):
        if path.name == target:
            return path
    return None


def list_all(root: Path, extension: str) -> list[str]:
    """
    root 하위 모든 매칭 파일의 상대 경로 (POSIX 구분자, 발견 순서).

    Args:
        root: 탐색 시작 폴더
        extension: 확장자

    Returns:
        상대 경로 목록 (없으면 빈 리스트)
    """
    return [path.relative_to(root).as_posix() for path in iter_matches(root, extension)]
