"""
파일 쓰기 유틸: 원자적 텍스트 쓰기 + 멱등 폴더 생성.

파일시스템 안정성 (best-effort):
- 원자적 쓰기: temp → rename (읽는 쪽은 반쪽짜리 파일을 보지 않음)
- fsync 실패 시 경고 남기고 계속 진행
- primary + .meta 쌍은 트랜잭션 아님 (각각 개별 원자적 쓰기)
"""

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)

TEMP_SUFFIX = ".tmp"


def ensure_directory(dir_path: Path) -> Path:
    """
    폴더 생성 (이미 있으면 그대로).

    동시에 여러 작업이 같은 폴더를 만들어도 실패하지 않음.
    """
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def _fsync_dir(dir_path: Path) -> None:
    """
    디렉토리 fsync (가능한 환경에서).

    rename 후 디렉토리 엔트리까지 내구성을 강화하려면 필요.
    """
    try:
        dir_fd = os.open(str(dir_path), os.O_RDONLY | os.O_DIRECTORY)
        try:
            os.fsync(dir_fd)
        finally:
            os.close(dir_fd)
    except (OSError, AttributeError) as e:
        # O_DIRECTORY 미지원 (Windows), 권한 문제 등
        logger.debug(f"Directory fsync skipped for {dir_path}: {e}")


def atomic_write_text(path: Path, text: str) -> None:
    """
    원자적 텍스트 쓰기.

    동작:
    - 같은 폴더에 temp 파일 작성 → rename
    - 실패 시 temp 파일 삭제, 기존 파일은 그대로
    - 줄바꿈 변환 없음 (본문 그대로 기록)

    Args:
        path: 저장할 파일 경로
        text: 본문

    Raises:
        OSError: 쓰기/rename 실패
    """
    dir_path = path.parent
    ensure_directory(dir_path)

    temp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=dir_path,
            prefix=f".{path.name}.",
            suffix=TEMP_SUFFIX,
            delete=False,
            encoding="utf-8",
            newline="",
        ) as f:
            temp_path = Path(f.name)
            f.write(text)
            f.flush()
            try:
                os.fsync(f.fileno())
            except OSError as e:
                logger.warning(
                    f"File fsync failed for {path}: {e}. "
                    f"Data may not be durable on power loss."
                )

        os.replace(temp_path, path)  # 원자적, 기존 파일 덮어쓰기

        _fsync_dir(dir_path)

    except Exception:
        if temp_path and temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                pass
        raise


def read_text(path: Path) -> str:
    """파일 내용 그대로 읽기 (줄바꿈 변환 없음)."""
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()
