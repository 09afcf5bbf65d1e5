"""
Error definitions for the UI scaffolder.

규칙:
- 조용한 실패 금지 → ScaffoldError 하위 타입으로 명시적 실패
- I/O 에러는 FileOperationError로 감싸서 전달 (자동 재시도 없음)
- 손상된 .meta는 에러가 아님 → identity 없음으로 취급
"""

from typing import Any


class ScaffoldError(Exception):
    """
    스캐폴더 공통 에러.

    모든 실패는 code + 사람이 읽을 수 있는 message로 호출자에게 전달.

    Usage:
        raise InvalidParameterError("name cannot be empty", field="name")
    """

    code = "SCAFFOLD_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(f"[{self.code}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


class ProjectNotSetError(ScaffoldError):
    """ProjectContext 없이 작업을 호출한 경우."""

    code = "PROJECT_NOT_SET"

    def __init__(self) -> None:
        super().__init__("Unity project not set. Use set_project first.")


class InvalidProjectError(ScaffoldError):
    """프로젝트 루트가 엔진 프로젝트 구조가 아님 (Assets/ 없음 등)."""

    code = "INVALID_PROJECT"


class InvalidParameterError(ScaffoldError):
    """빈 이름, 잘못된 타입, custom 본문 누락 등."""

    code = "INVALID_PARAMETER"


class AssetNotFoundError(ScaffoldError, FileNotFoundError):
    """
    locate 실패.

    builtin FileNotFoundError도 상속 → `except FileNotFoundError`로도 잡힘.
    """

    code = "FILE_NOT_FOUND"

    def __init__(self, file_name: str, file_type: str = "File", **context: Any) -> None:
        self.file_name = file_name
        self.file_type = file_type
        super().__init__(
            f"{file_type} {file_name} not found.",
            file_name=file_name,
            file_type=file_type,
            **context,
        )


class FileOperationError(ScaffoldError):
    """호스트 파일시스템 I/O 에러 (디스크 부족, 권한 없음 등)."""

    code = "FILE_OPERATION_FAILED"


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수. 로그 검색/필터링용."""

    PROJECT_NOT_SET = ProjectNotSetError.code
    INVALID_PROJECT = InvalidProjectError.code
    INVALID_PARAMETER = InvalidParameterError.code
    FILE_NOT_FOUND = AssetNotFoundError.code
    FILE_OPERATION_FAILED = FileOperationError.code
