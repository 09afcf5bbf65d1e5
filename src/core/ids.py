"""
ID 생성: 에셋 identity (GUID)

규칙:
- identity는 한 번 발급되면 에셋 수명 동안 변경 금지
- 새 identity는 .meta가 없거나 손상된 경우에만 발급
- 충돌 검사 없음 (uuid4 → 사실상 전역 고유)
"""

import re
import uuid

from src.domain.constants import IDENTITY_LENGTH

IDENTITY_PATTERN = re.compile(rf"^[0-9a-f]{{{IDENTITY_LENGTH}}}$")


def mint_identity() -> str:
    """
    새 identity 발급.

    포맷: 32자리 소문자 hex (엔진 GUID 형식)

    Returns:
        identity 문자열
    """
    return uuid.uuid4().hex


def is_valid_identity(value: str) -> bool:
    """identity 포맷 검사 (32자리 소문자 hex)."""
    return bool(IDENTITY_PATTERN.match(value))
