"""
이름 정리 (Name Sanitizer) + 식별자 파생.

정책:
- 의심스러운 입력은 거부하지 않고 정리 (빈 값/잘못된 타입만 거부)
- 복사해 온 경로("Assets/UI/Foo.uxml")도 허용 → 마지막 세그먼트만 사용
- 최종 경로는 항상 assets_path 하위 (resolve_within으로 재확인)
- uxml/uss/cs의 식별자는 모두 같은 stem에서 결정론적으로 파생
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from src.domain.errors import InvalidParameterError

# 드라이브 접두어 (C:, d:)
DRIVE_PREFIX_PATTERN = re.compile(r"^[A-Za-z]:")

# 파일명에 허용하지 않는 문자 (영숫자, 공백, _ . - 외 전부)
FORBIDDEN_CHARS_PATTERN = re.compile(r"[^A-Za-z0-9 _.\-]")

WHITESPACE_PATTERN = re.compile(r"\s+")

# 단어 분리: 약어(UI), 대문자 시작 단어, 숫자
WORD_PATTERN = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|\d+")


# =============================================================================
# Sanitizer
# =============================================================================


def sanitize_name(name: Any, extension: str | None = None) -> str:
    """
    논리 이름 → 안전한 파일 stem.

    - "../../Foo" → "Foo"
    - "C:\\Temp\\Foo.uxml" → "Foo"
    - "Foo.uxml" (extension="uxml") → "Foo"
    - "Foo" → "Foo" (멱등)

    Args:
        name: 사용자 입력 이름
        extension: 대상 kind의 확장자 (중복 포함 시 제거)

    Returns:
        파일 stem

    Raises:
        InvalidParameterError: 문자열 아님, 빈 값, 정리 후 빈 값
    """
    if not isinstance(name, str):
        raise InvalidParameterError(
            "name must be a string",
            name_type=type(name).__name__,
        )

    raw = name.strip()
    if not raw:
        raise InvalidParameterError("name cannot be empty")

    # 경로 구분자 통일 + 드라이브 제거
    normalized = DRIVE_PREFIX_PATTERN.sub("", raw.replace("\\", "/"))

    # ".", "..", 빈 세그먼트(루트 접두어 포함) 제거 후 마지막 세그먼트만 사용
    segments = [s for s in normalized.split("/") if s.strip() not in ("", ".", "..")]
    if not segments:
        raise InvalidParameterError(
            f"name '{name}' does not contain a usable file name",
            name=name,
        )

    stem = FORBIDDEN_CHARS_PATTERN.sub("", segments[-1])
    stem = WHITESPACE_PATTERN.sub(" ", stem)

    # 끝의 점/공백과 확장자를 번갈아 제거 → 고정점까지 (멱등)
    previous = None
    while stem != previous:
        previous = stem
        stem = stem.strip(" .")
        if extension:
            stem = strip_extension(stem, extension)

    if not any(c.isalnum() for c in stem):
        raise InvalidParameterError(
            f"name '{name}' is empty after sanitizing",
            name=name,
        )

    return stem


def strip_extension(stem: str, extension: str) -> str:
    """중복 포함된 확장자 제거 (대소문자 무시, 반복 제거)."""
    suffix = "." + extension.lstrip(".").lower()
    while stem.lower().endswith(suffix):
        stem = stem[: -len(suffix)].rstrip()
    return stem


def resolve_within(base: Path, *parts: str) -> Path:
    """
    base 하위 경로로 결합 + 탈출 검사.

    Args:
        base: 기준 폴더 (assets_path)
        *parts: 하위 경로 조각

    Returns:
        resolve된 절대 경로

    Raises:
        InvalidParameterError: 결과가 base 밖
    """
    base_resolved = Path(base).resolve()
    target = base_resolved.joinpath(*parts).resolve()

    if not target.is_relative_to(base_resolved):
        raise InvalidParameterError(
            f"path escapes the assets folder: {'/'.join(parts)}",
            base=str(base_resolved),
            target=str(target),
        )

    return target


# =============================================================================
# Identifier Derivation
# =============================================================================


def split_words(stem: str) -> list[str]:
    """"TestButton" → ["Test", "Button"], "close-button" → ["close", "button"]."""
    return WORD_PATTERN.findall(stem)


def type_name(stem: str) -> str:
    """C# 타입 이름 (PascalCase). 숫자로 시작하면 "_" 접두어."""
    name = "".join(w[:1].upper() + w[1:] for w in split_words(stem))
    if name[:1].isdigit():
        name = "_" + name
    return name


def css_name(stem: str) -> str:
    """USS 클래스 이름 (kebab-case)."""
    return "-".join(w.lower() for w in split_words(stem))


def display_title(stem: str) -> str:
    """사람이 읽는 제목. "TestWindow" → "Test Window"."""
    return " ".join(w[:1].upper() + w[1:] for w in split_words(stem))


@dataclass(frozen=True)
class UINames:
    """한 stem에서 파생된 식별자 묶음 (uxml/uss/cs 공통)."""

    stem: str
    type_name: str
    css_name: str
    title: str

    @property
    def root_name(self) -> str:
        """루트 컨테이너 name (uxml) = 스크립트 Q() 대상."""
        return f"{self.css_name}-root"

    @property
    def var_prefix(self) -> str:
        """USS custom property 접두어."""
        return f"--{self.css_name}"

    @classmethod
    def from_stem(cls, stem: str) -> "UINames":
        return cls(
            stem=stem,
            type_name=type_name(stem),
            css_name=css_name(stem),
            title=display_title(stem),
        )
