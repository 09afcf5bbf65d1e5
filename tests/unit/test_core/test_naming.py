"""
test_naming.py - 이름 정리 + 식별자 파생 테스트

DoD:
- 경로 탈출 시도("../../etc/passwd")도 assets 하위 stem으로 정리
- 확장자 중복 제거는 멱등 ("Foo.uxml" == "Foo")
- 빈 값/잘못된 타입만 InvalidParameterError
- uxml/uss/cs 식별자는 같은 stem에서 결정론적으로 파생
"""

from pathlib import Path

import pytest

from src.core.naming import (
    UINames,
    css_name,
    display_title,
    resolve_within,
    sanitize_name,
    split_words,
    strip_extension,
    type_name,
)
from src.domain.errors import InvalidParameterError

# =============================================================================
# sanitize_name 테스트
# =============================================================================


class TestSanitizeName:
    """sanitize_name 함수 테스트."""

    def test_plain_name_unchanged(self):
        assert sanitize_name("MainMenu") == "MainMenu"

    def test_idempotent(self):
        """정리 결과를 다시 정리해도 같음."""
        once = sanitize_name("../UI/Main Menu!.uxml", "uxml")
        assert sanitize_name(once, "uxml") == once

    def test_parent_traversal_removed(self):
        """"../" 세그먼트 제거 → 마지막 세그먼트만."""
        assert sanitize_name("../../etc/passwd") == "passwd"
        assert sanitize_name("../../../Foo") == "Foo"

    def test_backslash_and_drive_removed(self):
        assert sanitize_name("C:\\Temp\\Foo.uxml", "uxml") == "Foo"
        assert sanitize_name("d:Foo") == "Foo"

    def test_copied_asset_path(self):
        """복사해 온 에셋 경로 허용."""
        assert sanitize_name("Assets/UI/Styles/Theme.uss", "uss") == "Theme"

    def test_absolute_path(self):
        assert sanitize_name("/etc/passwd") == "passwd"

    def test_extension_stripped_case_insensitive(self):
        assert sanitize_name("Foo.UXML", "uxml") == "Foo"
        assert sanitize_name("Foo.uss", ".uss") == "Foo"

    def test_repeated_extension_stripped(self):
        assert sanitize_name("Foo.uxml.uxml", "uxml") == "Foo"

    def test_extension_with_trailing_dot_or_space(self):
        """확장자 뒤의 점/공백 → 확장자도 제거."""
        assert sanitize_name("Foo.uxml.", "uxml") == "Foo"
        assert sanitize_name("Foo.uxml ", "uxml") == "Foo"
        assert sanitize_name("Foo.uxml..uxml", "uxml") == "Foo"
        assert sanitize_name("Foo.uxml. .USS.", "uss") == "Foo.uxml"

    @pytest.mark.parametrize(
        "name",
        ["Foo.uxml.", "Foo.uxml ", "Foo. .uxml", "Foo.uxml..uxml.", "a/b/Main Menu.uxml. "],
    )
    def test_idempotent_with_trailing_noise(self, name: str):
        once = sanitize_name(name, "uxml")

        assert not once.lower().endswith(".uxml")
        assert sanitize_name(once, "uxml") == once

    def test_other_extension_kept(self):
        """다른 kind의 확장자는 이름의 일부."""
        assert sanitize_name("Foo.uss", "uxml") == "Foo.uss"

    def test_forbidden_characters_removed(self):
        assert sanitize_name('Main<Menu>:"|?*') == "MainMenu"

    def test_whitespace_collapsed(self):
        assert sanitize_name("  Main   Menu  ") == "Main Menu"

    def test_trailing_dots_removed(self):
        assert sanitize_name("Foo...") == "Foo"

    def test_empty_name_rejected(self):
        with pytest.raises(InvalidParameterError) as exc_info:
            sanitize_name("")

        assert exc_info.value.code == "INVALID_PARAMETER"

    def test_whitespace_only_rejected(self):
        with pytest.raises(InvalidParameterError):
            sanitize_name("   ")

    def test_non_string_rejected(self):
        for value in (None, 123, ["Foo"]):
            with pytest.raises(InvalidParameterError):
                sanitize_name(value)

    def test_only_traversal_rejected(self):
        with pytest.raises(InvalidParameterError):
            sanitize_name("../..")

    def test_only_symbols_rejected(self):
        with pytest.raises(InvalidParameterError):
            sanitize_name("!!!@@@")

    def test_extension_only_rejected(self):
        with pytest.raises(InvalidParameterError):
            sanitize_name(".uxml", "uxml")


class TestStripExtension:

    def test_no_extension(self):
        assert strip_extension("Foo", "cs") == "Foo"

    def test_strip(self):
        assert strip_extension("Foo.cs", "cs") == "Foo"
        assert strip_extension("Foo.Cs.cs", ".cs") == "Foo"


# =============================================================================
# resolve_within 테스트
# =============================================================================


class TestResolveWithin:
    """경로 봉쇄 테스트."""

    def test_child_path(self, tmp_path: Path):
        result = resolve_within(tmp_path, "UI", "Foo.uxml")
        assert result == (tmp_path / "UI" / "Foo.uxml").resolve()

    def test_base_itself_allowed(self, tmp_path: Path):
        assert resolve_within(tmp_path) == tmp_path.resolve()

    def test_escape_rejected(self, tmp_path: Path):
        with pytest.raises(InvalidParameterError):
            resolve_within(tmp_path, "..", "outside.uxml")

    def test_absolute_part_rejected(self, tmp_path: Path):
        with pytest.raises(InvalidParameterError):
            resolve_within(tmp_path / "Assets", "/etc/passwd")

    def test_sanitized_traversal_stays_inside(self, tmp_path: Path):
        """정리된 이름은 항상 base 하위."""
        stem = sanitize_name("../../../../etc/passwd", "uxml")
        result = resolve_within(tmp_path, "UI", f"{stem}.uxml")
        assert result.is_relative_to(tmp_path.resolve())
        assert result.name == "passwd.uxml"


# =============================================================================
# 식별자 파생 테스트
# =============================================================================


class TestIdentifiers:
    """type_name / css_name / title 파생."""

    def test_split_words(self):
        assert split_words("TestButton") == ["Test", "Button"]
        assert split_words("main_menu") == ["main", "menu"]
        assert split_words("HUDPanel2") == ["HUD", "Panel", "2"]

    def test_type_name(self):
        assert type_name("TestButton") == "TestButton"
        assert type_name("main menu") == "MainMenu"
        assert type_name("settings-panel") == "SettingsPanel"

    def test_type_name_leading_digit(self):
        assert type_name("3D View") == "_3DView"

    def test_css_name(self):
        assert css_name("TestButton") == "test-button"
        assert css_name("Main Menu") == "main-menu"

    def test_display_title(self):
        assert display_title("TestWindow") == "Test Window"
        assert display_title("main_menu") == "Main Menu"

    def test_ui_names(self):
        names = UINames.from_stem("TestWindow")

        assert names.stem == "TestWindow"
        assert names.type_name == "TestWindow"
        assert names.css_name == "test-window"
        assert names.root_name == "test-window-root"
        assert names.var_prefix == "--test-window"

    def test_ui_names_deterministic(self):
        assert UINames.from_stem("Settings Panel") == UINames.from_stem("Settings Panel")
