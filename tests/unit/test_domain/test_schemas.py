"""
test_schemas.py - 도메인 타입 + 에러 테스트
"""

from pathlib import Path

import pytest

from src.domain.errors import (
    AssetNotFoundError,
    ErrorCodes,
    FileOperationError,
    InvalidParameterError,
    InvalidProjectError,
    ProjectNotSetError,
    ScaffoldError,
)
from src.domain.schemas import AssetKind, ProjectContext, TemplateVariant

# =============================================================================
# Enums
# =============================================================================


class TestAssetKind:

    def test_extensions(self):
        assert AssetKind.MARKUP.extension == "uxml"
        assert AssetKind.STYLESHEET.extension == "uss"
        assert AssetKind.BEHAVIOR_SCRIPT.extension == "cs"

    def test_labels(self):
        assert AssetKind.MARKUP.label == "UXML"
        assert AssetKind.BEHAVIOR_SCRIPT.label == "C# script"

    def test_str_value(self):
        assert AssetKind("stylesheet") is AssetKind.STYLESHEET


class TestTemplateVariantParse:

    def test_known(self):
        assert TemplateVariant.parse("window") is TemplateVariant.WINDOW
        assert TemplateVariant.parse(" Modal ") is TemplateVariant.MODAL

    def test_passthrough(self):
        assert TemplateVariant.parse(TemplateVariant.FORM) is TemplateVariant.FORM

    def test_unknown(self):
        assert TemplateVariant.parse("carousel") is None
        assert TemplateVariant.parse(None) is None
        assert TemplateVariant.parse(42) is None


# =============================================================================
# ProjectContext
# =============================================================================


class TestProjectContext:
    """ProjectContext.from_root 테스트."""

    def test_from_root(self, unity_project: Path):
        context = ProjectContext.from_root(unity_project)

        assert context.root_path == unity_project.resolve()
        assert context.assets_path == unity_project.resolve() / "Assets"
        assert context.scripts_path == unity_project.resolve() / "Assets" / "Scripts"

    def test_missing_root(self, tmp_path: Path):
        with pytest.raises(InvalidProjectError) as exc_info:
            ProjectContext.from_root(tmp_path / "nope")

        assert exc_info.value.code == "INVALID_PROJECT"

    def test_missing_assets(self, tmp_path: Path):
        with pytest.raises(InvalidProjectError):
            ProjectContext.from_root(tmp_path)

    def test_immutable(self, project_context: ProjectContext):
        with pytest.raises(AttributeError):
            project_context.root_path = Path("/")

    def test_relative(self, project_context: ProjectContext):
        path = project_context.assets_path / "UI" / "Styles" / "Foo.uss"
        assert project_context.relative(path) == "UI/Styles/Foo.uss"

    def test_relative_outside_assets_rejected(self, project_context: ProjectContext):
        with pytest.raises(InvalidParameterError) as exc_info:
            project_context.relative(project_context.root_path / "ProjectSettings" / "x.asset")

        assert exc_info.value.code == "INVALID_PARAMETER"

    def test_relative_traversal_rejected(self, project_context: ProjectContext):
        """"../"로 assets 밖을 가리키는 경로도 거부."""
        with pytest.raises(InvalidParameterError):
            project_context.relative(project_context.assets_path / ".." / "Outside.uxml")

    def test_direct_construction_normalized(self, unity_project: Path, monkeypatch):
        """from_root를 거치지 않은 상대 경로 컨텍스트도 절대 경로로 정규화."""
        monkeypatch.chdir(unity_project.parent)
        root = Path(unity_project.name)

        context = ProjectContext(
            root_path=root,
            assets_path=root / "Assets",
            scripts_path=root / "Assets" / "Scripts",
        )

        assert context.root_path == unity_project.resolve()
        assert context.assets_path.is_absolute()
        assert context.relative(unity_project / "Assets" / "UI" / "Foo.uxml") == "UI/Foo.uxml"


# =============================================================================
# Errors
# =============================================================================


class TestErrors:

    def test_project_not_set_message(self):
        error = ProjectNotSetError()

        assert error.code == ErrorCodes.PROJECT_NOT_SET
        assert error.message == "Unity project not set. Use set_project first."
        assert str(error) == "[PROJECT_NOT_SET] Unity project not set. Use set_project first."

    def test_not_found_is_builtin_file_not_found(self):
        error = AssetNotFoundError("Foo.uxml", "UXML")

        assert isinstance(error, ScaffoldError)
        assert isinstance(error, FileNotFoundError)
        assert error.message == "UXML Foo.uxml not found."
        assert error.code == "FILE_NOT_FOUND"

    def test_to_dict(self):
        error = FileOperationError("Failed to write", path="UI/Foo.uxml")

        assert error.to_dict() == {
            "code": "FILE_OPERATION_FAILED",
            "message": "Failed to write",
            "path": "UI/Foo.uxml",
        }
