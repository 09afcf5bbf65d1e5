"""
Pytest fixtures for the UI scaffolder tests.

테스트 구성:
- 정상 케이스, 잘못된 입력 케이스, I/O 실패 케이스 분리
- 실제 파일시스템(tmp_path) 사용, 모의 객체 최소화
"""

from pathlib import Path

import pytest
import yaml

from src.domain.schemas import ProjectContext
from src.templates.manager import UIAssetManager

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def project_root() -> Path:
    """저장소 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def default_config(default_config_path: Path) -> dict:
    """기본 설정 로드."""
    with open(default_config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


# =============================================================================
# Unity Project Fixtures
# =============================================================================


@pytest.fixture
def unity_project(tmp_path: Path) -> Path:
    """
    빈 Unity 프로젝트.

    포함:
    - Assets/
    - ProjectSettings/ (엔진 프로젝트 흉내, 사용하지 않음)
    """
    root = tmp_path / "UnityProject"
    (root / "Assets").mkdir(parents=True)
    (root / "ProjectSettings").mkdir()
    return root


@pytest.fixture
def assets_dir(unity_project: Path) -> Path:
    return unity_project / "Assets"


@pytest.fixture
def project_context(unity_project: Path) -> ProjectContext:
    return ProjectContext.from_root(unity_project)


@pytest.fixture
def manager(project_context: ProjectContext) -> UIAssetManager:
    """프로젝트가 등록된 UIAssetManager."""
    return UIAssetManager(project_context)


@pytest.fixture
def script_sidecar_manager(project_context: ProjectContext) -> UIAssetManager:
    """스크립트 .meta까지 쓰는 UIAssetManager."""
    return UIAssetManager(project_context, {"meta": {"script_sidecars": True}})
