"""
Domain Constants: 스캐폴더 전역 상수.

프로젝트 디렉토리 구조, 확장자, .meta 포맷 등 시스템 전반에서 사용되는 값들.
default.yaml로 오버라이드 가능한 값은 DEFAULT_CONFIG에도 등록.
"""

# =============================================================================
# Project Layout (프로젝트 디렉토리 구조)
# =============================================================================
# <project_root>/
# └── Assets/
#     ├── UI/                        # markup (.uxml)
#     │   ├── Styles/                # stylesheet (.uss)
#     │   └── Components/<Name>/     # uxml + uss + cs 묶음
#     └── Scripts/UI/                # 단독 behavior script (.cs)

ASSETS_DIR = "Assets"
SCRIPTS_DIR = "Scripts"

UI_DIR = "UI"
UI_STYLES_DIR = "UI/Styles"
UI_COMPONENTS_DIR = "UI/Components"
SCRIPTS_UI_DIR = "Scripts/UI"

# =============================================================================
# File Extensions
# =============================================================================

MARKUP_EXTENSION = "uxml"
STYLESHEET_EXTENSION = "uss"
SCRIPT_EXTENSION = "cs"

# =============================================================================
# Sidecar (.meta) Format
# =============================================================================
# fileFormatVersion: 2
# identity: <32 hex>
# importer: ScriptedImporter

META_SUFFIX = ".meta"
META_FILE_FORMAT_VERSION = 2
META_IDENTITY_KEY = "identity"
META_IDENTITY_ALIASES = ("identity", "guid")  # guid = 엔진이 직접 쓴 .meta
META_IMPORTER_KEY = "importer"
META_VERSION_KEY = "fileFormatVersion"

IDENTITY_LENGTH = 32

DEFAULT_IMPORTERS = {
    "markup": "ScriptedImporter",
    "stylesheet": "ScriptedImporter",
    "behavior_script": "MonoImporter",
}

# =============================================================================
# Report Messages
# =============================================================================

EMPTY_LIST_MESSAGE = "No {kind} files found."

# =============================================================================
# Default Config (default.yaml 없을 때 기본값)
# =============================================================================

DEFAULT_CONFIG = {
    "paths": {
        "ui_dir": UI_DIR,
        "styles_dir": UI_STYLES_DIR,
        "components_dir": UI_COMPONENTS_DIR,
        "scripts_ui_dir": SCRIPTS_UI_DIR,
    },
    "meta": {
        "suffix": META_SUFFIX,
        "file_format_version": META_FILE_FORMAT_VERSION,
        "script_sidecars": False,  # 스크립트 .meta는 엔진 import 시 생성
        "importers": dict(DEFAULT_IMPORTERS),
    },
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
    },
}
