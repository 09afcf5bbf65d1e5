"""Domain layer: errors, constants and schemas."""

from .errors import (
    AssetNotFoundError,
    ErrorCodes,
    FileOperationError,
    InvalidParameterError,
    InvalidProjectError,
    ProjectNotSetError,
    ScaffoldError,
)
from .schemas import (
    AssetKind,
    GeneratedAsset,
    ProjectContext,
    SidecarMetadata,
    TemplateVariant,
    UIComponent,
)

__all__ = [
    # errors
    "ScaffoldError",
    "ProjectNotSetError",
    "InvalidProjectError",
    "InvalidParameterError",
    "AssetNotFoundError",
    "FileOperationError",
    "ErrorCodes",
    # schemas
    "AssetKind",
    "TemplateVariant",
    "ProjectContext",
    "GeneratedAsset",
    "SidecarMetadata",
    "UIComponent",
]
