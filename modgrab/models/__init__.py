"""
ModGrab 数据模型包

包含配置模型和 API 模型定义。
"""

from modgrab.models.config import (
    ClientConfig,
    ModGrabConfig,
    MODRINTH_BASE_URL,
    DEFAULT_LOADER,
    DEFAULT_TIMEOUT,
)
from modgrab.models.api import (
    GameVersion,
    Project,
    ProjectInfo,
    FileInfo,
    DependencyInfo,
    ReleaseCandidate,
    Dependency,
    Link,
    NamedDependency,
)

__all__ = [
    # 配置模型
    "ClientConfig",
    "ModGrabConfig",
    "MODRINTH_BASE_URL",
    "DEFAULT_LOADER",
    "DEFAULT_TIMEOUT",
    # API 模型
    "GameVersion",
    "Project",
    "ProjectInfo",
    "FileInfo",
    "DependencyInfo",
    "ReleaseCandidate",
    "Dependency",
    "Link",
    "NamedDependency",
]
