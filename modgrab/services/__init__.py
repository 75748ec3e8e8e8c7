"""
ModGrab 服务层

包含业务逻辑服务：API 客户端、版本解析、项目搜索、发布版本解析、依赖名称。
"""

from modgrab.services.api_client import ModrinthClient
from modgrab.services.version_resolver import VersionResolver, first_release
from modgrab.services.project_searcher import ProjectSearcher, build_facets
from modgrab.services.release_resolver import ReleaseResolver, find_link
from modgrab.services.dependency_resolver import DependencyNamer

__all__ = [
    "ModrinthClient",
    "VersionResolver",
    "first_release",
    "ProjectSearcher",
    "build_facets",
    "ReleaseResolver",
    "find_link",
    "DependencyNamer",
]
