"""
API 数据模型

定义 Modrinth API 相关的数据类，包括游戏版本、项目、发布版本与下载链接。
"""

from dataclasses import dataclass, field
from typing import Optional, List, Tuple

MOD_PACKAGE_EXTENSION = ".jar"


@dataclass(frozen=True)
class GameVersion:
    """Minecraft 游戏版本标签"""

    version: str
    version_type: str

    @property
    def is_release(self) -> bool:
        return self.version_type == "release"

    @classmethod
    def from_modrinth(cls, data: dict) -> "GameVersion":
        return cls(version=data["version"], version_type=data["version_type"])


@dataclass(frozen=True)
class Project:
    """搜索结果中的项目"""

    project_id: str
    title: str

    def __str__(self) -> str:
        return self.title

    @classmethod
    def from_modrinth(cls, data: dict) -> "Project":
        return cls(project_id=data["project_id"], title=data["title"])


@dataclass(frozen=True)
class ProjectInfo:
    """
    模组项目信息。
    """

    title: str

    @classmethod
    def from_modrinth(cls, data: dict) -> "ProjectInfo":
        return cls(title=data["title"])


@dataclass(frozen=True)
class FileInfo:
    """文件信息"""

    url: str
    filename: str

    @property
    def is_mod_package(self) -> bool:
        return self.filename.endswith(MOD_PACKAGE_EXTENSION)


@dataclass(frozen=True)
class DependencyInfo:
    """依赖信息"""

    project_id: Optional[str]
    dependency_type: str  # required, optional, incompatible, embedded


@dataclass
class ReleaseCandidate:
    """
    项目的一个发布版本。

    对应 Modrinth ``/project/{id}/version`` 返回列表中的一项，只保留解析下载
    链接所需的字段。
    """

    game_versions: List[str]
    loaders: List[str]
    files: List[FileInfo]
    dependencies: List[DependencyInfo] = field(default_factory=list)

    def supports(self, game_version: str, loader: str) -> bool:
        """是否同时支持指定的游戏版本和加载器"""
        return game_version in self.game_versions and loader in self.loaders

    def mod_package(self) -> Optional[FileInfo]:
        """返回第一个 .jar 文件"""
        for file in self.files:
            if file.is_mod_package:
                return file
        return None

    @classmethod
    def from_modrinth(cls, data: dict) -> "ReleaseCandidate":
        """
        将 Modrinth API 返回的版本信息转换为 ReleaseCandidate 对象。

        ``dependencies`` 字段可以缺失或为 null，缺失的 ``project_id`` 记为 None。
        """
        files = [
            FileInfo(url=file["url"], filename=file["filename"])
            for file in data["files"]
        ]

        dependencies = [
            DependencyInfo(
                project_id=dep.get("project_id"),
                dependency_type=dep["dependency_type"],
            )
            for dep in data.get("dependencies") or []
        ]

        return cls(
            game_versions=list(data["game_versions"]),
            loaders=list(data["loaders"]),
            files=files,
            dependencies=dependencies,
        )


@dataclass(frozen=True)
class Dependency:
    """带有项目 ID 的依赖引用"""

    project_id: str
    dependency_type: str


@dataclass(frozen=True)
class Link:
    """最终解析出的下载文件"""

    url: str
    filename: str
    dependencies: Tuple[Dependency, ...] = ()

    @classmethod
    def from_release(cls, release: ReleaseCandidate, file: FileInfo) -> "Link":
        # 没有项目 ID 的依赖之后无法查询名称
        dependencies = tuple(
            Dependency(project_id=dep.project_id, dependency_type=dep.dependency_type)
            for dep in release.dependencies
            if dep.project_id
        )
        return cls(url=file.url, filename=file.filename, dependencies=dependencies)


@dataclass(frozen=True)
class NamedDependency:
    """已解析出名称的依赖，仅用于显示"""

    title: str
    dependency_type: str

    def __str__(self) -> str:
        return f"{self.title} ({self.dependency_type})"
