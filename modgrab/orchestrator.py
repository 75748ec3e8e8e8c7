"""
主协调器

串联版本解析、项目搜索、发布版本解析、下载与依赖名称查询。
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from loguru import logger

from modgrab.models import ModGrabConfig, Link, NamedDependency, Project
from modgrab.services import (
    ModrinthClient,
    VersionResolver,
    ProjectSearcher,
    ReleaseResolver,
    DependencyNamer,
)
from modgrab.download import ArtifactFetcher
from modgrab.exceptions import NoMatchingProjectsError

# 输入为显示字符串列表，返回选中的下标；取消时抛出异常
Selector = Callable[[List[str]], int]


@dataclass
class DownloadResult:
    """一次运行的结果"""

    project: Project
    game_version: str
    loader: str
    link: Link
    path: str
    dependencies: List[NamedDependency] = field(default_factory=list)


class ModGrabOrchestrator:
    """ModGrab 主协调器"""

    def __init__(
        self,
        config: ModGrabConfig,
        selector: Selector,
        client: Optional[ModrinthClient] = None,
    ):
        self.config = config
        self.selector = selector
        self.client = client or ModrinthClient(config.client)
        self.version_resolver = VersionResolver(self.client)
        self.searcher = ProjectSearcher(self.client)
        self.release_resolver = ReleaseResolver(self.client)
        self.fetcher = ArtifactFetcher(self.client)
        self.dep_namer = DependencyNamer(self.client)

    async def run(
        self,
        query: str,
        version: Optional[str] = None,
        loader: Optional[str] = None,
        output_dir: Optional[str] = None,
    ) -> DownloadResult:
        """运行完整的下载流程"""
        loader = (loader or self.config.loader).lower()
        output_dir = output_dir or self.config.output_dir

        try:
            if not version:
                logger.info("正在获取最新的 Minecraft 版本...")
                version = await self.version_resolver.latest_release_version()
                logger.info(f"最新正式版: {version}")

            logger.info(f"正在搜索模组 '{query}' (MC: {version}, 加载器: {loader})...")
            projects = await self.searcher.search(query, version, loader)
            if not projects:
                raise NoMatchingProjectsError(
                    f"No projects matching Minecraft version {version} were found",
                    context={"query": query, "version": version, "loader": loader},
                )

            project = self._select(projects)
            logger.info(f"正在获取 '{project.title}' 的下载地址...")
            link = await self.release_resolver.resolve_download(
                project.project_id, version, loader
            )

            logger.info(f"正在下载 {link.filename}...")
            data = await self.fetcher.fetch_bytes(link.url)
            path = await self.fetcher.save(data, link.filename, output_dir)

            dependencies = await self.dep_namer.name_all(link.dependencies)

            return DownloadResult(
                project=project,
                game_version=version,
                loader=loader,
                link=link,
                path=path,
                dependencies=dependencies,
            )
        finally:
            await self.client.close()

    def _select(self, projects: List[Project]) -> Project:
        """让用户从搜索结果中选择一个项目"""
        index = self.selector([str(project) for project in projects])
        if not 0 <= index < len(projects):
            raise IndexError(f"选择的序号超出范围: {index}")
        return projects[index]

    def get_stats(self) -> dict:
        """获取下载统计"""
        stats = self.fetcher.stats
        return {
            "completed": stats.completed,
            "bytes_downloaded": stats.bytes_downloaded,
        }
