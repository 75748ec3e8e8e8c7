"""
依赖名称服务

逐个查询依赖项目的显示名称。
"""

from typing import Iterable, List

from loguru import logger

from modgrab.models import Dependency, NamedDependency
from modgrab.services.api_client import ModrinthClient


class DependencyNamer:
    """依赖名称解析器"""

    def __init__(self, client: ModrinthClient):
        self.client = client

    async def project_title(self, project_id: str) -> str:
        """获取项目的显示名称"""
        project = await self.client.get_project(project_id)
        return project.title

    async def name_all(self, dependencies: Iterable[Dependency]) -> List[NamedDependency]:
        """按输入顺序依次解析依赖名称"""
        named = []
        for dep in dependencies:
            logger.info(f"获取依赖信息，项目 ID: {dep.project_id}")
            title = await self.project_title(dep.project_id)
            named.append(NamedDependency(title=title, dependency_type=dep.dependency_type))
        return named
