"""
项目搜索服务

按关键词搜索模组，并用游戏版本与加载器作为 facets 过滤。
"""

from typing import List

from modgrab.models import Project
from modgrab.services.api_client import ModrinthClient


def build_facets(version: str, loader: str) -> List[List[str]]:
    """
    构建搜索 facets

    外层列表之间为 AND，内层列表内部为 OR；这里每组只有一项，
    即同时要求版本与加载器匹配。
    """
    return [[f"versions:{version}"], [f"categories:{loader}"]]


class ProjectSearcher:
    """项目搜索器"""

    def __init__(self, client: ModrinthClient):
        self.client = client

    async def search(self, query: str, version: str, loader: str) -> List[Project]:
        """
        搜索项目

        Args:
            query: 搜索关键词
            version: Minecraft 版本
            loader: 模组加载器

        Returns:
            按相关度排序的项目列表，可能为空
        """
        return await self.client.search_projects(query, build_facets(version, loader))
