"""
API 客户端

封装 Modrinth v2 API 的 JSON 接口，所有请求共用同一个 aiohttp session。
"""

import asyncio
import json
from typing import Any, Callable, List, Optional, TypeVar

import aiohttp
from loguru import logger

from modgrab.models import (
    ClientConfig,
    GameVersion,
    Project,
    ProjectInfo,
    ReleaseCandidate,
)
from modgrab.exceptions import (
    APIConnectionError,
    APIResponseError,
    error_for_status,
)

T = TypeVar("T")


def _parse(factory: Callable[[dict], T], data: Any, what: str) -> T:
    try:
        return factory(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise APIResponseError(
            f"{what} 的响应结构不符合预期: {e!r}", context={"payload": data}
        ) from e


def _parse_list(factory: Callable[[dict], T], data: Any, what: str) -> List[T]:
    if not isinstance(data, list):
        raise APIResponseError(
            f"{what} 的响应应为列表，实际为 {type(data).__name__}"
        )
    return [_parse(factory, item, what) for item in data]


class ModrinthClient:
    """Modrinth API 客户端"""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.config = config or ClientConfig()
        self._session = session
        self._owned_session = session is None

    @property
    def session(self) -> aiohttp.ClientSession:
        """获取或创建 aiohttp session"""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
            )
        return self._session

    def url(self, endpoint: str) -> str:
        return f"{self.config.base_url}{endpoint}"

    async def _request(self, endpoint: str, params: Optional[dict] = None) -> Any:
        """发送 API 请求并返回解析后的 JSON"""
        url = self.url(endpoint)
        logger.debug(f"GET {url} params={params}")
        try:
            async with self.session.get(url, params=params) as response:
                if response.status != 200:
                    raise error_for_status(
                        response.status,
                        f"API 请求失败 (状态码: {response.status})",
                        response=response,
                    )
                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    raise APIResponseError(
                        f"无法解析 {url} 返回的 JSON: {e}", response=response
                    ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise APIConnectionError(
                f"请求 {url} 失败: {e!r}", context={"url": url}
            ) from e

    async def get_game_versions(self) -> List[GameVersion]:
        """获取全部游戏版本标签（按 API 返回顺序）"""
        response = await self._request("/tag/game_version")
        return _parse_list(GameVersion.from_modrinth, response, "游戏版本列表")

    async def search_projects(self, query: str, facets: List[List[str]]) -> List[Project]:
        """按关键词与 facets 搜索项目"""
        params = {"query": query, "facets": json.dumps(facets)}
        response = await self._request("/search", params)
        if not isinstance(response, dict) or "hits" not in response:
            raise APIResponseError("搜索结果缺少 hits 字段", context={"payload": response})
        return _parse_list(Project.from_modrinth, response["hits"], "搜索结果")

    async def get_project_versions(self, idx: str) -> List[ReleaseCandidate]:
        """获取项目的全部发布版本（最新的在前）"""
        response = await self._request(f"/project/{idx}/version")
        return _parse_list(ReleaseCandidate.from_modrinth, response, "项目版本列表")

    async def get_project(self, idx: str) -> ProjectInfo:
        """获取项目信息"""
        response = await self._request(f"/project/{idx}")
        return _parse(ProjectInfo.from_modrinth, response, "项目信息")

    async def close(self):
        """关闭客户端"""
        if self._owned_session and self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        """异步上下文管理器入口"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """异步上下文管理器出口"""
        await self.close()
