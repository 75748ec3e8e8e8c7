"""
版本解析服务

在未指定 Minecraft 版本时，获取最新的正式版标签。
"""

from typing import Iterable

from loguru import logger

from modgrab.models import GameVersion
from modgrab.services.api_client import ModrinthClient
from modgrab.exceptions import NoReleaseVersionError


def first_release(versions: Iterable[GameVersion]) -> str:
    """
    返回第一个正式版的版本标签

    Raises:
        NoReleaseVersionError: 列表中没有 release 类型的版本
    """
    for version in versions:
        if version.is_release:
            return version.version
    raise NoReleaseVersionError("no stable release version found")


class VersionResolver:
    """版本解析器"""

    def __init__(self, client: ModrinthClient):
        self.client = client

    async def latest_release_version(self) -> str:
        """获取最新的 Minecraft 正式版"""
        versions = await self.client.get_game_versions()
        logger.debug(f"获取到 {len(versions)} 个游戏版本标签")
        return first_release(versions)
