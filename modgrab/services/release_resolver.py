"""
发布版本解析服务

从项目的发布版本列表中找出匹配游戏版本与加载器的 .jar 文件。
"""

from typing import Iterable

from loguru import logger

from modgrab.models import Link, ReleaseCandidate
from modgrab.services.api_client import ModrinthClient
from modgrab.exceptions import NoDownloadableFileError


def find_link(
    candidates: Iterable[ReleaseCandidate],
    version: str,
    loader: str,
) -> Link:
    """
    按顺序查找第一个可下载的发布版本

    匹配版本与加载器但没有 .jar 文件的发布版本会被跳过，继续检查下一个。

    Raises:
        NoDownloadableFileError: 没有任何发布版本满足条件
    """
    for release in candidates:
        if not release.supports(version, loader):
            continue
        file = release.mod_package()
        if file is None:
            logger.debug(f"跳过没有 .jar 文件的发布版本: {release.game_versions}")
            continue
        return Link.from_release(release, file)
    raise NoDownloadableFileError(
        "no downloadable package found",
        context={"version": version, "loader": loader},
    )


class ReleaseResolver:
    """发布版本解析器"""

    def __init__(self, client: ModrinthClient):
        self.client = client

    async def resolve_download(self, project_id: str, version: str, loader: str) -> Link:
        """
        解析下载链接

        Args:
            project_id: 项目 ID
            version: Minecraft 版本
            loader: 模组加载器

        Returns:
            最新的匹配发布版本对应的 Link
        """
        releases = await self.client.get_project_versions(project_id)
        logger.debug(f"项目 {project_id} 共有 {len(releases)} 个发布版本")
        try:
            return find_link(releases, version, loader)
        except NoDownloadableFileError as e:
            e.context["project_id"] = project_id
            raise
