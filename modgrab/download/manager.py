"""
下载管理器

获取模组文件的完整内容并写入磁盘。
"""

import asyncio
import os
from dataclasses import dataclass

import aiohttp
import aiofiles
from loguru import logger

from modgrab.services.api_client import ModrinthClient
from modgrab.exceptions import DownloadNetworkError, DownloadFileError


@dataclass
class DownloadStats:
    """下载统计"""

    completed: int = 0
    bytes_downloaded: int = 0


class ArtifactFetcher:
    """文件下载器，复用 API 客户端的 session"""

    def __init__(self, client: ModrinthClient):
        self.client = client
        self.stats = DownloadStats()

    async def fetch_bytes(self, url: str) -> bytes:
        """
        下载文件的完整内容

        Raises:
            DownloadNetworkError: 网络错误、超时或非 200 状态码
        """
        logger.debug(f"[开始] 下载: {url}")
        try:
            async with self.client.session.get(url) as response:
                if response.status != 200:
                    raise DownloadNetworkError(
                        f"HTTP {response.status}",
                        context={"url": url, "status": response.status},
                    )
                data = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise DownloadNetworkError(
                f"下载失败: {e!r}", context={"url": url}
            ) from e

        self.stats.bytes_downloaded += len(data)
        logger.debug(f"[信息] 文件大小: {len(data) / (1024 * 1024):.2f} MB")
        return data

    async def save(self, data: bytes, filename: str, download_dir: str = ".") -> str:
        """
        将内容写入 download_dir/filename，已存在的文件会被覆盖

        Returns:
            写入的文件路径
        """
        # 只保留文件名部分，不允许写到目标目录之外
        safe_name = os.path.basename(filename.replace("\\", "/"))
        if not safe_name or safe_name in (".", ".."):
            raise DownloadFileError(
                f"无效的文件名: {filename!r}", context={"file": filename}
            )

        file_path = os.path.join(download_dir, safe_name)
        try:
            os.makedirs(download_dir, exist_ok=True)
            async with aiofiles.open(file_path, "wb") as f:
                await f.write(data)
        except OSError as e:
            raise DownloadFileError(
                f"写入文件失败: {file_path}", context={"error": str(e)}
            ) from e

        self.stats.completed += 1
        logger.success(f"[完成] '{safe_name}' 下载完成")
        return file_path
