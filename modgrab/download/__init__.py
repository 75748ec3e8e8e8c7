"""
ModGrab 下载层

负责下载模组文件并写入磁盘。
"""

from modgrab.download.manager import ArtifactFetcher, DownloadStats

__all__ = [
    "ArtifactFetcher",
    "DownloadStats",
]
