"""
ModGrab - 从 Modrinth 搜索并下载 Minecraft 模组
"""

from modgrab.__version__ import __version__, __author__

__all__ = ["__version__", "__author__"]
