"""
配置模型

定义 HTTP 客户端配置与运行配置。
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from modgrab.__version__ import __version__
from modgrab.exceptions import ConfigError

MODRINTH_BASE_URL = "https://api.modrinth.com/v2"
DEFAULT_TIMEOUT = 9.0
DEFAULT_LOADER = "fabric"
DEFAULT_USER_AGENT = f"modgrab/{__version__} (Minecraft mod downloader)"


@dataclass(frozen=True)
class ClientConfig:
    """HTTP 客户端配置，进程启动时创建，之后只读"""

    base_url: str = MODRINTH_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClientConfig":
        timeout = data.get("timeout", DEFAULT_TIMEOUT)
        try:
            timeout = float(timeout)
        except (TypeError, ValueError):
            raise ConfigError(f"无效的超时时间: {timeout!r}")
        if timeout <= 0:
            raise ConfigError(f"超时时间必须大于 0: {timeout}")

        return cls(
            base_url=str(data.get("base_url", MODRINTH_BASE_URL)).rstrip("/"),
            timeout=timeout,
            user_agent=str(data.get("user_agent", DEFAULT_USER_AGENT)),
        )


@dataclass
class ModGrabConfig:
    """运行配置"""

    loader: str = DEFAULT_LOADER
    output_dir: str = "."
    client: ClientConfig = field(default_factory=ClientConfig)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ModGrabConfig":
        """从配置字典创建，缺失的字段使用默认值"""
        data = data or {}
        api = data.get("api", {})
        if not isinstance(api, dict):
            raise ConfigError("配置项 api 必须是一个表")

        return cls(
            loader=str(data.get("loader") or DEFAULT_LOADER).lower(),
            output_dir=str(data.get("output_dir") or "."),
            client=ClientConfig.from_dict(api),
        )
