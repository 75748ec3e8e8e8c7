"""
ModGrab 统一异常体系

提供分层的异常结构，支持错误代码、上下文信息和字典序列化。
"""

from typing import Any, Dict, Optional
import aiohttp


class ModGrabError(Exception):
    """ModGrab 基础异常类"""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self._get_default_code()
        self.context = context or {}

    def _get_default_code(self) -> str:
        """获取默认错误代码"""
        return "E000"

    def to_dict(self) -> Dict[str, Any]:
        """将异常转换为字典格式"""
        return {
            "error": True,
            "code": self.code,
            "message": self.message,
            "context": self.context,
            "type": self.__class__.__name__,
        }

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ConfigError(ModGrabError):
    """配置相关错误"""

    def _get_default_code(self) -> str:
        return "E100"


class ConfigParseError(ConfigError):
    """配置解析错误"""

    def _get_default_code(self) -> str:
        return "E101"


class APIError(ModGrabError):
    """API 相关错误"""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        response: Optional[aiohttp.ClientResponse] = None,
    ):
        super().__init__(message, code, context)
        self.response = response
        if response is not None:
            self.context["status_code"] = response.status
            self.context["url"] = str(response.url)

    def _get_default_code(self) -> str:
        return "E200"


class APIConnectionError(APIError):
    """网络连接失败或请求超时"""

    def _get_default_code(self) -> str:
        return "E201"


class APIResponseError(APIError):
    """响应内容无法解析（JSON 格式或结构不符合预期）"""

    def _get_default_code(self) -> str:
        return "E202"


class APINotFoundError(APIError):
    """API 资源不存在"""

    def _get_default_code(self) -> str:
        return "E404"


class APIRateLimitError(APIError):
    """API 速率限制"""

    def _get_default_code(self) -> str:
        return "E429"


class APIServerError(APIError):
    """API 服务器错误"""

    def _get_default_code(self) -> str:
        return "E500"


class DownloadError(ModGrabError):
    """下载相关错误"""

    def _get_default_code(self) -> str:
        return "E300"


class DownloadNetworkError(DownloadError):
    """下载网络错误"""

    def _get_default_code(self) -> str:
        return "E301"


class DownloadFileError(DownloadError):
    """下载文件操作错误"""

    def _get_default_code(self) -> str:
        return "E303"


class ResolutionError(ModGrabError):
    """解析流程中找不到所需资源"""

    def _get_default_code(self) -> str:
        return "E600"


class NoReleaseVersionError(ResolutionError):
    """版本列表中没有正式版"""

    def _get_default_code(self) -> str:
        return "E601"


class NoMatchingProjectsError(ResolutionError):
    """搜索没有返回任何项目"""

    def _get_default_code(self) -> str:
        return "E602"


class NoDownloadableFileError(ResolutionError):
    """没有匹配版本与加载器、且带有 .jar 文件的发布版本"""

    def _get_default_code(self) -> str:
        return "E603"


def error_for_status(
    status: int, message: str, response: Optional[aiohttp.ClientResponse] = None
) -> APIError:
    """根据 HTTP 状态码选择对应的 APIError 子类"""
    if status == 404:
        return APINotFoundError(message, response=response)
    if status == 429:
        return APIRateLimitError(message, response=response)
    if status >= 500:
        return APIServerError(message, response=response)
    return APIError(message, code=f"E{status}", response=response)


__all__ = [
    # 基础异常
    "ModGrabError",
    # 配置异常
    "ConfigError",
    "ConfigParseError",
    # API 异常
    "APIError",
    "APIConnectionError",
    "APIResponseError",
    "APINotFoundError",
    "APIRateLimitError",
    "APIServerError",
    "error_for_status",
    # 下载异常
    "DownloadError",
    "DownloadNetworkError",
    "DownloadFileError",
    # 解析异常
    "ResolutionError",
    "NoReleaseVersionError",
    "NoMatchingProjectsError",
    "NoDownloadableFileError",
]
