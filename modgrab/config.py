"""
配置文件加载

支持 TOML / JSON / YAML 三种格式。
"""

import json
from pathlib import Path
from typing import Optional

import toml
import yaml

from modgrab.models import ModGrabConfig
from modgrab.exceptions import ConfigError, ConfigParseError


def load_config(config_path: str) -> dict:
    """加载配置文件"""
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(f"配置文件不存在: {config_path}")

    suffix = path.suffix.lower()

    try:
        if suffix == ".toml":
            data = toml.load(config_path)
        elif suffix == ".json":
            data = json.loads(path.read_text(encoding="utf-8"))
        elif suffix in (".yaml", ".yml"):
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        else:
            raise ConfigError(f"不支持的配置文件格式: {suffix}")
    except (toml.TomlDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigParseError(
            f"配置文件解析失败: {config_path}", context={"error": str(e)}
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigParseError(f"配置文件顶层必须是一个表: {config_path}")
    return data


def build_config(config_path: Optional[str] = None) -> ModGrabConfig:
    """读取配置文件（可选）并创建运行配置"""
    if config_path is None:
        return ModGrabConfig()
    return ModGrabConfig.from_dict(load_config(config_path))
