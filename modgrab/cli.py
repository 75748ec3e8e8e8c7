"""
CLI 模块

命令行接口实现。
"""

import asyncio
from typing import List, Optional

import click
from loguru import logger

from modgrab.__version__ import __version__
from modgrab.config import build_config
from modgrab.orchestrator import DownloadResult, ModGrabOrchestrator
from modgrab.exceptions import ModGrabError
from modgrab.logger import setup_logger


def prompt_selection(items: List[str]) -> int:
    """显示编号列表并读取用户的选择，返回从 0 开始的下标"""
    for number, item in enumerate(items, start=1):
        click.echo(f"  {number:>2}) {item}")
    choice = click.prompt(
        "Pick your mod",
        type=click.IntRange(1, len(items)),
        default=1,
    )
    return choice - 1


def print_result(result: DownloadResult):
    """输出依赖列表与保存结果"""
    if result.dependencies:
        click.echo("Mod dependencies:")
        for dep in result.dependencies:
            click.echo(str(dep))
        click.echo()
    click.echo(f"Saved {result.link.filename} successfully!")


async def run_async(
    query: str,
    version: Optional[str],
    loader: Optional[str],
    output_dir: Optional[str],
    config_path: Optional[str],
) -> DownloadResult:
    """异步运行"""
    config = build_config(config_path)
    orchestrator = ModGrabOrchestrator(config, prompt_selection)
    result = await orchestrator.run(
        query, version=version, loader=loader, output_dir=output_dir
    )
    logger.debug(f"下载统计: {orchestrator.get_stats()}")
    return result


@click.command()
@click.argument("query")
@click.option(
    "-v",
    "--version",
    help="Minecraft 版本（留空则使用最新正式版）",
)
@click.option("-l", "--loader", help="模组加载器（默认 fabric）")
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(file_okay=False),
    help="保存目录（默认当前目录）",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="配置文件路径 (toml/json/yaml)",
)
@click.option("--debug", is_flag=True, help="启用调试模式")
@click.version_option(__version__, "-V", "--tool-version", prog_name="modgrab")
def main(
    query: str,
    version: Optional[str],
    loader: Optional[str],
    output_dir: Optional[str],
    config_path: Optional[str],
    debug: bool,
):
    """ModGrab - 搜索并下载 Minecraft 模组"""
    setup_logger(debug=True if debug else None)

    try:
        result = asyncio.run(
            run_async(query, version, loader, output_dir, config_path)
        )
    except click.exceptions.Abort:
        raise
    except ModGrabError as e:
        logger.error(f"运行失败: {e}")
        logger.debug(f"错误详情: {e.to_dict()}")
        raise click.ClickException(str(e))
    except Exception as e:
        logger.exception(f"运行时错误: {e}")
        raise click.ClickException(f"运行时错误: {e}")

    print_result(result)


if __name__ == "__main__":
    main()
