"""CLI命令行接口模块"""

import asyncio
import sys
from typing import Optional

import typer
from loguru import logger

from dockbuild.constants import LATEST_TAG
from dockbuild.executor import AsyncShellExecutor, ExternalCommandError, ShellExecutor
from dockbuild.git_utils import GitBranchError, get_current_branch_name
from dockbuild.managers.config_manager import ConfigError, ConfigManager
from dockbuild.managers.image.base import BuildOptions, ImageError
from dockbuild.managers.image_manager import ImageManager
from dockbuild.utils import DockerUnavailableError, verify_docker_installed

# 需要以退出码1结束命令的已知错误
KNOWN_ERRORS = (
    ImageError,
    ExternalCommandError,
    ConfigError,
    DockerUnavailableError,
    GitBranchError,
)

# 创建CLI应用
app = typer.Typer(
    help="vox-demucs Docker镜像构建工具",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


async def create_image_manager(
    executor: ShellExecutor,
    tag: Optional[str],
    project_dir: str,
    skip_cache: bool = False,
    silent: bool = False,
    verbose: bool = False,
) -> ImageManager:
    """
    加载配置并创建镜像管理器

    Args:
        executor: 命令执行器
        tag: 镜像标签，为None时使用当前Git分支名
        project_dir: 项目目录
        skip_cache: 构建时是否跳过缓存
        silent: 是否静默
        verbose: 是否输出调试信息

    Returns:
        ImageManager: 镜像管理器实例
    """
    settings = ConfigManager(project_dir).load_config()
    if tag is None:
        tag = await get_current_branch_name(executor)
    options = BuildOptions(tag_name=tag, skip_cache=skip_cache, silent=silent, verbose=verbose)
    return ImageManager(options, executor, settings)


def _run(workflow) -> None:
    """运行异步流程，已知错误记录日志后以退出码1结束"""
    try:
        asyncio.run(workflow)
    except KNOWN_ERRORS as e:
        logger.error(f"错误：{str(e)}")
        sys.exit(1)


@app.command("build")
def build_image(
    tag: Optional[str] = typer.Option(None, "-t", "--tag", help="镜像标签，默认使用当前Git分支名"),
    no_cache: bool = typer.Option(False, "--no-cache", help="构建时不使用缓存"),
    push: bool = typer.Option(True, "--push/--no-push", help="构建后推送镜像"),
    latest: bool = typer.Option(False, "--latest", help="同时构建latest标签，推送时一并推送"),
    lint: bool = typer.Option(True, "--lint/--no-lint", help="构建前使用hadolint检查Dockerfile"),
    silent: bool = typer.Option(False, "-s", "--silent", help="静默模式，只输出致命错误"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="输出调试信息"),
    project_dir: str = typer.Option(".", "-d", "--project-dir", help="项目目录路径"),
):
    """检查、构建并推送Docker镜像"""

    async def workflow() -> None:
        verify_docker_installed()
        executor = AsyncShellExecutor(silent=silent, verbose=verbose)
        manager = await create_image_manager(
            executor, tag, project_dir, skip_cache=no_cache, silent=silent, verbose=verbose
        )

        if lint:
            await manager.lint()

        await manager.build_image()
        manager.logger.success(f"镜像 {manager.image_name}:{manager.tag_name} 构建成功")

        if push:
            await manager.push_image()
            manager.logger.success(f"镜像 {manager.image_name}:{manager.tag_name} 推送成功")

        if latest:
            if push:
                await manager.push_latest()
            else:
                await manager.build_image(LATEST_TAG)
            manager.logger.success(f"镜像 {manager.image_name}:latest 处理完成")

    _run(workflow())


@app.command("push")
def push_image(
    tag: Optional[str] = typer.Option(None, "-t", "--tag", help="镜像标签，默认使用当前Git分支名"),
    silent: bool = typer.Option(False, "-s", "--silent", help="静默模式，只输出致命错误"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="输出调试信息"),
    project_dir: str = typer.Option(".", "-d", "--project-dir", help="项目目录路径"),
):
    """推送已构建的镜像到远程仓库"""

    async def workflow() -> None:
        verify_docker_installed()
        executor = AsyncShellExecutor(silent=silent, verbose=verbose)
        manager = await create_image_manager(
            executor, tag, project_dir, silent=silent, verbose=verbose
        )
        await manager.push_image()
        manager.logger.success(f"镜像 {manager.image_name}:{manager.tag_name} 推送成功")

    _run(workflow())


@app.command("lint")
def lint_dockerfile(
    silent: bool = typer.Option(False, "-s", "--silent", help="静默模式，只输出致命错误"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="输出调试信息"),
    project_dir: str = typer.Option(".", "-d", "--project-dir", help="项目目录路径"),
):
    """使用hadolint检查Dockerfile"""

    async def workflow() -> None:
        verify_docker_installed()
        manager = await create_image_manager(
            AsyncShellExecutor(silent=silent, verbose=verbose),
            LATEST_TAG,
            project_dir,
            silent=silent,
            verbose=verbose,
        )
        await manager.lint()

    _run(workflow())


def main():
    """主入口函数"""
    app()


if __name__ == "__main__":
    main()
