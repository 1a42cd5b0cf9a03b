"""镜像构建相关功能"""

import shlex

from ...executor import ShellExecutor
from .base import ImageBuildError


class ImageBuilder:
    """镜像构建器类"""

    def __init__(self, executor: ShellExecutor, image_name: str, context_dir: str, log) -> None:
        """
        初始化镜像构建器

        Args:
            executor: 命令执行器
            image_name: 镜像仓库名
            context_dir: 构建上下文目录
            log: 构建器持有的logger
        """
        self.executor = executor
        self.image_name = image_name
        self.context_dir = context_dir
        self.logger = log

    def build_command(self, tag: str, skip_cache: bool = False) -> str:
        """
        生成构建命令

        Args:
            tag: 镜像标签
            skip_cache: 是否跳过构建缓存

        Returns:
            str: docker build命令
        """
        args = ["docker", "build"]
        if skip_cache:
            args.append("--no-cache")
        args += ["-t", shlex.quote(f"{self.image_name}:{tag}"), shlex.quote(self.context_dir)]
        return " ".join(args)

    async def build(self, tag: str, skip_cache: bool = False, silent: bool = False) -> None:
        """
        构建Docker镜像

        静默模式下不输出构建过程，构建失败时由本方法检查退出码；
        非静默模式下构建失败由执行器直接抛出ExternalCommandError。

        Args:
            tag: 镜像标签
            skip_cache: 是否跳过构建缓存
            silent: 是否静默

        Raises:
            ImageBuildError: 构建命令退出码非零时抛出
        """
        result = await self.executor.exec(
            self.build_command(tag, skip_cache),
            {"quiet": silent, "should_throw": not silent},
        )
        if result.exit_code != 0:
            error_msg = f"构建镜像失败: {result.stderr_text()}"
            self.logger.error(error_msg)
            raise ImageBuildError(error_msg, stderr=result.stderr_text())
