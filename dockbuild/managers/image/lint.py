"""Dockerfile检查相关功能"""

import shlex

from ...executor import ShellExecutor
from .base import ImageLintError


class ImageLinter:
    """使用hadolint容器检查Dockerfile"""

    def __init__(
        self,
        executor: ShellExecutor,
        dockerfile: str,
        lint_image: str,
        failure_threshold: str,
        log,
    ) -> None:
        """
        初始化Dockerfile检查器

        Args:
            executor: 命令执行器
            dockerfile: Dockerfile路径
            lint_image: hadolint镜像
            failure_threshold: 导致失败的最低问题级别
            log: 构建器持有的logger
        """
        self.executor = executor
        self.dockerfile = dockerfile
        self.lint_image = lint_image
        self.failure_threshold = failure_threshold
        self.logger = log

    def lint_command(self) -> str:
        """生成hadolint命令，Dockerfile通过标准输入传入容器"""
        return (
            f"docker run --rm -i --entrypoint=hadolint {shlex.quote(self.lint_image)} "
            f"--failure-threshold={self.failure_threshold} - < {shlex.quote(self.dockerfile)}"
        )

    async def lint(self) -> str:
        """
        检查Dockerfile

        低于失败阈值的问题（例如warning）只会输出，不会导致失败。

        Returns:
            str: 去除首尾空白的检查输出

        Raises:
            ImageLintError: 检查命令退出码非零时抛出，消息为检查输出
        """
        result = await self.executor.exec(
            self.lint_command(),
            {"quiet": True, "should_throw": False},
        )
        output = result.output().strip()

        if result.exit_code != 0:
            self.logger.error(f"Dockerfile检查失败，退出码 {result.exit_code}:\n{output}")
            raise ImageLintError(output)

        return output
