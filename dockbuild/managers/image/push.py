"""镜像推送相关功能"""

import shlex

from ...executor import ShellExecutor
from .base import ImagePushError


class ImagePusher:
    """镜像推送器类"""

    def __init__(self, executor: ShellExecutor, image_name: str, log) -> None:
        """
        初始化镜像推送器

        Args:
            executor: 命令执行器
            image_name: 镜像仓库名
            log: 构建器持有的logger
        """
        self.executor = executor
        self.image_name = image_name
        self.logger = log

    async def push(self, tag: str) -> str:
        """
        推送镜像到远程仓库

        Args:
            tag: 镜像标签

        Returns:
            str: docker push的输出

        Raises:
            ImagePushError: 推送命令退出码非零时抛出
        """
        image_ref = f"{self.image_name}:{tag}"
        result = await self.executor.exec(
            f"docker push {shlex.quote(image_ref)}",
            {"quiet": True, "should_throw": False},
        )
        if result.exit_code != 0:
            error_msg = f"推送镜像失败: {result.stderr_text()}"
            self.logger.error(error_msg)
            if "denied" in result.stderr_text().lower():
                self.logger.error("访问被拒绝，请先使用 'docker login' 命令登录")
            raise ImagePushError(error_msg, stderr=result.stderr_text())
        return result.text()
