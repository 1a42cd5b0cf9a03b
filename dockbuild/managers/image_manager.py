"""镜像管理器类 - 门面模式实现"""

from dataclasses import asdict, replace
from typing import Optional

from ..constants import DEFAULT_BUILD_SETTINGS, LATEST_TAG, LOGGER_NAME, BuildSettings
from ..executor import ShellExecutor
from ..log_utils import build_logger
from .image.base import BuildOptions, ImageSummary
from .image.build import ImageBuilder
from .image.lint import ImageLinter
from .image.push import ImagePusher
from .image.summary import ImageSummarizer
from .image.utils import normalize_tag


class ImageManager:
    """
    镜像管理器类，用于检查、构建和推送镜像

    标签在初始化时规范化，之后不再校验。所有外部命令都通过注入的执行器运行。

    Example:
        >>> manager = ImageManager(BuildOptions(tag_name="v1.0.0"), AsyncShellExecutor())
        >>> summary = asyncio.run(manager.build_image())
    """

    def __init__(
        self,
        options: BuildOptions,
        executor: ShellExecutor,
        settings: Optional[BuildSettings] = None,
    ) -> None:
        """
        初始化镜像管理器

        Args:
            options: 构建选项，标签会被规范化
            executor: 命令执行器
            settings: 镜像构建配置，默认使用DEFAULT_BUILD_SETTINGS
        """
        self.options = replace(options, tag_name=normalize_tag(options.tag_name))
        self.settings: BuildSettings = settings or DEFAULT_BUILD_SETTINGS
        self.executor = executor
        self.logger = build_logger(
            LOGGER_NAME, silent=self.options.silent, verbose=self.options.verbose
        )

        image_name = self.settings["image_name"]
        self.builder = ImageBuilder(executor, image_name, self.settings["context_dir"], self.logger)
        self.pusher = ImagePusher(executor, image_name, self.logger)
        self.linter = ImageLinter(
            executor,
            self.settings["dockerfile"],
            self.settings["lint_image"],
            self.settings["lint_failure_threshold"],
            self.logger,
        )
        self.summarizer = ImageSummarizer(executor, image_name, self.logger)

    @property
    def image_name(self) -> str:
        """镜像仓库名"""
        return self.settings["image_name"]

    @property
    def tag_name(self) -> str:
        """规范化后的镜像标签"""
        return self.options.tag_name

    @property
    def skip_cache(self) -> bool:
        """构建时是否跳过缓存"""
        return self.options.skip_cache

    @property
    def is_silent(self) -> bool:
        """是否静默运行"""
        return self.options.silent

    async def build_image(self, tag_override: Optional[str] = None) -> ImageSummary:
        """
        构建Docker镜像并返回镜像摘要

        Args:
            tag_override: 覆盖配置的标签，构建和元数据查询都使用该标签

        Returns:
            ImageSummary: 构建完成的镜像摘要

        Raises:
            ImageBuildError: 静默模式下构建失败时抛出
            ExternalCommandError: 非静默模式下构建失败时由执行器抛出
            InspectParseError: 镜像元数据获取或解析失败时抛出
        """
        tag = self.tag_name if tag_override is None else tag_override
        self.logger.bind(image=self.image_name, tag=tag).info(
            f"开始构建镜像 {self.image_name}:{tag}..."
        )

        await self.builder.build(tag, skip_cache=self.skip_cache, silent=self.is_silent)
        summary = await self.summarizer.get_summary(tag)

        self.logger.bind(**asdict(summary)).info(f"镜像构建摘要: {summary}")
        return summary

    async def push_image(self, tag_override: Optional[str] = None) -> str:
        """
        推送镜像到远程仓库

        Args:
            tag_override: 覆盖配置的标签

        Returns:
            str: docker push的输出

        Raises:
            ImagePushError: 推送失败时抛出
        """
        tag = self.tag_name if tag_override is None else tag_override
        self.logger.bind(image=self.image_name, tag=tag).info(
            f"开始推送镜像 {self.image_name}:{tag}..."
        )

        result = await self.pusher.push(tag)
        self.logger.info(f"推送结果:\n{result}")
        return result

    async def push_latest(self) -> str:
        """
        构建并推送latest标签的镜像

        Returns:
            str: docker push的输出
        """
        await self.build_image(LATEST_TAG)
        return await self.push_image(LATEST_TAG)

    async def lint(self) -> str:
        """
        使用hadolint检查Dockerfile

        Returns:
            str: 检查输出

        Raises:
            ImageLintError: 存在error级别及以上的问题时抛出
        """
        self.logger.info(f"开始检查Dockerfile {self.settings['dockerfile']}...")
        output = await self.linter.lint()
        self.logger.success(f"Dockerfile检查通过:\n{output}")
        return output
