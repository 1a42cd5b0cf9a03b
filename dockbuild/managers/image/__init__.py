"""Docker镜像管理相关功能模块

该子包包含镜像管理相关的各个功能模块，如构建、推送、Dockerfile检查与摘要解析等。
"""

from .base import (
    BuildOptions,
    ImageBuildError,
    ImageCommandError,
    ImageError,
    ImageLintError,
    ImagePushError,
    ImageSummary,
    InspectParseError,
)
from .build import ImageBuilder
from .push import ImagePusher
from .lint import ImageLinter
from .summary import ImageSummarizer, parse_inspect_output
from .utils import normalize_tag, format_size, format_created

__all__ = [
    "BuildOptions",
    "ImageError",
    "ImageBuildError",
    "ImageCommandError",
    "ImageLintError",
    "ImagePushError",
    "ImageSummary",
    "InspectParseError",
    "ImageBuilder",
    "ImagePusher",
    "ImageLinter",
    "ImageSummarizer",
    "parse_inspect_output",
    "normalize_tag",
    "format_size",
    "format_created",
]
