"""镜像管理基础类型定义"""

from dataclasses import dataclass


class ImageError(Exception):
    """镜像操作错误基类"""
    pass


class ImageCommandError(ImageError):
    """携带命令标准错误输出的镜像操作错误"""

    def __init__(self, message: str, stderr: str = "") -> None:
        super().__init__(message)
        self.stderr = stderr


class ImageBuildError(ImageCommandError):
    """镜像构建错误"""
    pass


class InspectParseError(ImageError):
    """镜像元数据解析错误"""
    pass


class ImagePushError(ImageCommandError):
    """镜像推送错误"""
    pass


class ImageLintError(ImageError):
    """Dockerfile检查错误"""
    pass


@dataclass(frozen=True)
class BuildOptions:
    """镜像构建选项"""
    tag_name: str
    skip_cache: bool = False
    silent: bool = False
    verbose: bool = False


@dataclass(frozen=True)
class ImageSummary:
    """构建完成的镜像摘要信息"""
    image_name: str
    tag: str
    id: str
    os: str
    author: str
    size: str
    virtual_size: str
    created: str
