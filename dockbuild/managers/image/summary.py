"""镜像摘要信息相关功能"""

import json
import shlex
from typing import Any, Dict

from ...constants import ERROR_MESSAGES
from ...executor import ShellExecutor
from .base import ImageSummary, InspectParseError
from .utils import format_created, format_size

REQUIRED_FIELDS = ("Id", "Size", "Created")
OPTIONAL_TEXT_FIELDS = ("Os", "Author")


def parse_inspect_output(raw: str, image_name: str, tag: str) -> ImageSummary:
    """
    解析 ``docker inspect`` 的输出

    Args:
        raw: 命令输出，应为只包含一个对象的JSON数组
        image_name: 镜像仓库名
        tag: 镜像标签

    Returns:
        ImageSummary: 镜像摘要信息

    Raises:
        InspectParseError: 输出不是合法JSON、数组长度不为1、缺少必要字段或字段类型错误时抛出
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InspectParseError(ERROR_MESSAGES["inspect_invalid_json"].format(e)) from e

    if not isinstance(data, list) or len(data) != 1 or not isinstance(data[0], dict):
        shape = f"{len(data)}个元素的数组" if isinstance(data, list) else type(data).__name__
        raise InspectParseError(ERROR_MESSAGES["inspect_invalid_shape"].format(shape))

    inspect_data: Dict[str, Any] = data[0]
    missing = [field for field in REQUIRED_FIELDS if field not in inspect_data]
    if missing:
        raise InspectParseError(ERROR_MESSAGES["inspect_missing_field"].format(", ".join(missing)))

    image_id = inspect_data["Id"]
    if not isinstance(image_id, str) or not image_id:
        raise InspectParseError(ERROR_MESSAGES["inspect_invalid_field"].format(f"Id={image_id!r}"))

    # Os与Author可以缺失或为null，存在时必须是字符串
    text_fields: Dict[str, str] = {}
    for field in OPTIONAL_TEXT_FIELDS:
        value = inspect_data.get(field)
        if value is None:
            value = ""
        elif not isinstance(value, str):
            raise InspectParseError(ERROR_MESSAGES["inspect_invalid_field"].format(f"{field}={value!r}"))
        text_fields[field] = value

    try:
        size = format_size(inspect_data["Size"])
        virtual_size = (
            format_size(inspect_data["VirtualSize"]) if inspect_data.get("VirtualSize") else "-"
        )
        created = format_created(inspect_data["Created"])
    except (TypeError, ValueError) as e:
        raise InspectParseError(ERROR_MESSAGES["inspect_invalid_json"].format(e)) from e

    return ImageSummary(
        image_name=image_name,
        tag=tag,
        id=image_id,
        os=text_fields["Os"],
        author=text_fields["Author"],
        size=size,
        virtual_size=virtual_size,
        created=created,
    )


class ImageSummarizer:
    """镜像摘要信息管理器类"""

    def __init__(self, executor: ShellExecutor, image_name: str, log) -> None:
        """
        初始化镜像摘要信息管理器

        Args:
            executor: 命令执行器
            image_name: 镜像仓库名
            log: 构建器持有的logger
        """
        self.executor = executor
        self.image_name = image_name
        self.logger = log

    async def get_summary(self, tag: str) -> ImageSummary:
        """
        获取指定标签镜像的摘要信息

        Args:
            tag: 镜像标签

        Returns:
            ImageSummary: 镜像摘要信息

        Raises:
            InspectParseError: 获取或解析镜像元数据失败时抛出
        """
        image_ref = f"{self.image_name}:{tag}"
        result = await self.executor.exec(
            f"docker inspect {shlex.quote(image_ref)}",
            {"quiet": True, "should_throw": False},
        )
        if result.exit_code != 0:
            error_msg = f"获取镜像 {image_ref} 元数据失败: {result.stderr_text().strip()}"
            self.logger.error(error_msg)
            raise InspectParseError(error_msg)

        try:
            return parse_inspect_output(result.text(), self.image_name, tag)
        except InspectParseError as e:
            self.logger.error(f"解析镜像 {image_ref} 元数据失败: {e}")
            raise
