"""镜像管理工具函数"""

import math
import re
from datetime import datetime
from typing import Union

from ...constants import TAG_INVALID_CHARS_PATTERN

SIZE_UNITS = ["B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB"]

_CREATED_PATTERN = re.compile(
    r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.\d+)?(Z|[+-]\d{2}:\d{2})?$"
)


def normalize_tag(tag_name: str) -> str:
    """
    规范化镜像标签

    转为小写，将 ``[a-z0-9.-]`` 以外的连续字符替换为单个 ``-``，并去掉首尾的 ``-``。

    Args:
        tag_name: 原始标签

    Returns:
        str: 可安全用于命令行的标签
    """
    tag = re.sub(TAG_INVALID_CHARS_PATTERN, "-", tag_name.lower())
    return tag.strip("-")


def format_size(num_bytes: Union[int, float]) -> str:
    """
    将字节数转换为易读的十进制单位字符串

    Args:
        num_bytes: 字节数

    Returns:
        str: 例如 ``4.2 GB``
    """
    if num_bytes < 0:
        return "-" + format_size(-num_bytes)
    if num_bytes < 1:
        return f"{num_bytes:g} B"

    exponent = min(int(math.log10(num_bytes) // 3), len(SIZE_UNITS) - 1)
    value = float(f"{num_bytes / 1000 ** exponent:.3g}")
    return f"{value:g} {SIZE_UNITS[exponent]}"


def format_created(created: str) -> str:
    """
    将ISO时间转换为本地时区的本地化时间字符串

    Args:
        created: ISO格式时间，例如 ``2023-03-21T12:00:00.123456789Z``

    Returns:
        str: 本地化时间字符串

    Raises:
        ValueError: 时间格式无法解析时抛出
    """
    match = _CREATED_PATTERN.match(created.strip())
    if not match:
        raise ValueError(f"无法解析时间: {created}")

    # 小数秒可能超过微秒精度，直接舍去
    base, zone = match.groups()
    if not zone or zone == "Z":
        zone = "+00:00"
    created_time = datetime.fromisoformat(base + zone)
    return created_time.astimezone().strftime("%c")
