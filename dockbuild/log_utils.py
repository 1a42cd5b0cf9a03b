"""日志工具模块

每个构建器持有自己绑定的logger，日志级别通过绑定的 ``min_level`` 控制，
由包初始化时注册的处理器统一过滤，不依赖全局级别状态。
"""

from typing import Any, Dict

from loguru import logger

DEFAULT_LEVEL = "INFO"


def resolve_level(silent: bool = False, verbose: bool = False) -> str:
    """
    根据静默/详细选项确定日志级别

    Args:
        silent: 是否静默，静默时只输出致命错误
        verbose: 是否输出调试信息

    Returns:
        str: loguru日志级别名称
    """
    if silent:
        return "CRITICAL"
    if verbose:
        return "DEBUG"
    return DEFAULT_LEVEL


def level_filter(record: Dict[str, Any]) -> bool:
    """处理器过滤函数，丢弃低于记录上绑定级别的日志"""
    min_level = record["extra"].get("min_level", DEFAULT_LEVEL)
    return record["level"].no >= logger.level(min_level).no


def build_logger(name: str, silent: bool = False, verbose: bool = False):
    """
    创建带名称和级别的logger

    Args:
        name: logger名称
        silent: 是否静默
        verbose: 是否输出调试信息

    Returns:
        绑定了name和min_level的loguru logger
    """
    return logger.bind(name=name, min_level=resolve_level(silent, verbose))
