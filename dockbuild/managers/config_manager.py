"""配置管理器类"""

import json
import os
from typing import Any, Dict, Optional, Type, cast

from loguru import logger

from ..constants import (
    CONFIG_FILE,
    DEFAULT_BUILD_SETTINGS,
    ERROR_MESSAGES,
    LINT_FAILURE_THRESHOLDS,
    BuildSettings,
)


class ConfigError(Exception):
    """配置错误"""

    pass


ValidationStructure = Dict[str, Type[Any]]


def generate_validation_structure(config_template: Dict[str, Any]) -> ValidationStructure:
    """
    从配置模板生成验证结构

    Args:
        config_template: 配置模板

    Returns:
        ValidationStructure: 配置项名称到类型的映射
    """
    return {key: type(value) for key, value in config_template.items()}


class ConfigManager:
    """配置管理器类，用于加载镜像构建配置"""

    project_dir: str
    config: BuildSettings
    REQUIRED_CONFIG_FIELDS: ValidationStructure

    def __init__(self, project_dir: Optional[str] = None) -> None:
        """
        初始化配置管理器

        Args:
            project_dir: 项目目录路径，默认为当前目录
        """
        self.project_dir = project_dir or os.getcwd()
        self.config = cast(BuildSettings, dict(DEFAULT_BUILD_SETTINGS))

        # 初始化验证结构
        self.REQUIRED_CONFIG_FIELDS = generate_validation_structure(dict(DEFAULT_BUILD_SETTINGS))

    @property
    def config_file(self) -> str:
        """配置文件路径"""
        return os.path.join(self.project_dir, CONFIG_FILE)

    def load_config(self) -> BuildSettings:
        """
        加载配置文件，配置文件中的值覆盖默认配置

        配置文件不存在时使用默认配置。

        Returns:
            BuildSettings: 加载的配置

        Raises:
            ConfigError: 配置文件无法解析或验证失败时抛出
        """
        config = dict(DEFAULT_BUILD_SETTINGS)

        if os.path.exists(self.config_file):
            try:
                with open(self.config_file, "r", encoding="utf-8") as f:
                    file_config = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise ConfigError(f"加载配置文件失败: {e}") from e

            if not isinstance(file_config, dict):
                raise ConfigError(ERROR_MESSAGES["config_validation"].format("配置文件应为JSON对象"))
            config.update(file_config)
            logger.debug(f"已加载配置文件: {self.config_file}")

        self.config = cast(BuildSettings, config)
        self.validate_config()
        return self.config

    def validate_config(self) -> None:
        """
        验证配置的完整性和正确性

        Raises:
            ConfigError: 配置验证失败时抛出
        """
        config = cast(Dict[str, Any], self.config)

        unknown = sorted(set(config) - set(self.REQUIRED_CONFIG_FIELDS))
        if unknown:
            raise ConfigError(
                ERROR_MESSAGES["config_validation"].format(f"未知的配置项: {', '.join(unknown)}")
            )

        for key, value_type in self.REQUIRED_CONFIG_FIELDS.items():
            if key not in config:
                raise ConfigError(ERROR_MESSAGES["config_validation"].format(f"缺少必需的配置项: {key}"))
            if not isinstance(config[key], value_type):
                raise ConfigError(
                    ERROR_MESSAGES["config_validation"].format(
                        f"配置项类型错误: {key} 应为 {value_type.__name__}"
                    )
                )
            if not config[key]:
                raise ConfigError(ERROR_MESSAGES["config_validation"].format(f"配置项不能为空: {key}"))

        threshold = config["lint_failure_threshold"]
        if threshold not in LINT_FAILURE_THRESHOLDS:
            raise ConfigError(
                ERROR_MESSAGES["config_validation"].format(
                    f"lint_failure_threshold 应为 {', '.join(LINT_FAILURE_THRESHOLDS)} 之一"
                )
            )

    def get_config(self) -> BuildSettings:
        """
        获取当前配置

        Returns:
            BuildSettings: 当前配置
        """
        return self.config
