"""常量配置模块"""

from typing import List, TypedDict

# 配置文件
CONFIG_FILE: str = "dockbuild.json"


# 镜像构建默认配置
class BuildSettings(TypedDict):
    image_name: str
    context_dir: str
    dockerfile: str
    lint_image: str
    lint_failure_threshold: str


DEFAULT_BUILD_SETTINGS: BuildSettings = {
    "image_name": "voxextractlabs/vox-demucs",
    "context_dir": "./docker",
    "dockerfile": "./docker/Dockerfile",
    "lint_image": "hadolint/hadolint",
    "lint_failure_threshold": "error",  # 只有error及以上级别的问题才会导致失败
}

# hadolint支持的失败阈值
LINT_FAILURE_THRESHOLDS: List[str] = ["error", "warning", "info", "style", "ignore", "none"]

# 标签规范化
TAG_INVALID_CHARS_PATTERN: str = r"[^a-z0-9.\-]+"
LATEST_TAG: str = "latest"

# 日志
LOGGER_NAME: str = "ImageBuilder"
EXECUTOR_LOGGER_NAME: str = "ShellExecutor"
LOG_FORMAT: str = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


# 错误消息
class ErrorMessages(TypedDict):
    docker_unavailable: str
    git_branch_unknown: str
    config_validation: str
    inspect_invalid_json: str
    inspect_invalid_shape: str
    inspect_missing_field: str
    inspect_invalid_field: str


ERROR_MESSAGES: ErrorMessages = {
    "docker_unavailable": "Docker似乎未安装或无法访问，请确认Docker已安装并正在运行: {}",
    "git_branch_unknown": "无法确定当前Git分支名称",
    "config_validation": "配置验证失败: {}",
    "inspect_invalid_json": "无法解析镜像元数据: {}",
    "inspect_invalid_shape": "镜像元数据格式错误: 期望包含一个对象的数组，实际为 {}",
    "inspect_missing_field": "镜像元数据缺少字段: {}",
    "inspect_invalid_field": "镜像元数据字段类型错误: {}",
}
