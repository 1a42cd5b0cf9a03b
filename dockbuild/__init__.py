"""vox-demucs Docker镜像构建工具包"""

# 导入loguru并配置logger
from loguru import logger

from .constants import LOG_FORMAT
from .log_utils import level_filter

# 移除默认处理器
logger.remove()
# 未绑定名称的日志使用包名
logger.configure(extra={"name": "dockbuild"})
# 添加标准输出处理器，级别由各logger绑定的min_level控制
logger.add(
    sink=lambda msg: print(msg, end=""),  # 使用标准输出
    format=LOG_FORMAT,
    colorize=True,
    level="DEBUG",
    filter=level_filter,
)

# 导入其他模块
from .cli import main, app

__version__ = "0.1.0"

__all__ = [
    "logger",
    "main",
    "app",
]
