"""Git工具函数模块"""

from loguru import logger

from .constants import ERROR_MESSAGES
from .executor import ShellExecutor


class GitBranchError(Exception):
    """Git分支获取错误"""

    pass


async def get_current_branch_name(executor: ShellExecutor) -> str:
    """
    获取当前Git分支名称

    Args:
        executor: 命令执行器

    Returns:
        str: 分支名称

    Raises:
        GitBranchError: 无法确定分支名称时抛出
        ExternalCommandError: git命令执行失败时抛出
    """
    result = await executor.exec(
        "git rev-parse --abbrev-ref HEAD", {"quiet": True, "should_throw": True}
    )
    branch = result.text().strip()
    if not branch:
        logger.error(ERROR_MESSAGES["git_branch_unknown"])
        raise GitBranchError(ERROR_MESSAGES["git_branch_unknown"])
    logger.debug(f"当前Git分支: {branch}")
    return branch
