"""工具函数模块"""

import docker
from loguru import logger
from requests.exceptions import RequestException

from .constants import ERROR_MESSAGES


class DockerUnavailableError(Exception):
    """Docker不可用错误"""

    pass


def verify_docker_installed() -> None:
    """
    检查Docker守护进程是否可以连接

    Raises:
        DockerUnavailableError: 无法连接到Docker时抛出
    """
    try:
        client = docker.from_env()
        try:
            client.ping()
        finally:
            client.close()
    except (docker.errors.DockerException, RequestException) as e:
        error_msg = ERROR_MESSAGES["docker_unavailable"].format(e)
        logger.error(error_msg)
        raise DockerUnavailableError(error_msg) from e
    logger.debug("Docker连接检查成功")
