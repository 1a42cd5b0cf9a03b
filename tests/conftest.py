"""测试公共夹具"""

import json
from typing import Dict, List, Optional, Tuple, Union

import pytest
from loguru import logger

from dockbuild.executor import CommandResult, ExecutionOptions
from dockbuild.log_utils import level_filter

FAKE_INSPECT = [
    {
        "Id": "fake-id-123",
        "Os": "linux",
        "Author": "Test Author",
        "Size": 4200000000,
        "VirtualSize": 4300000000,
        "Created": "2023-03-21T12:00:00Z",
    }
]


def make_result(stdout: str = "", stderr: str = "", exit_code: int = 0) -> CommandResult:
    return CommandResult(exit_code=exit_code, stdout=stdout.encode(), stderr=stderr.encode())


class StubExecutor:
    """按命令前缀返回预设结果的执行器，记录所有调用"""

    def __init__(self, responses: Optional[Dict[str, Union[CommandResult, Exception]]] = None):
        self.responses = responses or {}
        self.calls: List[Tuple[str, ExecutionOptions]] = []

    async def exec(self, command: str, options: Optional[ExecutionOptions] = None) -> CommandResult:
        self.calls.append((command, options or {}))
        for prefix, response in self.responses.items():
            if command.startswith(prefix):
                if isinstance(response, Exception):
                    raise response
                return response
        return make_result()

    @property
    def commands(self) -> List[str]:
        return [command for command, _ in self.calls]

    def options_for(self, prefix: str) -> ExecutionOptions:
        for command, options in self.calls:
            if command.startswith(prefix):
                return options
        raise AssertionError(f"no command starting with {prefix!r} was executed")


@pytest.fixture
def default_responses():
    return {
        "docker build": make_result("Build successful"),
        "docker inspect": make_result(json.dumps(FAKE_INSPECT)),
        "docker push": make_result("Push successful"),
    }


@pytest.fixture
def stub_executor(default_responses):
    return StubExecutor(default_responses)


@pytest.fixture
def log_messages():
    """捕获经过级别过滤后的loguru日志"""
    messages = []
    handler_id = logger.add(
        messages.append, level="DEBUG", filter=level_filter, format="{level}|{message}"
    )
    yield messages
    logger.remove(handler_id)
