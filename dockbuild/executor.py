"""外部命令执行模块

镜像管理器只依赖 ``ShellExecutor`` 协议，任何满足该协议的实现都可以替换默认的
``AsyncShellExecutor``，测试中即通过桩实现替换真实的docker命令。
"""

import asyncio
import sys
from dataclasses import dataclass
from typing import List, Optional, Protocol, TypedDict

from .constants import EXECUTOR_LOGGER_NAME
from .log_utils import build_logger

READ_CHUNK_SIZE = 4096


class ExternalCommandError(Exception):
    """外部命令执行错误"""

    def __init__(
        self,
        command: str,
        exit_code: Optional[int],
        stdout: bytes = b"",
        stderr: bytes = b"",
    ) -> None:
        """
        初始化外部命令执行错误

        Args:
            command: 执行的命令
            exit_code: 退出码，进程未能启动时为None
            stdout: 捕获的标准输出
            stderr: 捕获的标准错误
        """
        self.command = command
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr

        if exit_code is None:
            message = f"命令无法启动: {command}"
        else:
            message = f"命令执行失败 (退出码 {exit_code}): {command}"
        detail = stderr.decode("utf-8", errors="replace").strip()
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message)


class ExecutionOptions(TypedDict, total=False):
    """命令执行选项"""
    quiet: bool  # 不将输出同步到当前进程的输出流，仍然完整捕获
    should_throw: bool  # 非零退出码时直接抛出ExternalCommandError


@dataclass(frozen=True)
class CommandResult:
    """命令执行结果"""

    exit_code: int
    stdout: bytes = b""
    stderr: bytes = b""

    def text(self, encoding: str = "utf-8") -> str:
        """标准输出文本"""
        return self.stdout.decode(encoding, errors="replace")

    def stderr_text(self, encoding: str = "utf-8") -> str:
        """标准错误文本"""
        return self.stderr.decode(encoding, errors="replace")

    def output(self, encoding: str = "utf-8") -> str:
        """标准输出与标准错误合并后的文本，两部分之间以换行分隔"""
        parts = (self.text(encoding).strip(), self.stderr_text(encoding).strip())
        return "\n".join(part for part in parts if part)


class ShellExecutor(Protocol):
    """外部命令执行器协议"""

    async def exec(
        self, command: str, options: Optional[ExecutionOptions] = None
    ) -> CommandResult:
        ...


def _mirror(chunk: bytes, target) -> None:
    """将输出块写入当前进程的输出流"""
    buffer = getattr(target, "buffer", None)
    if buffer is not None:
        # 先清空文本层缓冲，保证与日志输出的先后顺序
        target.flush()
        buffer.write(chunk)
        buffer.flush()
    else:
        target.write(chunk.decode("utf-8", errors="replace"))
        target.flush()


class AsyncShellExecutor:
    """基于asyncio子进程的命令执行器"""

    def __init__(self, silent: bool = False, verbose: bool = False) -> None:
        """
        初始化命令执行器

        Args:
            silent: 是否静默，只输出致命错误
            verbose: 是否输出调试信息
        """
        self.logger = build_logger(EXECUTOR_LOGGER_NAME, silent, verbose)

    async def exec(
        self, command: str, options: Optional[ExecutionOptions] = None
    ) -> CommandResult:
        """
        通过shell执行命令，等待进程结束

        Args:
            command: 要执行的命令
            options: 执行选项

        Returns:
            CommandResult: 退出码与捕获的输出

        Raises:
            ExternalCommandError: 进程无法启动，或should_throw为True且退出码非零时抛出
        """
        options = options or {}
        quiet = options.get("quiet", False)
        should_throw = options.get("should_throw", False)

        self.logger.debug(f"执行命令: {command}")

        try:
            process = await asyncio.create_subprocess_shell(
                command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            self.logger.error(f"命令无法启动: {command}: {e}")
            raise ExternalCommandError(command, None, stderr=str(e).encode()) from e

        stdout_chunks: List[bytes] = []
        stderr_chunks: List[bytes] = []
        await asyncio.gather(
            self._pump(process.stdout, stdout_chunks, None if quiet else sys.stdout),
            self._pump(process.stderr, stderr_chunks, None if quiet else sys.stderr),
        )
        exit_code = await process.wait()

        result = CommandResult(
            exit_code=exit_code,
            stdout=b"".join(stdout_chunks),
            stderr=b"".join(stderr_chunks),
        )

        if should_throw and result.exit_code != 0:
            self.logger.error(f"命令执行失败: {command}")
            self.logger.error(f"错误输出: {result.stderr_text()}")
            raise ExternalCommandError(command, result.exit_code, result.stdout, result.stderr)

        return result

    @staticmethod
    async def _pump(stream, chunks: List[bytes], target) -> None:
        """
        读取子进程输出流直到结束

        Args:
            stream: 子进程输出流
            chunks: 捕获输出的列表
            target: 同步输出的目标流，为None时不输出
        """
        while True:
            chunk = await stream.read(READ_CHUNK_SIZE)
            if not chunk:
                break
            chunks.append(chunk)
            if target is not None:
                _mirror(chunk, target)
