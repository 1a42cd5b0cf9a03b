import pytest

from dockbuild.executor import ExternalCommandError
from dockbuild.git_utils import GitBranchError, get_current_branch_name

from .conftest import StubExecutor, make_result


@pytest.mark.asyncio
async def test_returns_trimmed_branch_name():
    executor = StubExecutor({"git rev-parse": make_result("feature/My-Branch\n")})
    assert await get_current_branch_name(executor) == "feature/My-Branch"
    assert executor.options_for("git rev-parse") == {"quiet": True, "should_throw": True}


@pytest.mark.asyncio
async def test_empty_output_raises():
    executor = StubExecutor({"git rev-parse": make_result("  \n")})
    with pytest.raises(GitBranchError):
        await get_current_branch_name(executor)


@pytest.mark.asyncio
async def test_git_failure_propagates():
    error = ExternalCommandError("git rev-parse --abbrev-ref HEAD", 128, stderr=b"not a git repository")
    executor = StubExecutor({"git rev-parse": error})
    with pytest.raises(ExternalCommandError, match="not a git repository"):
        await get_current_branch_name(executor)
