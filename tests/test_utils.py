import docker
import pytest
from docker.errors import DockerException
from requests.exceptions import ConnectionError as RequestsConnectionError

from dockbuild.utils import DockerUnavailableError, verify_docker_installed


class FakeClient:
    """记录调用的Docker客户端替身"""

    def __init__(self, ping_error=None):
        self.ping_error = ping_error
        self.closed = False

    def ping(self):
        if self.ping_error is not None:
            raise self.ping_error
        return True

    def close(self):
        self.closed = True


def test_reachable_daemon_passes(monkeypatch):
    client = FakeClient()
    monkeypatch.setattr(docker, "from_env", lambda: client)

    verify_docker_installed()

    assert client.closed is True


def test_missing_docker_raises(monkeypatch, log_messages):
    def no_docker():
        raise DockerException("Error while fetching server API version")

    monkeypatch.setattr(docker, "from_env", no_docker)

    with pytest.raises(DockerUnavailableError, match="Docker似乎未安装或无法访问"):
        verify_docker_installed()
    assert any(message.startswith("ERROR|") for message in log_messages)


def test_unreachable_daemon_raises_and_closes_client(monkeypatch):
    client = FakeClient(ping_error=RequestsConnectionError("Connection refused"))
    monkeypatch.setattr(docker, "from_env", lambda: client)

    with pytest.raises(DockerUnavailableError, match="Connection refused"):
        verify_docker_installed()
    assert client.closed is True
