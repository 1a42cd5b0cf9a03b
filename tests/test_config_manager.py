import json

import pytest

from dockbuild.constants import CONFIG_FILE, DEFAULT_BUILD_SETTINGS
from dockbuild.managers.config_manager import ConfigError, ConfigManager


def write_config(directory, content):
    path = directory / CONFIG_FILE
    path.write_text(content if isinstance(content, str) else json.dumps(content), encoding="utf-8")
    return path


def test_missing_file_uses_defaults(tmp_path):
    config = ConfigManager(str(tmp_path)).load_config()
    assert config == DEFAULT_BUILD_SETTINGS


def test_file_overrides_defaults(tmp_path):
    write_config(tmp_path, {"image_name": "example/app", "lint_failure_threshold": "warning"})
    config = ConfigManager(str(tmp_path)).load_config()
    assert config["image_name"] == "example/app"
    assert config["lint_failure_threshold"] == "warning"
    assert config["dockerfile"] == DEFAULT_BUILD_SETTINGS["dockerfile"]


def test_loading_does_not_mutate_defaults(tmp_path):
    write_config(tmp_path, {"image_name": "example/app"})
    ConfigManager(str(tmp_path)).load_config()
    assert DEFAULT_BUILD_SETTINGS["image_name"] == "voxextractlabs/vox-demucs"


@pytest.mark.parametrize(
    "content, message",
    [
        ("{not json", "加载配置文件失败"),
        ([], "JSON对象"),
        ({"registry": "docker.io"}, "未知的配置项"),
        ({"image_name": 42}, "类型错误"),
        ({"context_dir": ""}, "不能为空"),
        ({"lint_failure_threshold": "fatal"}, "lint_failure_threshold"),
    ],
)
def test_invalid_config(tmp_path, content, message):
    write_config(tmp_path, content)
    with pytest.raises(ConfigError, match=message):
        ConfigManager(str(tmp_path)).load_config()
