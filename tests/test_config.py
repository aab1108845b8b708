from pathlib import Path

import pytest

from cover_extract.config import Config, load_config
from cover_extract.sources.files import SUPPORTED_TYPES

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_default_config_file_loads():
    cfg = load_config(str(REPO_ROOT / "config" / "config.yaml"))

    assert cfg.files.max_bytes == 5 * 1024 * 1024
    assert cfg.files.allowed_types == SUPPORTED_TYPES
    assert cfg.output.preview_chars == 3000
    assert cfg.fetch.user_agent.startswith("Mozilla/5.0")


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(str(path)) == Config()


@pytest.mark.parametrize(
    "body",
    [
        "output:\n  preview_chars: 5000\n",
        "files:\n  max_bytes: 0\n",
        "fetch:\n  timeout: -1\n",
        "logging:\n  level: LOUD\n",
        "- just\n- a list\n",
    ],
)
def test_invalid_config_raises(tmp_path, body):
    path = tmp_path / "config.yaml"
    path.write_text(body, encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(str(path))
