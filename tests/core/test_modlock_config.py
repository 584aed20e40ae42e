"""Tests for .modlock.toml loading."""

from pathlib import Path

import pytest

from modlock.core.config import ModlockConfig, load_config


def test_defaults_without_config_file(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    root = tmp_path.resolve()
    assert config == ModlockConfig.for_root(root)
    assert config.modules_dir == root / ".terraform" / "modules"
    assert config.metadata_path == root / ".terraform" / "modules" / "modules.json"
    assert config.lock_path == root / ".module_hashes.json"
    assert config.registry_host == "registry.terraform.io"
    assert config.terraform == "terraform"
    assert config.jobs == 1


def test_values_from_config_file(tmp_path: Path) -> None:
    (tmp_path / ".modlock.toml").write_text(
        'registry_host = "registry.opentofu.org"\n'
        'terraform = "tofu"\n'
        'lock_file = "locks/modules.json"\n'
        "jobs = 4\n",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.registry_host == "registry.opentofu.org"
    assert config.terraform == "tofu"
    assert config.lock_path == tmp_path.resolve() / "locks" / "modules.json"
    assert config.jobs == 4


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("jobs = 0\n", "positive integer"),
        ("jobs = true\n", "positive integer"),
        ('terraform = ""\n', "non-empty string"),
        ("lock_file = 3\n", "non-empty string"),
        ('lockfile = "x"\n', "Unknown key"),
        ("not toml [", "Invalid TOML"),
    ],
)
def test_invalid_config_raises_value_error(tmp_path: Path, content: str, message: str) -> None:
    (tmp_path / ".modlock.toml").write_text(content, encoding="utf-8")

    with pytest.raises(ValueError, match=message):
        load_config(tmp_path)
