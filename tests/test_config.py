import dataclasses

import pytest

from personalsite.config import Config, ConfigError, load_config

KEYS = [
    "SERVER_PORT",
    "ENVIRONMENT",
    "DATABASE_DRIVER_NAME",
    "DATABASE_USERNAME",
    "DATABASE_PASSWORD",
    "DATABASE_NAME",
    "DATABASE_URL",
    "DATABASE_PORT",
]


def full_env():
    return {
        "SERVER_PORT": "8080",
        "ENVIRONMENT": "dev",
        "DATABASE_DRIVER_NAME": "postgres",
        "DATABASE_USERNAME": "user",
        "DATABASE_PASSWORD": "password",
        "DATABASE_NAME": "site",
        "DATABASE_URL": "localhost",
        "DATABASE_PORT": "5432",
    }


@pytest.fixture
def clean_env(monkeypatch):
    for key in KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_from_env_reads_every_field():
    cfg = Config.from_env(full_env())
    assert cfg.server_port == "8080"
    assert cfg.environment == "dev"
    assert cfg.database_driver_name == "postgres"
    assert cfg.database_username == "user"
    assert cfg.database_password == "password"
    assert cfg.database_name == "site"
    assert cfg.database_url == "localhost"
    assert cfg.database_port == "5432"


@pytest.mark.parametrize("missing", KEYS)
def test_from_env_missing_key_raises(missing):
    env = full_env()
    del env[missing]
    with pytest.raises(ConfigError, match=missing):
        Config.from_env(env)


def test_from_env_accepts_empty_value():
    env = full_env()
    env["ENVIRONMENT"] = ""
    assert Config.from_env(env).environment == ""


def test_repr_hides_password():
    cfg = Config.from_env(full_env())
    assert "password" not in repr(cfg).replace("database_password", "")


def test_config_is_frozen():
    cfg = Config.from_env(full_env())
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.server_port = "1"
    assert cfg.server_port == "8080"


def test_load_config_from_file(tmp_path, clean_env):
    env_file = tmp_path / ".env"
    env_file.write_text("\n".join(f"{k}={v}" for k, v in full_env().items()) + "\n")
    assert load_config(env_file) == Config.from_env(full_env())


def test_environment_overrides_file(tmp_path, clean_env):
    env_file = tmp_path / ".env"
    env_file.write_text("\n".join(f"{k}={v}" for k, v in full_env().items()) + "\n")
    clean_env.setenv("SERVER_PORT", "9090")
    assert load_config(env_file).server_port == "9090"


def test_load_config_missing_file(tmp_path, clean_env):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.env")


def test_load_config_incomplete_file(tmp_path, clean_env):
    env_file = tmp_path / ".env"
    env_file.write_text("SERVER_PORT=8080\n")
    with pytest.raises(ConfigError, match="ENVIRONMENT"):
        load_config(env_file)