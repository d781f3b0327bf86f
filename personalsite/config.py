"""Site configuration read from the environment and a dotenv file."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path

from dotenv import dotenv_values


class ConfigError(Exception):
    """Raised when the configuration cannot be loaded."""


@dataclass(frozen=True)
class Config:
    """Settings for the web server and its database."""

    server_port: str
    environment: str
    database_driver_name: str
    database_username: str
    database_password: str = field(repr=False)
    database_name: str
    database_url: str
    database_port: str

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "Config":
        """Build a config from a mapping of environment variables.

        Every setting is required; a variable that is set but empty is accepted.
        """
        values = {}
        for item in fields(cls):
            key = item.name.upper()
            if key not in environ:
                raise ConfigError(f"required key {key} missing value")
            values[item.name] = environ[key]
        return cls(**values)


def load_config(env_file: str | os.PathLike[str] = ".env") -> Config:
    """Load the config from ``env_file`` and the process environment.

    Variables already present in the environment take precedence over the file.
    """
    path = Path(env_file)
    if not path.is_file():
        raise ConfigError(f"open {path}: no such file")
    merged = {key: value for key, value in dotenv_values(path).items() if value is not None}
    merged.update(os.environ)
    return Config.from_env(merged)