"""
Configuration management for sqlizer.

Loads the connection settings written by ``sqlizer config init`` from a JSON
file, applies environment overrides, and produces the
:class:`ConnectionParams` that the schema reader is given explicitly.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .errors import SqlizerError
from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_NAME = ".sqlizer.json"
DEFAULT_DRIVER = "ODBC Driver 17 for SQL Server"
DEFAULT_PORT = 1433
ENV_PREFIX = "SQLIZER_SERVER_"

# Keys under the "server" section, in the order they are prompted and saved
SERVER_KEYS = ("host", "port", "user", "pass", "driver")


class ConfigError(SqlizerError):
    """Exception raised for configuration-related errors."""

    pass


@dataclass(frozen=True)
class ConnectionParams:
    """Connection settings for one SQL Server instance."""

    host: str
    port: int
    user: str
    password: str
    driver: str = DEFAULT_DRIVER

    @property
    def server(self) -> str:
        """Server address in the ``host,port`` form ODBC expects."""
        return f"{self.host},{self.port}"

    def masked(self) -> Dict[str, Any]:
        """Settings as a dict with the password hidden, for display."""
        return {
            "host": self.host,
            "port": self.port,
            "user": self.user,
            "pass": "*" * 8 if self.password else "",
            "driver": self.driver,
        }


def default_config_path() -> Path:
    """Return ``~/.sqlizer.json``."""
    return Path.home() / DEFAULT_CONFIG_NAME


class ConfigManager:
    """Reads and writes the sqlizer config file."""

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to the JSON config file (default ~/.sqlizer.json)
            environ: Environment used for overrides (default os.environ)
        """
        self.config_path = Path(config_path) if config_path else default_config_path()
        self._environ = os.environ if environ is None else environ

    def exists(self) -> bool:
        return self.config_path.exists()

    def load_server_settings(self) -> Dict[str, Any]:
        """
        Load the ``server`` section, with environment overrides applied.

        A missing file is not an error as long as the environment supplies
        the settings; missing values are reported by :meth:`load_connection_params`.
        """
        settings: Dict[str, Any] = {}

        if self.config_path.exists():
            settings.update(self._read_file().get("server", {}))
            logger.debug("Using config file: %s", self.config_path)
        else:
            logger.info("Config file does not exist: %s", self.config_path)

        for key in SERVER_KEYS:
            env_value = self._environ.get(f"{ENV_PREFIX}{key.upper()}")
            if env_value:
                logger.debug("Overriding server.%s from environment", key)
                settings[key] = env_value

        return settings

    def load_connection_params(self) -> ConnectionParams:
        """
        Build connection parameters from the config file and environment.

        Raises:
            ConfigError: If required settings are missing or invalid
        """
        settings = self.load_server_settings()

        missing = [key for key in ("host", "user", "pass") if not settings.get(key)]
        if missing:
            hint = (
                "run 'sqlizer config init'"
                if not self.config_path.exists()
                else f"check {self.config_path}"
            )
            raise ConfigError(
                f"missing server settings: {', '.join(missing)} ({hint})"
            )

        port = settings.get("port")
        if port is None or port == "":
            port = DEFAULT_PORT
        try:
            port = int(port)
        except (TypeError, ValueError):
            raise ConfigError(f"invalid server port: {port!r}")
        if not 0 < port < 65536:
            raise ConfigError(f"server port out of range: {port}")

        return ConnectionParams(
            host=str(settings["host"]),
            port=port,
            user=str(settings["user"]),
            password=str(settings["pass"]),
            driver=str(settings.get("driver") or DEFAULT_DRIVER),
        )

    def save_server_settings(self, settings: Dict[str, Any]) -> Path:
        """
        Write a new config file; an existing file is never overwritten.

        Raises:
            ConfigError: If the file exists or cannot be written
        """
        if self.config_path.exists():
            raise ConfigError(f"config file already exists: {self.config_path}")

        server = {key: settings[key] for key in SERVER_KEYS if key in settings}

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            # "x" mode fails if the file appeared since the check above
            with open(self.config_path, "x", encoding="utf-8") as f:
                json.dump({"server": server}, f, indent=2, ensure_ascii=False)
                f.write("\n")
        except FileExistsError:
            raise ConfigError(f"config file already exists: {self.config_path}")
        except OSError as e:
            raise ConfigError(f"failed to save config to {self.config_path}: {e}")

        # The file holds a password
        try:
            os.chmod(self.config_path, 0o600)
        except OSError as e:
            logger.warning("Could not restrict permissions on %s: %s", self.config_path, e)

        logger.info("Config written to %s", self.config_path)
        return self.config_path

    def _read_file(self) -> Dict[str, Any]:
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"invalid JSON in config file {self.config_path}: {e}")
        except OSError as e:
            raise ConfigError(f"failed to read config file {self.config_path}: {e}")

        if not isinstance(config, dict):
            raise ConfigError(
                f"config file must contain a JSON object: {self.config_path}"
            )
        server = config.get("server", {})
        if not isinstance(server, dict):
            raise ConfigError(
                f"'server' section must be a JSON object: {self.config_path}"
            )
        return config

