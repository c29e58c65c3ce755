"""
Settings for digestkit.

Sources, highest priority first:
1. Keyword arguments to DigestkitSettings()
2. DIGESTKIT_<SECTION>__<FIELD> environment variables
3. .digestkit/config.toml, or [tool.digestkit] in pyproject.toml, found by
   walking up from the working directory
4. Model defaults
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigFileError
from .models.config import DigestConfig, LoggingConfig

CONFIG_DIR_NAME = ".digestkit"
CONFIG_FILE_NAME = "config.toml"
PYPROJECT_TABLE = "digestkit"


def _get_logger():
    from ..services.logging import NullLogger
    from .di import resolve_or_default
    from .interfaces.logger import ILogger

    return resolve_or_default(ILogger, NullLogger)


def _digestkit_table(path: Path) -> dict[str, Any]:
    """Parse path and return the digestkit settings it holds.

    pyproject.toml contributes only its [tool.digestkit] table.

    Raises:
        tomllib.TOMLDecodeError, OSError
    """
    with open(path, "rb") as f:
        data = tomllib.load(f)
    if path.name == "pyproject.toml":
        return data.get("tool", {}).get(PYPROJECT_TABLE, {})
    return data


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Walk up from start_dir (default: cwd) to the first digestkit config.

    In each directory .digestkit/config.toml wins over pyproject.toml, and
    pyproject.toml only counts when it has a [tool.digestkit] table.
    Unreadable pyproject files are skipped.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for directory in (start, *start.parents):
        candidate = directory / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if candidate.exists():
            return candidate

        pyproject = directory / "pyproject.toml"
        if not pyproject.exists():
            continue
        try:
            if _digestkit_table(pyproject):
                return pyproject
        except (tomllib.TOMLDecodeError, OSError) as e:
            _get_logger().debug("Skipping unreadable %s: %s", pyproject, e)

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """
    Settings source for the digestkit TOML config.

    The file is read at most once. A file that cannot be read or parsed
    contributes nothing; the reason is kept in ``config_error`` for
    load_settings() to report.
    """

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = Path(config_path) if config_path is not None else None
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None
        self.config_file: str | None = None
        self.config_error: str | None = None

    def _load(self) -> dict[str, Any]:
        if self._data is not None:
            return self._data
        self._data = {}

        path = self._config_path or find_config_file(self._start_dir)
        if path is None:
            return self._data

        try:
            self._data = _digestkit_table(path)
            self.config_file = str(path)
        except tomllib.TOMLDecodeError as e:
            self.config_error = f"Failed to parse config file {path}: {e}"
        except OSError as e:
            self.config_error = f"Failed to read config file {path}: {e.strerror or e}"

        if self.config_error:
            _get_logger().warning(self.config_error)
        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._load().get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._load()


class DigestkitSettings(BaseSettings):
    """digestkit settings: the [digest] and [logging] sections."""

    model_config = {
        "env_prefix": "DIGESTKIT_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    digest: DigestConfig = DigestConfig()
    logging: LoggingConfig = LoggingConfig()

    # Set by load_settings() from the TOML source, not read from config
    config_file: str | None = None
    config_error: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # pydantic-settings calls this with no room for our arguments, so
        # load_settings() leaves its configured source in _current_toml_source
        toml_source = _current_toml_source or TomlConfigSource(settings_cls)
        return init_settings, env_settings, toml_source


_current_toml_source: TomlConfigSource | None = None


def load_settings(
    config_path: Path | None = None,
    start_dir: str | None = None,
    strict: bool = False,
) -> DigestkitSettings:
    """Load settings from the environment and the digestkit config file.

    Args:
        config_path: Use this file instead of searching for one
        start_dir: Where the search starts (default: cwd)
        strict: Raise instead of recording a config file read/parse error

    Raises:
        ConfigFileError: If strict and the config file could not be loaded
        pydantic.ValidationError: If a value is invalid (e.g. chunk_size <= 0)
    """
    global _current_toml_source

    toml_source = TomlConfigSource(DigestkitSettings, config_path, start_dir)
    _current_toml_source = toml_source
    try:
        settings = DigestkitSettings()
    finally:
        _current_toml_source = None

    settings.config_file = toml_source.config_file
    settings.config_error = toml_source.config_error
    if strict and settings.config_error:
        raise ConfigFileError(settings.config_error, file_path=str(config_path or ""))
    return settings
