"""
Load configuration for the package from files on disk.
"""
import json
import logging
import logging.config
from pathlib import Path
from typing import Any

import yaml

from playlist import MODULE_ROOT, PACKAGE_ROOT
from playlist.exception import ConfigError
from playlist.log.logger import PlaylistLogger

LOG_CONFIG_EXTENSIONS = frozenset({".yml", ".yaml", ".json"})


def _make_path_absolute(path: str | Path) -> Path:
    """Append the package root path to any relative path to make it an absolute path."""
    path = Path(path)
    if not path.is_absolute():
        path = PACKAGE_ROOT.joinpath(path)
    return path


def _read_log_config(path: Path) -> dict[str, Any]:
    ext = path.suffix.casefold()
    if ext not in LOG_CONFIG_EXTENSIONS:
        raise ConfigError(
            "Unrecognised log config file type: {key}. Valid: {value}", key=ext, value=sorted(LOG_CONFIG_EXTENSIONS)
        )
    if not path.is_file():
        raise ConfigError("Log config file not found: {key}", key=str(path))

    with open(path, "r", encoding="utf-8") as file:
        if ext in {".yml", ".yaml"}:
            return yaml.safe_load(file)
        return json.load(file)


def load_log_config(path: str | Path = "logging.yml", name: str | None = None, *names: str) -> dict[str, Any]:
    """
    Load logging config from the JSON or YAML file at the given ``path`` using logging.config.dictConfig.
    If relative path given, appends package root path.

    :param path: The path to the logger config
    :param name: If the given name is a valid logger name in the config,
        assign this logger's config to the module root logger.
    :param names: When given, also apply the config from ``name`` to loggers with these ``names``.
    :return: The config that was applied.
    :raise ConfigError: When the file is missing, of an unrecognised type, or does not contain a mapping.
    """
    path = _make_path_absolute(path)
    log_config = _read_log_config(path)
    if not isinstance(log_config, dict):
        raise ConfigError("Log config must be a mapping: {key}", key=str(path))

    for formatter in log_config.get("formatters", {}).values():  # ensure ANSI colour codes in format are recognised
        if "format" in formatter:
            formatter["format"] = formatter["format"].replace(r"\33", "\33")

    loggers = log_config.get("loggers", {})
    if name and name in loggers:
        loggers[MODULE_ROOT] = loggers[name]
        for n in names:
            loggers[n] = loggers[name]

    logging.config.dictConfig(log_config)

    if name and name in loggers:
        logger: PlaylistLogger = logging.getLogger(MODULE_ROOT)
        logger.debug(f"Logging config set to: {name}")

    return log_config
