"""Server configuration loading and logging setup."""

from __future__ import annotations

import dataclasses
import logging
import sys
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

import yaml

__all__ = [
    "AppConfig",
    "ConfigFileLostError",
    "LOG_PREFIX",
    "get_abs_path",
    "get_default_log_path",
    "decode_config",
    "init_logging",
]

LOG_PREFIX = "tts_server.log"
_LOCAL_TZ = timezone(timedelta(hours=8))
_LOG_FORMAT = (
    "%(asctime)s %(levelname)s %(threadName)s(%(thread)d) "
    "%(name)s %(filename)s:%(lineno)d: %(message)s"
)


class ConfigFileLostError(Exception):
    """The configuration file holds no server configuration."""

    def __init__(self) -> None:
        super().__init__("convert.yaml does not exist")


@dataclass(frozen=True)
class AppConfig:
    """Where to log and which address to listen on."""

    log_path: str | None
    ip: str
    port: int


class _ConfigLoader(yaml.SafeLoader):
    """Safe loader that also understands ``!Config`` tagged entries."""


def _construct_tagged_config(loader: yaml.SafeLoader, node: yaml.Node) -> dict:
    return {"Config": loader.construct_mapping(node, deep=True)}


_ConfigLoader.add_constructor("!Config", _construct_tagged_config)


def _config_from_entry(entry: object) -> AppConfig:
    if not isinstance(entry, dict) or set(entry) != {"Config"}:
        raise ValueError(f"unknown configuration entry: {entry!r}")
    body = entry["Config"]
    if not isinstance(body, dict):
        raise ValueError("Config entry must be a mapping")
    log_path = body.get("log_path")
    if log_path is not None and not isinstance(log_path, str):
        raise ValueError("log_path must be a string")
    ip = body.get("ip")
    if not isinstance(ip, str):
        raise ValueError("ip must be a string")
    port = body.get("port")
    if isinstance(port, bool) or not isinstance(port, int) or not 0 <= port <= 0xFFFF:
        raise ValueError("port must be an integer between 0 and 65535")
    return AppConfig(log_path=log_path, ip=ip, port=port)


def _read_first_config(config_file: Path) -> AppConfig | None:
    path = Path(config_file).resolve(strict=True)
    try:
        with path.open(encoding="utf-8") as handle:
            data = yaml.load(handle, Loader=_ConfigLoader)
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid configuration file: {exc}") from exc
    if not isinstance(data, list):
        raise ValueError("configuration file must hold a list of entries")
    configs = [_config_from_entry(entry) for entry in data]
    return configs[0] if configs else None


def get_abs_path(path) -> Path:
    """Return ``path`` as an absolute directory, creating it if missing."""
    target = Path(path)
    if target.is_absolute():
        target.mkdir(parents=True, exist_ok=True)
        return target
    target = Path.cwd() / target
    target.mkdir(parents=True, exist_ok=True)
    return target.resolve()


def get_default_log_path(base_dir=None) -> Path:
    """Return ``base_dir/logs``, creating the directory if needed."""
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    log_path = base / "logs"
    if not log_path.exists():
        log_path.mkdir()
    return log_path


def decode_config(config_file, base_dir=None) -> AppConfig:
    """Read the first ``Config`` entry and settle its log directory."""
    config = _read_first_config(Path(config_file))
    if config is None:
        raise ConfigFileLostError()
    if config.log_path is None or config.log_path == "default":
        log_path = get_default_log_path(base_dir)
    else:
        log_path = Path(config.log_path)
        if not log_path.exists():
            log_path.mkdir()
    return dataclasses.replace(config, log_path=str(log_path))


class _LocalTimeFormatter(logging.Formatter):
    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        moment = datetime.fromtimestamp(record.created, tz=_LOCAL_TZ)
        return moment.strftime("%Y-%m-%d %H:%M:%S.%f")


def init_logging(config: AppConfig) -> list[logging.Handler]:
    """Log DEBUG and above to stdout and INFO and above to a daily file.

    Returns the installed handlers so the caller can flush and close them.
    """
    if config.log_path is None:
        raise ValueError("configuration has no log path")
    log_dir = get_abs_path(config.log_path)
    formatter = _LocalTimeFormatter(_LOG_FORMAT)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.setFormatter(formatter)

    file_handler = TimedRotatingFileHandler(
        log_dir / LOG_PREFIX, when="midnight", encoding="utf-8"
    )
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.addHandler(file_handler)
    root.addHandler(stdout_handler)
    return [file_handler, stdout_handler]