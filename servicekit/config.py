"""Application configuration loading and logging setup."""

from __future__ import annotations

import logging
import logging.handlers
import os
import posixpath
from dataclasses import dataclass

import yaml

DEFAULT_PATH = "./configs"
DEFAULT_NAME = "app"

_LOGGER_NAME = "servicekit"
_LEVELS = (logging.CRITICAL,) * 3 + (logging.ERROR, logging.WARNING,
                                     logging.INFO, logging.INFO, logging.DEBUG)

BANNER_LINES = (
    "",
    "              _-o#&&*\"?d:>b\\_",
    "          _o/\"`\"  \",, d8F988888Ho_",
    "       .o&#\"        `\"8bH88888888888Ho.",
    "     .o\"\" \"         vod8*$&&H8888888888?.",
    "    ,\"              $8&ood,~\"`(&##888888H\\",
    "   /               ,8888888#b?#bob8888H888L",
    "  &              ?888888888888888887888$R*Hk",
    " ?$.            :8888888888888888888/H888|`*L",
    "|               |88888888888888888888b8H\"   T,",
    "$H#:            `*88888888888888888888b#}\"  `?",
    "]88H#             \"\"*\"\"\"\"*#8888888888888\"    -",
    "88888b_                   |88888888888P\"     :",
    "H8888888Ho                 `888888888T       .",
    "?88888888P                  988888888}       -",
    "-?8888888                  |888888888?,d-    \"",
    " :|888888-                 `8888888T .8|.   :",
    "  .9888[                    &88888*\" `\"    .",
    "   :988k                    `888#\"        -",
    "     &8}                     `          .-",
    "      `&.                             .",
    "        `~,   .                     ./",
    "            . _                  .-",
    "              \"`--._,dd###pp=\"\"\"",
    "",
)


class ConfigError(Exception):
    """Raised when a configuration file cannot be found or read."""


@dataclass
class AppConfig:
    """Settings read from the application configuration files."""

    app_name: str = ""
    type: str = ""
    profile: str = ""
    http_port: str = ""
    mode: str = ""
    log_enable_to_file: bool = False
    log_path: str = ""
    log_level: int = 0
    log_max_days: int = 0

    def log_file(self):
        """Path of the log file: ``<log_path>/<app_name>.log``."""
        return posixpath.normpath(posixpath.join(self.log_path, self.app_name + ".log"))


def _read_config(directory, name):
    for ext in ("yaml", "yml"):
        candidate = os.path.join(directory, f"{name}.{ext}")
        if os.path.isfile(candidate):
            break
    else:
        raise ConfigError(f'Config File "{name}" Not Found in "{directory}"')
    try:
        with open(candidate, encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"read config failed: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"read config failed: {candidate} is not a mapping")
    return data


def _lookup(data, key):
    """Case-insensitive dotted-key lookup."""
    node = data
    for part in key.lower().split("."):
        if not isinstance(node, dict):
            return None
        node = {str(k).lower(): v for k, v in node.items()}.get(part)
    return node


def _as_str(value):
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def _as_bool(value):
    if isinstance(value, str):
        return value.strip() in {"1", "t", "T", "TRUE", "true", "True"}
    return bool(value) if isinstance(value, (bool, int, float)) else False


def _as_int(value):
    try:
        return int(value.strip(), 0) if isinstance(value, str) else int(value or 0)
    except (TypeError, ValueError):
        return 0


def load_config(conf_path=DEFAULT_PATH, profile=""):
    """Read ``app.yaml`` and, when a profile is active, ``app-<profile>.yaml``."""
    directory = conf_path or DEFAULT_PATH
    base = _read_config(directory, DEFAULT_NAME)
    config = AppConfig(
        app_name=_as_str(_lookup(base, "app.name")),
        type=_as_str(_lookup(base, "app.type")),
        profile=profile or _as_str(_lookup(base, "app.profile")),
    )
    env = _read_config(directory, f"{DEFAULT_NAME}-{config.profile}") if config.profile else base

    config.http_port = _as_str(_lookup(env, "app.httpPort"))
    config.mode = _as_str(_lookup(env, "app.mode"))
    config.log_enable_to_file = _as_bool(_lookup(env, "log.enable2file"))
    config.log_path = _as_str(_lookup(env, "log.path"))
    config.log_level = _as_int(_lookup(env, "log.level"))
    config.log_max_days = _as_int(_lookup(env, "log.maxdays"))

    logger = configure_logging(config)
    for line in (
        "======== Application config ========>",
        f"app name: {config.app_name}",
        f"app type: {config.type}",
        f"app profile: {config.profile}",
        f"http port: {config.http_port}",
        f"app run mode: {config.mode}",
        "-------------------------------------",
        f"log enable to file: {config.log_enable_to_file}",
        f"log path: {config.log_path}",
        f"log level: {config.log_level}",
        f"log max days: {config.log_max_days}",
        "-------------------------------------",
        "<======= Application config =========",
    ):
        logger.info(line)
    return config


def configure_logging(config):
    """Set up console logging and, if enabled, a daily rotated log file."""
    logger = logging.getLogger(_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] [%(filename)s:%(lineno)d] %(message)s"
    )
    handlers = [logging.StreamHandler()]
    if config.log_enable_to_file:
        filename = config.log_file()
        os.makedirs(os.path.dirname(filename) or ".", exist_ok=True)
        file_handler = logging.handlers.TimedRotatingFileHandler(
            filename, when="midnight", backupCount=max(config.log_max_days, 0), encoding="utf-8"
        )
        level = config.log_level
        file_handler.setLevel(_LEVELS[level] if 0 <= level < len(_LEVELS) else logging.DEBUG)
        handlers.append(file_handler)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def print_banner(logger=None):
    """Log the start-up banner line by line."""
    target = logger or logging.getLogger(_LOGGER_NAME)
    for line in BANNER_LINES:
        target.info(line)