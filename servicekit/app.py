"""Command entry point: load configuration, start the server, wait for a stop signal."""

from __future__ import annotations

import argparse
import logging
import platform
import signal
import threading
from collections.abc import Callable, Sequence

from .config import DEFAULT_PATH, ConfigError, load_config, print_banner
from .server import serve
from .version import VERSION, python_version

_logger = logging.getLogger("servicekit")
_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line; ``config_dir`` defaults to the configs directory."""
    parser = argparse.ArgumentParser(prog="servicekit")
    parser.add_argument(
        "-config-dir",
        "--config-dir",
        dest="config_dir",
        default=DEFAULT_PATH,
        help="配置文件目录路径",
    )
    return parser.parse_args(argv)


def run_app(
    argv: Sequence[str] | None = None,
    shutdown_hook: Callable[[], None] | None = None,
) -> None:
    """Run the service until SIGINT or SIGTERM, then call ``shutdown_hook``.

    Raises ConfigError when the configuration cannot be read.
    """
    args = parse_args(argv)
    config = load_config(args.config_dir)

    print_banner(_logger)
    _logger.info("================================================")
    _logger.info("|            Your Go Project Service           |")
    _logger.info("------------------------------------------------")
    _logger.info("> 操作系统: %s / 架构: %s", platform.system().lower(), platform.machine())
    _logger.info("> Python 版本: %s", python_version())
    _logger.info("> 项目版本: %s", VERSION)
    _logger.info("> 配置文件路径: %s", args.config_dir)
    _logger.info("================================================")

    stop = threading.Event()

    def _on_signal(signum, frame) -> None:
        stop.set()

    previous = {sig: signal.signal(sig, _on_signal) for sig in _SIGNALS}
    try:
        server = threading.Thread(
            target=serve,
            args=(config.http_port, config.mode, config),
            name="http-server",
            daemon=True,
        )
        server.start()
        while not stop.wait(0.2):
            pass
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler if handler is not None else signal.SIG_DFL)

    _logger.info("服务准备关闭...")
    if shutdown_hook is not None:
        shutdown_hook()
    _logger.info("服务已优雅退出")


def main(argv: Sequence[str] | None = None) -> int:
    """Start the service and return the process exit status."""
    try:
        run_app(argv)
    except ConfigError as exc:
        _logger.error("Application run error: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())