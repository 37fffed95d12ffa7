"""Loguru sinks for console and optional log files."""

import sys
from typing import Optional

from loguru import logger

from floodwatch.utils.config import LoggingConfig, get_project_root, settings


def file_sinks(cfg: LoggingConfig) -> list[tuple[str, str]]:
    """(file name, level) pairs to add when file logging is on."""
    if not cfg.to_file:
        return []
    sinks = [(cfg.file_name, cfg.level)]
    if cfg.error_file_name:
        sinks.append((cfg.error_file_name, "ERROR"))
    return sinks


def setup_logging(cfg: Optional[LoggingConfig] = None) -> None:
    cfg = cfg or settings.logging
    logger.remove()
    logger.add(sys.stderr, format=cfg.format, level=cfg.level, colorize=True)

    sinks = file_sinks(cfg)
    if sinks:
        log_dir = get_project_root() / "logs"
        log_dir.mkdir(exist_ok=True)
        for name, level in sinks:
            logger.add(
                log_dir / name,
                format=cfg.format,
                level=level,
                rotation=cfg.rotation,
                retention=cfg.retention,
                compression="zip",
            )

    logger.info(f"Logging initialized - Level: {cfg.level}, files: {[n for n, _ in sinks]}")
