"""Configuration helpers for applications embedding geohash16."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


@dataclass(frozen=True)
class GeohashConfig:
    """Hash length used when the caller does not pass one."""

    default_length: int = 12


@dataclass(frozen=True)
class LoggingConfig:
    """Level applied to the ``geohash16`` logger."""

    level: str = "WARNING"


@dataclass(frozen=True)
class AppConfig:
    """Aggregated configuration model."""

    geohash: GeohashConfig
    logging: LoggingConfig


def load_config(path: str | Path) -> AppConfig:
    """Parse a YAML config file into an AppConfig dataclass."""

    raw = _load_yaml(path)
    geohash_cfg = _section(raw, "geohash", path)
    logging_cfg = _section(raw, "logging", path)

    geohash = GeohashConfig(default_length=int(geohash_cfg.get("default_length", 12)))
    if geohash.default_length < 1:
        raise ValueError(
            f"geohash.default_length must be at least 1, got {geohash.default_length}"
        )
    log = LoggingConfig(level=str(logging_cfg.get("level", "WARNING")).upper())
    return AppConfig(geohash=geohash, logging=log)


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Apply the configured level to the package logger and return it."""

    logger = logging.getLogger("geohash16")
    logger.setLevel(getattr(logging, config.level.upper(), logging.WARNING))
    return logger


def _load_yaml(path: str | Path) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a top-level mapping.")
    return data


def _section(raw: dict[str, Any], name: str, path: str | Path) -> dict[str, Any]:
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Config file {path} section '{name}' must be a mapping.")
    return section
