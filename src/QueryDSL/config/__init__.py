"""Public configuration API for QueryDSL."""

from __future__ import annotations

from QueryDSL.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from QueryDSL.config.output import OutputConfig
from QueryDSL.config.queries import QueryConfig
from QueryDSL.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "OutputConfig",
    "QueryConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
