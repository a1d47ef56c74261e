from __future__ import annotations

"""Public configuration API for TagFinder."""

from TagFinder.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from TagFinder.config.corpus import CorpusConfig
from TagFinder.config.output import OutputConfig
from TagFinder.config.runtime import RuntimeConfig
from TagFinder.config.search import SearchConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "RuntimeConfig",
    "CorpusConfig",
    "SearchConfig",
    "OutputConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
