from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import yaml

logger = logging.getLogger(__name__)

DEFAULT_STYLE = "table, th, td { border: 1px solid black; border-collapse: collapse; padding: 5px; }"


@dataclass
class ReportConfig:
    """Presentation and runtime settings for a report run.

    Attributes:
        title: Text of the document <title> element
        style: CSS rule embedded in the document <style> element
        log_level: Logging level name applied by the command line entry point
    """

    title: str = "File Report"
    style: str = DEFAULT_STYLE
    log_level: str = "WARNING"


def load_config_from_yaml(config_path: Union[str, Path]) -> ReportConfig:
    """Load report configuration from a YAML file.

    Missing keys keep their defaults; an empty file yields the default config.
    """
    with open(config_path, "r", encoding="utf-8") as f:
        config_dict = yaml.safe_load(f) or {}

    defaults = ReportConfig()
    cfg = ReportConfig(
        title=str(config_dict.get("title", defaults.title)),
        style=str(config_dict.get("style", defaults.style)),
        log_level=str(config_dict.get("log_level", defaults.log_level)).upper(),
    )
    logger.debug("Loaded report config from %s: %s", config_path, cfg)
    return cfg
