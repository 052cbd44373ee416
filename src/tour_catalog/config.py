"""Configuration loading for the tour catalog."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TOUR_CATALOG_CONFIG"
DEFAULT_CONFIG_PATH = Path("config.yaml")

DEFAULTS: dict[str, Any] = {
    "data_dir": ".",
    "store_path": "{{ data_dir }}/routes.csv",
    "log_level": "WARNING",
    "log_format": "%(asctime)s | %(levelname)s | %(message)s",
}


@dataclass
class CatalogConfig:
    """Settings for one run of the catalog."""

    store_path: Path
    log_level: str = "WARNING"
    log_format: str = DEFAULTS["log_format"]


def load_config(config_path: Path | str | None = None) -> CatalogConfig:
    """Load the catalog configuration from a YAML file.

    The path is taken from the argument, then the TOUR_CATALOG_CONFIG
    environment variable, then ``config.yaml`` in the working directory.
    A missing file yields the defaults.

    Top-level string values can be referenced from other values as
    ``{{ variable_name }}``.

    Returns:
        The configuration.
    """
    path = Path(config_path or os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)

    raw: dict[str, Any] = {}
    if path.exists():
        with path.open() as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            msg = f"Config file {path} must contain a mapping"
            raise ValueError(msg)
        logger.debug("Loaded config from %s", path)
    else:
        logger.debug("No config file at %s, using defaults", path)

    config = replace_templates({**DEFAULTS, **raw})

    return CatalogConfig(
        store_path=Path(config["store_path"]),
        log_level=str(config["log_level"]).upper(),
        log_format=config["log_format"],
    )


def replace_templates(config: dict[str, Any]) -> dict[str, Any]:
    """Replace {{ variable_name }} with top-level string values."""
    variables = {
        key: value
        for key, value in config.items()
        if isinstance(value, str)
    }

    def replace(obj: Any) -> Any:  # noqa: ANN401
        if isinstance(obj, str):
            for var_name, var_value in variables.items():
                obj = obj.replace(f"{{{{ {var_name} }}}}", str(var_value))
            return obj

        if isinstance(obj, dict):
            return {k: replace(v) for k, v in obj.items()}

        if isinstance(obj, list):
            return [replace(item) for item in obj]

        return obj

    return replace(config)
