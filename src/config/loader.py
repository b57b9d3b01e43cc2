import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.config.models import PosConfig

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "POS_CONFIG_PATH"
DATA_DIR_ENV = "POS_DATA_DIR"


def resolve_config_path(path: str | Path | None = None) -> Path:
    if path is not None:
        return Path(path)
    return Path(os.environ.get(CONFIG_PATH_ENV, "pos.yaml"))


def load_config(path: str | Path | None = None, *, required: bool = False) -> PosConfig:
    """
    Load and validate the POS config file, then apply environment overrides.

    A missing file yields the built-in defaults unless required=True.
    Raises FileNotFoundError if required and missing.
    Raises ValueError if the YAML or its schema is invalid.
    """
    config_path = resolve_config_path(path)

    if not config_path.exists():
        if required:
            raise FileNotFoundError(f"Config file not found at: {config_path}")
        logger.info("No config at %s, using defaults", config_path)
        data: object = {}
    else:
        try:
            data = yaml.safe_load(config_path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML syntax in config file: {e}") from e

    try:
        config = PosConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Config validation failed:\n{e}") from e

    data_dir = os.environ.get(DATA_DIR_ENV)
    if data_dir:
        config.storage.data_dir = data_dir

    return config


def advisory_api_key(config: PosConfig) -> str | None:
    return os.environ.get(config.advisory.api_key_env) or None
