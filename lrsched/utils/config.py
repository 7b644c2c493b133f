"""
Configuration file utilities for lrsched.

Scheduler configs are stored as flat YAML mappings tagged with the
scheduler name:

    name: step
    init_lr: 0.1
    step_size: 30
    gamma: 0.1

Example:
    >>> from lrsched.utils import load_scheduler_config, save_scheduler_config
    >>>
    >>> config = load_scheduler_config('configs/step.yaml')
    >>> scheduler = config.init()
    >>>
    >>> save_scheduler_config(config.with_gamma(0.5), 'configs/step_slow.yaml')
"""

import logging
from pathlib import Path
from typing import Union

import yaml

from ..training.schedulers.base import SchedulerConfigMixin
from ..training.schedulers.factory import create_config


logger = logging.getLogger(__name__)


def load_scheduler_config(config_path: Union[str, Path]) -> SchedulerConfigMixin:
    """
    Load a scheduler configuration from a YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Scheduler config instance

    Raises:
        ValueError: If the file has no 'name'/'type' key or names an
            unknown scheduler
    """
    with open(config_path, 'r') as f:
        config_dict = yaml.safe_load(f) or {}

    if not isinstance(config_dict, dict):
        raise ValueError(f"Expected a mapping in {config_path}, got {type(config_dict).__name__}")

    config_dict = dict(config_dict)
    name = config_dict.pop('name', None)
    type_name = config_dict.pop('type', None)
    name = name or type_name
    if name is None:
        raise ValueError(f"Config {config_path} must contain 'name' or 'type' key")

    return create_config(name, **config_dict)


def save_scheduler_config(config: SchedulerConfigMixin, config_path: Union[str, Path]) -> None:
    """
    Save a scheduler configuration to a YAML file.

    Args:
        config: Scheduler config instance
        config_path: Path to save YAML file
    """
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)

    logger.info(f"Config saved to: {config_path}")
