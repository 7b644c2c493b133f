"""Scheduler factory and registry."""

import logging
from typing import Dict, Any, Type

from .base import LrScheduler, SchedulerConfigMixin, scheduler_context
from .constant import ConstantLrScheduler, ConstantLrSchedulerConfig
from .step import StepLrScheduler, StepLrSchedulerConfig
from .warmup import WarmUpScheduler, WarmUpSchedulerConfig
from .noam import NoamLrScheduler, NoamLrSchedulerConfig


logger = logging.getLogger(__name__)


SCHEDULER_REGISTRY: Dict[str, Type] = {
    'constant': ConstantLrScheduler,
    'step': StepLrScheduler,
    'warmup': WarmUpScheduler,
    'noam': NoamLrScheduler,
}

CONFIG_REGISTRY: Dict[str, Type[SchedulerConfigMixin]] = {
    'constant': ConstantLrSchedulerConfig,
    'step': StepLrSchedulerConfig,
    'warmup': WarmUpSchedulerConfig,
    'noam': NoamLrSchedulerConfig,
}


def create_config(name: str, **kwargs) -> SchedulerConfigMixin:
    """
    Create a scheduler config by name.

    Args:
        name: Scheduler name ('constant', 'step', 'warmup', 'noam')
        **kwargs: Config fields

    Returns:
        Config instance

    Raises:
        ValueError: If the name is not registered
    """
    name_lower = str(name).lower().strip()

    if name_lower not in CONFIG_REGISTRY:
        available = ', '.join(CONFIG_REGISTRY.keys())
        raise ValueError(f"Unknown scheduler: {name}. Available: {available}")

    return CONFIG_REGISTRY[name_lower](**kwargs)


def create_scheduler(name: str, strict: bool = False, **kwargs) -> LrScheduler:
    """
    Create a scheduler by name.

    Args:
        name: Scheduler name ('constant', 'step', 'warmup', 'noam')
        strict: Validate the config before building the scheduler
        **kwargs: Scheduler-specific config fields

    Returns:
        Scheduler instance

    Example:
        >>> scheduler = create_scheduler(
        ...     'step',
        ...     init_lr=0.1,
        ...     step_size=30,
        ...     gamma=0.1
        ... )
    """
    config = create_config(name, **kwargs)
    if strict:
        config.validate()

    scheduler = config.init()
    logger.info(f"Created scheduler: {scheduler!r}", extra=scheduler_context(scheduler))
    return scheduler


def create_scheduler_from_config(
    config: Dict[str, Any],
    strict: bool = False
) -> LrScheduler:
    """
    Create scheduler from config dict.

    Args:
        config: Config with 'name' or 'type' and scheduler parameters
        strict: Validate the config before building the scheduler

    Returns:
        Scheduler instance

    Example:
        >>> config = {
        ...     'name': 'warmup',
        ...     'init_lr': 3e-4,
        ...     'num_warmup_steps': 1000
        ... }
        >>> scheduler = create_scheduler_from_config(config)
    """
    config = config.copy()

    # Support both 'name' and 'type'
    name = config.pop('name', None)
    type_name = config.pop('type', None)
    name = name or type_name
    if name is None:
        raise ValueError("Config must contain 'name' or 'type' key")

    return create_scheduler(name, strict=strict, **config)
