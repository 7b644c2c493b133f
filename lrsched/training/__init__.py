"""Training utilities for lrsched."""

# Scheduler system
from .schedulers import (
    LearningRate,
    LrScheduler,
    ConstantLrScheduler,
    ConstantLrSchedulerConfig,
    StepLrScheduler,
    StepLrSchedulerConfig,
    WarmUpScheduler,
    WarmUpSchedulerConfig,
    NoamLrScheduler,
    NoamLrSchedulerConfig,
    OptimizerLrBinding,
    create_config,
    create_scheduler,
    create_scheduler_from_config,
    SCHEDULER_REGISTRY,
    CONFIG_REGISTRY
)


__all__ = [
    'LearningRate',
    'LrScheduler',
    'ConstantLrScheduler',
    'ConstantLrSchedulerConfig',
    'StepLrScheduler',
    'StepLrSchedulerConfig',
    'WarmUpScheduler',
    'WarmUpSchedulerConfig',
    'NoamLrScheduler',
    'NoamLrSchedulerConfig',
    'OptimizerLrBinding',
    'create_config',
    'create_scheduler',
    'create_scheduler_from_config',
    'SCHEDULER_REGISTRY',
    'CONFIG_REGISTRY',
]
