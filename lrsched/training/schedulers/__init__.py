"""Learning rate schedulers for lrsched."""

from .base import (
    LearningRate,
    LrScheduler,
    StepCountMixin,
    SchedulerConfigMixin,
    powf,
    scheduler_context
)
from .constant import ConstantLrScheduler, ConstantLrSchedulerConfig, ConstantLrRecord
from .step import StepLrScheduler, StepLrSchedulerConfig, StepLrRecord
from .warmup import WarmUpScheduler, WarmUpSchedulerConfig, WarmUpRecord
from .noam import NoamLrScheduler, NoamLrSchedulerConfig, NoamLrRecord
from .optimizer import OptimizerLrBinding
from .factory import (
    create_config,
    create_scheduler,
    create_scheduler_from_config,
    SCHEDULER_REGISTRY,
    CONFIG_REGISTRY
)


__all__ = [
    # Protocol and base
    'LearningRate',
    'LrScheduler',
    'StepCountMixin',
    'SchedulerConfigMixin',
    'powf',
    'scheduler_context',

    # Scheduler implementations
    'ConstantLrScheduler',
    'ConstantLrSchedulerConfig',
    'ConstantLrRecord',
    'StepLrScheduler',
    'StepLrSchedulerConfig',
    'StepLrRecord',
    'WarmUpScheduler',
    'WarmUpSchedulerConfig',
    'WarmUpRecord',
    'NoamLrScheduler',
    'NoamLrSchedulerConfig',
    'NoamLrRecord',

    # Optimizer integration
    'OptimizerLrBinding',

    # Factory functions
    'create_config',
    'create_scheduler',
    'create_scheduler_from_config',

    # Registry
    'SCHEDULER_REGISTRY',
    'CONFIG_REGISTRY',
]
