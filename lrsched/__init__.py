"""
lrsched: step-indexed learning rate schedulers with checkpoint/resume support.
"""

__version__ = "0.1.0"

from .training import (
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

from .utils import (
    load_scheduler_config,
    save_scheduler_config,
    load_checkpoint,
    save_checkpoint,
    get_checkpoint_info,
    setup_logging,
    preview_schedule,
    peak_step
)

__all__ = [
    # Schedulers
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

    # Utils
    'load_scheduler_config',
    'save_scheduler_config',
    'load_checkpoint',
    'save_checkpoint',
    'get_checkpoint_info',
    'setup_logging',
    'preview_schedule',
    'peak_step',
]
