"""
Utilities: configuration files, checkpoints, logging and schedule previews.

Example:
    >>> from lrsched.utils import load_scheduler_config, save_checkpoint
    >>>
    >>> scheduler = load_scheduler_config("configs/warmup.yaml").init()
    >>> save_checkpoint({'lr': scheduler}, "checkpoints/step_0.pt")
"""

from .config import (
    load_scheduler_config,
    save_scheduler_config
)

from .checkpoint import (
    load_checkpoint,
    save_checkpoint,
    get_checkpoint_info
)

from .logging import (
    setup_logging,
    SchedulerFormatter,
    SchedulerContextFilter
)

from .curves import (
    preview_schedule,
    peak_step
)

__all__ = [
    # Config
    'load_scheduler_config',
    'save_scheduler_config',

    # Checkpoint
    'load_checkpoint',
    'save_checkpoint',
    'get_checkpoint_info',

    # Logging
    'setup_logging',
    'SchedulerFormatter',
    'SchedulerContextFilter',

    # Curves
    'preview_schedule',
    'peak_step',
]
