"""Constant learning rate scheduler (no changes)."""

from dataclasses import dataclass
from typing import ClassVar

from .base import LearningRate, StepCountMixin, SchedulerConfigMixin


ConstantLrRecord = int


@dataclass(frozen=True)
class ConstantLrSchedulerConfig(SchedulerConfigMixin):
    """
    Configuration for a constant learning rate.

    Args:
        init_lr: Learning rate returned on every step
    """

    name: ClassVar[str] = 'constant'

    init_lr: LearningRate

    def with_init_lr(self, init_lr: LearningRate) -> 'ConstantLrSchedulerConfig':
        return self.replace(init_lr=init_lr)

    def init(self) -> 'ConstantLrScheduler':
        """Initialize a new constant scheduler."""
        return ConstantLrScheduler(self)


class ConstantLrScheduler(StepCountMixin):
    """
    Constant learning rate scheduler.

    Useful as a baseline or when you don't want scheduling. The step count
    is still tracked so its record has the same shape as the other
    schedulers.
    """

    component_type: str = 'scheduler'
    component_name: str = 'constant'

    def __init__(self, config: ConstantLrSchedulerConfig):
        self.config = config
        self.init_lr = config.init_lr
        self.step_count = 0.0

    def step(self) -> LearningRate:
        """Return the configured learning rate."""
        self.step_count += 1.0
        return self.init_lr

    def __repr__(self) -> str:
        return f"ConstantLrScheduler(lr={self.init_lr}, step={self.step_count})"
