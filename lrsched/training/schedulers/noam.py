"""Noam learning rate scheduler."""

from dataclasses import dataclass
from typing import ClassVar

from .base import LearningRate, StepCountMixin, SchedulerConfigMixin, powf


NoamLrRecord = int


@dataclass(frozen=True)
class NoamLrSchedulerConfig(SchedulerConfigMixin):
    """
    Configuration for the Noam scheduler from "Attention is All You Need".

    Args:
        init_lr: Scaling factor applied to the schedule
        warmup_steps: Number of linear warmup steps (default: 4000)
        model_size: Model dimension, d_model (default: 512)

    Example:
        >>> config = NoamLrSchedulerConfig(init_lr=1.0, warmup_steps=4000, model_size=512)
        >>> scheduler = config.init()
    """

    name: ClassVar[str] = 'noam'

    init_lr: LearningRate
    warmup_steps: int = 4000
    model_size: int = 512

    def with_warmup_steps(self, warmup_steps: int) -> 'NoamLrSchedulerConfig':
        return self.replace(warmup_steps=warmup_steps)

    def with_model_size(self, model_size: int) -> 'NoamLrSchedulerConfig':
        return self.replace(model_size=model_size)

    def validate(self) -> None:
        super().validate()
        if self.warmup_steps <= 0:
            raise ValueError(f"warmup_steps must be > 0, got {self.warmup_steps}")
        if self.model_size <= 0:
            raise ValueError(f"model_size must be > 0, got {self.model_size}")

    def init(self) -> 'NoamLrScheduler':
        """Initialize a new Noam scheduler."""
        return NoamLrScheduler(self)


class NoamLrScheduler(StepCountMixin):
    """
    Linear warmup followed by inverse square root decay.

    lr = init_lr * model_size^-0.5 * min(step^-0.5, step * warmup_steps^-1.5)

    The two terms meet at ``step == warmup_steps``, which is where the peak
    rate is reached.
    """

    component_type: str = 'scheduler'
    component_name: str = 'noam'

    def __init__(self, config: NoamLrSchedulerConfig):
        self.config = config
        self.init_lr = config.init_lr
        self.warmup_steps = float(config.warmup_steps)
        self.model_size = float(config.model_size)
        self.step_count = 0.0

    def step(self) -> LearningRate:
        """Advance one step and return the Noam learning rate."""
        self.step_count += 1.0

        decay = powf(self.step_count, -0.5)
        warmup = self.step_count * powf(self.warmup_steps, -1.5)
        scale = powf(self.model_size, -0.5)
        return self.init_lr * scale * min(decay, warmup)

    def __repr__(self) -> str:
        return (
            f"NoamLrScheduler("
            f"init_lr={self.init_lr}, "
            f"warmup_steps={self.warmup_steps}, "
            f"model_size={self.model_size})"
        )
