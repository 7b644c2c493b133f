"""Polynomial warmup scheduler."""

from dataclasses import dataclass
from typing import ClassVar

from .base import LearningRate, StepCountMixin, SchedulerConfigMixin, powf


WarmUpRecord = int


@dataclass(frozen=True)
class WarmUpSchedulerConfig(SchedulerConfigMixin):
    """
    Configuration for a polynomial warmup scheduler.

    Args:
        init_lr: Learning rate after the warmup (the value the ramp hands
            off to once warmup is over)
        num_warmup_steps: Number of warmup steps (default: 5)
        power: Power of the polynomial warmup (default: 1.0, linear)
    """

    name: ClassVar[str] = 'warmup'

    init_lr: LearningRate
    num_warmup_steps: int = 5
    power: float = 1.0

    def with_num_warmup_steps(self, num_warmup_steps: int) -> 'WarmUpSchedulerConfig':
        return self.replace(num_warmup_steps=num_warmup_steps)

    def with_power(self, power: float) -> 'WarmUpSchedulerConfig':
        return self.replace(power=power)

    def validate(self) -> None:
        super().validate()
        if self.num_warmup_steps <= 0:
            raise ValueError(f"num_warmup_steps must be > 0, got {self.num_warmup_steps}")
        if self.power < 0:
            raise ValueError(f"power must be >= 0, got {self.power}")

    def init(self) -> 'WarmUpScheduler':
        """Initialize a new warmup scheduler."""
        return WarmUpScheduler(self)


class WarmUpScheduler(StepCountMixin):
    """
    Ramps the learning rate up over ``num_warmup_steps``, then holds it.

    During warmup the rate is ``init_lr * step / num_warmup_steps ** power``.
    Only the denominator is raised to ``power``; the step counter is used
    unpowered. Once ``step >= num_warmup_steps`` the rate is ``init_lr``
    exactly.
    """

    component_type: str = 'scheduler'
    component_name: str = 'warmup'

    def __init__(self, config: WarmUpSchedulerConfig):
        self.config = config
        self.init_lr = config.init_lr
        self.num_warmup_steps = float(config.num_warmup_steps)
        self.power = config.power
        self.step_count = 0.0

    def step(self) -> LearningRate:
        """Advance one step and return the warmed-up learning rate."""
        self.step_count += 1.0

        if self.step_count < self.num_warmup_steps:
            factor = self.step_count / powf(self.num_warmup_steps, self.power)
            return self.init_lr * factor

        return self.init_lr

    def __repr__(self) -> str:
        return (
            f"WarmUpScheduler("
            f"init_lr={self.init_lr}, "
            f"num_warmup_steps={self.num_warmup_steps}, "
            f"power={self.power})"
        )
