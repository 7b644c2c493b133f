"""Step decay learning rate scheduler."""

from dataclasses import dataclass
from typing import ClassVar

from .base import LearningRate, StepCountMixin, SchedulerConfigMixin, powf


StepLrRecord = int


@dataclass(frozen=True)
class StepLrSchedulerConfig(SchedulerConfigMixin):
    """
    Configuration for a step decay scheduler.

    Args:
        init_lr: Initial learning rate
        step_size: Period of learning rate decay, in steps (default: 10)
        gamma: Multiplicative factor of learning rate decay (default: 0.1)

    Example:
        >>> scheduler = (
        ...     StepLrSchedulerConfig(init_lr=10.0)
        ...     .with_step_size(2)
        ...     .with_gamma(0.9)
        ...     .init()
        ... )
        >>> scheduler.step()
        10.0
    """

    name: ClassVar[str] = 'step'

    init_lr: LearningRate
    step_size: int = 10
    gamma: float = 0.1

    def with_step_size(self, step_size: int) -> 'StepLrSchedulerConfig':
        return self.replace(step_size=step_size)

    def with_gamma(self, gamma: float) -> 'StepLrSchedulerConfig':
        return self.replace(gamma=gamma)

    def validate(self) -> None:
        super().validate()
        if self.step_size <= 0:
            raise ValueError(f"step_size must be > 0, got {self.step_size}")

    def init(self) -> 'StepLrScheduler':
        """Initialize a new step decay scheduler."""
        return StepLrScheduler(self)


class StepLrScheduler(StepCountMixin):
    """
    Decays the learning rate by ``gamma`` every ``step_size`` steps.

    The rate for step ``n`` (counting from 1) is
    ``init_lr * gamma ** (n // step_size)``. The exponent is recomputed from
    the running counter on every call, so restored schedulers pick up at the
    right decay level.
    """

    component_type: str = 'scheduler'
    component_name: str = 'step'

    def __init__(self, config: StepLrSchedulerConfig):
        self.config = config
        self.init_lr = config.init_lr
        self.step_size = config.step_size
        self.gamma = config.gamma
        self.step_count = 0.0

    def step(self) -> LearningRate:
        """Advance one step and return the decayed learning rate."""
        self.step_count += 1.0
        # Truncating integer division of the counter by the period
        exponent = int(self.step_count) // self.step_size
        factor = powf(self.gamma, float(exponent))
        return self.init_lr * factor

    def __repr__(self) -> str:
        return (
            f"StepLrScheduler("
            f"init_lr={self.init_lr}, "
            f"step_size={self.step_size}, "
            f"gamma={self.gamma})"
        )
