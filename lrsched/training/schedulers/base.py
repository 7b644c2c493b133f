"""Base protocol and shared helpers for learning rate schedulers."""

import copy
import dataclasses
import logging
import math
from dataclasses import asdict
from typing import Protocol, Any, ClassVar, Dict, Type, TypeVar, runtime_checkable

import numpy as np


logger = logging.getLogger(__name__)

LearningRate = float

S = TypeVar('S', bound='StepCountMixin')
C = TypeVar('C', bound='SchedulerConfigMixin')


def powf(base: float, exponent: float) -> float:
    """
    Raise ``base`` to ``exponent`` with IEEE 754 semantics.

    Overflow gives ``inf`` and invalid operations give ``nan`` instead of
    raising, so extreme parameters yield a numeric result.
    """
    try:
        return math.pow(base, exponent)
    except (OverflowError, ValueError):
        with np.errstate(all='ignore'):
            return float(np.power(np.float64(base), np.float64(exponent)))


def scheduler_context(scheduler: Any) -> Dict[str, Any]:
    """Logging ``extra`` fields naming a scheduler and its current record."""
    return {
        'scheduler': getattr(scheduler, 'component_name', type(scheduler).__name__),
        'record': scheduler.to_record(),
    }


@runtime_checkable
class LrScheduler(Protocol):
    """
    Protocol for learning rate schedulers.

    A scheduler is owned by a single training loop. It produces one learning
    rate per optimizer update and can snapshot its progress into a record
    that a freshly configured instance restores from.
    """

    component_type: str = 'scheduler'
    component_name: str

    def step(self) -> LearningRate:
        """Advance by one step and return the learning rate for that step."""
        ...

    def to_record(self) -> Any:
        """Snapshot progress without mutating the scheduler."""
        ...

    def load_record(self, record: Any) -> 'LrScheduler':
        """Return a scheduler resumed from ``record``."""
        ...


class StepCountMixin:
    """
    Record handling shared by schedulers whose record is the step count.

    Subclasses keep their progress in ``self.step_count`` (a float starting
    at 0.0). The record is that counter truncated to an int.
    """

    step_count: float

    def to_record(self) -> int:
        """Get the number of completed steps."""
        return int(self.step_count)

    def load_record(self: S, record: int) -> S:
        """
        Resume from a record.

        The record is trusted as-is: it is neither validated nor clamped.
        A copy is returned so the receiving instance is left untouched.

        Args:
            record: Step count produced by ``to_record``

        Returns:
            Scheduler that continues after ``record`` steps
        """
        resumed = copy.copy(self)
        resumed.step_count = float(record)
        logger.debug(
            f"{type(self).__name__} resumed at step {record}",
            extra=scheduler_context(resumed)
        )
        return resumed


class SchedulerConfigMixin:
    """
    Serialization helpers shared by the frozen scheduler config dataclasses.

    Subclasses set ``name`` to their registry key.
    """

    name: ClassVar[str]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, tagged with the scheduler name."""
        return {'name': self.name, **asdict(self)}

    @classmethod
    def from_dict(cls: Type[C], d: Dict[str, Any]) -> C:
        """Create from dictionary, ignoring the ``name``/``type`` tag."""
        kwargs = {k: v for k, v in d.items() if k not in ('name', 'type')}
        return cls(**kwargs)

    def replace(self: C, **changes: Any) -> C:
        """Return a copy with the given fields overridden."""
        return dataclasses.replace(self, **changes)

    def validate(self) -> None:
        """Fail fast on parameters that give an undefined schedule."""
        if self.init_lr < 0:
            raise ValueError(f"init_lr must be >= 0, got {self.init_lr}")
