"""Schedule preview helpers."""

from typing import Sequence, Union

import numpy as np

from ..training.schedulers.base import LrScheduler


def preview_schedule(scheduler: LrScheduler, num_steps: int) -> np.ndarray:
    """
    Compute the next ``num_steps`` learning rates of a scheduler.

    The rates are produced by a copy resumed from the scheduler's current
    record, so the scheduler passed in does not advance.

    Args:
        scheduler: Scheduler to preview
        num_steps: Number of steps to compute

    Returns:
        Array of shape ``(num_steps,)`` with the learning rates

    Example:
        >>> lrs = preview_schedule(NoamLrSchedulerConfig(1.0, warmup_steps=100).init(), 1000)
        >>> peak_step(lrs)
        100
    """
    preview = scheduler.load_record(scheduler.to_record())
    return np.array([preview.step() for _ in range(num_steps)], dtype=np.float64)


def peak_step(lrs: Union[np.ndarray, Sequence[float]]) -> int:
    """Get the 1-based step with the highest learning rate (first on ties)."""
    lrs = np.asarray(lrs, dtype=np.float64)
    if lrs.size == 0:
        raise ValueError("Cannot find the peak of an empty schedule")
    return int(np.argmax(lrs)) + 1
