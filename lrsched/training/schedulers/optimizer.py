"""Binding that applies a scheduler's learning rate to a PyTorch optimizer."""

import logging
from typing import Any, Dict, List

from torch.optim import Optimizer

from .base import LearningRate, LrScheduler


logger = logging.getLogger(__name__)


class OptimizerLrBinding:
    """
    Drive an optimizer's learning rate from an ``LrScheduler``.

    Each call to ``step()`` advances the scheduler once and writes the new
    rate into every parameter group. The binding exposes the usual
    ``get_last_lr`` / ``state_dict`` / ``load_state_dict`` methods so it can
    sit wherever a training loop expects a torch-style scheduler.

    Args:
        optimizer: PyTorch optimizer
        scheduler: Learning rate scheduler

    Example:
        >>> optimizer = torch.optim.SGD(model.parameters(), lr=0.0)
        >>> binding = OptimizerLrBinding(optimizer, StepLrSchedulerConfig(0.1).init())
        >>> for batch in loader:
        ...     loss = model(batch).sum()
        ...     loss.backward()
        ...     binding.step()
        ...     optimizer.step()
        ...     optimizer.zero_grad()
    """

    component_type: str = 'scheduler'
    component_name: str = 'optimizer_binding'

    def __init__(self, optimizer: Optimizer, scheduler: LrScheduler):
        self.optimizer = optimizer
        self.scheduler = scheduler
        self._last_lr = [group['lr'] for group in optimizer.param_groups]

    def step(self) -> LearningRate:
        """Advance the scheduler and update all parameter groups."""
        lr = self.scheduler.step()
        for param_group in self.optimizer.param_groups:
            param_group['lr'] = lr
        self._last_lr = [lr] * len(self.optimizer.param_groups)
        return lr

    def get_last_lr(self) -> List[float]:
        """Get last learning rates."""
        return self._last_lr

    def state_dict(self) -> Dict[str, Any]:
        """Get binding state."""
        return {
            'record': self.scheduler.to_record(),
            '_last_lr': self._last_lr,
        }

    def load_state_dict(self, state_dict: Dict[str, Any]) -> None:
        """Load binding state and restore the optimizer's learning rates."""
        self.scheduler = self.scheduler.load_record(state_dict['record'])
        self._last_lr = list(state_dict['_last_lr'])
        num_groups = len(self.optimizer.param_groups)
        if len(self._last_lr) != num_groups:
            logger.warning(
                f"State dict has {len(self._last_lr)} learning rates but the "
                f"optimizer has {num_groups} parameter groups"
            )
        for lr, param_group in zip(self._last_lr, self.optimizer.param_groups):
            param_group['lr'] = lr
        logger.debug(f"Restored optimizer learning rates: {self._last_lr}")

    def __repr__(self) -> str:
        return f"OptimizerLrBinding(scheduler={self.scheduler!r})"
