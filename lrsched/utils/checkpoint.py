"""Checkpoint saving and loading utilities for scheduler records."""

import torch
from pathlib import Path
from typing import Optional, Dict, Any, Union
import logging

from ..training.schedulers.base import LrScheduler, scheduler_context

logger = logging.getLogger(__name__)


def save_checkpoint(
    schedulers: Dict[str, LrScheduler],
    save_path: Union[str, Path] = "schedulers.pt",
    step: int = 0,
    metadata: Optional[Dict[str, Any]] = None,
) -> None:
    """Save scheduler records, keyed by component name.

    Args:
        schedulers: Mapping of component name to scheduler
        save_path: Path to save checkpoint
        step: Training step number
        metadata: Additional metadata to save

    Examples:
        >>> save_checkpoint(
        ...     {'lr': scheduler},
        ...     save_path="checkpoints/step_5000.pt",
        ...     step=5000,
        ... )
    """
    save_path = Path(save_path)
    save_path.parent.mkdir(parents=True, exist_ok=True)

    for name, scheduler in schedulers.items():
        logger.debug(f"Saving record for scheduler '{name}'", extra=scheduler_context(scheduler))

    checkpoint = {
        'schedulers': {name: scheduler.to_record() for name, scheduler in schedulers.items()},
        'step': step,
    }

    if metadata is not None:
        checkpoint['metadata'] = metadata

    torch.save(checkpoint, save_path)
    logger.info(f"Saved checkpoint to {save_path}")


def load_checkpoint(
    checkpoint_path: Union[str, Path],
    schedulers: Optional[Dict[str, LrScheduler]] = None,
) -> Dict[str, Any]:
    """Load a scheduler checkpoint.

    Records are handed to the matching scheduler's ``load_record`` without
    any validation. Schedulers with no record in the checkpoint are left
    out of ``'restored'`` and a warning is logged.

    Args:
        checkpoint_path: Path to checkpoint file
        schedulers: Freshly configured schedulers to restore (optional)

    Returns:
        Dictionary containing checkpoint data, plus the resumed schedulers
        under ``'restored'`` when ``schedulers`` was given

    Examples:
        >>> checkpoint = load_checkpoint(
        ...     "checkpoint.pt",
        ...     schedulers={'lr': config.init()},
        ... )
        >>> scheduler = checkpoint['restored']['lr']
    """
    checkpoint_path = Path(checkpoint_path)

    if not checkpoint_path.exists():
        raise FileNotFoundError(f"Checkpoint not found: {checkpoint_path}")

    logger.info(f"Loading checkpoint from {checkpoint_path}")

    checkpoint = torch.load(checkpoint_path, map_location='cpu')
    records = checkpoint.get('schedulers', {})

    if schedulers is not None:
        restored = {}
        for name, scheduler in schedulers.items():
            if name not in records:
                logger.warning(f"No record for scheduler '{name}' in checkpoint")
                continue
            restored[name] = scheduler.load_record(records[name])
            logger.info(
                f"Scheduler '{name}' restored at record {records[name]}",
                extra=scheduler_context(restored[name])
            )
        checkpoint['restored'] = restored

    if 'step' in checkpoint:
        logger.info(f"Checkpoint step: {checkpoint['step']}")

    return checkpoint


def get_checkpoint_info(checkpoint_path: Union[str, Path]) -> Dict[str, Any]:
    """Get information about a checkpoint without restoring anything.

    Args:
        checkpoint_path: Path to checkpoint file

    Returns:
        Dictionary with checkpoint metadata
    """
    checkpoint_path = Path(checkpoint_path)

    if not checkpoint_path.exists():
        raise FileNotFoundError(f"Checkpoint not found: {checkpoint_path}")

    checkpoint = torch.load(checkpoint_path, map_location='cpu')

    info = {
        'path': str(checkpoint_path),
        'size_mb': checkpoint_path.stat().st_size / (1024 * 1024),
        'scheduler_names': sorted(checkpoint.get('schedulers', {}).keys()),
    }

    for key in ['step', 'metadata']:
        if key in checkpoint:
            info[key] = checkpoint[key]

    return info
