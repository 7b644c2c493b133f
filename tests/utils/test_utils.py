"""Tests for config files, checkpoints, previews and logging setup."""

import logging

import numpy as np
import pytest
import yaml
from lrsched.training.schedulers import (
    create_scheduler,
    ConstantLrSchedulerConfig,
    NoamLrSchedulerConfig,
    StepLrSchedulerConfig,
    WarmUpSchedulerConfig,
)
from lrsched.utils import (
    load_scheduler_config,
    save_scheduler_config,
    save_checkpoint,
    load_checkpoint,
    get_checkpoint_info,
    preview_schedule,
    peak_step,
    setup_logging,
    SchedulerFormatter,
    SchedulerContextFilter,
)


# ============================================================================
# TEST CONFIG FILES
# ============================================================================

@pytest.mark.parametrize("config", [
    ConstantLrSchedulerConfig(init_lr=0.01),
    StepLrSchedulerConfig(init_lr=0.1, step_size=30, gamma=0.5),
    WarmUpSchedulerConfig(init_lr=3e-4, num_warmup_steps=100, power=2.0),
    NoamLrSchedulerConfig(init_lr=1.0, warmup_steps=4000, model_size=512),
])
def test_config_save_load(tmp_path, config):
    """Test configs survive a YAML round trip."""
    path = tmp_path / 'configs' / 'scheduler.yaml'

    save_scheduler_config(config, path)
    loaded = load_scheduler_config(path)

    assert loaded == config
    assert type(loaded) is type(config)


def test_config_yaml_layout(tmp_path):
    """Test the file is a flat mapping led by the scheduler name."""
    path = tmp_path / 'step.yaml'
    save_scheduler_config(StepLrSchedulerConfig(init_lr=0.1), path)

    with open(path) as f:
        data = yaml.safe_load(f)

    assert list(data.keys())[0] == 'name'
    assert data == {'name': 'step', 'init_lr': 0.1, 'step_size': 10, 'gamma': 0.1}


def test_config_load_type_key(tmp_path):
    """Test 'type' is accepted in place of 'name'."""
    path = tmp_path / 'warmup.yaml'
    path.write_text("type: warmup\ninit_lr: 0.2\nnum_warmup_steps: 3\n")

    config = load_scheduler_config(path)

    assert config == WarmUpSchedulerConfig(init_lr=0.2, num_warmup_steps=3)


def test_config_load_missing_name(tmp_path):
    """Test files without a scheduler name are rejected."""
    path = tmp_path / 'bad.yaml'
    path.write_text("init_lr: 0.2\n")

    with pytest.raises(ValueError, match="'name' or 'type'"):
        load_scheduler_config(path)


def test_config_load_unknown_scheduler(tmp_path):
    """Test unknown scheduler names are rejected."""
    path = tmp_path / 'bad.yaml'
    path.write_text("name: plateau\ninit_lr: 0.2\n")

    with pytest.raises(ValueError, match="Unknown scheduler"):
        load_scheduler_config(path)


def test_config_load_non_string_name(tmp_path):
    """Test a numeric scheduler name is reported as unknown."""
    path = tmp_path / 'bad.yaml'
    path.write_text("name: 1\ninit_lr: 0.2\n")

    with pytest.raises(ValueError, match="Unknown scheduler: 1"):
        load_scheduler_config(path)


def test_config_load_not_a_mapping(tmp_path):
    """Test non-mapping YAML documents are rejected."""
    path = tmp_path / 'bad.yaml'
    path.write_text("- step\n- 0.1\n")

    with pytest.raises(ValueError, match="Expected a mapping"):
        load_scheduler_config(path)


# ============================================================================
# TEST CHECKPOINTS
# ============================================================================

def test_checkpoint_save_load(tmp_path):
    """Test schedulers resume from a checkpoint file."""
    configs = {
        'lr': StepLrSchedulerConfig(init_lr=1.0, step_size=4, gamma=0.5),
        'warmup': WarmUpSchedulerConfig(init_lr=0.1, num_warmup_steps=10),
    }
    schedulers = {name: config.init() for name, config in configs.items()}
    for scheduler in schedulers.values():
        for _ in range(6):
            scheduler.step()

    path = tmp_path / 'ckpt' / 'step_6.pt'
    save_checkpoint(schedulers, path, step=6, metadata={'run': 'test'})

    checkpoint = load_checkpoint(
        path,
        schedulers={name: config.init() for name, config in configs.items()}
    )

    assert checkpoint['step'] == 6
    assert checkpoint['metadata'] == {'run': 'test'}
    assert checkpoint['schedulers'] == {'lr': 6, 'warmup': 6}
    for name, restored in checkpoint['restored'].items():
        original = schedulers[name]
        assert [restored.step() for _ in range(10)] == [original.step() for _ in range(10)]


def test_checkpoint_load_without_schedulers(tmp_path):
    """Test loading records only."""
    path = tmp_path / 'ckpt.pt'
    save_checkpoint({'lr': ConstantLrSchedulerConfig(0.1).init()}, path)

    checkpoint = load_checkpoint(path)

    assert checkpoint['schedulers'] == {'lr': 0}
    assert 'restored' not in checkpoint


def test_checkpoint_missing_record(tmp_path, caplog):
    """Test schedulers absent from the checkpoint are skipped with a warning."""
    path = tmp_path / 'ckpt.pt'
    save_checkpoint({'lr': ConstantLrSchedulerConfig(0.1).init()}, path)

    with caplog.at_level(logging.WARNING):
        checkpoint = load_checkpoint(
            path,
            schedulers={'other': ConstantLrSchedulerConfig(0.1).init()}
        )

    assert checkpoint['restored'] == {}
    assert "No record for scheduler 'other'" in caplog.text


def test_checkpoint_not_found(tmp_path):
    """Test missing checkpoint files raise."""
    with pytest.raises(FileNotFoundError):
        load_checkpoint(tmp_path / 'missing.pt')
    with pytest.raises(FileNotFoundError):
        get_checkpoint_info(tmp_path / 'missing.pt')


def test_checkpoint_info(tmp_path):
    """Test checkpoint info lists schedulers and metadata."""
    path = tmp_path / 'ckpt.pt'
    schedulers = {
        'b': NoamLrSchedulerConfig(1.0).init(),
        'a': ConstantLrSchedulerConfig(0.1).init(),
    }
    save_checkpoint(schedulers, path, step=3)

    info = get_checkpoint_info(path)

    assert info['scheduler_names'] == ['a', 'b']
    assert info['step'] == 3
    assert info['size_mb'] > 0
    assert 'metadata' not in info


# ============================================================================
# TEST PREVIEWS
# ============================================================================

def test_preview_does_not_advance():
    """Test previewing leaves the scheduler where it was."""
    scheduler = StepLrSchedulerConfig(init_lr=1.0, step_size=2, gamma=0.5).init()
    scheduler.step()

    lrs = preview_schedule(scheduler, 5)

    assert isinstance(lrs, np.ndarray)
    assert lrs.shape == (5,)
    assert scheduler.to_record() == 1
    np.testing.assert_allclose(lrs, [scheduler.step() for _ in range(5)])


def test_preview_noam_peak():
    """Test the Noam schedule peaks at the end of warmup."""
    scheduler = NoamLrSchedulerConfig(init_lr=1.0, warmup_steps=100).init()

    lrs = preview_schedule(scheduler, 1000)

    assert peak_step(lrs) == 100


def test_peak_step_first_on_ties():
    """Test ties resolve to the earliest step."""
    assert peak_step([0.1, 0.3, 0.3, 0.2]) == 2


def test_peak_step_empty():
    """Test empty schedules are rejected."""
    with pytest.raises(ValueError):
        peak_step([])


# ============================================================================
# TEST LOGGING
# ============================================================================

def test_setup_logging_file(tmp_path):
    """Test file logging writes to log_dir."""
    logger = setup_logging('lrsched_test', log_dir=str(tmp_path), console=False)
    logger.info('hello')
    for handler in logger.handlers:
        handler.flush()

    log_files = list(tmp_path.glob('lrsched_test_*.log'))
    assert len(log_files) == 1
    assert 'hello' in log_files[0].read_text()


def test_setup_logging_replaces_handlers():
    """Test repeated setup does not stack handlers."""
    setup_logging('lrsched_test_console')
    logger = setup_logging('lrsched_test_console')

    assert len(logger.handlers) == 1


@pytest.fixture
def package_logger(tmp_path):
    """Package logger writing scheduler context to a file; reset afterwards."""
    logger = setup_logging(log_dir=str(tmp_path), console=False)
    yield logger, tmp_path
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
    logger.setLevel(logging.NOTSET)


def _read_log(log_dir):
    log_files = list(log_dir.glob('lrsched_*.log'))
    assert len(log_files) == 1
    return log_files[0].read_text()


def test_factory_lines_carry_scheduler_context(package_logger):
    """Test creation lines name the scheduler and its record."""
    logger, log_dir = package_logger

    create_scheduler('noam', init_lr=1.0)
    for handler in logger.handlers:
        handler.flush()

    assert 'noam@0' in _read_log(log_dir)


def test_checkpoint_lines_carry_scheduler_context(package_logger, tmp_path):
    """Test restore lines name the scheduler and the restored record."""
    logger, log_dir = package_logger
    scheduler = WarmUpSchedulerConfig(init_lr=0.1).init()
    for _ in range(12):
        scheduler.step()

    path = tmp_path / 'ckpt.pt'
    save_checkpoint({'lr': scheduler}, path)
    load_checkpoint(path, schedulers={'lr': WarmUpSchedulerConfig(init_lr=0.1).init()})
    for handler in logger.handlers:
        handler.flush()

    text = _read_log(log_dir)
    assert "warmup@12" in text
    assert "Scheduler 'lr' restored at record 12" in text


def test_context_filter_fills_placeholders():
    """Test lines without scheduler context still format."""
    record = logging.LogRecord('x', logging.INFO, __file__, 1, 'plain', None, None)

    assert SchedulerContextFilter().filter(record)
    output = SchedulerFormatter('%(scheduler)s@%(record)s %(message)s').format(record)

    assert output == '-@- plain'


def test_colored_formatter_keeps_record():
    """Test coloring does not leak into the shared record."""
    formatter = SchedulerFormatter('%(levelname)s %(message)s', colored=True)
    record = logging.LogRecord('x', logging.INFO, __file__, 1, 'msg', None, None)

    output = formatter.format(record)

    assert '\033[32mINFO\033[0m' in output
    assert record.levelname == 'INFO'


def test_plain_formatter_has_no_colors():
    """Test file output stays free of ANSI codes."""
    formatter = SchedulerFormatter('%(levelname)s %(message)s')
    record = logging.LogRecord('x', logging.WARNING, __file__, 1, 'msg', None, None)

    assert formatter.format(record) == 'WARNING msg'
