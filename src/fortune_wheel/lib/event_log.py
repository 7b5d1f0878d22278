# Spin Event Logger
# Logs spin lifecycle events to {log_dir}/spin_events.log
# Also exports create_file_logger() for other log files.
# Rotation: 5MB max, backups named {name}-{yyyyMMddHHmmss}.log
# Log dir: $FORTUNE_WHEEL_LOG_DIR, else ./logs

import os
import logging
from datetime import datetime
from pathlib import Path
from logging.handlers import RotatingFileHandler

LOG_DIR_ENV = "FORTUNE_WHEEL_LOG_DIR"
EVENT_LOG_FILE = "spin_events.log"

MAX_BYTES = 5 * 1024 * 1024  # 5MB
BACKUP_COUNT = 10


def get_log_dir():
    return Path(os.environ.get(LOG_DIR_ENV, Path.cwd() / "logs"))


def _make_timestamped_namer(base_name):
    """Create a namer function for rotated logs: base.log.1 → base-20260201210352.log"""
    stem = base_name.rsplit(".", 1)[0] if "." in base_name else base_name
    def namer(default_name):
        base_dir = os.path.dirname(default_name)
        stamp = datetime.now().strftime("%Y%m%d%H%M%S")
        return os.path.join(base_dir, f"{stem}-{stamp}.log")
    return namer


def _rename_rotator(source, dest):
    if os.path.exists(source):
        os.rename(source, dest)


def create_file_logger(name, filename, log_dir=None, max_bytes=MAX_BYTES, backup_count=BACKUP_COUNT):
    """Create a named logger that writes to {log_dir}/{filename} with rotation.

    Returns the configured logger. Idempotent: a logger that already has
    handlers is returned as is.
    """
    log_dir = Path(log_dir) if log_dir is not None else get_log_dir()

    file_logger = logging.getLogger(name)
    if file_logger.handlers:
        return file_logger

    os.makedirs(log_dir, exist_ok=True)
    file_logger.setLevel(logging.INFO)
    file_logger.propagate = False

    handler = RotatingFileHandler(
        str(log_dir / filename),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.namer = _make_timestamped_namer(filename)
    handler.rotator = _rename_rotator

    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    handler.setFormatter(formatter)
    file_logger.addHandler(handler)

    return file_logger


_logger = None


def _event_logger():
    # Created on first event so importing never touches the filesystem
    global _logger
    if _logger is None:
        _logger = create_file_logger("fortune_wheel.events", EVENT_LOG_FILE)
    return _logger


def log_spin_start(target_index, full_rotations, duration):
    _event_logger().info(
        f"SPIN_START index={target_index} rotations={full_rotations} duration={duration:.2f}s"
    )


def log_spin_complete(landed_index, rotation):
    _event_logger().info(f"SPIN_COMPLETE index={landed_index} rotation={rotation:.4f}")


def log_continuous_start(rotations_per_second):
    _event_logger().info(f"CONTINUOUS_START rate={rotations_per_second}/s")


def log_continuous_stop(land_on_index):
    _event_logger().info(f"CONTINUOUS_STOP land_on={land_on_index}")


def log_stop(rotation):
    _event_logger().info(f"STOP rotation={rotation:.4f}")
