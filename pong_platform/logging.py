"""
Pong Platform Logging

Console logging per module plus structured match records.

Console loggers print ``[module] LEVEL: message`` lines, filtered by a
global level and optional per-module levels.

Match records (score events, power-up pickups) are plain dicts handed to
emit_record(). They go to the sink registered for their module: a
FileSink appends them to a JSONL session file framed by a header and a
footer, a NullSink drops them.

Usage:
    from pong_platform.logging import emit_record, get_logger

    log = get_logger('engine')
    log.info("Match started")
    emit_record('match', {'type': 'score', 'player': 1, 'ai': 0, 'scorer': 'player'})

Environment:
    PONG_LOG_LEVEL=DEBUG              # Global level
    PONG_LOG_ENGINE=DEBUG             # Level for one module
    PONG_LOG_DIR=/tmp/pong-logs       # Where FileSink writes
    PONG_LOGGING_MATCH_ENABLED=true   # Write match records to disk
    PONG_LOGGING_MATCH_DIR=/tmp/x     # Per-module record directory
"""

import json
import os
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional


class LogLevel(IntEnum):
    """Console log levels."""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    OFF = 100


_LEVEL_NAMES = {
    'DEBUG': LogLevel.DEBUG,
    'INFO': LogLevel.INFO,
    'WARNING': LogLevel.WARNING,
    'WARN': LogLevel.WARNING,
    'ERROR': LogLevel.ERROR,
    'OFF': LogLevel.OFF,
}

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'log_dir': None,
    'modules': {},  # module -> record settings ('enabled', 'dir')
}


def _level_from_string(name: str) -> LogLevel:
    """Unknown names fall back to INFO."""
    return _LEVEL_NAMES.get(name.upper(), LogLevel.INFO)


def _parse_env_value(value: str) -> Any:
    lower = value.lower()
    if lower in ('true', '1', 'yes', 'on'):
        return True
    if lower in ('false', '0', 'no', 'off'):
        return False
    return value


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    log_dir: Optional[str] = None,
) -> None:
    """
    Set console levels and the record directory.

    Args:
        level: Level for every module without its own setting
        modules: module name -> level overrides
        log_dir: Directory for FileSink output
    """
    _config['default_level'] = _level_from_string(level)
    for module, module_level in (modules or {}).items():
        _config['module_levels'][module.lower()] = _level_from_string(module_level)
    if log_dir is not None:
        _config['log_dir'] = log_dir


def _load_env_config() -> None:
    """Read PONG_LOG_* levels and PONG_LOGGING_<MODULE>_<KEY> record settings."""
    for key, value in os.environ.items():
        if key == 'PONG_LOG_LEVEL':
            _config['default_level'] = _level_from_string(value)
        elif key == 'PONG_LOG_DIR':
            _config['log_dir'] = value
        elif key.startswith('PONG_LOG_'):
            _config['module_levels'][key[len('PONG_LOG_'):].lower()] = _level_from_string(value)
        elif key.startswith('PONG_LOGGING_'):
            module, _, setting = key[len('PONG_LOGGING_'):].lower().partition('_')
            if module and setting:
                _config['modules'].setdefault(module, {})[setting] = _parse_env_value(value)


_load_env_config()


def get_log_dir() -> str:
    """Record directory: configured, then PONG_LOG_DIR, then ~/.enhanced-pong/logs."""
    if _config.get('log_dir'):
        return str(Path(_config['log_dir']).expanduser())
    env_dir = os.environ.get('PONG_LOG_DIR')
    if env_dir:
        return str(Path(env_dir).expanduser())
    return str(Path.home() / '.enhanced-pong' / 'logs')


def get_module_config(module: str) -> Dict[str, Any]:
    """Record settings for a module, e.g. {'enabled': True, 'dir': '/tmp/x'}."""
    return _config['modules'].get(module.lower(), {})


# =============================================================================
# Console loggers
# =============================================================================

class PongLogger:
    """Leveled console logger for one module."""

    def __init__(self, module: str):
        self.module = module

    @property
    def level(self) -> LogLevel:
        return _config['module_levels'].get(self.module.lower(), _config['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _log(self, level: LogLevel, msg: str, *args) -> None:
        if not self.is_enabled_for(level):
            return
        if args:
            msg = msg % args
        print(f"[{self.module}] {level.name}: {msg}")

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, msg, *args)


@lru_cache(maxsize=32)
def get_logger(module: str) -> PongLogger:
    """Cached logger for a module ('engine', 'power_ups', 'renderer', ...)."""
    return PongLogger(module)


# =============================================================================
# Match record sinks
# =============================================================================

class LogSink(ABC):
    """Destination for structured match records."""

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """Accept one JSON-serializable record."""

    @abstractmethod
    def flush(self) -> None:
        """Push buffered records out."""

    @abstractmethod
    def close(self) -> None:
        """Finish the session and release resources."""

    def __enter__(self) -> 'LogSink':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class FileSink(LogSink):
    """
    Appends records to one ``<session>_<module>.jsonl`` file per module.

    The first line of each file is a header carrying the session name and
    any match metadata (seed, clock mode, tick period); closing writes a
    footer with the number of records written.

    Args:
        log_dir: Output directory (default: get_log_dir())
        session_name: File name prefix (default: start timestamp)
        metadata: Extra header fields describing the match
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        session_name: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        self._log_dir = Path(log_dir) if log_dir else Path(get_log_dir())
        self._session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._metadata = dict(metadata or {})
        self._files: Dict[str, Any] = {}
        self._counts: Dict[str, int] = {}
        self._paths: Dict[str, Path] = {}

    def _open(self, module: str):
        if module not in self._files:
            self._log_dir.mkdir(parents=True, exist_ok=True)
            path = self._log_dir / f"{self._session_name}_{module}.jsonl"
            f = open(path, 'a')
            f.write(json.dumps({
                'type': 'header',
                'game': 'EnhancedPong',
                'module': module,
                'session_name': self._session_name,
                'start_time': time.time(),
                **self._metadata,
            }) + "\n")
            self._files[module] = f
            self._counts[module] = 0
            self._paths[module] = path
        return self._files[module]

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        f = self._open(module)
        f.write(json.dumps({'wall_time': time.time(), **record}) + "\n")
        self._counts[module] += 1

    def flush(self) -> None:
        for f in self._files.values():
            f.flush()

    def close(self) -> None:
        for module, f in self._files.items():
            f.write(json.dumps({
                'type': 'footer',
                'module': module,
                'records': self._counts[module],
                'end_time': time.time(),
            }) + "\n")
            f.close()
        self._files.clear()

    @property
    def log_paths(self) -> Dict[str, Path]:
        """Files written so far, by module."""
        return dict(self._paths)


class NullSink(LogSink):
    """Drops every record."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


_sinks: Dict[str, LogSink] = {}
_default_sink: Optional[LogSink] = None


def register_sink(module: str, sink: LogSink) -> None:
    _sinks[module] = sink


def set_default_sink(sink: Optional[LogSink]) -> None:
    """Sink for modules without a registered one (None drops their records)."""
    global _default_sink
    _default_sink = sink


def get_sink(module: str) -> Optional[LogSink]:
    return _sinks.get(module, _default_sink)


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """
    Route a record to its module's sink.

    Returns:
        True if a sink took the record
    """
    sink = get_sink(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    """Close and forget every sink, writing file footers."""
    global _default_sink
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()
    if _default_sink is not None:
        _default_sink.close()
        _default_sink = None


def create_sink_for_environment(
    module: str,
    session_name: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> LogSink:
    """
    FileSink when PONG_LOGGING_<MODULE>_ENABLED is set, else NullSink.

    Args:
        module: Record module ('match')
        session_name: File name prefix
        metadata: Header fields describing the match
    """
    settings = get_module_config(module)
    if not settings.get('enabled', False):
        return NullSink()
    return FileSink(log_dir=settings.get('dir'), session_name=session_name,
                    metadata=metadata)
