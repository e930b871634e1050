"""
Logging Tests

Tests for per-module loggers, env configuration and match record sinks.

Run with: pytest tests/test_logging.py -v
"""

import json
from pathlib import Path

import pytest

from pong_platform import logging as pong_logging
from pong_platform.logging import (
    FileSink,
    LogLevel,
    NullSink,
    configure_logging,
    create_sink_for_environment,
    emit_record,
    get_logger,
    get_sink,
    register_sink,
    set_default_sink,
)


class TestLogger:
    """Test leveled console logging."""

    def test_loggers_are_cached(self):
        assert get_logger('engine') is get_logger('engine')

    def test_default_level_filters(self, logging_config, capsys):
        configure_logging(level='INFO')
        log = get_logger('engine')
        log.debug("hidden")
        log.info("shown %d", 3)
        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "[engine] INFO: shown 3" in out

    def test_module_level_overrides_default(self, logging_config, capsys):
        configure_logging(level='WARNING', modules={'power_ups': 'DEBUG'})
        get_logger('power_ups').debug("spawned")
        get_logger('engine').info("started")
        get_logger('main').warning("bad tick")
        out = capsys.readouterr().out
        assert "[power_ups] DEBUG: spawned" in out
        assert "started" not in out
        assert "[main] WARNING: bad tick" in out

    def test_off_silences_everything(self, logging_config, capsys):
        configure_logging(level='OFF')
        get_logger('main').warning("nope")
        assert capsys.readouterr().out == ""

    def test_unknown_level_is_info(self):
        assert pong_logging._level_from_string('loud') == LogLevel.INFO


class TestEnvConfig:
    """Test PONG_LOG_* and PONG_LOGGING_* parsing."""

    def test_levels_from_env(self, logging_config, monkeypatch):
        monkeypatch.setenv('PONG_LOG_LEVEL', 'ERROR')
        monkeypatch.setenv('PONG_LOG_RENDERER', 'DEBUG')
        pong_logging._load_env_config()
        assert logging_config['default_level'] == LogLevel.ERROR
        assert logging_config['module_levels']['renderer'] == LogLevel.DEBUG
        assert get_logger('renderer').is_enabled_for(LogLevel.DEBUG)

    def test_record_settings_from_env(self, logging_config, monkeypatch, tmp_path):
        monkeypatch.setenv('PONG_LOGGING_MATCH_ENABLED', 'true')
        monkeypatch.setenv('PONG_LOGGING_MATCH_DIR', str(tmp_path))
        pong_logging._load_env_config()
        assert pong_logging.get_module_config('match') == {
            'enabled': True,
            'dir': str(tmp_path),
        }

    @pytest.mark.parametrize("raw,parsed", [
        ("yes", True),
        ("1", True),
        ("off", False),
        ("/tmp/x", "/tmp/x"),
    ])
    def test_parse_env_value(self, raw, parsed):
        assert pong_logging._parse_env_value(raw) == parsed

    def test_log_dir_override(self, logging_config, tmp_path):
        configure_logging(log_dir=str(tmp_path))
        assert pong_logging.get_log_dir() == str(tmp_path)

    def test_log_dir_from_env(self, logging_config, monkeypatch, tmp_path):
        logging_config['log_dir'] = None
        monkeypatch.setenv('PONG_LOG_DIR', str(tmp_path))
        assert pong_logging.get_log_dir() == str(tmp_path)

    def test_log_dir_default(self, logging_config, monkeypatch):
        logging_config['log_dir'] = None
        monkeypatch.delenv('PONG_LOG_DIR', raising=False)
        assert Path(pong_logging.get_log_dir()) == Path.home() / '.enhanced-pong' / 'logs'


class TestSinks:
    """Test match record routing."""

    def test_no_sink_means_not_emitted(self, logging_config):
        set_default_sink(None)
        assert emit_record('match', {'type': 'score'}) is False

    def test_registered_sink_wins(self, logging_config):
        set_default_sink(NullSink())
        sink = NullSink()
        register_sink('match', sink)
        assert get_sink('match') is sink
        assert emit_record('match', {'type': 'score'}) is True

    def test_disabled_module_gets_null_sink(self, logging_config):
        assert isinstance(create_sink_for_environment('nothing_here'), NullSink)

    def test_enabled_module_gets_file_sink(self, logging_config, tmp_path):
        logging_config['modules']['match'] = {'enabled': True, 'dir': str(tmp_path)}
        sink = create_sink_for_environment('match', session_name='t1',
                                           metadata={'seed': 42, 'clock': 'tick'})
        assert isinstance(sink, FileSink)
        with sink:
            sink.emit('match', {'type': 'score'})
        header = json.loads((tmp_path / 't1_match.jsonl').read_text().splitlines()[0])
        assert header['seed'] == 42
        assert header['clock'] == 'tick'

    def test_file_sink_writes_framed_jsonl(self, tmp_path):
        with FileSink(log_dir=str(tmp_path), session_name='s') as sink:
            sink.emit('match', {'type': 'score', 'player': 1, 'ai': 0})
            sink.emit('match', {'type': 'power_up', 'kind': 'magnet', 'side': 'player'})
            path = sink.log_paths['match']

        lines = [json.loads(line) for line in path.read_text().splitlines()]
        assert [line['type'] for line in lines] == ['header', 'score', 'power_up', 'footer']
        assert lines[0]['game'] == 'EnhancedPong'
        assert lines[0]['session_name'] == 's'
        assert lines[1]['player'] == 1
        assert 'wall_time' in lines[1]
        assert lines[-1]['records'] == 2
        assert path.name == 's_match.jsonl'

    def test_close_all_sinks_writes_footers(self, logging_config, tmp_path):
        sink = FileSink(log_dir=str(tmp_path), session_name='c')
        register_sink('match', sink)
        emit_record('match', {'type': 'score'})
        pong_logging.close_all_sinks()

        lines = (tmp_path / 'c_match.jsonl').read_text().splitlines()
        assert json.loads(lines[-1])['type'] == 'footer'
        assert get_sink('match') is None
