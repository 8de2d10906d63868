import json
import logging

import pytest
import structlog

from nbtcodec import Byte, dumps, loads
from nbtcodec.utils.log import setup_logging


@pytest.fixture
def reset_logging():
    yield
    structlog.reset_defaults()
    for name in ('nbtcodec', ''):
        logging.getLogger(name).handlers.clear()
    logging.getLogger('nbtcodec').setLevel(logging.NOTSET)
    logging.getLogger('nbtcodec').propagate = True
    logging.getLogger().setLevel(logging.WARNING)


def _json_lines(output: str) -> list[dict]:
    return [json.loads(line) for line in output.splitlines() if line.strip()]


def test_json_logs(capsys, reset_logging) -> None:
    setup_logging(json_logs=True, capture_stdout=True, extra_log_info={'app': 'tests'})
    structlog.get_logger('nbtcodec.tests').info('hello', value=1)

    record, = _json_lines(capsys.readouterr().out)
    assert record['event'] == 'hello'
    assert record['value'] == 1
    assert record['level'] == 'info'
    assert record['logger'] == 'nbtcodec.tests'
    assert record['app'] == 'tests'
    assert 'timestamp' in record


def test_pretty_logs(capsys, reset_logging) -> None:
    setup_logging(capture_stdout=True)
    structlog.get_logger('nbtcodec.tests').warning('something happened', value=1)
    output = capsys.readouterr().out
    assert 'something happened' in output
    assert 'value=1' in output


def test_debug_logs(capsys, reset_logging) -> None:
    setup_logging(json_logs=True, debug=True, capture_stdout=True)
    dumps('a', Byte(1))
    events = _json_lines(capsys.readouterr().out)
    assert {'event': 'marshal', 'name': 'a', 'tag_type': 'BYTE'}.items() <= events[-1].items()


def test_no_debug_logs_by_default(capsys, reset_logging) -> None:
    setup_logging(json_logs=True, capture_stdout=True)
    dumps('a', Byte(1))
    assert capsys.readouterr().out == ''


def test_codec_never_configures_logging(reset_logging) -> None:
    structlog.reset_defaults()
    root_handlers = list(logging.getLogger().handlers)
    loads(dumps('a', {'b': Byte(1)}))
    assert not structlog.is_configured()
    assert logging.getLogger().handlers == root_handlers
    assert logging.getLogger('nbtcodec').handlers == []
