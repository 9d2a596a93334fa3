from seawater_acoustics.tools import log
from datetime import datetime

time = datetime(2024, 3, 1, 12, 30, 5)

def test_format_message():
    assert log.format_message(log.LogType.INFO, 'Saving figure', time=time) == '01-03-2024 12:30:05 - INFO: Saving figure'

def test_format_multiline_message_is_indented():
    lines = log.format_message(log.LogType.WARNING, 'first\nsecond', time=time).splitlines()
    assert lines[0].endswith('WARNING: first')
    assert lines[1].strip() == 'second'
    assert lines[1].startswith(' '*len('01-03-2024 12:30:05 - WARNING: '))

def test_format_message_with_exception():
    try:
        raise ValueError('bad value')
    except ValueError as e:
        message = log.format_message(log.LogType.ERROR, 'Failed', ex=e, time=time)
    assert 'ERROR: Failed' in message
    assert 'ValueError: bad value' in message

def test_write_to_stdout_and_file(tmp_path, capsys):
    log_file = tmp_path / 'log.txt'
    log.info('first', str(log_file))
    log.warning('second', str(log_file))
    log.error('third', str(log_file))
    assert 'INFO: first' in capsys.readouterr().out
    lines = log_file.read_text().splitlines()
    assert [line.split(' - ')[1] for line in lines] == ['INFO: first', 'WARNING: second', 'ERROR: third']

def test_no_file_without_log_file(tmp_path, capsys):
    log.info('only stdout')
    assert 'only stdout' in capsys.readouterr().out
    assert list(tmp_path.iterdir()) == []
