from datetime import datetime
from enum import Enum
import traceback

# Timestamped lines to stdout, also appended to log_file if one is given.

class LogType(Enum):
    ERROR = 'ERROR'
    WARNING = 'WARNING'
    INFO = 'INFO'

timestamp_format = '%d-%m-%Y %H:%M:%S'

def info(message:str, log_file=None):
    _write(log_file, LogType.INFO, message)

def warning(message:str, log_file=None):
    _write(log_file, LogType.WARNING, message)

def error(message:str, log_file=None, exception=None):
    _write(log_file, LogType.ERROR, message, ex=exception)

def format_message(log_type:LogType, message:str, ex=None, time=None) -> str:
    '''Prefixes message with time and log type. Continuation lines (and a
    traceback of ex, if given) are indented below the first line.'''
    time = time or datetime.now()
    lines = str(message).splitlines() or ['']
    if ex is not None:
        lines += ''.join(traceback.format_exception(type(ex), ex, ex.__traceback__)).rstrip().splitlines()
    header = f'{time.strftime(timestamp_format)} - {log_type.value}: '
    return header + ('\n' + ' '*len(header)).join(lines)

def _write(log_file, log_type:LogType, message:str, ex=None):
    log_msg = format_message(log_type, message, ex=ex)
    print(log_msg)
    if log_file:
        with open(log_file, 'a') as f:
            f.write(log_msg + '\n')
