'''Shared helpers for logging setup and command-line path handling.'''

import os
import logging
import argparse

from . import config

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(module)s.%(funcName)s: %(message)s'

def filename_no_ext(path: str) -> str:
    '''Returns the file name of `path` without its directory or extension.'''
    return os.path.splitext(os.path.basename(path))[0]

def configure_log(name: str = 'mediatree', level: int = logging.DEBUG, path: str = '') -> None:
    '''Sends log output for the current process to '<LOG_DIR>/<name>.log'.

    Args:
        name: Base name of the log file.
        level: Minimum level of records to keep.
        path: Optional source file path; its base name replaces `name` when given.
    '''
    if path:
        name = filename_no_ext(path)

    log_dir = str(config.LOG_DIR)
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    logging.basicConfig(filename=f"{log_dir}/{name}.log",
                        level=level,
                        format=LOG_FORMAT,
                        encoding='utf-8',
                        force=True)

def configure_log_module(module_path: str, level: int = logging.DEBUG) -> None:
    '''Configures logging to a file named after the calling module (pass `__file__`).'''
    configure_log(level=level, path=module_path)

def normalize_path(path: str) -> str:
    '''Returns the absolute, normalized form of `path`.'''
    return os.path.normpath(os.path.abspath(path))

def normalize_arg_paths(args: argparse.Namespace, names: list[str]) -> None:
    '''Normalizes the path arguments named in `names`, in place.

    Arguments that are missing or None are left alone. List arguments have each entry normalized.
    '''
    for name in names:
        value = getattr(args, name, None)
        if value is None:
            continue
        if isinstance(value, list):
            setattr(args, name, [normalize_path(v) for v in value])
        else:
            setattr(args, name, normalize_path(value))
