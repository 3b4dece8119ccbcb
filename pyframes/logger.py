# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Logging configuration for pyframes

Library modules log through ``logging.getLogger(__name__)`` and never
install handlers themselves. Applications call :func:`setup_logger` or
:func:`setup_logger_from_config` to get console or file output, e.g. to
watch raw provider fetches and cache misses at DEBUG level.
"""

import logging
import sys
from enum import Enum
from typing import Optional

ROOT_LOGGER = "pyframes"


class LogLevel(Enum):
    """Log levels for the library"""
    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


logging.addLevelName(LogLevel.TRACE.value, "TRACE")


def trace(self, message, *args, **kwargs):
    """Log at TRACE level"""
    if self.isEnabledFor(LogLevel.TRACE.value):
        self._log(LogLevel.TRACE.value, message, args, **kwargs)


logging.Logger.trace = trace


def _level(level: str) -> int:
    try:
        return LogLevel[level.upper()].value
    except KeyError:
        raise ValueError(f"unknown log level: {level!r}") from None


class ColoredFormatter(logging.Formatter):
    """Formatter coloring the level name for terminals"""

    COLORS = {
        'TRACE': '\033[36m',     # Cyan
        'DEBUG': '\033[34m',     # Blue
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        # work on a copy, other handlers share the record
        record = logging.makeLogRecord(record.__dict__)
        log_color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{log_color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logger(name: str = ROOT_LOGGER,
                 level: str = "INFO",
                 log_file: Optional[str] = None,
                 console: bool = True) -> logging.Logger:
    """
    Setup logger with specified configuration

    Parameters
    ----------
    name : str
        Logger name; child loggers of library modules propagate to it
    level : str
        Log level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_file : Optional[str]
        Log file path (if None, no file logging)
    console : bool
        Enable console output

    Returns
    -------
    logging.Logger
        Configured logger
    """
    numeric_level = _level(level)
    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(ColoredFormatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        ))
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    return logger


class LoggerConfig:
    """Logger configuration with per-module levels"""

    def __init__(self):
        self.module_levels = {}
        self.default_level = "INFO"
        self.log_file = None
        self.console = True

    def set_module_level(self, module_name: str, level: str):
        """Set log level for a module, e.g. ``pyframes.frames.providers``"""
        self.module_levels[module_name] = level
        logging.getLogger(module_name).setLevel(_level(level))

    def configure_from_dict(self, config: dict):
        if 'default_level' in config:
            self.default_level = config['default_level']
        if 'log_file' in config:
            self.log_file = config['log_file']
        if 'console' in config:
            self.console = config['console']
        for module, level in config.get('module_levels', {}).items():
            self.set_module_level(module, level)

    def setup_all_loggers(self) -> logging.Logger:
        """Install handlers on the library root logger"""
        logger = setup_logger(ROOT_LOGGER, self.default_level, self.log_file, self.console)
        # handlers must let through the most verbose module level
        lowest = min([_level(self.default_level)] + [_level(v) for v in self.module_levels.values()])
        for handler in logger.handlers:
            handler.setLevel(lowest)
        return logger


def setup_logger_from_config(config: dict) -> logging.Logger:
    """Setup loggers from configuration dictionary

    Example config:
    {
        'default_level': 'INFO',
        'log_file': 'frames.log',
        'console': True,
        'module_levels': {
            'pyframes.frames.providers': 'DEBUG',
            'pyframes.coordinate.hermite': 'TRACE'
        }
    }
    """
    logger_config = LoggerConfig()
    logger_config.configure_from_dict(config)
    return logger_config.setup_all_loggers()


__all__ = [
    'LogLevel', 'ColoredFormatter', 'setup_logger', 'LoggerConfig', 'setup_logger_from_config',
]
