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


"""Logging configuration for the navigation math core

Library modules log through ``logging.getLogger(__name__)`` and so sit
below the ``navcore`` root logger set up here. Per-module levels narrow or
widen what a single module (for example ``navcore.linalg.jacobi``) passes
on to the root handlers.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER = "navcore"

LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL,
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _level_value(level: str) -> int:
    try:
        return LEVELS[level.upper()]
    except KeyError:
        raise ValueError(f"Unknown log level: {level!r}") from None


def setup_logger(name: str = ROOT_LOGGER,
                 level: str = "INFO",
                 log_file: Optional[str] = None,
                 console: bool = True) -> logging.Logger:
    """
    Attach handlers to a navcore logger

    Parameters:
    -----------
    name : str
        Logger name, normally the ``navcore`` root
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_file : Optional[str]
        Log file path (if None, no file logging)
    console : bool
        Enable output on stdout

    Returns:
    --------
    logging.Logger
        Configured logger

    Raises:
    -------
    ValueError
        If the level name is unknown
    """
    level_value = _level_value(level)

    logger = logging.getLogger(name)
    logger.setLevel(level_value)

    # Replace handlers from a previous setup
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = []
    if console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(handler)

    return logger


def set_module_level(module_name: str, level: str):
    """Set the level of one navcore module, e.g. 'navcore.linalg.jacobi'"""
    logging.getLogger(module_name).setLevel(_level_value(level))


def setup_logger_from_config(config: dict) -> logging.Logger:
    """Setup the navcore loggers from a configuration dictionary

    Example config:
    {
        'level': 'INFO',
        'log_file': 'navcore.log',
        'console': True,
        'module_levels': {
            'navcore.linalg.jacobi': 'ERROR'
        }
    }
    """
    logger = setup_logger(ROOT_LOGGER,
                          config.get('level', 'INFO'),
                          config.get('log_file'),
                          config.get('console', True))
    for module, level in config.get('module_levels', {}).items():
        set_module_level(module, level)
    return logger
