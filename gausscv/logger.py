# Copyright 2010 Pallets

# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:

# 1. Redistributions of source code must retain the above copyright notice,
#    this list of conditions and the following disclaimer.
# 2. Redistributions in binary form must reproduce the above copyright notice,
#    this list of conditions and the following disclaimer in the documentation
#    and/or other materials provided with the distribution.
# 3. Neither the name of the copyright holder nor the names of its contributors
#    may be used to endorse or promote products derived from this software
#    without specific prior written permission.

# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

# Copyright 2024 Xanadu Quantum Technologies Inc.

# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
Loggers used across GaussCV.

Handlers are only attached when the user has not configured logging
themselves, following the approach used by the Flask web application
framework:
https://github.com/pallets/flask/blob/master/src/flask/logging.py
"""

import logging
import sys

PACKAGE_LOGGER = "gausscv"
LOGFILE_HANDLER = "gausscv-logfile"

default_handler = logging.StreamHandler(sys.stderr)
formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
default_handler.setFormatter(formatter)


def logging_handler_defined(logger):
    """Checks if the logger or any of its ancestors has a handler defined.

    Ancestors are only inspected while the loggers propagate their records.

    Args:
        logger (logging.Logger): the logger to check

    Returns:
        bool: whether or not a handler was defined
    """
    current = logger

    while current:
        if current.handlers:
            return True

        if not current.propagate:
            break

        current = current.parent

    return False


def create_logger(name, level=logging.INFO):
    """Get a module specific logger and configure it if needed.

    The logger is configured if and only if

    - its effective level is the WARNING level inherited from the root logger,
    - its own level was never set explicitly, and
    - no handler is attached to it or to one of its ancestors.

    In that case the default handler, writing timestamped records to the
    standard error stream, is attached.

    Args:
        name (str): the name of the module requesting the logger
        level (int): the logging level to set when configuring the logger

    Returns:
        logging.Logger: the logger
    """
    logger = logging.getLogger(name)

    effective_level_inherited = logger.getEffectiveLevel() == logging.WARNING
    level_not_set = not logger.level
    no_handlers = not logging_handler_defined(logger)

    if effective_level_inherited and level_not_set and no_handlers:
        logger.setLevel(level)
        logger.addHandler(default_handler)

    return logger


def configure_logging(config):
    """Applies the ``logging`` section of a GaussCV configuration to the
    package logger.

    The level names are the ones understood by :mod:`logging` (``"debug"``,
    ``"info"``, ...). If a ``logfile`` is given, records are also appended
    to that file using the default format. A log file attached by an
    earlier call is closed and replaced.

    Args:
        config (dict): configuration as returned by
            :func:`~.configuration.load_config`

    Returns:
        logging.Logger: the package logger
    """
    section = config.get("logging", {})
    level_name = section.get("level", "info")
    level = logging.getLevelName(level_name.upper())

    if not isinstance(level, int):
        raise ValueError("Unknown logging level {}".format(level_name))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if not logging_handler_defined(logger):
        logger.addHandler(default_handler)

    for handler in logger.handlers[:]:
        if handler.get_name() == LOGFILE_HANDLER:
            logger.removeHandler(handler)
            handler.close()

    logfile = section.get("logfile")
    if logfile is not None:
        file_handler = logging.FileHandler(logfile)
        file_handler.set_name(LOGFILE_HANDLER)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
