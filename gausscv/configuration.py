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
r"""
Loading, storing and locating GaussCV configuration files.

A configuration holds the numerical defaults of the package (``hbar`` and
``tol``) and the settings of the package logger. It is resolved from, in
decreasing order of priority,

1. keyword arguments passed to :func:`load_config`,
2. environment variables named ``GAUSSCV_<SECTION>_<OPTION>``,
3. the first ``config.toml`` found in the working directory, the
   ``GAUSSCV_CONF`` directory or the user configuration directory,
4. the defaults of :data:`DEFAULT_CONFIG_SPEC`.

The numerical functions never read the configuration themselves, callers pass
the values on explicitly:

>>> config = load_config()
>>> state = vacuumstate(hbar=config["numerics"]["hbar"])
>>> entropy_vn(state, tol=config["numerics"]["tol"])
0.0
"""
import collections.abc
import os

import toml
from appdirs import user_config_dir

NUMBER = (float, int)

DEFAULT_CONFIG_SPEC = {
    "numerics": {
        "hbar": (NUMBER, 2.0),
        "tol": (NUMBER, 1e-15),
    },
    "logging": {
        "level": (str, "info"),
        "logfile": ((str, type(None)), None),
    },
}
"""dict: sections and options of a GaussCV configuration. Each option maps to
a pair ``(allowed types, default value)``.

Options whose default is ``None`` are left out of generated configurations,
since TOML cannot represent a null value.
"""


class ConfigurationError(Exception):
    """Exception raised for invalid configuration values or locations"""


def _merge(target, updates):
    """Merges the nested mapping ``updates`` into ``target``, section by section."""
    for key, value in updates.items():
        if isinstance(value, collections.abc.Mapping):
            if value:
                target[key] = _merge(target.get(key, {}), value)
        else:
            target[key] = value
    return target


def _check_option(name, value, allowed):
    if isinstance(value, bool) or not isinstance(value, allowed):
        raise ConfigurationError(
            "Expected type {} for option {}, received {}".format(allowed, name, type(value))
        )


def _generate_config(config_spec, **kwargs):
    """Builds a configuration from a specification, overriding its defaults
    with the keyword arguments.

    **Example**

    >>> _generate_config(DEFAULT_CONFIG_SPEC, numerics={"hbar": 1.0})
    {'numerics': {'hbar': 1.0, 'tol': 1e-15}, 'logging': {'level': 'info'}}

    Args:
        config_spec (dict): nested specification, in the format of
            :data:`DEFAULT_CONFIG_SPEC`

    Returns:
        dict: the configuration, without the options whose value is ``None``

    Raises:
        ConfigurationError: if an override has a type not allowed by the specification
    """
    config = {}

    for name, entry in config_spec.items():
        if isinstance(entry, dict):
            config[name] = _generate_config(entry, **kwargs.get(name, {}))
            continue

        allowed, default = entry
        value = kwargs.get(name, default)

        if name in kwargs:
            _check_option(name, value, allowed)

        if value is not None:
            config[name] = value

    return config


def _read(filepath):
    with open(filepath, "r") as f:
        return toml.load(f)


def load_config(filename="config.toml", verbose=True, **kwargs):
    """Loads the configuration, combining keyword arguments, environment
    variables, a configuration file and the defaults.

    Args:
        filename (str): name of the configuration file to look for
        verbose (bool): whether to log where the configuration came from

    Keyword Args:
        numerics (dict): overrides for the ``numerics`` section
        logging (dict): overrides for the ``logging`` section

    Returns:
        dict[str, dict[str, Union[str, float]]]: the configuration

    Raises:
        ConfigurationError: if a value has the wrong type or an environment
            variable cannot be parsed
    """
    filepath = find_config_file(filename=filename)
    config = {} if filepath is None else _read(filepath)

    if verbose:
        from gausscv.logger import create_logger

        log = create_logger(__name__)

        if filepath is None:
            log.debug("No GaussCV configuration file found, using the defaults.")
        else:
            log.debug("Configuration file %s loaded", filepath)

    update_from_environment_variables(config)
    _merge(config, kwargs)
    config = _generate_config(DEFAULT_CONFIG_SPEC, **config)

    if verbose:
        log.debug("Loaded configuration: %s", config)

    return config


def directories_to_check():
    """Directories searched for a configuration file, in order of precedence.

    Returns:
        list[str]: the working directory, the ``GAUSSCV_CONF`` directory
        if that variable is set, and the user configuration directory
    """
    directories = [os.getcwd()]

    if os.environ.get("GAUSSCV_CONF"):
        directories.append(os.environ["GAUSSCV_CONF"])

    directories.append(user_config_dir("gausscv", "Xanadu"))
    return directories


def get_available_config_paths(filename="config.toml"):
    """Paths of the existing configuration files, in order of precedence.

    Args:
        filename (str): name of the configuration files

    Returns:
        list[str]: the configuration files found in :func:`directories_to_check`
    """
    candidates = (os.path.join(directory, filename) for directory in directories_to_check())
    return [path for path in candidates if os.path.exists(path)]


def find_config_file(filename="config.toml"):
    """Path of the active configuration file.

    Args:
        filename (str): name of the configuration file

    Returns:
        Union[str, None]: the first path returned by
        :func:`get_available_config_paths`, or ``None`` if there is none
    """
    paths = get_available_config_paths(filename=filename)
    return paths[0] if paths else None


def update_from_environment_variables(config):
    """Overrides options of ``config`` in place with the environment.

    Option ``tol`` of section ``numerics`` is read from
    ``GAUSSCV_NUMERICS_TOL``, and so on for every option of
    :data:`DEFAULT_CONFIG_SPEC`.

    Args:
        config (dict): the configuration to update
    """
    for section, options in DEFAULT_CONFIG_SPEC.items():
        for key in options:
            env = "GAUSSCV_{}_{}".format(section, key).upper()

            if env in os.environ:
                value = _parse_environment_variable(section, key, os.environ[env])
                config.setdefault(section, {})[key] = value


def _parse_environment_variable(section, key, value):
    """Converts the string stored in an environment variable to the type of the option.

    Raises:
        ConfigurationError: if a numerical option cannot be parsed
    """
    if DEFAULT_CONFIG_SPEC[section][key][0] is not NUMBER:
        return value

    try:
        return float(value)
    except ValueError as e:
        raise ConfigurationError(
            "Option {} of section {} must be a number, received {}".format(key, section, value)
        ) from e


def store_config(filename="config.toml", location="user_config", **kwargs):
    r"""Writes configuration options to a file.

    Options already stored in the file are kept unless overridden, and
    missing options are filled in with their defaults.

    **Example:**

    >>> store_config(location="local", numerics={"hbar": 1.0})

    writes to ``config.toml`` in the working directory:

    .. code-block:: toml

        [numerics]
        hbar = 1.0
        tol = 1e-15

        [logging]
        level = "info"

    Args:
        filename (str): name of the configuration file
        location (str): ``"user_config"`` for the user configuration directory
            or ``"local"`` for the working directory

    Keyword Args:
        numerics (dict): options of the ``numerics`` section
        logging (dict): options of the ``logging`` section

    Returns:
        str: path of the written file

    Raises:
        ConfigurationError: if ``location`` is not recognized
    """
    if location == "local":
        directory = os.getcwd()
    elif location == "user_config":
        directory = user_config_dir("gausscv", "Xanadu")
        os.makedirs(directory, exist_ok=True)
    else:
        raise ConfigurationError("This location is not recognized.")

    filepath = os.path.join(directory, filename)
    config = _read(filepath) if os.path.isfile(filepath) else {}
    config = _generate_config(DEFAULT_CONFIG_SPEC, **_merge(config, kwargs))

    with open(filepath, "w") as f:
        toml.dump(config, f)

    return filepath


def delete_config(filename="config.toml", directory=None):
    """Deletes a configuration file.

    Args:
        filename (str): name of the configuration file
        directory (str): directory holding the file. If ``None``, the active
            configuration file is deleted.

    Raises:
        ConfigurationError: if ``directory`` is ``None`` and no configuration
            file was found
    """
    if directory is None:
        filepath = find_config_file(filename)
        if filepath is None:
            raise ConfigurationError("No configuration file {} was found.".format(filename))
    else:
        filepath = os.path.join(directory, filename)

    os.remove(filepath)


DEFAULT_CONFIG = _generate_config(DEFAULT_CONFIG_SPEC)
