"""
.env File Loader
================

Seeds the environment from a ``KEY=VALUE`` file before the accessors read it.
Parsing is delegated to python-dotenv. By default the file is ``.env`` in the
current directory; set ``ENV_FILE`` to point somewhere else.

Usage (at the top of the entry point, before reading configuration):
    from envconfig import load
    load()
"""

import logging
import os
from typing import Dict, Mapping, MutableMapping, Optional

from dotenv import dotenv_values, load_dotenv
from dotenv.variables import parse_variables

from .getters import get

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = '.env'
ENV_FILE_KEY = 'ENV_FILE'


def load(environ: Optional[MutableMapping[str, str]] = None, *, override: bool = False) -> None:
    """
    Load variables from the file named by ``ENV_FILE`` (default ``.env``).

    Args:
        environ: Mapping to populate, defaults to os.environ
        override: Replace variables that are already set

    Raises:
        FileNotFoundError: If the file does not exist
    """
    env_file = get(ENV_FILE_KEY, DEFAULT_ENV_FILE, environ=environ)
    load_env_file(env_file, environ, override=override)


def load_env_file(path: str,
                  environ: Optional[MutableMapping[str, str]] = None,
                  *,
                  override: bool = False) -> None:
    """
    Install the variables defined in ``path``.

    Keys that are already present (even if empty) are kept unless ``override``
    is set. Lines with a bare key and no ``=`` are ignored. ``${VAR}``
    references expand against the environment being filled.

    Args:
        path: Path to the .env file
        environ: Mapping to populate, defaults to os.environ
        override: Replace variables that are already set

    Raises:
        FileNotFoundError: If the file does not exist
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"env file not found: {path}")

    if environ is None:
        load_dotenv(dotenv_path=path, override=override)
        logger.info(f"Loaded environment file: {path}")
        return

    installed = 0
    values = expand_references(dotenv_values(dotenv_path=path, interpolate=False), environ, override=override)
    for key, value in values.items():
        if value is None:
            continue
        if key in environ and not override:
            continue
        environ[key] = value
        installed += 1

    logger.info(f"Loaded environment file: {path} ({installed} variable(s) set)")


def expand_references(values: Mapping[str, Optional[str]],
                      environ: Mapping[str, str],
                      *,
                      override: bool = False) -> Dict[str, Optional[str]]:
    """
    Expand ``${VAR}`` and ``${VAR:-default}`` references in file values.

    References see the file's earlier keys and ``environ``. Without
    ``override`` the keys already in ``environ`` win, as they do when
    python-dotenv loads into the process environment.
    """
    expanded: Dict[str, Optional[str]] = {}
    for key, value in values.items():
        if value is None:
            expanded[key] = None
            continue

        scope: Dict[str, Optional[str]] = {}
        if override:
            scope.update(environ)
            scope.update(expanded)
        else:
            scope.update(expanded)
            scope.update(environ)
        expanded[key] = ''.join(atom.resolve(scope) for atom in parse_variables(value))

    return expanded


__all__ = ['DEFAULT_ENV_FILE', 'ENV_FILE_KEY', 'load', 'load_env_file', 'expand_references']
