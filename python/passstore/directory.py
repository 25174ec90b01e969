"""Store directory resolution and validation.

The caller's intent is a three-way choice:

- an explicit path (``str`` / ``os.PathLike``), used verbatim, even if empty;
- ``DirectoryChoice.NOT_PROVIDED``: the default ``~/.password-store``,
  ignoring ``PASSWORD_STORE_DIR``;
- ``DirectoryChoice.FROM_ENV``: ``PASSWORD_STORE_DIR`` if set, else the default.
"""

from __future__ import annotations

import enum
import os
from pathlib import Path
from typing import Mapping, Optional, Union

from common.logger import get_logger
from passstore.errors import InvalidDirectoryError

STORE_DIR_ENV = "PASSWORD_STORE_DIR"
DEFAULT_STORE_DIRNAME = ".password-store"
GPG_ID_FILENAME = ".gpg-id"


class DirectoryChoice(enum.Enum):
    NOT_PROVIDED = "not_provided"
    FROM_ENV = "from_env"


NOT_PROVIDED = DirectoryChoice.NOT_PROVIDED
FROM_ENV = DirectoryChoice.FROM_ENV

DirectoryArg = Union[str, os.PathLike, DirectoryChoice]


def default_store_directory() -> str:
    return str(Path.home() / DEFAULT_STORE_DIRNAME)


def resolve_store_directory(
    directory: DirectoryArg = NOT_PROVIDED,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """Return the store directory for the given choice.

    ``environ`` defaults to ``os.environ`` and is read at call time only.
    """
    log = get_logger(__name__)
    if isinstance(directory, DirectoryChoice):
        if directory is DirectoryChoice.NOT_PROVIDED:
            resolved, source = default_store_directory(), "default"
        else:
            env = os.environ if environ is None else environ
            value = env.get(STORE_DIR_ENV)
            if value is None:
                resolved, source = default_store_directory(), "default"
            else:
                resolved, source = value, STORE_DIR_ENV
    elif isinstance(directory, (str, os.PathLike)):
        resolved, source = os.fspath(directory), "explicit"
    else:
        raise TypeError(
            "directory must be a path or a DirectoryChoice, "
            f"got {type(directory).__name__}"
        )
    log.debug("passstore: resolved directory=%s source=%s", resolved, source)
    return resolved


def validate_store_directory(directory: str) -> None:
    """Raise InvalidDirectoryError unless `directory` is an initialized store."""
    log = get_logger(__name__)
    if not os.path.isdir(directory):
        log.warning("passstore: directory missing path=%s", directory)
        raise InvalidDirectoryError(
            directory, f"Password store directory '{directory}' does not exist"
        )
    if not os.path.isfile(os.path.join(directory, GPG_ID_FILENAME)):
        log.warning("passstore: directory not initialized path=%s", directory)
        raise InvalidDirectoryError(
            directory,
            "Password store not initialized. "
            f"Run 'pass init <gpg-id>' first in directory '{directory}'",
        )
