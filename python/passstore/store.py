"""PassStore: read-only access to a `pass` password store.

Every lookup runs `pass show <key>` with PASSWORD_STORE_DIR pointing at the
handle's directory. Nothing is cached; the handle only holds the resolved
directory and invocation options.
"""

from __future__ import annotations

import os
import subprocess
from typing import Any, Optional

from common.logger import get_logger
from passstore.base import SecretStoreBase
from passstore.classify import classify_failure
from passstore.directory import (
    NOT_PROVIDED,
    STORE_DIR_ENV,
    DirectoryArg,
    resolve_store_directory,
    validate_store_directory,
)
from passstore.errors import LookupTimeoutError, NotFoundError, ToolUnavailableError

DEFAULT_PASS_COMMAND = "pass"


def _chomp(text: str) -> str:
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def validate_pass_command(command: str = DEFAULT_PASS_COMMAND) -> None:
    """Raise ToolUnavailableError unless `<command> --version` exits 0."""
    log = get_logger(__name__)
    log.debug("passstore: probing command=%s", command)
    try:
        result = subprocess.run(
            [command, "--version"],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as e:
        log.warning("passstore: probe failed to start command=%s error=%s", command, e)
        raise ToolUnavailableError(command, str(e)) from e
    if result.returncode != 0:
        log.warning(
            "passstore: probe failed command=%s returncode=%d", command, result.returncode
        )
        raise ToolUnavailableError(command, f"exit code {result.returncode}")
    log.debug("passstore: probe ok command=%s", command)


class PassStore(SecretStoreBase):
    """Immutable handle on an initialized password store.

    Args:
        directory: explicit store path, or ``NOT_PROVIDED`` (default store,
            environment ignored), or ``FROM_ENV`` (``PASSWORD_STORE_DIR``,
            falling back to the default store).
        command: `pass` executable name or path.
        timeout: seconds to wait for each lookup; ``None`` waits forever.

    Raises:
        ToolUnavailableError: `pass --version` cannot run or exits non-zero.
        InvalidDirectoryError: the directory is missing or has no `.gpg-id`.
    """

    def __init__(
        self,
        directory: DirectoryArg = NOT_PROVIDED,
        *,
        command: str = DEFAULT_PASS_COMMAND,
        timeout: Optional[float] = None,
    ):
        validate_pass_command(command)
        resolved = resolve_store_directory(directory)
        validate_store_directory(resolved)

        object.__setattr__(self, "_directory", resolved)
        object.__setattr__(self, "_command", command)
        object.__setattr__(self, "_timeout", timeout)
        get_logger(__name__).debug("passstore: using directory=%s", resolved)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def directory(self) -> str:
        return self._directory

    @property
    def command(self) -> str:
        return self._command

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    def get_path(self) -> str:
        return self._directory

    def _env(self) -> dict[str, str]:
        env = dict(os.environ)
        env[STORE_DIR_ENV] = self._directory
        return env

    def show(self, key: str) -> str:
        """Decrypt and return the secret at `key`, without the trailing newline.

        Raises:
            NotFoundError: the key is not in the store (also a KeyError).
            DecryptionFailedError / SecretKeyUnavailableError: gpg failed.
            UnclassifiedFailureError: any other non-zero exit.
            LookupTimeoutError: the lookup exceeded ``timeout``.
        """
        if not isinstance(key, str):
            raise TypeError(f"key must be a str, got {type(key).__name__}")
        if not key:
            # `pass show ""` lists the whole store; no entry can live there.
            raise NotFoundError(key)

        log = get_logger(__name__)
        log.debug("passstore: show start key=%s directory=%s", key, self._directory)
        try:
            result = subprocess.run(
                [self._command, "show", "--", key],
                stdin=subprocess.DEVNULL,
                capture_output=True,
                env=self._env(),
                timeout=self._timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            log.warning("passstore: show timed out key=%s timeout=%s", key, self._timeout)
            raise LookupTimeoutError(key, self._timeout) from e

        if result.returncode == 0:
            # Arbitrary bytes survive: .encode("utf-8", "surrogateescape") restores them.
            return _chomp(result.stdout.decode("utf-8", errors="surrogateescape"))

        stderr = result.stderr.decode("utf-8", errors="replace")
        err = classify_failure(key, result.returncode, stderr)
        if isinstance(err, NotFoundError):
            log.debug("passstore: show not found key=%s", key)
        else:
            log.warning(
                "passstore: show failed key=%s returncode=%d error=%s",
                key,
                result.returncode,
                type(err).__name__,
            )
        raise err

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PassStore):
            return NotImplemented
        return (self._directory, self._command, self._timeout) == (
            other._directory,
            other._command,
            other._timeout,
        )

    def __hash__(self) -> int:
        return hash((self._directory, self._command, self._timeout))

    def __repr__(self) -> str:
        return f"PassStore(directory={self._directory!r})"
