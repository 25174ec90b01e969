"""Error taxonomy for password-store access.

Every error derives from :class:`PassStoreError`. Construction failures
(:class:`ToolUnavailableError`, :class:`InvalidDirectoryError`) are fatal to
the handle; lookup failures are raised per call. Messages never include the
secret itself.
"""

from __future__ import annotations

from typing import Optional


class PassStoreError(Exception):
    """Base class for all password-store errors."""


class ToolUnavailableError(PassStoreError, RuntimeError):
    """The `pass` executable is missing or not working."""

    def __init__(self, command: str, detail: Optional[str] = None):
        self.command = command
        self.detail = detail
        msg = f"{command} command not found or not working. Please install pass."
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class InvalidDirectoryError(PassStoreError, ValueError):
    """The resolved store directory is missing or not initialized."""

    def __init__(self, directory: str, message: str):
        self.directory = directory
        super().__init__(message)


class NotFoundError(PassStoreError, KeyError):
    """The requested key is not in the password store."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"{self.key} is not in the password store"


class LookupFailedError(PassStoreError):
    """`pass show` exited non-zero for a reason other than a missing key."""

    def __init__(self, key: str, message: str, stderr: str = ""):
        self.key = key
        self.stderr = stderr
        super().__init__(message)


class GpgError(LookupFailedError):
    """gpg could not decrypt the entry."""


class DecryptionFailedError(GpgError):
    def __init__(self, key: str, stderr: str = ""):
        super().__init__(
            key,
            "GPG decryption failed - check your GPG key and passphrase",
            stderr,
        )


class SecretKeyUnavailableError(GpgError):
    def __init__(self, key: str, stderr: str = ""):
        super().__init__(key, "GPG secret key not available for decryption", stderr)


class UnclassifiedFailureError(LookupFailedError):
    """Any other non-zero exit; keeps the exit code and raw diagnostics."""

    def __init__(self, key: str, returncode: int, stderr: str = ""):
        self.returncode = returncode
        super().__init__(
            key,
            f"pass command failed with exit code {returncode}: {stderr}",
            stderr,
        )


class LookupTimeoutError(PassStoreError):
    """`pass show` did not finish within the configured timeout."""

    def __init__(self, key: str, timeout: float):
        self.key = key
        self.timeout = timeout
        super().__init__(f"pass show {key!r} timed out after {timeout}s")
