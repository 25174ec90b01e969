"""Map a failed `pass show` (exit code + stderr) to an error.

Matching is on fixed substrings of the diagnostics printed by pass/gpg, so it
depends on their wording and locale. Rules are checked in order; the first
match wins.
"""

from __future__ import annotations

from typing import Callable

from passstore.errors import (
    DecryptionFailedError,
    NotFoundError,
    PassStoreError,
    SecretKeyUnavailableError,
    UnclassifiedFailureError,
)

ErrorFactory = Callable[[str, str], PassStoreError]

NOT_FOUND_MARKERS = ("is not in the password store",)
DECRYPTION_FAILED_MARKERS = (
    "gpg: decryption failed",
    "gpg: public key decryption failed",
)
SECRET_KEY_MARKERS = (
    "gpg: No secret key",
    "gpg: secret key not available",
)

FAILURE_RULES: tuple[tuple[tuple[str, ...], ErrorFactory], ...] = (
    (NOT_FOUND_MARKERS, lambda key, stderr: NotFoundError(key)),
    (DECRYPTION_FAILED_MARKERS, DecryptionFailedError),
    (SECRET_KEY_MARKERS, SecretKeyUnavailableError),
)


def classify_failure(key: str, returncode: int, stderr: str) -> PassStoreError:
    """Return (not raise) the error for a non-zero `pass show` exit."""
    text = stderr or ""
    for markers, factory in FAILURE_RULES:
        if any(m in text for m in markers):
            return factory(key, text)
    return UnclassifiedFailureError(key, returncode, text)
