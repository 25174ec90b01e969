from passstore.base import SecretStoreBase
from passstore.classify import classify_failure
from passstore.directory import (
    FROM_ENV,
    GPG_ID_FILENAME,
    NOT_PROVIDED,
    STORE_DIR_ENV,
    DirectoryChoice,
    default_store_directory,
    resolve_store_directory,
    validate_store_directory,
)
from passstore.errors import (
    DecryptionFailedError,
    GpgError,
    InvalidDirectoryError,
    LookupFailedError,
    LookupTimeoutError,
    NotFoundError,
    PassStoreError,
    SecretKeyUnavailableError,
    ToolUnavailableError,
    UnclassifiedFailureError,
)
from passstore.store import DEFAULT_PASS_COMMAND, PassStore, validate_pass_command

__all__ = [
    "DEFAULT_PASS_COMMAND",
    "FROM_ENV",
    "GPG_ID_FILENAME",
    "NOT_PROVIDED",
    "STORE_DIR_ENV",
    "DirectoryChoice",
    "PassStore",
    "SecretStoreBase",
    "classify_failure",
    "default_store_directory",
    "resolve_store_directory",
    "validate_pass_command",
    "validate_store_directory",
    "PassStoreError",
    "ToolUnavailableError",
    "InvalidDirectoryError",
    "NotFoundError",
    "LookupFailedError",
    "GpgError",
    "DecryptionFailedError",
    "SecretKeyUnavailableError",
    "UnclassifiedFailureError",
    "LookupTimeoutError",
]
