"""Secret store base class (abstract, read-only).

Callers should depend on this type, so you can inject alternative store
implementations (memory/other backends) without changing lookup logic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from passstore.errors import NotFoundError


class SecretStoreBase(ABC):
    @abstractmethod
    def get_path(self) -> str:
        """Get the path/identifier of the store (if applicable)."""
        ...

    @abstractmethod
    def show(self, key: str) -> str:
        """Return the secret stored at `key`; raise NotFoundError if absent."""
        ...

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Return the secret at `key`, or `default` if the key is absent.

        Only NotFoundError is turned into `default`; decryption and tool
        errors propagate.
        """
        try:
            return self.show(key)
        except NotFoundError:
            return default

    def exists(self, key: str) -> bool:
        """True if `key` can be read. Errors other than NotFoundError propagate."""
        try:
            self.show(key)
        except NotFoundError:
            return False
        return True

    def __getitem__(self, key: str) -> str:
        return self.show(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self.exists(key)
