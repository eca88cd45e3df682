"""
Storage module for the Short-code Platform (in-memory implementation).

Responsibilities:
    - Hold the URL -> code and code -> URL directions as one bijection
    - Validate input before touching state
    - Mint collision-free codes on first save; return the existing code after
    - Resolve codes back to their original URL

Concurrency:
    One ReadWriteLock guards both directions together. Lookups (the idempotent
    path of `save` and all of `resolve`) take the shared side. Candidate codes
    are generated with no lock held and pre-checked under the shared side;
    the final check and the paired insert happen under the exclusive side,
    since another writer may have claimed the candidate (or saved the same
    URL) in between.

The store does not log; every failure is raised to the caller.
"""

from typing import Dict, Optional

from ..config import settings
from ..exceptions import NotFoundError
from ..generator.base import BaseCodeGenerator
from ..generator.generator import CodeGenerator
from ..validators import validate_original_url, validate_short_code
from .base import BaseMappingStore
from .rwlock import ReadWriteLock


class MappingStore(BaseMappingStore):
    def __init__(self, generator: Optional[BaseCodeGenerator] = None, code_length: Optional[int] = None):
        """
        Initialize an empty store.

        Args:
            generator (Optional[BaseCodeGenerator]): Code source; defaults to the
                secure random CodeGenerator.
            code_length (Optional[int]): Code length; defaults to settings.CODE_LENGTH.

        Internal schema:
            self._forward  = {original_url: code}
            self._backward = {code: original_url}
        """
        self.generator = generator or CodeGenerator()
        self.code_length = code_length or settings.CODE_LENGTH
        self._lock = ReadWriteLock()
        self._forward: Dict[str, str] = {}
        self._backward: Dict[str, str] = {}

    def save(self, original_url: str) -> str:
        """
        Create-or-retrieve the short code for `original_url`.

        Rules:
            - Empty input -> EmptyURLError; non-absolute URL -> InvalidURLError.
            - Existing mapping for the exact string -> its code (read lock only).
            - Otherwise generate, pre-check, then re-check and insert under the
              write lock, retrying with a fresh candidate on collision.

        Returns:
            str: The short code mapped to `original_url`.
        """
        validate_original_url(original_url)

        existing = self.code_for(original_url)
        if existing is not None:
            return existing

        while True:
            candidate = self.generator.generate(self.code_length)

            with self._lock.read_locked():
                taken = candidate in self._backward
            if taken:
                continue

            with self._lock.write_locked():
                # Another writer may have saved this URL while we generated.
                existing = self._forward.get(original_url)
                if existing is not None:
                    return existing
                if candidate in self._backward:
                    continue
                self._forward[original_url] = candidate
                self._backward[candidate] = original_url
                return candidate

    def resolve(self, short_code: str) -> str:
        """
        Return the original URL for `short_code`.

        Raises:
            EmptyCodeError: If `short_code` is empty.
            NotFoundError: If the code was never issued.
        """
        validate_short_code(short_code)
        with self._lock.read_locked():
            original_url = self._backward.get(short_code)
        if original_url is None:
            raise NotFoundError()
        return original_url

    def code_for(self, original_url: str) -> Optional[str]:
        """Return the code already issued for `original_url`, or None."""
        with self._lock.read_locked():
            return self._forward.get(original_url)

    def __contains__(self, original_url: str) -> bool:
        return self.code_for(original_url) is not None

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._backward)
