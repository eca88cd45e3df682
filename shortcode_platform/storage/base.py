"""
Base storage interface for the Short-code Platform.

Purpose:
    Define a small, stable contract for the URL <-> code mapping store so the
    HTTP layer depends on two operations only, regardless of backend.

Testing & Coverage:
    These are abstract methods and are not executed directly in tests.
    We annotate them with `# pragma: no cover` so coverage tools don't
    penalize the project for un-runnable abstract declarations.
"""

from abc import ABC, abstractmethod


class BaseMappingStore(ABC):
    """Abstract base class for mapping-store backends."""

    @abstractmethod  # pragma: no cover
    def save(self, original_url: str) -> str:
        """
        Create-or-retrieve the short code for an original URL.

        Returns:
            str: The newly minted code, or the existing one for this exact URL.

        Raises:
            EmptyURLError: If `original_url` is empty.
            InvalidURLError: If `original_url` is not an absolute URL.
            RandomnessError: If code generation failed.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def resolve(self, short_code: str) -> str:
        """
        Return the original URL stored for `short_code`.

        Raises:
            EmptyCodeError: If `short_code` is empty.
            NotFoundError: If no mapping exists for `short_code`.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def __len__(self) -> int:
        """Number of mappings currently held."""
        raise NotImplementedError
