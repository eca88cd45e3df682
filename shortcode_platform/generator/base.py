"""
Base code-generator interface for the Short-code Platform.

Purpose:
    Keep the store ignorant of how codes are minted. The production
    implementation draws from the OS CSPRNG; tests inject scripted
    generators to force collisions or failures.

Testing & Coverage:
    Abstract declarations are never executed; they carry `# pragma: no cover`.
"""

from abc import ABC, abstractmethod


class BaseCodeGenerator(ABC):
    """Abstract base class for short-code generators."""

    @abstractmethod  # pragma: no cover
    def generate(self, length: int) -> str:
        """
        Produce a candidate short code.

        Args:
            length (int): Number of characters to draw (positive).

        Returns:
            str: Candidate code. Uniqueness is the store's concern, not ours.

        Raises:
            RandomnessError: If the underlying random source fails.
        """
        raise NotImplementedError
