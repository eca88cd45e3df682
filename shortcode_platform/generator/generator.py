"""
Secure random short-code generator.

Each character is drawn independently and uniformly from the 62-character
alphabet (a-z, A-Z, 0-9). `random.SystemRandom` reads `os.urandom` and picks
indices with `randbelow`, which rejects out-of-range draws instead of reducing
them modulo 62, so every character is unbiased.

Failure of the OS source is reported as RandomnessError and is fatal for the
in-flight request only; the generator does not retry.
"""

import random
from dataclasses import dataclass, field

from ..config import CODE_ALPHABET, settings
from ..exceptions import RandomnessError
from .base import BaseCodeGenerator


@dataclass(frozen=True)
class CodeGenerator(BaseCodeGenerator):
    """Random fixed-alphabet codes from a cryptographically secure source."""

    alphabet: str = CODE_ALPHABET
    rng: random.Random = field(default_factory=random.SystemRandom, repr=False, compare=False)

    def generate(self, length: int = None) -> str:
        if length is None:
            length = settings.CODE_LENGTH
        if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
            raise ValueError(f"length must be a positive integer (given value: {length!r})")

        try:
            return "".join(self.rng.choice(self.alphabet) for _ in range(length))
        except (OSError, NotImplementedError) as exc:
            raise RandomnessError(f"{RandomnessError.default_message}: {exc}") from exc
