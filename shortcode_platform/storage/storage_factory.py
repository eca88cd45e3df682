"""
Storage factory: build the mapping store from config (lazy env version)
======================================================================

Centralizes selection of the storage backend so the HTTP layer stays
ignorant of where mappings live.

- Reads the environment **at call time** to avoid stale values in tests.
- Only the volatile in-memory backend exists; mappings live for the
  lifetime of the process that owns the store.

Environment variables
---------------------
- SHORTCODE_STORAGE_BACKEND: "memory" (default)
"""

from typing import Optional
import os

from shortcode_platform.storage.storage import MappingStore


def get_storage(backend: Optional[str] = None, **kwargs) -> MappingStore:
    """
    Return a fresh mapping store based on configuration.

    Parameters
    ----------
    backend : str, optional
        "memory" (default). If omitted, reads SHORTCODE_STORAGE_BACKEND.
    kwargs : dict
        Extra args passed to the backend constructor (`generator`, `code_length`).

    Returns
    -------
    BaseMappingStore-compatible instance
    """
    be = (backend or os.getenv("SHORTCODE_STORAGE_BACKEND", "memory")).strip().lower()

    if be == "memory":
        return MappingStore(**kwargs)

    raise ValueError(f"Unknown storage backend: {be!r}")
