"""Pydantic configuration sections with code-baked defaults.

Sparse TOML contract: defaults live here, artbuddy.toml only holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class StorageConfig(BaseModel):
    """[storage] section. Relative paths resolve against the data root."""

    model_config = {"frozen": True}

    address_book_file: str = "data/artbuddy.json"
    user_prefs_file: str = "preferences.json"
