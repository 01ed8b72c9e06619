"""User preferences — window geometry and the data file location."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from artbuddy.domain.errors import require

DEFAULT_ADDRESS_BOOK_PATH = Path("data") / "artbuddy.json"


class GuiSettings(BaseModel):
    """Window size and position remembered between sessions."""

    model_config = {"frozen": True}

    window_width: float = 740.0
    window_height: float = 600.0
    window_x: int | None = None
    window_y: int | None = None


class UserPrefs(BaseModel):
    """Mutable preferences held by the model manager."""

    model_config = {"validate_assignment": True}

    gui_settings: GuiSettings = Field(default_factory=GuiSettings)
    address_book_file_path: Path = DEFAULT_ADDRESS_BOOK_PATH

    def reset_data(self, other: UserPrefs) -> None:
        """Overwrite every preference with the values of *other*."""
        require(other, "user_prefs")
        self.gui_settings = other.gui_settings
        self.address_book_file_path = other.address_book_file_path
