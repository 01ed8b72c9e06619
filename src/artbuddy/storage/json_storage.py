"""JSON file storage for the address book and user preferences.

A missing file is not an error: readers return ``None`` and the caller
starts from defaults. A malformed file raises :class:`DataConversionError`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from artbuddy.domain.errors import require
from artbuddy.model.address_book import AddressBook
from artbuddy.model.user_prefs import UserPrefs
from artbuddy.storage.json_models import DataConversionError, JsonSerializableAddressBook

logger = logging.getLogger(__name__)


def _write_json(path: Path, payload: str) -> None:
    """Write *payload*, creating parent directories if they don't exist."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(payload + "\n", encoding="utf-8")


class JsonAddressBookStorage:
    """Reads and writes the customer graph as a JSON document."""

    def __init__(self, path: Path) -> None:
        self.path = Path(require(path, "path"))

    def read_address_book(self, path: Path | None = None) -> AddressBook | None:
        target = path or self.path
        if not target.is_file():
            logger.info("Data file %s not found", target)
            return None
        try:
            raw = JsonSerializableAddressBook.model_validate_json(
                target.read_text(encoding="utf-8")
            )
        except ValidationError as exc:
            logger.warning("Data file %s is not in the correct format", target)
            msg = f"Malformed data file {target}: {exc.error_count()} error(s)"
            raise DataConversionError(msg) from exc
        return raw.to_model_type()

    def save_address_book(self, address_book: AddressBook, path: Path | None = None) -> None:
        target = path or self.path
        payload = JsonSerializableAddressBook.from_model(require(address_book, "address_book"))
        _write_json(target, payload.model_dump_json(indent=2))
        logger.debug("Saved %d customers to %s", len(address_book), target)


class JsonUserPrefsStorage:
    """Reads and writes :class:`UserPrefs` as a JSON document."""

    def __init__(self, path: Path) -> None:
        self.path = Path(require(path, "path"))

    def read_user_prefs(self) -> UserPrefs | None:
        if not self.path.is_file():
            return None
        try:
            return UserPrefs.model_validate_json(self.path.read_text(encoding="utf-8"))
        except ValidationError as exc:
            logger.warning("Preferences file %s is not in the correct format", self.path)
            msg = f"Malformed preferences file {self.path}"
            raise DataConversionError(msg) from exc

    def save_user_prefs(self, user_prefs: UserPrefs) -> None:
        _write_json(self.path, require(user_prefs, "user_prefs").model_dump_json(indent=2))


class StorageManager:
    """Pairs address book and preference storage behind one object."""

    def __init__(
        self,
        address_book_storage: JsonAddressBookStorage,
        user_prefs_storage: JsonUserPrefsStorage,
    ) -> None:
        self.address_book_storage = address_book_storage
        self.user_prefs_storage = user_prefs_storage

    @property
    def address_book_file_path(self) -> Path:
        return self.address_book_storage.path

    def read_address_book(self) -> AddressBook | None:
        return self.address_book_storage.read_address_book()

    def save_address_book(self, address_book: AddressBook) -> None:
        self.address_book_storage.save_address_book(address_book)

    def read_user_prefs(self) -> UserPrefs | None:
        return self.user_prefs_storage.read_user_prefs()

    def save_user_prefs(self, user_prefs: UserPrefs) -> None:
        self.user_prefs_storage.save_user_prefs(user_prefs)
