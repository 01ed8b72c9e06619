"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy model loading from the JSON data file
and centralized result emission (stdout/stderr routing, saving, exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from artbuddy.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from artbuddy.config.settings import ArtBuddySettings
    from artbuddy.model.manager import ModelManager
    from artbuddy.services.result import ServiceResult
    from artbuddy.storage.json_storage import StorageManager

logger = logging.getLogger(__name__)

_MUTATING_OPS = frozenset(
    {
        "add_customer",
        "edit_customer",
        "delete_customer",
        "add_commission",
        "edit_commission",
        "delete_commission",
        "add_iteration",
        "delete_iteration",
    }
)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The model is loaded
    on first use so ``--help`` and ``--version`` never touch the data file.
    """

    def __init__(self, settings: ArtBuddySettings) -> None:
        self.settings = settings
        self._storage: StorageManager | None = None
        self._model: ModelManager | None = None

        # Configure structured logging
        from artbuddy.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def storage(self) -> StorageManager:
        if self._storage is None:
            from artbuddy.storage.json_storage import (
                JsonAddressBookStorage,
                JsonUserPrefsStorage,
                StorageManager,
            )

            self._storage = StorageManager(
                JsonAddressBookStorage(self.settings.address_book_path),
                JsonUserPrefsStorage(self.settings.user_prefs_path),
            )
        return self._storage

    @property
    def model(self) -> ModelManager:
        """The model (loaded lazily on first access).

        A missing data file starts an empty address book. A malformed one
        aborts the command so it is never overwritten.
        """
        if self._model is None:
            from artbuddy.model.manager import ModelManager
            from artbuddy.storage.json_models import DataConversionError

            try:
                user_prefs = self.storage.read_user_prefs()
                address_book = self.storage.read_address_book()
            except DataConversionError as exc:
                raise click.ClickException(str(exc)) from exc
            self._model = ModelManager(address_book, user_prefs)
            self._model.set_address_book_file_path(self.storage.address_book_file_path)
        return self._model

    def save(self) -> None:
        """Write the address book back to its data file."""
        self.storage.save_address_book(self.model.address_book)
        logger.debug("Saved address book to %s", self.storage.address_book_file_path)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): saves mutations, writes to stdout.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1. Nothing is saved.
        """
        if result.ok and result.op in _MUTATING_OPS:
            self.save()
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
