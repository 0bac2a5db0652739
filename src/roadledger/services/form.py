"""Create/edit form state for bilty records."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from ..errors import SaveError
from ..logging_config import get_logger
from ..models.bilty import DATE_FIELDS, FIELD_NAMES, NUMERIC_FIELDS, BiltyRecord
from .formatting import date_input_value, format_plain_number
from .record_store import RecordStore

logger = get_logger(__name__)

SERIAL_FIELD = "bilty_sl_no"


class FormMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


class FormController:
    """Holds the raw text of every editable field plus the create/edit mode."""

    def __init__(self) -> None:
        self.values: dict[str, str] = {name: "" for name in FIELD_NAMES}
        self.editing_id: Optional[int] = None
        self.editing_serial: str = ""
        self.serial_locked = False
        self.submitting = False
        self.error: Optional[str] = None

    @property
    def mode(self) -> FormMode:
        return FormMode.CREATE if self.editing_id is None else FormMode.EDIT

    @property
    def title(self) -> str:
        if self.mode is FormMode.EDIT:
            return f"Edit Record #{self.editing_serial}"
        return "New Dispatch Record"

    @property
    def submit_label(self) -> str:
        return "Update Record" if self.mode is FormMode.EDIT else "Save New Record"

    @property
    def can_cancel(self) -> bool:
        return self.mode is FormMode.EDIT

    def set_value(self, field: str, value: Optional[str]) -> None:
        if field not in self.values:
            raise KeyError(field)
        if field == SERIAL_FIELD and self.serial_locked:
            logger.debug("Ignoring edit to locked serial number")
            return
        self.values[field] = value or ""

    def begin_create(self) -> None:
        self.values = {name: "" for name in FIELD_NAMES}
        self.editing_id = None
        self.editing_serial = ""
        self.serial_locked = False
        self.error = None

    def begin_edit(self, record: BiltyRecord) -> None:
        if record.id is None:
            raise ValueError("Only saved records can be edited")
        values: dict[str, str] = {}
        for name in FIELD_NAMES:
            raw = getattr(record, name)
            if name in DATE_FIELDS:
                values[name] = date_input_value(raw)
            elif name in NUMERIC_FIELDS:
                values[name] = format_plain_number(raw)
            else:
                values[name] = raw or ""
        self.values = values
        self.editing_id = record.id
        self.editing_serial = record.bilty_sl_no or ""
        self.serial_locked = True
        self.error = None

    def draft(self) -> dict[str, str]:
        """Flat field-name to raw-string mapping sent to the backend."""

        return {name: self.values.get(name, "") for name in FIELD_NAMES}

    def submit(self, store: RecordStore) -> Optional[BiltyRecord]:
        """Create or update through the store.

        Returns the saved record, or None when the save failed (see ``error``)
        or another submission is still in flight.
        """

        if self.submitting:
            logger.debug("Submit ignored while a save is in flight")
            return None
        self.submitting = True
        self.error = None
        editing_id = self.editing_id
        try:
            if editing_id is None:
                saved = store.create(self.draft())
            else:
                saved = store.update(editing_id, self.draft())
        except SaveError as exc:
            logger.warning(f"Save failed: {exc.message}", extra={"record_id": editing_id})
            self.error = f"Error: {exc.message}"
            return None
        finally:
            self.submitting = False
        self.begin_create()
        return saved

    def cancel(self) -> bool:
        """Drop in-progress edits; returns False when not editing."""

        if self.mode is not FormMode.EDIT:
            return False
        self.begin_create()
        return True
