"""
CustomerDesk Client — Customer List Page Controller
=====================================================

What:  The state machine behind the customer list page: the loaded list,
       the add/edit dialog with its in-progress field values, the delete
       confirmation dialog, and the transient notice.
How:   Plain methods for user actions; async methods where an action calls
       the API. Rendering is left to whatever UI drives the controller.

State Machine:
    idle ──mount──▶ loading ──▶ idle (list loaded) | error (fetch failed)
    idle|error ──open_add_form──▶ form_open(add)
    idle ──open_edit_form(record)──▶ form_open(edit)
    form_open ──submit──▶ idle (saved, list re-fetched) | form_open (invalid or failed)
    form_open ──close_form──▶ idle
    idle ──open_delete_dialog(id, name)──▶ delete_confirm
    delete_confirm ──confirm_delete | close_delete_dialog──▶ idle

Notices:
    Every outcome worth telling the user sets a Notice. It expires on its
    own after `notice_duration` seconds and never blocks another action.
"""

import logging
import re
import time
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from app.client.api_client import CustomerApiClient
from app.config import settings
from app.exceptions import ApiRequestError, InvalidTransitionError

logger = logging.getLogger(__name__)

WHOLE_NUMBER = re.compile(r"-?[0-9]+")


class PageState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    FORM_OPEN = "form_open"
    DELETE_CONFIRM = "delete_confirm"
    ERROR = "error"


class Severity(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class Notice:
    """A self-dismissing message (the UI's snackbar)."""
    message: str
    severity: Severity
    expires_at: float

    def is_active(self, now: float) -> bool:
        return now < self.expires_at


@dataclass
class FormData:
    """
    In-progress dialog values, held as text exactly as typed.

    `date_of_birth` is `YYYY-MM-DD`; `member_num` is parsed on submit.
    """
    name: str = ""
    date_of_birth: str = ""
    member_num: str = ""
    interests: str = ""

    FIELDS = ("name", "date_of_birth", "member_num", "interests")

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "FormData":
        dob = record.get("dateOfBirth") or ""
        if isinstance(dob, date):
            dob = dob.isoformat()
        # Stored dates may come back with a time part
        dob = str(dob).split("T")[0]
        return cls(
            name=record.get("name", ""),
            date_of_birth=dob,
            member_num=str(record.get("memberNum", "")),
            interests=record.get("interests", ""),
        )

    def is_complete(self) -> bool:
        return all(str(getattr(self, name)).strip() for name in self.FIELDS)

    def to_payload(self) -> Dict[str, Any]:
        """
        The JSON body for create/update.

        Raises:
            ValueError: member number is not a whole number
        """
        member_num = self.member_num.strip()
        if not WHOLE_NUMBER.fullmatch(member_num):
            raise ValueError(f"not a whole number: {member_num!r}")
        return {
            "name": self.name.strip(),
            "dateOfBirth": self.date_of_birth.strip(),
            "memberNum": int(member_num),
            "interests": self.interests.strip(),
        }


@dataclass
class DeleteDialog:
    customer_id: str
    name: str


@dataclass
class CustomerPage:
    """
    Controller for the customer list page.

    Args:
        api:             Client used for every network call
        notice_duration: Seconds a notice stays visible
        clock:           Monotonic time source (injectable for tests)
    """
    api: CustomerApiClient
    notice_duration: float = field(default_factory=lambda: settings.notice_duration_seconds)
    clock: Callable[[], float] = time.monotonic

    customers: List[Dict[str, Any]] = field(default_factory=list)
    state: PageState = PageState.IDLE
    form: FormData = field(default_factory=FormData)
    editing: Optional[Dict[str, Any]] = None
    delete_dialog: Optional[DeleteDialog] = None
    _notice: Optional[Notice] = field(default=None, repr=False)

    # ── Notices ───────────────────────────────────────────────────────────

    @property
    def notice(self) -> Optional[Notice]:
        """The current notice, or None once it has expired or been dismissed."""
        if self._notice is not None and not self._notice.is_active(self.clock()):
            self._notice = None
        return self._notice

    def show_notice(self, message: str, severity: Severity = Severity.SUCCESS) -> None:
        self._notice = Notice(message, severity, self.clock() + self.notice_duration)

    def dismiss_notice(self) -> None:
        self._notice = None

    # ── Loading ───────────────────────────────────────────────────────────

    async def mount(self) -> None:
        """Initial load: idle → loading → idle | error."""
        self._require("load customers", PageState.IDLE, PageState.ERROR)
        self.state = PageState.LOADING
        loaded = await self._fetch_customers()
        self.state = PageState.IDLE if loaded else PageState.ERROR

    async def _fetch_customers(self) -> bool:
        try:
            self.customers = await self.api.list_customers()
            return True
        except ApiRequestError as e:
            logger.error("Error fetching customers: %s", e.message)
            self.show_notice("Failed to fetch customers", Severity.ERROR)
            return False

    # ── Add / Edit dialog ─────────────────────────────────────────────────

    @property
    def is_editing(self) -> bool:
        return self.editing is not None

    def open_add_form(self) -> None:
        self._require("open the add form", PageState.IDLE, PageState.ERROR)
        self._reset_form()
        self.state = PageState.FORM_OPEN

    def open_edit_form(self, record: Dict[str, Any]) -> None:
        self._require("open the edit form", PageState.IDLE)
        self.form = FormData.from_record(record)
        self.editing = record
        self.state = PageState.FORM_OPEN

    def set_field(self, name: str, value: str) -> None:
        self._require("edit the form", PageState.FORM_OPEN)
        if name not in FormData.FIELDS:
            raise KeyError(name)
        setattr(self.form, name, value)

    def close_form(self) -> None:
        self._require("close the form", PageState.FORM_OPEN)
        self._reset_form()
        self.state = PageState.IDLE

    async def submit(self) -> bool:
        """
        Validate locally, then create or update.

        Returns True when the record was saved. Invalid input never reaches
        the network and leaves the dialog open.
        """
        self._require("submit the form", PageState.FORM_OPEN)

        if not self.form.is_complete():
            self.show_notice("Please fill in all fields", Severity.ERROR)
            return False
        try:
            payload = self.form.to_payload()
        except ValueError:
            self.show_notice("Member number must be a whole number", Severity.ERROR)
            return False

        editing = self.is_editing
        try:
            if editing:
                await self.api.update_customer(self.editing["id"], payload)
            else:
                await self.api.create_customer(payload)
        except ApiRequestError as e:
            logger.error("Error saving customer: %s (%s)", e.message, e.details)
            self.show_notice("Failed to save customer", Severity.ERROR)
            return False

        await self._fetch_customers()
        self._reset_form()
        self.state = PageState.IDLE
        self.show_notice(
            "Customer updated successfully" if editing else "Customer added successfully"
        )
        return True

    def _reset_form(self) -> None:
        self.form = FormData()
        self.editing = None

    # ── Delete confirmation ───────────────────────────────────────────────

    def open_delete_dialog(self, customer_id: str, name: str) -> None:
        self._require("open the delete dialog", PageState.IDLE)
        self.delete_dialog = DeleteDialog(customer_id, name)
        self.state = PageState.DELETE_CONFIRM

    def close_delete_dialog(self) -> None:
        self._require("cancel the delete", PageState.DELETE_CONFIRM)
        self.delete_dialog = None
        self.state = PageState.IDLE

    async def confirm_delete(self) -> bool:
        """
        Delete the bound record. On success it is dropped from the local list
        without a re-fetch; on failure the list is untouched.
        """
        self._require("confirm the delete", PageState.DELETE_CONFIRM)
        customer_id = self.delete_dialog.customer_id

        try:
            await self.api.delete_customer(customer_id)
            self.customers = [c for c in self.customers if c.get("id") != customer_id]
            self.show_notice("Customer deleted successfully")
            deleted = True
        except ApiRequestError as e:
            logger.error("Error deleting customer %s: %s", customer_id, e.message)
            self.show_notice("Failed to delete customer", Severity.ERROR)
            deleted = False

        self.delete_dialog = None
        self.state = PageState.IDLE
        return deleted

    # ── Helpers ───────────────────────────────────────────────────────────

    def _require(self, action: str, *allowed: PageState) -> None:
        if self.state not in allowed:
            raise InvalidTransitionError(action, self.state.value)
