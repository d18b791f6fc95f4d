"""Step wizard controller: drives the four wizard steps without a UI.

Step flow:
  1 Personal Information → 2 Address Details → 3 Preferences
  → 4 Review & Submit

Each of steps 1-3 keeps its own local form values. ``submit`` validates
them against the step schema; a valid step is POSTed to the persistence
endpoint, dispatched into the store, and the wizard advances. Step 4 sends
the completion signal and resets the local forms and the store.

Invalid input never reaches the network: field errors come back in the
``StepResult`` and the step stays put. Network errors are reported through
the notifier and are not retried.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from pydantic import BaseModel, ValidationError

from formwizard.client.api import FormDataClient, FormSyncError
from formwizard.schemas.wizard import (
    Address,
    AddressForm,
    PersonalInfo,
    PersonalInfoForm,
    PreferencesForm,
)
from formwizard.store import FormStore

logger = logging.getLogger(__name__)

TOTAL_STEPS = 4
REVIEW_STEP = 4

STEP_TITLES = {
    1: "Personal Information",
    2: "Address Details",
    3: "Preferences",
    4: "Review & Submit",
}


@dataclass
class Notification:
    title: str
    description: str
    variant: str = "default"  # "default" or "destructive"


@dataclass
class StepResult:
    ok: bool
    step: int
    errors: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class _StepForm:
    key: str                    # top-level key in the POST body
    form: type[BaseModel]
    action: str                 # FormStore method name
    saved: str
    failed: str


STEP_FORMS: dict[int, _StepForm] = {
    1: _StepForm(
        "personalInfo", PersonalInfoForm, "update_personal_info",
        "Personal information saved.", "Failed to save personal information.",
    ),
    2: _StepForm(
        "address", AddressForm, "update_address",
        "Address saved.", "Failed to save address.",
    ),
    3: _StepForm(
        "preferences", PreferencesForm, "update_preferences",
        "Preferences saved.", "Failed to save preferences.",
    ),
}


def _log_notifier(notification: Notification) -> None:
    level = logging.WARNING if notification.variant == "destructive" else logging.INFO
    logger.log(level, "%s %s", notification.title, notification.description)


def _field_key(model: type[BaseModel], name: str) -> str:
    """Map a field name or alias to the alias used by the form inputs."""
    info = model.model_fields.get(name)
    if info is not None and info.alias:
        return info.alias
    return name


def _normalize(model: type[BaseModel], data: dict[str, Any] | None) -> dict[str, Any]:
    return {_field_key(model, k): v for k, v in (data or {}).items()}


class WizardController:
    def __init__(
        self,
        store: FormStore,
        client: FormDataClient,
        notifier: Callable[[Notification], None] | None = None,
    ):
        self.store = store
        self.client = client
        self.notifier = notifier or _log_notifier
        self.is_submitting = False
        self.forms: dict[str, dict[str, Any]] = {}
        self._reset_forms()

    # ── View helpers ─────────────────────────────────────────

    @property
    def step(self) -> int:
        return self.store.step

    @property
    def title(self) -> str:
        return STEP_TITLES.get(self.step, "")

    @property
    def progress(self) -> int:
        """Percent complete, as shown by the progress bar."""
        return self.step * 100 // TOTAL_STEPS

    def review(self) -> dict[str, dict[str, str]]:
        """Summary shown on the review step, built from the local forms."""
        personal = self.forms["personalInfo"]
        address = self.forms["address"]
        prefs = self.forms["preferences"]
        return {
            "Personal Information": {
                "Name": f"{personal['firstName']} {personal['lastName']}",
                "Email": personal["email"],
            },
            "Address": {
                "Street": address["street"],
                "City": address["city"],
                "State": address["state"],
                "ZIP Code": address["zipCode"],
            },
            "Preferences": {
                "Notifications": "Enabled" if prefs["notifications"] else "Disabled",
                "Newsletter": "Subscribed" if prefs["newsletter"] else "Not subscribed",
                "Theme": str(prefs["theme"]).capitalize(),
            },
        }

    def _notify(self, title: str, description: str, variant: str = "default") -> None:
        self.notifier(Notification(title, description, variant))

    def _reset_forms(self) -> None:
        self.forms = {
            "personalInfo": PersonalInfo().model_dump(by_alias=True),
            "address": Address().model_dump(by_alias=True),
            # preferences start from whatever the store already holds
            "preferences": self.store.state.preferences.model_dump(by_alias=True),
        }

    # ── Navigation ───────────────────────────────────────────

    def back(self) -> int:
        if self.step > 1 and not self.is_submitting:
            self.store.set_step(self.step - 1)
        return self.step

    async def submit(self, data: dict[str, Any] | None = None) -> StepResult:
        """The Next/Submit button: submit whatever the current step is."""
        if self.step == REVIEW_STEP:
            return await self.final_submit()
        return await self._submit_step(self.step, data)

    async def submit_personal_info(self, data: dict[str, Any] | None = None) -> StepResult:
        return await self._submit_step(1, data)

    async def submit_address(self, data: dict[str, Any] | None = None) -> StepResult:
        return await self._submit_step(2, data)

    async def submit_preferences(self, data: dict[str, Any] | None = None) -> StepResult:
        return await self._submit_step(3, data)

    async def _submit_step(self, step: int, data: dict[str, Any] | None) -> StepResult:
        entry = STEP_FORMS.get(step)
        if entry is None or step != self.step:
            # only the step on screen can be submitted
            return StepResult(ok=False, step=self.step)

        values = {**self.forms[entry.key], **_normalize(entry.form, data)}
        self.forms[entry.key] = values

        try:
            form = entry.form.model_validate(values)
        except ValidationError as exc:
            errors = {}
            for error in exc.errors():
                name = _field_key(entry.form, str(error["loc"][0]))
                errors.setdefault(name, error["msg"])
            return StepResult(ok=False, step=self.step, errors=errors)

        self.is_submitting = True
        try:
            await self.client.save({entry.key: form.model_dump(by_alias=True)})
        except FormSyncError as exc:
            logger.error("Saving %s failed: %s", entry.key, exc)
            self._notify("Error", entry.failed, variant="destructive")
            return StepResult(ok=False, step=self.step)
        finally:
            self.is_submitting = False

        getattr(self.store, entry.action)(form)
        self.store.set_step(step + 1)
        self._notify("Success!", entry.saved)
        return StepResult(ok=True, step=self.step)

    async def final_submit(self) -> StepResult:
        """Send the completion signal, then start over at step 1."""
        if self.step != REVIEW_STEP:
            return StepResult(ok=False, step=self.step)

        self.is_submitting = True
        try:
            await self.client.complete()
        except FormSyncError as exc:
            logger.error("Final submit failed: %s", exc)
            self._notify("Error", "Failed to submit form.", variant="destructive")
            return StepResult(ok=False, step=self.step)
        finally:
            self.is_submitting = False

        self._notify("Congratulations!", "Your form has been submitted successfully.")
        self.store.reset_form()
        self._reset_forms()
        return StepResult(ok=True, step=self.step)
