"""Pydantic schemas for the 4-step form wizard.

Three families of models live here:

- Records (``PersonalInfo``, ``Address``, ``Preferences``, ``FormData``,
  ``WizardState``) hold the current values, all fields defaulted.
- ``*Update`` variants make every field optional so partial updates
  (store dispatches, POST bodies) only touch what they name.
- ``*Form`` variants are the per-step validation schemas applied before a
  step may be submitted.
"""

from typing import Literal

from pydantic import Field, field_validator

from formwizard.schemas.common import CamelModel, RecordModel
from formwizard.schemas.validators import (
    validate_email,
    validate_min_length,
    validate_zip_code,
)

Theme = Literal["light", "dark", "system"]

COMPLETED_STATUS = "completed"


# ── Records ─────────────────────────────────────────────────

class PersonalInfo(RecordModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""


class Address(RecordModel):
    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""


class Preferences(RecordModel):
    notifications: bool = False
    newsletter: bool = False
    theme: Theme = "light"


class FormData(RecordModel):
    """The record held by the mock persistence endpoint."""
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    address: Address = Field(default_factory=Address)
    preferences: Preferences = Field(default_factory=Preferences)


class WizardState(FormData):
    """Client-side wizard record: current step plus the three sub-records."""
    step: int = 1


# ── Partial updates ─────────────────────────────────────────

class PersonalInfoUpdate(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None


class AddressUpdate(CamelModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None


class PreferencesUpdate(CamelModel):
    notifications: bool | None = None
    newsletter: bool | None = None
    theme: Theme | None = None


class FormDataUpdate(CamelModel):
    """POST body for ``/api/form-data``.

    Either a completion signal (``{"status": "completed"}``) or any subset
    of the three sub-records. Unknown top-level keys are ignored, and so is
    any other ``status`` value: the sub-records next to it still merge.
    """
    personal_info: PersonalInfoUpdate | None = None
    address: AddressUpdate | None = None
    preferences: PreferencesUpdate | None = None
    status: str | None = None

    @property
    def is_completion(self) -> bool:
        return self.status == COMPLETED_STATUS


# ── Step validation ─────────────────────────────────────────

class PersonalInfoForm(CamelModel):
    first_name: str
    last_name: str
    email: str

    @field_validator("first_name")
    @classmethod
    def _first_name(cls, v: str) -> str:
        return validate_min_length(v, 2, "First name must be at least 2 characters")

    @field_validator("last_name")
    @classmethod
    def _last_name(cls, v: str) -> str:
        return validate_min_length(v, 2, "Last name must be at least 2 characters")

    @field_validator("email")
    @classmethod
    def _email(cls, v: str) -> str:
        return validate_email(v)


class AddressForm(CamelModel):
    street: str
    city: str
    state: str
    zip_code: str

    @field_validator("street")
    @classmethod
    def _street(cls, v: str) -> str:
        return validate_min_length(v, 5, "Street address must be at least 5 characters")

    @field_validator("city")
    @classmethod
    def _city(cls, v: str) -> str:
        return validate_min_length(v, 2, "City must be at least 2 characters")

    @field_validator("state")
    @classmethod
    def _state(cls, v: str) -> str:
        return validate_min_length(v, 2, "Please select a state")

    @field_validator("zip_code")
    @classmethod
    def _zip_code(cls, v: str) -> str:
        return validate_zip_code(v)


class PreferencesForm(CamelModel):
    notifications: bool
    newsletter: bool
    theme: Theme
