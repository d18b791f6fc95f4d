"""Pure merge functions for partial sub-record updates.

``merge_<record>(current, partial) -> next`` overwrites only the fields
present in ``partial`` and never mutates ``current``. ``partial`` may be:

- the matching ``*Update`` model,
- a mapping with camelCase or snake_case keys,
- another record model (every field counts as present).

``None`` values count as absent.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from formwizard.schemas.wizard import (
    Address,
    AddressUpdate,
    PersonalInfo,
    PersonalInfoUpdate,
    Preferences,
    PreferencesUpdate,
)

R = TypeVar("R", bound=BaseModel)

Partial = BaseModel | Mapping[str, Any]


def _changes(update_model: type[BaseModel], partial: Partial) -> dict[str, Any]:
    if not isinstance(partial, update_model):
        if isinstance(partial, BaseModel):
            partial = partial.model_dump()
        partial = update_model.model_validate(partial)
    return partial.model_dump(exclude_unset=True, exclude_none=True)


def merge_record(current: R, update_model: type[BaseModel], partial: Partial) -> R:
    """Shallow-merge ``partial`` into ``current`` and return the new record."""
    changes = _changes(update_model, partial)
    if not changes:
        return current
    return current.model_copy(update=changes)


def merge_personal_info(current: PersonalInfo, partial: Partial) -> PersonalInfo:
    return merge_record(current, PersonalInfoUpdate, partial)


def merge_address(current: Address, partial: Partial) -> Address:
    return merge_record(current, AddressUpdate, partial)


def merge_preferences(current: Preferences, partial: Partial) -> Preferences:
    return merge_record(current, PreferencesUpdate, partial)
