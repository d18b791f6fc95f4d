"""In-memory record behind the mock persistence endpoint.

One ``FormDataRepository`` is created per application and stored on
``app.state.form_data``; every caller shares it. Nothing is persisted:
the record starts at defaults and is lost on restart.

Merge strategies for POSTed sub-records:
  nested   → fields inside the posted sub-record merge into the stored
             one; fields the body omits survive.
  shallow  → the posted sub-record replaces the stored one wholesale;
             omitted fields fall back to their defaults.
"""

import logging
from typing import Literal

from formwizard.schemas.wizard import (
    Address,
    FormData,
    FormDataUpdate,
    PersonalInfo,
    Preferences,
)
from formwizard.services.merge import (
    merge_address,
    merge_personal_info,
    merge_preferences,
)

logger = logging.getLogger(__name__)

MergeStrategy = Literal["nested", "shallow"]


class FormDataRepository:
    """Holds the single shared ``FormData`` record."""

    def __init__(self, merge_strategy: MergeStrategy = "nested"):
        if merge_strategy not in ("nested", "shallow"):
            raise ValueError(f"Unknown merge strategy: {merge_strategy}")
        self.merge_strategy = merge_strategy
        self._record = FormData()

    def get(self) -> FormData:
        return self._record

    def reset(self) -> FormData:
        """Restore the documented defaults."""
        self._record = FormData()
        logger.info("Form data reset to defaults")
        return self._record

    def apply(self, update: FormDataUpdate) -> FormData:
        """Apply a POST body: completion resets, anything else merges."""
        if update.is_completion:
            return self.reset()

        record = self._record
        nested = self.merge_strategy == "nested"
        changes = {}
        if update.personal_info is not None:
            base = record.personal_info if nested else PersonalInfo()
            changes["personal_info"] = merge_personal_info(base, update.personal_info)
        if update.address is not None:
            base = record.address if nested else Address()
            changes["address"] = merge_address(base, update.address)
        if update.preferences is not None:
            base = record.preferences if nested else Preferences()
            changes["preferences"] = merge_preferences(base, update.preferences)

        if changes:
            self._record = record.model_copy(update=changes)
            logger.debug("Merged %s into form data", ", ".join(changes))
        return self._record
