"""Form State Store: the client-side wizard record.

A ``FormStore`` owns one ``WizardState`` snapshot and replaces it on every
action. Instances are created by whoever hosts the wizard and passed by
reference to the controller and the background sync; there is no
module-level store.

Actions:
  set_step(n)                 → replace step (no bounds check)
  update_personal_info(p)     → shallow-merge into personal_info
  update_address(p)           → shallow-merge into address
  update_preferences(p)       → shallow-merge into preferences
  reset_form()                → restore defaults (step 1)
"""

import logging
from typing import Callable

from formwizard.schemas.wizard import WizardState
from formwizard.services.merge import (
    Partial,
    merge_address,
    merge_personal_info,
    merge_preferences,
)

logger = logging.getLogger(__name__)

Listener = Callable[[WizardState], None]


class FormStore:
    def __init__(self, initial: WizardState | None = None):
        self._state = initial or WizardState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> WizardState:
        return self._state

    @property
    def step(self) -> int:
        return self._state.step

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; the returned callable unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, state: WizardState) -> WizardState:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Form store listener failed")
        return state

    # ── Actions ──────────────────────────────────────────────

    def set_step(self, step: int) -> WizardState:
        # Callers keep step within 1..4
        return self._commit(self._state.model_copy(update={"step": step}))

    def update_personal_info(self, partial: Partial) -> WizardState:
        merged = merge_personal_info(self._state.personal_info, partial)
        return self._commit(self._state.model_copy(update={"personal_info": merged}))

    def update_address(self, partial: Partial) -> WizardState:
        merged = merge_address(self._state.address, partial)
        return self._commit(self._state.model_copy(update={"address": merged}))

    def update_preferences(self, partial: Partial) -> WizardState:
        merged = merge_preferences(self._state.preferences, partial)
        return self._commit(self._state.model_copy(update={"preferences": merged}))

    def reset_form(self) -> WizardState:
        return self._commit(WizardState())
