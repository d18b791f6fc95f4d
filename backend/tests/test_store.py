"""Form state store and merge function tests."""

import pytest
from pydantic import ValidationError

from formwizard.schemas.wizard import (
    Address,
    FormData,
    FormDataUpdate,
    PersonalInfo,
    Preferences,
    PreferencesUpdate,
    WizardState,
)
from formwizard.services.form_data import FormDataRepository
from formwizard.services.merge import merge_address, merge_personal_info, merge_preferences
from formwizard.store import FormStore


@pytest.mark.unit
class TestMerge:
    """Pure merge functions."""

    def test_merge_overwrites_only_given_fields(self):
        current = Address(street="1 Main Street", city="Austin", state="TX", zip_code="73301")
        merged = merge_address(current, {"city": "Dallas"})
        assert merged == Address(street="1 Main Street", city="Dallas", state="TX", zip_code="73301")

    def test_merge_does_not_mutate_current(self):
        current = PersonalInfo(first_name="Ann")
        merge_personal_info(current, {"firstName": "Bea"})
        assert current.first_name == "Ann"

    def test_merge_accepts_snake_and_camel_keys(self):
        current = PersonalInfo()
        assert merge_personal_info(current, {"first_name": "Ann"}).first_name == "Ann"
        assert merge_personal_info(current, {"firstName": "Ann"}).first_name == "Ann"

    def test_merge_accepts_update_model(self):
        merged = merge_preferences(Preferences(), PreferencesUpdate(theme="dark"))
        assert merged == Preferences(theme="dark")

    def test_merge_accepts_full_record(self):
        incoming = Preferences(notifications=True, newsletter=True, theme="system")
        assert merge_preferences(Preferences(), incoming) == incoming

    def test_none_counts_as_absent(self):
        current = PersonalInfo(email="a@b.com")
        assert merge_personal_info(current, {"email": None}) == current

    def test_empty_partial_returns_current(self):
        current = Address(city="Austin")
        assert merge_address(current, {}) is current


@pytest.mark.unit
class TestFormStore:
    """Store actions."""

    def test_initial_state(self, store: FormStore):
        assert store.state == WizardState()
        assert store.step == 1
        assert store.state.preferences.theme == "light"

    def test_set_step_unbounded(self, store: FormStore):
        store.set_step(3)
        assert store.step == 3
        store.set_step(9)
        assert store.step == 9

    def test_update_personal_info(self, store: FormStore):
        store.update_personal_info({"firstName": "Ann"})
        store.update_personal_info({"lastName": "Lee"})
        assert store.state.personal_info == PersonalInfo(first_name="Ann", last_name="Lee")

    def test_update_preferences_leaves_other_records(self, store: FormStore):
        store.update_address({"city": "Austin"})
        store.update_preferences({"newsletter": True})
        assert store.state.address.city == "Austin"
        assert store.state.preferences == Preferences(newsletter=True)

    def test_reset_form(self, store: FormStore):
        store.set_step(4)
        store.update_personal_info({"firstName": "Ann"})
        store.reset_form()
        assert store.state == WizardState()

    def test_snapshots_are_immutable(self, store: FormStore):
        before = store.state
        store.update_address({"street": "1 Main Street"})
        assert before.address.street == ""
        with pytest.raises(ValidationError):
            before.step = 2

    def test_subscribe_and_unsubscribe(self, store: FormStore):
        seen = []
        unsubscribe = store.subscribe(seen.append)
        store.set_step(2)
        unsubscribe()
        store.set_step(3)
        assert [s.step for s in seen] == [2]

    def test_failing_listener_does_not_block_update(self, store: FormStore):
        def boom(state):
            raise RuntimeError("listener failed")

        store.subscribe(boom)
        store.set_step(2)
        assert store.step == 2


@pytest.mark.unit
class TestFormDataRepository:

    def test_unknown_merge_strategy_rejected(self):
        with pytest.raises(ValueError):
            FormDataRepository(merge_strategy="deep")

    def test_completion_resets(self):
        repo = FormDataRepository()
        repo.apply(FormDataUpdate.model_validate({"preferences": {"theme": "dark"}}))
        assert repo.apply(FormDataUpdate(status="completed")) == FormData()
