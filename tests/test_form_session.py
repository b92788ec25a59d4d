from __future__ import annotations

import pytest

pytest.importorskip("fletx")

from biodata.mobile.controllers.form_controller import (  # noqa: E402
    STATUS_REJECTED,
    STATUS_SUBMITTED,
    FormScreenController,
)
from biodata.mobile.state import FormSessionState, Store  # noqa: E402
from biodata.shared.core import events  # noqa: E402
from biodata.shared.core.event_bus import EventBus  # noqa: E402
from biodata.shared.core.configuration import FormConfig, SystemConfig  # noqa: E402
from biodata.shared.domain.form import (  # noqa: E402
    MSG_EMAIL_INVALID,
    MSG_LAST_NAME_REQUIRED,
    FormField,
    FormState,
)


@pytest.fixture
def store(event_bus):
    Store.reset()
    instance = Store.initialize(event_bus)
    yield instance
    Store.reset()


@pytest.fixture
def session(store) -> FormSessionState:
    return store.form


def _fill(session: FormSessionState, first="Ana", last="Silva", email="a@b.com"):
    session.edit(FormField.FIRST_NAME, first)
    session.edit(FormField.LAST_NAME, last)
    session.edit(FormField.EMAIL, email)


def test_store_lifecycle(event_bus):
    Store.reset()
    with pytest.raises(RuntimeError):
        Store.get()

    created = Store.initialize(event_bus)
    try:
        assert Store.get() is created
        with pytest.raises(RuntimeError):
            Store.initialize(event_bus)
    finally:
        Store.reset()


def test_store_keeps_one_session_per_id(event_bus):
    Store.reset()
    try:
        first = Store.initialize(event_bus, session_id="tab-1")
        second = Store.initialize(EventBus(), session_id="tab-2")

        assert first is not second
        assert first.form is not second.form
        assert Store.get("tab-1") is first
        assert Store.active_sessions() == ["tab-1", "tab-2"]

        first.form.edit(FormField.FIRST_NAME, "Ana")
        assert second.form.current == FormState()

        Store.reset("tab-1")
        assert Store.active_sessions() == ["tab-2"]
        with pytest.raises(RuntimeError):
            Store.get("tab-1")
        assert Store.get("tab-2") is second
    finally:
        Store.reset()


def test_session_starts_empty(session):
    assert session.current == FormState()
    assert session.snapshot.value == FormState().model_dump()


def test_edit_and_submit_update_snapshot(session):
    _fill(session, first=" Ana ")

    state = session.submit()

    assert state.full_name == "Ana Silva"
    assert session.current is state
    assert session.snapshot.value["full_name"] == "Ana Silva"


def test_listener_sees_complete_state(session):
    seen = []
    session.subscribe(lambda: seen.append(session.current))

    session.submit()

    assert seen
    last = seen[-1]
    assert last.error_first_name is not None
    assert last.error_last_name == MSG_LAST_NAME_REQUIRED
    assert last.error_email == MSG_EMAIL_INVALID


def test_reset_returns_to_empty(session):
    _fill(session)
    session.submit()

    session.reset()

    assert session.current == FormState()


def _with_stale_email_error(session: FormSessionState) -> FormSessionState:
    session.submit()
    session.edit(FormField.FIRST_NAME, "Ana")
    session.edit(FormField.LAST_NAME, "Silva")
    # Email error survives because the field is never edited through the session
    session._replace(session.current.model_copy(update={"email": "a@b.com"}))
    return session


def test_session_keeps_stale_errors_by_default(event_bus):
    session = _with_stale_email_error(FormSessionState(event_bus))

    state = session.submit()

    assert state.full_name == "Ana Silva"
    assert state.error_email == MSG_EMAIL_INVALID


def test_session_can_clear_stale_errors(event_bus):
    session = _with_stale_email_error(
        FormSessionState(event_bus, FormConfig(clear_errors_on_success=True))
    )

    state = session.submit()

    assert state.full_name == "Ana Silva"
    assert not state.has_errors


def test_store_passes_form_config(event_bus):
    Store.reset()
    try:
        config = SystemConfig(form=FormConfig(clear_errors_on_success=True))
        store = Store.initialize(event_bus, config)
        assert store.form.form_config.clear_errors_on_success is True
    finally:
        Store.reset()


@pytest.mark.asyncio
async def test_controller_submit_success_publishes(session, event_bus):
    await session.initialize()
    submitted = []

    async def on_submitted(payload):
        submitted.append(payload)

    await event_bus.subscribe(events.TOPIC_FORM_SUBMITTED, on_submitted)
    controller = FormScreenController(session)
    controller.on_field_change("first_name", "Ana")
    controller.on_field_change(FormField.LAST_NAME, "Silva")
    controller.on_field_change(FormField.EMAIL, "@")

    state = await controller.on_submit()
    await event_bus.wait_until_idle()

    assert state.full_name == "Ana Silva"
    assert submitted == [{"full_name": "Ana Silva", "email": "@"}]
    assert session.status_text.value == STATUS_SUBMITTED
    assert session.logs.value[-1]["level"] == "success"


@pytest.mark.asyncio
async def test_controller_submit_failure_publishes(session, event_bus):
    await session.initialize()
    failures = []

    async def on_failed(payload):
        failures.append(payload)

    await event_bus.subscribe(events.TOPIC_FORM_VALIDATION_FAILED, on_failed)
    controller = FormScreenController(session)
    controller.on_field_change(FormField.FIRST_NAME, "Ana")

    state = await controller.on_submit()
    await event_bus.wait_until_idle()

    assert state.full_name == ""
    assert failures[0]["failed_fields"] == ["last_name", "email"]
    assert session.status_text.value == STATUS_REJECTED
    assert session.logs.value[-1]["level"] == "warning"


@pytest.mark.asyncio
async def test_controller_reset(session, event_bus):
    resets = []

    async def on_reset(payload):
        resets.append(payload)

    await event_bus.subscribe(events.TOPIC_FORM_RESET, on_reset)
    controller = FormScreenController(session)
    controller.on_field_change(FormField.EMAIL, "x@y")

    state = await controller.on_reset()
    await event_bus.wait_until_idle()

    assert state == FormState()
    assert len(resets) == 1


def test_build_view_needs_page(session):
    with pytest.raises(RuntimeError):
        FormScreenController(session).build_view()


@pytest.mark.asyncio
async def test_push_log_records_and_publishes_log_event(session, event_bus):
    published = []

    async def on_log(payload):
        published.append(payload)

    await event_bus.subscribe(events.TOPIC_LOGS_EVENT, on_log)

    await session.push_log("Biodata tersimpan", "success")
    await event_bus.wait_until_idle()

    entry = session.logs.value[-1]
    assert set(entry) == {"message", "level", "topic", "ts"}
    assert entry["message"] == "Biodata tersimpan"
    assert entry["level"] == "success"
    assert published == [entry]
