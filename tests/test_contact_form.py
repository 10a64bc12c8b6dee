import asyncio

import pytest

from domain.models import Action, ActionType, ContactForm, FormStatus, SubmitResult
from services import contact
from services.contact import ContactController, UnknownFieldError, CONTACT_STATE_KEY
from services.submission import SimulatedEndpoint


class RecordingEndpoint:
    """Captures the controller status seen while the submission is in flight."""

    def __init__(self, controller_ref, result=None, exc=None):
        self.controller_ref = controller_ref
        self.result = result or SubmitResult(ok=True)
        self.exc = exc
        self.payloads = []
        self.status_during_send = None

    async def send(self, payload):
        self.payloads.append(dict(payload))
        self.status_during_send = self.controller_ref[0].status
        await asyncio.sleep(0)
        if self.exc:
            raise self.exc
        return self.result


def make_controller(result=None, exc=None):
    ref = []
    endpoint = RecordingEndpoint(ref, result=result, exc=exc)
    ctrl = ContactController({}, endpoint)
    ref.append(ctrl)
    return ctrl, endpoint


def fill(ctrl, **values):
    for name, value in values.items():
        ctrl.on_field_change(name, value)


def test_new_form_is_empty_and_idle():
    ctrl = ContactController({})
    assert ctrl.status is FormStatus.IDLE
    assert ctrl.fields == {'name': '', 'email': '', 'company': '', 'team_size': '', 'message': ''}


def test_valid_submission_goes_through_submitting_to_success_and_resets():
    ctrl, endpoint = make_controller()
    fill(ctrl, name="Jane", email="jane@x.com", company="", team_size="", message="Hi")

    status = asyncio.run(ctrl.on_submit())

    assert endpoint.status_during_send is FormStatus.SUBMITTING
    assert status is FormStatus.SUCCESS
    assert ctrl.fields['name'] == ""
    assert all(v == "" for v in ctrl.fields.values())
    assert endpoint.payloads == [{'name': 'Jane', 'email': 'jane@x.com', 'company': '',
                                  'team_size': '', 'message': 'Hi'}]


@pytest.mark.parametrize("missing", ["name", "email", "message"])
def test_missing_required_field_sets_error_and_keeps_fields(missing):
    ctrl, endpoint = make_controller()
    values = {'name': "Jane", 'email': "jane@x.com", 'company': "Acme", 'team_size': "8", 'message': "Hi"}
    values[missing] = ""
    fill(ctrl, **values)

    status = asyncio.run(ctrl.on_submit())

    assert status is FormStatus.ERROR
    assert ctrl.fields == values
    assert endpoint.payloads == []


def test_error_example_is_immediate():
    ctrl, _ = make_controller()
    fill(ctrl, name="", email="a@b.com", message="hi")
    form = contact.reduce(ctrl.form, Action(ActionType.SUBMIT))
    assert form.status is FormStatus.ERROR
    assert form.fields() == ctrl.fields


def test_whitespace_is_not_treated_as_empty():
    ctrl, _ = make_controller()
    fill(ctrl, name=" ", email="a@b.com", message="hi")
    assert asyncio.run(ctrl.on_submit()) is FormStatus.SUCCESS


def test_field_change_is_idempotent():
    once = ContactController({})
    once.on_field_change("name", "A")
    twice = ContactController({})
    twice.on_field_change("name", "A")
    twice.on_field_change("name", "A")
    assert once.form == twice.form


def test_field_change_last_write_wins():
    ctrl = ContactController({})
    ctrl.on_field_change("company", "Acme")
    ctrl.on_field_change("company", "Globex")
    assert ctrl.fields['company'] == "Globex"


def test_edit_after_error_returns_to_idle():
    ctrl, _ = make_controller()
    asyncio.run(ctrl.on_submit())
    assert ctrl.status is FormStatus.ERROR
    ctrl.on_field_change("name", "Jane")
    assert ctrl.status is FormStatus.IDLE


def test_unknown_field_raises():
    ctrl = ContactController({})
    with pytest.raises(UnknownFieldError):
        ctrl.on_field_change("phone", "123")


def test_failed_result_sets_error_and_keeps_fields():
    ctrl, _ = make_controller(result=SubmitResult(ok=False, detail="rejected"))
    fill(ctrl, name="Jane", email="jane@x.com", message="Hi")
    assert asyncio.run(ctrl.on_submit()) is FormStatus.ERROR
    assert ctrl.fields['name'] == "Jane"


def test_endpoint_exception_sets_error():
    ctrl, _ = make_controller(exc=RuntimeError("boom"))
    fill(ctrl, name="Jane", email="jane@x.com", message="Hi")
    assert asyncio.run(ctrl.on_submit()) is FormStatus.ERROR
    assert ctrl.fields['message'] == "Hi"


def test_submit_while_submitting_is_ignored():
    ctrl, endpoint = make_controller()
    fill(ctrl, name="Jane", email="jane@x.com", message="Hi")
    ctrl._state[CONTACT_STATE_KEY] = ctrl.form.with_status(FormStatus.SUBMITTING)

    assert asyncio.run(ctrl.on_submit()) is FormStatus.SUBMITTING
    assert endpoint.payloads == []
    assert contact.reduce(ctrl.form, Action(ActionType.SUBMIT)).status is FormStatus.SUBMITTING


def test_cancelled_submission_returns_to_idle():
    state = {}
    ctrl = ContactController(state, SimulatedEndpoint(delay_seconds=10))
    fill(ctrl, name="Jane", email="jane@x.com", message="Hi")

    async def run():
        task = asyncio.create_task(ctrl.on_submit())
        await asyncio.sleep(0)
        assert ctrl.status is FormStatus.SUBMITTING
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(run())
    assert ctrl.status is FormStatus.IDLE
    assert ctrl.fields['name'] == "Jane"


def test_stale_submit_result_is_ignored():
    form = ContactForm(name="Jane")
    out = contact.reduce(form, Action(ActionType.SUBMIT_RESULT, {'result': SubmitResult(ok=True)}))
    assert out == form


def test_controller_state_survives_new_controller_instance():
    state = {}
    ContactController(state).on_field_change("email", "x@y.z")
    assert ContactController(state).fields['email'] == "x@y.z"


class Abort(BaseException):
    pass


def test_base_exception_during_send_unlocks_form():
    ctrl, _ = make_controller(exc=Abort())
    fill(ctrl, name="Jane", email="jane@x.com", message="Hi")
    with pytest.raises(Abort):
        asyncio.run(ctrl.on_submit())
    assert ctrl.status is FormStatus.IDLE
    assert ctrl.fields['name'] == "Jane"


def test_dismiss_clears_only_finished_status():
    ctrl = ContactController({})
    ctrl.on_field_change("name", "Jane")
    ctrl._state[CONTACT_STATE_KEY] = ctrl.form.with_status(FormStatus.ERROR)
    assert ctrl.dismiss().status is FormStatus.IDLE
    assert ctrl.fields['name'] == "Jane"
    ctrl._state[CONTACT_STATE_KEY] = ctrl.form.with_status(FormStatus.SUBMITTING)
    assert ctrl.dismiss().status is FormStatus.SUBMITTING
