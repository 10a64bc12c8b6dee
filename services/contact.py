"""Contact form state machine.

States: idle -> submitting -> success | error. Editing a field after a
finished attempt returns the form to idle. Validation is a literal
empty-string check on the required fields; nothing else is validated.
"""
import logging
from dataclasses import replace
from typing import Any, Dict, List, MutableMapping, Optional

from domain.constants import CONTACT_FIELDS, REQUIRED_FIELDS
from domain.models import Action, ActionType, ContactForm, FormStatus, SubmitResult
from services.submission import SimulatedEndpoint, SubmissionEndpoint

logger = logging.getLogger(__name__)

CONTACT_STATE_KEY = 'contact_form_state'


class UnknownFieldError(KeyError):
    pass


def missing_required(form: ContactForm) -> List[str]:
    values = form.fields()
    return [f for f in REQUIRED_FIELDS if values[f] == ""]


def reduce(form: ContactForm, action: Action) -> ContactForm:
    """Pure reducer for FIELD_CHANGE, SUBMIT and SUBMIT_RESULT."""
    if action.type is ActionType.FIELD_CHANGE:
        name = action.payload.get('name')
        if name not in CONTACT_FIELDS:
            raise UnknownFieldError(name)
        updated = replace(form, **{name: action.payload.get('value', '')})
        if updated.status in (FormStatus.ERROR, FormStatus.SUCCESS):
            updated = updated.with_status(FormStatus.IDLE)
        return updated

    if action.type is ActionType.SUBMIT:
        if form.status is FormStatus.SUBMITTING:
            return form
        if missing_required(form):
            return form.with_status(FormStatus.ERROR)
        return form.with_status(FormStatus.SUBMITTING)

    if action.type is ActionType.SUBMIT_RESULT:
        if form.status is not FormStatus.SUBMITTING:
            return form
        result: SubmitResult = action.payload['result']
        if result.ok:
            return ContactForm(status=FormStatus.SUCCESS)
        return form.with_status(FormStatus.ERROR)

    return form


class ContactController:
    """Holds a ContactForm in a session mapping and drives submissions."""

    def __init__(self, state: MutableMapping[str, Any], endpoint: Optional[SubmissionEndpoint] = None):
        self._state = state
        self.endpoint = endpoint or SimulatedEndpoint()
        if CONTACT_STATE_KEY not in self._state:
            self._state[CONTACT_STATE_KEY] = ContactForm()

    @property
    def form(self) -> ContactForm:
        return self._state[CONTACT_STATE_KEY]

    @property
    def fields(self) -> Dict[str, str]:
        return self.form.fields()

    @property
    def status(self) -> FormStatus:
        return self.form.status

    def dispatch(self, action: Action) -> ContactForm:
        self._state[CONTACT_STATE_KEY] = reduce(self.form, action)
        return self.form

    def dismiss(self) -> ContactForm:
        """Drop a finished success/error status; fields and in-flight submissions are untouched."""
        if self.status in (FormStatus.SUCCESS, FormStatus.ERROR):
            self._state[CONTACT_STATE_KEY] = self.form.with_status(FormStatus.IDLE)
        return self.form

    def on_field_change(self, name: str, value: str) -> ContactForm:
        return self.dispatch(Action(ActionType.FIELD_CHANGE, {'name': name, 'value': value}))

    async def on_submit(self) -> FormStatus:
        if self.status is FormStatus.SUBMITTING:
            logger.info("Submit ignored: a submission is already in flight")
            return self.status

        self.dispatch(Action(ActionType.SUBMIT))
        if self.status is not FormStatus.SUBMITTING:
            logger.debug("Contact form rejected, missing: %s", ", ".join(missing_required(self.form)))
            return self.status

        try:
            result = await self.endpoint.send(self.fields)
        except Exception:
            logger.exception("Contact submission failed")
            result = SubmitResult(ok=False, detail="endpoint error")
        except BaseException:
            # Cancellation, KeyboardInterrupt etc.: unlock the form, keep the fields.
            self._state[CONTACT_STATE_KEY] = self.form.with_status(FormStatus.IDLE)
            raise

        self.dispatch(Action(ActionType.SUBMIT_RESULT, {'result': result}))
        return self.status
