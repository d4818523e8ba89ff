"""Session-backed state machine for the donation flow."""

import structlog
from decimal import Decimal

from .forms import DonationAmountForm, DonationDetailsForm
from .models import Currency
from .services import create_payment_intent


logger = structlog.get_logger(__name__)

STEP_AMOUNT = 'amount'
STEP_DETAILS = 'details'
STEP_PAYMENT = 'payment'
STEP_SUCCESS = 'success'

STEPS = (STEP_AMOUNT, STEP_DETAILS, STEP_PAYMENT, STEP_SUCCESS)

# Steps shown in the progress header
PROGRESS_STEPS = (STEP_AMOUNT, STEP_DETAILS, STEP_PAYMENT)


class DonationWizard:
    """
    Donation flow for one student kept in the user's session.

    amount -> details -> payment -> success. Going back never discards
    what was entered, switching currency clears the chosen amount.
    """

    def __init__(self, session, student):
        self.session = session
        self.student = student
        self.session_key = f'donation_wizard:{student.id}'

    @property
    def state(self) -> dict:
        state = self.session.get(self.session_key)
        if state is None:
            state = {
                'step': STEP_AMOUNT,
                'currency': Currency.INR.value,
                'amount': None,
                'is_anonymous': False,
                'message': '',
                'client_secret': None,
                'payment_intent_id': None,
                'donation_id': None,
            }
        return state

    def _save(self, state):
        self.session[self.session_key] = state
        self.session.modified = True

    @property
    def step(self) -> str:
        return self.state['step']

    @property
    def currency(self) -> str:
        return self.state['currency']

    @property
    def amount(self):
        amount = self.state['amount']
        return Decimal(amount) if amount is not None else None

    def go_to(self, step):
        if step not in STEPS:
            raise ValueError(f"Unknown donation step '{step}'")
        state = self.state
        state['step'] = step
        self._save(state)

    def switch_currency(self, currency):
        """Change currency and drop the amount chosen in the old one."""
        if currency not in Currency.values:
            return
        state = self.state
        state['currency'] = currency
        state['amount'] = None
        state['step'] = STEP_AMOUNT
        self._save(state)

    def submit_amount(self, data) -> DonationAmountForm:
        form = DonationAmountForm(data)
        if form.is_valid():
            state = self.state
            state['currency'] = form.cleaned_data['currency']
            state['amount'] = str(form.cleaned_data['amount'])
            state['step'] = STEP_DETAILS
            self._save(state)
        return form

    def submit_details(self, data, *, donor=None, donor_email='') -> DonationDetailsForm:
        """
        Store details and create the payment intent.

        Raises the donation service errors unchanged so the caller can
        show them on the details step.
        """
        form = DonationDetailsForm(data)
        if not form.is_valid():
            return form

        state = self.state
        if state['amount'] is None:
            state['step'] = STEP_AMOUNT
            self._save(state)
            return form

        state['is_anonymous'] = form.cleaned_data['is_anonymous']
        state['message'] = form.cleaned_data['message']
        self._save(state)

        result = create_payment_intent(
            amount=Decimal(state['amount']),
            currency=state['currency'],
            student=self.student,
            donor=donor,
            donor_email=donor_email,
            is_anonymous=state['is_anonymous'],
            message=state['message'],
        )

        state['client_secret'] = result['client_secret']
        state['payment_intent_id'] = result['payment_intent_id']
        state['donation_id'] = str(result['donation_id'])
        state['step'] = STEP_PAYMENT
        self._save(state)

        logger.info(
            'donation_wizard_payment_ready',
            student_id=str(self.student.id),
            payment_intent_id=result['payment_intent_id'],
        )
        return form

    def complete(self) -> dict:
        """Finish the flow. Returns the final state and clears the session entry."""
        state = self.state
        state['step'] = STEP_SUCCESS
        self.session.pop(self.session_key, None)
        self.session.modified = True
        return state

    def reset(self):
        self.session.pop(self.session_key, None)
        self.session.modified = True
