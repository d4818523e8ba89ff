"""
Service layer unit tests for donations app.

Tests cover:
- Currency conversion and fee split
- Completing, failing and recording donations
- Payment intent creation against a mocked Stripe
- Webhook verification and event handling
"""

import json
import pytest
import stripe
from decimal import Decimal
from unittest.mock import patch
from uuid import uuid4

from apps.donations.models import Donation, DonationStatus, DonationType, StripeEvent
from apps.donations.services import (
    is_supported_currency,
    to_minor_units,
    from_minor_units,
    calculate_platform_fee,
    create_donation,
    complete_donation,
    fail_donation,
    get_donor_donations,
    get_student_donations,
    record_offline_donation,
    create_payment_intent,
    verify_webhook,
    handle_webhook_event,
)
from apps.donations.services.exceptions import (
    DonationNotFoundError,
    InvalidDonationError,
    PaymentProviderError,
    WebhookVerificationError,
)
from apps.students.models import NeedStatus, Student

from .conftest import PAYMENT_INTENT_CREATE, sign_payload


# =============================================================================
# Currency Tests
# =============================================================================

class TestCurrency:

    def test_supported_currency_is_case_insensitive(self):
        assert is_supported_currency('inr')
        assert is_supported_currency('USD')
        assert not is_supported_currency('EUR')
        assert not is_supported_currency(None)

    def test_minor_units_round_half_up(self):
        assert to_minor_units(Decimal('2500')) == 250000
        assert to_minor_units(Decimal('12.345')) == 1235
        assert to_minor_units(25) == 2500

    def test_from_minor_units(self):
        assert from_minor_units(250000) == Decimal('2500.00')
        assert from_minor_units(1) == Decimal('0.01')

    def test_platform_fee(self, settings):
        settings.PLATFORM_FEE_PERCENT = Decimal('2.5')

        fee, net = calculate_platform_fee(Decimal('1000'))

        assert fee == Decimal('25.00')
        assert net == Decimal('975.00')

    def test_no_platform_fee_by_default(self, settings):
        settings.PLATFORM_FEE_PERCENT = Decimal('0')

        assert calculate_platform_fee(Decimal('500')) == (Decimal('0.00'), Decimal('500.00'))


# =============================================================================
# Donation Record Tests
# =============================================================================

@pytest.mark.django_db
class TestCreateDonation:

    def test_anonymous_donor_name_hidden(self, student, donor):
        donation = create_donation(
            student=student,
            amount=Decimal('500'),
            currency='inr',
            donor=donor,
            is_anonymous=True,
        )

        assert donation.donor_name == 'Anonymous Donor'
        assert donation.donor_email == donor.email
        assert donation.currency == 'INR'
        assert donation.status == DonationStatus.PENDING

    def test_zero_amount_rejected(self, student):
        with pytest.raises(InvalidDonationError):
            create_donation(student=student, amount=Decimal('0'), currency='INR')

    def test_unsupported_currency_rejected(self, student):
        with pytest.raises(InvalidDonationError):
            create_donation(student=student, amount=Decimal('10'), currency='EUR')

    def test_need_of_another_student_rejected(self, need, pending_student):
        with pytest.raises(InvalidDonationError):
            create_donation(student=pending_student, amount=Decimal('10'), currency='INR', need=need)


@pytest.mark.django_db
class TestCompleteDonation:

    def test_credits_student_and_donor(self, pending_donation, student, donor):
        complete_donation(donation_id=pending_donation.id, stripe_charge_id='ch_1', payment_method='card')

        pending_donation.refresh_from_db()
        student.refresh_from_db()
        donor.refresh_from_db()

        assert pending_donation.status == DonationStatus.COMPLETED
        assert pending_donation.completed_at is not None
        assert pending_donation.stripe_charge_id == 'ch_1'
        assert student.total_raised == Decimal('2500.00')
        assert student.is_fully_funded is False
        assert donor.total_donated == Decimal('2500.00')
        assert donor.donation_count == 1
        assert list(donor.students_supported.all()) == [student]

    def test_completing_twice_counts_once(self, pending_donation, student, donor):
        complete_donation(donation_id=pending_donation.id)
        complete_donation(donation_id=pending_donation.id)

        student.refresh_from_db()
        donor.refresh_from_db()
        assert student.total_raised == Decimal('2500.00')
        assert donor.donation_count == 1

    def test_reaching_goal_marks_fully_funded(self, student):
        donation = create_donation(student=student, amount=Decimal('10000'), currency='INR')

        complete_donation(donation_id=donation.id)

        student.refresh_from_db()
        assert student.is_fully_funded is True

    def test_need_fulfilled_when_met(self, student, need):
        donation = create_donation(student=student, amount=Decimal('2000'), currency='INR', need=need)

        complete_donation(donation_id=donation.id)

        need.refresh_from_db()
        assert need.amount_raised == Decimal('2000.00')
        assert need.status == NeedStatus.FULFILLED

    def test_partial_need_stays_active(self, student, need):
        donation = create_donation(student=student, amount=Decimal('500'), currency='INR', need=need)

        complete_donation(donation_id=donation.id)

        need.refresh_from_db()
        assert need.status == NeedStatus.ACTIVE

    def test_refunded_cannot_complete(self, pending_donation):
        pending_donation.status = DonationStatus.REFUNDED
        pending_donation.save()

        with pytest.raises(InvalidDonationError):
            complete_donation(donation_id=pending_donation.id)

    def test_missing_donation(self):
        with pytest.raises(DonationNotFoundError):
            complete_donation(donation_id=uuid4())

    def test_failure_midway_rolls_back_everything(self, student, donor, need):
        donation = create_donation(
            student=student, amount=Decimal('2000'), currency='INR', donor=donor, need=need,
        )

        with patch.object(Student, 'refresh_funding_status', side_effect=RuntimeError('boom')):
            with pytest.raises(RuntimeError):
                complete_donation(donation_id=donation.id)

        donation.refresh_from_db()
        student.refresh_from_db()
        need.refresh_from_db()
        donor.refresh_from_db()
        assert donation.status == DonationStatus.PENDING
        assert donation.completed_at is None
        assert student.total_raised == Decimal('0.00')
        assert need.amount_raised == Decimal('0.00')
        assert donor.total_donated == Decimal('0.00')
        assert donor.donation_count == 0
        assert not donor.students_supported.exists()


@pytest.mark.django_db
class TestFailDonation:

    def test_pending_becomes_failed(self, pending_donation):
        donation = fail_donation(donation_id=pending_donation.id, reason='card_declined')

        assert donation.status == DonationStatus.FAILED

    def test_completed_donation_untouched(self, pending_donation):
        complete_donation(donation_id=pending_donation.id)

        donation = fail_donation(donation_id=pending_donation.id)

        assert donation.status == DonationStatus.COMPLETED


@pytest.mark.django_db
class TestDonationQueries:

    def test_only_completed_donations_listed(self, pending_donation, student, donor):
        completed = create_donation(student=student, amount=Decimal('100'), currency='INR', donor=donor)
        complete_donation(donation_id=completed.id)

        assert list(get_donor_donations(donor.id)) == [completed]
        assert list(get_student_donations(student.id)) == [completed]


@pytest.mark.django_db
class TestOfflineDonation:

    def test_recorded_and_completed(self, student, platform_admin):
        donation = record_offline_donation(
            student=student,
            amount=Decimal('1500'),
            currency='INR',
            offline_method='cash',
            recorded_by=platform_admin,
            offline_reference='Receipt #42',
            donor_name='Village Committee',
        )

        student.refresh_from_db()
        assert donation.type == DonationType.OFFLINE
        assert donation.status == DonationStatus.COMPLETED
        assert donation.recorded_by == platform_admin
        assert donation.donor_name == 'Village Committee'
        assert student.total_raised == Decimal('1500.00')

    def test_unknown_method(self, student, platform_admin):
        with pytest.raises(InvalidDonationError):
            record_offline_donation(
                student=student,
                amount=Decimal('10'),
                currency='INR',
                offline_method='barter',
                recorded_by=platform_admin,
            )


# =============================================================================
# Payment Intent Tests
# =============================================================================

@pytest.mark.django_db
class TestCreatePaymentIntent:

    def test_sends_minor_units_and_metadata(self, mock_intent_create, student, donor, need):
        result = create_payment_intent(
            amount=Decimal('2500'),
            currency='INR',
            student=student,
            donor=donor,
            message='Study hard',
            need=need,
        )

        kwargs = mock_intent_create.call_args.kwargs
        assert kwargs['amount'] == 250000
        assert kwargs['currency'] == 'inr'
        assert kwargs['automatic_payment_methods'] == {'enabled': True}
        assert kwargs['metadata'] == {
            'studentId': str(student.id),
            'studentName': 'Priya Sharma',
            'donorId': str(donor.id),
            'donorEmail': donor.email,
            'isAnonymous': 'false',
            'message': 'Study hard',
            'needId': str(need.id),
        }

        assert result['client_secret'] == 'pi_test_123_secret_abc'
        assert result['payment_intent_id'] == 'pi_test_123'
        donation = Donation.objects.get(id=result['donation_id'])
        assert donation.status == DonationStatus.PENDING
        assert donation.stripe_payment_intent_id == 'pi_test_123'
        assert donation.need == need

    def test_guest_metadata(self, mock_intent_create, student):
        create_payment_intent(
            amount=Decimal('25'),
            currency='USD',
            student=student,
            donor_email='guest@example.com',
            is_anonymous=True,
        )

        metadata = mock_intent_create.call_args.kwargs['metadata']
        assert metadata['donorId'] == 'anonymous'
        assert metadata['donorEmail'] == 'guest@example.com'
        assert metadata['isAnonymous'] == 'true'
        assert 'needId' not in metadata

    def test_unapproved_student_rejected(self, mock_intent_create, pending_student):
        with pytest.raises(InvalidDonationError):
            create_payment_intent(amount=Decimal('100'), currency='INR', student=pending_student)

        mock_intent_create.assert_not_called()

    def test_invalid_amount_not_sent(self, mock_intent_create, student):
        with pytest.raises(InvalidDonationError):
            create_payment_intent(amount=Decimal('-5'), currency='INR', student=student)

        mock_intent_create.assert_not_called()

    def test_stripe_error_raises_provider_error(self, student):
        error = stripe.InvalidRequestError('Amount too small', param='amount')
        with patch(PAYMENT_INTENT_CREATE, side_effect=error):
            with pytest.raises(PaymentProviderError):
                create_payment_intent(amount=Decimal('1'), currency='INR', student=student)

        assert not Donation.objects.exists()


# =============================================================================
# Webhook Tests
# =============================================================================

class TestVerifyWebhook:

    def test_valid_signature(self, settings):
        payload = json.dumps({'id': 'evt_1', 'type': 'ping'})
        header = sign_payload(payload, settings.STRIPE_WEBHOOK_SECRET)

        event = verify_webhook(payload.encode('utf-8'), header)

        assert event['id'] == 'evt_1'

    def test_missing_signature(self):
        with pytest.raises(WebhookVerificationError):
            verify_webhook(b'{}', None)

    def test_wrong_secret(self):
        payload = json.dumps({'id': 'evt_1'})
        header = sign_payload(payload, 'whsec_someone_else')

        with pytest.raises(WebhookVerificationError):
            verify_webhook(payload.encode('utf-8'), header)

    def test_tampered_payload(self, settings):
        header = sign_payload(json.dumps({'amount': 100}), settings.STRIPE_WEBHOOK_SECRET)

        with pytest.raises(WebhookVerificationError):
            verify_webhook(json.dumps({'amount': 1}).encode('utf-8'), header)


@pytest.mark.django_db
class TestHandleWebhookEvent:

    def test_succeeded_completes_pending_donation(self, pending_donation, make_event, succeeded_intent):
        processed = handle_webhook_event(make_event('payment_intent.succeeded', succeeded_intent))

        pending_donation.refresh_from_db()
        assert processed is True
        assert pending_donation.status == DonationStatus.COMPLETED
        assert pending_donation.stripe_charge_id == 'ch_test_456'
        assert pending_donation.payment_method == 'card'

    def test_replay_is_ignored(self, pending_donation, student, make_event, succeeded_intent):
        event = make_event('payment_intent.succeeded', succeeded_intent)

        assert handle_webhook_event(event) is True
        assert handle_webhook_event(event) is False

        student.refresh_from_db()
        assert student.total_raised == Decimal('2500.00')
        assert StripeEvent.objects.filter(event_id='evt_test_1').count() == 1

    def test_missing_donation_created_from_metadata(self, student, donor, make_event, succeeded_intent):
        handle_webhook_event(make_event('payment_intent.succeeded', succeeded_intent))

        donation = Donation.objects.get(stripe_payment_intent_id='pi_test_123')
        assert donation.status == DonationStatus.COMPLETED
        assert donation.amount == Decimal('2500.00')
        assert donation.currency == 'INR'
        assert donation.donor == donor
        assert donation.message == 'Good luck!'

    def test_metadata_without_student_is_skipped(self, make_event, succeeded_intent):
        intent = {**succeeded_intent, 'metadata': {}}

        assert handle_webhook_event(make_event('payment_intent.succeeded', intent)) is True
        assert not Donation.objects.exists()

    def test_malformed_student_id_is_skipped(self, make_event, succeeded_intent):
        intent = {**succeeded_intent, 'metadata': {**succeeded_intent['metadata'], 'studentId': 'not-a-uuid'}}

        assert handle_webhook_event(make_event('payment_intent.succeeded', intent)) is True
        assert not Donation.objects.exists()
        assert StripeEvent.objects.filter(event_id='evt_test_1').exists()

    def test_malformed_donor_and_need_ids_are_ignored(self, student, make_event, succeeded_intent):
        metadata = {**succeeded_intent['metadata'], 'donorId': 'abc', 'needId': '42'}

        handle_webhook_event(make_event('payment_intent.succeeded', {**succeeded_intent, 'metadata': metadata}))

        donation = Donation.objects.get(stripe_payment_intent_id='pi_test_123')
        assert donation.status == DonationStatus.COMPLETED
        assert donation.donor is None
        assert donation.need is None

    def test_unsupported_currency_from_metadata_is_skipped(self, student, make_event, succeeded_intent):
        intent = {**succeeded_intent, 'currency': 'eur'}

        assert handle_webhook_event(make_event('payment_intent.succeeded', intent)) is True
        assert not Donation.objects.exists()

    def test_refunded_donation_not_completed(self, pending_donation, student, make_event, succeeded_intent):
        pending_donation.status = DonationStatus.REFUNDED
        pending_donation.save()

        assert handle_webhook_event(make_event('payment_intent.succeeded', succeeded_intent)) is True

        pending_donation.refresh_from_db()
        student.refresh_from_db()
        assert pending_donation.status == DonationStatus.REFUNDED
        assert student.total_raised == Decimal('0.00')
        assert StripeEvent.objects.filter(event_id='evt_test_1').exists()

    def test_payment_failed(self, pending_donation, make_event):
        intent = {
            'id': 'pi_test_123',
            'last_payment_error': {'code': 'card_declined', 'message': 'Your card was declined.'},
        }

        handle_webhook_event(make_event('payment_intent.payment_failed', intent))

        pending_donation.refresh_from_db()
        assert pending_donation.status == DonationStatus.FAILED

    def test_unhandled_type_acknowledged(self, make_event):
        processed = handle_webhook_event(make_event('charge.refunded', {'id': 'ch_1'}))

        assert processed is True
        assert StripeEvent.objects.get(event_id='evt_test_1').type == 'charge.refunded'
