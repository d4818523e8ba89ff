from django.conf import settings
from django.core.paginator import Paginator
from django.http import Http404, HttpResponseBadRequest
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_GET, require_http_methods
import structlog

from apps.accounts.services import (
    request_password_reset,
    confirm_password_reset,
    DonorNotFoundError,
    InvalidTokenError,
)
from apps.campaigns.services import get_global_stats
from apps.donations.forms import DonationAmountForm, DonationDetailsForm
from apps.donations.models import Donation
from apps.donations.services import (
    DONATION_AMOUNTS,
    get_student_donations,
    InvalidDonationError,
    PaymentProviderError,
)
from apps.donations.wizard import (
    DonationWizard,
    PROGRESS_STEPS,
    STEP_AMOUNT,
    STEP_DETAILS,
    STEP_PAYMENT,
)
from apps.students.models import NeedCategory
from apps.students.services import (
    get_approved_students,
    get_featured_students,
    get_student_by_slug,
    get_student_needs,
    get_student_updates,
    search_students,
)

from . import content
from .formatting import format_currency
from .forms import ForgotPasswordForm, ResetPasswordForm


logger = structlog.get_logger(__name__)

STUDENTS_PER_PAGE = 12

# Where "Back" leads from each wizard step
PREVIOUS_STEP = {
    STEP_DETAILS: STEP_AMOUNT,
    STEP_PAYMENT: STEP_DETAILS,
}


def _get_student_or_404(slug):
    student = get_student_by_slug(slug)
    if student is None:
        raise Http404('Student not found')
    return student


@require_GET
def home(request):
    return render(request, 'pages/home.html', {
        'featured_students': get_featured_students(count=6),
        'global_stats': get_global_stats(),
        'stats': content.HOME_STATS,
        'how_it_works': content.HOME_HOW_IT_WORKS,
        'features': content.HOME_FEATURES,
    })


@require_GET
def about(request):
    return render(request, 'pages/about.html', {
        'values': content.ABOUT_VALUES,
        'stats': content.ABOUT_STATS,
        'pillars': content.ABOUT_PILLARS,
        'story': content.ABOUT_STORY,
    })


@require_GET
def how_it_works(request):
    return render(request, 'pages/how_it_works.html', {
        'donor_steps': content.DONOR_STEPS,
        'submission_steps': content.SUBMISSION_STEPS,
        'trust_features': content.TRUST_FEATURES,
    })


@require_GET
def student_list(request):
    """Approved students with free-text search (?q=) and category filter."""
    query = request.GET.get('q', '').strip()
    category = request.GET.get('category') or None
    if category not in NeedCategory.values:
        category = None

    students = search_students(get_approved_students(category=category), query)
    page = Paginator(students, STUDENTS_PER_PAGE).get_page(request.GET.get('page'))

    return render(request, 'pages/students.html', {
        'page_obj': page,
        'students': page.object_list,
        'query': query,
        'category': category,
        'categories': NeedCategory.choices,
    })


@require_GET
def student_detail(request, slug):
    student = _get_student_or_404(slug)
    return render(request, 'pages/student_detail.html', {
        'student': student,
        'needs': get_student_needs(student.id),
        'updates': get_student_updates(student.id)[:5],
        'recent_donations': get_student_donations(student.id)[:10],
    })


@require_http_methods(['GET', 'POST'])
def donate(request, slug):
    """
    Donation wizard for one student.

    Each step posts back here with an ``action``: ``currency``, ``amount``,
    ``details`` or ``back``. Successful posts redirect so a refresh never
    re-submits a step.
    """
    student = _get_student_or_404(slug)
    wizard = DonationWizard(request.session, student)
    state = wizard.state

    amount_form = DonationAmountForm(initial={'currency': wizard.currency})
    details_form = DonationDetailsForm(initial={
        'is_anonymous': state['is_anonymous'],
        'message': state['message'],
    })
    error = None

    if request.method == 'POST':
        action = request.POST.get('action')

        if action == 'currency':
            wizard.switch_currency(request.POST.get('currency', ''))
            return redirect('pages:donate', slug=slug)

        elif action == 'amount':
            amount_form = wizard.submit_amount(request.POST)
            if amount_form.is_valid():
                return redirect('pages:donate', slug=slug)

        elif action == 'details':
            donor = request.user if request.user.is_authenticated else None
            try:
                details_form = wizard.submit_details(
                    request.POST,
                    donor=donor,
                    donor_email=donor.email if donor else '',
                )
            except (InvalidDonationError, PaymentProviderError) as e:
                logger.warning("donation_wizard_payment_failed", student_id=str(student.id), error=str(e))
                error = str(e)
            else:
                if details_form.is_valid():
                    return redirect('pages:donate', slug=slug)

        elif action == 'back':
            previous = PREVIOUS_STEP.get(wizard.step)
            if previous:
                wizard.go_to(previous)
            return redirect('pages:donate', slug=slug)

        else:
            return HttpResponseBadRequest('Unknown donation action')

    return render(request, 'pages/donate.html', {
        'student': student,
        'step': wizard.step,
        'progress_steps': PROGRESS_STEPS,
        'currency': wizard.currency,
        'amount': wizard.amount,
        'amount_display': format_currency(wizard.amount, wizard.currency) if wizard.amount else '',
        'preset_amounts': DONATION_AMOUNTS[wizard.currency],
        'currencies': [str(code) for code in DONATION_AMOUNTS],
        'amount_form': amount_form,
        'details_form': details_form,
        'client_secret': wizard.state['client_secret'],
        'stripe_publishable_key': settings.STRIPE_PUBLISHABLE_KEY,
        'return_url': request.build_absolute_uri(reverse('pages:donate-success')),
        'error': error,
    })


@require_GET
def donate_success(request):
    """
    Stripe redirects here with ``?payment_intent=`` after confirming.

    The donation may still be pending until the webhook arrives.
    """
    payment_intent_id = request.GET.get('payment_intent', '')
    donation = None
    if payment_intent_id:
        donation = (
            Donation.objects
            .select_related('student')
            .filter(stripe_payment_intent_id=payment_intent_id)
            .first()
        )

    if donation is None:
        raise Http404('Donation not found')

    DonationWizard(request.session, donation.student).complete()

    return render(request, 'pages/donate_success.html', {
        'donation': donation,
        'student': donation.student,
    })


@require_http_methods(['GET', 'POST'])
def forgot_password(request):
    form = ForgotPasswordForm(request.POST or None)
    sent = False

    if request.method == 'POST' and form.is_valid():
        try:
            request_password_reset(email=form.cleaned_data['email'])
        except DonorNotFoundError:
            # Same response whether or not the email is registered
            pass
        sent = True

    return render(request, 'pages/forgot_password.html', {
        'form': form,
        'sent': sent,
    })


@require_http_methods(['GET', 'POST'])
def reset_password(request):
    if request.method == 'POST':
        form = ResetPasswordForm(request.POST)
    else:
        form = ResetPasswordForm(initial={'token': request.GET.get('token', '')})

    completed = False
    error = None

    if request.method == 'POST' and form.is_valid():
        try:
            confirm_password_reset(
                token=form.cleaned_data['token'],
                new_password=form.cleaned_data['new_password'],
            )
        except InvalidTokenError as e:
            error = str(e)
        else:
            completed = True

    return render(request, 'pages/reset_password.html', {
        'form': form,
        'completed': completed,
        'error': error,
    })
