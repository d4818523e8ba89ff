from django.conf import settings
from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from apps.accounts.permissions import IsPlatformAdmin
from apps.students.models import Student, StudentNeed, StudentStatus
from .serializers import (
    DonationSerializer,
    PaymentIntentRequestSerializer,
    PaymentIntentResponseSerializer,
    OfflineDonationSerializer,
)
from .services import (
    DONATION_AMOUNTS,
    SUPPORTED_CURRENCIES,
    create_payment_intent as create_payment_intent_service,
    get_donor_donations,
    record_offline_donation,
    verify_webhook,
    handle_webhook_event,
    InvalidDonationError,
    PaymentProviderError,
    WebhookVerificationError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class WebhookAckSerializer(serializers.Serializer):
    received = serializers.BooleanField()


def _get_need(student, need_id):
    if not need_id:
        return None
    return StudentNeed.objects.filter(id=need_id, student=student).first()


@extend_schema(
    request=PaymentIntentRequestSerializer,
    responses={
        200: PaymentIntentResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        502: ErrorResponseSerializer,
    },
    description="Create a Stripe PaymentIntent for a donation. Amount is in major units.",
    tags=['payments'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def create_payment_intent(request):
    """Start a card donation."""
    serializer = PaymentIntentRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(
            {'error': 'Missing required fields', 'details': serializer.errors},
            status=status.HTTP_400_BAD_REQUEST
        )

    data = serializer.validated_data
    student = Student.objects.filter(id=data['student_id'], status=StudentStatus.APPROVED).first()
    if student is None:
        return Response({'error': 'Student not found'}, status=status.HTTP_404_NOT_FOUND)

    donor = request.user if request.user.is_authenticated else None

    try:
        result = create_payment_intent_service(
            amount=data['amount'],
            currency=data['currency'],
            student=student,
            donor=donor,
            donor_email=data.get('donor_email', ''),
            donor_name=data.get('donor_name', ''),
            is_anonymous=data['is_anonymous'],
            message=data.get('message', ''),
            need=_get_need(student, data.get('need_id')),
        )
    except InvalidDonationError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except PaymentProviderError as e:
        return Response({'error': str(e)}, status=status.HTTP_502_BAD_GATEWAY)

    return Response(PaymentIntentResponseSerializer(result).data)


@extend_schema(
    request=None,
    responses={
        200: WebhookAckSerializer,
        400: ErrorResponseSerializer,
    },
    description="Stripe webhook endpoint. Requires a valid Stripe-Signature header.",
    tags=['payments'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def stripe_webhook(request):
    """Receive payment events from Stripe."""
    payload = request.body
    signature = request.META.get('HTTP_STRIPE_SIGNATURE')

    try:
        event = verify_webhook(payload, signature)
    except WebhookVerificationError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    handle_webhook_event(event)
    return Response({'received': True})


@extend_schema(
    responses={200: DonationSerializer(many=True)},
    description="Completed donations of the current donor, newest first.",
    tags=['donations'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_donations(request):
    donations = get_donor_donations(request.user.id)
    return Response(DonationSerializer(donations, many=True).data)


@extend_schema(
    request=OfflineDonationSerializer,
    responses={
        201: DonationSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Record a cash, check or bank transfer donation (admins only).",
    tags=['donations'],
)
@api_view(['POST'])
@permission_classes([IsPlatformAdmin])
def offline_donation(request):
    """Record an offline donation."""
    serializer = OfflineDonationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = serializer.validated_data.copy()
    student = Student.objects.filter(id=data.pop('student_id')).first()
    if student is None:
        return Response({'error': 'Student not found'}, status=status.HTTP_404_NOT_FOUND)

    need = _get_need(student, data.pop('need_id', None))

    try:
        donation = record_offline_donation(
            student=student,
            need=need,
            recorded_by=request.user,
            **data
        )
    except InvalidDonationError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(DonationSerializer(donation).data, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: dict},
    description="Publishable key, currencies and preset amounts for the donation form.",
    tags=['donations'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def donation_config(request):
    return Response({
        'publishable_key': settings.STRIPE_PUBLISHABLE_KEY,
        'default_currency': settings.DEFAULT_CURRENCY,
        'currencies': [str(c) for c in SUPPORTED_CURRENCIES],
        'preset_amounts': {str(code): amounts for code, amounts in DONATION_AMOUNTS.items()},
        'platform_fee_percent': str(settings.PLATFORM_FEE_PERCENT),
    })
