from rest_framework import status, generics, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema
from .models import Donor
from .serializers import (
    DonorRegistrationSerializer,
    DonorLoginSerializer,
    DonorSerializer,
    DonorPublicSerializer,
    GoogleSignInSerializer,
    PasswordResetRequestSerializer,
    PasswordResetConfirmSerializer,
)
from .services import (
    register_donor,
    authenticate_donor,
    sign_in_with_google,
    request_password_reset as request_password_reset_service,
    confirm_password_reset as confirm_password_reset_service,
    update_donor_profile,
    DonorRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    InvalidProviderTokenError,
    InvalidTokenError,
    DonorNotFoundError,
)


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    donor = DonorSerializer()
    tokens = TokensResponseSerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


def _auth_response(donor, message, status_code=status.HTTP_200_OK):
    """Donor payload plus a fresh JWT pair."""
    refresh = RefreshToken.for_user(donor)
    return Response({
        'message': message,
        'donor': DonorSerializer(donor).data,
        'tokens': {
            'refresh': str(refresh),
            'access': str(refresh.access_token),
        }
    }, status=status_code)


@extend_schema(
    request=DonorRegistrationSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Register a donor account with email and password and receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a new donor account."""
    serializer = DonorRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = serializer.validated_data.copy()
    data.pop('password_confirm', None)

    try:
        donor = register_donor(**data)
    except DonorRegistrationError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    return _auth_response(donor, 'Registration successful', status.HTTP_201_CREATED)


@extend_schema(
    request=DonorLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = DonorLoginSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        donor = authenticate_donor(**serializer.validated_data)
    except InvalidCredentialsError:
        return Response({
            'error': 'Invalid credentials'
        }, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response({
            'error': str(e)
        }, status=status.HTTP_403_FORBIDDEN)

    return _auth_response(donor, 'Login successful')


@extend_schema(
    request=GoogleSignInSerializer,
    responses={
        200: AuthResponseSerializer,
        201: AuthResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Sign in with a Google ID token. Creates the donor on first sign-in.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def google_sign_in(request):
    """Sign in with Google."""
    serializer = GoogleSignInSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        donor, created = sign_in_with_google(id_token=serializer.validated_data['id_token'])
    except InvalidProviderTokenError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    if created:
        return _auth_response(donor, 'Registration successful', status.HTTP_201_CREATED)
    return _auth_response(donor, 'Login successful')


@extend_schema(
    responses={200: MessageResponseSerializer},
    description="Sign out. Clients discard their tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout(request):
    """Logout."""
    return Response({
        'message': 'Logout successful'
    })


@extend_schema(
    methods=['GET'],
    responses={200: DonorSerializer},
    description="Get the current donor's profile.",
    tags=['auth'],
)
@extend_schema(
    methods=['PATCH'],
    request=DonorSerializer,
    responses={
        200: DonorSerializer,
        400: ErrorResponseSerializer,
    },
    description="Update the current donor's profile and preferences.",
    tags=['auth'],
)
@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated])
def current_donor(request):
    """Get or update the current donor profile."""
    if request.method == 'GET':
        return Response(DonorSerializer(request.user).data)

    serializer = DonorSerializer(request.user, data=request.data, partial=True)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        donor = update_donor_profile(donor_id=request.user.id, **serializer.validated_data)
    except DonorNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(DonorSerializer(donor).data)


@extend_schema(
    request=PasswordResetRequestSerializer,
    responses={200: MessageResponseSerializer},
    description="Request a password reset email. Always returns success for security.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def request_password_reset(request):
    """Request password reset email."""
    serializer = PasswordResetRequestSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        request_password_reset_service(email=serializer.validated_data['email'])
    except DonorNotFoundError:
        # Don't reveal if email exists (security)
        pass

    return Response({
        'message': 'If an account exists, a password reset email has been sent'
    })


@extend_schema(
    request=PasswordResetConfirmSerializer,
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Confirm password reset with token and set new password.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def confirm_password_reset(request):
    """Confirm password reset with token."""
    serializer = PasswordResetConfirmSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        confirm_password_reset_service(
            token=serializer.validated_data['token'],
            new_password=serializer.validated_data['new_password'],
        )
    except InvalidTokenError as e:
        return Response({
            'error': str(e)
        }, status=status.HTTP_400_BAD_REQUEST)

    return Response({
        'message': 'Password reset successful'
    })


class DonorDetailView(generics.RetrieveAPIView):
    """
    Get a donor's public profile by ID.

    GET /api/auth/donors/{id}/
    """
    queryset = Donor.objects.filter(is_active=True)
    serializer_class = DonorPublicSerializer
    permission_classes = [AllowAny]
