from rest_framework import viewsets, status
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.pagination import CursorPagination
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from apps.accounts.permissions import IsPlatformAdmin
from apps.donations.serializers import DonationPublicSerializer
from apps.donations.services import get_student_donations
from .serializers import (
    StudentSerializer,
    StudentListSerializer,
    StudentSubmissionSerializer,
    StudentAdminSerializer,
    StudentReviewSerializer,
    StudentNeedSerializer,
    ImpactUpdateSerializer,
)
from .services import (
    get_approved_students,
    search_students,
    get_featured_students,
    get_pending_students,
    submit_student,
    review_student as review_student_service,
    get_student_needs,
    add_student_need,
    get_student_updates,
    post_impact_update,
    StudentNotFoundError,
    InvalidReviewError,
)


def _is_truthy(value):
    return str(value).lower() in ('1', 'true', 'yes')


class StudentCursorPagination(CursorPagination):
    """Cursor pagination matching the listing order."""
    page_size = 12
    ordering = ('-priority', '-created_at')


class StudentViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Public listing of approved students.

    list: Approved students (filters: featured, category, school, search)
    retrieve: Student profile by slug
    """

    serializer_class = StudentSerializer
    permission_classes = [AllowAny]
    pagination_class = StudentCursorPagination
    lookup_field = 'slug'

    def get_queryset(self):
        """
        Filter approved students from query parameters.

        Filters:
        - featured: Only featured students
        - category: Students with an active need in this category
        - school: School name contains
        - search: Name or school name contains
        """
        params = self.request.query_params
        queryset = get_approved_students(
            category=params.get('category'),
            school=params.get('school'),
            featured=_is_truthy(params.get('featured', '')),
        )
        if self.action == 'retrieve':
            queryset = queryset.prefetch_related('needs')
        return search_students(queryset, params.get('search'))

    def get_serializer_class(self):
        if self.action in ('list', 'featured'):
            return StudentListSerializer
        return StudentSerializer

    @extend_schema(
        parameters=[OpenApiParameter('count', int, description='Number of students (default 6)')],
        responses={200: StudentListSerializer(many=True)},
    )
    @action(detail=False, methods=['get'])
    def featured(self, request):
        """Featured students for the home page."""
        try:
            count = int(request.query_params.get('count', 6))
        except ValueError:
            count = 6
        students = get_featured_students(count=max(1, min(count, 24)))
        return Response(StudentListSerializer(students, many=True).data)

    @extend_schema(request=StudentNeedSerializer, responses={200: StudentNeedSerializer(many=True)})
    @action(detail=True, methods=['get', 'post'])
    def needs(self, request, slug=None):
        """List a student's needs, or add one (admins only)."""
        student = self.get_object()

        if request.method == 'GET':
            needs = get_student_needs(student.id)
            return Response(StudentNeedSerializer(needs, many=True).data)

        if not IsPlatformAdmin().has_permission(request, self):
            self.permission_denied(request, message=IsPlatformAdmin.message)

        serializer = StudentNeedSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            need = add_student_need(student_id=student.id, **serializer.validated_data)
        except StudentNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(StudentNeedSerializer(need).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=ImpactUpdateSerializer, responses={200: ImpactUpdateSerializer(many=True)})
    @action(detail=True, methods=['get', 'post'])
    def updates(self, request, slug=None):
        """Public impact updates, or post one (admins only)."""
        student = self.get_object()

        if request.method == 'GET':
            updates = get_student_updates(student.id, public_only=True)
            return Response(ImpactUpdateSerializer(updates, many=True).data)

        if not IsPlatformAdmin().has_permission(request, self):
            self.permission_denied(request, message=IsPlatformAdmin.message)

        serializer = ImpactUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        update = post_impact_update(
            student_id=student.id,
            created_by=request.user,
            **serializer.validated_data
        )
        return Response(ImpactUpdateSerializer(update).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: DonationPublicSerializer(many=True)})
    @action(detail=True, methods=['get'])
    def donations(self, request, slug=None):
        """Completed donations to a student, newest first."""
        student = self.get_object()
        donations = get_student_donations(student.id)
        return Response(DonationPublicSerializer(donations, many=True).data)

    @extend_schema(request=StudentSubmissionSerializer, responses={201: StudentAdminSerializer})
    @action(detail=False, methods=['post'], permission_classes=[IsAuthenticated])
    def submit(self, request):
        """Submit a student case for review."""
        serializer = StudentSubmissionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        student = submit_student(**serializer.validated_data)

        return Response(
            {
                'message': 'Student submitted for review',
                'student': StudentAdminSerializer(student).data,
            },
            status=status.HTTP_201_CREATED
        )

    @extend_schema(responses={200: StudentAdminSerializer(many=True)})
    @action(detail=False, methods=['get'], permission_classes=[IsPlatformAdmin], pagination_class=None)
    def pending(self, request):
        """Submissions awaiting review, oldest first."""
        students = get_pending_students()
        return Response(StudentAdminSerializer(students, many=True).data)


@extend_schema(
    request=StudentReviewSerializer,
    responses={200: StudentAdminSerializer},
    description="Approve, reject or archive a submitted student.",
    tags=['students'],
)
@api_view(['POST'])
@permission_classes([IsPlatformAdmin])
def review_student(request, pk):
    """Record a review decision."""
    serializer = StudentReviewSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        student = review_student_service(
            student_id=pk,
            status=serializer.validated_data['status'],
            reviewed_by=request.user,
            rejection_reason=serializer.validated_data.get('rejection_reason'),
        )
    except StudentNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except InvalidReviewError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(StudentAdminSerializer(student).data)
