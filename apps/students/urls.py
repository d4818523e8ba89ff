from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'students'

router = DefaultRouter()
router.register(r'', views.StudentViewSet, basename='student')

urlpatterns = [
    # Admin review
    # POST   /api/students/{id}/review/    - Approve, reject or archive
    path('<uuid:pk>/review/', views.review_student, name='student-review'),

    # Student ViewSet routes
    # GET    /api/students/                - Approved students (cursor paginated)
    # GET    /api/students/featured/       - Featured students
    # POST   /api/students/submit/         - Submit a student case
    # GET    /api/students/pending/        - Pending submissions (admin)
    # GET    /api/students/{slug}/         - Student profile
    # GET    /api/students/{slug}/needs/   - Needs by priority (POST: admin)
    # GET    /api/students/{slug}/updates/ - Public impact updates (POST: admin)
    # GET    /api/students/{slug}/donations/ - Completed donations
    path('', include(router.urls)),
]
