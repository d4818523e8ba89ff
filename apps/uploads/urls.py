from django.urls import path
from . import views

app_name = 'uploads'

urlpatterns = [
    path('students/<uuid:pk>/photos/', views.StudentPhotoView.as_view(), name='student-photos'),
    path('students/<uuid:pk>/documents/', views.StudentDocumentView.as_view(), name='student-documents'),
    path('donations/<uuid:pk>/proof/', views.DonationProofView.as_view(), name='donation-proof'),
    path('campaigns/<uuid:pk>/cover/', views.CampaignCoverView.as_view(), name='campaign-cover'),
    path('files/', views.FileDeleteView.as_view(), name='file-delete'),
]
