from django.urls import path
from . import views

app_name = 'donors'

urlpatterns = [
    # Authentication
    path('register/', views.register, name='register'),
    path('login/', views.login, name='login'),
    path('google/', views.google_sign_in, name='google-sign-in'),
    path('logout/', views.logout, name='logout'),

    # Donor profile
    path('me/', views.current_donor, name='current-donor'),
    path('donors/<uuid:pk>/', views.DonorDetailView.as_view(), name='donor-detail'),

    # Password reset
    path('password-reset/', views.request_password_reset, name='password-reset'),
    path('password-reset/confirm/', views.confirm_password_reset, name='password-reset-confirm'),
]
