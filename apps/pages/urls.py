from django.urls import path
from . import views

app_name = 'pages'

urlpatterns = [
    path('', views.home, name='home'),
    path('about/', views.about, name='about'),
    path('how-it-works/', views.how_it_works, name='how-it-works'),

    # Students
    path('students/', views.student_list, name='students'),
    path('students/<slug:slug>/', views.student_detail, name='student-detail'),

    # Donation wizard
    path('students/<slug:slug>/donate/', views.donate, name='donate'),
    path('donate/success/', views.donate_success, name='donate-success'),

    # Password reset
    path('auth/forgot-password/', views.forgot_password, name='forgot-password'),
    path('auth/reset-password/', views.reset_password, name='reset-password'),
]
