from django.urls import path
from . import views

app_name = 'donations'

urlpatterns = [
    # Stripe
    path('stripe/create-payment-intent/', views.create_payment_intent, name='create-payment-intent'),
    path('stripe/webhook/', views.stripe_webhook, name='stripe-webhook'),

    # Donations
    path('donations/mine/', views.my_donations, name='my-donations'),
    path('donations/offline/', views.offline_donation, name='offline-donation'),
    path('donations/config/', views.donation_config, name='donation-config'),
]
