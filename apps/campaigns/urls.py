from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'campaigns'

router = DefaultRouter()
router.register(r'', views.CampaignViewSet, basename='campaign')

urlpatterns = [
    # GET    /api/campaigns/          - Active campaigns
    # GET    /api/campaigns/{slug}/   - Campaign details
    path('', include(router.urls)),
]
