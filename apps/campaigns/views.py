from rest_framework import viewsets, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .serializers import CampaignSerializer, GlobalStatsSerializer
from .services import get_active_campaigns, get_campaign_by_slug, get_global_stats


class CampaignViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Active fundraising campaigns.

    list: Active campaigns, soonest ending first
    retrieve: Campaign by slug (including ended ones)
    """

    serializer_class = CampaignSerializer
    permission_classes = [AllowAny]
    pagination_class = None
    lookup_field = 'slug'

    def get_queryset(self):
        return get_active_campaigns()

    def retrieve(self, request, *args, **kwargs):
        campaign = get_campaign_by_slug(kwargs.get('slug'))
        if campaign is None:
            return Response(
                {'error': 'Campaign not found'},
                status=status.HTTP_404_NOT_FOUND
            )
        return Response(CampaignSerializer(campaign).data)


@extend_schema(
    responses={200: GlobalStatsSerializer},
    description="Platform totals computed from completed donations.",
    tags=['stats'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def global_stats(request):
    return Response(GlobalStatsSerializer(get_global_stats()).data)
