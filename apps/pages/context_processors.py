from django.urls import reverse

from . import content


def site_navigation(request):
    """Site name, header and footer links for base.html."""
    header = [
        {
            'name': item['name'],
            'href': reverse(item['url_name']),
            'is_active': request.path.startswith(reverse(item['url_name'])),
        }
        for item in content.HEADER_NAVIGATION
    ]
    return {
        'site_name': content.SITE_NAME,
        'site_tagline': content.SITE_TAGLINE,
        'header_navigation': header,
        'footer_navigation': content.FOOTER_NAVIGATION,
        'social_links': content.SOCIAL_LINKS,
    }
