from django.db import connection
from django.http import JsonResponse
from django.shortcuts import render
import structlog

logger = structlog.get_logger(__name__)


def health_check(request):
    """Report whether the app is up and its database reachable."""
    try:
        connection.ensure_connection()
    except Exception as e:
        logger.error("health_check_database_unavailable", error=str(e))
        return JsonResponse({
            'status': 'unavailable',
            'database': 'down',
        }, status=503)

    return JsonResponse({
        'status': 'ok',
        'database': 'up',
    })


def error_404(request, exception):
    """Custom 404 handler. Pages get HTML, API routes get JSON."""
    if not request.path.startswith('/api/'):
        return render(request, '404.html', status=404)
    return JsonResponse({
        'error': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    logger.error("unhandled_server_error", path=request.path)
    return JsonResponse({
        'error': 'Internal server error',
        'status': 500
    }, status=500)
