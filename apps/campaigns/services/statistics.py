"""Platform-wide statistics."""

from decimal import Decimal
from django.db.models import Count, Q, Sum

from apps.donations.models import Donation, DonationStatus
from apps.students.models import Student


def get_global_stats() -> dict:
    """
    Headline numbers for the home page and /api/stats/.

    Computed from records on each call:
    - total_students: students with at least one completed donation
    - total_donors: distinct signed-in donors with a completed donation
    - total_raised: sum of completed donation amounts per currency
    - total_donations: number of completed donations

    Example:
        >>> get_global_stats()['total_donations']
        42
    """
    completed = Donation.objects.filter(status=DonationStatus.COMPLETED)

    totals = completed.aggregate(
        total_donations=Count('id'),
        total_donors=Count('donor', distinct=True, filter=Q(donor__isnull=False)),
    )

    raised_by_currency = {
        row['currency']: row['total'] or Decimal('0.00')
        for row in completed.values('currency').annotate(total=Sum('amount')).order_by('currency')
    }

    total_students = Student.objects.filter(
        donations__status=DonationStatus.COMPLETED
    ).distinct().count()

    return {
        'total_students': total_students,
        'total_donors': totals['total_donors'],
        'total_raised': raised_by_currency,
        'total_donations': totals['total_donations'],
    }
