"""
Management command to create sample data for local development.

Usage:
    python manage.py create_sample_data
    python manage.py create_sample_data --clear

This creates:
- 1 platform admin and 3 donors
- 6 students (4 approved, 1 pending, 1 rejected) with needs
- Impact updates for approved students
- Completed offline donations that drive the funding totals
- 1 active campaign featuring the approved students
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone
from decimal import Decimal
from datetime import timedelta

from apps.accounts.models import Donor, DonorRole
from apps.campaigns.models import Campaign, CampaignType
from apps.donations.models import Donation, OfflineMethod, StripeEvent
from apps.donations.services import record_offline_donation
from apps.students.models import Student, StudentStatus, NeedCategory, NeedPriority, UpdateType
from apps.students.services import (
    submit_student,
    review_student,
    add_student_need,
    post_impact_update,
)


STUDENTS = [
    {
        'first_name': 'Priya',
        'last_name': 'Sharma',
        'school_name': 'Delhi Public School',
        'school_type': 'secondary',
        'school_grade': 'Class 9',
        'school_city': 'New Delhi',
        'school_state': 'Delhi',
        'school_country': 'India',
        'gender': 'female',
        'story': 'Priya walks 5 km to school every day and tops her class in science.',
        'aspirations': 'She wants to become a doctor and open a clinic in her village.',
        'total_needed': Decimal('24000.00'),
        'featured': True,
        'needs': [
            ('Annual tuition', NeedCategory.TUITION, Decimal('15000.00'), NeedPriority.URGENT),
            ('Science textbooks', NeedCategory.BOOKS, Decimal('4000.00'), NeedPriority.HIGH),
            ('Bicycle for school', NeedCategory.TRANSPORTATION, Decimal('5000.00'), NeedPriority.MEDIUM),
        ],
        'status': StudentStatus.APPROVED,
    },
    {
        'first_name': 'Rahul',
        'last_name': 'Verma',
        'school_name': 'Kendriya Vidyalaya',
        'school_type': 'high_school',
        'school_grade': 'Class 11',
        'school_city': 'Jaipur',
        'school_state': 'Rajasthan',
        'school_country': 'India',
        'gender': 'male',
        'story': 'Rahul helps at his family tea stall after school and loves mathematics.',
        'aspirations': 'He dreams of studying engineering.',
        'total_needed': Decimal('18000.00'),
        'featured': True,
        'needs': [
            ('Coaching fees', NeedCategory.TUITION, Decimal('12000.00'), NeedPriority.HIGH),
            ('Uniform and shoes', NeedCategory.UNIFORMS, Decimal('3000.00'), NeedPriority.MEDIUM),
            ('Geometry set and notebooks', NeedCategory.SUPPLIES, Decimal('3000.00'), NeedPriority.LOW),
        ],
        'status': StudentStatus.APPROVED,
    },
    {
        'first_name': 'Ananya',
        'last_name': 'Iyer',
        'school_name': 'Government Girls School',
        'school_type': 'primary',
        'school_grade': 'Class 5',
        'school_city': 'Chennai',
        'school_state': 'Tamil Nadu',
        'school_country': 'India',
        'gender': 'female',
        'story': 'Ananya is the first girl in her family to attend school.',
        'total_needed': Decimal('9000.00'),
        'needs': [
            ('Midday meals', NeedCategory.MEALS, Decimal('6000.00'), NeedPriority.URGENT),
            ('Storybooks', NeedCategory.BOOKS, Decimal('3000.00'), NeedPriority.LOW),
        ],
        'status': StudentStatus.APPROVED,
    },
    {
        'first_name': 'Mohammed',
        'last_name': 'Khan',
        'school_name': 'Anjuman High School',
        'school_type': 'high_school',
        'school_grade': 'Class 12',
        'school_city': 'Hyderabad',
        'school_state': 'Telangana',
        'school_country': 'India',
        'gender': 'male',
        'story': 'Mohammed is preparing for his board exams while caring for his siblings.',
        'total_needed': Decimal('10000.00'),
        'needs': [
            ('Exam fees', NeedCategory.TUITION, Decimal('4000.00'), NeedPriority.URGENT),
            ('Eye glasses', NeedCategory.MEDICAL, Decimal('6000.00'), NeedPriority.HIGH),
        ],
        'status': StudentStatus.APPROVED,
    },
    {
        'first_name': 'Arjun',
        'last_name': 'Patel',
        'school_name': 'Zilla Parishad School',
        'school_type': 'secondary',
        'school_city': 'Nashik',
        'school_country': 'India',
        'story': 'Arjun had to pause school after his father fell ill.',
        'total_needed': Decimal('12000.00'),
        'needs': [],
        'status': StudentStatus.PENDING,
    },
    {
        'first_name': 'Sneha',
        'last_name': 'Das',
        'school_name': 'Unknown School',
        'school_city': 'Kolkata',
        'story': 'Submission without verifiable school details.',
        'total_needed': Decimal('50000.00'),
        'needs': [],
        'status': StudentStatus.REJECTED,
    },
]

# (donor key, student index, amount, method)
OFFLINE_DONATIONS = [
    ('asha', 0, Decimal('10000.00'), OfflineMethod.BANK_TRANSFER),
    ('vikram', 0, Decimal('2500.00'), OfflineMethod.CASH),
    ('asha', 1, Decimal('5000.00'), OfflineMethod.CHECK),
    ('emily', 2, Decimal('9000.00'), OfflineMethod.BANK_TRANSFER),
    ('vikram', 3, Decimal('1500.00'), OfflineMethod.CASH),
]


class Command(BaseCommand):
    help = 'Create sample donors, students, donations and a campaign'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        donors = self.create_donors()
        students = self.create_students(donors['admin'])
        self.create_donations(donors, students)
        self.create_campaign(donors['admin'], students)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (platform admin)')
        self.stdout.write('  asha@example.com / password123')
        self.stdout.write('  vikram@example.com / password123')
        self.stdout.write('  emily@example.com / password123')

    def clear_data(self):
        """Clear all data from the database."""
        StripeEvent.objects.all().delete()
        Donation.objects.all().delete()
        Campaign.objects.all().delete()
        Student.objects.all().delete()
        Donor.objects.filter(is_superuser=False).delete()
        Donor.objects.filter(email='admin@example.com').delete()

    def _get_or_create_donor(self, email, password, **defaults):
        donor, created = Donor.objects.get_or_create(email=email, defaults=defaults)
        if created:
            donor.set_password(password)
            donor.save()
        return donor

    def create_donors(self):
        self.stdout.write('  Creating donors...')

        return {
            'admin': self._get_or_create_donor(
                'admin@example.com', 'admin123',
                display_name='Platform Admin',
                role=DonorRole.ADMIN,
                is_staff=True,
            ),
            'asha': self._get_or_create_donor(
                'asha@example.com', 'password123',
                display_name='Asha Mehta',
                city='Mumbai',
                country='India',
            ),
            'vikram': self._get_or_create_donor(
                'vikram@example.com', 'password123',
                display_name='Vikram Rao',
                is_anonymous=True,
            ),
            'emily': self._get_or_create_donor(
                'emily@example.com', 'password123',
                display_name='Emily Carter',
                city='Seattle',
                country='USA',
                receive_newsletter=True,
            ),
        }

    def create_students(self, admin):
        """Submit students and move them through review."""
        self.stdout.write('  Creating students...')

        students = []
        for data in STUDENTS:
            data = dict(data)
            needs = data.pop('needs')
            status = data.pop('status')
            featured = data.pop('featured', False)

            student = Student.objects.filter(
                first_name=data['first_name'],
                last_name=data['last_name'],
            ).first()
            if student is None:
                student = submit_student(
                    submitter_name='Meera Nair',
                    submitter_email='meera.nair@example.org',
                    submitter_relationship='teacher',
                    **data
                )
                if status != StudentStatus.PENDING:
                    review_student(
                        student_id=student.id,
                        status=status,
                        reviewed_by=admin,
                        rejection_reason='School could not be verified' if status == StudentStatus.REJECTED else None,
                    )
                for title, category, amount, priority in needs:
                    add_student_need(
                        student_id=student.id,
                        title=title,
                        category=category,
                        amount_needed=amount,
                        priority=priority,
                    )
                if featured:
                    Student.objects.filter(id=student.id).update(featured=True)
                if status == StudentStatus.APPROVED:
                    post_impact_update(
                        student_id=student.id,
                        title=f'{student.first_name} started the new term',
                        content='Thanks to our donors, school started on time this year.',
                        type=UpdateType.MILESTONE,
                        created_by=admin,
                    )

            student.refresh_from_db()
            students.append(student)

        return students

    def create_donations(self, donors, students):
        self.stdout.write('  Recording offline donations...')

        if Donation.objects.exists():
            return

        for donor_key, student_index, amount, method in OFFLINE_DONATIONS:
            donor = donors[donor_key]
            record_offline_donation(
                student=students[student_index],
                amount=amount,
                currency='INR',
                offline_method=method,
                recorded_by=donors['admin'],
                donor=donor,
                is_anonymous=donor.is_anonymous,
                offline_reference=f'SAMPLE-{student_index}-{donor_key}'.upper(),
            )

    def create_campaign(self, admin, students):
        self.stdout.write('  Creating campaign...')

        now = timezone.now()
        campaign, created = Campaign.objects.get_or_create(
            slug='back-to-school-2026',
            defaults={
                'title': 'Back to School 2026',
                'description': 'Help students start the new academic year with fees, books and uniforms paid.',
                'goal_amount': Decimal('500000.00'),
                'raised_amount': Decimal('28000.00'),
                'donor_count': 3,
                'start_date': now - timedelta(days=7),
                'end_date': now + timedelta(days=60),
                'type': CampaignType.GENERAL,
                'created_by': admin,
            },
        )
        if created:
            campaign.featured_students.set(
                [s for s in students if s.status == StudentStatus.APPROVED]
            )
