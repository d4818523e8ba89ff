import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status
from apps.donations.models import Donation, DonationStatus
from apps.students.models import (
    Student,
    StudentNeed,
    ImpactUpdate,
    StudentStatus,
    NeedCategory,
    NeedPriority,
)


# =============================================================================
# Listing Tests
# =============================================================================

@pytest.mark.django_db
class TestStudentList:
    """Tests for GET /api/students/"""

    def test_only_approved_students_listed(self, api_client, approved_student, pending_student, make_student):
        make_student(status=StudentStatus.REJECTED)
        make_student(status=StudentStatus.ARCHIVED)

        response = api_client.get(reverse('students:student-list'))

        assert response.status_code == status.HTTP_200_OK
        slugs = [s['slug'] for s in response.data['results']]
        assert slugs == [approved_student.slug]

    def test_ordered_by_priority_then_newest(self, api_client, make_student):
        low = make_student(priority=0)
        high = make_student(priority=5)
        newer_low = make_student(priority=0)

        response = api_client.get(reverse('students:student-list'))

        slugs = [s['slug'] for s in response.data['results']]
        assert slugs == [high.slug, newer_low.slug, low.slug]

    def test_cursor_pagination(self, api_client, make_student):
        for _ in range(14):
            make_student()

        response = api_client.get(reverse('students:student-list'))

        assert len(response.data['results']) == 12
        assert response.data['next'] is not None

        second_page = api_client.get(response.data['next'])
        assert len(second_page.data['results']) == 2
        assert second_page.data['next'] is None

        first_ids = {s['id'] for s in response.data['results']}
        second_ids = {s['id'] for s in second_page.data['results']}
        assert first_ids.isdisjoint(second_ids)

    def test_filter_featured(self, api_client, approved_student, make_student):
        featured = make_student(featured=True)

        response = api_client.get(reverse('students:student-list'), {'featured': 'true'})

        assert [s['slug'] for s in response.data['results']] == [featured.slug]

    def test_filter_category_uses_active_needs(self, api_client, approved_student, tuition_need, make_student):
        other = make_student()
        StudentNeed.objects.create(
            student=other,
            category=NeedCategory.TUITION,
            title='Old tuition',
            amount_needed=Decimal('1000.00'),
            status='fulfilled',
        )

        response = api_client.get(reverse('students:student-list'), {'category': 'tuition'})

        assert [s['slug'] for s in response.data['results']] == [approved_student.slug]

    def test_search_by_full_name(self, api_client, approved_student, make_student):
        make_student(first_name='Rahul', last_name='Verma')

        response = api_client.get(reverse('students:student-list'), {'search': 'priya sha'})

        assert [s['slug'] for s in response.data['results']] == [approved_student.slug]

    def test_search_by_school(self, api_client, approved_student, make_student):
        make_student(school_name='Kendriya Vidyalaya')

        response = api_client.get(reverse('students:student-list'), {'search': 'delhi public'})

        assert [s['slug'] for s in response.data['results']] == [approved_student.slug]

    def test_list_includes_progress(self, api_client, make_student):
        make_student(total_needed=Decimal('1000.00'), total_raised=Decimal('250.00'))

        response = api_client.get(reverse('students:student-list'))

        assert response.data['results'][0]['progress'] == 25


@pytest.mark.django_db
class TestFeaturedStudents:
    """Tests for GET /api/students/featured/"""

    def test_featured_default_count(self, api_client, make_student):
        for _ in range(8):
            make_student(featured=True)
        make_student(featured=False)

        response = api_client.get(reverse('students:student-featured'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 6

    def test_featured_custom_count(self, api_client, make_student):
        for _ in range(4):
            make_student(featured=True)

        response = api_client.get(reverse('students:student-featured'), {'count': 2})

        assert len(response.data) == 2

    def test_featured_excludes_unapproved(self, api_client, make_student):
        make_student(featured=True, status=StudentStatus.PENDING)

        response = api_client.get(reverse('students:student-featured'))

        assert response.data == []


# =============================================================================
# Profile Tests
# =============================================================================

@pytest.mark.django_db
class TestStudentDetail:
    """Tests for GET /api/students/<slug>/"""

    def test_retrieve_by_slug(self, api_client, approved_student, tuition_need):
        url = reverse('students:student-detail', kwargs={'slug': approved_student.slug})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['full_name'] == 'Priya Sharma'
        assert response.data['story'] == 'Priya wants to become a doctor.'
        assert response.data['needs'][0]['title'] == 'Annual tuition'
        assert 'submitter_email' not in response.data

    def test_pending_student_not_found(self, api_client, pending_student):
        url = reverse('students:student-detail', kwargs={'slug': pending_student.slug})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_unknown_slug(self, api_client):
        url = reverse('students:student-detail', kwargs={'slug': 'nobody'})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestStudentNeeds:
    """Tests for /api/students/<slug>/needs/"""

    def test_needs_ordered_by_priority(self, api_client, approved_student):
        for title, priority in [('Shoes', NeedPriority.LOW), ('Fees', NeedPriority.URGENT),
                                ('Books', NeedPriority.MEDIUM), ('Bus', NeedPriority.HIGH)]:
            StudentNeed.objects.create(
                student=approved_student,
                title=title,
                amount_needed=Decimal('100.00'),
                priority=priority,
            )

        url = reverse('students:student-needs', kwargs={'slug': approved_student.slug})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [n['title'] for n in response.data] == ['Fees', 'Bus', 'Books', 'Shoes']

    def test_admin_adds_need(self, admin_api_client, approved_student):
        url = reverse('students:student-needs', kwargs={'slug': approved_student.slug})
        response = admin_api_client.post(url, {
            'category': 'books',
            'title': 'Textbooks',
            'amount_needed': '3500.00',
            'amount_raised': '3500.00',
            'priority': 'urgent',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        need = StudentNeed.objects.get(id=response.data['id'])
        assert need.amount_raised == 0
        assert need.student == approved_student

    def test_donor_cannot_add_need(self, authenticated_client, approved_student):
        url = reverse('students:student-needs', kwargs={'slug': approved_student.slug})
        response = authenticated_client.post(url, {
            'title': 'Textbooks',
            'amount_needed': '3500.00',
        }, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not StudentNeed.objects.exists()


@pytest.mark.django_db
class TestStudentUpdates:
    """Tests for /api/students/<slug>/updates/"""

    def test_only_public_updates_listed(self, api_client, approved_student):
        ImpactUpdate.objects.create(student=approved_student, title='Passed exams', content='Top marks')
        ImpactUpdate.objects.create(student=approved_student, title='Internal', content='x', is_public=False)

        url = reverse('students:student-updates', kwargs={'slug': approved_student.slug})
        response = api_client.get(url)

        assert [u['title'] for u in response.data] == ['Passed exams']

    def test_admin_posts_update(self, admin_api_client, platform_admin, approved_student):
        url = reverse('students:student-updates', kwargs={'slug': approved_student.slug})
        response = admin_api_client.post(url, {
            'title': 'Thank you!',
            'content': 'Priya thanks all her donors.',
            'type': 'thank_you',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        update = ImpactUpdate.objects.get(id=response.data['id'])
        assert update.created_by == platform_admin

    def test_anonymous_cannot_post_update(self, api_client, approved_student):
        url = reverse('students:student-updates', kwargs={'slug': approved_student.slug})
        response = api_client.post(url, {'title': 'x', 'content': 'y'}, format='json')

        assert response.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN)


@pytest.mark.django_db
class TestStudentDonations:
    """Tests for GET /api/students/<slug>/donations/"""

    def test_completed_donations_only(self, api_client, approved_student, donor):
        Donation.objects.create(
            student=approved_student,
            student_name=approved_student.full_name,
            donor=donor,
            donor_name='Test Donor',
            amount=Decimal('500.00'),
            currency='INR',
            net_amount=Decimal('500.00'),
            status=DonationStatus.COMPLETED,
            message='Keep going!',
        )
        Donation.objects.create(
            student=approved_student,
            student_name=approved_student.full_name,
            amount=Decimal('100.00'),
            currency='INR',
            net_amount=Decimal('100.00'),
            status=DonationStatus.PENDING,
        )

        url = reverse('students:student-donations', kwargs={'slug': approved_student.slug})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['donor_name'] == 'Test Donor'
        assert response.data[0]['message'] == 'Keep going!'

    def test_anonymous_donation_hides_name(self, api_client, approved_student, donor):
        Donation.objects.create(
            student=approved_student,
            student_name=approved_student.full_name,
            donor=donor,
            donor_name='Test Donor',
            is_anonymous=True,
            amount=Decimal('500.00'),
            currency='INR',
            net_amount=Decimal('500.00'),
            status=DonationStatus.COMPLETED,
        )

        url = reverse('students:student-donations', kwargs={'slug': approved_student.slug})
        response = api_client.get(url)

        assert response.data[0]['donor_name'] == 'Anonymous Donor'


# =============================================================================
# Submission & Review Tests
# =============================================================================

@pytest.mark.django_db
class TestStudentSubmission:
    """Tests for POST /api/students/submit/"""

    def test_submit_creates_pending_student(self, authenticated_client, submission_data):
        response = authenticated_client.post(
            reverse('students:student-submit'), submission_data, format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['message'] == 'Student submitted for review'
        student = Student.objects.get(id=response.data['student']['id'])
        assert student.status == StudentStatus.PENDING
        assert student.slug == 'kavya-reddy'
        assert student.total_raised == 0
        assert student.is_fully_funded is False

    def test_submit_ignores_status(self, authenticated_client, submission_data):
        submission_data['status'] = 'approved'
        response = authenticated_client.post(
            reverse('students:student-submit'), submission_data, format='json'
        )

        assert response.data['student']['status'] == StudentStatus.PENDING

    def test_submit_requires_authentication(self, api_client, submission_data):
        response = api_client.post(reverse('students:student-submit'), submission_data, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_submit_missing_submitter(self, authenticated_client, submission_data):
        del submission_data['submitter_email']
        response = authenticated_client.post(
            reverse('students:student-submit'), submission_data, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'submitter_email' in response.data


@pytest.mark.django_db
class TestPendingStudents:
    """Tests for GET /api/students/pending/"""

    def test_admin_sees_pending_oldest_first(self, admin_api_client, make_student):
        first = make_student(status=StudentStatus.PENDING)
        second = make_student(status=StudentStatus.PENDING)
        make_student()

        response = admin_api_client.get(reverse('students:student-pending'))

        assert response.status_code == status.HTTP_200_OK
        assert [s['slug'] for s in response.data] == [first.slug, second.slug]
        assert 'submitter_email' in response.data[0]

    def test_donor_forbidden(self, authenticated_client):
        response = authenticated_client.get(reverse('students:student-pending'))

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestStudentReview:
    """Tests for POST /api/students/<id>/review/"""

    def test_approve(self, admin_api_client, platform_admin, pending_student):
        url = reverse('students:student-review', kwargs={'pk': pending_student.id})
        response = admin_api_client.post(url, {'status': 'approved'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        pending_student.refresh_from_db()
        assert pending_student.status == StudentStatus.APPROVED
        assert pending_student.reviewed_by == platform_admin
        assert pending_student.reviewed_at is not None

    def test_reject_requires_reason(self, admin_api_client, pending_student):
        url = reverse('students:student-review', kwargs={'pk': pending_student.id})
        response = admin_api_client.post(url, {'status': 'rejected'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'rejection_reason' in response.data

    def test_reject_with_reason(self, admin_api_client, pending_student):
        url = reverse('students:student-review', kwargs={'pk': pending_student.id})
        response = admin_api_client.post(url, {
            'status': 'rejected',
            'rejection_reason': 'Could not verify enrollment',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        pending_student.refresh_from_db()
        assert pending_student.rejection_reason == 'Could not verify enrollment'

    def test_cannot_set_pending(self, admin_api_client, pending_student):
        url = reverse('students:student-review', kwargs={'pk': pending_student.id})
        response = admin_api_client.post(url, {'status': 'pending'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unknown_student(self, admin_api_client):
        url = reverse('students:student-review', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = admin_api_client.post(url, {'status': 'approved'}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_donor_forbidden(self, authenticated_client, pending_student):
        url = reverse('students:student-review', kwargs={'pk': pending_student.id})
        response = authenticated_client.post(url, {'status': 'approved'}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
