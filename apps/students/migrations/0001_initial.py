# Generated manually for student listings

import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('accounts', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Student',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('first_name', models.CharField(max_length=100)),
                ('last_name', models.CharField(max_length=100)),
                ('date_of_birth', models.DateField(blank=True, null=True)),
                ('gender', models.CharField(choices=[('male', 'Male'), ('female', 'Female'), ('other', 'Other')], default='other', max_length=10)),
                ('school_name', models.CharField(db_index=True, max_length=200)),
                ('school_type', models.CharField(choices=[('primary', 'Primary School'), ('secondary', 'Secondary School'), ('high_school', 'High School'), ('college', 'College')], default='secondary', max_length=20)),
                ('school_grade', models.CharField(blank=True, max_length=50)),
                ('school_address', models.CharField(blank=True, max_length=300)),
                ('school_city', models.CharField(blank=True, max_length=100)),
                ('school_state', models.CharField(blank=True, max_length=100)),
                ('school_country', models.CharField(blank=True, max_length=100)),
                ('photo_url', models.URLField(blank=True, max_length=500)),
                ('additional_photos', models.JSONField(blank=True, default=list)),
                ('video_url', models.URLField(blank=True, max_length=500)),
                ('story', models.TextField(blank=True)),
                ('family_background', models.TextField(blank=True)),
                ('academic_performance', models.TextField(blank=True)),
                ('aspirations', models.TextField(blank=True)),
                ('status', models.CharField(choices=[('pending', 'Pending Review'), ('approved', 'Approved'), ('rejected', 'Rejected'), ('archived', 'Archived')], default='pending', max_length=20)),
                ('submitted_at', models.DateTimeField(auto_now_add=True)),
                ('reviewed_at', models.DateTimeField(blank=True, null=True)),
                ('rejection_reason', models.TextField(blank=True)),
                ('submitter_name', models.CharField(max_length=200)),
                ('submitter_email', models.EmailField(max_length=255)),
                ('submitter_phone', models.CharField(blank=True, max_length=30)),
                ('submitter_relationship', models.CharField(choices=[('teacher', 'Teacher'), ('principal', 'Principal'), ('ngo_worker', 'NGO Worker'), ('family', 'Family'), ('community_member', 'Community Member')], default='teacher', max_length=30)),
                ('submitter_organization', models.CharField(blank=True, max_length=200)),
                ('total_needed', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12, validators=[MinValueValidator(Decimal('0.00'))])),
                ('total_raised', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('is_fully_funded', models.BooleanField(default=False)),
                ('funding_deadline', models.DateField(blank=True, null=True)),
                ('slug', models.SlugField(max_length=220, unique=True)),
                ('featured', models.BooleanField(default=False)),
                ('priority', models.IntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('reviewed_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='reviewed_students', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'students',
                'ordering': ['-priority', '-created_at'],
                'indexes': [
                    models.Index(fields=['status', '-priority', '-created_at'], name='students_listing_idx'),
                    models.Index(fields=['status', 'featured'], name='students_featured_idx'),
                    models.Index(fields=['status', 'submitted_at'], name='students_pending_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='StudentNeed',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('category', models.CharField(choices=[('tuition', 'Tuition Fees'), ('books', 'Books & Materials'), ('uniforms', 'Uniforms'), ('supplies', 'School Supplies'), ('transportation', 'Transportation'), ('meals', 'Meals'), ('medical', 'Medical'), ('other', 'Other Needs')], default='other', max_length=20)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('amount_needed', models.DecimalField(decimal_places=2, max_digits=12, validators=[MinValueValidator(Decimal('0.01'))])),
                ('amount_raised', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('priority', models.CharField(choices=[('urgent', 'Urgent'), ('high', 'High'), ('medium', 'Medium'), ('low', 'Low')], default='medium', max_length=10)),
                ('period', models.CharField(choices=[('one_time', 'One Time'), ('monthly', 'Monthly'), ('quarterly', 'Quarterly'), ('yearly', 'Yearly')], default='one_time', max_length=20)),
                ('start_date', models.DateField(blank=True, null=True)),
                ('end_date', models.DateField(blank=True, null=True)),
                ('status', models.CharField(choices=[('active', 'Active'), ('fulfilled', 'Fulfilled'), ('cancelled', 'Cancelled')], default='active', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('student', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='needs', to='students.student')),
            ],
            options={
                'db_table': 'student_needs',
                'indexes': [
                    models.Index(fields=['student', 'status'], name='needs_student_status_idx'),
                    models.Index(fields=['category', 'status'], name='needs_category_status_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ImpactUpdate',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('content', models.TextField()),
                ('media_urls', models.JSONField(blank=True, default=list)),
                ('type', models.CharField(choices=[('progress', 'Progress'), ('achievement', 'Achievement'), ('thank_you', 'Thank You'), ('milestone', 'Milestone')], default='progress', max_length=20)),
                ('is_public', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='impact_updates', to=settings.AUTH_USER_MODEL)),
                ('student', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='updates', to='students.student')),
            ],
            options={
                'db_table': 'impact_updates',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['student', 'is_public', '-created_at'], name='updates_student_public_idx'),
                ],
            },
        ),
    ]
