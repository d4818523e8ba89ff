# Generated manually for fundraising campaigns

import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('students', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Campaign',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('cover_image_url', models.URLField(blank=True, max_length=500)),
                ('goal_amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[MinValueValidator(Decimal('0.01'))])),
                ('raised_amount', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('donor_count', models.PositiveIntegerField(default=0)),
                ('start_date', models.DateTimeField()),
                ('end_date', models.DateTimeField()),
                ('is_active', models.BooleanField(default=True)),
                ('type', models.CharField(choices=[('general', 'General'), ('category', 'Need Category'), ('school', 'School'), ('region', 'Region')], default='general', max_length=20)),
                ('target_category', models.CharField(blank=True, max_length=20)),
                ('target_school', models.CharField(blank=True, max_length=200)),
                ('target_region', models.CharField(blank=True, max_length=100)),
                ('slug', models.SlugField(max_length=220, unique=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='campaigns_created', to=settings.AUTH_USER_MODEL)),
                ('featured_students', models.ManyToManyField(blank=True, related_name='campaigns', to='students.student')),
            ],
            options={
                'db_table': 'campaigns',
                'ordering': ['end_date'],
                'indexes': [
                    models.Index(fields=['is_active', 'end_date'], name='campaigns_active_idx'),
                ],
            },
        ),
    ]
