# Generated manually for donor accounts

import uuid
from decimal import Decimal
from django.db import migrations, models
import apps.accounts.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('auth', '0012_alter_user_first_name_max_length'),
    ]

    operations = [
        migrations.CreateModel(
            name='Donor',
            fields=[
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('is_superuser', models.BooleanField(default=False, help_text='Designates that this user has all permissions without explicitly assigning them.', verbose_name='superuser status')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('email', models.EmailField(db_index=True, max_length=255, unique=True)),
                ('display_name', models.CharField(blank=True, max_length=100)),
                ('photo_url', models.URLField(blank=True, max_length=500)),
                ('phone', models.CharField(blank=True, max_length=30)),
                ('address_line1', models.CharField(blank=True, max_length=200)),
                ('address_line2', models.CharField(blank=True, max_length=200)),
                ('city', models.CharField(blank=True, max_length=100)),
                ('state', models.CharField(blank=True, max_length=100)),
                ('postal_code', models.CharField(blank=True, max_length=20)),
                ('country', models.CharField(blank=True, max_length=100)),
                ('is_anonymous', models.BooleanField(default=False)),
                ('receive_updates', models.BooleanField(default=True)),
                ('receive_newsletter', models.BooleanField(default=False)),
                ('total_donated', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('donation_count', models.PositiveIntegerField(default=0)),
                ('stripe_customer_id', models.CharField(blank=True, max_length=100)),
                ('auth_provider', models.CharField(choices=[('email', 'Email & Password'), ('google', 'Google')], default='email', max_length=20)),
                ('role', models.CharField(choices=[('donor', 'Donor'), ('admin', 'Admin'), ('super_admin', 'Super Admin')], default='donor', max_length=20)),
                ('reset_token', models.CharField(blank=True, max_length=64, null=True)),
                ('is_active', models.BooleanField(default=True)),
                ('is_staff', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('last_login', models.DateTimeField(blank=True, null=True)),
                ('groups', models.ManyToManyField(blank=True, help_text='The groups this user belongs to. A user will get all permissions granted to each of their groups.', related_name='user_set', related_query_name='user', to='auth.group', verbose_name='groups')),
                ('user_permissions', models.ManyToManyField(blank=True, help_text='Specific permissions for this user.', related_name='user_set', related_query_name='user', to='auth.permission', verbose_name='user permissions')),
            ],
            options={
                'db_table': 'donors',
                'indexes': [
                    models.Index(fields=['email'], name='donors_email_idx'),
                    models.Index(fields=['role'], name='donors_role_idx'),
                    models.Index(fields=['created_at'], name='donors_created_idx'),
                ],
            },
            managers=[
                ('objects', apps.accounts.models.DonorManager()),
            ],
        ),
    ]
