from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
from decimal import Decimal
import uuid


class AuthProvider(models.TextChoices):
    EMAIL = 'email', 'Email & Password'
    GOOGLE = 'google', 'Google'


class DonorRole(models.TextChoices):
    DONOR = 'donor', 'Donor'
    ADMIN = 'admin', 'Admin'
    SUPER_ADMIN = 'super_admin', 'Super Admin'


DEFAULT_DISPLAY_NAME = 'Anonymous Donor'


class DonorManager(BaseUserManager):
    """Custom manager for email-based donor accounts."""

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('Email is required')

        email = self.normalize_email(email)
        extra_fields.setdefault('display_name', DEFAULT_DISPLAY_NAME)
        donor = self.model(email=email, **extra_fields)
        if password:
            donor.set_password(password)
        else:
            # Provider accounts (Google) never sign in with a password
            donor.set_unusable_password()
        donor.save(using=self._db)
        return donor

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('role', DonorRole.SUPER_ADMIN)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True')

        return self.create_user(email, password, **extra_fields)


class Donor(AbstractBaseUser, PermissionsMixin):
    """Donor account and profile."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True, max_length=255, db_index=True)
    display_name = models.CharField(max_length=100, blank=True)
    photo_url = models.URLField(max_length=500, blank=True)
    phone = models.CharField(max_length=30, blank=True)

    # Mailing address (for tax receipts)
    address_line1 = models.CharField(max_length=200, blank=True)
    address_line2 = models.CharField(max_length=200, blank=True)
    city = models.CharField(max_length=100, blank=True)
    state = models.CharField(max_length=100, blank=True)
    postal_code = models.CharField(max_length=20, blank=True)
    country = models.CharField(max_length=100, blank=True)

    # Preferences
    is_anonymous = models.BooleanField(default=False)
    receive_updates = models.BooleanField(default=True)
    receive_newsletter = models.BooleanField(default=False)

    # Giving totals (maintained by donation completion)
    total_donated = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    donation_count = models.PositiveIntegerField(default=0)
    students_supported = models.ManyToManyField(
        'students.Student',
        blank=True,
        related_name='supporters'
    )
    stripe_customer_id = models.CharField(max_length=100, blank=True)

    # Identity
    auth_provider = models.CharField(max_length=20, choices=AuthProvider.choices, default=AuthProvider.EMAIL)
    role = models.CharField(max_length=20, choices=DonorRole.choices, default=DonorRole.DONOR)
    reset_token = models.CharField(max_length=64, blank=True, null=True)

    # Permissions
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    last_login = models.DateTimeField(null=True, blank=True)

    objects = DonorManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    class Meta:
        db_table = 'donors'
        indexes = [
            models.Index(fields=['email'], name='donors_email_idx'),
            models.Index(fields=['role'], name='donors_role_idx'),
            models.Index(fields=['created_at'], name='donors_created_idx'),
        ]

    def __str__(self):
        return self.email

    def get_display_name(self):
        """Return display name or email prefix."""
        return self.display_name or self.email.split('@')[0]

    @property
    def is_platform_admin(self):
        return self.role in (DonorRole.ADMIN, DonorRole.SUPER_ADMIN)

    @property
    def has_address(self):
        return bool(self.address_line1 and self.city and self.country)
