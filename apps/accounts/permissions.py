from rest_framework import permissions


class IsPlatformAdmin(permissions.BasePermission):
    """
    Permission: Donor must hold the admin or super_admin role.

    Admins review submitted student cases, record offline donations
    and manage uploaded media.
    """

    message = 'Only platform administrators can perform this action.'

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user
            and user.is_authenticated
            and getattr(user, 'is_platform_admin', False)
        )
