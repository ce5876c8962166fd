# permissions.py
# 인증 여부 및 역할 기반 접근 제어
from rest_framework.exceptions import NotAuthenticated, PermissionDenied
from rest_framework.permissions import BasePermission


class Authenticated(BasePermission):
    """인증 게이트를 통과한 계정만 허용"""

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            raise NotAuthenticated('Access denied. No token provided.')
        return True


def role_required(*roles):
    """
    허용된 역할 목록으로 권한 클래스를 만든다.
    permission_classes=[role_required(Role.ADMIN)]
    """
    allowed = frozenset(getattr(role, 'value', role) for role in roles)

    class RoleRequired(Authenticated):
        allowed_roles = allowed

        def has_permission(self, request, view):
            user = request.user
            if not user or not user.is_authenticated:
                raise NotAuthenticated('User not authenticated')
            if user.role not in self.allowed_roles:
                raise PermissionDenied(f"Access denied. Role '{user.role}' is not authorized for this resource.")
            return True

    RoleRequired.__name__ = 'RoleRequired_' + '_'.join(sorted(allowed))
    return RoleRequired
