# user_views.py
# 관리자 전용 사용자 관리 (직원 계정 생성, 기술자 목록, 사용자 목록, 활성화 전환)
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet
import logging

from complaint_backend.pagination import page_params, paginate
from ..models import Account, Role
from ..permissions import role_required
from ..serializers import (
    AccountSerializer,
    AccountDetailSerializer,
    StaffCreateSerializer,
)

# 디버깅을 위한 로거 설정
logger = logging.getLogger('complaints')


class UserViewSet(ViewSet):
    permission_classes = [role_required(Role.ADMIN)]
    lookup_value_regex = r'\d+'

    def list(self, request):
        """활성 사용자 목록 (역할 필터, 페이지네이션)"""
        page, limit = page_params(request)
        queryset = Account.objects.active().with_role(request.query_params.get('role'))
        users, total, total_pages = paginate(queryset, page, limit)

        return Response({
            'users': AccountDetailSerializer(users, many=True).data,
            'totalPages': total_pages,
            'currentPage': page,
            'total': total,
        })

    @action(detail=False, methods=['post'], url_path='create')
    def create_staff(self, request):
        """기술자 또는 관리자 계정 생성"""
        serializer = StaffCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        account = Account.objects.create_staff(**serializer.validated_data)
        logger.info(f"Admin {request.user.pk} created {account.role} account {account.pk}")

        return Response({
            'message': 'User created successfully',
            'user': AccountSerializer(account).data,
        }, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['get'])
    def technicians(self, request):
        """배정 가능한 활성 기술자 목록"""
        technicians = Account.objects.technicians()
        return Response({'technicians': AccountDetailSerializer(technicians, many=True).data})

    @action(detail=True, methods=['put'], url_path='toggle-status')
    def toggle_status(self, request, pk=None):
        try:
            account = Account.objects.get(pk=pk)
        except Account.DoesNotExist:
            raise NotFound('User not found')

        is_active = account.toggle_active()
        logger.info(f"Admin {request.user.pk} set account {account.pk} active={is_active}")

        return Response({
            'message': f"User {'activated' if is_active else 'deactivated'} successfully",
            'user': AccountDetailSerializer(account).data,
        })
