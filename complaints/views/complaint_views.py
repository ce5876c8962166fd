# complaint_views.py
# 민원 등록, 조회, 기술자 배정, 상태 변경, 메모 추가, 통계
from django.db import transaction
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet
import logging

from accounts.models import Account, Role
from accounts.permissions import role_required
from complaint_backend.exceptions import InvalidArgument, InvalidTarget
from complaint_backend.pagination import page_params, paginate
from .. import analytics, policies
from ..models import Complaint
from ..serializers import (
    ComplaintSerializer,
    ComplaintCreateSerializer,
    ComplaintNoteSerializer,
    NoteCreateSerializer,
)

# 디버깅을 위한 로거 설정
logger = logging.getLogger('complaints')


class ComplaintViewSet(ViewSet):
    lookup_value_regex = r'\d+'

    def get_permissions(self):
        # 민원 등록은 고객만 가능
        if self.action == 'create':
            return [role_required(Role.CUSTOMER)()]
        return super().get_permissions()

    def get_complaint(self, pk):
        try:
            return Complaint.objects.with_related().get(pk=pk)
        except Complaint.DoesNotExist:
            raise NotFound('Complaint not found')

    def list(self, request):
        """역할별 민원 목록 (상태/우선순위 필터, 페이지네이션)"""
        page, limit = page_params(request)
        queryset = (
            Complaint.objects.visible_to(request.user)
            .filter_by(
                status=request.query_params.get('status'),
                priority=request.query_params.get('priority'),
            )
            .with_related()
        )
        complaints, total, total_pages = paginate(queryset, page, limit)

        return Response({
            'complaints': ComplaintSerializer(complaints, many=True).data,
            'totalPages': total_pages,
            'currentPage': page,
            'total': total,
        })

    def create(self, request):
        """민원 등록"""
        serializer = ComplaintCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        complaint = serializer.save(created_by=request.user)
        logger.info(f"Complaint {complaint.pk} created by {request.user.pk}")

        return Response({
            'message': 'Complaint created successfully',
            'complaint': ComplaintSerializer(complaint).data,
        }, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        """민원 상세 조회"""
        complaint = self.get_complaint(pk)
        policies.ensure_access(request.user, complaint, policies.VIEW)
        return Response({'complaint': ComplaintSerializer(complaint).data})

    @action(detail=True, methods=['put'], permission_classes=[role_required(Role.ADMIN)])
    def assign(self, request, pk=None):
        """기술자 배정 (상태는 처리 중으로 변경)"""
        technician_id = request.data.get('technicianId')

        with transaction.atomic():
            complaint = self.get_complaint(pk)
            policies.ensure_access(request.user, complaint, policies.ASSIGN)

            try:
                technician = Account.objects.get(pk=technician_id)
            except (Account.DoesNotExist, ValueError, TypeError):
                raise NotFound('Technician not found')

            if not technician.is_technician or not technician.is_active:
                raise InvalidTarget('Technician not found or inactive')

            complaint.assign_to(technician)

        logger.info(f"Complaint {complaint.pk} assigned to technician {technician.pk} by {request.user.pk}")
        return Response({
            'message': 'Complaint assigned successfully',
            'complaint': ComplaintSerializer(complaint).data,
        })

    @action(
        detail=True, methods=['put'], url_path='status',
        permission_classes=[role_required(Role.TECHNICIAN, Role.ADMIN)],
    )
    def update_status(self, request, pk=None):
        """민원 상태 변경"""
        new_status = request.data.get('status')
        if new_status not in Complaint.Status.values:
            raise InvalidArgument('Invalid status')

        with transaction.atomic():
            complaint = self.get_complaint(pk)
            policies.ensure_access(request.user, complaint, policies.UPDATE_STATUS)
            complaint.set_status(new_status)

        logger.info(f"Complaint {complaint.pk} status set to '{new_status}' by {request.user.pk}")
        return Response({
            'message': 'Complaint status updated successfully',
            'complaint': ComplaintSerializer(complaint).data,
        })

    @action(
        detail=True, methods=['post'],
        permission_classes=[role_required(Role.TECHNICIAN, Role.ADMIN)],
    )
    def notes(self, request, pk=None):
        """민원 메모 추가"""
        serializer = NoteCreateSerializer(data=request.data)

        with transaction.atomic():
            complaint = self.get_complaint(pk)
            policies.ensure_access(request.user, complaint, policies.ADD_NOTE)
            serializer.is_valid(raise_exception=True)
            note = complaint.add_note(request.user, serializer.validated_data['content'])

        return Response({
            'message': 'Note added successfully',
            'note': ComplaintNoteSerializer(note).data,
        })

    @action(
        detail=False, methods=['get'], url_path='analytics/dashboard',
        permission_classes=[role_required(Role.ADMIN)],
    )
    def dashboard(self, request):
        """관리자 대시보드 통계"""
        return Response(analytics.dashboard())
