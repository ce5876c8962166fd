# policies.py
# 민원 접근 정책 (역할 + 등록자/담당자 관계)
from rest_framework.exceptions import PermissionDenied

VIEW = 'view'
UPDATE_STATUS = 'update_status'
ADD_NOTE = 'add_note'
ASSIGN = 'assign'

ACTIONS = (VIEW, UPDATE_STATUS, ADD_NOTE, ASSIGN)


def can_access(actor, complaint, action):
    """
    관리자: 모든 민원에 모든 작업 가능
    기술자: 본인에게 배정된 민원 조회, 상태 변경, 메모 추가
    고객: 본인이 등록한 민원 조회만 가능
    """
    if action not in ACTIONS:
        raise ValueError(f"Unknown complaint action: {action}")

    if actor.is_admin:
        return True
    if action == ASSIGN:
        return False
    if actor.is_technician:
        return complaint.assigned_to_id is not None and complaint.assigned_to_id == actor.pk
    if actor.is_customer:
        return action == VIEW and complaint.created_by_id == actor.pk
    return False


def ensure_access(actor, complaint, action):
    if not can_access(actor, complaint, action):
        raise PermissionDenied('Access denied')
