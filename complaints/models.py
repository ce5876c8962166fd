from django.conf import settings
from django.db import models
from django.utils import timezone

from complaint_backend.exceptions import InvalidArgument


class ComplaintQuerySet(models.QuerySet):
    def visible_to(self, account):
        """
        역할별 조회 범위
        고객: 본인이 등록한 민원, 기술자: 본인에게 배정된 민원, 관리자: 전체
        """
        if account.is_customer:
            return self.filter(created_by=account)
        if account.is_technician:
            return self.filter(assigned_to=account)
        if account.is_admin:
            return self
        return self.none()

    def filter_by(self, status=None, priority=None):
        # 'all' 또는 빈 값은 필터 없음
        queryset = self
        if status and status != 'all':
            queryset = queryset.filter(status=status)
        if priority and priority != 'all':
            queryset = queryset.filter(priority=priority)
        return queryset

    def with_related(self):
        return self.select_related('created_by', 'assigned_to').prefetch_related('notes__added_by')


class Complaint(models.Model):
    class Category(models.TextChoices):
        TECHNICAL = 'technical', 'Technical'
        BILLING = 'billing', 'Billing'
        SERVICE = 'service', 'Service'
        GENERAL = 'general', 'General'

    class Priority(models.TextChoices):
        LOW = 'low', 'Low'
        MEDIUM = 'medium', 'Medium'
        HIGH = 'high', 'High'
        URGENT = 'urgent', 'Urgent'

    class Status(models.TextChoices):
        OPEN = 'open', 'Open'
        IN_PROGRESS = 'in-progress', 'In progress'
        RESOLVED = 'resolved', 'Resolved'
        CLOSED = 'closed', 'Closed'

    # 이 상태로 바뀔 때 처리 완료 시각을 기록
    RESOLUTION_STATUSES = (Status.RESOLVED, Status.CLOSED)

    title = models.CharField(max_length=200)
    description = models.TextField(max_length=2000)
    category = models.CharField(max_length=20, choices=Category.choices, default=Category.GENERAL)
    priority = models.CharField(max_length=20, choices=Priority.choices, default=Priority.MEDIUM)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.OPEN)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='created_complaints',
        editable=False,
    )
    assigned_to = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='assigned_complaints',
        null=True,
        blank=True,
    )

    resolved_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ComplaintQuerySet.as_manager()

    class Meta:
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['status', '-created_at'], name='complaint_status_created_idx'),
            models.Index(fields=['assigned_to', 'status'], name='complaint_assignee_status_idx'),
            models.Index(fields=['created_by', '-created_at'], name='complaint_creator_created_idx'),
        ]

    def __str__(self):
        return f"#{self.pk} - {self.title}"

    def assign_to(self, technician):
        """기술자 배정. 이전 상태와 관계없이 처리 중으로 바뀐다."""
        self.assigned_to = technician
        self.status = self.Status.IN_PROGRESS
        self.save(update_fields=['assigned_to', 'status', 'updated_at'])

    def set_status(self, new_status):
        """
        상태 변경. 네 가지 상태 사이에서 자유롭게 바꿀 수 있다.
        resolved/closed 로 바뀌면 처리 완료 시각을 현재 시각으로 덮어쓴다.
        다시 open 으로 바뀌어도 처리 완료 시각은 지우지 않는다.
        """
        if new_status not in self.Status.values:
            raise InvalidArgument('Invalid status')

        self.status = new_status
        update_fields = ['status', 'updated_at']
        if new_status in self.RESOLUTION_STATUSES:
            self.resolved_at = timezone.now()
            update_fields.append('resolved_at')
        self.save(update_fields=update_fields)

    def add_note(self, author, content):
        note = self.notes.create(added_by=author, content=content)
        self.save(update_fields=['updated_at'])
        return note


class ComplaintNote(models.Model):
    complaint = models.ForeignKey(Complaint, on_delete=models.CASCADE, related_name='notes')
    content = models.TextField(max_length=1000)
    added_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='complaint_notes',
    )
    added_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['added_at', 'id']

    def __str__(self):
        return f"Note on #{self.complaint_id} by {self.added_by_id}"
