from django.db.models.signals import post_save
from django.dispatch import receiver
from complaint_backend.utils import send_slack_notification  # Slack 알림 함수 import
from .models import Complaint

@receiver(post_save, sender=Complaint)
def send_complaint_notification(sender, instance, created, update_fields=None, **kwargs):
    if created:
        message = (
            f"🔔 *새로운 민원 접수 알림!*\n"
            f"- *번호*: #{instance.pk}\n"
            f"- *제목*: {instance.title}\n"
            f"- *분류/우선순위*: {instance.category} / {instance.priority}\n"
            f"- *등록자*: {instance.created_by.email}\n"
        )
        send_slack_notification(message)
    elif update_fields and 'assigned_to' in update_fields and instance.assigned_to_id:
        message = f"민원 #{instance.pk} '{instance.title}'이(가) {instance.assigned_to.email}에게 배정되었습니다."
        send_slack_notification(message)
