from django.db.models.signals import post_save
from django.dispatch import receiver
from complaint_backend.utils import send_slack_notification  # Slack 알림 함수 import
from .models import Account, Role

@receiver(post_save, sender=Account)
def send_account_creation_notification(sender, instance, created, **kwargs):
    if not created:
        return
    if instance.role == Role.CUSTOMER:
        message = f"새로운 고객 {instance.email}가 가입했습니다!"
    else:
        message = f"새로운 {instance.get_role_display()} 계정 {instance.email}이 생성되었습니다."
    send_slack_notification(message)
