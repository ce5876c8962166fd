from django.contrib import admin
from .models import Account

@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = ('email', 'name', 'role', 'is_active', 'created_at')
    list_filter = ('role', 'is_active')
    search_fields = ('email', 'name')
    ordering = ('-created_at',)
    fields = ('name', 'email', 'password', 'role', 'is_active', 'is_staff', 'is_superuser')

    def save_model(self, request, obj, form, change):
        """
        새 비밀번호가 입력된 경우 해싱해서 저장합니다.
        """
        password = form.cleaned_data.get('password')
        if password and (not change or 'password' in form.changed_data):
            obj.set_password(password)
        obj.save()
