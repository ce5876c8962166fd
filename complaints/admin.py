from django.contrib import admin
from .models import Complaint, ComplaintNote


class ComplaintNoteInline(admin.TabularInline):
    model = ComplaintNote
    extra = 0
    fields = ('content', 'added_by', 'added_at')
    readonly_fields = ('added_by', 'added_at')

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Complaint)
class ComplaintAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'category', 'priority', 'status', 'created_by', 'assigned_to', 'created_at')
    list_filter = ('status', 'priority', 'category')
    search_fields = ('title', 'description', 'created_by__email', 'assigned_to__email')
    readonly_fields = ('created_by', 'resolved_at', 'created_at', 'updated_at')
    inlines = [ComplaintNoteInline]

    # 민원은 고객 API로만 등록하고 삭제하지 않는다
    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
