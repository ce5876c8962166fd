from rest_framework import serializers
from accounts.serializers import AccountSummarySerializer
from .models import Complaint, ComplaintNote


class ComplaintNoteSerializer(serializers.ModelSerializer):
    addedBy = AccountSummarySerializer(source='added_by', read_only=True)
    addedAt = serializers.DateTimeField(source='added_at', read_only=True)

    class Meta:
        model = ComplaintNote
        fields = ['id', 'content', 'addedBy', 'addedAt']
        read_only_fields = fields


class ComplaintSerializer(serializers.ModelSerializer):
    createdBy = AccountSummarySerializer(source='created_by', read_only=True)
    assignedTo = AccountSummarySerializer(source='assigned_to', read_only=True, allow_null=True)
    resolvedAt = serializers.DateTimeField(source='resolved_at', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)
    notes = ComplaintNoteSerializer(many=True, read_only=True)

    class Meta:
        model = Complaint
        fields = [
            'id', 'title', 'description', 'category', 'priority', 'status',
            'createdBy', 'assignedTo', 'resolvedAt', 'notes', 'createdAt', 'updatedAt',
        ]
        read_only_fields = fields


# 민원 등록 시 사용하는 시리얼라이저 (분류/우선순위는 기본값 사용 가능)
class ComplaintCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Complaint
        fields = ['title', 'description', 'category', 'priority']
        extra_kwargs = {
            'title': {'max_length': 200},
            'description': {'max_length': 2000},
        }


class NoteCreateSerializer(serializers.Serializer):
    content = serializers.CharField(max_length=1000)
