from rest_framework import serializers
from .models import Account


# 응답에 사용하는 기본 사용자 정보
class AccountSerializer(serializers.ModelSerializer):
    class Meta:
        model = Account
        fields = ['id', 'name', 'email', 'role']
        read_only_fields = fields


# 관리자용 사용자 목록 (활성 상태, 가입일 포함)
class AccountDetailSerializer(serializers.ModelSerializer):
    isActive = serializers.BooleanField(source='is_active', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Account
        fields = ['id', 'name', 'email', 'role', 'isActive', 'createdAt']
        read_only_fields = fields


# 민원, 메모 작성자 표시용
class AccountSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Account
        fields = ['id', 'name', 'email']
        read_only_fields = fields


# 회원가입 요청 시리얼라이저
class RegisterSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6, max_length=128, trim_whitespace=False)


# 관리자가 기술자/관리자 계정을 만들 때 사용하는 시리얼라이저
class StaffCreateSerializer(RegisterSerializer):
    # 역할 검증은 AccountManager.create_staff 에서 처리
    role = serializers.CharField()


# 로그인 요청에 사용하는 시리얼라이저
class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(trim_whitespace=False)
