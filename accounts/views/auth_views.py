# auth_views.py
# 회원가입, 로그인, 현재 사용자 조회
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
import logging

from ..models import Account
from ..serializers import AccountSerializer, RegisterSerializer, LoginSerializer
from ..tokens import issue_token

# 디버깅을 위한 로거 설정
logger = logging.getLogger('complaints')


# 회원가입 API (고객 계정)
class RegisterView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        account = Account.objects.register(**serializer.validated_data)
        token = issue_token(account)
        logger.info(f"New customer registered: {account.pk}")

        return Response({
            'message': 'User registered successfully',
            'token': token,
            'user': AccountSerializer(account).data,
        }, status=status.HTTP_201_CREATED)


# 로그인 API 뷰
class LoginView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        account = Account.objects.authenticate_credentials(
            serializer.validated_data['email'],
            serializer.validated_data['password'],
        )
        token = issue_token(account)

        return Response({
            'message': 'Login successful',
            'token': token,
            'user': AccountSerializer(account).data,
        })


# 현재 로그인한 사용자 정보
class MeView(APIView):

    def get(self, request):
        return Response({'user': AccountSerializer(request.user).data})
