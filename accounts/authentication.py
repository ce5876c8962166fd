import logging
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication
from .models import Account
from .tokens import InvalidToken, verify_token

# 로거 설정
logger = logging.getLogger('complaints')

class AccountJWTAuthentication(JWTAuthentication):
    """
    Authorization: Bearer <token> 헤더로 계정을 확인한다.
    헤더가 없으면 None을 반환하고, 권한 클래스에서 401로 처리된다.
    """

    def authenticate(self, request):
        header = self.get_header(request)
        if header is None:
            return None

        raw_token = self.get_raw_token(header)
        if raw_token is None:
            return None

        try:
            claims = verify_token(raw_token)
        except InvalidToken as e:
            logger.info(f"authentication - Token verification failed: {e}")
            raise AuthenticationFailed('Token is not valid.')

        account = self.get_account(claims)
        return account, claims

    def get_account(self, claims):
        try:
            account = Account.objects.get(pk=claims.subject_id)
        except (Account.DoesNotExist, ValueError):
            logger.info(f"authentication - No account found with id: {claims.subject_id}")
            raise AuthenticationFailed('Token is invalid or user is inactive.')

        if not account.is_active:
            logger.info(f"authentication - Inactive account tried to authenticate: {account.pk}")
            raise AuthenticationFailed('Token is invalid or user is inactive.')
        return account
