# tokens.py
# 세션 토큰 발급 및 검증 (사용자 ID, 역할, 만료 시간 포함)
from typing import NamedTuple

from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

from .models import Role

ROLE_CLAIM = 'role'


class InvalidToken(Exception):
    """서명 오류, 잘못된 payload, 만료된 토큰"""


class TokenClaims(NamedTuple):
    subject_id: str
    role: str


def issue_token(account, issued_at=None):
    """
    계정의 access 토큰을 발급한다.
    issued_at을 주면 그 시점을 기준으로 발급/만료 시간을 계산한다.
    """
    token = AccessToken.for_user(account)
    if issued_at is not None:
        token.set_iat(at_time=issued_at)
        token.set_exp(from_time=issued_at)
    token[ROLE_CLAIM] = account.role
    return str(token)


def verify_token(raw_token):
    try:
        token = AccessToken(raw_token)
    except TokenError as e:
        raise InvalidToken(str(e)) from e

    subject_id = token.get(api_settings.USER_ID_CLAIM)
    role = token.get(ROLE_CLAIM)
    if subject_id is None:
        raise InvalidToken('Token contained no recognizable user identification')
    if role not in Role.values:
        raise InvalidToken('Token contained no recognizable role')
    return TokenClaims(subject_id=str(subject_id), role=role)
