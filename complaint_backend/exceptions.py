# exceptions.py
# API 오류 유형 정의
from rest_framework import status
from rest_framework.exceptions import APIException


class Conflict(APIException):
    """이미 사용 중인 이메일 등 중복 데이터"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Resource already exists.'
    default_code = 'conflict'


class InvalidArgument(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid argument.'
    default_code = 'invalid_argument'


class InvalidTarget(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid target.'
    default_code = 'invalid_target'


class InvalidCredentials(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid email or password'
    default_code = 'invalid_credentials'
