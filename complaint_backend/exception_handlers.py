# exception_handlers.py
# 모든 API 오류를 {"message": ...} 형태로 통일하는 예외 처리기
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler
import logging

# 디버깅을 위한 로거 설정
logger = logging.getLogger('complaints')


def first_error_message(detail):
    """ValidationError의 중첩된 detail에서 첫 번째 메시지를 꺼낸다."""
    if isinstance(detail, dict):
        for field, value in detail.items():
            message = first_error_message(value)
            if message:
                if field == 'non_field_errors':
                    return message
                return f'{field}: {message}'
        return None
    if isinstance(detail, (list, tuple)):
        for value in detail:
            message = first_error_message(value)
            if message:
                return message
        return None
    return str(detail) if detail is not None else None


def api_exception_handler(exc, context):
    """
    DRF 기본 처리기로 상태 코드를 정한 뒤 본문을 {"message": ...} 로 바꾼다.
    처리되지 않은 예외는 500으로 응답하고 메시지를 그대로 전달한다.
    """
    response = exception_handler(exc, context)
    view = context.get('view')
    view_name = view.__class__.__name__ if view is not None else 'unknown'

    if response is None:
        logger.error(f"Unhandled error in {view_name}: {exc}", exc_info=True)
        return Response({'message': str(exc) or 'Something went wrong!'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, ValidationError):
        body = {
            'message': first_error_message(response.data) or 'Validation failed',
            'errors': response.data,
        }
    elif isinstance(response.data, dict) and 'detail' in response.data:
        body = {'message': str(response.data['detail'])}
    else:
        body = {'message': first_error_message(response.data) or 'Request failed'}

    if response.status_code >= 500:
        logger.error(f"{view_name} failed with {response.status_code}: {body['message']}")
    else:
        logger.info(f"{view_name} rejected request with {response.status_code}: {body['message']}")

    response.data = body
    return response
