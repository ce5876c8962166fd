import math

from django.conf import settings

from .exceptions import InvalidArgument


def parse_positive_int(value, default, name):
    if value in (None, ''):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f'{name} must be a positive integer')
    if number < 1:
        raise InvalidArgument(f'{name} must be a positive integer')
    return number


def page_params(request):
    """쿼리스트링의 page, limit 값을 (page, limit) 으로 반환 (1부터 시작)"""
    page = parse_positive_int(request.query_params.get('page'), settings.DEFAULT_PAGE, 'page')
    limit = parse_positive_int(request.query_params.get('limit'), settings.DEFAULT_PAGE_SIZE, 'limit')
    # 한 페이지 최대 개수 제한
    return page, min(limit, settings.MAX_PAGE_SIZE)


def paginate(queryset, page, limit):
    """
    queryset의 한 페이지와 전체 개수, 전체 페이지 수를 반환한다.
    범위를 벗어난 페이지는 빈 목록이 된다.
    """
    total = queryset.count()
    offset = (page - 1) * limit
    items = list(queryset[offset:offset + limit]) if offset < total else []
    total_pages = math.ceil(total / limit)
    return items, total, total_pages
