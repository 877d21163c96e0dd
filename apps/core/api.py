"""
JSON API 공통 헬퍼

- json_error: 일관된 에러 응답 ({"message": ..., "errors": ...})
- parse_json_body: 요청 본문 JSON 파싱
- api_view: CSRF 면제 + HTTP 메서드 제한 + 예상치 못한 예외를 500으로 변환
"""

import json
import logging
from functools import wraps

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = '서버 오류가 발생했습니다.'


class InvalidRequestBody(Exception):
    """요청 본문이 올바른 JSON 객체가 아님"""


def json_error(message, status=400, errors=None):
    body = {'message': message}
    if errors:
        body['errors'] = flatten_form_errors(errors)
    return JsonResponse(body, status=status)


def flatten_form_errors(errors):
    """form.errors(ErrorDict) → {필드: [메시지, ...]}"""
    if hasattr(errors, 'get_json_data'):
        return {
            field: [item['message'] for item in items]
            for field, items in errors.get_json_data().items()
        }
    return errors


def parse_json_body(request):
    """
    요청 본문을 dict로 변환

    - 빈 본문 → {}
    - 깨진 JSON 또는 객체가 아닌 값 → InvalidRequestBody
    """
    if not request.body:
        return {}
    try:
        data = json.loads(request.body)
    except (ValueError, UnicodeDecodeError) as e:
        raise InvalidRequestBody(str(e)) from e
    if not isinstance(data, dict):
        raise InvalidRequestBody('JSON 객체가 필요합니다')
    return data


def api_view(methods):
    """
    JSON API 뷰 데코레이터

    Example:
        @api_view(['GET'])
        @token_required
        def dashboard(request): ...

    뷰에서 처리하지 못한 예외는 로그로 남기고 500 응답으로 변환합니다.
    부분 응답은 없습니다.
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            try:
                return view_func(request, *args, **kwargs)
            except InvalidRequestBody as e:
                logger.warning(f"잘못된 요청 본문: {request.path} ({e})")
                return json_error('요청 본문이 올바른 JSON 형식이 아닙니다.', status=400)
            except Exception as e:
                logger.error(f"API 처리 중 예상치 못한 오류: {request.method} {request.path} ({e})", exc_info=True)
                return json_error(SERVER_ERROR_MESSAGE, status=500)
        return csrf_exempt(require_http_methods(methods)(wrapper))
    return decorator
