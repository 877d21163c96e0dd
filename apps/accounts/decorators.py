from functools import wraps

from apps.core.api import json_error
from .tokens import TokenError, get_user_from_token


def token_required(view_func):
    """
    Bearer 토큰 인증 데코레이터

    Authorization: Bearer <token> 헤더를 검증하고 request.user에 사용자를 연결합니다.
    헤더가 없거나 토큰이 유효하지 않으면 401.
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        scheme, _, token = request.headers.get('Authorization', '').partition(' ')
        token = token.strip()
        if scheme.lower() != 'bearer' or not token:
            return json_error('인증 토큰이 없습니다.', status=401)

        try:
            request.user = get_user_from_token(token)
        except TokenError as e:
            return json_error(str(e), status=401)

        return view_func(request, *args, **kwargs)
    return wrapper
