"""
JWT 액세스 토큰 발급/검증

토큰 payload:
    {"id": <user pk>, "iat": 발급시각, "exp": 만료시각}
"""

import logging
from datetime import timedelta

import jwt
from django.conf import settings
from django.contrib.auth.models import User
from django.utils import timezone

logger = logging.getLogger(__name__)


class TokenError(Exception):
    """토큰이 없거나, 만료되었거나, 사용자를 찾을 수 없음"""


def issue_access_token(user):
    now = timezone.now()
    payload = {
        'id': user.pk,
        'iat': now,
        'exp': now + timedelta(hours=settings.JWT_ACCESS_TOKEN_HOURS),
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def get_user_from_token(token):
    """
    토큰을 검증하고 소유 사용자를 반환

    Raises:
        TokenError: 만료/위조/형식 오류 또는 비활성·삭제된 사용자
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise TokenError('토큰이 만료되었습니다.')
    except jwt.InvalidTokenError as e:
        logger.info(f"유효하지 않은 토큰: {e}")
        raise TokenError('유효하지 않은 토큰입니다.')

    user_id = payload.get('id')
    if user_id is None:
        raise TokenError('유효하지 않은 토큰입니다.')

    user = User.objects.filter(pk=user_id, is_active=True).select_related('profile').first()
    if user is None:
        raise TokenError('사용자를 찾을 수 없습니다.')
    return user
