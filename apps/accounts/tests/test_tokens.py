from datetime import timedelta

import jwt
import pytest
from django.conf import settings
from django.utils import timezone

from apps.accounts.tokens import TokenError, get_user_from_token, issue_access_token


def _encode(payload):
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


@pytest.mark.django_db
def test_issue_and_decode_token(test_user):
    """발급한 토큰으로 같은 사용자를 찾는지"""
    token = issue_access_token(test_user)
    assert get_user_from_token(token) == test_user


@pytest.mark.django_db
def test_token_payload_contains_user_id_and_expiry(test_user):
    token = issue_access_token(test_user)
    payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])

    assert payload['id'] == test_user.pk
    assert payload['exp'] - payload['iat'] == settings.JWT_ACCESS_TOKEN_HOURS * 3600


@pytest.mark.django_db
def test_expired_token(test_user):
    now = timezone.now()
    token = _encode({'id': test_user.pk, 'iat': now - timedelta(hours=2), 'exp': now - timedelta(hours=1)})

    with pytest.raises(TokenError, match='만료'):
        get_user_from_token(token)


@pytest.mark.django_db
def test_tampered_token(test_user):
    """다른 키로 서명된 토큰은 거부"""
    token = jwt.encode({'id': test_user.pk}, 'another-secret-key-that-is-long-enough', algorithm='HS256')

    with pytest.raises(TokenError, match='유효하지 않은'):
        get_user_from_token(token)


@pytest.mark.django_db
def test_garbage_token():
    with pytest.raises(TokenError):
        get_user_from_token('abc.def.ghi')


@pytest.mark.django_db
def test_token_without_user_id(test_user):
    token = _encode({'exp': timezone.now() + timedelta(hours=1)})

    with pytest.raises(TokenError, match='유효하지 않은'):
        get_user_from_token(token)


@pytest.mark.django_db
def test_token_for_deleted_user(test_user):
    token = issue_access_token(test_user)
    test_user.delete()

    with pytest.raises(TokenError, match='사용자를 찾을 수 없습니다'):
        get_user_from_token(token)


@pytest.mark.django_db
def test_token_for_inactive_user(test_user):
    token = issue_access_token(test_user)
    test_user.is_active = False
    test_user.save()

    with pytest.raises(TokenError):
        get_user_from_token(token)
