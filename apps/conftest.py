"""
앱 전체 테스트용 공통 fixture
"""
from decimal import Decimal

import pytest
from django.contrib.auth.models import User
from django.utils import timezone

from apps.accounts.tokens import issue_access_token
from apps.transactions.models import Expense, Income


@pytest.fixture
def test_user(db):
    """테스트용 사용자"""
    return User.objects.create_user(username='tester@example.com', email='tester@example.com', password='pass1234')


@pytest.fixture
def other_user(db):
    """다른 사용자 (권한 테스트용)"""
    return User.objects.create_user(username='other@example.com', email='other@example.com', password='pass1234')


@pytest.fixture
def auth_headers(test_user):
    """test_user의 Bearer 토큰 헤더"""
    return {'Authorization': f'Bearer {issue_access_token(test_user)}'}


@pytest.fixture
def other_headers(other_user):
    return {'Authorization': f'Bearer {issue_access_token(other_user)}'}


@pytest.fixture
def make_income(db):
    """수입 내역 생성 헬퍼"""
    def _make(user, amount='1000.00', date=None, source='월급', icon=''):
        return Income.objects.create(
            user=user,
            source=source,
            amount=Decimal(str(amount)),
            date=date or timezone.now(),
            icon=icon,
        )
    return _make


@pytest.fixture
def make_expense(db):
    """지출 내역 생성 헬퍼"""
    def _make(user, amount='1000.00', date=None, category='식비', icon=''):
        return Expense.objects.create(
            user=user,
            category=category,
            amount=Decimal(str(amount)),
            date=date or timezone.now(),
            icon=icon,
        )
    return _make
