"""
대시보드 집계 서비스

한 사용자의 수입/지출 데이터를 하나의 응답으로 조합합니다.

    totalIncome / totalExpense : 전체 기간 합계 (DB Sum 집계)
    totalBalance               : totalIncome - totalExpense (음수 가능)
    last60DaysIncome           : 최근 60일 수입 내역 + 합계
    last30DaysExpense          : 최근 30일 지출 내역 + 합계
    recentTransactions         : 최근 거래 5건 (수입/지출 통합)

최근 거래 선택 규칙:
    1. 수입 최신 5건, 지출 최신 5건을 각각 조회
    2. 합친 뒤 날짜 내림차순 재정렬
    3. 상위 5건만 반환
    한쪽 유형이 최근 활동을 독점해도 후보는 유형별 5건까지만 들어갑니다.
"""

from datetime import timedelta
from decimal import Decimal

from django.conf import settings
from django.utils import timezone

from apps.transactions.models import Expense, Income
from apps.transactions.serializers import serialize_entry, to_number


def window_summary(model, user, days, now):
    """
    최근 N일 내역과 합계

    date >= now - N일 인 내역만 포함 (경계값 포함)
    """
    start = now - timedelta(days=days)
    entries = list(model.objects.for_user(user).since(start).latest_first())
    total = sum((entry.amount for entry in entries), Decimal('0'))
    return {
        'total': to_number(total),
        'transactions': [serialize_entry(entry) for entry in entries],
    }


def recent_transactions(user, limit):
    candidates = []
    for model in (Income, Expense):
        candidates.extend(model.objects.for_user(user).latest_first()[:limit])

    # 같은 날짜면 수입이 앞 (안정 정렬)
    merged = sorted(candidates, key=lambda entry: entry.date, reverse=True)
    return [serialize_entry(entry, with_type=True) for entry in merged[:limit]]


def build_dashboard(user, now=None):
    """사용자 대시보드 응답 생성 (now 미지정 시 요청 시각 기준)"""
    now = now or timezone.now()

    total_income = Income.objects.for_user(user).total_amount()
    total_expense = Expense.objects.for_user(user).total_amount()

    return {
        'totalBalance': to_number(total_income - total_expense),
        'totalIncome': to_number(total_income),
        'totalExpense': to_number(total_expense),
        'last60DaysIncome': window_summary(
            Income, user, settings.DASHBOARD_INCOME_WINDOW_DAYS, now
        ),
        'last30DaysExpense': window_summary(
            Expense, user, settings.DASHBOARD_EXPENSE_WINDOW_DAYS, now
        ),
        'recentTransactions': recent_transactions(user, settings.DASHBOARD_RECENT_LIMIT),
    }
