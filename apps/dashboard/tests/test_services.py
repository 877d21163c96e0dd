from datetime import datetime, timedelta, timezone as dt_timezone

import pytest

from apps.dashboard.services import build_dashboard, recent_transactions, window_summary
from apps.transactions.models import Expense, Income

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=dt_timezone.utc)


@pytest.mark.django_db
class TestBuildDashboard:
    def test_no_records(self, test_user):
        """내역이 없으면 합계 0, 목록은 비어 있음"""
        data = build_dashboard(test_user, now=NOW)

        assert data == {
            'totalBalance': 0,
            'totalIncome': 0,
            'totalExpense': 0,
            'last60DaysIncome': {'total': 0, 'transactions': []},
            'last30DaysExpense': {'total': 0, 'transactions': []},
            'recentTransactions': [],
        }

    def test_totals_and_balance(self, test_user, make_income, make_expense):
        make_income(test_user, amount='600', date=NOW - timedelta(days=1))
        make_income(test_user, amount='400', date=NOW - timedelta(days=400))
        make_expense(test_user, amount='150', date=NOW - timedelta(days=2))
        make_expense(test_user, amount='250', date=NOW - timedelta(days=300))

        data = build_dashboard(test_user, now=NOW)

        assert data['totalIncome'] == 1000
        assert data['totalExpense'] == 400
        assert data['totalBalance'] == 600

    def test_balance_can_be_negative(self, test_user, make_income, make_expense):
        make_income(test_user, amount='100', date=NOW)
        make_expense(test_user, amount='250.50', date=NOW)

        data = build_dashboard(test_user, now=NOW)

        assert data['totalBalance'] == -150.5
        assert data['totalBalance'] == data['totalIncome'] - data['totalExpense']

    def test_balance_with_only_expense(self, test_user, make_expense):
        make_expense(test_user, amount='70', date=NOW)
        data = build_dashboard(test_user, now=NOW)
        assert data['totalIncome'] == 0
        assert data['totalBalance'] == -70

    def test_other_users_records_are_excluded(self, test_user, other_user, make_income, make_expense):
        make_income(other_user, amount='999', date=NOW)
        make_expense(other_user, amount='111', date=NOW)

        data = build_dashboard(test_user, now=NOW)

        assert data['totalIncome'] == 0
        assert data['totalExpense'] == 0
        assert data['recentTransactions'] == []

    def test_window_sizes(self, test_user, make_income, make_expense):
        """수입은 60일, 지출은 30일 창"""
        income_in = make_income(test_user, amount='10', date=NOW - timedelta(days=45))
        make_expense(test_user, amount='20', date=NOW - timedelta(days=45))

        data = build_dashboard(test_user, now=NOW)

        assert [tx['id'] for tx in data['last60DaysIncome']['transactions']] == [income_in.pk]
        assert data['last30DaysExpense']['transactions'] == []
        assert data['last30DaysExpense']['total'] == 0


@pytest.mark.django_db
class TestWindowSummary:
    def test_boundary_is_inclusive(self, test_user, make_income):
        """정확히 60일 전 내역은 포함, 1초 더 이전은 제외"""
        boundary = make_income(test_user, amount='5', date=NOW - timedelta(days=60))
        make_income(test_user, amount='7', date=NOW - timedelta(days=60, seconds=1))

        summary = window_summary(Income, test_user, 60, NOW)

        assert [tx['id'] for tx in summary['transactions']] == [boundary.pk]
        assert summary['total'] == 5

    def test_expense_boundary_is_inclusive(self, test_user, make_expense):
        boundary = make_expense(test_user, amount='3', date=NOW - timedelta(days=30))
        make_expense(test_user, amount='4', date=NOW - timedelta(days=30, seconds=1))

        summary = window_summary(Expense, test_user, 30, NOW)

        assert [tx['id'] for tx in summary['transactions']] == [boundary.pk]

    def test_sorted_latest_first_with_sum(self, test_user, make_income):
        a = make_income(test_user, amount='100.25', date=NOW - timedelta(days=20))
        b = make_income(test_user, amount='200.50', date=NOW - timedelta(days=1))
        c = make_income(test_user, amount='300', date=NOW - timedelta(days=10))

        summary = window_summary(Income, test_user, 60, NOW)

        assert [tx['id'] for tx in summary['transactions']] == [b.pk, c.pk, a.pk]
        assert summary['total'] == 600.75


@pytest.mark.django_db
class TestRecentTransactions:
    def test_merged_and_sorted(self, test_user, make_income, make_expense):
        i1 = make_income(test_user, date=NOW - timedelta(days=1))
        e1 = make_expense(test_user, date=NOW - timedelta(days=2))
        i2 = make_income(test_user, date=NOW - timedelta(days=3))
        e2 = make_expense(test_user, date=NOW - timedelta(days=4))

        result = recent_transactions(test_user, 5)

        assert [(tx['type'], tx['id']) for tx in result] == [
            ('income', i1.pk),
            ('expense', e1.pk),
            ('income', i2.pk),
            ('expense', e2.pk),
        ]

    def test_never_more_than_limit(self, test_user, make_income, make_expense):
        for day in range(7):
            make_income(test_user, date=NOW - timedelta(days=day, hours=1))
            make_expense(test_user, date=NOW - timedelta(days=day, hours=2))

        result = recent_transactions(test_user, 5)

        assert len(result) == 5
        dates = [tx['date'] for tx in result]
        assert dates == sorted(dates, reverse=True)

    def test_type_tag_and_label(self, test_user, make_income, make_expense):
        make_income(test_user, source='월급', date=NOW - timedelta(days=1))
        make_expense(test_user, category='식비', date=NOW - timedelta(days=2))

        income_tx, expense_tx = recent_transactions(test_user, 5)

        assert income_tx['type'] == 'income' and income_tx['source'] == '월급'
        assert expense_tx['type'] == 'expense' and expense_tx['category'] == '식비'

    def test_dominant_type_fills_all_slots(self, test_user, make_income, make_expense):
        """수입이 최근 활동을 독점하면 지출은 한 건도 들어가지 않음"""
        for hour in range(6):
            make_income(test_user, date=NOW - timedelta(hours=hour))
        make_expense(test_user, date=NOW - timedelta(days=5))

        result = recent_transactions(test_user, 5)

        assert {tx['type'] for tx in result} == {'income'}
