from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Sum

from apps.core.models import UserOwnedModel


class LedgerEntryQuerySet(models.QuerySet):
    """수입/지출 공용 QuerySet (헬퍼 메서드)"""
    def for_user(self, user): return self.filter(user=user)
    def since(self, start): return self.filter(date__gte=start)
    def latest_first(self): return self.order_by('-date')

    def total_amount(self):
        """금액 합계 (내역이 없으면 0)"""
        return self.aggregate(total=Sum('amount'))['total'] or Decimal('0')


class LedgerEntry(UserOwnedModel):
    """
    수입/지출 공통 추상 모델 (장부 항목)

    두 모델은 라벨 필드 이름만 다릅니다.
        Income  → source   (수입원)
        Expense → category (지출 카테고리)

    Attributes:
        KIND: 'income' 또는 'expense' (대시보드 type 구분값)
        LABEL_FIELD: 라벨 필드 이름
    """
    KIND = None
    LABEL_FIELD = None

    icon = models.CharField(max_length=255, blank=True)
    amount = models.DecimalField(max_digits=15, decimal_places=2, validators=[MinValueValidator(Decimal('0.01'))])
    date = models.DateTimeField(db_index=True)

    objects = LedgerEntryQuerySet.as_manager()

    class Meta:
        abstract = True
        ordering = ['-date']

    def __str__(self):
        return f"[{self._meta.verbose_name}] {self.label} {self.amount:,.2f} ({self.date.date()})"

    @property
    def label(self):
        return getattr(self, self.LABEL_FIELD)

    def save(self, *args, **kwargs):
        # 폼을 거치지 않는 생성 경로에서도 금액/라벨/날짜 검증
        self.full_clean()
        super().save(*args, **kwargs)


class Income(LedgerEntry):
    """수입 내역"""
    KIND = 'income'
    LABEL_FIELD = 'source'

    source = models.CharField(max_length=100, verbose_name='수입원')

    class Meta(LedgerEntry.Meta):
        db_table = 'incomes'
        verbose_name = '수입'
        verbose_name_plural = '수입'
        indexes = [
            models.Index(fields=['user', '-date'], name='income_user_date_idx'),
        ]
        constraints = [
            models.CheckConstraint(condition=models.Q(amount__gt=0), name='income_amount_positive'),
        ]


class Expense(LedgerEntry):
    """지출 내역"""
    KIND = 'expense'
    LABEL_FIELD = 'category'

    category = models.CharField(max_length=100, verbose_name='카테고리')

    class Meta(LedgerEntry.Meta):
        db_table = 'expenses'
        verbose_name = '지출'
        verbose_name_plural = '지출'
        indexes = [
            models.Index(fields=['user', '-date'], name='expense_user_date_idx'),
        ]
        constraints = [
            models.CheckConstraint(condition=models.Q(amount__gt=0), name='expense_amount_positive'),
        ]


LEDGER_MODELS = {
    Income.KIND: Income,
    Expense.KIND: Expense,
}
