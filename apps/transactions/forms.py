from datetime import date, datetime
from decimal import Decimal

from django import forms

from .models import Expense, Income

REQUIRED_MESSAGE = '필수 항목입니다.'
POSITIVE_AMOUNT_MESSAGE = '금액은 0보다 커야 합니다.'


class TextField(forms.CharField):
    """문자열만 허용 (JSON 배열/객체/숫자를 str()로 저장하지 않음)"""
    default_error_messages = {'invalid': '문자열로 입력해주세요.'}

    def to_python(self, value):
        if value not in self.empty_values and not isinstance(value, str):
            raise forms.ValidationError(self.error_messages['invalid'], code='invalid')
        return super().to_python(value)


class DateTimeTextField(forms.DateTimeField):
    """날짜 문자열만 허용 (epoch 숫자, 배열, 객체는 형식 오류)"""

    def to_python(self, value):
        if value not in self.empty_values and not isinstance(value, (str, datetime, date)):
            raise forms.ValidationError(self.error_messages['invalid'], code='invalid')
        return super().to_python(value)


class LedgerEntryForm(forms.ModelForm):
    """
    수입/지출 공통 입력 검증

    - 라벨(수입원/카테고리), 금액, 날짜 필수
    - 금액은 0보다 커야 함 (0, 음수, 숫자가 아닌 값 거부)
    - 아이콘은 선택
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for name in ('amount', 'date', self._meta.model.LABEL_FIELD):
            self.fields[name].error_messages['required'] = REQUIRED_MESSAGE
        self.fields['amount'].error_messages['invalid'] = '금액은 숫자로 입력해주세요.'
        self.fields['amount'].error_messages['min_value'] = POSITIVE_AMOUNT_MESSAGE
        self.fields['date'].error_messages['invalid'] = '날짜 형식이 올바르지 않습니다.'

    def clean_amount(self):
        amount = self.cleaned_data.get('amount')
        if amount is not None and amount <= Decimal('0'):
            raise forms.ValidationError(POSITIVE_AMOUNT_MESSAGE)
        return amount


class IncomeForm(LedgerEntryForm):
    class Meta:
        model = Income
        fields = ['source', 'amount', 'date', 'icon']
        field_classes = {'source': TextField, 'date': DateTimeTextField, 'icon': TextField}


class ExpenseForm(LedgerEntryForm):
    class Meta:
        model = Expense
        fields = ['category', 'amount', 'date', 'icon']
        field_classes = {'category': TextField, 'date': DateTimeTextField, 'icon': TextField}


LEDGER_FORMS = {
    Income.KIND: IncomeForm,
    Expense.KIND: ExpenseForm,
}
