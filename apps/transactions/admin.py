from django.contrib import admin
from django.utils.html import format_html
from .models import Income, Expense


class LedgerEntryAdmin(admin.ModelAdmin):
    """수입/지출 공통 관리 화면"""
    list_display = ['date', 'get_label', 'get_amount_display', 'user', 'created_at']
    date_hierarchy = 'date'
    list_select_related = ['user']
    search_fields = ['user__email']
    readonly_fields = ['created_at', 'updated_at']
    amount_color = 'black'

    @admin.display(description='구분')
    def get_label(self, obj):
        return obj.label

    @admin.display(description='금액', ordering='amount')
    def get_amount_display(self, obj):
        formatted = f"{obj.amount:,.2f}"
        return format_html('<span style="color:{};">{}</span>', self.amount_color, formatted)


@admin.register(Income)
class IncomeAdmin(LedgerEntryAdmin):
    search_fields = ['source', 'user__email']
    amount_color = 'blue'


@admin.register(Expense)
class ExpenseAdmin(LedgerEntryAdmin):
    list_filter = ['category']
    search_fields = ['category', 'user__email']
    amount_color = 'red'
