from django.urls import path
from . import views

app_name = 'transactions'

INCOME = {'kind': 'income'}
EXPENSE = {'kind': 'expense'}

urlpatterns = [
    # Income
    path('income/add', views.entry_add, INCOME, name='income_add'),
    path('income/get', views.entry_list, INCOME, name='income_list'),
    path('income/download', views.entry_download, INCOME, name='income_download'),
    path('income/<int:pk>', views.entry_delete, INCOME, name='income_delete'),

    # Expense
    path('expense/add', views.entry_add, EXPENSE, name='expense_add'),
    path('expense/get', views.entry_list, EXPENSE, name='expense_list'),
    path('expense/download', views.entry_download, EXPENSE, name='expense_download'),
    path('expense/<int:pk>', views.entry_delete, EXPENSE, name='expense_delete'),
]
