"""
Dashboard 앱은 자체 모델을 가지지 않습니다.
기존 모델(Income, Expense)의 데이터를 집계합니다.

주요 기능:
- 전체 수입/지출 합계와 잔액
- 최근 60일 수입, 최근 30일 지출
- 최근 거래 5건

모든 집계는 services.py에서 Django ORM으로 계산됩니다.
"""
