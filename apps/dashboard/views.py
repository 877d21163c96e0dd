from django.http import JsonResponse

from apps.accounts.decorators import token_required
from apps.core.api import api_view
from .services import build_dashboard


@api_view(['GET'])
@token_required
def dashboard(request):
    """대시보드 데이터 (합계, 최근 60일 수입, 최근 30일 지출, 최근 거래)"""
    return JsonResponse(build_dashboard(request.user))
