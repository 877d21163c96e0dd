import logging

from django.conf import settings
from django.core.paginator import Paginator
from django.http import HttpResponse, JsonResponse

from apps.accounts.decorators import token_required
from apps.core.api import api_view, json_error, parse_json_body
from .forms import LEDGER_FORMS
from .models import LEDGER_MODELS
from .serializers import serialize_entry
from .utils import XLSX_CONTENT_TYPE, export_entries_to_excel

logger = logging.getLogger(__name__)


def _page_size(request):
    try:
        page_size = int(request.GET.get('page_size', settings.LEDGER_PAGE_SIZE))
    except (TypeError, ValueError):
        page_size = settings.LEDGER_PAGE_SIZE
    return max(1, min(page_size, settings.LEDGER_MAX_PAGE_SIZE))


# ============================================================
# 수입/지출 공용 (kind: 'income' | 'expense')
# ============================================================

@api_view(['POST'])
@token_required
def entry_add(request, kind):
    """내역 등록"""
    form_class = LEDGER_FORMS[kind]
    form = form_class(data=parse_json_body(request))
    if not form.is_valid():
        return json_error('입력 정보를 확인해주세요.', status=400, errors=form.errors)

    entry = form.save(commit=False)
    entry.user = request.user
    entry.save()

    logger.info(f"{entry._meta.verbose_name} 등록: user={request.user.pk}, id={entry.pk}, amount={entry.amount}")
    return JsonResponse(serialize_entry(entry), status=201)


@api_view(['GET'])
@token_required
def entry_list(request, kind):
    """내역 목록 (최신순, 페이지네이션)"""
    model = LEDGER_MODELS[kind]
    entries = model.objects.for_user(request.user).latest_first()

    paginator = Paginator(entries, _page_size(request))
    page_obj = paginator.get_page(request.GET.get('page'))

    return JsonResponse({
        'results': [serialize_entry(entry) for entry in page_obj],
        'pagination': {
            'page': page_obj.number,
            'pageSize': paginator.per_page,
            'totalPages': paginator.num_pages,
            'totalCount': paginator.count,
            'hasNext': page_obj.has_next(),
            'hasPrevious': page_obj.has_previous(),
        },
    })


@api_view(['DELETE'])
@token_required
def entry_delete(request, kind, pk):
    """내역 삭제 (본인 소유만)"""
    model = LEDGER_MODELS[kind]
    verbose_name = model._meta.verbose_name

    entry = model.objects.filter(pk=pk).first()
    if entry is None:
        return json_error(f'{verbose_name} 내역을 찾을 수 없습니다.', status=404)

    # 권한 체크
    if not entry.is_owner(request.user):
        logger.warning(f"타인 {verbose_name} 삭제 시도: user={request.user.pk}, id={pk}")
        return json_error('권한이 없습니다.', status=403)

    entry.delete()
    logger.info(f"{verbose_name} 삭제: user={request.user.pk}, id={pk}")
    return JsonResponse({'message': f'{verbose_name} 내역이 삭제되었습니다.'})


@api_view(['GET'])
@token_required
def entry_download(request, kind):
    """내역 전체를 엑셀로 다운로드"""
    model = LEDGER_MODELS[kind]
    queryset = model.objects.for_user(request.user).latest_first()

    excel_file = export_entries_to_excel(queryset)

    response = HttpResponse(excel_file.read(), content_type=XLSX_CONTENT_TYPE)
    response['Content-Disposition'] = f'attachment; filename="{kind}_details.xlsx"'
    logger.info(f"{model._meta.verbose_name} 엑셀 다운로드: user={request.user.pk}")
    return response
