import openpyxl
from io import BytesIO
from django.utils import timezone

XLSX_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'


def export_entries_to_excel(queryset):
    """
    수입/지출 내역을 3열 엑셀로 내보내기 (라벨, 금액, 날짜)

    요청마다 새 BytesIO에 작성하므로 디스크의 공용 파일을 쓰지 않습니다.
    동시에 여러 사용자가 내려받아도 서로의 파일이 섞이지 않음.
    """
    model = queryset.model
    label_field = model._meta.get_field(model.LABEL_FIELD)

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = f"{model._meta.verbose_name}내역"

    ws.append([str(label_field.verbose_name), '금액', '날짜'])

    for entry in queryset:
        ws.append([
            entry.label,
            float(entry.amount),  # Decimal을 float으로 변환 (엑셀 호환)
            timezone.localtime(entry.date).strftime('%Y-%m-%d'),
        ])

    output = BytesIO()
    wb.save(output)
    output.seek(0)
    return output
