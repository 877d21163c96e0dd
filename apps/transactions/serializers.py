def to_number(value):
    """Decimal → float (JSON 숫자로 내보내기 위함)"""
    return float(value) if value is not None else 0


def serialize_entry(entry, with_type=False):
    """
    수입/지출 내역 JSON 표현

    with_type=True 이면 대시보드 최근 거래용 'type' 구분값 포함
    """
    data = {
        'id': entry.pk,
        'userId': entry.user_id,
        entry.LABEL_FIELD: entry.label,
        'amount': to_number(entry.amount),
        'date': entry.date.isoformat(),
        'icon': entry.icon,
        'createdAt': entry.created_at.isoformat(),
        'updatedAt': entry.updated_at.isoformat(),
    }
    if with_type:
        data['type'] = entry.KIND
    return data
