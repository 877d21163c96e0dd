def serialize_user(user):
    """프론트엔드가 사용하는 사용자 표현 (비밀번호 제외)"""
    profile = getattr(user, 'profile', None)
    return {
        'id': user.pk,
        'fullName': profile.full_name if profile else '',
        'email': user.email,
        'profileImageUrl': profile.profile_image_url if profile else '',
        'createdAt': user.date_joined.isoformat(),
    }
