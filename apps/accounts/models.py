"""
사용자 프로필 관리

Django 기본 User 모델을 확장하여 대시보드에 표시할 이름과 프로필 이미지를 저장합니다.
로그인 식별자는 이메일이며 User.username/User.email에 동일하게 저장됩니다.
"""
from django.db import models
from django.contrib.auth.models import User
from apps.core.models import TimeStampedModel


class Profile(TimeStampedModel):
    """사용자 프로필 (Django User 확장)"""

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='profile')
    full_name = models.CharField(max_length=100, blank=True)
    profile_image_url = models.CharField(max_length=500, blank=True)

    class Meta:
        db_table = 'profiles'

    def __str__(self):
        return f"{self.user.username} 프로필"
