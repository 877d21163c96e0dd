"""
User-Profile 자동 연동 시그널

Django Signal을 사용하여 User와 Profile을 자동으로 연결:
    1. 회원가입 시 → User 생성 → Profile 자동 생성
    2. User 정보 수정 시 → Profile도 자동 저장
"""

from django.db.models.signals import post_save
from django.dispatch import receiver
from django.contrib.auth.models import User
from .models import Profile

@receiver(post_save, sender=User)
def create_user_profile(sender, instance, created, **kwargs):
    """
    User 생성 시 Profile 자동 생성

    Example:
        user = User.objects.create_user(username='a@b.com')
        → Profile.objects.create(user=user) 자동 실행
    """
    if created:
        Profile.objects.get_or_create(user=instance)

@receiver(post_save, sender=User)
def save_user_profile(sender, instance, created, **kwargs):
    """User 저장 시 Profile도 함께 저장 (수정 시에만)"""
    if not created and hasattr(instance, 'profile'):
        instance.profile.save()
