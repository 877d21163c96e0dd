import os
import uuid

from django import forms
from django.conf import settings
from django.contrib.auth import authenticate, password_validation
from django.contrib.auth.models import User
from django.core.files.storage import default_storage
from django.core.validators import FileExtensionValidator
from django.db import transaction
from django.utils import timezone


class RegisterForm(forms.Form):
    """
    회원가입 폼
    - 이름/이메일/비밀번호 필수
    - 이메일 중복 검증 (대소문자 무시)
    - 프로필 이미지는 업로드 API가 돌려준 URL (선택)
    """
    full_name = forms.CharField(label='이름', max_length=100)
    email = forms.EmailField(label='이메일')
    password = forms.CharField(label='비밀번호', strip=False)
    profile_image_url = forms.CharField(label='프로필 이미지', max_length=500, required=False)

    def clean_email(self):
        email = self.cleaned_data['email'].strip().lower()
        if User.objects.filter(username=email).exists():
            raise forms.ValidationError('이미 사용 중인 이메일입니다.')
        return email

    def clean_password(self):
        password = self.cleaned_data['password']
        password_validation.validate_password(password)
        return password

    @transaction.atomic
    def save(self):
        data = self.cleaned_data
        user = User.objects.create_user(
            username=data['email'],
            email=data['email'],
            password=data['password'],
        )
        # Profile은 signals.py에서 생성됨
        profile = user.profile
        profile.full_name = data['full_name']
        profile.profile_image_url = data.get('profile_image_url') or ''
        profile.save()
        return user


class LoginForm(forms.Form):
    email = forms.EmailField(label='이메일')
    password = forms.CharField(label='비밀번호', strip=False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.user = None

    def clean(self):
        cleaned_data = super().clean()
        email = cleaned_data.get('email')
        password = cleaned_data.get('password')
        if email and password:
            self.user = authenticate(username=email.strip().lower(), password=password)
        return cleaned_data


def profile_image_upload_path(filename):
    """
    고유한 파일명 생성

    원본: 내사진.png
    저장: profile_images/2026/10/a1b2c3d4e5f6.png
    """
    ext = os.path.splitext(filename)[1].lower()
    unique_filename = f"{uuid.uuid4().hex}{ext}"
    return f'profile_images/{timezone.now():%Y/%m}/{unique_filename}'


class ProfileImageUploadForm(forms.Form):
    """프로필 이미지 업로드 (회원가입 전에도 호출 가능)"""
    image = forms.FileField(
        label='이미지',
        validators=[FileExtensionValidator(allowed_extensions=settings.PROFILE_IMAGE_EXTENSIONS)],
    )

    def clean_image(self):
        image = self.cleaned_data['image']
        max_size = settings.PROFILE_IMAGE_MAX_SIZE
        if image.size > max_size:
            raise forms.ValidationError(f'파일 크기는 {max_size // (1024 * 1024)}MB를 초과할 수 없습니다')
        return image

    def save(self):
        """저장된 파일의 스토리지 경로를 반환"""
        image = self.cleaned_data['image']
        return default_storage.save(profile_image_upload_path(image.name), image)
