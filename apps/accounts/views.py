import logging

from django.core.files.storage import default_storage
from django.db import IntegrityError
from django.http import JsonResponse

from apps.core.api import api_view, json_error, parse_json_body
from .decorators import token_required
from .forms import LoginForm, ProfileImageUploadForm, RegisterForm
from .serializers import serialize_user
from .tokens import issue_access_token

logger = logging.getLogger(__name__)


def _auth_response(user, status=200):
    return JsonResponse({
        'id': user.pk,
        'user': serialize_user(user),
        'token': issue_access_token(user),
    }, status=status)


@api_view(['POST'])
def register(request):
    """
    회원가입
    - 가입 즉시 토큰 발급
    - Profile 자동 생성 (signals.py에서 처리)
    """
    payload = parse_json_body(request)
    form = RegisterForm(data={
        'full_name': payload.get('fullName'),
        'email': payload.get('email'),
        'password': payload.get('password'),
        'profile_image_url': payload.get('profileImageUrl'),
    })
    if not form.is_valid():
        return json_error('입력 정보를 확인해주세요.', status=400, errors=form.errors)

    try:
        user = form.save()
    except IntegrityError as e:
        # 동시 가입으로 중복 검증을 통과한 경우
        logger.warning(f"회원가입 실패 (중복 데이터): {e}")
        return json_error('이미 사용 중인 이메일입니다.', status=400)

    logger.info(f"신규 회원가입: {user.email} (ID: {user.id})")
    return _auth_response(user, status=201)


@api_view(['POST'])
def login(request):
    payload = parse_json_body(request)
    form = LoginForm(data={
        'email': payload.get('email'),
        'password': payload.get('password'),
    })
    if not form.is_valid():
        return json_error('이메일과 비밀번호를 입력해주세요.', status=400, errors=form.errors)

    if form.user is None:
        logger.info(f"로그인 실패: {form.cleaned_data['email']}")
        return json_error('이메일 또는 비밀번호가 올바르지 않습니다.', status=401)

    return _auth_response(form.user)


@api_view(['GET'])
@token_required
def get_user(request):
    return JsonResponse(serialize_user(request.user))


@api_view(['POST'])
def upload_image(request):
    """프로필 이미지 업로드 → 접근 가능한 절대 URL 반환"""
    if 'image' not in request.FILES:
        return json_error('업로드된 파일이 없습니다.', status=400)

    form = ProfileImageUploadForm(request.POST, request.FILES)
    if not form.is_valid():
        return json_error('파일 업로드에 실패했습니다. 파일 형식과 크기를 확인해주세요.', status=400, errors=form.errors)

    saved_name = form.save()
    image_url = request.build_absolute_uri(default_storage.url(saved_name))
    logger.info(f"프로필 이미지 업로드: {saved_name}")
    return JsonResponse({'imageUrl': image_url})
