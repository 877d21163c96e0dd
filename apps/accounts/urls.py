from django.urls import path
from . import views

app_name = "accounts"

urlpatterns = [
    path("register", views.register, name="register"),
    path("login", views.login, name="login"),
    path("getUser", views.get_user, name="get_user"),
    path("upload-image", views.upload_image, name="upload_image"),
]
