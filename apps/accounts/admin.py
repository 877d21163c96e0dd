from django.contrib import admin
from .models import Profile

@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = [
        'user',
        'get_email',
        'full_name',
        'created_at',
    ]

    list_display_links = ['user', 'get_email']

    list_filter = [
        'created_at',
    ]

    search_fields = [
        'user__username',
        'user__email',
        'full_name',
    ]

    fieldsets = [
        ('기본 정보', {
            'fields': ('user', 'full_name', 'profile_image_url')
        }),
        ('타임스탬프', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    ]

    readonly_fields = ['created_at', 'updated_at']
    ordering = ['-created_at']

    @admin.display(description='이메일')
    def get_email(self, obj):
        return obj.user.email
