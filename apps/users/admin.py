"""
Admin for cat collectors.

Google logins create users without a password; their avatar and names are
filled in from the Google profile and shown read-only here.
"""
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.db.models import Count

from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ["email", "get_full_name", "cat_count", "has_google_account", "is_staff", "created_at"]
    list_filter = ["is_staff", "is_active", "created_at"]
    search_fields = ["email", "first_name", "last_name"]
    ordering = ["email"]
    readonly_fields = ["avatar_url", "created_at", "updated_at"]

    fieldsets = (
        (None, {"fields": ("email", "password")}),
        ("Google profile", {"fields": ("first_name", "last_name", "avatar_url")}),
        ("Permissions", {"fields": ("is_active", "is_staff", "is_superuser", "groups", "user_permissions")}),
        ("Important dates", {"fields": ("last_login", "date_joined", "created_at", "updated_at")}),
    )

    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": ("email", "password1", "password2"),
            },
        ),
    )

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(_cat_count=Count("cats", distinct=True))

    @admin.display(description="Cats", ordering="_cat_count")
    def cat_count(self, obj):
        return obj._cat_count

    @admin.display(description="Google", boolean=True)
    def has_google_account(self, obj):
        return obj.socialaccount_set.filter(provider="google").exists()
