"""
Admin configuration for Cat Collector models.
"""
from django.contrib import admin

from .models import Cat, Feeding, Toy


class FeedingInline(admin.TabularInline):
    """Inline admin for a cat's feedings."""

    model = Feeding
    extra = 1


@admin.register(Cat)
class CatAdmin(admin.ModelAdmin):
    list_display = ["name", "breed", "age", "user", "created_at"]
    list_filter = ["breed", "created_at"]
    search_fields = ["name", "breed", "user__email"]
    filter_horizontal = ["toys"]
    inlines = [FeedingInline]


@admin.register(Feeding)
class FeedingAdmin(admin.ModelAdmin):
    list_display = ["cat", "date", "meal"]
    list_filter = ["meal", "date"]


@admin.register(Toy)
class ToyAdmin(admin.ModelAdmin):
    list_display = ["name", "color"]
    search_fields = ["name"]
