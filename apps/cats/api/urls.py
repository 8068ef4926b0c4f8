"""
URL configuration for the cats API.
"""
from django.urls import path

from .views import CatDetailView, CatListView

app_name = "cats_api"

urlpatterns = [
    path("", CatListView.as_view(), name="list"),
    path("<int:cat_id>/", CatDetailView.as_view(), name="detail"),
]
