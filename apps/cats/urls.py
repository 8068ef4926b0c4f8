"""
URL configuration for the Cat Collector app.
"""
from django.urls import path

from . import views

app_name = "cats"

urlpatterns = [
    path("", views.home, name="home"),
    path("about/", views.about, name="about"),
    path("cats/", views.cats_index, name="index"),
    path("cats/create/", views.CatCreate.as_view(), name="create"),
    path("cats/<int:cat_id>/", views.cat_detail, name="detail"),
    path("cats/<int:cat_id>/update/", views.CatUpdate.as_view(), name="update"),
    path("cats/<int:cat_id>/delete/", views.CatDelete.as_view(), name="delete"),
    path("cats/<int:cat_id>/add-feeding/", views.add_feeding, name="add_feeding"),
    path("cats/<int:cat_id>/assoc-toy/<int:toy_id>/", views.assoc_toy, name="assoc_toy"),
    path("cats/<int:cat_id>/unassoc-toy/<int:toy_id>/", views.unassoc_toy, name="unassoc_toy"),
    path("toys/", views.ToyList.as_view(), name="toy_index"),
    path("toys/create/", views.ToyCreate.as_view(), name="toy_create"),
    path("toys/<int:pk>/", views.ToyDetail.as_view(), name="toy_detail"),
    path("toys/<int:pk>/update/", views.ToyUpdate.as_view(), name="toy_update"),
    path("toys/<int:pk>/delete/", views.ToyDelete.as_view(), name="toy_delete"),
]
