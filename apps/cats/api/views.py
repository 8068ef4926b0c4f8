"""
API views for the current user's cats.
"""
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.cats.models import Cat

from .serializers import CatDetailSerializer, CatListSerializer


class CatListView(APIView):
    """GET /api/cats/ -- list cats owned by the current user."""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        cats = Cat.objects.filter(user=request.user).prefetch_related("feedings")
        return Response(CatListSerializer(cats, many=True).data)


class CatDetailView(APIView):
    """GET /api/cats/<cat_id>/ -- one cat with its feedings and toys."""

    permission_classes = [IsAuthenticated]

    def get(self, request, cat_id):
        try:
            cat = Cat.objects.prefetch_related("feedings", "toys").get(
                id=cat_id, user=request.user
            )
        except Cat.DoesNotExist:
            return Response({"error": "Cat not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(CatDetailSerializer(cat).data)
