"""
Serializers for the cats API.
"""
from rest_framework import serializers

from apps.cats.models import Cat, Feeding, Toy


class ToySerializer(serializers.ModelSerializer):
    class Meta:
        model = Toy
        fields = ["id", "name", "color"]
        read_only_fields = fields


class FeedingSerializer(serializers.ModelSerializer):
    meal_display = serializers.CharField(source="get_meal_display", read_only=True)

    class Meta:
        model = Feeding
        fields = ["id", "date", "meal", "meal_display"]
        read_only_fields = fields


class CatListSerializer(serializers.ModelSerializer):
    """
    Serializer for listing cats.

    Includes whether the cat has had every meal today.
    """

    fed_for_today = serializers.SerializerMethodField()

    class Meta:
        model = Cat
        fields = ["id", "name", "breed", "age", "fed_for_today"]
        read_only_fields = fields

    def get_fed_for_today(self, obj):
        return obj.fed_for_today()


class CatDetailSerializer(CatListSerializer):
    feedings = FeedingSerializer(many=True, read_only=True)
    toys = ToySerializer(many=True, read_only=True)

    class Meta(CatListSerializer.Meta):
        fields = CatListSerializer.Meta.fields + [
            "description",
            "feedings",
            "toys",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
