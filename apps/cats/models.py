"""
Cat Collector domain models.

Defines Toy, Cat, and Feeding models.
"""
from datetime import date

from django.conf import settings
from django.db import models
from django.urls import reverse

MEALS = (
    ("B", "Breakfast"),
    ("L", "Lunch"),
    ("D", "Dinner"),
)


class Toy(models.Model):
    """A toy that any cat in the collection can be given."""

    name = models.CharField(max_length=50)
    color = models.CharField(max_length=20)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name

    def get_absolute_url(self):
        return reverse("cats:toy_detail", kwargs={"pk": self.id})


class Cat(models.Model):
    """A cat owned by a single collector."""

    name = models.CharField(max_length=100)
    breed = models.CharField(max_length=100)
    description = models.TextField(max_length=250)
    age = models.PositiveIntegerField()
    toys = models.ManyToManyField(Toy, blank=True, related_name="cats")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="cats",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name

    def get_absolute_url(self):
        return reverse("cats:detail", kwargs={"cat_id": self.id})

    def fed_for_today(self):
        """True once today's feedings cover every meal."""
        meals_today = set(
            self.feedings.filter(date=date.today()).values_list("meal", flat=True)
        )
        return meals_today >= {code for code, _label in MEALS}


class Feeding(models.Model):
    date = models.DateField("feeding date")
    meal = models.CharField(max_length=1, choices=MEALS, default=MEALS[0][0])
    cat = models.ForeignKey(Cat, on_delete=models.CASCADE, related_name="feedings")

    class Meta:
        ordering = ["-date"]

    def __str__(self):
        return f"{self.get_meal_display()} on {self.date}"
