"""
Views for the Cat Collector app.
"""
import logging

from django.contrib.auth.decorators import login_required
from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse_lazy
from django.views.decorators.http import require_POST
from django.views.generic import DetailView, ListView
from django.views.generic.edit import CreateView, DeleteView, UpdateView

from .forms import FeedingForm
from .models import Cat, Toy

logger = logging.getLogger(__name__)


def health_check(request):
    """
    Simple health check endpoint that returns a 200 JSON response.
    Used by Docker health checks and load balancers.
    """
    return JsonResponse({"status": "ok"})


def home(request):
    """Landing page with the "Login with Google" link."""
    return render(request, "home.html")


def about(request):
    return render(request, "about.html")


@login_required
def cats_index(request):
    cats = Cat.objects.filter(user=request.user).prefetch_related("feedings")
    return render(request, "cats/index.html", {"cats": cats})


@login_required
def cat_detail(request, cat_id):
    cat = get_object_or_404(Cat, id=cat_id, user=request.user)
    toys_cat_doesnt_have = Toy.objects.exclude(id__in=cat.toys.values_list("id", flat=True))
    return render(
        request,
        "cats/detail.html",
        {
            "cat": cat,
            "feeding_form": FeedingForm(),
            "toys": toys_cat_doesnt_have,
        },
    )


@login_required
@require_POST
def add_feeding(request, cat_id):
    cat = get_object_or_404(Cat, id=cat_id, user=request.user)
    form = FeedingForm(request.POST)
    if form.is_valid():
        feeding = form.save(commit=False)
        feeding.cat = cat
        feeding.save()
        logger.info("Recorded %s for cat %s", feeding, cat.id)
    else:
        logger.debug("Rejected feeding for cat %s: %s", cat.id, form.errors.as_json())
    return redirect("cats:detail", cat_id=cat.id)


@login_required
@require_POST
def assoc_toy(request, cat_id, toy_id):
    cat = get_object_or_404(Cat, id=cat_id, user=request.user)
    toy = get_object_or_404(Toy, id=toy_id)
    cat.toys.add(toy)
    logger.info("Gave toy %s to cat %s", toy.id, cat.id)
    return redirect("cats:detail", cat_id=cat.id)


@login_required
@require_POST
def unassoc_toy(request, cat_id, toy_id):
    cat = get_object_or_404(Cat, id=cat_id, user=request.user)
    cat.toys.remove(toy_id)
    logger.info("Took toy %s from cat %s", toy_id, cat.id)
    return redirect("cats:detail", cat_id=cat.id)


class OwnedCatMixin(LoginRequiredMixin):
    """Restrict cat edit views to the current user's cats."""

    model = Cat
    pk_url_kwarg = "cat_id"

    def get_queryset(self):
        return Cat.objects.filter(user=self.request.user)


class CatCreate(LoginRequiredMixin, CreateView):
    model = Cat
    fields = ["name", "breed", "description", "age"]

    def form_valid(self, form):
        form.instance.user = self.request.user
        response = super().form_valid(form)
        logger.info("User %s created cat %s", self.request.user.email, self.object.id)
        return response


class CatUpdate(OwnedCatMixin, UpdateView):
    # Ownership is fixed at creation
    fields = ["breed", "description", "age"]


class CatDelete(OwnedCatMixin, DeleteView):
    success_url = reverse_lazy("cats:index")


class ToyList(LoginRequiredMixin, ListView):
    model = Toy


class ToyDetail(LoginRequiredMixin, DetailView):
    model = Toy


class ToyCreate(LoginRequiredMixin, CreateView):
    model = Toy
    fields = ["name", "color"]


class ToyUpdate(LoginRequiredMixin, UpdateView):
    model = Toy
    fields = ["name", "color"]


class ToyDelete(LoginRequiredMixin, DeleteView):
    model = Toy
    success_url = reverse_lazy("cats:toy_index")
