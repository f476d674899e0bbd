from django.urls import path
from .views import CardsView, HintView, NextDayView, PracticeView, ProgressView, UpdateView

urlpatterns = [
    path("practice", PracticeView.as_view(), name="practice"),
    path("update", UpdateView.as_view(), name="update"),
    path("hint", HintView.as_view(), name="hint"),
    path("progress", ProgressView.as_view(), name="progress"),
    path("day/next", NextDayView.as_view(), name="day-next"),
    path("cards", CardsView.as_view(), name="cards"),
]
