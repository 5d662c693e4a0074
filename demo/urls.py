from django.urls import path

from . import views

app_name = "demo"

urlpatterns = [
    path("", views.ShowcaseView.as_view(), name="showcase"),
    path("<slug:layout>/", views.ShowcaseView.as_view(), name="showcase_layout"),
]
