from django.urls import path, include
from django.views.generic import RedirectView

urlpatterns = [
    path('', RedirectView.as_view(pattern_name='demo:showcase', permanent=False), name='home'),
    path('demo/', include('demo.urls')),
]
