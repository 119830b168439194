"""URL Configuration for API v1."""

from django.urls import path, include

urlpatterns = [
    path('ticketing/', include('api.v1.ticketing.urls')),
]
