"""URL Configuration for the ticket printing API."""

from django.urls import path

from . import views

urlpatterns = [
    path('seating/parse/', views.parse_seating_view, name='ticketing-seating-parse'),
    path('batches/', views.create_batch_view, name='ticketing-batch-create'),
    path('batches/<uuid:batch_id>/', views.batch_detail_view, name='ticketing-batch-detail'),
    path('batches/<uuid:batch_id>/cancel/', views.cancel_batch_view, name='ticketing-batch-cancel'),
    path('batches/<uuid:batch_id>/download/', views.download_batch_view, name='ticketing-batch-download'),
    path('batches/<uuid:batch_id>/layout-test/', views.layout_test_view, name='ticketing-batch-layout-test'),
]
