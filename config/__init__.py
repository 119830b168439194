"""Django project configuration for the ticket printing backend."""

from .celery import app as celery_app

__all__ = ('celery_app',)
