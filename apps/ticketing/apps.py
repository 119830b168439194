"""App configuration for ticketing."""

from django.apps import AppConfig


class TicketingConfig(AppConfig):
    """Configuration for the ticket printing app."""
    
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.ticketing'
    verbose_name = 'Ticket Printing'
