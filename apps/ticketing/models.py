"""
Ticket batch models.

A ``TicketBatch`` tracks one generation run requested through the API: the
event configuration and seats it was started with, its status and, once
completed, the ZIP archive and layout test it produced.
"""

from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from core.models import BaseModel

from .types import EventConfig, seats_from_dicts


def batch_upload_path(instance, filename):
    return f"ticket_batches/{instance.id}/{filename}"


class TicketBatch(BaseModel):
    """
    One ticket generation run.
    """

    STATUS_CHOICES = (
        ('pending', _('Pending')),
        ('in_progress', _('In Progress')),
        ('completed', _('Completed')),
        ('failed', _('Failed')),
        ('cancelled', _('Cancelled')),
        ('superseded', _('Superseded')),
    )

    UNFINISHED_STATUSES = ('pending', 'in_progress')

    status = models.CharField(
        _("status"),
        max_length=20,
        choices=STATUS_CHOICES,
        default='pending'
    )
    generation_key = models.CharField(
        _("generation key"),
        max_length=255,
        blank=True,
        db_index=True,
        help_text=_("Batches sharing a key supersede each other")
    )

    # Input
    event_config = models.JSONField(
        _("event configuration"),
        default=dict,
        blank=True
    )
    seats = models.JSONField(
        _("seats"),
        default=list,
        blank=True
    )

    # Output
    ticket_count = models.IntegerField(
        _("ticket count"),
        default=0
    )
    document_count = models.IntegerField(
        _("document count"),
        default=0
    )
    archive = models.FileField(
        _("archive"),
        upload_to=batch_upload_path,
        blank=True,
        null=True
    )
    layout_test = models.FileField(
        _("layout test"),
        upload_to=batch_upload_path,
        blank=True,
        null=True
    )

    # Times
    started_at = models.DateTimeField(
        _("started at"),
        null=True,
        blank=True
    )
    completed_at = models.DateTimeField(
        _("completed at"),
        null=True,
        blank=True
    )

    error_message = models.TextField(
        _("error message"),
        blank=True
    )

    requested_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='ticket_batches',
        verbose_name=_("requested by")
    )

    class Meta:
        verbose_name = _("ticket batch")
        verbose_name_plural = _("ticket batches")
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['generation_key', 'status'], name='ticketing_batch_key_status_idx'),
        ]

    def __str__(self):
        return f"{self.event_config.get('artist', '')} - {self.get_status_display()} ({self.ticket_count})"

    @property
    def is_finished(self):
        return self.status not in self.UNFINISHED_STATUSES

    def get_event_config(self) -> EventConfig:
        return EventConfig.from_dict(self.event_config)

    def get_seats(self):
        return seats_from_dicts(self.seats)

    def start(self):
        """Mark the batch as running."""
        self.status = 'in_progress'
        self.started_at = timezone.now()
        self.save(update_fields=['status', 'started_at', 'updated_at'])

    def fail(self, error_message):
        """Mark the batch as failed with a single user-facing message."""
        self.status = 'failed'
        self.completed_at = timezone.now()
        self.error_message = error_message
        self.save(update_fields=['status', 'completed_at', 'error_message', 'updated_at'])
