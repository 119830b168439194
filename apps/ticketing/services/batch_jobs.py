"""
Ticket batch jobs.

Persists generation requests as ``TicketBatch`` rows and runs them.
Starting a new batch supersedes every unfinished batch with the same
generation key. A run generates its output without holding any lock and
only stores it if the batch is still ``in_progress`` when it finishes, so a
cancelled or superseded run leaves either the previous result or nothing.
"""

import logging
from typing import Optional, Sequence

from django.core.files.base import ContentFile
from django.db import transaction
from django.utils import timezone

from apps.ticketing.exceptions import TicketingError
from apps.ticketing.models import TicketBatch
from apps.ticketing.types import EventConfig, SeatDescriptor, seats_to_dicts

from .batch_service import build_archive, generate_ticket_batch
from .pdf import LAYOUT_TEST_FILENAME, load_configured_template

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Ticket generation failed. Please try again."


def create_ticket_batch(
    config: EventConfig,
    seats: Sequence[SeatDescriptor],
    generation_key: str = '',
    requested_by=None,
) -> TicketBatch:
    """
    Create a pending batch, superseding unfinished batches with the same key.

    Args:
        config: Event configuration
        seats: Seat descriptors in print order
        generation_key: Groups batches that replace each other (empty: no grouping)
        requested_by: Optional user

    Returns:
        The new pending TicketBatch
    """
    with transaction.atomic():
        superseded = 0
        if generation_key:
            superseded = (
                TicketBatch.objects.select_for_update()
                .filter(generation_key=generation_key, status__in=TicketBatch.UNFINISHED_STATUSES)
                .update(status='superseded', completed_at=timezone.now())
            )

        batch = TicketBatch.objects.create(
            generation_key=generation_key,
            event_config=config.to_dict(),
            seats=seats_to_dicts(list(seats)),
            ticket_count=len(seats),
            requested_by=requested_by,
        )

    if superseded:
        logger.info(f"[BATCH] Batch {batch.id} superseded {superseded} unfinished batches for key {generation_key}")
    return batch


def cancel_ticket_batch(batch: TicketBatch) -> bool:
    """
    Cancel an unfinished batch.

    Returns:
        True if the batch was cancelled, False if it had already finished
    """
    with transaction.atomic():
        locked = TicketBatch.objects.select_for_update().get(pk=batch.pk)
        if locked.is_finished:
            return False
        locked.status = 'cancelled'
        locked.completed_at = timezone.now()
        locked.save(update_fields=['status', 'completed_at', 'updated_at'])

    batch.refresh_from_db()
    logger.info(f"[BATCH] Batch {batch.id} cancelled")
    return True


def _claim(batch_id) -> Optional[TicketBatch]:
    """Move a pending batch to in_progress; None if it is no longer pending."""
    with transaction.atomic():
        batch = TicketBatch.objects.select_for_update().get(pk=batch_id)
        if batch.status != 'pending':
            logger.info(f"[BATCH] Batch {batch_id} is {batch.status}, not running it")
            return None
        batch.start()
    return batch


def run_ticket_batch(batch_id, template_pdf: Optional[bytes] = None) -> TicketBatch:
    """
    Generate the tickets for a stored batch.

    Args:
        batch_id: Primary key of the TicketBatch
        template_pdf: Template for the layout test (defaults to TICKETING['TEMPLATE_PATH'])

    Returns:
        The batch in its final state
    """
    batch = _claim(batch_id)
    if batch is None:
        return TicketBatch.objects.get(pk=batch_id)

    if template_pdf is None:
        template_pdf = load_configured_template()

    try:
        result = generate_ticket_batch(
            batch.get_seats(),
            batch.get_event_config(),
            template_pdf=template_pdf,
        )
        archive = build_archive(result)
    except TicketingError as e:
        logger.warning(f"[BATCH] Batch {batch_id} failed: {e}")
        return _store_failure(batch_id, str(e))
    except Exception as e:
        logger.exception(f"❌ [BATCH] Unexpected error in batch {batch_id}: {e}")
        return _store_failure(batch_id, GENERIC_FAILURE_MESSAGE)

    with transaction.atomic():
        batch = TicketBatch.objects.select_for_update().get(pk=batch_id)
        if batch.status != 'in_progress':
            logger.info(f"[BATCH] Discarding result of batch {batch_id} ({batch.status})")
            return batch

        batch.archive.save(f"tickets-{batch.id}.zip", ContentFile(archive), save=False)
        if result.layout_test is not None:
            batch.layout_test.save(LAYOUT_TEST_FILENAME, ContentFile(result.layout_test), save=False)
        batch.ticket_count = result.ticket_count
        batch.document_count = result.document_count
        batch.status = 'completed'
        batch.completed_at = timezone.now()
        batch.save()

    logger.info(f"✅ [BATCH] Batch {batch_id} completed with {result.ticket_count} tickets")
    return batch


def _store_failure(batch_id, message: str) -> TicketBatch:
    with transaction.atomic():
        batch = TicketBatch.objects.select_for_update().get(pk=batch_id)
        if batch.status == 'in_progress':
            batch.fail(message)
    return batch
