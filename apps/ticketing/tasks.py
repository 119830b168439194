"""
Celery tasks for ticket generation.
"""

import logging

from celery import shared_task

from apps.ticketing.services.batch_jobs import run_ticket_batch

logger = logging.getLogger(__name__)


@shared_task(bind=True, queue='documents')
def generate_ticket_batch_task(self, batch_id):
    """
    Generate the documents of a stored ticket batch.
    
    Failures are recorded on the batch itself, so the task never retries.
    """
    logger.info(f"[BATCH] Task {self.request.id} running batch {batch_id}")
    batch = run_ticket_batch(batch_id)
    return {
        'batch_id': str(batch.id),
        'status': batch.status,
        'ticket_count': batch.ticket_count,
        'document_count': batch.document_count,
    }
