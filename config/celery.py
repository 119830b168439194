"""
Celery configuration for the ticket printing backend.

Ticket batches are generated asynchronously on the dedicated 'documents'
queue so large PDF runs never block the default worker.
"""

import os
from celery import Celery

# Set the default Django settings module for the 'celery' program.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.development')

app = Celery('ticket_printer')

# Using a string here means the worker doesn't have to serialize
# the configuration object to child processes.
app.config_from_object('django.conf:settings', namespace='CELERY')

# Load task modules from all registered Django app configs.
app.autodiscover_tasks()

# Task routing
app.conf.task_routes = {
    'apps.ticketing.tasks.generate_ticket_batch_task': {'queue': 'documents'},
}

app.conf.update(
    enable_utc=True,
    
    # Task execution settings
    task_soft_time_limit=1700,
    task_time_limit=1800,
    task_acks_late=True,       # Acknowledge after task completion
    worker_prefetch_multiplier=1,  # Process one task at a time for reliability
    
    # Result backend settings
    result_expires=3600,  # Results expire after 1 hour
    
    # Worker settings
    worker_max_tasks_per_child=1000,
    
    task_default_queue='default',
    task_default_exchange='default',
    task_default_exchange_type='direct',
    task_default_routing_key='default',
)

