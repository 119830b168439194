# Generated manually for the ticket batch model

import apps.ticketing.models
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='TicketBatch',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('in_progress', 'In Progress'), ('completed', 'Completed'), ('failed', 'Failed'), ('cancelled', 'Cancelled'), ('superseded', 'Superseded')], default='pending', max_length=20, verbose_name='status')),
                ('generation_key', models.CharField(blank=True, db_index=True, help_text='Batches sharing a key supersede each other', max_length=255, verbose_name='generation key')),
                ('event_config', models.JSONField(blank=True, default=dict, verbose_name='event configuration')),
                ('seats', models.JSONField(blank=True, default=list, verbose_name='seats')),
                ('ticket_count', models.IntegerField(default=0, verbose_name='ticket count')),
                ('document_count', models.IntegerField(default=0, verbose_name='document count')),
                ('archive', models.FileField(blank=True, null=True, upload_to=apps.ticketing.models.batch_upload_path, verbose_name='archive')),
                ('layout_test', models.FileField(blank=True, null=True, upload_to=apps.ticketing.models.batch_upload_path, verbose_name='layout test')),
                ('started_at', models.DateTimeField(blank=True, null=True, verbose_name='started at')),
                ('completed_at', models.DateTimeField(blank=True, null=True, verbose_name='completed at')),
                ('error_message', models.TextField(blank=True, verbose_name='error message')),
                ('requested_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='ticket_batches', to=settings.AUTH_USER_MODEL, verbose_name='requested by')),
            ],
            options={
                'verbose_name': 'ticket batch',
                'verbose_name_plural': 'ticket batches',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['generation_key', 'status'], name='ticketing_batch_key_status_idx')],
            },
        ),
    ]
