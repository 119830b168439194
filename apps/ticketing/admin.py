"""Admin configuration for ticket batches."""

from django.contrib import admin
from django.utils.html import format_html

from .models import TicketBatch


@admin.register(TicketBatch)
class TicketBatchAdmin(admin.ModelAdmin):
    """Admin for ticket batches."""
    
    list_display = ('id', 'artist', 'status_badge', 'ticket_count', 'document_count', 'started_at', 'completed_at')
    list_filter = ('status', 'created_at')
    search_fields = ('id', 'generation_key')
    readonly_fields = ('id', 'created_at', 'updated_at', 'started_at', 'completed_at')
    
    fieldsets = (
        ('Batch', {
            'fields': ('id', 'status', 'generation_key', 'requested_by')
        }),
        ('Output', {
            'fields': ('ticket_count', 'document_count', 'archive', 'layout_test')
        }),
        ('Times', {
            'fields': ('started_at', 'completed_at', 'created_at', 'updated_at')
        }),
        ('Errors', {
            'fields': ('error_message',),
            'classes': ('collapse',)
        }),
        ('Input', {
            'fields': ('event_config', 'seats'),
            'classes': ('collapse',)
        }),
    )
    
    def artist(self, obj):
        return obj.event_config.get('artist', '')
    
    def status_badge(self, obj):
        """Display status with color."""
        colors = {
            'pending': 'gray',
            'in_progress': 'blue',
            'completed': 'green',
            'failed': 'red',
            'cancelled': 'orange',
            'superseded': 'purple',
        }
        color = colors.get(obj.status, 'gray')
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 10px; border-radius: 3px;">{}</span>',
            color,
            obj.get_status_display()
        )
    status_badge.short_description = 'Status'
