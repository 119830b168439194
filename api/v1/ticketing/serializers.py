"""
Serializers for the ticket printing API.
"""

from django.conf import settings
from rest_framework import serializers

from apps.ticketing.models import TicketBatch
from apps.ticketing.types import EventConfig


class EventConfigSerializer(serializers.Serializer):
    """Event data printed on every ticket."""
    
    artist = serializers.CharField(max_length=255)
    date = serializers.CharField(max_length=50)
    start_time = serializers.CharField(max_length=50)
    venue = serializers.CharField(max_length=255)
    category = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    static_text = serializers.CharField()
    include_qr_code = serializers.BooleanField(default=True)
    
    def to_event_config(self) -> EventConfig:
        return EventConfig(**self.validated_data)


class ManualSeatingSerializer(serializers.Serializer):
    """N identical tickets with two free text lines."""
    
    ticket_count = serializers.IntegerField(min_value=1)
    line1 = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    line2 = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    
    def validate_ticket_count(self, value):
        maximum = getattr(settings, 'TICKETING', {}).get('MAX_MANUAL_TICKETS', 1000)
        if value > maximum:
            raise serializers.ValidationError(f"At most {maximum} manual tickets per batch")
        return value


class SeatingParseSerializer(serializers.Serializer):
    """Seating export given as an upload or as text."""
    
    file = serializers.FileField(required=False)
    text = serializers.CharField(required=False, trim_whitespace=False)
    
    def validate(self, attrs):
        if not attrs.get('file') and not attrs.get('text'):
            raise serializers.ValidationError("Provide a seating file or text")
        return attrs


class TicketBatchCreateSerializer(serializers.Serializer):
    """
    Batch request.
    
    ``event`` and ``manual`` are JSON objects; in multipart requests they
    are sent as JSON strings next to ``seating_file``.
    """
    
    event = serializers.JSONField()
    seating_file = serializers.FileField(required=False)
    seating_text = serializers.CharField(required=False, trim_whitespace=False)
    manual = serializers.JSONField(required=False)
    generation_key = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    
    def validate_event(self, value):
        serializer = EventConfigSerializer(data=value)
        serializer.is_valid(raise_exception=True)
        return serializer.to_event_config()
    
    def validate_manual(self, value):
        serializer = ManualSeatingSerializer(data=value)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data
    
    def validate(self, attrs):
        sources = [name for name in ('seating_file', 'seating_text', 'manual') if attrs.get(name)]
        if len(sources) != 1:
            raise serializers.ValidationError(
                "Provide exactly one of seating_file, seating_text or manual"
            )
        return attrs


class TicketBatchSerializer(serializers.ModelSerializer):
    """Serializer for TicketBatch."""
    
    status_display = serializers.CharField(source='get_status_display', read_only=True)
    has_archive = serializers.SerializerMethodField()
    has_layout_test = serializers.SerializerMethodField()
    
    class Meta:
        model = TicketBatch
        fields = [
            'id', 'status', 'status_display', 'generation_key', 'event_config',
            'ticket_count', 'document_count', 'has_archive', 'has_layout_test',
            'error_message', 'started_at', 'completed_at', 'created_at', 'updated_at'
        ]
        read_only_fields = fields
    
    def get_has_archive(self, obj) -> bool:
        return bool(obj.archive)
    
    def get_has_layout_test(self, obj) -> bool:
        return bool(obj.layout_test)
