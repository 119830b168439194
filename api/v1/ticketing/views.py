"""
Ticket printing API views.

Seating preview, batch creation and batch download endpoints.
"""

import logging

from django.http import FileResponse, Http404
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.ticketing.exceptions import EmptySeatingError, TicketingError
from apps.ticketing.models import TicketBatch
from apps.ticketing.services.batch_jobs import cancel_ticket_batch, create_ticket_batch
from apps.ticketing.services.seating import (
    build_manual_seats,
    detect_encoding,
    parse_seating_report,
)
from apps.ticketing.tasks import generate_ticket_batch_task
from apps.ticketing.types import seats_to_dicts
from core.utils import get_output_folder_name

from .serializers import (
    SeatingParseSerializer,
    TicketBatchCreateSerializer,
    TicketBatchSerializer,
)

logger = logging.getLogger(__name__)


def _validation_error_response(errors):
    return Response({
        'error': 'Invalid request',
        'details': errors
    }, status=status.HTTP_400_BAD_REQUEST)


def _get_batch(request, batch_id) -> TicketBatch:
    batches = TicketBatch.objects.all()
    if not request.user.is_staff:
        batches = batches.filter(requested_by=request.user)
    try:
        return batches.get(id=batch_id)
    except TicketBatch.DoesNotExist:
        raise Http404("Batch not found")


def _read_seating(upload=None, text=None):
    """Decode an upload or take the text as is; returns (parse result, encoding)."""
    encoding = None
    if upload is not None:
        encoding, text = detect_encoding(upload.read())
    return parse_seating_report(text or ''), encoding


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def parse_seating_view(request):
    """
    Parse a seating export without generating anything.

    Body (multipart/form-data or JSON):
        - file: seating export upload
        - text: seating export contents

    Response:
        {
            "seats": [{"area": ..., "row": ..., "seat": ..., "category": ..., "status": ...}],
            "count": 120,
            "rejected": 2,
            "encoding": "utf-16-le"
        }
    """
    serializer = SeatingParseSerializer(data=request.data)
    if not serializer.is_valid():
        return _validation_error_response(serializer.errors)

    try:
        result, encoding = _read_seating(
            upload=serializer.validated_data.get('file'),
            text=serializer.validated_data.get('text'),
        )
        return Response({
            'seats': seats_to_dicts(result.seats),
            'count': len(result.seats),
            'rejected': result.rejected_count,
            'encoding': encoding,
        }, status=status.HTTP_200_OK)

    except Exception as e:
        logger.exception("Error in parse_seating_view")
        return Response({
            'error': str(e)
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def create_batch_view(request):
    """
    Start a ticket batch.

    Body:
        {
            "event": {"artist": ..., "date": ..., "start_time": ..., "venue": ...,
                      "category": ..., "static_text": ..., "include_qr_code": true},
            "seating_text": "...",            # or seating_file (upload)
            "manual": {"ticket_count": 50, "line1": "...", "line2": "..."},
            "generation_key": "show-2025-05-01"
        }

    Response (202): the batch
    """
    serializer = TicketBatchCreateSerializer(data=request.data)
    if not serializer.is_valid():
        return _validation_error_response(serializer.errors)

    data = serializer.validated_data
    config = data['event']

    try:
        config.validate()

        manual = data.get('manual')
        if manual:
            seats = build_manual_seats(manual['ticket_count'], manual['line1'], manual['line2'])
        else:
            result, _ = _read_seating(upload=data.get('seating_file'), text=data.get('seating_text'))
            seats = result.seats

        if not seats:
            raise EmptySeatingError()

        batch = create_ticket_batch(
            config,
            seats,
            generation_key=data['generation_key'],
            requested_by=request.user,
        )
        generate_ticket_batch_task.delay(str(batch.id))
        batch.refresh_from_db()

        logger.info(f"[BATCH] Batch {batch.id} queued with {len(seats)} seats")

        return Response(TicketBatchSerializer(batch).data, status=status.HTTP_202_ACCEPTED)

    except TicketingError as e:
        return Response({
            'error': str(e)
        }, status=status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        logger.exception("Error in create_batch_view")
        return Response({
            'error': str(e)
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def batch_detail_view(request, batch_id):
    """Current state of a batch."""
    batch = _get_batch(request, batch_id)
    return Response(TicketBatchSerializer(batch).data, status=status.HTTP_200_OK)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def cancel_batch_view(request, batch_id):
    """
    Cancel an unfinished batch. A running generation finishes but its
    result is discarded.
    """
    batch = _get_batch(request, batch_id)

    if not cancel_ticket_batch(batch):
        return Response({
            'error': 'Batch already finished',
            'status': batch.status
        }, status=status.HTTP_400_BAD_REQUEST)

    return Response(TicketBatchSerializer(batch).data, status=status.HTTP_200_OK)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def download_batch_view(request, batch_id):
    """
    Download the ZIP archive of a completed batch.

    Response:
        Binary file (application/zip)
    """
    batch = _get_batch(request, batch_id)

    if batch.status != 'completed':
        return Response({
            'error': 'Batch not completed',
            'status': batch.status
        }, status=status.HTTP_400_BAD_REQUEST)

    if not batch.archive:
        return Response({
            'error': 'Archive not found'
        }, status=status.HTTP_404_NOT_FOUND)

    folder_name = get_output_folder_name(
        batch.event_config.get('artist', ''),
        batch.event_config.get('date', ''),
    )
    return FileResponse(
        batch.archive.open('rb'),
        content_type='application/zip',
        as_attachment=True,
        filename=f"{folder_name}.zip"
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def layout_test_view(request, batch_id):
    """
    Download the layout test of a batch (first ticket drawn over the template).

    Response:
        Binary file (application/pdf), 404 when no template was configured
    """
    batch = _get_batch(request, batch_id)

    if not batch.layout_test:
        return Response({
            'error': 'No layout test for this batch'
        }, status=status.HTTP_404_NOT_FOUND)

    return FileResponse(
        batch.layout_test.open('rb'),
        content_type='application/pdf',
        filename='layout-test.pdf'
    )
