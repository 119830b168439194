"""
Tests for the ticket printing API.
"""

import io
import json
import tempfile
import zipfile
from pathlib import Path

from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.ticketing.models import TicketBatch
from apps.ticketing.services.seating import parse_seating
from apps.ticketing.services.batch_jobs import create_ticket_batch

from .helpers import SEATING_EXPORT, make_config, make_template_pdf

User = get_user_model()

EVENT = {
    'artist': 'Max Mustermann',
    'date': '01.05.2025',
    'start_time': '20:00',
    'venue': 'Stadthalle Kassel',
    'category': 'Sitzplatz',
    'static_text': 'Einlass 1 Stunde vor Beginn.',
}


class TicketingAPITestCase(APITestCase):
    
    def setUp(self):
        self.user = User.objects.create_user(username='kasse', password='testpass123')
        self.client.force_authenticate(user=self.user)
    
    def create_batch(self, **payload):
        payload.setdefault('event', EVENT)
        return self.client.post(reverse('ticketing-batch-create'), payload, format='json')


class SeatingParseAPITestCase(TicketingAPITestCase):
    
    def test_requires_authentication(self):
        self.client.force_authenticate(user=None)
        
        response = self.client.post(reverse('ticketing-seating-parse'), {'text': SEATING_EXPORT}, format='json')
        
        self.assertIn(response.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))
    
    def test_parse_text(self):
        response = self.client.post(
            reverse('ticketing-seating-parse'),
            {'text': SEATING_EXPORT + 'kaputt\n'},
            format='json'
        )
        
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['count'], 5)
        self.assertEqual(response.data['rejected'], 1)
        self.assertEqual(
            response.data['seats'][0],
            {'area': 'Tribüne K', 'row': '8', 'seat': '1', 'category': 'Sitzplatz', 'status': 'frei'}
        )
    
    def test_parse_utf16_upload(self):
        upload = SimpleUploadedFile('Sitzplan.csv', SEATING_EXPORT.encode('utf-16-le'), content_type='text/csv')
        
        response = self.client.post(reverse('ticketing-seating-parse'), {'file': upload}, format='multipart')
        
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['count'], 5)
        self.assertEqual(response.data['encoding'], 'utf-16-le')
    
    def test_parse_without_input(self):
        response = self.client.post(reverse('ticketing-seating-parse'), {}, format='json')
        
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('error', response.data)


class BatchAPITestCase(TicketingAPITestCase):
    
    def test_create_from_seating_text(self):
        response = self.create_batch(seating_text=SEATING_EXPORT, generation_key='show-1')
        
        self.assertEqual(response.status_code, status.HTTP_202_ACCEPTED)
        self.assertEqual(response.data['status'], 'completed')
        self.assertEqual(response.data['ticket_count'], 5)
        self.assertEqual(response.data['document_count'], 1)
        self.assertTrue(response.data['has_archive'])
        self.assertFalse(response.data['has_layout_test'])
        
        batch = TicketBatch.objects.get(id=response.data['id'])
        self.assertEqual(batch.requested_by, self.user)
    
    def test_create_from_upload(self):
        upload = SimpleUploadedFile('Sitzplan.csv', SEATING_EXPORT.encode('latin-1'), content_type='text/csv')
        
        response = self.client.post(
            reverse('ticketing-batch-create'),
            {'event': json.dumps(EVENT), 'seating_file': upload},
            format='multipart'
        )
        
        self.assertEqual(response.status_code, status.HTTP_202_ACCEPTED)
        self.assertEqual(response.data['ticket_count'], 5)
    
    def test_create_manual(self):
        response = self.create_batch(manual={'ticket_count': 25, 'line1': 'Stehplatz', 'line2': 'Freie Platzwahl'})
        
        self.assertEqual(response.status_code, status.HTTP_202_ACCEPTED)
        self.assertEqual(response.data['ticket_count'], 25)
        self.assertEqual(response.data['document_count'], 2)
    
    def test_manual_count_limit(self):
        response = self.create_batch(manual={'ticket_count': 1001})
        
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('error', response.data)
    
    def test_missing_event_fields(self):
        response = self.create_batch(event={'artist': 'Max Mustermann'}, seating_text=SEATING_EXPORT)
        
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('venue', response.data['details']['event'])
    
    def test_no_seats(self):
        response = self.create_batch(seating_text='nur kaputte Zeilen\n')
        
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('No seats found', response.data['error'])
        self.assertFalse(TicketBatch.objects.exists())
    
    def test_exactly_one_seat_source(self):
        response = self.create_batch(seating_text=SEATING_EXPORT, manual={'ticket_count': 2})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        
        response = self.create_batch()
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
    
    def test_failed_generation_reports_single_message(self):
        response = self.create_batch(event={**EVENT, 'category': ''}, manual={'ticket_count': 2})
        
        self.assertEqual(response.status_code, status.HTTP_202_ACCEPTED)
        self.assertEqual(response.data['status'], 'failed')
        self.assertIn('category', response.data['error_message'])
    
    def test_detail_and_download(self):
        batch_id = self.create_batch(seating_text=SEATING_EXPORT).data['id']
        
        detail = self.client.get(reverse('ticketing-batch-detail', args=[batch_id]))
        self.assertEqual(detail.status_code, status.HTTP_200_OK)
        self.assertEqual(detail.data['status'], 'completed')
        
        download = self.client.get(reverse('ticketing-batch-download', args=[batch_id]))
        self.assertEqual(download.status_code, status.HTTP_200_OK)
        self.assertEqual(download['Content-Type'], 'application/zip')
        self.assertIn('Max_Mustermann_01.05.2025.zip', download['Content-Disposition'])
        archive = zipfile.ZipFile(io.BytesIO(b''.join(download.streaming_content)))
        self.assertEqual(archive.namelist(), ['tickets/tickets-001.pdf', 'ids.csv'])
    
    def test_download_unfinished_batch(self):
        batch = create_ticket_batch(make_config(), parse_seating(SEATING_EXPORT), requested_by=self.user)
        
        response = self.client.get(reverse('ticketing-batch-download', args=[batch.id]))
        
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['status'], 'pending')
    
    def test_cancel(self):
        batch = create_ticket_batch(make_config(), parse_seating(SEATING_EXPORT), requested_by=self.user)
        
        response = self.client.post(reverse('ticketing-batch-cancel', args=[batch.id]))
        
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], 'cancelled')
        
        response = self.client.post(reverse('ticketing-batch-cancel', args=[batch.id]))
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
    
    def test_layout_test_missing(self):
        batch_id = self.create_batch(seating_text=SEATING_EXPORT).data['id']
        
        response = self.client.get(reverse('ticketing-batch-layout-test', args=[batch_id]))
        
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
    
    def test_layout_test_with_template(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            template_path = Path(tmpdir) / 'template.pdf'
            template_path.write_bytes(make_template_pdf())
            
            with override_settings(TICKETING={'QR_WORKERS': 1, 'TEMPLATE_PATH': str(template_path)}):
                batch_id = self.create_batch(seating_text=SEATING_EXPORT).data['id']
        
        response = self.client.get(reverse('ticketing-batch-layout-test', args=[batch_id]))
        
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response['Content-Type'], 'application/pdf')
        self.assertTrue(b''.join(response.streaming_content).startswith(b'%PDF'))
    
    def test_other_users_batches_are_hidden(self):
        other = User.objects.create_user(username='andere', password='testpass123')
        batch = create_ticket_batch(make_config(), parse_seating(SEATING_EXPORT), requested_by=other)
        
        response = self.client.get(reverse('ticketing-batch-detail', args=[batch.id]))
        
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
