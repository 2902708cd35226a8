"""
Integration tests for the receipt processing API.
"""
import json
import logging
import uuid
from unittest.mock import patch

import pytest
from rest_framework import status
from rest_framework.test import APIRequestFactory

from apps.receipts.exceptions import MalformedPayload, NoItems, StorageFailure
from apps.receipts.services import ReceiptService
from apps.receipts.storage import InMemoryScoreStore
from apps.receipts.views import ProcessReceiptView, ReceiptPointsView
from tests.factories import ReceiptPayloadFactory

PROCESS_URL = '/receipts/process'


def points_url(receipt_id):
    return f'/receipts/{receipt_id}/points'


class TestProcessReceipt:

    def test_process_then_get_points(self, api_client, score_store, target_receipt_payload):
        response = api_client.post(PROCESS_URL, target_receipt_payload, format='json')

        assert response.status_code == status.HTTP_200_OK
        receipt_id = response.json()['id']
        assert uuid.UUID(receipt_id)
        assert len(score_store) == 1

        response = api_client.get(points_url(receipt_id))

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'points': 18}

    def test_response_contains_only_id(self, api_client, score_store):
        response = api_client.post(PROCESS_URL, ReceiptPayloadFactory(), format='json')

        assert response.status_code == status.HTTP_200_OK
        assert set(response.json()) == {'id'}

    def test_same_receipt_twice_gets_two_ids(self, api_client, score_store, target_receipt_payload):
        first = api_client.post(PROCESS_URL, target_receipt_payload, format='json').json()['id']
        second = api_client.post(PROCESS_URL, target_receipt_payload, format='json').json()['id']

        assert first != second
        assert score_store.get(first) == score_store.get(second) == 18

    def test_empty_items_is_rejected_without_record(self, api_client, score_store):
        response = api_client.post(PROCESS_URL, ReceiptPayloadFactory(items=[]), format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {'error': 'items are required'}
        assert len(score_store) == 0

    @pytest.mark.parametrize('overrides, message', [
        ({'retailer': '   '}, 'retailer is required'),
        ({'purchaseDate': '01/01/2022'}, 'invalid purchase date format'),
        ({'purchaseTime': '25:00'}, 'invalid purchase time format'),
        ({'total': 'ten'}, 'invalid total format'),
    ])
    def test_validation_failures(self, api_client, score_store, overrides, message):
        response = api_client.post(PROCESS_URL, ReceiptPayloadFactory(**overrides), format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {'error': message}
        assert len(score_store) == 0

    def test_missing_retailer_is_a_validation_failure(self, api_client, score_store):
        payload = ReceiptPayloadFactory()
        del payload['retailer']

        response = api_client.post(PROCESS_URL, payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {'error': 'retailer is required'}

    @pytest.mark.parametrize('field, message', [
        ('retailer', 'retailer is required'),
        ('purchaseDate', 'invalid purchase date format'),
        ('items', 'items are required'),
        ('total', 'invalid total format'),
    ])
    def test_null_field_reads_as_empty(self, api_client, score_store, field, message):
        response = api_client.post(PROCESS_URL, ReceiptPayloadFactory(**{field: None}), format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {'error': message}
        assert len(score_store) == 0

    def test_null_item_reads_as_empty_item(self, api_client, score_store):
        payload = ReceiptPayloadFactory(items=[None, {'shortDescription': None, 'price': None}])

        response = api_client.post(PROCESS_URL, payload, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert len(score_store) == 1

    def test_malformed_json(self, api_client, score_store):
        response = api_client.post(PROCESS_URL, data='{"retailer": ', content_type='application/json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {'error': 'Invalid request payload'}
        assert len(score_store) == 0

    @pytest.mark.parametrize('body', [
        [],
        ['Target'],
        {'retailer': 'Target', 'items': 'Pepsi'},
        {'retailer': 'Target', 'items': ['Pepsi']},
        {'retailer': {'name': 'Target'}},
        {'retailer': 'Target', 'purchaseDate': '2022-01-01', 'purchaseTime': '13:01',
         'items': [{'shortDescription': 'Dasani', 'price': '1.40'}], 'total': 1.40},
        {'retailer': 'Target', 'purchaseDate': '2022-01-01', 'purchaseTime': '13:01',
         'items': [{'shortDescription': 'Dasani', 'price': 1.40}], 'total': '1.40'},
        {'retailer': 7, 'purchaseDate': '2022-01-01', 'purchaseTime': '13:01',
         'items': [{'shortDescription': 'Dasani', 'price': '1.40'}], 'total': '1.40'},
        {'retailer': 'Target', 'purchaseDate': '2022-01-01', 'purchaseTime': '13:01',
         'items': [{'shortDescription': True, 'price': '1.40'}], 'total': '1.40'},
    ])
    def test_wrong_shape_is_malformed(self, api_client, score_store, body):
        response = api_client.post(PROCESS_URL, data=json.dumps(body), content_type='application/json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {'error': 'Invalid request payload'}
        assert len(score_store) == 0

    def test_storage_failure(self, api_client, score_store, target_receipt_payload):
        with patch.object(score_store, 'save', side_effect=StorageFailure()):
            response = api_client.post(PROCESS_URL, target_receipt_payload, format='json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {'error': 'Failed to process receipt'}

    def test_unexpected_error_is_hidden(self, api_client, score_store, target_receipt_payload):
        with patch.object(score_store, 'save', side_effect=RuntimeError('disk on fire')):
            response = api_client.post(PROCESS_URL, target_receipt_payload, format='json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {'error': 'Internal server error'}

    def test_get_not_allowed(self, api_client):
        response = api_client.get(PROCESS_URL)

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert 'error' in response.json()

    def test_success_is_logged(self, api_client, score_store, target_receipt_payload, caplog):
        caplog.set_level(logging.INFO, logger='apps.receipts')

        api_client.post(PROCESS_URL, target_receipt_payload, format='json')

        assert any('Receipt processed successfully' in message and 'points=18' in message
                   for message in caplog.messages)


class TestGetPoints:

    def test_unknown_id(self, api_client, score_store):
        response = api_client.get(points_url('unknown-id'))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {'error': 'Receipt not found'}

    def test_storage_failure(self, api_client, score_store):
        with patch.object(score_store, 'get', side_effect=StorageFailure('Failed to get points')):
            response = api_client.get(points_url('some-id'))

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {'error': 'Failed to get points'}


class TestRequestID:

    def test_generated_when_absent(self, api_client):
        response = api_client.get(points_url('unknown-id'))
        assert len(response['X-Request-ID']) == 32

    def test_inbound_id_is_echoed(self, api_client):
        response = api_client.get(points_url('unknown-id'), HTTP_X_REQUEST_ID='abc-123')
        assert response['X-Request-ID'] == 'abc-123'

    def test_malformed_inbound_id_is_replaced(self, api_client):
        response = api_client.get(points_url('unknown-id'), HTTP_X_REQUEST_ID='not ok\r\n')
        assert response['X-Request-ID'] != 'not ok\r\n'


class TestStoreInjection:

    def test_views_use_injected_store(self, target_receipt_payload):
        store = InMemoryScoreStore()
        factory = APIRequestFactory()

        process = ProcessReceiptView.as_view(store=store)
        response = process(factory.post(PROCESS_URL, target_receipt_payload, format='json'))
        receipt_id = response.data['id']

        assert store.get(receipt_id) == 18

        lookup = ReceiptPointsView.as_view(store=store)
        response = lookup(factory.get(points_url(receipt_id)), receipt_id=receipt_id)
        assert response.data == {'points': 18}


class TestReceiptService:

    def setup_method(self):
        self.store = InMemoryScoreStore()
        self.service = ReceiptService(store=self.store)

    def test_process_and_lookup(self, target_receipt_payload):
        receipt_id = self.service.process_receipt(target_receipt_payload)
        assert self.service.get_points(receipt_id) == 18

    def test_decode_error_keeps_serializer_errors(self):
        with pytest.raises(MalformedPayload) as exc_info:
            self.service.process_receipt({'items': 'nope'})
        assert 'items' in exc_info.value.errors

    def test_validation_error_creates_no_record(self):
        with pytest.raises(NoItems):
            self.service.process_receipt(ReceiptPayloadFactory(items=[]))
        assert len(self.store) == 0


class TestSchema:

    def test_openapi_schema_lists_receipt_routes(self, api_client):
        response = api_client.get('/api/schema/')

        assert response.status_code == status.HTTP_200_OK
        assert b'/receipts/process' in response.content
