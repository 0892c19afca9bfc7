"""
JSON API tests for hotels and status transitions.
"""

import pytest


def test_health(client):
    response = client.get('/api/health')
    assert response.status_code == 200
    data = response.get_json()
    assert data['success'] is True
    assert data['data']['status'] == 'ok'


def test_requires_login(client):
    response = client.get('/api/hotels')
    assert response.status_code == 302


def test_create_and_list(authenticated_client):
    response = authenticated_client.post('/api/hotels', json={
        'name': 'Mara Lodge',
        'location': 'Maasai Mara',
        'rating': 4.5,
        'nearby_attractions': [{'name': 'Reserve Gate', 'distance': '2km', 'type': 'Park'}]
    })
    assert response.status_code == 201
    hotel = response.get_json()['data']['hotel']
    assert hotel['id'] == 'mara-lodge'

    response = authenticated_client.get('/api/hotels')
    data = response.get_json()
    assert data['count'] == 1
    assert data['data']['hotels'][0]['nearby_attractions'][0]['name'] == 'Reserve Gate'


def test_create_validation_error(authenticated_client):
    response = authenticated_client.post('/api/hotels', json={'location': 'Maasai Mara'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Hotel name is required'


def test_create_without_location(authenticated_client):
    response = authenticated_client.post('/api/hotels', json={
        'name': 'Mara Lodge',
        'rating': 4.5,
        'nearby_attractions': [{'name': 'Reserve Gate', 'distance': '2km', 'type': 'Park'}]
    })
    assert response.status_code == 201
    assert response.get_json()['data']['hotel']['nearby_attractions'][0]['name'] == 'Reserve Gate'


@pytest.mark.parametrize('body', [
    {'name': 5, 'location': 'Mara'},
    {'name': 'Lodge', 'nearby_attractions': [{'name': 7}]},
])
def test_create_non_text_fields(authenticated_client, backend, body):
    response = authenticated_client.post('/api/hotels', json=body)
    assert response.status_code == 400
    assert backend.rows('hotels') == []



def test_create_invalid_body(authenticated_client):
    response = authenticated_client.post('/api/hotels', data='not json', content_type='text/plain')
    assert response.status_code == 400


def test_create_backend_failure(authenticated_client, backend):
    backend.fail_next('hotels', 'insert')
    response = authenticated_client.post('/api/hotels', json={'name': 'Lodge', 'location': 'Mara'})
    assert response.status_code == 500
    assert response.get_json()['success'] is False


def test_patch_without_attractions_keeps_them(authenticated_client, hotel_with_attraction):
    response = authenticated_client.patch('/api/hotels/mara-lodge', json={'rating': 4.8})
    assert response.status_code == 200
    hotel = response.get_json()['data']['hotel']
    assert hotel['rating'] == 4.8
    assert hotel['nearby_attractions'] == hotel_with_attraction['nearby_attractions']


def test_patch_with_empty_list_clears(authenticated_client, hotel_with_attraction):
    response = authenticated_client.patch('/api/hotels/mara-lodge', json={'nearby_attractions': []})
    assert response.get_json()['data']['hotel']['nearby_attractions'] == []


def test_patch_missing(authenticated_client):
    response = authenticated_client.patch('/api/hotels/nope', json={'rating': 4})
    assert response.status_code == 404


def test_get_and_delete(authenticated_client, backend, hotel_with_attraction):
    assert authenticated_client.get('/api/hotels/mara-lodge').status_code == 200

    response = authenticated_client.delete('/api/hotels/mara-lodge')
    assert response.status_code == 200
    assert backend.rows('nearby_attractions') == []

    assert authenticated_client.get('/api/hotels/mara-lodge').status_code == 404
    assert authenticated_client.delete('/api/hotels/mara-lodge').status_code == 404


def test_booking_status(authenticated_client, backend):
    booking = backend.seed('bookings', package_id='mara-3-days', status='pending',
                           start_date='2026-03-01', end_date='2026-03-04', contact_name='Jo')

    response = authenticated_client.post(f"/api/bookings/{booking['id']}/status", json={'status': 'confirmed'})
    assert response.status_code == 200
    assert response.get_json()['data']['booking']['status'] == 'confirmed'

    response = authenticated_client.post(f"/api/bookings/{booking['id']}/status", json={'status': 'shipped'})
    assert response.status_code == 400

    response = authenticated_client.post('/api/bookings/missing/status', json={'status': 'confirmed'})
    assert response.status_code == 404


def test_inquiry_status(authenticated_client, backend):
    inquiry = backend.seed('contact_inquiries', name='Jo', email='jo@x.co', subject='Hi',
                           message='Hello', status='pending')

    response = authenticated_client.post(f"/api/inquiries/{inquiry['id']}/status", json={'status': 'responded'})
    assert response.status_code == 200
    assert backend.rows('contact_inquiries')[0]['status'] == 'responded'

    response = authenticated_client.post(f"/api/inquiries/{inquiry['id']}/status", json={'status': 'lost'})
    assert response.status_code == 400
