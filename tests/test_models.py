"""
Tests for package, destination, booking, inquiry and review data access.
"""

import pytest

from models.package import (
    create_package, update_package, delete_package, get_all_packages,
    get_package_by_id, set_package_featured, package_key, validate_package_data,
)
from models.destination import (
    create_destination, update_destination, delete_destination,
    get_all_destinations, get_destination_by_id,
)
from models.booking import (
    get_all_bookings, get_booking_by_id, update_booking, update_booking_status,
    delete_booking, BOOKING_ACTIONS,
)
from models.inquiry import (
    get_all_inquiries, get_inquiry_by_id, update_inquiry, update_inquiry_status,
    mark_inquiry_as_spam, archive_inquiry, delete_inquiry,
)
from models.review import (
    get_all_reviews, get_review_by_id, update_review, approve_review,
    disapprove_review, verify_review, delete_review,
)

PACKAGE = {
    'title': 'Mara Classic Safari',
    'duration': '3 Days',
    'group_size': '2-6',
    'overview': 'Three days in the Mara.',
    'best_travel_season': 'July - October',
    'price_range': 1200,
    'image_url': 'https://img.example.com/mara.jpg',
    'destination_category': 'Masai Mara',
    'package_category': 'Classic',
}

DESTINATION = {
    'name': 'Samburu',
    'tagline': 'The special five',
    'image_url': '/images/samburu.jpg',
    'glow_color': '#10B981',
    'link': '/destinations/samburu',
    'description': 'Arid north.',
    'key_features': ['Reticulated giraffe'],
}


class TestPackages:

    def test_package_key(self):
        assert package_key({'slug': 'mara-3d', 'title': 'Ignored'}) == 'mara-3d'
        assert package_key({'title': 'Mara  Classic Safari'}) == 'mara-classic-safari'
        assert package_key({}) is None

    def test_create_and_fetch(self, app):
        package = create_package({**PACKAGE, 'unknown_field': 'dropped'})

        assert package['package_id'] == 'mara-classic-safari'
        assert 'unknown_field' not in package
        assert get_package_by_id(package['id'])['title'] == 'Mara Classic Safari'

    def test_newest_first(self, app):
        create_package(PACKAGE)
        create_package({**PACKAGE, 'title': 'Amboseli Adventure'})
        assert [p['title'] for p in get_all_packages()] == ['Amboseli Adventure', 'Mara Classic Safari']

    def test_validation(self):
        assert validate_package_data(PACKAGE) == (True, '')
        assert validate_package_data({**PACKAGE, 'duration': ' '}) == (False, 'Duration is required')
        assert validate_package_data({**PACKAGE, 'price_range': None})[0] is False
        assert validate_package_data({**PACKAGE, 'rating': 6})[0] is False
        assert validate_package_data({**PACKAGE, 'destination_category': 'Tsavo'})[0] is False
        assert validate_package_data({'rating': 4}, partial=True) == (True, '')

    def test_update_rederives_key(self, app):
        package = create_package(PACKAGE)
        updated = update_package(package['id'], {'title': 'Mara Premium'})
        assert updated['package_id'] == 'mara-premium'

    def test_update_missing(self, app):
        assert update_package('missing', {'rating': 4}) is None

    def test_feature_and_delete(self, app):
        package = create_package(PACKAGE)
        assert set_package_featured(package['id'], True)['is_featured'] is True
        assert delete_package(package['id']) is True
        assert delete_package(package['id']) is False

    def test_create_invalid_makes_no_call(self, app, backend):
        with pytest.raises(ValueError):
            create_package({**PACKAGE, 'package_category': 'Luxury'})
        assert ('safari_packages', 'insert') not in backend.calls


class TestDestinations:

    def test_crud(self, app):
        destination = create_destination(DESTINATION)
        assert get_destination_by_id(destination['id'])['name'] == 'Samburu'

        updated = update_destination(destination['id'], {'tagline': 'Dry country'})
        assert updated['tagline'] == 'Dry country'

        assert delete_destination(destination['id']) is True
        assert get_destination_by_id(destination['id']) is None

    def test_ordered_by_name(self, app):
        create_destination(DESTINATION)
        create_destination({**DESTINATION, 'name': 'Amboseli'})
        assert [d['name'] for d in get_all_destinations()] == ['Amboseli', 'Samburu']

    def test_validation(self, app):
        with pytest.raises(ValueError, match='Tagline is required'):
            create_destination({**DESTINATION, 'tagline': ''})
        with pytest.raises(ValueError, match='Invalid link'):
            create_destination({**DESTINATION, 'link': 'not a link'})

    def test_update_missing(self, app):
        assert update_destination('missing', {'tagline': 'x'}) is None


@pytest.fixture
def booking(backend):
    backend.seed('safari_packages', package_id='mara-3d', title='Mara Classic', duration='3 Days',
                 destination_category='Masai Mara', price_range=1200)
    return backend.seed('bookings', package_id='mara-3d', status='pending', adults=2, children=1,
                        traveler_count=3, start_date='2026-03-01', end_date='2026-03-04',
                        contact_name='Jo Kamau', contact_email='jo@example.com')


class TestBookings:

    def test_list_embeds_package(self, app, booking):
        bookings = get_all_bookings()
        assert bookings[0]['package'] == {
            'title': 'Mara Classic', 'duration': '3 Days',
            'destination_category': 'Masai Mara', 'price_range': 1200,
        }

    def test_update_stamps_and_recounts(self, app, booking):
        updated = update_booking(booking['id'], {'children': 3})
        assert updated['traveler_count'] == 5
        assert updated['updated_at']
        assert updated['package']['title'] == 'Mara Classic'

    def test_update_status(self, app, booking):
        assert update_booking_status(booking['id'], 'awaiting_payment')['status'] == 'awaiting_payment'

    def test_unknown_status_rejected_before_backend(self, app, backend, booking):
        backend.calls.clear()
        with pytest.raises(ValueError, match='Invalid status'):
            update_booking_status(booking['id'], 'refunded')
        assert backend.calls == []

    def test_actions(self):
        assert [s for s, _ in BOOKING_ACTIONS['pending']] == ['confirmed', 'cancelled']
        assert BOOKING_ACTIONS['awaiting_payment'] == [('confirmed', 'Mark Paid')]
        assert 'confirmed' not in BOOKING_ACTIONS

    def test_invalid_fields(self, app, booking):
        with pytest.raises(ValueError, match='Adults'):
            update_booking(booking['id'], {'adults': 0})
        with pytest.raises(ValueError, match='Invalid contact email'):
            update_booking(booking['id'], {'contact_email': 'nope'})

    def test_missing_and_delete(self, app, booking):
        assert update_booking('missing', {'note': 'x'}) is None
        assert get_booking_by_id('missing') is None
        assert delete_booking(booking['id']) is True
        assert get_all_bookings() == []


@pytest.fixture
def inquiry(backend):
    return backend.seed('contact_inquiries', name='Jo', email='jo@example.com', subject='Dates',
                        message='Is July busy?', status='pending')


class TestInquiries:

    def test_transitions(self, app, inquiry):
        assert update_inquiry_status(inquiry['id'], 'responded')['status'] == 'responded'
        assert mark_inquiry_as_spam(inquiry['id'])['status'] == 'spam'
        archived = archive_inquiry(inquiry['id'])
        assert archived['status'] == 'archived'
        assert archived['updated_at']

    def test_invalid_status(self, app, inquiry):
        with pytest.raises(ValueError):
            update_inquiry(inquiry['id'], {'status': 'closed'})
        assert get_inquiry_by_id(inquiry['id'])['status'] == 'pending'

    def test_list_and_delete(self, app, inquiry):
        assert len(get_all_inquiries()) == 1
        assert delete_inquiry(inquiry['id']) is True
        assert update_inquiry_status(inquiry['id'], 'responded') is None


@pytest.fixture
def review(backend):
    backend.seed('safari_packages', package_id='mara-3d', title='Mara Classic', destination_category='Masai Mara')
    return backend.seed('reviews', package_id='mara-3d', name='Sam', rating=4, comment='Great guides',
                        submitted_at='2026-02-01T10:00:00+00:00', is_approved=False, is_verified=False)


class TestReviews:

    def test_moderation_flags(self, app, review):
        assert approve_review(review['id'])['is_approved'] is True
        assert verify_review(review['id'])['is_verified'] is True
        updated = disapprove_review(review['id'])
        assert updated['is_approved'] is False
        assert updated['is_verified'] is True
        assert updated['package'] == {'title': 'Mara Classic', 'destination_category': 'Masai Mara'}

    def test_ordered_by_submission(self, app, backend, review):
        backend.seed('reviews', package_id='mara-3d', name='Lee', rating=5,
                     submitted_at='2026-02-05T10:00:00+00:00')
        assert [r['name'] for r in get_all_reviews()] == ['Lee', 'Sam']

    def test_rating_range(self, app, review):
        with pytest.raises(ValueError):
            update_review(review['id'], {'rating': 0})

    def test_delete(self, app, review):
        assert delete_review(review['id']) is True
        assert get_review_by_id(review['id']) is None
        assert approve_review(review['id']) is None
