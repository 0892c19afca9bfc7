"""
Tests for form parsing and formatting helpers.
"""

from werkzeug.datastructures import MultiDict

from utils.helpers import (
    format_date,
    slugify,
    new_row_key,
    parse_list_field,
    parse_row_group,
    to_int,
    to_float,
    truncate_text,
)
from blueprints.admin.services import build_hotel_payload, build_booking_payload, hotel_form_error


def test_slugify():
    assert slugify('Mara Serena Lodge!') == 'mara-serena-lodge'
    assert slugify('  Lake  Nakuru -- Camp ') == 'lake-nakuru-camp'
    assert slugify(None) == ''


def test_new_row_key_unique():
    keys = {new_row_key() for _ in range(50)}
    assert len(keys) == 50
    assert all(key.isalnum() for key in keys)


def test_parse_list_field_drops_blanks():
    form = MultiDict([('tags', 'big five'), ('tags', '  '), ('tags', ' migration ')])
    assert parse_list_field(form, 'tags') == ['big five', 'migration']
    assert parse_list_field(form, 'missing') == []


class TestParseRowGroup:
    """Rows are keyed by synthetic key, not by position."""

    def test_rows_follow_first_appearance(self):
        form = MultiDict([
            ('nearby_attractions-zz-name', 'Gate'),
            ('other', 'x'),
            ('nearby_attractions-aa-name', 'River'),
            ('nearby_attractions-zz-distance', '2km'),
            ('nearby_attractions-aa-type', 'Water'),
        ])
        assert parse_row_group(form, 'nearby_attractions', ('name', 'distance', 'type')) == [
            {'name': 'Gate', 'distance': '2km', 'type': ''},
            {'name': 'River', 'distance': '', 'type': 'Water'},
        ]

    def test_blank_rows_and_unknown_fields_dropped(self):
        form = MultiDict([
            ('nearby_attractions-k1-name', ' '),
            ('nearby_attractions-k1-distance', ''),
            ('nearby_attractions-k2-colour', 'red'),
        ])
        assert parse_row_group(form, 'nearby_attractions', ('name', 'distance', 'type')) == []


class TestHotelPayload:

    def test_attractions_only_with_marker(self):
        form = MultiDict([('name', 'Lodge'), ('nearby_attractions-k1-name', 'Gate')])
        assert 'nearby_attractions' not in build_hotel_payload(form)

    def test_marker_with_no_rows_is_empty_set(self):
        form = MultiDict([('name', 'Lodge'), ('nearby_attractions_submitted', '1')])
        assert build_hotel_payload(form)['nearby_attractions'] == []

    def test_defaults(self):
        data = build_hotel_payload(MultiDict([('name', ' Lodge '), ('rating', 'x')]))
        assert data['name'] == 'Lodge'
        assert data['rating'] == 0.0
        assert data['glow_color'] == '#3B82F6'
        assert data['room_count'] == 12
        assert data['contact_email'] is None


def test_booking_payload_numbers():
    data = build_booking_payload(MultiDict([('adults', '3'), ('children', ''), ('total_amount', '99.5')]))
    assert data['adults'] == 3
    assert data['children'] == 0
    assert data['total_amount'] == 99.5


def test_conversions():
    assert to_int('5') == 5
    assert to_int('', 1) == 1
    assert to_float('2.5') == 2.5
    assert to_float(None) is None


def test_truncate_text():
    assert truncate_text('short') == 'short'
    assert truncate_text('a' * 20, 10) == 'aaaaaaa...'
    assert truncate_text(None) == ''


def test_format_date(app):
    assert format_date('2026-03-01') == 'Mar 01, 2026'
    assert format_date('2026-03-01T21:30:00Z', '%Y-%m-%d %H:%M') == '2026-03-02 00:30'
    assert format_date('') == ''
    assert format_date('not a date') == 'not a date'


def test_hotel_form_requires_location():
    assert hotel_form_error({'name': 'Lodge', 'location': 'Mara'}) is None
    assert hotel_form_error({'name': 'Lodge', 'location': ''}) == 'Location is required'
    assert hotel_form_error({'name': '', 'location': 'Mara'}) == 'Hotel name is required'
