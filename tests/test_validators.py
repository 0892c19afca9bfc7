"""
Tests for input validation utilities.
"""

from utils.validators import (
    validate_email,
    validate_url,
    validate_hex_color,
    validate_date_range,
    validate_date_format,
    validate_number_range,
    sanitize_input
)


class TestValidateEmail:
    """Tests for email validation."""

    def test_valid_email(self):
        assert validate_email('user@example.com') is True
        assert validate_email('user.name+tag@example.co.ke') is True

    def test_invalid_email(self):
        assert validate_email('') is False
        assert validate_email(None) is False
        assert validate_email('invalid') is False
        assert validate_email('missing@domain') is False
        assert validate_email('spaces in@email.com') is False


class TestValidateUrl:
    """Tests for URL validation."""

    def test_absolute_and_relative(self):
        assert validate_url('https://example.com/img.jpg') is True
        assert validate_url('http://localhost:3000/book') is True
        assert validate_url('/destinations/mara') is True

    def test_invalid(self):
        assert validate_url('') is False
        assert validate_url('ftp://example.com') is False
        assert validate_url('//cdn.example.com') is False
        assert validate_url('/with space') is False
        assert validate_url('example.com') is False


class TestValidateHexColor:

    def test_valid(self):
        assert validate_hex_color('#3B82F6') is True
        assert validate_hex_color('#fff') is True

    def test_invalid(self):
        assert validate_hex_color('3B82F6') is False
        assert validate_hex_color('#12345') is False
        assert validate_hex_color('blue') is False
        assert validate_hex_color(None) is False


class TestValidateDateRange:
    """Tests for date range validation."""

    def test_valid_date_range(self):
        assert validate_date_range('2026-01-15', '2026-01-20') is True
        assert validate_date_range('2026-01-15', '2026-01-15') is True

    def test_invalid_date_range(self):
        assert validate_date_range('2026-01-20', '2026-01-15') is False

    def test_invalid_date_format(self):
        assert validate_date_range('15/01/2026', '20/01/2026') is False
        assert validate_date_range(None, '2026-01-20') is False


class TestValidateDateFormat:

    def test_valid_date_format(self):
        assert validate_date_format('2026-01-15') is True

    def test_invalid_date_format(self):
        assert validate_date_format('15-01-2026') is False
        assert validate_date_format('2026-02-30') is False
        assert validate_date_format('') is False
        assert validate_date_format(None) is False


class TestValidateNumberRange:

    def test_in_range(self):
        assert validate_number_range(4.5, 0, 5, 'Rating') == (True, '')
        assert validate_number_range('10', 0, 10, 'Service rating') == (True, '')

    def test_out_of_range(self):
        assert validate_number_range(5.1, 0, 5, 'Rating') == (False, 'Rating must be between 0 and 5')
        assert validate_number_range(-1, 0, 5, 'Rating')[0] is False

    def test_not_a_number(self):
        assert validate_number_range('abc', 0, 5, 'Rating') == (False, 'Rating must be a number')
        assert validate_number_range(None, 0, 5, 'Rating')[0] is False


class TestSanitizeInput:
    """Tests for input sanitization."""

    def test_trim_whitespace(self):
        assert sanitize_input('  hello  ') == 'hello'

    def test_limit_length(self):
        assert sanitize_input('abcdef', max_length=3) == 'abc'

    def test_empty_input(self):
        assert sanitize_input('') == ''
        assert sanitize_input(None) == ''
