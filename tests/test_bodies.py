"""Tests for sign tables and angular decomposition."""

import pytest

from celestine.bodies import (
    SIGNS,
    compatible_signs,
    decompose_longitude,
    longitude_to_sign,
    normalize_degrees,
    round_half_up,
    zodiac_sign_of,
    zodiac_symbol_of,
)


def test_normalize_degrees():
    """Test degree normalization into 0-360."""
    assert normalize_degrees(0.0) == 0.0
    assert normalize_degrees(360.0) == 0.0
    assert normalize_degrees(370.0) == 10.0
    assert normalize_degrees(-10.0) == 350.0
    assert normalize_degrees(-720.5) == pytest.approx(359.5)
    assert 0.0 <= normalize_degrees(-1e-15) < 360.0


def test_longitude_to_sign():
    """Test longitude to sign conversion."""
    assert longitude_to_sign(0.0) == ("Aries", 0.0)
    assert longitude_to_sign(30.0) == ("Taurus", 0.0)
    assert longitude_to_sign(90.0) == ("Cancer", 0.0)
    assert longitude_to_sign(180.0) == ("Libra", 0.0)
    assert longitude_to_sign(270.0) == ("Capricorn", 0.0)

    sign, degree = longitude_to_sign(45.5)
    assert sign == "Taurus"
    assert abs(degree - 15.5) < 0.001

    # Wraparound
    sign, _ = longitude_to_sign(359.0)
    assert sign == "Pisces"
    sign, _ = longitude_to_sign(-1.0)
    assert sign == "Pisces"


def test_zodiac_sign_edges():
    """Test sign lookup at sign boundaries."""
    assert zodiac_sign_of(359.9) == "Pisces"
    assert zodiac_sign_of(0.0) == "Aries"
    assert zodiac_sign_of(29.999) == "Aries"
    assert zodiac_sign_of(30.0) == "Taurus"
    assert zodiac_symbol_of(0.0) == "♈"
    assert zodiac_symbol_of(359.9) == "♓"


def test_decompose_longitude():
    """Test splitting a longitude into sign, degree and minute."""
    assert decompose_longitude(45.5) == ("Taurus", 15, 30)
    assert decompose_longitude(0.0) == ("Aries", 0, 0)
    assert decompose_longitude(359.25) == ("Pisces", 29, 15)


def test_decompose_longitude_carries_rounded_minute():
    """Test a minute rounding to 60 carries into the degree and sign."""
    # 29°59.9' rounds to the next sign's first degree
    assert decompose_longitude(29.9985) == ("Taurus", 0, 0)
    assert decompose_longitude(359.9995) == ("Aries", 0, 0)
    assert decompose_longitude(10.99999) == ("Aries", 11, 0)


def test_decomposed_sign_can_lead_truncated_sign_at_cusp():
    """Test the rounded display sign runs ahead of the truncated sign at a cusp."""
    assert decompose_longitude(29.9999) == ("Taurus", 0, 0)
    assert zodiac_sign_of(29.9999) == "Aries"
    assert longitude_to_sign(29.9999)[0] == "Aries"
    # More than half an arc-minute short of the cusp both agree
    assert decompose_longitude(29.99) == ("Aries", 29, 59)
    assert zodiac_sign_of(29.99) == "Aries"


def test_decompose_round_trip_within_one_arc_minute():
    """Test decomposed parts rebuild the longitude within one arc-minute."""
    for step in range(0, 36000, 7):
        lon = step / 100.0 + 0.0037
        sign, degree, minute = decompose_longitude(lon)
        assert 0 <= degree < 30
        assert 0 <= minute < 60
        rebuilt = SIGNS.index(sign) * 30 + degree + minute / 60.0
        diff = abs(rebuilt - lon) % 360.0
        assert min(diff, 360.0 - diff) <= 1 / 60.0 + 1e-9


def test_round_half_up():
    """Test halves round upward."""
    assert round_half_up(2.5) == 3.0
    assert round_half_up(0.25, 1) == 0.3
    assert round_half_up(7.04, 1) == 7.0


def test_compatible_signs():
    """Test compatible signs share a harmonious element."""
    assert compatible_signs("Aries") == ["Gemini", "Leo", "Libra", "Sagittarius", "Aquarius"]
    assert compatible_signs("Scorpio") == ["Taurus", "Cancer", "Virgo", "Capricorn", "Pisces"]
    for sign in SIGNS:
        matches = compatible_signs(sign)
        assert sign not in matches
        assert len(matches) == 5


def test_compatible_signs_rejects_unknown():
    """Test unknown signs are rejected."""
    with pytest.raises(ValueError):
        compatible_signs("Ophiuchus")
