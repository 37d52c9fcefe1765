"""Tests for aspect detection."""

from celestine.aspects import angular_distance, find_transit_aspects, signed_delta
from celestine.bodies import decompose_longitude
from celestine.meanings import resolve_interpretation
from celestine.schemas.ephemeris import PlanetPosition


def _pos(name: str, longitude: float) -> PlanetPosition:
    sign, degree, minute = decompose_longitude(longitude)
    return PlanetPosition(
        name=name,
        longitude=longitude,
        sign=sign,
        sign_degree=degree,
        sign_minute=minute,
    )


def test_angular_distance():
    """Test angular distance calculation."""
    assert angular_distance(0, 90) == 90.0
    assert angular_distance(90, 0) == 90.0
    assert angular_distance(0, 180) == 180.0
    assert angular_distance(350, 10) == 20.0
    assert angular_distance(10, 350) == 20.0
    assert abs(angular_distance(0, 0) - 0.0) < 0.001


def test_angular_distance_wraparound():
    """Test angular distance handles wraparound correctly."""
    assert abs(angular_distance(355, 5) - 10.0) < 0.001
    assert abs(angular_distance(1, 359) - 2.0) < 0.001


def test_angular_distance_bounded_and_symmetric():
    """Test distance stays within 0-180 and ignores argument order."""
    for a in range(0, 360, 13):
        for b in range(0, 360, 11):
            d = angular_distance(a + 0.25, b + 0.5)
            assert 0.0 <= d <= 180.0
            assert d == angular_distance(b + 0.5, a + 0.25)


def test_signed_delta():
    """Test signed motion wraps across 0 degrees."""
    assert signed_delta(10.0, 20.0) == 10.0
    assert signed_delta(20.0, 10.0) == -10.0
    assert signed_delta(359.0, 1.0) == 2.0
    assert signed_delta(1.0, 359.0) == -2.0
    assert signed_delta(0.0, 180.0) == 180.0


def test_exact_square_from_sun_to_natal_moon():
    """Test an exact square is found with zero orb."""
    aspects = find_transit_aspects([_pos("Sun", 90.0)], [_pos("Moon", 0.0)])
    assert len(aspects) == 1
    square = aspects[0]
    assert square.aspect_type == "Square"
    assert square.aspect_symbol == "□"
    assert square.orb == 0.0
    assert square.transit_planet == "Sun"
    assert square.natal_planet == "Moon"


def test_moon_to_moon_is_never_reported():
    """Test transiting Moon to natal Moon is skipped."""
    transit = [_pos("Moon", 10.0), _pos("Sun", 10.0)]
    natal = [_pos("Moon", 10.0)]
    aspects = find_transit_aspects(transit, natal)
    assert all(not (a.transit_planet == "Moon" and a.natal_planet == "Moon") for a in aspects)
    assert [(a.transit_planet, a.aspect_type) for a in aspects] == [("Sun", "Conjunction")]


def test_non_luminary_pairs_get_tighter_orb():
    """Test orb limits with and without a luminary."""
    # 7.5 degrees past a square: allowed for nobody (limit 7), and Mars-Venus limit is 6
    assert find_transit_aspects([_pos("Mars", 96.5)], [_pos("Venus", 0.0)]) == []
    assert find_transit_aspects([_pos("Mars", 96.0)], [_pos("Venus", 0.0)])[0].orb == 6.0
    # A luminary on either side restores the full orb
    assert find_transit_aspects([_pos("Sun", 97.0)], [_pos("Venus", 0.0)])[0].orb == 7.0
    assert find_transit_aspects([_pos("Mars", 97.0)], [_pos("Moon", 0.0)])[0].orb == 7.0


def test_aspects_sorted_by_orb():
    """Test aspects come back tightest first."""
    transit = [_pos("Sun", 125.0), _pos("Mars", 61.0), _pos("Jupiter", 183.0), _pos("Venus", 2.5)]
    natal = [_pos("Sun", 0.0), _pos("Venus", 4.0), _pos("Saturn", 300.0)]
    aspects = find_transit_aspects(transit, natal)
    assert aspects
    orbs = [a.orb for a in aspects]
    assert orbs == sorted(orbs)


def test_is_applying_is_a_static_half_orb_approximation():
    """Test the applying flag uses half the allowed orb."""
    # Known approximation: compares orb to half the allowed orb, ignores motion
    tight = find_transit_aspects([_pos("Sun", 123.9)], [_pos("Mars", 0.0)])[0]
    wide = find_transit_aspects([_pos("Sun", 124.0)], [_pos("Mars", 0.0)])[0]
    assert tight.aspect_type == wide.aspect_type == "Trine"
    assert tight.is_applying is True
    assert wide.is_applying is False


def test_empty_natal_set_produces_no_aspects():
    """Test an empty natal chart yields no aspects."""
    assert find_transit_aspects([_pos("Sun", 10.0)], []) == []


def test_interpretation_tiers():
    """Test each interpretation tier is reachable."""
    exact = resolve_interpretation("Conjunction", "Sun", "Moon", "Leo")
    assert exact.source == "exact"

    template = resolve_interpretation("Trine", "Mars", "Venus", "Leo")
    assert template.source == "aspect_template"
    assert "Mars in Leo" in template.text
    assert "natal Venus" in template.text

    composed = resolve_interpretation("Conjunction", "Pluto", "Neptune", "Aquarius")
    assert composed.source == "composed"
    assert composed.text == "Pluto in Aquarius conjunctions your natal Neptune"


def test_every_pair_gets_an_interpretation():
    """Test every detected aspect carries interpretation text."""
    bodies = ["Sun", "Moon", "Mercury", "Venus", "Mars", "Jupiter", "Saturn", "Uranus", "Neptune", "Pluto"]
    natal = [_pos(name, 0.0) for name in bodies]
    for offset in (0.0, 60.0, 90.0, 120.0, 180.0):
        transit = [_pos(name, offset) for name in bodies]
        for aspect in find_transit_aspects(transit, natal):
            assert aspect.interpretation
