"""Tests for the monthly event calendar."""

from datetime import UTC, datetime

import pytest

from celestine.events import month_events


@pytest.fixture
def stationing_mercury(fake_ephemeris):
    class StationingMercury(fake_ephemeris):
        """Mercury slows to a halt around 11 June and reverses.

        A positive ``curvature`` turns it direct, a negative one retrograde.
        """

        def __init__(self, curvature=0.05, **kwargs):
            super().__init__(**kwargs)
            self.curvature = curvature

        def longitude(self, body, instant):
            if body == "Mercury":
                days = self._days(instant)
                return 100.0 + self.curvature * (days - 10.5) ** 2
            return super().longitude(body, instant)

    return StationingMercury


def _waxing(days: float) -> float:
    return 170.0 + 12.2 * days


def test_lunations_from_phase_angle(fake_ephemeris):
    """Test full and new moons are found from the phase angle."""
    provider = fake_ephemeris(longitudes={"Moon": 200.0}, phase=_waxing)
    events = month_events(2025, 6, provider)
    lunations = [(e.type, e.date.day) for e in events if e.type in ("full_moon", "new_moon")]
    assert lunations == [("full_moon", 2), ("new_moon", 17)]

    full = next(e for e in events if e.type == "full_moon")
    assert full.description == "Full Moon in Libra"
    assert full.emoji == "🌕"
    assert full.impact == "significant"
    assert full.date == datetime(2025, 6, 2, 12, tzinfo=UTC)


def test_ingresses(fake_ephemeris):
    """Test sign changes are reported with their impact."""
    provider = fake_ephemeris(
        longitudes={"Mars": 29.5, "Pluto": 60.02, "Moon": 0.0},
        speeds={"Mars": 0.6, "Pluto": 0.1, "Moon": 13.2},
    )
    events = month_events(2025, 6, provider)
    ingresses = [e for e in events if e.type == "ingress"]
    assert [(e.description, e.date.day, e.impact) for e in ingresses] == [
        ("Pluto enters Gemini", 1, "significant"),
        ("Mars enters Taurus", 2, "neutral"),
    ]
    assert ingresses[1].emoji == "♂"


def test_moon_ingresses_are_not_reported(fake_ephemeris):
    """Test Moon sign changes are skipped."""
    provider = fake_ephemeris(speeds={"Moon": 13.2})
    events = month_events(2025, 6, provider)
    assert not any(e.description.startswith("Moon ") for e in events)


def test_station_direct(stationing_mercury):
    """Test a retrograde body turning direct."""
    provider = stationing_mercury()
    stations = [e for e in month_events(2025, 6, provider) if e.type in ("retrograde", "direct")]
    assert len(stations) == 1
    station = stations[0]
    assert station.type == "direct"
    assert station.description == "Mercury stations direct in Cancer"
    assert station.date.day == 11
    assert station.impact == "challenging"
    assert station.emoji == "⏩"


def test_station_retrograde(stationing_mercury):
    """Test a direct body turning retrograde."""
    provider = stationing_mercury(curvature=-0.05)
    events = month_events(2025, 6, provider)
    stations = [e for e in events if e.type in ("retrograde", "direct")]
    assert len(stations) == 1
    station = stations[0]
    assert station.type == "retrograde"
    assert station.description == "Mercury stations retrograde in Cancer"
    assert station.date.day == 12
    assert station.impact == "challenging"
    assert station.emoji == "⏪"

    # Backing out of Cancer on 26 June
    ingress = [(e.description, e.date.day) for e in events if e.type == "ingress"]
    assert ingress == [("Mercury enters Gemini", 26)]


def test_quiet_month_has_no_events(fake_ephemeris):
    """Test a motionless sky produces no events."""
    assert month_events(2025, 2, fake_ephemeris()) == []


def test_events_in_date_order(stationing_mercury):
    """Test events are sorted by date."""
    provider = stationing_mercury(
        longitudes={"Mars": 29.5, "Pluto": 60.02},
        speeds={"Mars": 0.6, "Pluto": 0.1},
        phase=_waxing,
    )
    events = month_events(2025, 6, provider)
    assert len(events) == 5
    dates = [e.date for e in events]
    assert dates == sorted(dates)
    assert all(e.date.month == 6 for e in events)


@pytest.mark.parametrize("month", [0, 13, -1])
def test_invalid_month(month, fake_ephemeris):
    """Test months outside 1-12 are rejected."""
    with pytest.raises(ValueError):
        month_events(2025, month, fake_ephemeris())


def test_june_2025_sky():
    """Test known June 2025 lunations and ingresses."""
    events = month_events(2025, 6)
    by_description = {e.description: e for e in events}

    full = next(e for e in events if e.type == "full_moon")
    assert full.date.day == 11
    assert full.description == "Full Moon in Sagittarius"

    new = next(e for e in events if e.type == "new_moon")
    assert new.date.day == 25
    assert new.description == "New Moon in Cancer"

    jupiter = by_description["Jupiter enters Cancer"]
    assert jupiter.date.day == 10
    assert jupiter.impact == "significant"

    assert "Sun enters Cancer" in by_description
    assert not any(e.description.startswith("Moon ") for e in events)
