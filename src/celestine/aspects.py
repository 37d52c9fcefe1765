"""Aspect detection between transiting and natal positions."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from celestine.bodies import ASPECT_TYPES, LUMINARIES, normalize_degrees, round_half_up
from celestine.meanings import interpret_aspect
from celestine.schemas.ephemeris import PlanetPosition, TransitAspect

logger = logging.getLogger(__name__)


def angular_distance(lon1: float, lon2: float) -> float:
    """Calculate the shortest angular distance between two longitudes."""
    diff = abs(lon1 - lon2) % 360.0
    if diff > 180.0:
        diff = 360.0 - diff
    return diff


def signed_delta(lon_from: float, lon_to: float) -> float:
    """Shortest signed motion from ``lon_from`` to ``lon_to``, in (-180, 180]."""
    diff = normalize_degrees(lon_to - lon_from)
    if diff > 180.0:
        diff -= 360.0
    return diff


def find_transit_aspects(
    transit_positions: Iterable[PlanetPosition],
    natal_positions: Iterable[PlanetPosition],
) -> list[TransitAspect]:
    """Find every aspect a transiting body makes to a natal body.

    Moon-to-Moon is skipped. Pairs involving a luminary get the full orb,
    other pairs one degree less. Results are ordered tightest first.

    ``is_applying`` is a static approximation (orb under half the allowed
    orb); it does not look at the direction of motion.
    """
    natal = list(natal_positions)
    aspects_found: list[tuple[float, TransitAspect]] = []

    for transit in transit_positions:
        for body in natal:
            if transit.name == "Moon" and body.name == "Moon":
                continue

            dist = angular_distance(transit.longitude, body.longitude)
            involves_luminary = transit.name in LUMINARIES or body.name in LUMINARIES

            for geometry in ASPECT_TYPES:
                orb = abs(dist - geometry.angle)
                orb_limit = geometry.orb if involves_luminary else geometry.orb - 1.0
                if orb > orb_limit:
                    continue

                aspects_found.append((
                    orb,
                    TransitAspect(
                        transit_planet=transit.name,
                        natal_planet=body.name,
                        aspect_type=geometry.name,
                        aspect_symbol=geometry.symbol,
                        orb=round_half_up(orb, 1),
                        is_applying=orb < geometry.orb / 2.0,
                        interpretation=interpret_aspect(
                            geometry.name, transit.name, body.name, transit.sign
                        ),
                    ),
                ))

    # Sort on the unrounded orb; ties keep discovery order
    aspects_found.sort(key=lambda item: item[0])
    logger.debug("Found %d transit aspects", len(aspects_found))
    return [aspect for _, aspect in aspects_found]


def count_by_nature(aspects: Iterable[TransitAspect], names: frozenset[str]) -> int:
    return sum(1 for a in aspects if a.aspect_type in names)
