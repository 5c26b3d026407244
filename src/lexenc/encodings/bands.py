"""Lead/trail byte-range bands for double-byte encodings.

A band is a closed interval on the lead byte crossed with a closed interval
on the trail byte, optionally excluding one reserved trail value. A
double-byte encoding's valid pairs are the union of its bands.

Thread Safety:
    Bands are frozen and band tables are tuples. Safe to share.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DoubleByteBand:
    """One rectangular region of valid (lead, trail) pairs.

    Attributes:
        lead_min: Lowest lead byte (inclusive)
        lead_max: Highest lead byte (inclusive)
        trail_min: Lowest trail byte (inclusive)
        trail_max: Highest trail byte (inclusive)
        excluded_trail: Trail value with no assigned characters, or None

    """

    lead_min: int
    lead_max: int
    trail_min: int
    trail_max: int
    excluded_trail: int | None = None

    def contains(self, lead: int, trail: int) -> bool:
        # Lead range first: most bytes fail here
        return (
            self.lead_min <= lead <= self.lead_max
            and self.trail_min <= trail <= self.trail_max
            and trail != self.excluded_trail
        )


def in_bands(bands: tuple[DoubleByteBand, ...], lead: int, trail: int) -> bool:
    """Check whether (lead, trail) falls inside any band."""
    for band in bands:
        if band.contains(lead, trail):
            return True
    return False
