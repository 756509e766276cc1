"""Ward lookup over the loaded climate records.

Ward names repeat across counties, so callers can narrow a lookup with the
subcounty and county. Matching ignores case and surrounding whitespace.
"""

import logging
from collections.abc import Sequence

from shamba.core.types import ClimateRecord

logger = logging.getLogger(__name__)

def _norm(value: str) -> str:
    return value.strip().casefold()

def find_location(
    records: Sequence[ClimateRecord],
    ward: str,
    subcounty: str | None = None,
    county: str | None = None,
) -> ClimateRecord | None:
    """Return the climate record for a ward, or None if it isn't found.

    When the ward name alone matches several records the first one in
    catalog order is returned and a warning is logged.
    """
    matches = [
        r for r in records
        if _norm(r.ward) == _norm(ward)
        and (subcounty is None or _norm(r.subcounty) == _norm(subcounty))
        and (county is None or _norm(r.county) == _norm(county))
    ]
    if not matches:
        return None
    if len(matches) > 1:
        logger.warning(
            "Ward %r is ambiguous (%d matches), using %s / %s",
            ward, len(matches), matches[0].county, matches[0].subcounty,
        )
    return matches[0]

def list_counties(records: Sequence[ClimateRecord]) -> list[str]:
    return sorted({r.county for r in records})

def list_wards(records: Sequence[ClimateRecord], county: str) -> list[str]:
    return sorted({r.ward for r in records if _norm(r.county) == _norm(county)})
