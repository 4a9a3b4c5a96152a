"""
Error taxonomy.

All three failures are local to the operation that raises them: a rejected row
never aborts a load, a failed load leaves an empty but usable map, and a failed
locate never touches filtering or rendering.
"""
from __future__ import annotations


class HazardMapError(Exception):
    """Base class for expected runtime failures."""


class RowRejected(HazardMapError):
    """One input row failed validation (bad coordinates or empty category)."""

    def __init__(self, reason: str, row: dict | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.row = row


class DatasetLoadFailed(HazardMapError):
    """The input file could not be fetched or parsed at all."""

    def __init__(self, source: str, cause: Exception | None = None) -> None:
        detail = f": {cause}" if cause else ""
        super().__init__(
            f"Could not load hazard data from {source}{detail}. "
            f"Check that the file exists and is a CSV with lat, lng and category columns."
        )
        self.source = source
        self.cause = cause


class GeolocationUnavailable(HazardMapError):
    """The device or browser offers no location capability."""

    def __init__(self) -> None:
        super().__init__("This device does not support location lookup.")
