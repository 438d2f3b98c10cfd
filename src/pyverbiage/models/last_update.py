"""Last-update timestamps model."""

from __future__ import annotations

from pyverbiage.models._base import VerbiageBaseModel, VerbiageTimestamp


class UpdateTimestamps(VerbiageBaseModel):
    """When each remote data category last changed.

    Parameters
    ----------
    verbiages : datetime
        Last change of the verbiage definitions.
    terms : datetime
        Last change of any term value.
    """

    verbiages: VerbiageTimestamp
    terms: VerbiageTimestamp

    def is_newer_than(self, other: UpdateTimestamps) -> bool:
        """Return ``True`` when either category changed after *other*."""
        return self.verbiages > other.verbiages or self.terms > other.terms

    def to_json(self) -> str:
        """Serialize for the persistent store as normalized UTC ISO-8601 strings."""
        return self.model_dump_json(exclude={"raw"})
