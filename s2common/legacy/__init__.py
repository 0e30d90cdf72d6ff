"""Bridge from legacy tenant-scoped ids to compact content-derived ids."""

from s2common.legacy.legacy_id import LegacyId, LegacyIdentifier, LegacyIdFactory

__all__ = ["LegacyId", "LegacyIdentifier", "LegacyIdFactory"]
