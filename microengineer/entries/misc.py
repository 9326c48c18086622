"""Entries not tied to a default panel; users add them to custom panels."""

from microengineer.entries.base import Category, Entry, EntryKind, attribute_source


def universal_time() -> Entry:
    return Entry(
        name="Universal time",
        description="Game clock since the start of the save.",
        category=Category.MISC,
        source=attribute_source("universal_time"),
        kind=EntryKind.TIME,
    )


def time_to_stage_burnout() -> Entry:
    return Entry(
        name="Stage burn time",
        description="Burn time left in the current stage.",
        category=Category.MISC,
        source=attribute_source("vessel", "delta_v", "current_stage", "burn_time"),
        kind=EntryKind.TIME,
    )


FACTORIES = (
    universal_time,
    time_to_stage_burnout,
)
