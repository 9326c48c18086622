"""Stage table entries for flight and for the assembly editor.

Table entries carry the raw stage list as their value. The stage panels
render them through the staging calculator rather than as plain rows.
"""

from microengineer.entries.base import Category, Entry, EntryKind, attribute_source
from microengineer.units import delta_v_units


def stage_info() -> Entry:
    return Entry(
        name="Stage Info",
        description="Per-stage delta velocity, TWR and burn time of the active vessel.",
        category=Category.STAGE,
        source=attribute_source("vessel", "delta_v", "stages"),
        is_default=True,
        kind=EntryKind.STAGE_TABLE,
    )


def stage_info_editor() -> Entry:
    return Entry(
        name="Stage Info (OAB)",
        description="Per-stage figures of the vehicle being assembled.",
        category=Category.OAB,
        source=attribute_source("editor", "stages"),
        is_default=True,
        kind=EntryKind.STAGE_TABLE,
    )


def total_delta_v_vac_editor() -> Entry:
    return Entry(
        name="Total ∆v Vac (OAB)",
        description="Total vacuum delta velocity of the vehicle being assembled.",
        category=Category.OAB,
        source=attribute_source("editor", "total_delta_v_vac"),
        is_default=True,
        units=delta_v_units(),
        decimals=0,
    )


def total_delta_v_actual_editor() -> Entry:
    return Entry(
        name="Total ∆v Actual (OAB)",
        description="Total delta velocity of the vehicle being assembled at the launch site.",
        category=Category.OAB,
        source=attribute_source("editor", "total_delta_v_actual"),
        is_default=True,
        units=delta_v_units(),
        decimals=0,
    )


FACTORIES = (
    stage_info,
    stage_info_editor,
    total_delta_v_vac_editor,
    total_delta_v_actual_editor,
)
