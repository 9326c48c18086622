"""Entry registry: builds the universe of entries from a static factory list.

Example:
    >>> from microengineer.entries.registry import build_all
    >>> from microengineer.entries.base import Category
    >>>
    >>> table = build_all()
    >>> [e.name for e in table.defaults(Category.FLIGHT)][:3]
    ['Speed', 'Mach number', 'G-Force']
"""

import logging
from collections.abc import Callable, Iterable, Iterator

from beartype import beartype

from microengineer.entries import flight, maneuver, misc, orbital, stage, surface, target, vessel
from microengineer.entries.base import Category, Entry

logger = logging.getLogger(__name__)

EntryFactory = Callable[[], Entry]

# Registration order is display order within each category
ENTRY_FACTORIES: tuple[EntryFactory, ...] = (
    *vessel.FACTORIES,
    *orbital.FACTORIES,
    *surface.FACTORIES,
    *flight.FACTORIES,
    *target.FACTORIES,
    *maneuver.FACTORIES,
    *stage.FACTORIES,
    *misc.FACTORIES,
)


@beartype
class EntryTable:
    """Ordered, name-indexed collection of entries.

    Entry names are unique within a table, so panels and layout files refer
    to entries by name.
    """

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        self._entries: dict[str, Entry] = {}
        for entry in entries:
            self.add(entry)

    def add(self, entry: Entry) -> bool:
        """Add an entry; returns False (and logs) for a duplicate name."""
        if entry.name in self._entries:
            logger.warning(f"Duplicate entry name {entry.name!r} skipped.")
            return False
        self._entries[entry.name] = entry
        return True

    def get(self, name: str) -> Entry | None:
        return self._entries.get(name)

    def names(self) -> list[str]:
        return list(self._entries)

    def by_category(self, category: Category) -> list[Entry]:
        return [e for e in self._entries.values() if e.category is category]

    def defaults(self, category: Category) -> list[Entry]:
        """Entries a category's default panel starts with, in registration order."""
        return [e for e in self._entries.values() if e.category is category and e.is_default]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


@beartype
def build_all(factories: Iterable[EntryFactory] = ENTRY_FACTORIES) -> EntryTable:
    """Instantiate every registered entry into a fresh table.

    A factory that raises, or returns something other than an Entry, is
    logged and left out; the remaining entries are still built.

    Args:
        factories: Zero-argument callables returning an Entry

    Returns:
        New EntryTable; no state is shared with earlier calls
    """
    table = EntryTable()
    for factory in factories:
        factory_name = getattr(factory, "__qualname__", repr(factory))
        try:
            entry = factory()
        except Exception:
            logger.exception(f"Entry factory {factory_name} failed, entry omitted.")
            continue

        if not isinstance(entry, Entry):
            logger.error(f"Entry factory {factory_name} returned {type(entry).__name__}, not an Entry.")
            continue

        table.add(entry)

    logger.debug(f"Built {len(table)} entries.")
    return table
