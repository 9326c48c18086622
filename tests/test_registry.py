"""Tests for the entry registry."""

import logging

import pytest

from microengineer.entries import ENTRY_FACTORIES, Category, Entry, EntryTable, attribute_source, build_all


def make_factory(name: str, category: Category = Category.MISC, is_default: bool = False):
    def factory() -> Entry:
        return Entry(
            name=name,
            description="",
            category=category,
            source=attribute_source("universal_time"),
            is_default=is_default,
        )

    return factory


class TestBuildAll:
    """Test building the entry universe."""

    def test_builds_every_factory(self) -> None:
        table = build_all()
        assert len(table) == len(ENTRY_FACTORIES)

    def test_names_are_unique(self) -> None:
        names = build_all().names()
        assert len(names) == len(set(names))

    def test_fresh_table_each_call(self) -> None:
        first = build_all()
        second = build_all()
        assert first.get("Speed") is not second.get("Speed")

        first.get("Speed").value = 10.0
        assert second.get("Speed").value is None

    def test_failing_factory_skipped(self, caplog) -> None:
        def broken() -> Entry:
            raise RuntimeError("cannot build")

        with caplog.at_level(logging.ERROR):
            table = build_all([make_factory("A"), broken, make_factory("B")])

        assert table.names() == ["A", "B"]
        assert "broken" in caplog.text
        assert "cannot build" in caplog.text

    def test_non_entry_skipped(self, caplog) -> None:
        with caplog.at_level(logging.ERROR):
            table = build_all([lambda: "not an entry", make_factory("A")])
        assert table.names() == ["A"]
        assert "not an Entry" in caplog.text

    def test_duplicate_names_keep_first(self, caplog) -> None:
        first = make_factory("A", Category.VESSEL)
        second = make_factory("A", Category.ORBITAL)
        with caplog.at_level(logging.WARNING):
            table = build_all([first, second])
        assert len(table) == 1
        assert table.get("A").category is Category.VESSEL
        assert "Duplicate entry name" in caplog.text

    def test_empty(self) -> None:
        assert len(build_all([])) == 0


class TestEntryTable:
    """Test lookups on the entry table."""

    @pytest.fixture
    def table(self) -> EntryTable:
        return build_all(
            [
                make_factory("A", Category.VESSEL, is_default=True),
                make_factory("B", Category.VESSEL),
                make_factory("C", Category.ORBITAL, is_default=True),
            ]
        )

    def test_get(self, table) -> None:
        assert table.get("B").name == "B"
        assert table.get("Z") is None
        assert "C" in table
        assert "Z" not in table

    def test_by_category(self, table) -> None:
        assert [e.name for e in table.by_category(Category.VESSEL)] == ["A", "B"]

    def test_defaults(self, table) -> None:
        assert [e.name for e in table.defaults(Category.VESSEL)] == ["A"]
        assert table.defaults(Category.TARGET) == []

    def test_iteration_keeps_registration_order(self, table) -> None:
        assert [e.name for e in table] == ["A", "B", "C"]


class TestDefaultCatalog:
    """Test the default groupings panels are built from."""

    def test_flight_defaults(self) -> None:
        names = [e.name for e in build_all().defaults(Category.FLIGHT)]
        assert names[:4] == ["Speed", "Mach number", "G-Force", "AoA"]
        assert "Sideslip" not in names
        assert "Zenith" not in names

    def test_vessel_defaults(self) -> None:
        names = [e.name for e in build_all().defaults(Category.VESSEL)]
        assert names == ["Vessel", "Mass", "Total ∆v", "Thrust", "TWR"]

    def test_editor_entries(self) -> None:
        names = [e.name for e in build_all().by_category(Category.OAB)]
        assert names == ["Stage Info (OAB)", "Total ∆v Vac (OAB)", "Total ∆v Actual (OAB)"]

    def test_every_category_but_misc_has_defaults(self) -> None:
        table = build_all()
        for category in Category:
            if category is Category.MISC:
                continue
            assert table.defaults(category), category
