"""Tests for saving and loading extents as XML."""

import logging
from datetime import timedelta

import pytest
from lxml import etree

from cinema_facility import (
    CleanableArea,
    Employee,
    Floor,
    Glass3D,
    Hall,
    Item,
    PartTimeContract,
    PersistenceError,
    Seat,
    Snack,
    WC,
    WCType,
    XmlExtentStore,
)

logger = logging.getLogger(__name__)


@pytest.fixture
def building(registry):
    """Two floors with halls, seats and WCs, created in document order."""
    first = Floor(1, registry=registry)
    hall = first.add_hall(1)
    hall.add_seat(5, "A")
    hall.add_seat(6, "A")
    second_hall = first.add_hall(2, description="VIP hall", cleaning_period=timedelta(minutes=45))
    second_hall.add_seat(1, "C")
    first.add_wc(WCType.MEN)
    first.add_wc(WCType.WOMEN)
    second = Floor(2, description="Upper floor", cleaning_period=timedelta(minutes=30), registry=registry)
    second.add_hall(1)
    second.add_wc(WCType.ACCESSIBLE)
    return first, second


class TestDocumentFormat:
    """Tests for the XML layout of saved documents."""

    def test_floor_document_nests_children(self, store, building):
        root = etree.fromstring(store.dumps(Floor))

        assert root.tag == "extent"
        assert root.get("type") == "Floor"
        floors = root.findall("floor")
        assert [f.get("number") for f in floors] == ["1", "2"]
        assert floors[0].get("cleaning-period") == "04:00:00"
        assert [h.get("number") for h in floors[0].findall("hall")] == ["1", "2"]
        assert [w.get("type") for w in floors[0].findall("wc")] == ["Men", "Women"]
        seat = floors[0].find("hall/seat")
        assert (seat.get("number"), seat.get("row")) == ("5", "A")

    def test_hall_document_references_floor(self, store, building):
        root = etree.fromstring(store.dumps(Hall))

        halls = root.findall("hall")
        assert [(h.get("number"), h.get("floor")) for h in halls] == [("1", "1"), ("2", "1"), ("1", "2")]
        assert halls[1].get("cleaning-period") == "00:45:00"

    def test_standalone_hall_has_no_floor_attribute(self, registry, store):
        Hall(3, registry=registry)

        hall = etree.fromstring(store.dumps(Hall)).find("hall")

        assert hall.get("floor") is None

    def test_area_document_is_tagged_and_flat(self, store, building):
        root = etree.fromstring(store.dumps(CleanableArea))

        assert [element.tag for element in root] == [
            "floor", "hall", "hall", "wc", "wc", "floor", "hall", "wc",
        ]
        assert root.find("floor/hall") is None


class TestRoundTrip:
    """Tests that loading a saved extent rebuilds the same object graph."""

    def test_floor_round_trip(self, registry, other_registry, building, describe, tmp_path):
        path = XmlExtentStore(registry).save(Floor, tmp_path / "floors.xml")

        result = XmlExtentStore(other_registry).load(Floor, path)

        assert result.success
        assert result.loaded == 2
        assert describe(other_registry) == describe(registry)
        assert len(Seat.extent(other_registry)) == 3

    def test_floor_load_replaces_extent(self, registry, store, building, describe, tmp_path):
        before = describe(registry)
        path = store.save(Floor, tmp_path / "floors.xml")
        building[0].add_hall(9)
        Floor(7, registry=registry)

        result = store.load(Floor, path)

        assert result.success
        assert describe(registry) == before

    def test_hall_round_trip_relinks_floors(self, registry, store, building, describe, tmp_path):
        standalone = Hall(4, registry=registry)
        standalone.add_seat(2, "B")
        before = describe(registry)
        path = store.save(Hall, tmp_path / "halls.xml")

        result = store.load(Hall, path)

        assert result.success
        assert result.loaded == 4
        after = describe(registry)
        assert after["halls"] == before["halls"]
        assert after["floors"] == before["floors"]
        for hall in Hall.extent(registry):
            assert hall.floor is None or hall in hall.floor.halls

    def test_wc_round_trip(self, registry, store, building, describe, tmp_path):
        before = describe(registry)
        path = store.save(WC, tmp_path / "wcs.xml")

        assert store.load(WC, path).success
        assert describe(registry)["wcs"] == before["wcs"]

    def test_area_round_trip_keeps_order(self, registry, other_registry, describe, tmp_path):
        """Test a hall created before the floor it was later attached to."""
        early = Hall(7, registry=registry)
        early.add_seat(1, "A")
        floor = Floor(1, registry=registry)
        floor.attach_hall(early)
        floor.add_wc(WCType.MEN)
        Floor(0, registry=registry).add_hall(2)
        path = XmlExtentStore(registry).save(CleanableArea, tmp_path / "areas.xml")

        result = XmlExtentStore(other_registry).load(CleanableArea, path)

        assert result.success
        assert result.loaded == 5
        assert describe(other_registry) == describe(registry)

    def test_item_round_trip(self, registry, other_registry, tmp_path):
        Snack("Popcorn", 12.5, registry=registry)
        Glass3D("RealD glasses", 0, registry=registry)
        Snack("Cola", 7, registry=registry)
        path = XmlExtentStore(registry).save(Item, tmp_path / "items.xml")

        assert XmlExtentStore(other_registry).load(Item, path).success

        def items(r):
            return [(type(i).__name__, i.name, i.price) for i in Item.extent(r)]

        assert items(other_registry) == items(registry)
        assert len(Snack.extent(other_registry)) == 2

    def test_snack_extent_alone(self, registry, other_registry, tmp_path):
        Snack("Popcorn", 12.5, registry=registry)
        Glass3D("RealD glasses", 0, registry=registry)
        path = XmlExtentStore(registry).save(Snack, tmp_path / "snacks.xml")
        kept = Glass3D("Kids glasses", 1, registry=other_registry)

        assert XmlExtentStore(other_registry).load(Snack, path).success
        assert [s.name for s in Snack.extent(other_registry)] == ["Popcorn"]
        assert Glass3D.extent(other_registry) == (kept,)

    def test_employee_round_trip(self, registry, other_registry, tmp_path):
        PartTimeContract(20, Employee("Jan", "Kowalski", registry=registry))
        Employee("Ewa", "Lis", registry=registry)
        path = XmlExtentStore(registry).save(Employee, tmp_path / "employees.xml")

        assert XmlExtentStore(other_registry).load(Employee, path).success

        loaded = Employee.extent(other_registry)
        assert [e.full_name for e in loaded] == ["Jan Kowalski", "Ewa Lis"]
        assert loaded[0].part_time_contract.hours_per_week == 20
        assert loaded[0].part_time_contract.employee is loaded[0]
        assert loaded[1].part_time_contract is None
        assert len(PartTimeContract.extent(other_registry)) == 1

    def test_default_paths(self, registry, building, tmp_path):
        """Test the class-level save/load entry points and settings data_dir."""
        path = Floor.save(registry=registry)

        assert path == tmp_path / "floor.xml"
        assert Floor.load(registry=registry).success
        assert len(Floor.extent(registry)) == 2


class TestLoadFailures:
    """Tests that failed loads leave an empty extent and report why."""

    def test_missing_file(self, registry, store, building, tmp_path):
        result = store.load(Floor, tmp_path / "missing.xml")

        assert result.success is False
        assert "not found" in result.error
        assert Floor.extent(registry) == ()
        assert Hall.extent(registry) == ()
        with pytest.raises(PersistenceError):
            result.raise_for_status()

    def test_malformed_xml(self, registry, store, building, tmp_path):
        path = tmp_path / "floors.xml"
        path.write_bytes(b"<extent type='Floor'><floor number=")

        result = store.load(Floor, path)

        assert result.success is False
        assert "Malformed" in result.error
        assert Floor.extent(registry) == ()

    def test_empty_file(self, registry, store, tmp_path):
        Floor(1, registry=registry)
        path = tmp_path / "floors.xml"
        path.write_bytes(b"")

        assert store.load(Floor, path).success is False
        assert Floor.extent(registry) == ()

    def test_invalid_record(self, registry, store):
        data = b"""<extent type="Floor" version="1">
            <floor number="-1" description="Basement" cleaning-period="01:00:00"/>
        </extent>"""

        result = store.loads(Floor, data)

        assert result.success is False
        assert "Invalid <floor> record" in result.error

    def test_unexpected_child(self, registry, store):
        data = b"""<extent type="Floor" version="1">
            <floor number="1" description="Floor 1" cleaning-period="01:00:00"><seat number="1" row="A"/></floor>
        </extent>"""

        assert store.loads(Floor, data).success is False

    def test_document_of_other_type(self, registry, store, building):
        data = store.dumps(Hall)

        result = store.loads(Floor, data)

        assert result.success is False
        assert Floor.extent(registry) == ()

    def test_entity_rule_violation_clears_partial_load(self, registry, store):
        data = b"""<extent type="Floor" version="1">
            <floor number="1" description="Floor 1" cleaning-period="01:00:00"/>
            <floor number="1" description="Floor 1 again" cleaning-period="01:00:00"/>
        </extent>"""

        result = store.loads(Floor, data)

        assert result.success is False
        assert Floor.extent(registry) == ()
        assert CleanableArea.extent(registry) == ()

    def test_blank_name_fails(self, registry, store):
        data = b"""<extent type="Item" version="1">
            <snack name="Popcorn" price="10"/>
            <snack name="   " price="10"/>
        </extent>"""

        assert store.loads(Item, data).success is False
        assert Item.extent(registry) == ()

    def test_hall_with_unknown_floor(self, registry, store):
        data = b"""<extent type="Hall" version="1">
            <hall number="1" description="Hall 1" cleaning-period="03:00:00" floor="9"/>
        </extent>"""

        result = store.loads(Hall, data)

        assert result.success is False
        assert "Floor 9" in result.error
        assert Hall.extent(registry) == ()

    def test_wc_without_floor(self, registry, store):
        data = b"""<extent type="WC" version="1">
            <wc type="Men" description="WC" cleaning-period="01:00:00"/>
        </extent>"""

        assert store.loads(WC, data).success is False

    def test_comments_are_ignored(self, registry, store):
        data = b"""<extent type="Floor" version="1">
            <!-- ground floor -->
            <floor number="0" description="Ground" cleaning-period="02:00:00"/>
        </extent>"""

        result = store.loads(Floor, data)

        assert result.success
        assert Floor.extent(registry)[0].cleaning_period == timedelta(hours=2)

    def test_unsupported_type(self, store, tmp_path):
        with pytest.raises(PersistenceError):
            store.save(Seat, tmp_path / "seats.xml")
        with pytest.raises(PersistenceError):
            store.load(Seat, tmp_path / "seats.xml")


class TestSaveFailures:
    """Tests that failed saves raise PersistenceError and write nothing."""

    def test_unwritable_path(self, store, floor, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(PersistenceError, match="Failed to write"):
            store.save(Floor, blocker / "floor.xml")

    def test_text_that_cannot_be_encoded(self, store, floor, tmp_path):
        """Test a description that bypassed validation."""
        floor._description = "Lobby\x01"
        path = tmp_path / "floors.xml"

        with pytest.raises(PersistenceError, match="Failed to encode Floor"):
            store.save(Floor, path)

        assert not path.exists()

    def test_value_rejected_by_record(self, registry, store):
        snack = Snack("Popcorn", 12.5, registry=registry)
        snack._price = float("nan")

        with pytest.raises(PersistenceError, match="Failed to encode Item"):
            store.dumps(Item)
