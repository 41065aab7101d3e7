"""Saving and loading whole extents as XML documents."""

import logging
from pathlib import Path

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..entities import (
    CleanableArea,
    Employee,
    Floor,
    Glass3D,
    Hall,
    Item,
    PartTimeContract,
    Snack,
    WC,
)
from ..exceptions import CinemaFacilityError, ExistenceError, NullReferenceError, PersistenceError
from ..models import (
    EmployeeRecord,
    FloorRecord,
    Glass3DRecord,
    HallRecord,
    LoadResult,
    PartTimeContractRecord,
    SeatRecord,
    SnackRecord,
    WCRecord,
)
from ..registry import Registry, default_registry
from .codec import decode_document, encode_document

logger = logging.getLogger(__name__)

# entity class -> record types its documents may hold
RECORD_TYPES: dict[type, tuple[type[BaseModel], ...]] = {
    Floor: (FloorRecord,),
    Hall: (HallRecord,),
    WC: (WCRecord,),
    CleanableArea: (FloorRecord, HallRecord, WCRecord),
    Item: (SnackRecord, Glass3DRecord),
    Snack: (SnackRecord,),
    Glass3D: (Glass3DRecord,),
    Employee: (EmployeeRecord,),
}


class XmlExtentStore:
    """Saves and loads the extents of one registry.

    Every load follows the same policy: the current extent is deleted
    (cascading to dependents) and rebuilt from the document. A missing file
    or a document that cannot be parsed or rebuilt leaves the extent empty and
    returns a failed LoadResult instead of raising.
    """

    def __init__(self, registry: Registry | None = None):
        """Initialize store.

        Args:
            registry: Registry to save from and load into (default: process registry)
        """
        self.registry = registry if registry is not None else default_registry()

    def default_path(self, entity_type: type) -> Path:
        """Get the default document path of an entity class."""
        return self.registry.settings.data_dir / f"{entity_type.__name__.lower()}.xml"

    def _check_persistable(self, entity_type: type) -> None:
        if entity_type not in RECORD_TYPES:
            raise PersistenceError(f"{entity_type.__name__} extents cannot be persisted")

    # Saving

    def dumps(self, entity_type: type) -> bytes:
        """Serialize the extent of entity_type.

        Raises:
            PersistenceError: If entity_type cannot be persisted or an entity cannot be encoded
        """
        self._check_persistable(entity_type)
        nested = entity_type is Floor
        try:
            records = [self._to_record(entity, nested) for entity in self.registry.all_of(entity_type)]
            return encode_document(entity_type.__name__, records)
        except (PydanticValidationError, ValueError) as e:
            raise PersistenceError(f"Failed to encode {entity_type.__name__} extent: {e}") from e

    def save(self, entity_type: type, path: str | Path | None = None) -> Path:
        """Write the extent of entity_type to an XML file.

        Args:
            entity_type: Entity class to save
            path: Target file (default: <data_dir>/<type>.xml)

        Returns:
            Path written

        Raises:
            PersistenceError: If entity_type cannot be persisted or the file cannot be written
        """
        data = self.dumps(entity_type)
        path = Path(path) if path is not None else self.default_path(entity_type)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            raise PersistenceError(f"Failed to write {path}: {e}") from e

        count = len(self.registry.all_of(entity_type))
        logger.info(f"Saved {count} {entity_type.__name__} entities to {path}")
        return path

    def _to_record(self, entity, nested: bool = False) -> BaseModel:
        if isinstance(entity, Floor):
            return FloorRecord(
                number=entity.number,
                description=entity.description,
                cleaning_period=entity.cleaning_period,
                halls=[self._to_record(hall) for hall in entity.halls] if nested else [],
                wcs=[self._to_record(wc) for wc in entity.wcs] if nested else [],
            )
        if isinstance(entity, Hall):
            return HallRecord(
                number=entity.number,
                description=entity.description,
                cleaning_period=entity.cleaning_period,
                floor=entity.floor.number if entity.floor is not None else None,
                seats=[SeatRecord(number=seat.number, row=seat.row) for seat in entity.seats],
            )
        if isinstance(entity, WC):
            return WCRecord(
                type=entity.type,
                description=entity.description,
                cleaning_period=entity.cleaning_period,
                floor=entity.floor.number if entity.floor is not None else None,
            )
        if isinstance(entity, Snack):
            return SnackRecord(name=entity.name, price=entity.price)
        if isinstance(entity, Glass3D):
            return Glass3DRecord(name=entity.name, price=entity.price)
        if isinstance(entity, Employee):
            contract = entity.part_time_contract
            return EmployeeRecord(
                name=entity.name,
                surname=entity.surname,
                part_time_contract=(
                    PartTimeContractRecord(hours_per_week=contract.hours_per_week)
                    if contract is not None
                    else None
                ),
            )
        raise PersistenceError(f"{type(entity).__name__} cannot be persisted")

    # Loading

    def load(self, entity_type: type, path: str | Path | None = None) -> LoadResult:
        """Replace the extent of entity_type with the content of an XML file.

        Args:
            entity_type: Entity class to load
            path: Source file (default: <data_dir>/<type>.xml)

        Returns:
            LoadResult; on failure the extent is left empty

        Raises:
            PersistenceError: If entity_type cannot be persisted
        """
        self._check_persistable(entity_type)
        path = Path(path) if path is not None else self.default_path(entity_type)

        if not path.exists():
            self.clear(entity_type)
            return self._failure(entity_type, f"File not found: {path}", path)

        try:
            data = path.read_bytes()
        except OSError as e:
            self.clear(entity_type)
            return self._failure(entity_type, f"Failed to read {path}: {e}", path)

        return self.loads(entity_type, data, path=path)

    def loads(self, entity_type: type, data: bytes, path: str | Path | None = None) -> LoadResult:
        """Replace the extent of entity_type with the content of a document.

        Args:
            entity_type: Entity class to load
            data: Document content
            path: Source file, for reporting only

        Returns:
            LoadResult; on failure the extent is left empty

        Raises:
            PersistenceError: If entity_type cannot be persisted
        """
        self._check_persistable(entity_type)
        record_types = {record_type.tag: record_type for record_type in RECORD_TYPES[entity_type]}

        try:
            records = decode_document(data, entity_type.__name__, record_types)
        except PersistenceError as e:
            self.clear(entity_type)
            return self._failure(entity_type, str(e), path)

        self.clear(entity_type)
        try:
            self._build(entity_type, records)
        except CinemaFacilityError as e:
            self.clear(entity_type)
            return self._failure(entity_type, f"Failed to rebuild extent: {e}", path)

        loaded = len(self.registry.all_of(entity_type))
        source = f" from {path}" if path is not None else ""
        logger.info(f"Loaded {loaded} {entity_type.__name__} entities{source}")
        return LoadResult(
            entity_type=entity_type.__name__,
            path=str(path) if path is not None else None,
            success=True,
            loaded=loaded,
        )

    def clear(self, entity_type: type) -> None:
        """Delete every entity of entity_type, cascading to dependents."""
        extent = self.registry.extent(entity_type)
        for entity in extent.all():
            # An earlier cascade may already have removed it
            if entity in extent:
                entity.delete()
        logger.debug(f"Cleared {entity_type.__name__} extent")

    def _failure(self, entity_type: type, error: str, path: str | Path | None) -> LoadResult:
        logger.warning(f"Failed to load {entity_type.__name__} extent: {error}")
        return LoadResult(
            entity_type=entity_type.__name__,
            path=str(path) if path is not None else None,
            success=False,
            error=error,
        )

    def _build(self, entity_type: type, records: list[BaseModel]) -> None:
        if entity_type is not CleanableArea:
            for record in records:
                self._build_record(record)
            return

        # Parents first so key-based links resolve, then restore document order
        built: list = [None] * len(records)
        for record_type in (FloorRecord, HallRecord, WCRecord):
            for index, record in enumerate(records):
                if isinstance(record, record_type):
                    built[index] = self._build_record(record)

        extent = self.registry.extent(CleanableArea)
        rest = [area for area in extent.all() if all(area is not b for b in built)]
        extent.replace(built + rest)

    def _build_record(self, record: BaseModel):
        if isinstance(record, FloorRecord):
            floor = Floor(
                record.number,
                description=record.description,
                cleaning_period=record.cleaning_period,
                registry=self.registry,
            )
            for hall_record in record.halls:
                self._build_hall(hall_record, floor)
            for wc_record in record.wcs:
                self._build_wc(wc_record, floor)
            return floor
        if isinstance(record, HallRecord):
            return self._build_hall(record, self._resolve_floor(record.floor))
        if isinstance(record, WCRecord):
            if record.floor is None:
                raise NullReferenceError(f"WC {record.type.value} has no floor")
            return self._build_wc(record, self._resolve_floor(record.floor))
        if isinstance(record, SnackRecord):
            return Snack(record.name, record.price, registry=self.registry)
        if isinstance(record, Glass3DRecord):
            return Glass3D(record.name, record.price, registry=self.registry)
        if isinstance(record, EmployeeRecord):
            employee = Employee(record.name, record.surname, registry=self.registry)
            if record.part_time_contract is not None:
                PartTimeContract(record.part_time_contract.hours_per_week, employee)
            return employee
        raise PersistenceError(f"Unsupported record: {type(record).__name__}")

    def _resolve_floor(self, number: int | None) -> Floor | None:
        if number is None:
            return None
        floor = Floor.find(number, self.registry)
        if floor is None:
            raise ExistenceError(f"Floor {number} does not exist")
        return floor

    def _build_hall(self, record: HallRecord, floor: Floor | None) -> Hall:
        hall = Hall(
            record.number,
            floor,
            description=record.description,
            cleaning_period=record.cleaning_period,
            registry=self.registry,
        )
        for seat in record.seats:
            hall.add_seat(seat.number, seat.row)
        return hall

    def _build_wc(self, record: WCRecord, floor: Floor) -> WC:
        return WC(
            record.type,
            floor,
            description=record.description,
            cleaning_period=record.cleaning_period,
        )
