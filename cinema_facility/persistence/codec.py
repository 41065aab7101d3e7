"""XML encoding of persisted records.

A document has one root element naming the saved extent and one child
element per record. The element tag identifies the record variant, scalar
fields become attributes and nested records become child elements:

    <extent type="Floor" version="1">
      <floor number="1" description="Floor 1" cleaning-period="04:00:00">
        <hall number="1" description="Hall 1" cleaning-period="03:00:00">
          <seat number="5" row="A"/>
        </hall>
        <wc type="Men" description="WC Men in floor 1" cleaning-period="01:00:00"/>
      </floor>
    </extent>
"""

import logging
from datetime import timedelta
from enum import Enum

from lxml import etree
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ParseError
from ..models import (
    EmployeeRecord,
    FloorRecord,
    HallRecord,
    PartTimeContractRecord,
    SeatRecord,
    WCRecord,
)
from ..utils import format_duration

logger = logging.getLogger(__name__)

ROOT_TAG = "extent"
FORMAT_VERSION = "1"

# record type -> {child tag: (field name, child record type, is list)}
CHILD_FIELDS: dict[type[BaseModel], dict[str, tuple[str, type[BaseModel], bool]]] = {
    FloorRecord: {
        HallRecord.tag: ("halls", HallRecord, True),
        WCRecord.tag: ("wcs", WCRecord, True),
    },
    HallRecord: {SeatRecord.tag: ("seats", SeatRecord, True)},
    EmployeeRecord: {
        PartTimeContractRecord.tag: ("part_time_contract", PartTimeContractRecord, False),
    },
}

_PARSER = etree.XMLParser(
    resolve_entities=False, no_network=True, remove_comments=True, remove_pis=True
)


def _attribute_name(field: str) -> str:
    return field.replace("_", "-")


def _field_name(attribute: str) -> str:
    return attribute.replace("-", "_")


def _format_value(value) -> str:
    if isinstance(value, timedelta):
        return format_duration(value)
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def record_to_element(record: BaseModel) -> etree._Element:
    """Convert a record (and its nested records) to an XML element."""
    element = etree.Element(record.tag)
    children = CHILD_FIELDS.get(type(record), {})
    child_fields = {field for field, _, _ in children.values()}

    for name in type(record).model_fields:
        value = getattr(record, name)
        if name in child_fields or value is None:
            continue
        element.set(_attribute_name(name), _format_value(value))

    for field, _, many in children.values():
        value = getattr(record, field)
        if value is None:
            continue
        for child in value if many else [value]:
            element.append(record_to_element(child))

    return element


def element_to_record(element: etree._Element, record_type: type[BaseModel]) -> BaseModel:
    """Convert an XML element to a record of record_type.

    Raises:
        ParseError: If the element has unexpected children
        pydantic.ValidationError: If the values do not validate
    """
    values: dict = {_field_name(key): value for key, value in element.attrib.items()}
    children = CHILD_FIELDS.get(record_type, {})

    for child in element:
        spec = children.get(child.tag)
        if spec is None:
            raise ParseError(f"Unexpected <{child.tag}> inside <{element.tag}>")
        field, child_type, many = spec
        child_record = element_to_record(child, child_type)
        if many:
            values.setdefault(field, []).append(child_record)
        elif field in values:
            raise ParseError(f"<{element.tag}> has more than one <{child.tag}>")
        else:
            values[field] = child_record

    return record_type.model_validate(values)


def encode_document(extent_name: str, records: list[BaseModel]) -> bytes:
    """Encode records as an XML document.

    Args:
        extent_name: Name of the saved entity class (e.g., "Floor")
        records: Records in extent order

    Returns:
        UTF-8 encoded document
    """
    root = etree.Element(ROOT_TAG, type=extent_name, version=FORMAT_VERSION)
    for record in records:
        root.append(record_to_element(record))
    return etree.tostring(root, pretty_print=True, xml_declaration=True, encoding="utf-8")


def decode_document(
    data: bytes, extent_name: str, record_types: dict[str, type[BaseModel]]
) -> list[BaseModel]:
    """Decode an XML document into records.

    Args:
        data: Document content
        extent_name: Expected entity class name on the root element
        record_types: Allowed record tags and their record types

    Returns:
        Records in document order

    Raises:
        ParseError: If the document is malformed, of another extent, or holds invalid records
    """
    try:
        root = etree.fromstring(data, parser=_PARSER)
    except (etree.XMLSyntaxError, ValueError) as e:
        raise ParseError(f"Malformed XML document: {e}") from e

    if root.tag != ROOT_TAG:
        raise ParseError(f"Expected <{ROOT_TAG}> root element, got <{root.tag}>")
    if root.get("type") != extent_name:
        raise ParseError(f"Document holds a {root.get('type')!r} extent, expected {extent_name!r}")
    if root.get("version", FORMAT_VERSION) != FORMAT_VERSION:
        raise ParseError(f"Unsupported document version: {root.get('version')}")

    records = []
    for element in root:
        record_type = record_types.get(element.tag)
        if record_type is None:
            raise ParseError(f"Unexpected <{element.tag}> record in {extent_name} document")
        try:
            records.append(element_to_record(element, record_type))
        except PydanticValidationError as e:
            raise ParseError(f"Invalid <{element.tag}> record: {e}") from e

    logger.debug(f"Decoded {len(records)} records from {extent_name} document")
    return records
