"""XML persistence of extents."""

from .codec import decode_document, encode_document
from .store import XmlExtentStore

__all__ = ["XmlExtentStore", "encode_document", "decode_document"]
