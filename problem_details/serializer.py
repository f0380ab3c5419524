"""JSON serialization of RFC 9457 Problems.

A Problem is serialized as a single flat JSON object: the standard members
first, in the order defined by RFC 9457, followed by the extension members
as siblings of the standard ones.
"""

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any, Dict, Optional

from fastapi.encoders import jsonable_encoder

from .errors import InvalidExtensionValue, UnsupportedOperation
from .model import Problem

logger = logging.getLogger(__name__)

MEDIA_TYPE = 'application/problem+json'


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def encode_extension(value: Any) -> Any:
    """Encode an extension value into its JSON-compatible form.

    Sequences are encoded item by item into lists and mappings value by
    value into dictionaries. Any other value is handed to FastAPI's
    jsonable_encoder, which turns dataclasses, pydantic models and plain
    objects into dictionaries (keeping their field order) and passes
    primitives through; the structure it returns is walked by the same rules.

    Args:
        value: The extension value to encode.

    Returns:
        A structure of dicts, lists and primitives which json can serialize.

    Raises:
        InvalidExtensionValue: A sequence, at any depth, contains a None item.
    """
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        items = []
        for i, item in enumerate(value):
            if item is None:
                raise InvalidExtensionValue(
                    f'extension sequences may not contain null items (index {i})',
                )
            items.append(encode_extension(item))
        return items
    if isinstance(value, Mapping):
        return {jsonable_encoder(k): encode_extension(v) for k, v in value.items()}

    encoded = jsonable_encoder(value)
    if isinstance(encoded, (list, dict)):
        return encode_extension(encoded)
    return encoded


class ProblemSerializer:
    """Serializer for RFC 9457 Problems.

    The serializer is one-directional: it only produces Problem documents,
    it does not parse them.

    If 'debug' is set, the JSON is indented, making it easier for humans to
    read. Otherwise, it is serialized in a compact format.
    """

    def __init__(self, debug: bool = False) -> None:
        self.debug: bool = debug

    def to_dict(self, problem: Problem) -> Dict[str, Any]:
        """Get the dictionary representation of a Problem document.

        Members are inserted in output order. The type is always present, the
        status only when set, and the title, detail and instance only when set
        and not blank. Extensions come last, in the order they were added.

        Args:
            problem: The Problem to represent.

        Returns:
            An ordered dictionary of the Problem document members.
        """
        d: Dict[str, Any] = {'type': str(problem.type)}

        if problem.status is not None:
            d['status'] = int(problem.status)
        if not _is_blank(problem.title):
            d['title'] = str(problem.title)
        if not _is_blank(problem.detail):
            d['detail'] = str(problem.detail)
        if not _is_blank(problem.instance):
            d['instance'] = str(problem.instance)

        for key, value in problem.extensions.items():
            d[key] = encode_extension(value)
        return d

    def serialize(self, problem: Problem) -> str:
        """Serialize a Problem to a JSON string.

        Args:
            problem: The Problem to serialize.

        Returns:
            The JSON document for the Problem.
        """
        if self.debug:
            return json.dumps(
                self.to_dict(problem),
                ensure_ascii=False,
                allow_nan=False,
                indent=2,
            )
        else:
            return json.dumps(
                self.to_dict(problem),
                ensure_ascii=False,
                allow_nan=False,
                indent=None,
                separators=(',', ':'),
            )

    def serialize_bytes(self, problem: Problem) -> bytes:
        """Serialize a Problem to UTF-8 encoded JSON bytes."""
        return self.serialize(problem).encode('utf-8')

    def deserialize(self, data: Any) -> Problem:
        """Problems can not be deserialized; this always raises.

        Raises:
            UnsupportedOperation: Always.
        """
        logger.debug('attempted to deserialize a problem document')
        raise UnsupportedOperation('deserializing a Problem is not supported')
