"""
Conversion between entity records and their JSON text.

Encoding always produces compact JSON with keys in the entity's declared
field order. Decoding comes in two strategies:

- ``json``: a real JSON parse, fields looked up by wire name. Unknown keys
  (the nested address and company objects of the real API, for instance)
  are ignored.
- ``positional``: a closed-world splitter that assumes flat objects with the
  fields in declared order and no nested objects or arrays. It is only
  correct for the documented response shapes and is kept for reproducing the
  behaviour of the first client written against this service.
"""

import dataclasses
import json
from typing import Any, Generic, List, NamedTuple, Optional, Sequence, Type, TypeVar

from fakerest.config import Config, DECODERS
from fakerest.entities import Comment, Post, Todo, User

T = TypeVar("T")


class DecodeError(ValueError):
    """Raised when a response body does not have the expected shape."""


class WireField(NamedTuple):
    """One entity attribute as it appears on the wire."""

    attr: str
    key: str
    type: type
    transient: bool


def wire_fields(entity_class: type) -> List[WireField]:
    """
    Describe the wire layout of an entity dataclass.

    Args:
        entity_class: One of the entity dataclasses

    Returns:
        Fields in declared order, with wire names and scalar types resolved
    """
    result = []
    for f in dataclasses.fields(entity_class):
        field_type = f.type
        # Optional[X] -> X
        args = getattr(field_type, "__args__", None)
        if args:
            field_type = next(a for a in args if a is not type(None))
        result.append(
            WireField(
                attr=f.name,
                key=f.metadata.get("wire", f.name),
                type=field_type,
                transient=bool(f.metadata.get("transient", False)),
            )
        )
    return result


def _parse_scalar(raw: str, field_type: type) -> Any:
    """Parse one positional value (already stripped of quotes)."""
    value = raw.strip()
    if field_type is bool:
        if value == "true":
            return True
        if value == "false":
            return False
        raise ValueError(f"expected true or false, got {value!r}")
    if field_type is int:
        return int(value)
    return value


def _coerce(value: Any, field_type: type) -> Any:
    """Check one JSON value against the declared field type."""
    if field_type is bool:
        if not isinstance(value, bool):
            raise ValueError(f"expected a boolean, got {value!r}")
        return value
    if field_type is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"expected an integer, got {value!r}")
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {value!r}")
    return value


def split_objects(text: str) -> List[str]:
    """
    Split a flat JSON array into per-object fragments.

    The outer brackets are removed and the remainder is cut at every ``},``
    with the closing brace re-appended, so each fragment looks like one object.

    Args:
        text: Array (or single object) text

    Returns:
        Object fragments, empty for ``[]`` or blank text
    """
    body = text.strip()
    if body.startswith("["):
        body = body[1:]
    if body.endswith("]"):
        body = body[:-1]
    if not body.strip():
        return []
    return [fragment + "}" for fragment in body.split("},")]


def split_fields(fragment: str) -> List[str]:
    """
    Split one object fragment into raw values, in the order they appear.

    Braces and quotes are dropped, the text is cut at every comma, and each
    piece is cut once at the first colon; the right-hand side is the value.
    Pieces without a colon (commas inside text values) become None; they
    are ignored past the declared fields and rejected by the entity decoder
    when they fall on one.
    """
    cleaned = fragment.translate(str.maketrans("", "", '{}"'))
    values = []
    for piece in cleaned.split(","):
        _, sep, value = piece.partition(":")
        values.append(value if sep else None)
    return values


class EntityCodec(Generic[T]):
    """
    Encoder and decoder for one entity kind.

    Example:
        codec = EntityCodec(User)
        text = codec.encode(User(11, "New User", "newuser@example.com"))
        user = codec.decode_one(text)
    """

    def __init__(self, entity_class: Type[T], decoder: Optional[str] = None):
        """
        Initialize the codec.

        Args:
            entity_class: Entity dataclass handled by this codec
            decoder: "json" or "positional"; defaults to Config.decoder()

        Raises:
            ValueError: If decoder names an unknown strategy
        """
        decoder = decoder or Config.decoder()
        if decoder not in DECODERS:
            raise ValueError(f"Unknown decoder {decoder!r}. Expected one of: {', '.join(DECODERS)}")
        self.entity_class = entity_class
        self.decoder = decoder
        self.fields = wire_fields(entity_class)
        self._wire = [f for f in self.fields if not f.transient]

    def encode(self, entity: T) -> str:
        """Encode one entity as a compact JSON object."""
        payload = {f.key: getattr(entity, f.attr) for f in self._wire}
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)

    def encode_many(self, entities: Sequence[T]) -> str:
        """Encode entities as a compact JSON array, ``[]`` when empty."""
        return "[" + ",".join(self.encode(e) for e in entities) + "]"

    def decode_one(self, text: str) -> T:
        """
        Decode a single object.

        Raises:
            DecodeError: If the text is not an object of this entity kind
        """
        if self.decoder == "positional":
            return self._from_fragment(text)
        data = self._load(text)
        if not isinstance(data, dict):
            raise DecodeError(f"Expected a JSON object for {self.entity_class.__name__}, got {type(data).__name__}")
        return self._from_mapping(data)

    def decode_many(self, text: str) -> List[T]:
        """
        Decode an array of objects, preserving order.

        Raises:
            DecodeError: If the text is not an array of objects of this entity kind
        """
        if self.decoder == "positional":
            return [self._from_fragment(fragment) for fragment in split_objects(text)]
        if not text.strip():
            return []
        data = self._load(text)
        if not isinstance(data, list):
            raise DecodeError(f"Expected a JSON array of {self.entity_class.__name__}, got {type(data).__name__}")
        items = []
        for item in data:
            if not isinstance(item, dict):
                raise DecodeError(f"Expected JSON objects in array, got {type(item).__name__}")
            items.append(self._from_mapping(item))
        return items

    def _load(self, text: str) -> Any:
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodeError(f"Malformed JSON for {self.entity_class.__name__}: {e}") from e

    def _from_mapping(self, data: dict) -> T:
        values = {}
        try:
            for f in self.fields:
                if f.transient:
                    if data.get(f.key) is not None:
                        values[f.attr] = _coerce(data[f.key], f.type)
                    continue
                values[f.attr] = _coerce(data[f.key], f.type)
        except KeyError as e:
            raise DecodeError(f"{self.entity_class.__name__} is missing field {e.args[0]!r}") from e
        except ValueError as e:
            raise DecodeError(f"Bad value in {self.entity_class.__name__}: {e}") from e
        return self.entity_class(**values)

    def _from_fragment(self, fragment: str) -> T:
        raw = split_fields(fragment)
        values = {}
        try:
            for index, f in enumerate(self._wire):
                if raw[index] is None:
                    raise ValueError(f"no value for field {f.key!r}")
                values[f.attr] = _parse_scalar(raw[index], f.type)
        except IndexError as e:
            raise DecodeError(
                f"{self.entity_class.__name__} needs {len(self._wire)} fields, got {len(raw)}"
            ) from e
        except ValueError as e:
            raise DecodeError(f"Bad value in {self.entity_class.__name__}: {e}") from e
        return self.entity_class(**values)


USERS: EntityCodec[User] = EntityCodec(User, "json")
POSTS: EntityCodec[Post] = EntityCodec(Post, "json")
COMMENTS: EntityCodec[Comment] = EntityCodec(Comment, "json")
TODOS: EntityCodec[Todo] = EntityCodec(Todo, "json")
