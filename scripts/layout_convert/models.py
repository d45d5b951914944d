"""Layout data models: fingers, keys, layouts and the keymeow document."""

from datetime import date, datetime, time, timezone
from enum import IntEnum
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, BeforeValidator, Field, PlainSerializer, field_validator


class Finger(IntEnum):
    """Physical fingers, ordered left pinky to right pinky.

    The ordinal is load-bearing: genkey finger indices are derived from it
    and keymeow components are emitted in ordinal order.
    """

    LP = 0
    LR = 1
    LM = 2
    LI = 3
    LT = 4
    RT = 5
    RI = 6
    RM = 7
    RR = 8
    RP = 9

    def __str__(self) -> str:
        return self.name

    @property
    def is_thumb(self) -> bool:
        return self in (Finger.LT, Finger.RT)

    @classmethod
    def parse(cls, name: str) -> "Finger":
        """Look up a finger by its symbolic name (e.g. ``"LI"``)."""
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"{name} is not a valid finger") from None


def decode_finger(value: Any) -> Finger:
    """Decode a finger from its ordinal or, failing that, its name.

    Layout files from different tools use either form in the same field.
    """
    if isinstance(value, Finger):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Finger(value)
        except ValueError:
            raise ValueError(f"{value} is not a valid finger ordinal (0-9)") from None
    if isinstance(value, str):
        return Finger.parse(value)
    raise ValueError(f"finger must be an ordinal or a name, got {value!r}")


def decode_finger_name(value: Any) -> Finger:
    """Decode a finger that is only ever written by name (keymeow)."""
    if isinstance(value, Finger):
        return value
    if isinstance(value, str):
        return Finger.parse(value)
    raise ValueError(f"finger must be a name such as 'LP', got {value!r}")


def decode_timestamp(value: Any) -> datetime:
    """Decode an ISO-8601 string or a Unix epoch integer.

    Naive timestamps are taken as UTC.
    """
    if isinstance(value, bool):
        raise ValueError(f"invalid timestamp {value!r}")
    if isinstance(value, int):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            raise ValueError(f"{value} is out of range for a Unix timestamp") from None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        # YAML loads bare dates as date objects
        parsed = datetime.combine(value, time())
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            raise ValueError(f"{value!r} is not an ISO-8601 timestamp") from None
    else:
        raise ValueError(f"timestamp must be an ISO-8601 string or epoch seconds, got {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def encode_timestamp(value: datetime) -> str:
    """Encode a timestamp as RFC 3339 with second precision."""
    return value.isoformat(timespec="seconds").replace("+00:00", "Z")


# Positions are stored in a byte by the tools that exchange these files
MAX_POSITION = 255

FingerField = Annotated[
    Finger,
    BeforeValidator(decode_finger),
    PlainSerializer(lambda f: f.name, return_type=str, when_used="json"),
]

KeymeowFinger = Annotated[
    Finger,
    BeforeValidator(decode_finger_name),
    PlainSerializer(lambda f: f.name, return_type=str, when_used="json"),
]

Timestamp = Annotated[
    datetime,
    BeforeValidator(decode_timestamp),
    PlainSerializer(encode_timestamp, return_type=str, when_used="json"),
]


class Key(BaseModel):
    """A single physical key."""

    model_config = {"frozen": True}

    char: str = Field(..., description="Glyph printed on the key (one code point)")
    row: int = Field(..., ge=0, le=MAX_POSITION)
    col: int = Field(..., ge=0, le=MAX_POSITION)
    finger: FingerField

    @field_validator("char")
    @classmethod
    def _single_code_point(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"char must be a single code point, got {value!r}")
        return value


class Layout(BaseModel):
    """Canonical keyboard layout.

    Keys are stored as a tuple: their order carries no meaning and nothing
    downstream may reorder them in place.
    """

    model_config = {"frozen": True}

    name: str
    owner: int = 0
    author: str = ""
    link: str = ""
    created: Timestamp | None = None
    modified: Timestamp | None = None
    boards: tuple[str, ...] = ()
    keys: tuple[Key, ...] = ()


class MatrixKey(BaseModel):
    """A key as stored in a row-major matrix slot."""

    model_config = {"frozen": True}

    char: str = "\0"
    finger: Finger = Finger.LP

    @property
    def is_placeholder(self) -> bool:
        return self.char == "\0"


# Unassigned matrix slots all share this value
PLACEHOLDER = MatrixKey()


class KeymeowComponent(BaseModel):
    """Keys typed by one finger, in column-then-row order."""

    model_config = {"frozen": True, "populate_by_name": True}

    finger: list[KeymeowFinger] = Field(
        ..., min_length=1, validation_alias=AliasChoices("finger", "Finger")
    )
    keys: list[str] = Field(default_factory=list, validation_alias=AliasChoices("keys", "Keys"))


class KeymeowLayout(BaseModel):
    """A layout grouped by finger, one component per finger ordinal.

    Decoding also accepts the capitalized field names (``Name``,
    ``Components``, ...) written by earlier keymeow exporters; output
    always uses the lowercase names.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    name: str = Field(..., validation_alias=AliasChoices("name", "Name"))
    authors: list[str] = Field(
        default_factory=list, validation_alias=AliasChoices("authors", "Authors")
    )
    components: list[KeymeowComponent] = Field(
        ...,
        min_length=len(Finger),
        max_length=len(Finger),
        validation_alias=AliasChoices("components", "Components"),
    )
