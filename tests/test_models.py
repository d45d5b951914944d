"""Tests for finger, key, layout and keymeow models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from layout_convert.models import (
    PLACEHOLDER,
    Finger,
    Key,
    KeymeowComponent,
    KeymeowLayout,
    Layout,
    decode_finger,
    decode_timestamp,
    encode_timestamp,
)


class TestFinger:
    def test_ten_variants_in_anatomical_order(self) -> None:
        names = [f.name for f in Finger]
        assert names == ["LP", "LR", "LM", "LI", "LT", "RT", "RI", "RM", "RR", "RP"]
        assert [int(f) for f in Finger] == list(range(10))

    def test_every_name_parses_to_its_variant(self) -> None:
        for finger in Finger:
            assert Finger.parse(finger.name) is finger
        assert len({Finger.parse(f.name) for f in Finger}) == 10

    def test_str_is_name(self) -> None:
        assert str(Finger.RM) == "RM"

    def test_parse_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="XX is not a valid finger"):
            Finger.parse("XX")

    def test_is_thumb(self) -> None:
        assert [f for f in Finger if f.is_thumb] == [Finger.LT, Finger.RT]


class TestDecodeFinger:
    def test_ordinal(self) -> None:
        assert decode_finger(6) is Finger.RI

    def test_name(self) -> None:
        assert decode_finger("LM") is Finger.LM

    def test_ordinal_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="not a valid finger ordinal"):
            decode_finger(10)

    def test_bool_rejected(self) -> None:
        with pytest.raises(ValueError):
            decode_finger(True)

    def test_other_types_rejected(self) -> None:
        with pytest.raises(ValueError, match="ordinal or a name"):
            decode_finger(1.5)


class TestKey:
    def test_finger_from_ordinal(self) -> None:
        key = Key.model_validate({"char": "a", "row": 1, "col": 0, "finger": 0})
        assert key.finger is Finger.LP

    def test_finger_from_name(self) -> None:
        key = Key.model_validate({"char": "a", "row": 1, "col": 0, "finger": "LP"})
        assert key.finger is Finger.LP

    def test_unknown_finger_name(self) -> None:
        with pytest.raises(ValidationError, match="is not a valid finger"):
            Key.model_validate({"char": "a", "row": 0, "col": 0, "finger": "thumb"})

    def test_non_ascii_char(self) -> None:
        key = Key(char="é", row=0, col=0, finger=Finger.LP)
        assert key.char == "é"

    @pytest.mark.parametrize("char", ["", "ab", "e\u0301"])
    def test_char_must_be_single_code_point(self, char: str) -> None:
        with pytest.raises(ValidationError, match="single code point"):
            Key(char=char, row=0, col=0, finger=Finger.LP)

    def test_negative_position_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Key(char="a", row=-1, col=0, finger=Finger.LP)

    @pytest.mark.parametrize("field", ["row", "col"])
    def test_position_fits_in_a_byte(self, field: str) -> None:
        base = {"char": "a", "row": 0, "col": 0, "finger": "LP"}
        assert getattr(Key.model_validate({**base, field: 255}), field) == 255
        with pytest.raises(ValidationError):
            Key.model_validate({**base, field: 256})

    def test_frozen(self) -> None:
        key = Key(char="a", row=0, col=0, finger=Finger.LP)
        with pytest.raises(ValidationError):
            key.char = "b"

    def test_json_dump_uses_finger_name(self) -> None:
        key = Key(char="a", row=0, col=0, finger=Finger.RR)
        assert key.model_dump(mode="json")["finger"] == "RR"
        assert key.model_dump()["finger"] is Finger.RR


class TestTimestamps:
    def test_epoch_seconds(self) -> None:
        assert decode_timestamp(1700000000) == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    def test_iso_with_zulu(self) -> None:
        assert decode_timestamp("2023-04-01T12:00:00Z") == datetime(2023, 4, 1, 12, tzinfo=timezone.utc)

    def test_naive_iso_is_utc(self) -> None:
        assert decode_timestamp("2023-04-01T12:00:00").tzinfo == timezone.utc

    def test_malformed(self) -> None:
        with pytest.raises(ValueError, match="not an ISO-8601 timestamp"):
            decode_timestamp("yesterday")

    def test_epoch_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="out of range for a Unix timestamp"):
            decode_timestamp(10**20)

    def test_layout_with_huge_epoch(self) -> None:
        with pytest.raises(ValidationError, match="out of range"):
            Layout.model_validate({"name": "x", "created": 10**20})

    def test_encode_rfc3339(self) -> None:
        assert encode_timestamp(datetime(2023, 4, 1, 12, tzinfo=timezone.utc)) == "2023-04-01T12:00:00Z"


class TestLayout:
    def test_both_timestamp_forms(self) -> None:
        layout = Layout.model_validate(
            {"name": "x", "created": "2023-04-01T12:00:00Z", "modified": 1700000000}
        )
        assert layout.created == datetime(2023, 4, 1, 12, tzinfo=timezone.utc)
        assert layout.modified == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    def test_malformed_timestamp(self) -> None:
        with pytest.raises(ValidationError):
            Layout.model_validate({"name": "x", "created": "not a date"})

    def test_defaults(self) -> None:
        layout = Layout(name="empty")
        assert layout.keys == ()
        assert layout.boards == ()
        assert layout.created is None
        assert layout.author == ""

    def test_keys_are_a_tuple(self) -> None:
        layout = Layout.model_validate(
            {"name": "x", "keys": [{"char": "a", "row": 0, "col": 0, "finger": 0}]}
        )
        assert isinstance(layout.keys, tuple)

    def test_json_dump(self) -> None:
        layout = Layout.model_validate({"name": "x", "modified": 1700000000})
        dumped = layout.model_dump(mode="json")
        assert dumped["modified"] == "2023-11-14T22:13:20Z"
        assert dumped["created"] is None


class TestMatrixKey:
    def test_placeholder_is_zero_valued(self) -> None:
        assert PLACEHOLDER.char == "\0"
        assert PLACEHOLDER.finger is Finger.LP
        assert PLACEHOLDER.is_placeholder


class TestKeymeowModels:
    def test_requires_ten_components(self) -> None:
        component = KeymeowComponent(finger=[Finger.LP], keys=[])
        with pytest.raises(ValidationError):
            KeymeowLayout(name="x", components=[component] * 9)

    def test_component_finger_by_name_only(self) -> None:
        assert KeymeowComponent.model_validate({"finger": ["RI"]}).finger == [Finger.RI]
        with pytest.raises(ValidationError, match="must be a name"):
            KeymeowComponent.model_validate({"finger": [6]})

    def test_capitalized_field_names_accepted(self) -> None:
        keymeow = KeymeowLayout.model_validate(
            {
                "Name": "x",
                "Authors": ["someone"],
                "Components": [{"Finger": [f.name], "Keys": []} for f in Finger],
            }
        )
        assert keymeow.name == "x"
        assert keymeow.authors == ["someone"]
        assert keymeow.components[9].finger == [Finger.RP]
        assert set(keymeow.model_dump(mode="json")) == {"name", "authors", "components"}
