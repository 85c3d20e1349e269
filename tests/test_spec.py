import pytest
from pydantic import ValidationError

from enigmalab.machine.errors import ConfigStringError
from enigmalab.machine.spec import (
    PRESETS,
    MachineSpec,
    RotorSetting,
    get_template,
    list_presets,
)
from enigmalab.machine.validator import validate_spec


# ---------------------------------------------------------------------------
# Configuration string parsing
# ---------------------------------------------------------------------------

def test_parse_basic():
    spec = MachineSpec.parse("B;I-A-A,II-B-C,III-Z-Y;A-B,C-D")
    assert spec.reflector == "B"
    assert [r.as_tuple() for r in spec.rotors] == [("I", 0, 0), ("II", 1, 2), ("III", 25, 24)]
    assert spec.plugboard == [("A", "B"), ("C", "D")]


def test_parse_traversal_order_is_reversed():
    spec = MachineSpec.parse("B;I-A-A,II-A-A,III-A-A")
    assert [r.rotor_id for r in spec.traversal_order()] == ["III", "II", "I"]
    assert [r.rotor_id for r in spec.rotors] == ["I", "II", "III"]


def test_parse_numeric_offsets_wrap():
    spec = MachineSpec.parse("B;I-0-0,II-27-1,III-2-25")
    assert [r.as_tuple() for r in spec.rotors] == [("I", 0, 0), ("II", 1, 1), ("III", 2, 25)]


def test_parse_ring_is_read_from_its_own_field():
    spec = MachineSpec.parse("B;I-C-F")
    assert spec.rotors[0].position == 2
    assert spec.rotors[0].ring_setting == 5


def test_parse_ignores_whitespace_parentheses_and_case():
    spec = MachineSpec.parse(" b ; (i-a-a), (ii - b - c) ; (a-b), (c-d) ")
    assert spec.to_config_string() == "B;I-A-A,II-B-C;A-B,C-D"


@pytest.mark.parametrize("text", ["B;I-A-A", "B;I-A-A;", "B;I-A-A; "])
def test_parse_plugboard_section_is_optional(text):
    assert MachineSpec.parse(text).plugboard == []


@pytest.mark.parametrize(
    "text",
    [
        "B",
        "B;I-A-A;A-B;C-D",
        ";I-A-A",
        "B;",
        "B;I-A",
        "B;I-A-A-A",
        "B;-A-A",
        "B;I-A-A,",
        "B;I-A-é",
        "B;I-?-A",
        "B;I-²-A",
        "B;I-A-٣",
        "B;I-A-A;A-B-C",
        "B;I-A-A;A-1",
        "B;I-A-A;AB",
    ],
)
def test_parse_rejects_malformed_strings(text):
    with pytest.raises(ConfigStringError):
        MachineSpec.parse(text)


def test_config_string_error_is_value_error():
    with pytest.raises(ValueError):
        MachineSpec.parse("nonsense")


def test_to_config_string_round_trip():
    text = "C;VI-Y-C,VII-L-H,VIII-M-Z;Q-W,E-R,T-Z"
    spec = MachineSpec.parse(text)
    assert spec.to_config_string() == text
    assert MachineSpec.parse(spec.to_config_string()) == spec


def test_to_config_string_without_plugs():
    assert MachineSpec.parse("B;I-A-A,II-A-A,III-A-A").to_config_string() == "B;I-A-A,II-A-A,III-A-A;"


# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------

def test_rotor_setting_normalizes():
    r = RotorSetting(rotor_id=" iv ", position=30, ring_setting=-1)
    assert r.as_tuple() == ("IV", 4, 25)


def test_spec_requires_a_rotor():
    with pytest.raises(ValidationError):
        MachineSpec(reflector="B", rotors=[])


def test_spec_roundtrips_through_json():
    spec = get_template("enigma-i-plugged")
    assert MachineSpec.model_validate_json(spec.model_dump_json()) == spec


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

def test_list_presets_sorted():
    names = list_presets()
    assert names == sorted(PRESETS)
    assert "enigma-i" in names


@pytest.mark.parametrize("name", list_presets())
def test_presets_are_valid(name):
    spec = get_template(name)
    assert spec.name == name
    ok, errs = validate_spec(spec)
    assert ok, errs


def test_four_rotor_preset():
    assert len(get_template("four-rotor").rotors) == 4


def test_unknown_preset():
    with pytest.raises(KeyError):
        get_template("enigma-z")


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------

def test_validator_accepts_good_spec():
    assert validate_spec(MachineSpec.parse("A;I-A-A;A-B")) == (True, [])


def test_validator_unknown_ids():
    spec = MachineSpec.parse("D;I-A-A,XI-A-A,II-A-A")
    ok, errs = validate_spec(spec)
    assert not ok
    assert len(errs) == 2
    assert "reflector" in errs[0]
    assert "slot 1" in errs[1]


@pytest.mark.parametrize(
    "plugs,fragment",
    [
        ([("A", "A")], "itself"),
        ([("A", "1")], "non alphabetic"),
        ([("A", "B"), ("C", "A")], "A is wired more than once"),
        ([("A", "B"), ("B", "A")], "wired more than once"),
    ],
)
def test_validator_plugboard_errors(plugs, fragment):
    spec = MachineSpec(reflector="B", rotors=[{"rotor_id": "I"}], plugboard=plugs)
    ok, errs = validate_spec(spec)
    assert not ok
    assert any(fragment in e for e in errs)


def test_parse_rejects_non_ascii_digits_as_config_error():
    with pytest.raises(ConfigStringError, match="position"):
        MachineSpec.parse("B;I-²-A")
