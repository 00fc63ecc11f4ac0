from enum import IntFlag

import pytest

import knxdpt
from knxcore.errors import UnknownFlagError, UnknownSubtypeError, UnsupportedSubtypeError
from knxdpt import registry
from knxdpt.dpt import BitSetDpt, describe, max_value
from knxdpt.catalog import ALL_SUBTYPES, DptGeneralStatus, GeneralStatus


@pytest.fixture
def isolated_registry(monkeypatch):
    monkeypatch.setattr(registry, "_REG", dict(registry._REG))
    return registry


def test_general_status_descriptor():
    d = DptGeneralStatus
    assert d.id == "21.001"
    assert d.description == "General Status"
    assert d.flag_names == ("OutOfService", "Fault", "Overridden", "InAlarm", "AlarmUnAck")
    assert (d.lower_value, d.upper_value) == (0, 31)
    assert d.index_of("InAlarm") == 3
    assert d.index_of("inalarm") is None
    assert d.name_of(1 << 3) == "InAlarm"
    assert d.name_of(3) is None
    assert d.name_of(0) is None
    assert d.name_of(32) is None
    assert d.value_of("Overridden") == 4 == GeneralStatus.Overridden
    with pytest.raises(UnknownFlagError):
        d.value_of("Nope")
    with pytest.raises(UnknownFlagError):
        d.text_of(64)


def test_max_value_and_describe():
    assert max_value(["a"]) == 1
    assert max_value(list("abcdefgh")) == 255
    assert describe("RoomHeatingControllerStatus") == "Room Heating Controller Status"


def test_descriptor_invariants():
    with pytest.raises(UnsupportedSubtypeError):
        BitSetDpt("21.900", "none", ())
    with pytest.raises(UnsupportedSubtypeError):
        BitSetDpt("21.900", "nine", tuple(f"F{i}" for i in range(9)))
    with pytest.raises(UnsupportedSubtypeError):
        BitSetDpt("21.900", "dup", ("A", "A"))
    with pytest.raises(UnsupportedSubtypeError):
        BitSetDpt("", "no id", ("A",))
    d = BitSetDpt("21.900", "list", ["A", "B"])
    assert d.flag_names == ("A", "B")
    assert d == BitSetDpt("21.900", "list", ("A", "B"))


def test_from_flag_requires_bit_order():
    class Skips(IntFlag):
        A = 1
        B = 4

    with pytest.raises(UnsupportedSubtypeError):
        BitSetDpt.from_flag("21.900", Skips)


def test_catalog_registered_on_import():
    subs = knxdpt.subtypes()
    for d in ALL_SUBTYPES:
        assert subs[d.id] is d
    assert {"21.001", "21.002", "21.100", "21.601", "21.1000", "21.1010"} <= set(subs)
    assert all(d.upper_value <= 0xFF for d in subs.values())
    ids = [d.id for d in knxdpt.list_subtypes()]
    assert ids.index("21.601") < ids.index("21.1000")
    with pytest.raises(TypeError):
        subs["21.999"] = DptGeneralStatus


def test_lookup_and_get():
    assert registry.lookup("21.001") is DptGeneralStatus
    assert registry.lookup("21.01") is None
    with pytest.raises(UnknownSubtypeError):
        registry.get("21.999")
    with pytest.raises(LookupError):
        registry.get("")


def test_register_last_writer_wins(isolated_registry):
    a = BitSetDpt("21.950", "first", ("A",))
    b = BitSetDpt("21.950", "second", ("B", "C"))
    isolated_registry.register(a)
    isolated_registry.register(b)
    assert isolated_registry.get("21.950") is b
    assert knxdpt.BitSetTranslator("21.950").dpt.upper_value == 3
