import pytest

import airac_wire
from airac import Airac


def test_round_trip_up_to_1992():
    last = Airac.from_string_must("9213")
    for index in range(last.index):
        airac = Airac(index)
        assert airac_wire.decode(airac_wire.encode(airac)) == airac
        assert airac_wire.unpack(airac_wire.pack(airac)) == airac


def test_encode_is_raw_index():
    airac = Airac.from_string("1209")
    assert airac_wire.encode(airac) == airac.index
    assert airac_wire.to_message(airac) == {"airac19010110": airac.index}


def test_decode_clamps_out_of_range_values():
    assert airac_wire.decode(airac_wire.MAX_WIRE_VALUE + 1) == airac_wire.SENTINEL
    assert airac_wire.decode(-1) == Airac(0)
    assert airac_wire.decode(airac_wire.MAX_WIRE_VALUE) == Airac(airac_wire.MAX_WIRE_VALUE)


def test_unpack_clamps_large_values():
    assert airac_wire.unpack(b"\x00\x01\x00\x00") == Airac(0)
    assert airac_wire.unpack(b"\x00\x00\x05\xac") == Airac(0x5AC)


def test_unpack_rejects_wrong_length():
    with pytest.raises(ValueError):
        airac_wire.unpack(b"\x00\x01\x00")


def test_encode_rejects_cycles_before_epoch():
    with pytest.raises(ValueError):
        airac_wire.encode(Airac(-1))


def test_from_message():
    airac = Airac.from_string("2014")
    assert airac_wire.from_message(airac_wire.to_message(airac)) == airac
    assert airac_wire.from_message({}) == Airac(0)
    assert airac_wire.from_message({"airac19010110": 2**32}) == Airac(0)


def test_from_message_reads_null_as_unset():
    assert airac_wire.from_message({"airac19010110": None}) == Airac(0)


@pytest.mark.parametrize("value", ["12", 12.0, 1.5, True])
def test_non_integer_wire_values_are_rejected(value):
    with pytest.raises(TypeError):
        airac_wire.decode(value)
    with pytest.raises(TypeError):
        airac_wire.from_message({"airac19010110": value})
