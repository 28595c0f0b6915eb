import pytest

from sigtalk.protocol import BitDecoder, encode_char, encode_message


def _decode(bits):
    decoder = BitDecoder()
    return [value for value in (decoder.feed(bit) for bit in bits) if value is not None]


def test_encode_char_msb_first():
    assert encode_char("A") == (0, 1, 0, 0, 0, 0, 0, 1)


def test_encode_char_accepts_int_and_str_alike():
    assert encode_char(ord("z")) == encode_char("z")


def test_encode_char_zero_is_all_zero_bits():
    assert encode_char(0) == (0,) * 8


def test_encode_char_rejects_out_of_range():
    with pytest.raises(ValueError):
        encode_char(256)
    with pytest.raises(ValueError):
        encode_char("ab")


def test_encode_message_ends_with_terminator():
    bits = list(encode_message("hi"))
    assert len(bits) == 24
    assert bits[-8:] == [0] * 8


def test_round_trip_ascii():
    assert bytes(_decode(encode_message("hello world"))) == b"hello world\x00"


def test_round_trip_utf8():
    text = "caf\u00e9"
    assert bytes(_decode(encode_message(text))) == text.encode("utf-8") + b"\x00"


def test_round_trip_bytes_input():
    data = bytes(range(1, 256))
    assert bytes(_decode(encode_message(data))) == data + b"\x00"


def test_decoder_returns_none_until_byte_complete():
    decoder = BitDecoder()
    results = [decoder.feed(bit) for bit in encode_char("A")]
    assert results[:7] == [None] * 7
    assert results[7] == ord("A")
    assert decoder.pending == 0


def test_decoder_counts_pending_bits():
    decoder = BitDecoder()
    decoder.feed(True)
    decoder.feed(False)
    assert decoder.pending == 2