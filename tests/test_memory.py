import pytest

from sigtalk.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memchr_finds_first():
    assert memchr(b"hello", ord("l"), 5) == 2


def test_memchr_respects_limit():
    assert memchr(b"hello", ord("o"), 4) is None
    assert memchr(b"hello", ord("h"), 0) is None


def test_memchr_truncates_value():
    assert memchr(b"\x00\x01\x02", 0x101, 3) == 1


def test_memchr_limit_too_large():
    with pytest.raises(IndexError):
        memchr(b"ab", 0, 3)


def test_memcmp_equal():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_sign_and_symmetry():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abd", b"abc", 3) == -memcmp(b"abc", b"abd", 3)


def test_memcmp_bytes_are_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcpy_copies_prefix():
    dest = bytearray(b"xxxxx")
    result = memcpy(dest, b"abc", 3)
    assert result is dest
    assert dest == bytearray(b"abcxx")


def test_memcpy_overrun_raises():
    with pytest.raises(IndexError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_memmove_same_offset_is_noop():
    buf = bytearray(b"abcdef")
    assert memmove(buf, 1, 1, 3) == bytearray(b"abcdef")


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memset_fills_prefix():
    buf = bytearray(b"hello")
    assert memset(buf, ord("z"), 3) == bytearray(b"zzzlo")


def test_memset_truncates_value():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert buf == bytearray(b"AAA")


def test_bzero():
    buf = bytearray(b"abc")
    bzero(buf, 2)
    assert buf == bytearray(b"\x00\x00c")


def test_calloc_zeroed():
    buf = calloc(4, 3)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_zero_size():
    assert calloc(10, 0) == bytearray()


def test_calloc_overflow():
    with pytest.raises(MemoryError):
        calloc(SIZE_MAX // 2 + 1, 2)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)