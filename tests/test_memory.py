import pytest

from cubtools.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_bzero_clears_prefix_only():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"def"


def test_bzero_count_too_large():
    with pytest.raises(ValueError):
        bzero(bytearray(2), 3)


def test_calloc_size_and_zeroes():
    buf = calloc(4, 3)
    assert len(buf) == 4 * 3
    assert not any(buf)


def test_calloc_negative_rejected():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first():
    data = b"hello"
    index = memchr(data, ord("l"), len(data))
    assert index == data.index(b"l")


def test_memchr_respects_count():
    data = b"hello"
    assert memchr(data, ord("o"), 4) is None
    assert memchr(data, ord("o"), 5) == len(data) - 1


def test_memchr_masks_value():
    data = bytes([1, 2, 3])
    assert memchr(data, 0x100 + 2, 3) == 1


def test_memcmp_equal_and_ordering():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abd", b"abc", 3) == ord("d") - ord("c")
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abx", b"aby", 2) == 0


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x00", 1) == 0xFF


def test_memcmp_count_too_large():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy_copies_and_returns_dest():
    dest = bytearray(5)
    src = b"xyz"
    result = memcpy(dest, src, 3)
    assert result is dest
    assert dest == src + bytes(2)


def test_memmove_overlapping_forward():
    original = b"abcdef"
    buf = bytearray(original)
    view = memoryview(buf)
    dest = view[1:]
    result = memmove(dest, view, 4)
    assert result is dest
    assert bytes(result[:4]) == original[:4]
    assert bytes(buf) == original[:1] + original[:4] + original[5:]


def test_memmove_overlapping_backward():
    original = b"abcdef"
    buf = bytearray(original)
    view = memoryview(buf)
    result = memmove(view, view[2:], 4)
    assert result is view
    assert bytes(result) == original[2:] + original[4:]
    assert bytes(buf) == original[2:] + original[4:]


def test_memset_fills_and_returns():
    buf = bytearray(4)
    assert memset(buf, ord("*"), 3) is buf
    assert buf == b"***" + bytes(1)


def test_memset_non_positive_count_is_noop():
    buf = bytearray(b"keep")
    memset(buf, 0, -5)
    assert buf == b"keep"


def test_memset_count_too_large():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, 3)