import pytest

from pushswap.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_bzero_clears_prefix_only():
    buf = bytearray(b"hay how are you")
    bzero(buf, 14)
    assert buf[:14] == bytes(14)
    assert buf[14:] == b"u"


def test_bzero_rejects_overlong_count():
    with pytest.raises(ValueError):
        bzero(bytearray(3), 4)


def test_calloc_is_zeroed():
    block = calloc(10, 4)
    assert len(block) == 40
    assert not any(block)


def test_calloc_zero_gives_single_byte():
    assert calloc(0, 5) == bytearray(1)
    assert calloc(5, 0) == bytearray(1)


def test_calloc_negative_rejected():
    with pytest.raises(ValueError):
        calloc(-1, 2)


def test_memchr_finds_first_match():
    data = b"bonjour"
    assert memchr(data, ord("o"), 7) == data.index(b"o")
    assert memchr(data, ord("s"), 7) is None


def test_memchr_respects_limit():
    data = b"bonjour"
    assert memchr(data, ord("r"), 6) is None
    assert memchr(data, ord("b"), 0) is None


def test_memchr_masks_value():
    data = b"ab\x01"
    assert memchr(data, 0x101, 3) == 2


def test_memcmp_equal_and_ordering():
    assert memcmp(b"hell", b"hell", 4) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 2) == 0


def test_memcmp_returns_byte_difference():
    assert memcmp(b"\x05", b"\x02", 1) == 3


def test_memcmp_is_antisymmetric():
    a, b = b"\x00\xff\x10", b"\x00\x01\x20"
    assert memcmp(a, b, 3) == -memcmp(b, a, 3)


def test_memcmp_rejects_overlong_count():
    with pytest.raises(ValueError):
        memcmp(b"hell", b"helll", 5)


def test_memcpy_copies_prefix():
    dst = bytearray(b"Hello_______________")
    src = b"aaaHELLO YEREVAN...."
    result = memcpy(dst, src, 16)
    assert result is dst
    assert dst[:16] == src[:16]
    assert dst[16:] == b"____"


def test_memcpy_zero_bytes_is_noop():
    dst = bytearray(b"keep")
    memcpy(dst, b"", 0)
    assert dst == bytearray(b"keep")


def test_memmove_forward_overlap():
    text = b"Lorem ipsum dolor sit amet"
    buf = bytearray(text)
    memmove(buf, 1, 0, 8)
    assert buf[1:9] == text[0:8]
    assert buf[0:1] == text[0:1]
    assert buf[9:] == text[9:]


def test_memmove_backward_overlap():
    text = b"0123456789"
    buf = bytearray(text)
    memmove(buf, 0, 3, 5)
    assert buf[0:5] == text[3:8]
    assert buf[5:] == text[5:]


def test_memmove_out_of_bounds():
    with pytest.raises(ValueError):
        memmove(bytearray(5), 2, 0, 4)


def test_memset_fills_and_masks():
    buf = bytearray(b"haaa......")
    result = memset(buf, 97 + 256, 5)
    assert result is buf
    assert buf[:5] == b"a" * 5
    assert buf[5:] == b"....."


def test_memset_rejects_overlong_length():
    with pytest.raises(ValueError):
        memset(bytearray(10), 97, 20)