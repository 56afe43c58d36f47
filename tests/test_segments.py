import pytest

from qrengine import segments
from qrengine.consts import total_data_codewords
from qrengine.exceptions import CapacityExceededError
from qrengine.modes import Segment


def test_encode_segment_header() -> None:
    buf = segments.encode_segment(Segment('alphanumeric', b'HELLO WORLD'), 1)
    header = ''.join(map(str, buf.bits[:13]))
    assert header == '0010' '000001011'
    assert len(buf) == 74


def test_encode_segment_header_width_grows_with_version() -> None:
    buf = segments.encode_segment(Segment('byte', b'abc'), 10)
    assert ''.join(map(str, buf.bits[:20])) == '0100' '0000000000000011'


def test_encode_segment_kanji_counts_characters() -> None:
    buf = segments.encode_segment(Segment('kanji', b'\x93\x5f\xe4\xaa'), 1)
    assert ''.join(map(str, buf.bits[:12])) == '1000' '00000010'


def test_hello_world_version_1_m() -> None:
    codewords = segments.encode([Segment('alphanumeric', b'HELLO WORLD')], 1, 'M')
    assert codewords == [32, 91, 11, 120, 209, 114, 220, 77, 67, 64,
                         236, 17, 236, 17, 236, 17]


def test_numeric_version_1_m() -> None:
    codewords = segments.encode([Segment('numeric', b'01234567')], 1, 'M')
    assert codewords == [16, 32, 12, 86, 97, 128,
                         236, 17, 236, 17, 236, 17, 236, 17, 236, 17]


@pytest.mark.parametrize("version,error", [(1, 'L'), (2, 'H'), (10, 'Q'), (40, 'M')])
def test_length_matches_data_capacity(version: int, error: str) -> None:
    codewords = segments.encode([Segment('byte', b'abc')], version, error)
    assert len(codewords) == total_data_codewords(version, error)


def test_terminator_is_truncated_when_full() -> None:
    # 41 digits fill 151 of the 152 bits of version 1-L
    codewords = segments.encode([Segment('numeric', b'1' * 41)], 1, 'L')
    assert len(codewords) == 19
    assert codewords[-1] == 0b00010110


def test_no_padding_when_exactly_full() -> None:
    # 14 bytes: 4 + 8 + 112 = 124 bits, terminator 4 -> 128 bits = 16 codewords
    codewords = segments.encode([Segment('byte', b'abcdefghijklmn')], 1, 'M')
    assert len(codewords) == 16
    assert codewords[-1] == ord('n') << 4 & 0xFF


def test_multiple_segments() -> None:
    segs = [Segment('alphanumeric', b'HELLO '), Segment('numeric', b'12345678901234')]
    codewords = segments.encode(segs, 1, 'M')
    assert len(codewords) == 16
    # first segment starts with the alphanumeric mode indicator
    assert codewords[0] >> 4 == 0b0010


def test_pad_codewords_alternate() -> None:
    codewords = segments.encode([Segment('numeric', b'1')], 1, 'M')
    pads = codewords[3:]
    assert pads == [236, 17] * 6 + [236]


def test_overflow_raises() -> None:
    with pytest.raises(CapacityExceededError):
        segments.encode([Segment('alphanumeric', b'A' * 21)], 1, 'M')
