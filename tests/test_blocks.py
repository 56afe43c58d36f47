import pytest

from qrengine import blocks, reed_solomon
from qrengine.consts import total_codewords, total_data_codewords

HELLO_WORLD_1M_DATA = [32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236, 17, 236, 17]


def test_split_into_blocks() -> None:
    assert blocks.split_into_blocks(list(range(5)), [(1, 2), (1, 3)]) == [[0, 1], [2, 3, 4]]


def test_split_into_blocks_wrong_length() -> None:
    with pytest.raises(ValueError):
        blocks.split_into_blocks(list(range(4)), [(1, 2), (1, 3)])


def test_interleave_uneven_blocks() -> None:
    assert blocks.interleave([[1, 2], [3, 4], [5, 6, 7]]) == [1, 3, 5, 2, 4, 6, 7]


def test_interleave_empty() -> None:
    assert blocks.interleave([]) == []


def test_single_block_is_data_followed_by_ec() -> None:
    result = blocks.generate_ec_and_interleave(HELLO_WORLD_1M_DATA, 1, 'M')
    assert result == HELLO_WORLD_1M_DATA + [196, 35, 39, 119, 235, 215, 231, 226, 93, 23]


def test_version_5_q_interleaving() -> None:
    data = list(range(62))
    result = blocks.generate_ec_and_interleave(data, 5, 'Q')
    assert len(result) == total_codewords(5) == 134
    assert result[:8] == [0, 15, 30, 46, 1, 16, 31, 47]
    # only the two long blocks have a 16th codeword
    assert result[60:62] == [45, 61]
    first_ec = reed_solomon.encode(data[:15], 18)
    second_ec = reed_solomon.encode(data[15:30], 18)
    assert result[62:64] == [first_ec[0], second_ec[0]]


@pytest.mark.parametrize("version,error", [(1, 'L'), (7, 'H'), (15, 'Q'), (40, 'M')])
def test_total_length(version: int, error: str) -> None:
    data = [0x55] * total_data_codewords(version, error)
    assert len(blocks.generate_ec_and_interleave(data, version, error)) == total_codewords(version)


def test_codewords_to_bits() -> None:
    assert blocks.codewords_to_bits([0b10100101], 1) == [1, 0, 1, 0, 0, 1, 0, 1]


def test_codewords_to_bits_appends_remainder() -> None:
    bits = blocks.codewords_to_bits([0xFF] * 44, 2)
    assert len(bits) == 44 * 8 + 7
    assert bits[-7:] == [0] * 7
