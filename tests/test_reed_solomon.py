import pytest

from qrengine import galois, reed_solomon

HELLO_WORLD_1M_DATA = [32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236, 17, 236, 17]
HELLO_WORLD_1M_EC = [196, 35, 39, 119, 235, 215, 231, 226, 93, 23]


def test_generator_polynomial_degree_zero() -> None:
    assert reed_solomon.generator_polynomial(0) == [1]


def test_generator_polynomial_degree_two() -> None:
    # (x - 1)(x - 2) = x^2 + 3x + 2
    assert reed_solomon.generator_polynomial(2) == [1, 3, 2]


def test_generator_polynomial_degree_seven_exponents() -> None:
    poly = reed_solomon.generator_polynomial(7)
    assert poly[0] == 1
    assert [galois.log(c) for c in poly[1:]] == [87, 229, 146, 149, 238, 102, 21]


def test_generator_polynomial_returns_a_fresh_list() -> None:
    poly = reed_solomon.generator_polynomial(4)
    poly.append(99)
    assert len(reed_solomon.generator_polynomial(4)) == 5


def test_generator_polynomial_negative_degree() -> None:
    with pytest.raises(ValueError):
        reed_solomon.generator_polynomial(-1)


def test_encode_hello_world_version_1_m() -> None:
    assert reed_solomon.encode(HELLO_WORLD_1M_DATA, 10) == HELLO_WORLD_1M_EC


@pytest.mark.parametrize("ec_count", [7, 10, 18, 30])
def test_encode_length(ec_count: int) -> None:
    assert len(reed_solomon.encode([1, 2, 3, 4, 5], ec_count)) == ec_count


def test_encode_zero_data_gives_zero_ec() -> None:
    assert reed_solomon.encode([0] * 16, 10) == [0] * 10


def test_codeword_is_divisible_by_generator() -> None:
    # data + ec evaluates to zero at every root alpha^i of the generator
    codeword = HELLO_WORLD_1M_DATA + HELLO_WORLD_1M_EC
    for i in range(10):
        x = galois.exp(i)
        acc = 0
        for coef in codeword:
            acc = galois.multiply(acc, x) ^ coef
        assert acc == 0


def test_encode_does_not_modify_input() -> None:
    data = list(HELLO_WORLD_1M_DATA)
    reed_solomon.encode(data, 10)
    assert data == HELLO_WORLD_1M_DATA
