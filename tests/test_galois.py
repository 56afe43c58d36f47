import pytest

from qrengine import galois


def test_exp_table_starts_with_powers_of_two() -> None:
    assert galois.EXP_TABLE[:8] == [1, 2, 4, 8, 16, 32, 64, 128]
    # 2^8 = 256 reduced by 0x11D
    assert galois.EXP_TABLE[8] == 29


def test_exp_table_wraps_around() -> None:
    assert len(galois.EXP_TABLE) == 256
    assert galois.EXP_TABLE[255] == galois.EXP_TABLE[0] == 1
    assert galois.exp(255) == 1
    assert galois.exp(256) == 2


def test_log_is_inverse_of_exp() -> None:
    for i in range(255):
        assert galois.log(galois.exp(i)) == i


def test_exp_table_is_a_permutation_of_nonzero_elements() -> None:
    assert sorted(galois.EXP_TABLE[:255]) == list(range(1, 256))


def test_log_of_zero_raises() -> None:
    with pytest.raises(ValueError):
        galois.log(0)


def test_add_is_xor() -> None:
    assert galois.add(0b1010, 0b0110) == 0b1100
    assert galois.add(77, 77) == 0


@pytest.mark.parametrize("a,b,expected", [
    (0, 5, 0),
    (5, 0, 0),
    (1, 99, 99),
    (2, 128, 29),
    (3, 7, 9),
])
def test_multiply(a: int, b: int, expected: int) -> None:
    assert galois.multiply(a, b) == expected


def test_multiply_is_commutative() -> None:
    for a in (1, 2, 53, 200, 255):
        for b in (3, 17, 128, 254):
            assert galois.multiply(a, b) == galois.multiply(b, a)


def test_inverse() -> None:
    for a in range(1, 256):
        assert galois.multiply(a, galois.inverse(a)) == 1


def test_inverse_of_zero_raises() -> None:
    with pytest.raises(ZeroDivisionError):
        galois.inverse(0)


def test_power() -> None:
    assert galois.power(2, 8) == 29
    assert galois.power(7, 0) == 1
    assert galois.power(0, 5) == 0
    assert galois.power(3, 2) == galois.multiply(3, 3)


def test_zero_to_the_zero_raises() -> None:
    with pytest.raises(ValueError):
        galois.power(0, 0)
