import pytest

from qrengine import masking
from qrengine.functional_areas import build, finalize
from qrengine.matrix import Module
from qrengine.placement import data_module_positions, place


def _placed(version: int = 1):
    m = build(version)
    n = len(data_module_positions(m))
    bits = [(i * 7 + i // 3) % 2 for i in range(n)]
    return place(m, bits)


@pytest.mark.parametrize("mask_id,row,col,expected", [
    (0, 0, 0, True), (0, 0, 1, False),
    (1, 2, 5, True), (1, 3, 5, False),
    (2, 4, 3, True), (2, 4, 4, False),
    (3, 1, 2, True), (3, 1, 1, False),
    (4, 0, 0, True), (4, 2, 0, False),
    (5, 0, 5, True), (5, 1, 1, False),
    (6, 1, 5, False), (6, 0, 3, True), (6, 1, 1, True),
    (7, 0, 0, True), (7, 1, 0, False),
])
def test_should_mask(mask_id: int, row: int, col: int, expected: bool) -> None:
    assert masking.should_mask(mask_id, row, col) is expected


@pytest.mark.parametrize("mask_id", [-1, 8])
def test_invalid_mask_id(mask_id: int) -> None:
    with pytest.raises(ValueError):
        masking.should_mask(mask_id, 0, 0)
    with pytest.raises(ValueError):
        masking.apply_mask(build(1), mask_id)


@pytest.mark.parametrize("mask_id", range(8))
def test_apply_mask_only_touches_data_modules(mask_id: int) -> None:
    m = _placed()
    masked = masking.apply_mask(m, mask_id)
    for r in range(m.size):
        for c in range(m.size):
            if m.is_reserved(r, c):
                assert masked.get(r, c) == m.get(r, c)
            elif masking.should_mask(mask_id, r, c):
                assert masked.is_dark(r, c) != m.is_dark(r, c)
            else:
                assert masked.get(r, c) == m.get(r, c)


@pytest.mark.parametrize("mask_id", range(8))
def test_apply_mask_twice_restores(mask_id: int) -> None:
    m = _placed()
    assert masking.apply_mask(masking.apply_mask(m, mask_id), mask_id) == m


def test_apply_mask_leaves_unset_modules() -> None:
    m = build(1)
    masked = masking.apply_mask(m, 0)
    assert masked.get(20, 20) == Module.UNSET


def test_apply_mask_does_not_modify_input() -> None:
    m = _placed()
    before = m.copy()
    masking.apply_mask(m, 3)
    assert m == before


def test_evaluate_all_masks_scores_finalized_candidates() -> None:
    m = _placed()
    best_mask, best_score, scores = masking.evaluate_all_masks(m, 'M')
    assert sorted(scores) == list(range(8))
    for mask_id, score in scores.items():
        candidate = finalize(masking.apply_mask(m, mask_id), 'M', mask_id)
        assert score == masking.evaluate_penalty(candidate)
    assert best_score == min(scores.values())
    # ties resolve to the lowest mask id
    assert best_mask == min(k for k, v in scores.items() if v == best_score)


def test_select_best_returns_finalized_matrix() -> None:
    m = _placed(2)
    mask_id, chosen = masking.select_best(m, 'Q')
    assert chosen == finalize(masking.apply_mask(m, mask_id), 'Q', mask_id)
    _, _, scores = masking.evaluate_all_masks(m, 'Q')
    assert scores[mask_id] == min(scores.values())
