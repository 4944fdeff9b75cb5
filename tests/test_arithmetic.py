import math

import pytest

from cpdrills.arithmetic import (
    adjust_proximity,
    count_rectangles,
    cube_paint_cost,
    defeats_monster,
    divisibility_answer,
    forms_expression,
    gcd,
    is_lucky,
    lcm,
    pixel_damaged,
    second_smallest,
    segment_count,
)

COSTS = [1, 2, 3, 4, 5, 6]


def test_cube_two_cubes_cost_one_full_paint():
    assert cube_paint_cost(2, COSTS) == sum(COSTS)


@pytest.mark.parametrize("n", [1, 3, 7, 11])
def test_cube_odd_rounds_up(n):
    assert cube_paint_cost(n, COSTS) == cube_paint_cost(n + 1, COSTS)


@pytest.mark.parametrize("k", [1, 2, 5])
def test_cube_scales_with_pairs(k):
    assert cube_paint_cost(2 * k, COSTS) == k * cube_paint_cost(2, COSTS)


def test_cube_requires_six_costs():
    with pytest.raises(ValueError):
        cube_paint_cost(4, [1, 2, 3])


def test_defeats_monster():
    assert defeats_monster(10, 5, 3) is True
    assert defeats_monster(10, 3, 5) is False
    assert defeats_monster(10, 4, 4) is False


@pytest.mark.parametrize("n", [1, 3, 9, 15, 101])
def test_odd_numbers_are_lucky(n):
    assert is_lucky(n) is True


@pytest.mark.parametrize("n", [1, 2, 3, 6, 12])
def test_lucky_invariant_under_factor_four(n):
    assert is_lucky(4 * n) == is_lucky(n)


def test_lucky_flips_with_factor_two():
    assert is_lucky(2) is False
    assert is_lucky(4) is True


@pytest.mark.parametrize("n", [0, -3])
def test_lucky_rejects_non_positive(n):
    with pytest.raises(ValueError):
        is_lucky(n)


def test_rectangles_single_cell_has_none():
    assert count_rectangles(1, 1) == 0


@pytest.mark.parametrize("n,m", [(2, 3), (4, 7), (5, 5), (1, 9)])
def test_rectangles_symmetric_and_non_negative(n, m):
    assert count_rectangles(n, m) == count_rectangles(m, n)
    assert count_rectangles(n, m) >= 0


def test_rectangles_grow_with_grid():
    assert count_rectangles(3, 4) < count_rectangles(3, 5)


def test_segment_count_single_digits():
    assert segment_count(0, 8) == 7
    assert segment_count(1, 0) == 2
    assert segment_count(4, 0) == 4


def test_segment_count_non_positive_sum():
    assert segment_count(0, 0) == 0
    assert segment_count(5, -10) == 0


def test_segment_count_is_sum_over_digits():
    assert segment_count(120, 3) == (
        segment_count(1, 0) + segment_count(2, 0) + segment_count(3, 0)
    )


def test_segment_count_depends_only_on_sum():
    assert segment_count(7, 5) == segment_count(10, 2)


@pytest.mark.parametrize("triple", [(1, 2, 3), (3, 1, 2), (2, 3, 1), (5, 5, 10)])
def test_forms_expression_true(triple):
    assert forms_expression(*triple) is True


@pytest.mark.parametrize("triple", [(1, 2, 4), (4, 2, 1), (7, 7, 7)])
def test_forms_expression_false(triple):
    assert forms_expression(*triple) is False


def test_pixel_on_boundary_not_damaged():
    assert pixel_damaged(0, 0, 4, 3, 5) is False


def test_pixel_inside_damaged():
    assert pixel_damaged(0, 0, 4, 3, 6) is True


def test_pixel_same_point_needs_positive_k():
    assert pixel_damaged(2, 3, 3, 2, 1) is True
    assert pixel_damaged(2, 3, 3, 2, 0) is False


def test_proximity_zero_percent_keeps_value():
    assert adjust_proximity(40.0, 0, 30, 0) == pytest.approx(40.0)
    assert adjust_proximity(40.0, 30, 0, 1) == pytest.approx(40.0)


def test_proximity_full_percent():
    assert adjust_proximity(40.0, 10, 100, 1) == pytest.approx(80.0)
    assert adjust_proximity(40.0, 100, 10, 0) == pytest.approx(0.0)


def test_proximity_half_decrease():
    assert adjust_proximity(40.0, 50, 10, 0) == pytest.approx(20.0)


def test_second_smallest():
    assert second_smallest([5, 1, 3]) == 3
    assert second_smallest([2, 2, 9]) == 2


def test_second_smallest_requires_two():
    with pytest.raises(ValueError):
        second_smallest([4])


@pytest.mark.parametrize("a,b", [(12, 18), (7, 5), (100, 75), (9, 0)])
def test_gcd_matches_stdlib(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", [(12, 18), (7, 5), (100, 75), (21, 6)])
def test_lcm_times_gcd_is_product(a, b):
    assert lcm(a, b) * gcd(a, b) == a * b


def test_lcm_of_zeros_raises():
    with pytest.raises(ZeroDivisionError):
        lcm(0, 0)


def test_divisibility_answer():
    assert divisibility_answer(3, 5, 1) == -1
    assert divisibility_answer(3, 5, 2) is None