"""Tests for the Pareto primitives.

Test suite covering:
- TestDominates: Pareto dominance checks
- TestDominatesMatrix: Vectorized pairwise dominance
- TestNonDominatedFronts: Deb's fast non-dominated sorting
- TestNonDominatedSort: Rank per solution
- TestCrowdingDistance: Diversity metric computation
- TestProblemScenarios: Fronts of the built-in problems on known solutions
"""

import numpy as np
import pytest

from moop.operators import evaluate_population
from moop.primitives import (
    crowding_distance,
    dominates,
    dominates_matrix,
    fronts_from_ranks,
    non_dominated_fronts,
    non_dominated_sort,
)

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def layered_objectives() -> np.ndarray:
    """Objectives with three fronts (minimization).

    Front 0: [1,1]
    Front 1: [2,2], [1,3], [3,1]
    Front 2: [3,3]
    """
    return np.array(
        [
            [1.0, 1.0],  # 0: front 0
            [2.0, 2.0],  # 1: front 1
            [3.0, 3.0],  # 2: front 2
            [1.0, 3.0],  # 3: front 1
            [3.0, 1.0],  # 4: front 1
        ]
    )


@pytest.fixture
def tradeoff_front() -> np.ndarray:
    """Four mutually non-dominated points."""
    return np.array([[1.0, 4.0], [2.0, 3.0], [3.0, 2.0], [4.0, 1.0]])


@pytest.fixture
def chain() -> np.ndarray:
    """Each point dominates the next."""
    return np.array([[1.0, 1.0], [2.0, 2.0], [3.0, 3.0], [4.0, 4.0]])


def _random_objectives(seed: int, n: int, n_obj: int) -> np.ndarray:
    rng = np.random.default_rng(seed)
    # Rounded so that ties and duplicates occur
    return np.round(rng.uniform(0, 5, size=(n, n_obj)))


# =============================================================================
# TestDominates
# =============================================================================


class TestDominates:
    """Tests for the scalar dominates function."""

    def test_better_everywhere_dominates(self) -> None:
        """Strictly better in all objectives dominates."""
        assert dominates(np.array([1.0, 1.0]), np.array([2.0, 2.0])) is True
        assert dominates(np.array([2.0, 2.0]), np.array([1.0, 1.0])) is False

    def test_equal_vectors_never_dominate(self) -> None:
        """Equal vectors do not dominate each other."""
        a = np.array([1.0, 2.0])
        assert dominates(a, a.copy()) is False

    def test_tradeoff(self) -> None:
        """Mixed comparison gives no dominance either way."""
        a = np.array([1.0, 3.0])
        b = np.array([3.0, 1.0])
        assert dominates(a, b) is False
        assert dominates(b, a) is False

    def test_tie_plus_one_better(self) -> None:
        """A tie in one objective and an improvement in another is dominance."""
        assert dominates(np.array([1.0, 2.0]), np.array([1.0, 3.0])) is True

    def test_single_objective(self) -> None:
        assert dominates(np.array([1.0]), np.array([2.0])) is True
        assert dominates(np.array([1.0]), np.array([1.0])) is False

    def test_negative_values(self) -> None:
        assert dominates(np.array([-2.0, -2.0]), np.array([-1.0, -1.0])) is True

    def test_length_mismatch_raises(self) -> None:
        """Vectors of different lengths are rejected."""
        with pytest.raises(ValueError, match="differ in shape"):
            dominates(np.array([1.0, 2.0]), np.array([1.0, 2.0, 3.0]))

    def test_antisymmetry_on_random_pairs(self) -> None:
        """dominates(a, b) and dominates(b, a) are never both true."""
        for seed in range(20):
            objs = _random_objectives(seed, 10, 3)
            for a in objs:
                for b in objs:
                    assert not (dominates(a, b) and dominates(b, a))


# =============================================================================
# TestDominatesMatrix
# =============================================================================


class TestDominatesMatrix:
    """Tests for the vectorized dominates_matrix function."""

    def test_agrees_with_scalar_dominates(self, layered_objectives: np.ndarray) -> None:
        """Matrix result agrees with scalar dominates for all pairs."""
        matrix = dominates_matrix(layered_objectives)
        n = layered_objectives.shape[0]
        for i in range(n):
            for j in range(n):
                assert matrix[i, j] == dominates(layered_objectives[i], layered_objectives[j]), f"({i}, {j})"

    def test_diagonal_is_false(self, layered_objectives: np.ndarray) -> None:
        assert not np.any(np.diag(dominates_matrix(layered_objectives)))

    def test_tradeoff_front_has_no_dominance(self, tradeoff_front: np.ndarray) -> None:
        assert not np.any(dominates_matrix(tradeoff_front))

    def test_chain_is_upper_triangular(self, chain: np.ndarray) -> None:
        """In a chain, i dominates j iff i < j."""
        matrix = dominates_matrix(chain)
        expected = np.triu(np.ones((4, 4), dtype=bool), k=1)
        np.testing.assert_array_equal(matrix, expected)

    def test_empty(self) -> None:
        assert dominates_matrix(np.zeros((0, 2))).shape == (0, 0)

    def test_output_dtype(self, layered_objectives: np.ndarray) -> None:
        assert dominates_matrix(layered_objectives).dtype == np.bool_


# =============================================================================
# TestNonDominatedFronts
# =============================================================================


class TestNonDominatedFronts:
    """Tests for non_dominated_fronts."""

    def test_layered(self, layered_objectives: np.ndarray) -> None:
        fronts = non_dominated_fronts(layered_objectives)
        assert [f.tolist() for f in fronts] == [[0], [1, 3, 4], [2]]

    def test_chain_gives_singleton_fronts(self, chain: np.ndarray) -> None:
        fronts = non_dominated_fronts(chain)
        assert [f.tolist() for f in fronts] == [[0], [1], [2], [3]]

    def test_identical_vectors_share_one_front(self) -> None:
        """Identical objective vectors all land in front 0."""
        fronts = non_dominated_fronts(np.ones((5, 2)))
        assert len(fronts) == 1
        assert fronts[0].tolist() == [0, 1, 2, 3, 4]

    def test_one_dominates_all(self) -> None:
        """A solution dominating everything forms a front of size 1."""
        objs = np.array([[5.0, 1.0], [0.0, 0.0], [1.0, 5.0]])
        fronts = non_dominated_fronts(objs)
        assert fronts[0].tolist() == [1]
        assert fronts[1].tolist() == [0, 2]

    def test_empty(self) -> None:
        assert non_dominated_fronts(np.zeros((0, 3))) == []

    def test_single(self) -> None:
        fronts = non_dominated_fronts(np.array([[1.0, 2.0]]))
        assert [f.tolist() for f in fronts] == [[0]]

    def test_indices_ascending_within_front(self) -> None:
        for seed in range(10):
            for front in non_dominated_fronts(_random_objectives(seed, 30, 2)):
                assert np.all(np.diff(front) > 0)

    def test_partition_completeness(self) -> None:
        """The fronts cover every index exactly once."""
        for seed in range(20):
            n = 5 + seed * 3
            fronts = non_dominated_fronts(_random_objectives(seed, n, 3))
            all_indices = np.concatenate(fronts)
            assert len(all_indices) == n
            assert sorted(all_indices.tolist()) == list(range(n))

    def test_front_monotonicity(self) -> None:
        """No member of front i is dominated from front i or later, and
        every member of front i > 0 is dominated by someone in front i - 1."""
        for seed in range(20):
            objs = _random_objectives(seed, 25, 2 + seed % 3)
            dom = dominates_matrix(objs)
            fronts = non_dominated_fronts(objs)

            for i, front in enumerate(fronts):
                later = np.concatenate(fronts[i:])
                assert not np.any(dom[np.ix_(later, front)])
                if i > 0:
                    assert np.all(dom[np.ix_(fronts[i - 1], front)].any(axis=0))


# =============================================================================
# TestNonDominatedSort
# =============================================================================


class TestNonDominatedSort:
    """Tests for non_dominated_sort and fronts_from_ranks."""

    def test_layered(self, layered_objectives: np.ndarray) -> None:
        np.testing.assert_array_equal(non_dominated_sort(layered_objectives), [0, 1, 2, 1, 1])

    def test_tradeoff_front_is_rank_zero(self, tradeoff_front: np.ndarray) -> None:
        np.testing.assert_array_equal(non_dominated_sort(tradeoff_front), [0, 0, 0, 0])

    def test_empty(self) -> None:
        assert len(non_dominated_sort(np.zeros((0, 2)))) == 0

    def test_output_dtype(self, layered_objectives: np.ndarray) -> None:
        assert non_dominated_sort(layered_objectives).dtype == np.int64

    def test_agrees_with_fronts(self) -> None:
        """Ranks and fronts describe the same partition."""
        for seed in range(10):
            objs = _random_objectives(seed, 40, 3)
            fronts = non_dominated_fronts(objs)
            back = fronts_from_ranks(non_dominated_sort(objs))
            assert [f.tolist() for f in back] == [f.tolist() for f in fronts]

    def test_fronts_from_ranks_empty(self) -> None:
        assert fronts_from_ranks(np.array([], dtype=np.int64)) == []


# =============================================================================
# TestCrowdingDistance
# =============================================================================


class TestCrowdingDistance:
    """Tests for crowding_distance."""

    def test_boundary_points_infinite(self, tradeoff_front: np.ndarray) -> None:
        cd = crowding_distance(tradeoff_front)
        assert np.isinf(cd[0])
        assert np.isinf(cd[3])

    def test_interior_values(self, tradeoff_front: np.ndarray) -> None:
        """Evenly spaced interior points get (2/3) per objective."""
        cd = crowding_distance(tradeoff_front)
        np.testing.assert_allclose(cd[1:3], [4.0 / 3.0, 4.0 / 3.0])

    def test_small_fronts_all_infinite(self) -> None:
        """Fronts of size 1 and 2 are all boundary."""
        assert np.all(np.isinf(crowding_distance(np.array([[1.0, 2.0]]))))
        assert np.all(np.isinf(crowding_distance(np.array([[1.0, 2.0], [2.0, 1.0]]))))

    def test_empty(self) -> None:
        cd = crowding_distance(np.zeros((0, 2)))
        assert cd.shape == (0,)

    def test_zero_range_objective_contributes_nothing(self) -> None:
        """An objective that is constant across the front adds 0."""
        objs = np.array([[1.0, 5.0], [2.0, 5.0], [3.0, 5.0], [4.0, 5.0]])
        cd = crowding_distance(objs)
        # Objective 1 has zero range; interior points only get objective 0 gaps
        np.testing.assert_allclose(cd[1:3], [2.0 / 3.0, 2.0 / 3.0])

    def test_interior_finite_and_non_negative(self) -> None:
        """For random fronts, interior values are finite and >= 0."""
        for seed in range(20):
            rng = np.random.default_rng(seed)
            objs = rng.uniform(0, 1, size=(10, 3))
            cd = crowding_distance(objs)
            finite = cd[np.isfinite(cd)]
            assert np.all(finite >= 0)
            # At most two boundary members per objective
            assert np.sum(np.isinf(cd)) <= 2 * objs.shape[1]
            assert np.sum(np.isinf(cd)) >= 2

    def test_two_boundaries_per_objective(self) -> None:
        """With one objective per axis, exactly the two extremes are infinite."""
        objs = np.array([[0.0], [0.5], [0.2], [1.0], [0.7]])
        cd = crowding_distance(objs)
        assert np.isinf(cd[0]) and np.isinf(cd[3])
        assert np.sum(np.isinf(cd)) == 2


# =============================================================================
# TestProblemScenarios
# =============================================================================


class TestProblemScenarios:
    """Sorting the built-in problems' objectives for hand-checked solutions."""

    def test_squares_fronts(self, squares) -> None:
        x = np.array([[0.0, 0.0, 0.0, 0.0], [1.0, 1.0, 1.0, 1.0], [-1.0, 2.0, 0.0, 3.0]])
        objs = evaluate_population(squares, x)

        np.testing.assert_array_equal(objs, [[0, 0, 0, 0], [1, 1, 1, 1], [1, 4, 0, 9]])
        assert dominates(objs[0], objs[1])
        assert dominates(objs[0], objs[2])
        assert not dominates(objs[1], objs[2])
        assert not dominates(objs[2], objs[1])

        fronts = non_dominated_fronts(objs)
        assert [f.tolist() for f in fronts] == [[0], [1, 2]]

    def test_ratio_single_front(self, ratio) -> None:
        x = np.array([[0.5, 1.0], [0.2, 0.0]])
        objs = evaluate_population(ratio, x)

        np.testing.assert_allclose(objs, [[0.5, 4.0], [0.2, 5.0]])

        fronts = non_dominated_fronts(objs)
        assert len(fronts) == 1
        assert fronts[0].tolist() == [0, 1]

        cd = crowding_distance(objs[fronts[0]])
        assert np.all(np.isinf(cd))
