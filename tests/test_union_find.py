import numpy as np
import pytest

from graphopt.union_find import UnionFind


def test_singletons() -> None:
    union_find = UnionFind(4)

    assert [union_find.find(x) for x in range(4)] == [0, 1, 2, 3]
    assert union_find.n_sets() == 4


def test_union_joins_sets() -> None:
    union_find = UnionFind(5)

    assert union_find.union(0, 1)
    assert union_find.union(3, 4)

    assert union_find.find(0) == union_find.find(1)
    assert union_find.find(3) == union_find.find(4)
    assert not union_find.connected(1, 3)


def test_redundant_union_returns_false() -> None:
    union_find = UnionFind(3)
    union_find.union(0, 1)
    union_find.union(1, 2)

    assert not union_find.union(0, 2)
    assert union_find.n_sets() == 1


def test_equal_rank_attaches_second_root_under_first() -> None:
    union_find = UnionFind(2)

    union_find.union(0, 1)

    assert union_find.parent[1] == 0
    assert union_find.rank[0] == 1
    assert union_find.rank[1] == 0


def test_shorter_tree_goes_under_taller() -> None:
    union_find = UnionFind(3)
    union_find.union(0, 1)

    # 0の木のランクが高いので、yとして渡しても2が0の下に付く
    union_find.union(2, 0)

    assert union_find.find(2) == 0
    assert union_find.rank[0] == 1


def test_find_compresses_path() -> None:
    union_find = UnionFind(4)
    union_find.parent = np.array([0, 0, 1, 2])

    assert union_find.find(3) == 0
    np.testing.assert_array_equal(union_find.parent, [0, 0, 0, 0])


@pytest.mark.parametrize("seed", range(5))
def test_number_of_roots_matches_successful_unions(seed: int) -> None:
    rng = np.random.default_rng(seed)
    n = 20
    union_find = UnionFind(n)

    n_success = 0
    for x, y in rng.integers(0, n, (30, 2)):
        n_success += union_find.union(int(x), int(y))
        assert union_find.find(int(x)) == union_find.find(int(y))

    roots = {x for x in range(n) if union_find.parent[x] == x}
    assert len(roots) == n - n_success
    assert union_find.n_sets() == n - n_success
