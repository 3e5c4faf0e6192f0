from labyrinth.maze import UnionFind


def test_initial_singletons():
    uf = UnionFind(5)
    assert len(uf) == 5
    assert [uf.find(i) for i in range(5)] == [0, 1, 2, 3, 4]
    assert not uf.connected(0, 1)


def test_union_merges_and_reports():
    uf = UnionFind(6)
    assert uf.union(0, 1) is True
    assert uf.union(1, 0) is False
    uf.union(2, 3)
    uf.union(1, 3)
    assert uf.connected(0, 2)
    assert not uf.connected(0, 4)
    assert len({uf.find(i) for i in range(4)}) == 1


def test_equal_rank_tie_attaches_second_root_under_first():
    uf = UnionFind(4)
    uf.union(0, 1)
    assert uf.find(1) == 0
    assert uf.rank[0] == 1
    uf.union(2, 0)  # lower rank side goes under higher
    assert uf.find(2) == 0


def test_path_compression_flattens_chain():
    uf = UnionFind(8)
    for i in range(7):
        uf.union(i, i + 1)
    root = uf.find(7)
    assert all(uf.parent[i] == root for i in range(8))
