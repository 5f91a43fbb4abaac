import numpy as np


class UnionFind:
    def __init__(self, n: int):
        self.parent = np.arange(n)
        self.rank = np.zeros(n, dtype=np.int64)

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, x: int) -> int:
        """xの属する集合の代表元を返す。経路上のノードは直接根を指すように圧縮する"""
        if self.parent[x] != x:
            self.parent[x] = self.find(int(self.parent[x]))
        return int(self.parent[x])

    def union(self, x: int, y: int) -> bool:
        """ランクの低い木を高い木の下に繋ぐ。同ランクならyの根をxの根の下に繋ぐ"""
        px = self.find(x)
        py = self.find(y)

        if px == py:
            return False

        if self.rank[px] < self.rank[py]:
            self.parent[px] = py
        elif self.rank[px] > self.rank[py]:
            self.parent[py] = px
        else:
            self.parent[py] = px
            self.rank[px] += 1

        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def n_sets(self) -> int:
        return len({self.find(x) for x in range(len(self))})
