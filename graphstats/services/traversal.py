from __future__ import annotations

from collections import deque


def bfs_distances(adj: dict[int, list[int]], src: int) -> dict[int, int]:
    """
    @brief Odległości BFS od wierzchołka src w grafie skierowanym

    Klasyczny BFS z kolejką FIFO. Wierzchołek, który nie jest kluczem
    w adj, traktowany jest jak zlew (brak krawędzi wyjściowych).
    Wierzchołki nieosiągalne z src nie pojawiają się w wyniku.

    @param adj Lista sąsiedztwa grafu skierowanego
    @param src Wierzchołek startowy
    @return Słownik wierzchołek -> liczba krawędzi na najkrótszej ścieżce
    """
    dist = {src: 0}
    q = deque([src])

    while q:
        v = q.popleft()
        d = dist[v] + 1
        for u in adj.get(v, ()):
            if u not in dist:
                dist[u] = d
                q.append(u)

    return dist
