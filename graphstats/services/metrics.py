from __future__ import annotations

import logging
import multiprocessing as mp

import numpy as np

from .traversal import bfs_distances

logger = logging.getLogger(__name__)

_PROGRESS_EVERY = 10000

# lista sąsiedztwa przekazywana procesom roboczym przez initializer puli
_worker_adj: dict[int, list[int]] | None = None


def avg_shortest_path_len(adj: dict[int, list[int]]) -> float | None:
    """
    @brief Oblicza średnią długość najkrótszych ścieżek (APL) w grafie skierowanym

    BFS uruchamiany jest z każdego wierzchołka będącego kluczem w adj.
    Liczone są tylko uporządkowane pary (s, t), s != t, dla których t jest
    osiągalny z s. Pary nieosiągalne nie wchodzą ani do sumy, ani do liczby par.

    @param adj Lista sąsiedztwa
    @return Średnia odległość lub None, jeśli nie przetworzono żadnej pary
    """
    total = 0
    pairs = 0

    for s in adj:
        dist = bfs_distances(adj, s)
        for t, d in dist.items():
            if t != s:
                total += d
                pairs += 1

    if pairs == 0:
        return None
    return total / pairs


def diameter(adj: dict[int, list[int]]) -> int | None:
    """
    @brief Oblicza średnicę grafu jako maksimum odległości BFS po wszystkich źródłach

    Źródłami są tylko wierzchołki z krawędziami wyjściowymi, więc wierzchołek
    będący wyłącznie zlewem nigdy nie jest początkiem BFS. Wynik jest
    maksimum głębokości BFS, a nie dokładną średnicą opartą na ekscentryczności.

    Graf bez krawędzi i graf z jednym izolowanym wierzchołkiem dają ten sam
    wynik (None).

    @param adj Lista sąsiedztwa
    @return Największa zaobserwowana odległość lub None, gdy maksimum wynosi 0
    """
    max_dist = 0

    for s in adj:
        dist = bfs_distances(adj, s)
        far = max(dist.values())
        if far > max_dist:
            max_dist = far

    return max_dist or None


def _add_hist(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    if len(a) < len(b):
        a, b = b, a
    out = a.copy()
    out[:len(b)] += b
    return out


def _sweep(adj: dict[int, list[int]], sources) -> tuple[int, int, int, np.ndarray]:
    """
    @brief Jeden BFS na źródło, aktualizujący wszystkie liczniki naraz

    @return Krotka (suma odległości, liczba par, maksimum, histogram odległości)
    """
    total = 0
    pairs = 0
    max_dist = 0
    hist = np.zeros(1, dtype=np.int64)

    for i, s in enumerate(sources, start=1):
        dist = bfs_distances(adj, s)

        # źródło jest jedynym wierzchołkiem z odległością 0
        total += sum(dist.values())
        pairs += len(dist) - 1

        counts = np.bincount(np.fromiter(dist.values(), dtype=np.int64, count=len(dist)))
        if len(counts) - 1 > max_dist:
            max_dist = len(counts) - 1
        hist = _add_hist(hist, counts)

        if i % _PROGRESS_EVERY == 0:
            logger.debug("sweep: %d sources done", i)

    hist[0] = 0
    return total, pairs, max_dist, hist


def _init_worker(adj: dict[int, list[int]]):
    global _worker_adj
    _worker_adj = adj


def _sweep_chunk(sources: list[int]) -> tuple[int, int, int, np.ndarray]:
    return _sweep(_worker_adj, sources)


def _chunks(items: list[int], n: int) -> list[list[int]]:
    size = max(1, -(-len(items) // n))
    return [items[i:i + size] for i in range(0, len(items), size)]


def _parallel_sweep(adj: dict[int, list[int]], workers: int) -> tuple[int, int, int, np.ndarray]:
    """
    @brief Rozdziela źródła BFS między procesy i scala częściowe liczniki

    Każdy proces dostaje listę sąsiedztwa raz (initializer puli) i zwraca
    częściowe sumy dla swoich źródeł. Scalanie jest przemienne, więc wynik
    nie zależy od kolejności ukończenia zadań.
    """
    sources = list(adj)
    chunks = _chunks(sources, workers * 4)

    total = 0
    pairs = 0
    max_dist = 0
    hist = np.zeros(1, dtype=np.int64)

    with mp.Pool(workers, initializer=_init_worker, initargs=(adj,)) as pool:
        for t, p, m, h in pool.imap_unordered(_sweep_chunk, chunks):
            total += t
            pairs += p
            max_dist = max(max_dist, m)
            hist = _add_hist(hist, h)

    return total, pairs, max_dist, hist


def effective_diameter(hist, q: float = 0.9) -> float | None:
    """
    @brief Wyznacza efektywną średnicę z histogramu odległości

    Zwraca najmniejszą odległość d, w której mieści się co najmniej ułamek q
    osiągalnych par, z interpolacją liniową pomiędzy kolejnymi odległościami
    całkowitymi.

    @param hist Histogram: hist[d] = liczba par w odległości d
    @param q Ułamek par, domyślnie 0.9
    @return Efektywna średnica lub None dla pustego histogramu
    @throws ValueError Gdy q nie należy do przedziału (0, 1]
    """
    if not 0.0 < q <= 1.0:
        raise ValueError(f"q must be in (0, 1], got {q}")

    h = np.array(hist, dtype=np.float64)
    if len(h):
        h[0] = 0.0

    cum = np.cumsum(h)
    if len(cum) == 0 or cum[-1] == 0:
        return None

    target = q * cum[-1]
    i = int(np.searchsorted(cum, target, side="left"))
    prev = cum[i - 1]
    return float(i - 1 + (target - prev) / (cum[i] - prev))


def path_metrics(adj: dict[int, list[int]], workers: int = 1) -> dict:
    """
    @brief Oblicza APL, średnicę i rozkład odległości w jednym przebiegu BFS

    Każde źródło przetwarzane jest jednym BFS, a jego mapa odległości
    zasila oba agregaty. Wyniki są identyczne z avg_shortest_path_len
    i diameter.

    Dla workers > 1 źródła dzielone są pomiędzy procesy (multiprocessing),
    a częściowe sumy scalane na końcu.

    @param adj Lista sąsiedztwa
    @param workers Liczba procesów (1 = przebieg sekwencyjny)
    @return Słownik z kluczami sources, pairs, total_distance, avg_path_len,
            diameter, effective_diameter, distance_histogram
    @throws ValueError Gdy workers < 1
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    if workers == 1 or len(adj) < 2:
        total, pairs, max_dist, hist = _sweep(adj, adj)
    else:
        total, pairs, max_dist, hist = _parallel_sweep(adj, workers)

    apl = total / pairs if pairs else None
    diam = max_dist or None

    logger.info(
        "sweep finished: %d sources, %d pairs, apl=%s, diameter=%s",
        len(adj), pairs, apl, diam,
    )

    return {
        "sources": len(adj),
        "pairs": pairs,
        "total_distance": total,
        "avg_path_len": apl,
        "diameter": diam,
        "effective_diameter": effective_diameter(hist),
        "distance_histogram": [int(x) for x in hist],
    }
