import pytest


@pytest.fixture
def edge_file(tmp_path):
    """Zapisuje listę krawędzi do pliku tymczasowego i zwraca ścieżkę."""

    def _write(text, name="graph.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def two_components():
    # 0 -> 1 oraz cykl 2 -> 3 -> 4 -> 2
    return {0: [1], 2: [3], 3: [4], 4: [2]}
