from __future__ import annotations


class GraphError(Exception):
    """
    @brief Bazowy wyjątek dla błędów wczytywania grafu
    """

    @property
    def summary(self) -> str:
        """Komunikat bez treści pliku, do zwracania przez API."""
        return str(self)


class GraphLoadError(GraphError):
    """
    @brief Nie udało się otworzyć lub odczytać pliku z listą krawędzi
    """

    @property
    def summary(self) -> str:
        return "cannot read file"


class GraphParseError(GraphError, ValueError):
    """
    @brief Linia pliku nie zawiera dwóch całkowitych identyfikatorów wierzchołków

    @param lineno Numer linii (liczony od 1)
    @param line Treść błędnej linii
    @param reason Krótki opis problemu
    """

    def __init__(self, lineno: int, line: str, reason: str):
        self.lineno = lineno
        self.line = line
        self.reason = reason
        super().__init__(f"line {lineno}: {reason}: {line.strip()!r}")

    @property
    def summary(self) -> str:
        return f"line {self.lineno}: {self.reason}"
