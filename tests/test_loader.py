import io

import pytest

from graphstats.services.errors import GraphLoadError, GraphParseError
from graphstats.services.loader import graph_size, load_graph, parse_edges


SNAP_SAMPLE = """\
# Directed graph (each unordered pair of nodes is saved once): soc-Epinions1.txt
# Nodes: 4 Edges: 5
# FromNodeId\tToNodeId
0\t1
0\t2
1\t2
2\t0
3\t3
"""


def test_parses_snap_format(edge_file):
    adj = load_graph(edge_file(SNAP_SAMPLE))
    assert adj == {0: [1, 2], 1: [2], 2: [0], 3: [3]}


def test_keys_in_order_of_first_appearance():
    adj = parse_edges(["5 1", "2 5", "5 3"])
    assert list(adj) == [5, 2]
    assert adj[5] == [1, 3]


def test_duplicates_and_self_loops_kept():
    adj = parse_edges(["0 1", "0 1", "1 1"])
    assert adj == {0: [1, 1], 1: [1]}


def test_destination_only_vertex_is_not_a_key():
    adj = parse_edges(["0 1"])
    assert 1 not in adj


def test_extra_tokens_ignored():
    adj = parse_edges(["0 1 1234567890\n", "1  2\n"])
    assert adj == {0: [1], 1: [2]}


@pytest.mark.parametrize("blank", ["\n", "   \n", "\t\n", ""])
def test_blank_line_is_parse_error(blank):
    with pytest.raises(GraphParseError) as exc:
        parse_edges(["0 1\n", blank, "1 2\n"])
    assert exc.value.lineno == 2
    assert exc.value.reason == "expected source and destination"


def test_plus_sign_accepted():
    assert parse_edges(["+5 +6"]) == {5: [6]}


@pytest.mark.parametrize("token", ["1_000", "\u0661\u0662", "\uff11", "+", "-", "+-1", "0x1"])
def test_non_ascii_or_python_only_ints_rejected(token):
    with pytest.raises(GraphParseError) as exc:
        parse_edges([f"{token} 1\n"])
    assert exc.value.reason == "invalid node id"


def test_summary_omits_line_text():
    with pytest.raises(GraphParseError) as exc:
        parse_edges(["DB_PASSWORD=hunter2\n"])
    assert "hunter2" in str(exc.value)
    assert exc.value.summary == "line 1: expected source and destination"


def test_stream_source():
    adj = load_graph(io.StringIO("# c\n1 2\n2 3\n"))
    assert adj == {1: [2], 2: [3]}


def test_empty_file(edge_file):
    assert load_graph(edge_file("# only a comment\n")) == {}


@pytest.mark.parametrize(
    "text, lineno",
    [
        ("0 1\n7\n", 2),
        ("0 x\n", 1),
        ("# c\n0 1\n1.5 2\n", 3),
        ("0 -1\n", 1),
        ("  # not a comment\n", 1),
    ],
)
def test_parse_errors(edge_file, text, lineno):
    with pytest.raises(GraphParseError) as exc:
        load_graph(edge_file(text))
    assert exc.value.lineno == lineno
    assert f"line {lineno}" in str(exc.value)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_edges(["a b"])


def test_missing_file(tmp_path):
    with pytest.raises(GraphLoadError):
        load_graph(tmp_path / "missing.txt")


def test_graph_size_counts_sinks():
    adj = {0: [1, 1], 2: [3]}
    assert graph_size(adj) == (4, 3)
    assert graph_size({}) == (0, 0)
