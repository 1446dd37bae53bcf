import pytest

from dslab.graph import Graph, main


def _feed(monkeypatch, answers):
    remaining = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def _path(n):
    graph = Graph(n)
    for vertex in range(n - 1):
        graph.add_edge(vertex, vertex + 1)
    return graph


def test_new_graph_has_no_edges():
    graph = Graph(4)
    assert graph.matrix() == [[0] * 4 for _ in range(4)]


def test_add_edge_is_symmetric():
    graph = Graph(4)
    graph.add_edge(1, 3)
    matrix = graph.matrix()
    assert matrix[1][3] == 1
    assert matrix[3][1] == 1
    assert all(matrix[i][j] == matrix[j][i] for i in range(4) for j in range(4))
    assert sum(map(sum, matrix)) == 2


@pytest.mark.parametrize("edge", [(-1, 0), (0, 4), (4, 4)])
def test_add_edge_out_of_range_raises(edge):
    graph = Graph(4)
    with pytest.raises(ValueError):
        graph.add_edge(*edge)
    assert sum(map(sum, graph.matrix())) == 0


def test_negative_vertex_count_raises():
    with pytest.raises(ValueError):
        Graph(-1)


def test_matrix_is_a_copy():
    graph = Graph(3)
    copy = graph.matrix()
    copy[0][1] = 1
    assert graph.matrix()[0][1] == 0


def test_bfs_and_dfs_on_path():
    graph = _path(5)
    assert graph.bfs(0) == list(range(5))
    assert graph.dfs(0) == list(range(5))


def test_bfs_and_dfs_differ_on_branching_graph():
    graph = Graph(4)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(1, 3)
    assert graph.bfs(0) == [0, 1, 2, 3]
    assert graph.dfs(0) == [0, 1, 3, 2]


def test_traversals_cover_only_component():
    graph = Graph(5)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    graph.add_edge(3, 4)
    for traversal in (graph.bfs, graph.dfs):
        assert set(traversal(0)) == {0, 1, 2}
        assert set(traversal(4)) == {3, 4}
        assert traversal(2)[0] == 2


def test_self_loop_does_not_repeat_vertex():
    graph = Graph(2)
    graph.add_edge(0, 0)
    graph.add_edge(0, 1)
    assert graph.bfs(0) == [0, 1]
    assert graph.dfs(0) == [0, 1]


@pytest.mark.parametrize("start", [-1, 3])
def test_invalid_start_raises(start):
    graph = _path(3)
    with pytest.raises(ValueError):
        graph.bfs(start)
    with pytest.raises(ValueError):
        graph.dfs(start)


def test_dfs_on_long_path_does_not_recurse():
    n = 3000
    graph = _path(n)
    assert graph.dfs(0) == list(range(n))
    assert graph.dfs(n - 1) == list(range(n - 1, -1, -1))


def test_main_builds_graph_and_traverses(monkeypatch, capsys):
    _feed(
        monkeypatch,
        ["1", "3", "2", "0 1", "5 5", "1 2", "3", "0", "4", "2", "2", "5"],
    )
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Invalid edge! Vertices should be between 0 and 2." in out
    assert "BFS traversal starting from vertex 0: 0 1 2" in out
    assert "DFS traversal starting from vertex 2: 2 1 0" in out
    assert "Adjacency Matrix:\n0 1 0 \n1 0 1 \n0 1 0 " in out


def test_main_without_graph(monkeypatch, capsys):
    _feed(monkeypatch, ["3", "9", "5"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Graph not created yet! Please create a graph first." in out
    assert "Invalid choice! Please try again." in out