"""Tests for edge-list parsing."""

from __future__ import annotations

import pytest

from tests.conftest import PATH_TEXT, TRIANGLE_TEXT
from ugraph.domain.edgelist import parse_edge_list
from ugraph.domain.errors import GraphReadError


class TestParseEdgeList:
    def test_weighted_edges(self) -> None:
        g = parse_edge_list(TRIANGLE_TEXT)
        assert g.order == 3
        assert g.get_num_edges() == 3
        assert g.get_edge_weight(2, 3) == 7
        assert g.is_complete() is True

    def test_nodes_prepopulated_from_order(self) -> None:
        g = parse_edge_list(PATH_TEXT)
        assert list(g.nodes) == [1, 2, 3, 4]
        assert g.node(4).degree == 0

    def test_unweighted_edges_use_default_weight(self) -> None:
        g = parse_edge_list("3\ne 1 2\ne 2 3 6\n")
        assert g.get_edge_weight(1, 2) == 1
        assert g.get_edge_weight(2, 3) == 6

    def test_custom_default_weight(self) -> None:
        g = parse_edge_list("2\ne 1 2\n", default_weight=4)
        assert g.get_edge_weight(2, 1) == 4

    def test_blank_and_comment_lines_skipped(self) -> None:
        text = "# header\n\nc generated\n3\n\n# edges\ne 1 2 5\n"
        g = parse_edge_list(text)
        assert g.order == 3
        assert g.get_num_edges() == 1

    def test_other_lines_ignored(self) -> None:
        g = parse_edge_list("3\np edge 3 2\n99\nn 1 4\ne 1 3 2\n")
        assert g.order == 3
        assert g.get_num_edges() == 1

    def test_surrounding_whitespace(self) -> None:
        g = parse_edge_list("  2  \n\te   1   2   9\n")
        assert g.get_edge_weight(1, 2) == 9

    def test_zero_order(self) -> None:
        g = parse_edge_list("0\n")
        assert g.order == 0
        assert len(g.nodes) == 0

    def test_duplicate_edge_last_weight_wins(self) -> None:
        g = parse_edge_list("2\ne 1 2 5\ne 2 1 3\n")
        assert g.get_edge_weight(1, 2) == 3
        assert g.get_num_edges() == 1


class TestParseErrors:
    def test_empty_text(self) -> None:
        with pytest.raises(GraphReadError, match="missing order line"):
            parse_edge_list("")

    def test_edge_before_order(self) -> None:
        with pytest.raises(GraphReadError) as exc_info:
            parse_edge_list("e 1 2 3\n")
        assert exc_info.value.line == 1

    def test_malformed_order(self) -> None:
        with pytest.raises(GraphReadError, match="invalid order"):
            parse_edge_list("three\n")

    def test_negative_order(self) -> None:
        with pytest.raises(GraphReadError, match="order must be >= 0"):
            parse_edge_list("-2\n")

    def test_malformed_node(self) -> None:
        with pytest.raises(GraphReadError) as exc_info:
            parse_edge_list("3\ne 1 x 2\n")
        assert exc_info.value.line == 2
        assert "destination node" in exc_info.value.reason

    def test_malformed_weight(self) -> None:
        with pytest.raises(GraphReadError, match="invalid weight"):
            parse_edge_list("3\ne 1 2 2.5\n")

    def test_truncated_edge_line(self) -> None:
        with pytest.raises(GraphReadError, match="expected 'e <src> <dest> \\[weight\\]'"):
            parse_edge_list("3\ne 1\n")

    def test_too_many_tokens(self) -> None:
        with pytest.raises(GraphReadError):
            parse_edge_list("3\ne 1 2 3 4\n")

    def test_zero_weight(self) -> None:
        with pytest.raises(GraphReadError, match="greater than 0") as exc_info:
            parse_edge_list("3\ne 1 2 0\n")
        assert exc_info.value.line == 2

    def test_self_loop(self) -> None:
        with pytest.raises(GraphReadError, match="Self-loops"):
            parse_edge_list("3\ne 2 2 1\n")

    def test_node_beyond_order(self) -> None:
        with pytest.raises(GraphReadError, match=r"node 3 outside 1\.\.2") as exc_info:
            parse_edge_list("2\ne 1 3 4\n")
        assert exc_info.value.line == 2

    def test_zero_based_ids_rejected(self) -> None:
        with pytest.raises(GraphReadError, match=r"node 0 outside 1\.\.3"):
            parse_edge_list("3\ne 0 1 1\n")

    def test_out_of_range_endpoint_checked_before_self_loop(self) -> None:
        with pytest.raises(GraphReadError, match="node 5 outside"):
            parse_edge_list("3\ne 5 5 1\n")

    def test_error_is_os_error(self) -> None:
        with pytest.raises(OSError):
            parse_edge_list("bad\n")
