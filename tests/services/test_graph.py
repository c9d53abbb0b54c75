"""Tests for GraphService — reach, groups, check, export, and loading."""

from __future__ import annotations

import json

import pytest

from pipegraph.domain.errors import AdjacencyParseError
from pipegraph.services.graph import GraphService, load_service, parse_error_result
from pipegraph.services.result import ServiceResult

# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


class TestLoading:
    def test_from_text(self, sample_text: str) -> None:
        svc = GraphService.from_text(sample_text)
        assert svc.engine.node_count == 7

    def test_from_text_raises_on_bad_input(self) -> None:
        with pytest.raises(AdjacencyParseError):
            GraphService.from_text("0 <-> nope")

    def test_load_service_ok(self, sample_text: str) -> None:
        loaded = load_service(sample_text, op="groups")
        assert isinstance(loaded, GraphService)

    def test_load_service_parse_error(self) -> None:
        loaded = load_service("0 <-> 0\n1 <=> 1", op="groups")
        assert isinstance(loaded, ServiceResult)
        assert not loaded.ok
        assert loaded.op == "groups"
        assert loaded.error is not None
        assert loaded.error.code == "PARSE_ERROR"
        assert loaded.error.detail == {"line_no": 2, "line": "1 <=> 1"}

    def test_parse_error_without_line(self) -> None:
        result = parse_error_result("reach", AdjacencyParseError("gap"))
        assert result.error is not None
        assert result.error.detail == {}
        assert result.error.message == "gap"


# ---------------------------------------------------------------------------
# reach
# ---------------------------------------------------------------------------


class TestReach:
    def test_reach_basic(self, sample_text: str) -> None:
        result = GraphService.from_text(sample_text).reach(0)
        assert result.ok
        assert result.op == "reach"
        assert result.data == {"node": 0, "count": 6, "nodes": [0, 2, 3, 4, 5, 6]}

    def test_reach_singleton(self, sample_text: str) -> None:
        result = GraphService.from_text(sample_text).reach(1)
        assert result.data["nodes"] == [1]
        assert result.data["count"] == 1

    def test_reach_invalid_node(self, sample_text: str) -> None:
        result = GraphService.from_text(sample_text).reach(42)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_NODE"
        assert result.error.detail == {"node": 42, "node_count": 7}

    def test_reach_on_empty_graph(self) -> None:
        result = GraphService.from_text("").reach(0)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_NODE"

    def test_no_meta_without_timing(self, sample_text: str) -> None:
        assert GraphService.from_text(sample_text).reach(0).meta is None


# ---------------------------------------------------------------------------
# groups
# ---------------------------------------------------------------------------


class TestGroups:
    def test_groups_basic(self, sample_text: str) -> None:
        result = GraphService.from_text(sample_text).groups()
        assert result.ok
        assert result.data["count"] == 2
        assert result.data["node_count"] == 7
        assert result.data["groups"] == [
            {"id": 0, "size": 6, "nodes": [0, 2, 3, 4, 5, 6]},
            {"id": 1, "size": 1, "nodes": [1]},
        ]

    def test_groups_empty(self) -> None:
        result = GraphService.from_text("").groups()
        assert result.ok
        assert result.data == {"count": 0, "node_count": 0, "groups": []}


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


class TestCheck:
    def test_check_sample(self, sample_text: str) -> None:
        result = GraphService.from_text(sample_text).check()
        assert result.ok
        assert result.data == {
            "node_count": 7,
            "edge_count": 7,
            "self_loops": [1],
            "isolated": [1],
            "asymmetric": [],
        }
        assert result.warnings == []

    def test_check_reports_one_way_links(self) -> None:
        result = GraphService.from_text("0 <-> 1\n1 <-> 1").check()
        assert result.ok
        assert result.data["asymmetric"] == [[0, 1]]
        assert result.warnings == ["Node 0 links to 1 but 1 does not link back"]
        assert result.data["isolated"] == [1]


# ---------------------------------------------------------------------------
# export
# ---------------------------------------------------------------------------


class TestExport:
    def test_export_dot(self, sample_text: str) -> None:
        result = GraphService.from_text(sample_text).export("dot")
        assert result.ok
        content = result.data["content"]
        assert result.data["format"] == "dot"
        assert content.startswith("graph pipes {")
        assert "  0 -- 2;" in content
        assert "  1 -- 1;" in content
        assert "->" not in content
        assert content.endswith("}\n")

    def test_export_json(self, sample_text: str) -> None:
        result = GraphService.from_text(sample_text).export("json")
        assert result.ok
        payload = json.loads(result.data["content"])
        assert payload["directed"] is False
        assert sorted(node["id"] for node in payload["nodes"]) == list(range(7))
        links = {(link["source"], link["target"]) for link in payload["links"]}
        assert (5, 6) in links
        assert len(links) == 7

    def test_export_default_is_dot(self, sample_text: str) -> None:
        result = GraphService.from_text(sample_text).export()
        assert result.data["format"] == "dot"

    def test_export_invalid_format(self, sample_text: str) -> None:
        result = GraphService.from_text(sample_text).export("gexf")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_FORMAT"
        assert result.error.detail["valid"] == ["dot", "json"]
