"""
Unit tests for output formatting and result reporting.
"""

import json

import pandas as pd
import pytest

from CommunityWeb_Analyzer.analysis.centrality import edge_betweenness
from CommunityWeb_Analyzer.analysis.divisive import GirvanNewmanDetector
from CommunityWeb_Analyzer.analysis.modularity import FastNewmanOptimizer
from CommunityWeb_Analyzer.core.graph import Graph
from CommunityWeb_Analyzer.output.formatters import EmojiFormatter, format_graph, format_partition
from CommunityWeb_Analyzer.output.reporting import (
    betweenness_frame,
    betweenness_to_dict,
    display_betweenness_results,
    divisive_result_to_dict,
    graph_to_dict,
    modularity_result_to_dict,
    partition_frame,
    partition_to_dict,
    write_results_json,
)

pytestmark = [pytest.mark.unit, pytest.mark.output]


class TestEmojiFormatter:
    def test_known_type(self):
        assert EmojiFormatter.format("success", "done") == "✅ done"

    def test_unknown_type_passes_through(self):
        assert EmojiFormatter.format("shout", "hello") == "hello"


class TestFormatPartition:
    def test_one_line_per_community(self):
        partition = {0: frozenset({2, 0}), 1: frozenset({1})}
        assert format_partition(partition) == "0: 0 2\n1: 1"


class TestFormatGraph:
    def test_components_in_blocks(self, two_pairs_graph):
        assert format_graph(two_pairs_graph) == "0: 1\n1: 0\n\n2: 3\n3: 2"

    def test_vertices_in_discovery_order(self, barbell_graph):
        lines = format_graph(barbell_graph).splitlines()
        assert lines[0] == "0: 1 2"
        assert lines[2] == "2: 0 1 3"
        assert len(lines) == 6

    def test_isolated_vertex(self):
        graph = Graph()
        graph.add_vertex(4)
        assert format_graph(graph) == "4:"

    def test_empty_graph(self):
        assert format_graph(Graph()) == ""


class TestFrames:
    def test_betweenness_frame_sorted(self, path_graph):
        df = betweenness_frame(edge_betweenness(path_graph), top_k=0)
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["source", "target", "betweenness"]
        assert df["betweenness"].tolist() == [8.0, 6.0, 6.0]
        assert df.iloc[0][["source", "target"]].tolist() == [1, 2]

    def test_betweenness_frame_top_k(self, barbell_graph):
        df = betweenness_frame(edge_betweenness(barbell_graph), top_k=2)
        assert len(df) == 2

    def test_empty_betweenness_frame(self):
        assert betweenness_frame({}).empty

    def test_partition_frame(self):
        df = partition_frame({0: frozenset({0, 1}), 2: frozenset({2, 3, 4}), 5: frozenset({5})})
        assert df["leader"].tolist() == [2, 0, 5]
        assert df["size"].tolist() == [3, 2, 1]
        assert df.iloc[0]["members"] == [2, 3, 4]

    def test_display_betweenness_results(self, path_graph, mock_logger, caplog):
        with caplog.at_level("INFO"):
            display_betweenness_results(edge_betweenness(path_graph), 2, mock_logger)
        assert "Top 2 Edges by Betweenness" in caplog.text

    def test_display_no_edges(self, mock_logger, caplog):
        with caplog.at_level("INFO"):
            display_betweenness_results({}, 5, mock_logger)
        assert "No edges to analyze." in caplog.text


class TestResultDicts:
    def test_partition_to_dict(self):
        assert partition_to_dict({3: frozenset({4, 3})}) == {"3": [3, 4]}

    def test_graph_to_dict(self, path_graph):
        assert graph_to_dict(path_graph) == {"0": [1], "1": [0, 2], "2": [1, 3], "3": [2]}

    def test_betweenness_to_dict(self, path_graph):
        rows = betweenness_to_dict(edge_betweenness(path_graph))
        assert rows[1] == {"source": 1, "target": 2, "betweenness": 8.0}

    def test_divisive_result_is_json_serialisable(self, barbell_graph):
        data = divisive_result_to_dict(GirvanNewmanDetector(barbell_graph).run())
        assert data["steps"][0]["removed_edges"] == [[2, 3]]
        assert data["steps"][0]["partition"] == {"0": [0, 1, 2], "3": [3, 4, 5]}
        json.dumps(data)

    def test_modularity_result_is_json_serialisable(self, two_pairs_graph):
        data = modularity_result_to_dict(FastNewmanOptimizer(two_pairs_graph).run())
        assert data["best_optimum_step"] == 2
        assert data["optima"][0]["partition"] == {"0": [0, 1], "2": [2, 3]}
        assert [step["merged"] for step in data["steps"]] == [[0, 1], [2, 3], [0, 2]]
        json.dumps(data)

    def test_write_results_json(self, tmp_path):
        path = write_results_json({"a": [1, 2]}, tmp_path / "out" / "results.json")
        assert path.exists()
        assert json.loads(path.read_text(encoding="utf-8")) == {"a": [1, 2]}
