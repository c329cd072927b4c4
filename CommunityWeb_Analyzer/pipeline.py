"""
Analysis pipeline for CommunityWeb.

Sequences the three phases of a run: load the edge list into a graph, run
the configured analysis, then report results to the log and, optionally,
to a JSON file.
"""

# Standard library imports
import logging
import time
from typing import Any, Callable, Dict, Optional

# Local imports
from .analysis.centrality import edge_betweenness
from .analysis.connectivity import calculate_connectivity_metrics, find_sccs, scc_partition
from .analysis.divisive import GirvanNewmanDetector
from .analysis.egonet import egonet_density, get_egonet
from .analysis.modularity import FastNewmanOptimizer
from .config import AnalysisType, CommunityWebConfig
from .core.graph import Graph
from .data.loaders.edge_list import EdgeListLoader
from .output.formatters import EmojiFormatter, format_graph
from .output.reporting import (
    betweenness_to_dict,
    display_betweenness_results,
    display_partition,
    divisive_result_to_dict,
    graph_to_dict,
    modularity_result_to_dict,
    partition_to_dict,
    write_results_json,
)
from .utils.math import format_time_duration


class AnalysisPipeline:
    """
    Runs one configured analysis end to end.

    Example:
        >>> config = load_config_from_dict({"input_file": "edges.txt"})
        >>> results = AnalysisPipeline(config).execute()
        >>> results["analysis_type"]
        'girvan_newman'
    """

    def __init__(self, config: CommunityWebConfig, should_cancel: Optional[Callable[[], bool]] = None):
        self.config = config
        self.should_cancel = should_cancel
        self.logger = logging.getLogger(self.__class__.__name__)
        self.phase_times: Dict[str, float] = {}

    def execute(self) -> Dict[str, Any]:
        """
        Run the load, analysis and reporting phases.

        Returns:
            JSON-serialisable results dictionary

        Raises:
            FileNotFoundError: If the input file is missing
            CommunityWebError: If loading or analysis fails
        """
        analysis_type = self.config.analysis.analysis_type
        self.logger.info(
            EmojiFormatter.format("progress", f"Starting {analysis_type.value} analysis of {self.config.input_file}")
        )
        start = time.time()

        graph = self._timed("loading", self.load_graph)
        results = self._timed("analysis", lambda: self.run_analysis(graph))
        results.update(
            {
                "input_file": self.config.input_file,
                "analysis_type": analysis_type.value,
                "directed": graph.directed,
                "num_vertices": graph.number_of_vertices(),
                "num_edges": graph.number_of_edges(),
            }
        )
        self._timed("reporting", lambda: self.report(results))

        self.logger.info(
            EmojiFormatter.format("success", f"Analysis completed in {format_time_duration(time.time() - start)}")
        )
        return results

    def load_graph(self) -> Graph:
        loader = EdgeListLoader(config={"directed": self.config.graph.directed})
        return loader.load(filepath=self.config.input_file)

    def run_analysis(self, graph: Graph) -> Dict[str, Any]:
        """Dispatch to the configured analysis and return its results."""
        handlers = {
            AnalysisType.EGONET: self._run_egonet,
            AnalysisType.SCC: self._run_scc,
            AnalysisType.BETWEENNESS: self._run_betweenness,
            AnalysisType.GIRVAN_NEWMAN: self._run_girvan_newman,
            AnalysisType.FAST_NEWMAN: self._run_fast_newman,
        }
        return handlers[self.config.analysis.analysis_type](graph)

    def report(self, results: Dict[str, Any]) -> None:
        """Write results to the configured JSON file, if any."""
        output_file = self.config.output.output_file
        if output_file:
            path = write_results_json(results, output_file)
            self.logger.info(EmojiFormatter.format("success", f"Results written to {path}"))

    def _timed(self, phase: str, func: Callable[[], Any]) -> Any:
        start = time.time()
        try:
            return func()
        finally:
            self.phase_times[phase] = time.time() - start
            self.logger.debug(f"Phase '{phase}' took {format_time_duration(self.phase_times[phase])}")

    def _run_egonet(self, graph: Graph) -> Dict[str, Any]:
        center = self.config.analysis.egonet_center
        egonet = get_egonet(graph, center)
        density = egonet_density(graph, center)
        self.logger.info(
            f"Egonet of {center}: {egonet.number_of_vertices()} vertices, "
            f"{egonet.number_of_edges()} edges, density {density:.4f}"
        )
        self.logger.info(f"\n{format_graph(egonet)}")
        return {"egonet": {"center": center, "density": density, "adjacency": graph_to_dict(egonet)}}

    def _run_scc(self, graph: Graph) -> Dict[str, Any]:
        components = find_sccs(graph, self.logger)
        partition = scc_partition(graph)
        metrics = calculate_connectivity_metrics(graph, self.logger)
        display_partition(partition, "Strongly connected components", self.logger)
        return {
            "components": [graph_to_dict(component) for component in components],
            "partition": partition_to_dict(partition),
            "connectivity": metrics,
        }

    def _run_betweenness(self, graph: Graph) -> Dict[str, Any]:
        betweenness = edge_betweenness(
            graph,
            n_jobs=self.config.analysis.n_jobs,
            should_cancel=self.should_cancel,
            logger=self.logger,
        )
        display_betweenness_results(betweenness, self.config.output.top_k, self.logger)
        return {"betweenness": betweenness_to_dict(betweenness)}

    def _run_girvan_newman(self, graph: Graph) -> Dict[str, Any]:
        detector = GirvanNewmanDetector(
            graph,
            n_jobs=self.config.analysis.n_jobs,
            should_cancel=self.should_cancel,
            max_steps=self.config.analysis.max_divisive_steps,
            copy=True,
        )
        result = detector.run()
        for step in result.steps:
            self.logger.info(
                f"Step {step.step}: removed {len(step.removed_edges)} edge(s) "
                f"at betweenness {step.max_betweenness:.4f}, {step.num_communities} communities"
            )
        display_partition(result.final_partition, "Final partition", self.logger)
        return {"girvan_newman": divisive_result_to_dict(result)}

    def _run_fast_newman(self, graph: Graph) -> Dict[str, Any]:
        result = FastNewmanOptimizer(graph, should_cancel=self.should_cancel).run()
        best = result.best_optimum
        if best is not None:
            self.logger.info(
                f"Best local optimum at step {best.step}: modularity {best.modularity:.6f}"
            )
            display_partition(best.partition, "Best partition", self.logger)
        else:
            self.logger.info("No local modularity optimum found")
        return {"fast_newman": modularity_result_to_dict(result)}


__all__ = ["AnalysisPipeline"]
