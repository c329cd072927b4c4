"""
Divisive community detection (Girvan-Newman).

Communities are uncovered by repeatedly deleting the edges with the highest
edge betweenness: those edges are the likeliest bridges between groups. After
every deletion the betweenness of the remaining edges is recomputed from
scratch and the connected components of the thinned graph are reported. The
sequence of partitions, from the starting components down to one singleton
per vertex, is the dendrogram of the graph.

Removal policy: every edge tied at the maximum score is removed in the same
iteration, not just one of them. This makes the result independent of edge
iteration order but can split several communities at once, so the
dendrogram is coarser than that of single-edge variants.
"""

# Standard library imports
import logging
from typing import Callable, Iterator, Optional

# Local imports
from ..core.exceptions import AnalysisCancelledError, GraphError, UnsupportedGraphError
from ..core.graph import Graph
from ..core.types import DivisiveResult, DivisiveStep, Partition
from .centrality import edge_betweenness, max_betweenness_edges
from .traversal import components_to_partition, connected_components

STATE_ACTIVE = "active"
STATE_DONE = "done"


class GirvanNewmanDetector:
    """
    Girvan-Newman community detector over an undirected graph.

    The detector mutates the graph it is given (edges are removed); pass
    ``copy=True`` to work on a private copy instead.

    Example:
        >>> detector = GirvanNewmanDetector(graph, copy=True)
        >>> result = detector.run()
        >>> result.first_split(2).partition
    """

    def __init__(
        self,
        graph: Graph,
        n_jobs: int = 1,
        should_cancel: Optional[Callable[[], bool]] = None,
        max_steps: Optional[int] = None,
        copy: bool = False,
    ):
        """
        Initialize the detector.

        Args:
            graph: Undirected graph to split
            n_jobs: Worker processes for the betweenness passes
            should_cancel: Optional callable polled between source passes and
                between iterations; returning True aborts the run
            max_steps: Stop after this many iterations (None runs until no
                edges remain)
            copy: Analyze a copy and leave ``graph`` untouched

        Raises:
            UnsupportedGraphError: If ``graph`` is directed
        """
        if graph.directed:
            raise UnsupportedGraphError(
                "Girvan-Newman community detection requires an undirected graph"
            )
        self.graph = graph.copy() if copy else graph
        self.n_jobs = n_jobs
        self.should_cancel = should_cancel
        self.max_steps = max_steps
        self.steps_completed = 0
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def state(self) -> str:
        """``"active"`` while edges remain, ``"done"`` afterwards."""
        return STATE_ACTIVE if self.graph.number_of_edges() > 0 else STATE_DONE

    def current_partition(self) -> Partition:
        """Connected components of the graph in its current state."""
        return components_to_partition(connected_components(self.graph))

    def step(self) -> DivisiveStep:
        """
        Run one iteration: score, remove every maximal edge, re-partition.

        The graph is only modified after the betweenness calculation has
        finished, so a cancelled step removes nothing.

        Raises:
            GraphError: If no edges remain
            AnalysisCancelledError: If cancellation was requested
        """
        if self.state == STATE_DONE:
            raise GraphError("No edges left to remove")

        betweenness = edge_betweenness(
            self.graph,
            n_jobs=self.n_jobs,
            should_cancel=self.should_cancel,
            logger=self.logger,
        )
        max_score, removed = max_betweenness_edges(betweenness)
        for edge in removed:
            self.graph.remove_edge(edge)

        self.steps_completed += 1
        partition = self.current_partition()
        self.logger.debug(
            f"Step {self.steps_completed}: removed {len(removed)} edge(s) with "
            f"betweenness {max_score:.4f}, {len(partition)} communities, "
            f"{self.graph.number_of_edges():,} edges left"
        )
        return DivisiveStep(
            step=self.steps_completed,
            removed_edges=removed,
            max_betweenness=max_score,
            partition=partition,
        )

    def iter_steps(self) -> Iterator[DivisiveStep]:
        """Yield one ``DivisiveStep`` per iteration until no edges remain."""
        while self.state == STATE_ACTIVE:
            if self.max_steps is not None and self.steps_completed >= self.max_steps:
                self.logger.debug(f"Stopping after max_steps={self.max_steps}")
                return
            if self.should_cancel is not None and self.should_cancel():
                raise AnalysisCancelledError("girvan-newman", self.steps_completed)
            yield self.step()

    def run(self) -> DivisiveResult:
        """
        Run the detector to completion (or ``max_steps``).

        Returns:
            DivisiveResult with the starting components and every step
        """
        self.logger.info(
            f"Running Girvan-Newman on {self.graph.number_of_vertices():,} vertices, "
            f"{self.graph.number_of_edges():,} edges"
        )
        result = DivisiveResult(initial_partition=self.current_partition())
        for step in self.iter_steps():
            result.steps.append(step)

        self.logger.info(
            f"Girvan-Newman finished after {len(result.steps)} steps "
            f"with {len(result.final_partition)} communities"
        )
        return result


__all__ = ["GirvanNewmanDetector", "STATE_ACTIVE", "STATE_DONE"]
