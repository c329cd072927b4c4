"""
Modularity and greedy agglomerative community detection (fast Newman).

Modularity Q measures how much denser the links inside communities are than
a random graph with the same degrees would give. The optimizer starts from
one community per vertex and greedily merges the pair of communities whose
merge changes Q the most, recording the whole merge trace. Maximising Q
exactly is NP-hard; this greedy heuristic only finds local optima.

For communities I and J of a graph with m edges:

    e_IJ = (edges with one end in I and the other in J) / 2m
    a_I  = (sum of the degrees of the vertices in I) / 2m
    dQ   = 2 * (e_IJ - a_I * a_J)
"""

# Standard library imports
import logging
from collections import Counter
from typing import Callable, Iterable, Optional

# Local imports
from ..core.exceptions import AnalysisCancelledError, UnknownVertexError, UnsupportedGraphError
from ..core.graph import Graph
from ..core.types import LocalOptimum, MergeStep, ModularityResult, Partition, make_partition
from ..utils.progress import ProgressTracker


def _require_undirected(graph: Graph) -> None:
    if graph.directed:
        raise UnsupportedGraphError("Modularity is only defined here for undirected graphs")


def _require_edges(graph: Graph) -> int:
    num_edges = graph.number_of_edges()
    if num_edges == 0:
        raise UnsupportedGraphError("Modularity is undefined for a graph without edges")
    return num_edges


def delta_modularity(graph: Graph, community_i: Iterable[int], community_j: Iterable[int]) -> float:
    """
    Modularity change from merging two disjoint communities.

    Args:
        graph: Undirected graph with at least one edge
        community_i: Members of community I
        community_j: Members of community J

    Returns:
        ``2 * (e_IJ - a_I * a_J)``

    Raises:
        UnknownVertexError: If a member is not in the graph
        UnsupportedGraphError: If the graph is directed or has no edges
        ValueError: If the communities overlap
    """
    _require_undirected(graph)
    members_i = set(community_i)
    members_j = set(community_j)
    if members_i & members_j:
        raise ValueError("Communities must be disjoint")
    for vertex in members_i | members_j:
        if vertex not in graph:
            raise UnknownVertexError(vertex, "community member")
    two_m = 2 * _require_edges(graph)

    between = sum(
        1 for vertex in members_i for neighbor in graph.neighbors(vertex) if neighbor in members_j
    )
    e_ij = between / two_m
    a_i = sum(graph.degree(vertex) for vertex in members_i) / two_m
    a_j = sum(graph.degree(vertex) for vertex in members_j) / two_m
    return 2 * (e_ij - a_i * a_j)


def modularity(graph: Graph, partition: Partition) -> float:
    """
    Newman modularity of a partition: the sum over communities of
    ``e_II - a_I ** 2`` with ``e_II`` the fraction of edges inside I.

    Raises:
        UnsupportedGraphError: If the graph is directed or has no edges
        ValueError: If the partition does not cover every vertex exactly once
    """
    _require_undirected(graph)
    num_edges = _require_edges(graph)

    leader_of = {}
    for leader, members in partition.items():
        for member in members:
            if member in leader_of:
                raise ValueError(f"Vertex {member} appears in more than one community")
            leader_of[member] = leader
    if set(leader_of) != set(graph.vertices):
        raise ValueError("Partition must cover every vertex of the graph exactly once")

    internal = Counter()
    for edge in graph.edges:
        if leader_of[edge.source] == leader_of[edge.target]:
            internal[leader_of[edge.source]] += 1
    degree_sums = Counter()
    for vertex in graph:
        degree_sums[leader_of[vertex]] += graph.degree(vertex)

    return sum(
        internal[leader] / num_edges - (degree_sums[leader] / (2 * num_edges)) ** 2
        for leader in partition
    )


class FastNewmanOptimizer:
    """
    Greedy agglomerative modularity optimizer.

    Produces partitions ``P_0 ... P_{V-1}``: ``P_0`` has one community per
    vertex and each step merges the pair with the largest dQ. Pairs are
    examined in ascending ``(leader_I, leader_J)`` order with ``I < J`` and
    only a strictly larger dQ replaces the current best, so the first pair
    in that order wins ties. The merged community keeps the lesser leader.

    Running modularity starts at 0.0 for ``P_0`` and accumulates each dQ.
    Whenever the chosen dQ is negative the partition before that merge is
    recorded as a local optimum, together with the running modularity before
    the merge; merging then continues to the end of the trace.

    The graph is read but never modified.
    """

    def __init__(self, graph: Graph, should_cancel: Optional[Callable[[], bool]] = None):
        """
        Initialize the optimizer.

        Args:
            graph: Undirected graph to analyze
            should_cancel: Optional callable polled between merges;
                returning True aborts the run

        Raises:
            UnsupportedGraphError: If ``graph`` is directed
        """
        _require_undirected(graph)
        self.graph = graph
        self.should_cancel = should_cancel
        self.logger = logging.getLogger(self.__class__.__name__)

    def _count_between(self, leader_of: dict[int, int]) -> Counter:
        """Edges between each pair of distinct communities, keyed ``(I, J)`` with I < J."""
        counts: Counter = Counter()
        for edge in self.graph.edges:
            first = leader_of[edge.source]
            second = leader_of[edge.target]
            if first != second:
                counts[(min(first, second), max(first, second))] += 1
        return counts

    def _best_merge(self, partition: Partition, degree: dict[int, int], two_m: int) -> tuple[tuple[int, int], float]:
        leader_of = {member: leader for leader, members in partition.items() for member in members}
        between = self._count_between(leader_of)
        degree_sums = {
            leader: sum(degree[member] for member in members)
            for leader, members in partition.items()
        }

        leaders = list(partition)
        best_pair = (leaders[0], leaders[1])
        best_delta = float("-inf")
        for index, leader_i in enumerate(leaders):
            a_i = degree_sums[leader_i] / two_m
            for leader_j in leaders[index + 1 :]:
                e_ij = between.get((leader_i, leader_j), 0) / two_m
                delta_q = 2 * (e_ij - a_i * (degree_sums[leader_j] / two_m))
                if delta_q > best_delta:
                    best_delta = delta_q
                    best_pair = (leader_i, leader_j)
        return best_pair, best_delta

    def run(self) -> ModularityResult:
        """
        Run all ``V - 1`` merges.

        Returns:
            ModularityResult with the initial partition, every merge step and
            the local optima met along the way. A graph without edges yields
            only ``P_0``.

        Raises:
            AnalysisCancelledError: If cancellation was requested
        """
        vertices = self.graph.vertices
        result = ModularityResult(initial_partition=make_partition([v] for v in vertices))
        num_edges = self.graph.number_of_edges()
        if len(vertices) < 2:
            return result
        if num_edges == 0:
            self.logger.warning("Graph has no edges; modularity is undefined, no merges performed")
            return result

        self.logger.info(
            f"Running greedy modularity optimization on {len(vertices):,} vertices, "
            f"{num_edges:,} edges"
        )
        two_m = 2 * num_edges
        degree = {vertex: self.graph.degree(vertex) for vertex in vertices}
        partition = result.initial_partition
        running_q = 0.0

        with ProgressTracker(
            total=len(vertices) - 1, title="Merging communities", logger=self.logger
        ) as tracker:
            for step in range(1, len(vertices)):
                if self.should_cancel is not None and self.should_cancel():
                    raise AnalysisCancelledError("fast-newman", step - 1)

                (leader_i, leader_j), delta_q = self._best_merge(partition, degree, two_m)
                previous_q = running_q
                running_q += delta_q

                merged = {
                    leader: members
                    for leader, members in partition.items()
                    if leader not in (leader_i, leader_j)
                }
                merged[leader_i] = partition[leader_i] | partition[leader_j]
                merged = dict(sorted(merged.items()))
                result.steps.append(
                    MergeStep(
                        step=step,
                        merged=(leader_i, leader_j),
                        delta_q=delta_q,
                        modularity=running_q,
                        partition=merged,
                    )
                )

                if delta_q < 0:
                    result.optima.append(
                        LocalOptimum(step=step - 1, modularity=previous_q, partition=partition)
                    )
                    self.logger.info(
                        f"Local modularity maximum {previous_q:.6f} with "
                        f"{len(partition)} communities (step {step - 1})"
                    )

                partition = merged
                tracker.update(step)

        return result


__all__ = ["delta_modularity", "modularity", "FastNewmanOptimizer"]
