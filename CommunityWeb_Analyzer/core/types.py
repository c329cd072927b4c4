"""
Type definitions and data structures for CommunityWeb graph analysis.

This module contains the edge value object, the community partition alias
and the dataclasses that carry the results of the community detectors.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from typing_extensions import TypeAlias

# Community leader id -> members; leader is the minimum member, keys ascending
Partition: TypeAlias = dict[int, frozenset[int]]


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Edge between two vertex labels.

    Undirected edges compare and hash on the set of endpoints, so
    ``Edge(1, 2) == Edge(2, 1)``. Directed edges compare on the ordered pair.
    Edges deliberately define no ordering.

    Attributes:
        source: Tail vertex (the "from" endpoint)
        target: Head vertex (the "to" endpoint)
        directed: Whether the orientation is significant
    """

    source: int
    target: int
    directed: bool = False

    def _key(self) -> tuple:
        if self.directed:
            return (True, self.source, self.target)
        return (False, frozenset((self.source, self.target)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        arrow = "->" if self.directed else "-"
        return f"Edge({self.source}{arrow}{self.target})"

    @property
    def endpoints(self) -> tuple[int, int]:
        """Return ``(source, target)``."""
        return (self.source, self.target)

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target

    def touches(self, vertex: int) -> bool:
        """Return True if ``vertex`` is one of the endpoints."""
        return vertex == self.source or vertex == self.target

    def other(self, vertex: int) -> int:
        """
        Return the endpoint opposite ``vertex``.

        Raises:
            ValueError: If ``vertex`` is not an endpoint of this edge
        """
        if vertex == self.source:
            return self.target
        if vertex == self.target:
            return self.source
        raise ValueError(f"Vertex {vertex} is not an endpoint of {self!r}")

    def reversed(self) -> "Edge":
        """Return the same edge with its endpoints swapped."""
        return Edge(self.target, self.source, self.directed)


def make_partition(groups: Iterable[Iterable[int]]) -> Partition:
    """
    Build a normalised partition from groups of vertex ids.

    Each group is keyed by its minimum member and keys are sorted ascending.

    Args:
        groups: Iterable of vertex-id collections

    Returns:
        Partition mapping leader id to frozen member set

    Raises:
        ValueError: If a group is empty
    """
    partition = {}
    for group in groups:
        members = frozenset(group)
        if not members:
            raise ValueError("Communities cannot be empty")
        partition[min(members)] = members
    return dict(sorted(partition.items()))


@dataclass
class DivisiveStep:
    """
    One iteration of the divisive (Girvan-Newman) detector.

    Attributes:
        step: 1-based iteration number
        removed_edges: Every edge that was tied at the maximum betweenness
        max_betweenness: The maximum betweenness value of this iteration
        partition: Connected components after the removal
    """

    step: int
    removed_edges: list[Edge]
    max_betweenness: float
    partition: Partition

    @property
    def num_communities(self) -> int:
        return len(self.partition)


@dataclass
class DivisiveResult:
    """Sequence of partitions produced by repeated edge removal."""

    initial_partition: Partition
    steps: list[DivisiveStep] = field(default_factory=list)

    @property
    def final_partition(self) -> Partition:
        return self.steps[-1].partition if self.steps else self.initial_partition

    def first_split(self, num_communities: int) -> Optional[DivisiveStep]:
        """Return the first step with at least ``num_communities`` communities."""
        for step in self.steps:
            if step.num_communities >= num_communities:
                return step
        return None


@dataclass
class MergeStep:
    """
    One merge of the agglomerative (fast Newman) optimizer.

    Attributes:
        step: 1-based merge number ``i``; ``partition`` is ``P_i``
        merged: Leader ids ``(I, J)`` of the merged communities, ``I < J``
        delta_q: Modularity change of this merge
        modularity: Running modularity after this merge
        partition: Partition after the merge
    """

    step: int
    merged: tuple[int, int]
    delta_q: float
    modularity: float
    partition: Partition


@dataclass
class LocalOptimum:
    """
    Partition reported when the next best merge would lower modularity.

    Attributes:
        step: Index ``i`` of the reported partition ``P_i``
        modularity: Running modularity of ``P_i``
        partition: The locally optimal partition
    """

    step: int
    modularity: float
    partition: Partition


@dataclass
class ModularityResult:
    """Merge trace ``P_0 ... P_{V-1}`` and the local optima met along it."""

    initial_partition: Partition
    steps: list[MergeStep] = field(default_factory=list)
    optima: list[LocalOptimum] = field(default_factory=list)

    @property
    def final_partition(self) -> Partition:
        return self.steps[-1].partition if self.steps else self.initial_partition

    @property
    def best_optimum(self) -> Optional[LocalOptimum]:
        """Local optimum with the highest modularity (earliest on ties)."""
        best = None
        for optimum in self.optima:
            if best is None or optimum.modularity > best.modularity:
                best = optimum
        return best

    def partition_at(self, step: int) -> Partition:
        """
        Return ``P_step`` of the merge trace.

        Raises:
            IndexError: If ``step`` is outside ``0 .. len(steps)``
        """
        if step == 0:
            return self.initial_partition
        if not 0 < step <= len(self.steps):
            raise IndexError(f"No partition for step {step}")
        return self.steps[step - 1].partition


__all__ = [
    "Edge",
    "Partition",
    "make_partition",
    "DivisiveStep",
    "DivisiveResult",
    "MergeStep",
    "LocalOptimum",
    "ModularityResult",
]
