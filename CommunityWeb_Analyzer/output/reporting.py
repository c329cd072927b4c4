"""
Result reporting for CommunityWeb analyses.

Turns analysis results into pandas tables for display and into plain,
JSON-serialisable dictionaries for export.
"""

# Standard library imports
import json
import logging
from pathlib import Path
from typing import Any, Union

# Third-party imports
import pandas as pd

# Local imports
from ..core.graph import Graph
from ..core.types import DivisiveResult, Edge, ModularityResult, Partition


def betweenness_frame(betweenness: dict[Edge, float], top_k: int = 10) -> pd.DataFrame:
    """
    Tabulate edge betweenness, highest first.

    Args:
        betweenness: Edge to score mapping
        top_k: Number of rows to keep (0 keeps all)

    Returns:
        DataFrame with ``source``, ``target`` and ``betweenness`` columns
    """
    df = pd.DataFrame(
        [(edge.source, edge.target, score) for edge, score in betweenness.items()],
        columns=["source", "target", "betweenness"],
    )
    df = df.sort_values("betweenness", ascending=False, kind="stable").reset_index(drop=True)
    if top_k:
        df = df.head(top_k)
    return df


def partition_frame(partition: Partition) -> pd.DataFrame:
    """
    Tabulate a partition, largest community first.

    Returns:
        DataFrame with ``leader``, ``size`` and ``members`` columns
    """
    df = pd.DataFrame(
        [(leader, len(members), sorted(members)) for leader, members in partition.items()],
        columns=["leader", "size", "members"],
    )
    return df.sort_values(["size", "leader"], ascending=[False, True]).reset_index(drop=True)


def display_betweenness_results(
    betweenness: dict[Edge, float], top_k: int, logger: logging.Logger
) -> None:
    """Log the top edges by betweenness."""
    logger.info(f"\n---- Top {top_k} Edges by Betweenness ----")
    df = betweenness_frame(betweenness, top_k)
    if df.empty:
        logger.info("No edges to analyze.")
    else:
        logger.info(f"{df}")


def display_partition(partition: Partition, title: str, logger: logging.Logger) -> None:
    """Log a partition as a table."""
    logger.info(f"\n---- {title}: {len(partition)} communities ----")
    logger.info(f"{partition_frame(partition)}")


def partition_to_dict(partition: Partition) -> dict[str, list[int]]:
    """JSON-friendly partition: string leader keys, sorted member lists."""
    return {str(leader): sorted(members) for leader, members in partition.items()}


def graph_to_dict(graph: Graph) -> dict[str, list[int]]:
    """JSON-friendly rendering of ``export_snapshot()``."""
    return {str(vertex): sorted(neighbors) for vertex, neighbors in graph.export_snapshot().items()}


def betweenness_to_dict(betweenness: dict[Edge, float]) -> list[dict[str, Any]]:
    return [
        {"source": edge.source, "target": edge.target, "betweenness": score}
        for edge, score in betweenness.items()
    ]


def divisive_result_to_dict(result: DivisiveResult) -> dict[str, Any]:
    return {
        "initial_partition": partition_to_dict(result.initial_partition),
        "steps": [
            {
                "step": step.step,
                "max_betweenness": step.max_betweenness,
                "removed_edges": [list(edge.endpoints) for edge in step.removed_edges],
                "partition": partition_to_dict(step.partition),
            }
            for step in result.steps
        ],
    }


def modularity_result_to_dict(result: ModularityResult) -> dict[str, Any]:
    best = result.best_optimum
    return {
        "initial_partition": partition_to_dict(result.initial_partition),
        "steps": [
            {
                "step": step.step,
                "merged": list(step.merged),
                "delta_q": step.delta_q,
                "modularity": step.modularity,
            }
            for step in result.steps
        ],
        "optima": [
            {
                "step": optimum.step,
                "modularity": optimum.modularity,
                "partition": partition_to_dict(optimum.partition),
            }
            for optimum in result.optima
        ],
        "best_optimum_step": best.step if best is not None else None,
    }


def write_results_json(data: dict[str, Any], path: Union[str, Path]) -> Path:
    """
    Write results to a JSON file, creating parent directories.

    Returns:
        The path written
    """
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    return output_path


__all__ = [
    "betweenness_frame",
    "partition_frame",
    "display_betweenness_results",
    "display_partition",
    "partition_to_dict",
    "graph_to_dict",
    "betweenness_to_dict",
    "divisive_result_to_dict",
    "modularity_result_to_dict",
    "write_results_json",
]
