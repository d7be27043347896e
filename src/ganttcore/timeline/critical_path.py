from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, FrozenSet, List, Optional, Sequence, Tuple

import networkx as nx

from ganttcore.timeline.rows import TaskRow

logger = logging.getLogger(__name__)

STATUS_OK = "ok"
STATUS_EMPTY = "empty"
STATUS_CYCLE = "cycle"


@dataclass(frozen=True)
class CriticalPathResult:
    status: str
    path: Tuple[str, ...] = ()
    total_duration: int = 0
    longest_by_task: Dict[str, int] = field(default_factory=dict)

    @property
    def task_ids(self) -> FrozenSet[str]:
        return frozenset(self.path)

    @property
    def cycle_detected(self) -> bool:
        return self.status == STATUS_CYCLE

    def __contains__(self, task_id: object) -> bool:
        return task_id in self.task_ids

    def __len__(self) -> int:
        return len(self.path)


def dependency_graph(rows: Sequence[TaskRow]) -> nx.DiGraph:
    """Edges run dependency -> dependent; ids outside ``rows`` are dropped."""
    g = nx.DiGraph()
    for r in rows:
        g.add_node(r.task_id, duration=r.planned_duration)
    for r in rows:
        for dep in r.dependencies:
            if dep in g:
                g.add_edge(dep, r.task_id)
    return g


def find_critical_path(rows: Sequence[TaskRow]) -> CriticalPathResult:
    """Longest chain of dependency-linked rows by cumulative planned duration.

    Kahn's algorithm gives the topological order; a graph that cannot be
    fully ordered has a cycle and yields an empty ``STATUS_CYCLE`` result.
    Rows sharing an id collapse into one node; the last row's duration wins.
    """
    if not rows:
        return CriticalPathResult(status=STATUS_EMPTY)

    g = dependency_graph(rows)
    durations: Dict[str, int] = dict(g.nodes(data="duration"))

    indeg: Dict[str, int] = dict(g.in_degree())
    queue: Deque[str] = deque(n for n in g.nodes if indeg[n] == 0)
    longest: Dict[str, int] = dict(durations)
    pred: Dict[str, Optional[str]] = {n: None for n in g.nodes}
    processed: List[str] = []

    while queue:
        cur = queue.popleft()
        processed.append(cur)
        for suc in g.successors(cur):
            cand = longest[cur] + durations[suc]
            if cand > longest[suc]:
                longest[suc] = cand
                pred[suc] = cur
            indeg[suc] -= 1
            if indeg[suc] == 0:
                queue.append(suc)

    if len(processed) != g.number_of_nodes():
        logger.debug("dependency cycle: ordered %d of %d tasks", len(processed), g.number_of_nodes())
        return CriticalPathResult(status=STATUS_CYCLE)

    # first maximum in topological order wins
    end = processed[0]
    for tc in processed[1:]:
        if longest[tc] > longest[end]:
            end = tc
    total = longest[end]

    # reconstruct
    path: List[str] = []
    cur: Optional[str] = end
    while cur is not None:
        path.append(cur)
        cur = pred[cur]
    path.reverse()

    return CriticalPathResult(status=STATUS_OK, path=tuple(path), total_duration=total, longest_by_task=longest)
