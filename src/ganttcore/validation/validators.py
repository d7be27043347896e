from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

import networkx as nx

from ganttcore.timeline.models import Task


@dataclass
class ValidationIssue:
    severity: str  # ERROR/WARN
    code: str
    message: str


def validate_unique_task_ids(tasks: Sequence[Task]) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    dupes = sorted(tid for tid, n in Counter(t.id for t in tasks).items() if n > 1)
    if dupes:
        issues.append(ValidationIssue("ERROR", "TASK_DUPLICATE", f"Duplicate task id(s): {dupes}"))
    return issues


def validate_dependency_references(tasks: Sequence[Task]) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    task_set = {t.id for t in tasks}
    for t in tasks:
        for dep in t.dependencies:
            if dep == t.id:
                issues.append(ValidationIssue("WARN", "DEP_SELF", f"Task {t.id} depends on itself"))
            elif dep not in task_set:
                issues.append(ValidationIssue("WARN", "DEP_MISSING_TASK", f"Task {t.id} depends on unknown task id={dep}; edge ignored"))
    return issues


def validate_date_ranges(tasks: Sequence[Task]) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for t in tasks:
        pairs = [
            ("planned", t.planned_start, t.planned_due),
            ("baseline", t.baseline_start, t.baseline_due),
            ("actual", t.actual_start, t.actual_due),
        ]
        for label, start, end in pairs:
            if start is not None and end is not None and end < start:
                issues.append(ValidationIssue("WARN", "RANGE_REVERSED",
                    f"Task {t.id}: {label} end {end} precedes start {start}; end will be moved to start"))
    return issues


def validate_percent_complete(tasks: Sequence[Task]) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for t in tasks:
        p = t.percent_complete
        if p is not None and not 0 <= p <= 100:
            issues.append(ValidationIssue("WARN", "PERCENT_OUT_OF_RANGE", f"Task {t.id}: percent_complete={p} will be clamped to [0, 100]"))
    return issues


def validate_acyclic_dependencies(tasks: Sequence[Task]) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    task_set = {t.id for t in tasks}
    g = nx.DiGraph()
    g.add_nodes_from(task_set)
    for t in tasks:
        for dep in t.dependencies:
            if dep in task_set:
                g.add_edge(dep, t.id)
    try:
        cycle = nx.find_cycle(g)
    except nx.NetworkXNoCycle:
        return issues
    members = " -> ".join([u for u, _ in cycle] + [cycle[0][0]])
    issues.append(ValidationIssue("WARN", "DEP_CYCLE", f"Dependency cycle, critical path unavailable: {members}"))
    return issues


def run_all_validations(tasks: Sequence[Task]) -> Dict[str, Any]:
    issues: List[ValidationIssue] = []
    issues += validate_unique_task_ids(tasks)
    issues += validate_dependency_references(tasks)
    issues += validate_date_ranges(tasks)
    issues += validate_percent_complete(tasks)
    issues += validate_acyclic_dependencies(tasks)

    summary = {
        "errors": sum(1 for i in issues if i.severity == "ERROR"),
        "warnings": sum(1 for i in issues if i.severity == "WARN"),
    }
    return {
        "summary": summary,
        "issues": [i.__dict__ for i in issues],
    }
