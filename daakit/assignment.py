"""Job assignment solved by least-cost branch and bound."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Collection, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Assignment:
    """One worker given one job."""

    worker: int
    job: int

    @property
    def worker_name(self) -> str:
        """Letter naming the worker: A for worker 0, B for worker 1, and so on."""
        return chr(ord("A") + self.worker)

    def __str__(self) -> str:
        return f"Assign Worker {self.worker_name} to Job {self.job}"


@dataclass(frozen=True)
class AssignmentResult:
    """The minimum total cost and the assignments that reach it, by worker."""

    cost: int
    assignments: tuple[Assignment, ...]


def _check_square(costs: Sequence[Sequence[int]]) -> None:
    if any(len(row) != len(costs) for row in costs):
        raise ValueError("cost matrix must be square")


def lower_bound(
    costs: Sequence[Sequence[int]], worker: int, assigned: Collection[int]
) -> int:
    """Optimistic cost of the workers after `worker`, given the jobs already taken.

    Each later worker greedily takes its cheapest job that is neither assigned
    nor taken by an earlier worker in this estimate.
    """
    _check_square(costs)
    taken = set(assigned)
    total = 0
    for row in costs[worker + 1:]:
        free = [(cost, job) for job, cost in enumerate(row) if job not in taken]
        if not free:
            break
        cost, job = min(free)
        total += cost
        taken.add(job)
    return total


def solve_assignment(costs: Sequence[Sequence[int]]) -> AssignmentResult:
    """Give each worker (row) a distinct job (column) at minimum total cost."""
    _check_square(costs)
    size = len(costs)
    counter = itertools.count()
    live: list[tuple[int, int, int, tuple[int, ...]]] = [(0, next(counter), 0, ())]
    while live:
        bound, _, path_cost, jobs = heapq.heappop(live)
        worker = len(jobs)
        if worker == size:
            return AssignmentResult(
                bound,
                tuple(Assignment(w, j) for w, j in enumerate(jobs)),
            )
        for job, cost in enumerate(costs[worker]):
            if job in jobs:
                continue
            child_jobs = jobs + (job,)
            child_path = path_cost + cost
            child_bound = child_path + lower_bound(costs, worker, child_jobs)
            heapq.heappush(live, (child_bound, next(counter), child_path, child_jobs))
    raise ValueError("no complete assignment exists")