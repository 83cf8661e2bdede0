"""Greedy job sequencing with deadlines and two-line assembly scheduling."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Job:
    """A unit-time job that earns its profit if finished by its deadline."""

    name: str
    deadline: int
    profit: int


@dataclass(frozen=True)
class AssemblyResult:
    """Fastest time through the assembly lines and the line used at each station."""

    time: int
    lines: tuple[int, ...]

    def __str__(self) -> str:
        return " -> ".join(
            f"Line {line + 1}, Station {station + 1}"
            for station, line in enumerate(self.lines)
        )


def sequence_jobs(jobs: Iterable[Job]) -> list[Job]:
    """Choose jobs greedily by descending profit; return them in time-slot order.

    Each job goes to the latest free slot before its deadline; a job with no
    free slot left is dropped. There are as many slots as jobs.
    """
    jobs = list(jobs)
    slots: list[Job | None] = [None] * len(jobs)
    for job in sorted(jobs, key=lambda j: j.profit, reverse=True):
        for slot in reversed(range(min(len(jobs), job.deadline))):
            if slots[slot] is None:
                slots[slot] = job
                break
    return [job for job in slots if job is not None]


def _check_assembly(
    assembly: Sequence[Sequence[int]],
    transfer: Sequence[Sequence[int]],
    entry: Sequence[int],
    exit_times: Sequence[int],
) -> int:
    if len(assembly) != 2 or len(transfer) != 2:
        raise ValueError("exactly two assembly lines are required")
    if len(entry) != 2 or len(exit_times) != 2:
        raise ValueError("entry and exit times are needed for both lines")
    stations = len(assembly[0])
    if stations < 1 or len(assembly[1]) != stations:
        raise ValueError("both lines must have the same, non-zero number of stations")
    if any(len(row) != stations - 1 for row in transfer):
        raise ValueError("each line needs one transfer time fewer than stations")
    return stations


def assembly_line(
    assembly: Sequence[Sequence[int]],
    transfer: Sequence[Sequence[int]],
    entry: Sequence[int],
    exit_times: Sequence[int],
) -> AssemblyResult:
    """Fastest way through two assembly lines.

    ``transfer[i][j]`` is the time to move from line i after station j to the
    other line. When staying and switching cost the same, switching is taken;
    when both exits cost the same, the second line is taken.
    """
    stations = _check_assembly(assembly, transfer, entry, exit_times)
    best = [entry[line] + assembly[line][0] for line in (0, 1)]
    routes: list[list[int]] = [[0], [1]]
    for station in range(1, stations):
        new_best = []
        new_routes = []
        for line in (0, 1):
            other = 1 - line
            stay = best[line] + assembly[line][station]
            switch = best[other] + transfer[other][station - 1] + assembly[line][station]
            if stay < switch:
                new_best.append(stay)
                new_routes.append(routes[line] + [line])
            else:
                new_best.append(switch)
                new_routes.append(routes[other] + [line])
        best, routes = new_best, new_routes

    totals = [best[line] + exit_times[line] for line in (0, 1)]
    last = 0 if totals[0] < totals[1] else 1
    return AssemblyResult(totals[last], tuple(routes[last]))