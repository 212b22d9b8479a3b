# engine.py

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

HIT = "hit"
FAULT = "fault"


class ReplacementPolicy:
    """
    Names of the available page replacement algorithms.

    FIFO:    First-In-First-Out - replaces the page loaded earliest
    LRU:     Least Recently Used - replaces the page not used for longest time
    OPTIMAL: Belady's algorithm - replaces the page used farthest in future
    """
    FIFO = "FIFO"
    LRU = "LRU"
    OPTIMAL = "Optimal"

    ALL = (FIFO, LRU, OPTIMAL)


class InvalidFrameCountError(ValueError):
    """Raised when a simulation is asked to run with fewer than one frame."""


class UnknownPolicyError(ValueError):
    """Raised when a policy name is not one of ReplacementPolicy.ALL."""


@dataclass(frozen=True)
class ExecutionStep:
    """
    One processed reference in a simulation trace.

    Attributes:
        step (int): 1-based position in the reference sequence
        page (int): Page referenced at this step
        frames (Tuple[int, ...]): Frame content after this step, in fill order
        status (str): 'hit' or 'fault'
        replaced (Optional[int]): Evicted page, None when nothing was evicted
        faults (int): Cumulative faults through this step
        hits (int): Cumulative hits through this step
        explanation (str): Human-readable account of the decision
    """
    step: int
    page: int
    frames: Tuple[int, ...]
    status: str
    replaced: Optional[int]
    faults: int
    hits: int
    explanation: str


@dataclass
class SimulationResult:
    """Full trace of one simulation plus its final fault/hit totals."""
    steps: List[ExecutionStep] = field(default_factory=list)
    faults: int = 0
    hits: int = 0

    @property
    def total_refs(self) -> int:
        return self.faults + self.hits


# -----------------------------
# Shared step bookkeeping
# -----------------------------
class _Trace:
    """Frame set and step list owned by a single simulation run."""

    def __init__(self, policy: str, frame_count: int):
        self.policy = policy
        self.frame_count = frame_count
        self.memory: List[int] = []
        self.result = SimulationResult()

    def is_resident(self, page: int) -> bool:
        return page in self.memory

    def is_full(self) -> bool:
        return len(self.memory) >= self.frame_count

    def load(self, page: int):
        self.memory.append(page)

    def replace(self, victim: int, page: int):
        self.memory[self.memory.index(victim)] = page
        logger.debug("%s evicted page %s for page %s", self.policy, victim, page)

    def record(self, page: int, status: str, replaced: Optional[int], rationale: str):
        if status == HIT:
            self.result.hits += 1
            explanation = f"Page {page} is already in memory"
        else:
            self.result.faults += 1
            if replaced is None:
                explanation = f"Page {page} loaded into empty frame"
            else:
                explanation = (
                    f"Page {page} caused a fault. Removed page {replaced} ({rationale})"
                )

        self.result.steps.append(ExecutionStep(
            step=len(self.result.steps) + 1,
            page=page,
            frames=tuple(self.memory),
            status=status,
            replaced=replaced,
            faults=self.result.faults,
            hits=self.result.hits,
            explanation=explanation,
        ))

    def finish(self) -> SimulationResult:
        logger.info(
            "%s on %d refs with %d frames: %d faults, %d hits",
            self.policy, len(self.result.steps), self.frame_count,
            self.result.faults, self.result.hits,
        )
        return self.result


def _check_frame_count(frame_count: int):
    if frame_count < 1:
        raise InvalidFrameCountError(f"Frame count must be at least 1, got {frame_count}")


# -----------------------------
# Algorithms
# -----------------------------
def simulate_fifo(references: Sequence[int], frame_count: int) -> SimulationResult:
    """
    First-In-First-Out replacement.

    A queue records the order pages were loaded. Hits leave it untouched;
    on eviction the front of the queue (oldest resident page) goes.
    """
    _check_frame_count(frame_count)
    references = tuple(references)
    trace = _Trace(ReplacementPolicy.FIFO, frame_count)
    queue: deque = deque()

    for page in references:
        if trace.is_resident(page):
            trace.record(page, HIT, None, "")
            continue

        replaced = None
        if trace.is_full():
            replaced = queue.popleft()
            trace.replace(replaced, page)
        else:
            trace.load(page)
        queue.append(page)
        trace.record(page, FAULT, replaced, "oldest page, FIFO")

    return trace.finish()


def simulate_lru(references: Sequence[int], frame_count: int) -> SimulationResult:
    """
    Least Recently Used replacement.

    Each access (load or hit) stamps the page with its reference index.
    The victim is the resident page with the smallest stamp; on a tie the
    first such page in frame order wins.
    """
    _check_frame_count(frame_count)
    references = tuple(references)
    trace = _Trace(ReplacementPolicy.LRU, frame_count)
    last_used: Dict[int, int] = {}

    for idx, page in enumerate(references):
        if trace.is_resident(page):
            last_used[page] = idx
            trace.record(page, HIT, None, "")
            continue

        replaced = None
        if trace.is_full():
            replaced = trace.memory[0]
            for resident in trace.memory:
                if last_used[resident] < last_used[replaced]:
                    replaced = resident
            trace.replace(replaced, page)
        else:
            trace.load(page)
        last_used[page] = idx
        trace.record(page, FAULT, replaced, "least recently used, LRU")

    return trace.finish()


def _next_use(references: Sequence[int], page: int, start: int) -> float:
    """Distance from start to the next reference of page, inf if none."""
    for distance in range(len(references) - start):
        if references[start + distance] == page:
            return distance
    return float('inf')


def simulate_optimal(references: Sequence[int], frame_count: int) -> SimulationResult:
    """
    Optimal (Belady) replacement.

    The victim is the resident page whose next reference lies farthest in
    the future, or never comes at all. Ties go to the first such page in
    frame order. Each full-memory fault scans the rest of the sequence once
    per resident page.
    """
    _check_frame_count(frame_count)
    references = tuple(references)
    trace = _Trace(ReplacementPolicy.OPTIMAL, frame_count)

    for idx, page in enumerate(references):
        if trace.is_resident(page):
            trace.record(page, HIT, None, "")
            continue

        replaced = None
        if trace.is_full():
            farthest = -1
            for resident in trace.memory:
                distance = _next_use(references, resident, idx + 1)
                if distance > farthest:
                    farthest = distance
                    replaced = resident
            trace.replace(replaced, page)
        else:
            trace.load(page)
        trace.record(page, FAULT, replaced, "used farthest in future, Optimal")

    return trace.finish()


# -----------------------------
# Dispatcher
# -----------------------------
_ALGORITHMS = {
    ReplacementPolicy.FIFO: simulate_fifo,
    ReplacementPolicy.LRU: simulate_lru,
    ReplacementPolicy.OPTIMAL: simulate_optimal,
}


def simulate(policy: str, references: Sequence[int], frame_count: int) -> SimulationResult:
    """
    Run one replacement policy over a reference sequence.

    Args:
        policy (str): One of ReplacementPolicy.ALL
        references (Sequence[int]): Page numbers in reference order
        frame_count (int): Number of physical frames, at least 1

    Returns:
        SimulationResult: Step trace and final fault/hit counts

    Raises:
        UnknownPolicyError: If policy is not a known algorithm
        InvalidFrameCountError: If frame_count is below 1
    """
    algorithm = _ALGORITHMS.get(policy)
    if algorithm is None:
        raise UnknownPolicyError(f"Unknown replacement policy: {policy!r}")
    return algorithm(tuple(references), frame_count)


def compare_policies(references: Sequence[int], frame_count: int) -> Dict[str, SimulationResult]:
    """Run every policy on the same input, keyed by policy name."""
    references = tuple(references)
    return {policy: simulate(policy, references, frame_count) for policy in ReplacementPolicy.ALL}
