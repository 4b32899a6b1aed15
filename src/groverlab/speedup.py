from __future__ import annotations

from dataclasses import dataclass

from .geometry import calculate_optimal_iterations


@dataclass(frozen=True)
class SpeedupComparison:
    num_states: int
    classical_queries: float
    quantum_iterations: int
    speedup: float


def compare_speedup(num_qubits: int, num_marked: int) -> SpeedupComparison:
    """
    Expected classical queries (N / 2M) against Grover's optimal iteration count.

    An empty marked set is treated as a single target so the comparison
    stays finite.
    """
    if num_qubits < 1:
        raise ValueError("num_qubits must be >= 1")
    num_states = 1 << num_qubits
    marked = max(num_marked, 1)
    classical = num_states / (2 * marked)
    quantum = calculate_optimal_iterations(num_states, marked)
    return SpeedupComparison(
        num_states=num_states,
        classical_queries=classical,
        quantum_iterations=quantum,
        speedup=classical / max(quantum, 1),
    )
