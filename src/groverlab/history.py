from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np

from .geometry import calculate_optimal_iterations, calculate_theta0
from .iteration import perform_iteration
from .state import GroverConfig, GroverState, initialize_state

MAX_HISTORY_ITERATIONS = 20


@dataclass(frozen=True, eq=False)
class IterationResult:
    iteration: int
    amplitudes: np.ndarray
    probability_marked: float
    geometric_angle: float


def _snapshot(state: GroverState, theta0: float) -> IterationResult:
    return IterationResult(
        iteration=state.iteration,
        amplitudes=state.amplitudes.copy(),
        probability_marked=state.probability_marked,
        geometric_angle=(2 * state.iteration + 1) * theta0,
    )


def get_iteration_history(config: GroverConfig, max_iterations: int) -> List[IterationResult]:
    """
    Replay config from a fresh superposition and record max_iterations + 1
    snapshots, the first taken before any iteration.

    geometric_angle is the closed-form (2k + 1) * theta0, independent of the
    simulated amplitudes, so the two trajectories can be compared directly.
    """
    if max_iterations < 0:
        raise ValueError("max_iterations must be non-negative")
    state = initialize_state(config)
    theta0 = calculate_theta0(state.num_states, state.num_marked)
    history = [_snapshot(state, theta0)]
    for _ in range(max_iterations):
        state = perform_iteration(state)
        history.append(_snapshot(state, theta0))
    return history


def default_history_length(config: GroverConfig) -> int:
    """
    Horizon plotted by the probability timeline: a few steps past optimal.
    """
    num_states = 1 << config.num_qubits
    num_marked = len(set(config.marked_states))
    optimal = calculate_optimal_iterations(num_states, num_marked)
    return min(optimal + 3, MAX_HISTORY_ITERATIONS)
