from __future__ import annotations

from .operators import apply_diffusion, apply_oracle
from .state import GroverState


def perform_iteration(state: GroverState) -> GroverState:
    return apply_diffusion(apply_oracle(state))


def run_iterations(state: GroverState, count: int) -> GroverState:
    if count < 0:
        raise ValueError("count must be non-negative")
    current = state
    for _ in range(count):
        current = perform_iteration(current)
    return current


def run_to_optimal(state: GroverState) -> GroverState:
    remaining = state.optimal_iterations - state.iteration
    if remaining <= 0:
        return state
    return run_iterations(state, remaining)
