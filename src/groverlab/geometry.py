from __future__ import annotations

from dataclasses import dataclass
import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import GroverState


@dataclass(frozen=True)
class GeometricState:
    """
    Position of a Grover state in the 2D plane spanned by the marked and
    unmarked superpositions.
    """
    theta: float
    theta0: float
    delta_theta: float


def calculate_theta0(num_states: int, num_marked: int) -> float:
    """
    Half-angle between the uniform superposition and the unmarked axis.
    """
    if num_marked == 0 or num_states == 0:
        return 0.0
    return math.asin(math.sqrt(num_marked / num_states))


def calculate_optimal_iterations(num_states: int, num_marked: int) -> int:
    if num_marked == 0 or num_marked >= num_states:
        return 0
    # round half up
    return int(math.floor((math.pi / 4.0) * math.sqrt(num_states / num_marked) + 0.5))


def calculate_success_probability(num_states: int, num_marked: int, iterations: int) -> float:
    """
    Closed-form probability of measuring a marked state after k iterations,
    sin^2((2k + 1) * theta0).
    """
    if num_marked == 0 or num_states == 0:
        return 0.0
    theta0 = calculate_theta0(num_states, num_marked)
    return math.sin((2 * iterations + 1) * theta0) ** 2


def get_geometric_state(state: "GroverState") -> GeometricState:
    theta0 = calculate_theta0(state.num_states, state.num_marked)
    return GeometricState(
        theta=(2 * state.iteration + 1) * theta0,
        theta0=theta0,
        delta_theta=2.0 * theta0,
    )
