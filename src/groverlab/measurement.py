from __future__ import annotations

from dataclasses import dataclass, replace
import logging

import numpy as np

from .state import GroverState, Phase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MeasurementResult:
    result: int
    is_marked: bool


def measure_state(
    state: GroverState,
    rng: np.random.Generator | int | None = None,
) -> MeasurementResult:
    """
    Sample one basis index with probability amplitude**2.

    This is a read: the state is not collapsed or replaced. If rounding
    leaves the cumulative distribution short of the draw, the last index
    is returned.
    """
    generator = np.random.default_rng(rng)
    draw = float(generator.random())
    cumulative = np.cumsum(state.probabilities())
    index = int(np.searchsorted(cumulative, draw, side="right"))
    if index >= state.num_states:
        index = state.num_states - 1
    result = MeasurementResult(result=index, is_marked=state.is_marked(index))
    logger.debug(
        "measured |%s> (marked=%s)",
        format_binary(index, state.num_qubits),
        result.is_marked,
    )
    return result


def mark_measured(state: GroverState) -> GroverState:
    """
    Relabel a state as measured for display; amplitudes are untouched.
    """
    return replace(state, phase=Phase.MEASURED)


def format_binary(index: int, num_qubits: int) -> str:
    return format(index, "b").zfill(num_qubits)
