from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
import math
from typing import Iterable, Tuple

import numpy as np

from .geometry import calculate_optimal_iterations

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a GroverConfig cannot describe a valid search."""


class Phase(str, Enum):
    INITIAL = "initial"
    ORACLE = "oracle"
    DIFFUSION = "diffusion"
    MEASURED = "measured"
    IDLE = "idle"


@dataclass(frozen=True)
class GroverConfig:
    num_qubits: int
    marked_states: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "marked_states", tuple(self.marked_states))

    @property
    def num_states(self) -> int:
        return 1 << self.num_qubits if self.num_qubits > 0 else 0


DEFAULT_CONFIG = GroverConfig(num_qubits=4, marked_states=(7,))


@dataclass(frozen=True, eq=False)
class GroverState:
    """
    Immutable snapshot of the simulated register.

    Amplitudes are copied into a read-only float64 array and
    probability_marked is always derived from them, so every transition
    builds a new state instead of editing this one.
    """
    num_qubits: int
    marked_states: Tuple[int, ...]
    amplitudes: np.ndarray
    iteration: int = 0
    optimal_iterations: int = 0
    phase: Phase = Phase.INITIAL
    probability_marked: float = field(init=False)

    def __post_init__(self) -> None:
        amps = np.array(self.amplitudes, dtype=np.float64)
        if amps.ndim != 1 or amps.shape[0] != (1 << self.num_qubits):
            raise ValueError("amplitudes must be a 1D vector of length 2**num_qubits")
        amps.setflags(write=False)
        object.__setattr__(self, "amplitudes", amps)
        marked_states = _validate_marked(self.marked_states, int(amps.shape[0]))
        object.__setattr__(self, "marked_states", marked_states)
        object.__setattr__(self, "phase", Phase(self.phase))
        marked = np.asarray(marked_states, dtype=np.int64)
        object.__setattr__(self, "probability_marked", float(np.sum(amps[marked] ** 2)))

    @property
    def num_states(self) -> int:
        return int(self.amplitudes.shape[0])

    @property
    def num_marked(self) -> int:
        return len(self.marked_states)

    def probabilities(self) -> np.ndarray:
        return self.amplitudes * self.amplitudes

    def total_probability(self) -> float:
        return float(np.sum(self.probabilities()))

    def is_marked(self, index: int) -> bool:
        return index in self.marked_states


def _validate_marked(marked_states: Iterable[int], num_states: int) -> Tuple[int, ...]:
    cleaned = set()
    for idx in marked_states:
        if isinstance(idx, bool) or not isinstance(idx, (int, np.integer)):
            raise ConfigurationError(f"marked state {idx!r} is not an integer index")
        if idx < 0 or idx >= num_states:
            raise ConfigurationError(
                f"marked state {idx} is outside [0, {num_states})"
            )
        cleaned.add(int(idx))
    return tuple(sorted(cleaned))


def initialize_state(config: GroverConfig) -> GroverState:
    """
    Build the uniform superposition for config.

    Raises ConfigurationError if num_qubits < 1 or a marked index is out
    of range.
    """
    num_qubits = config.num_qubits
    if isinstance(num_qubits, bool) or not isinstance(num_qubits, (int, np.integer)):
        raise ConfigurationError("num_qubits must be an integer")
    if num_qubits < 1:
        raise ConfigurationError("num_qubits must be >= 1")
    num_qubits = int(num_qubits)
    num_states = 1 << num_qubits
    marked = _validate_marked(config.marked_states, num_states)
    amplitudes = np.full(num_states, 1.0 / math.sqrt(num_states))
    state = GroverState(
        num_qubits=num_qubits,
        marked_states=marked,
        amplitudes=amplitudes,
        iteration=0,
        optimal_iterations=calculate_optimal_iterations(num_states, len(marked)),
        phase=Phase.INITIAL,
    )
    logger.debug(
        "initialized %d-qubit register, marked=%s, optimal_iterations=%d",
        num_qubits,
        marked,
        state.optimal_iterations,
    )
    return state
