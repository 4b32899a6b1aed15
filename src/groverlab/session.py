from __future__ import annotations

from dataclasses import replace
import logging
from typing import Iterable, Iterator, List, Optional

import numpy as np

from .geometry import GeometricState, get_geometric_state
from .history import IterationResult, default_history_length, get_iteration_history
from .iteration import perform_iteration, run_to_optimal
from .measurement import MeasurementResult, mark_measured, measure_state
from .operators import apply_diffusion, apply_oracle
from .state import DEFAULT_CONFIG, GroverConfig, GroverState, initialize_state

logger = logging.getLogger(__name__)

MIN_QUBITS = 2
MAX_QUBITS = 8


class GroverSession:
    """
    Stateful driver for an interactive view of the search.

    Holds the editable config, the live state (None until initialize) and
    the last measurement. Editing the config discards the live state.
    Stepping methods return the new state, or None when nothing is live.
    """

    def __init__(
        self,
        config: GroverConfig = DEFAULT_CONFIG,
        *,
        seed: np.random.Generator | int | None = None,
    ) -> None:
        self.config = config
        self.state: Optional[GroverState] = None
        self.measurement: Optional[MeasurementResult] = None
        self._rng = np.random.default_rng(seed)

    def _discard(self) -> None:
        self.state = None
        self.measurement = None

    def set_num_qubits(self, num_qubits: int) -> None:
        clamped = max(MIN_QUBITS, min(MAX_QUBITS, int(num_qubits)))
        limit = 1 << clamped
        self.config = replace(
            self.config,
            num_qubits=clamped,
            marked_states=tuple(s for s in self.config.marked_states if s < limit),
        )
        self._discard()

    def set_marked_states(self, indices: Iterable[int]) -> None:
        limit = self.config.num_states
        self.config = replace(
            self.config,
            marked_states=tuple(s for s in indices if 0 <= s < limit),
        )
        self._discard()

    def toggle_marked_state(self, index: int) -> None:
        marked = list(self.config.marked_states)
        if index in marked:
            marked = [s for s in marked if s != index]
        elif 0 <= index < self.config.num_states:
            marked = sorted(marked + [index])
        self.config = replace(self.config, marked_states=tuple(marked))
        self._discard()

    def initialize(self) -> GroverState:
        self.state = initialize_state(self.config)
        self.measurement = None
        return self.state

    def _advance(self, step) -> Optional[GroverState]:
        if self.state is None:
            return None
        self.state = step(self.state)
        return self.state

    def step_oracle(self) -> Optional[GroverState]:
        return self._advance(apply_oracle)

    def step_diffusion(self) -> Optional[GroverState]:
        return self._advance(apply_diffusion)

    def step_full(self) -> Optional[GroverState]:
        return self._advance(perform_iteration)

    def run_to_optimal(self) -> Optional[GroverState]:
        return self._advance(run_to_optimal)

    def measure(self) -> Optional[MeasurementResult]:
        if self.state is None:
            return None
        self.measurement = measure_state(self.state, self._rng)
        self.state = mark_measured(self.state)
        return self.measurement

    def reset(self) -> None:
        logger.debug("session reset")
        self._discard()

    def animate(self) -> Iterator[GroverState]:
        """
        Yield one state per full iteration until the optimal count is reached.

        Starts from the live state, initializing first if there is none.
        Stop consuming the iterator to pause.
        """
        if self.state is None:
            self.initialize()
        while self.state is not None and self.state.iteration < self.state.optimal_iterations:
            self.state = perform_iteration(self.state)
            yield self.state

    @property
    def geometric_state(self) -> Optional[GeometricState]:
        if self.state is None:
            return None
        return get_geometric_state(self.state)

    @property
    def history(self) -> List[IterationResult]:
        return get_iteration_history(self.config, default_history_length(self.config))
