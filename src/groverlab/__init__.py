"""Classical amplitude-vector simulation of Grover's search algorithm."""

from .geometry import (
    GeometricState,
    calculate_optimal_iterations,
    calculate_success_probability,
    calculate_theta0,
    get_geometric_state,
)
from .state import (
    DEFAULT_CONFIG,
    ConfigurationError,
    GroverConfig,
    GroverState,
    Phase,
    initialize_state,
)
from .operators import apply_diffusion, apply_oracle
from .iteration import perform_iteration, run_iterations, run_to_optimal
from .history import IterationResult, default_history_length, get_iteration_history
from .measurement import MeasurementResult, format_binary, mark_measured, measure_state
from .speedup import SpeedupComparison, compare_speedup
from .session import GroverSession
from .circuit import grover_circuit, reference_amplitudes

__all__ = [
    "GeometricState",
    "calculate_optimal_iterations",
    "calculate_success_probability",
    "calculate_theta0",
    "get_geometric_state",
    "DEFAULT_CONFIG",
    "ConfigurationError",
    "GroverConfig",
    "GroverState",
    "Phase",
    "initialize_state",
    "apply_diffusion",
    "apply_oracle",
    "perform_iteration",
    "run_iterations",
    "run_to_optimal",
    "IterationResult",
    "default_history_length",
    "get_iteration_history",
    "MeasurementResult",
    "format_binary",
    "mark_measured",
    "measure_state",
    "SpeedupComparison",
    "compare_speedup",
    "GroverSession",
    "grover_circuit",
    "reference_amplitudes",
]
