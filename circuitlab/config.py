from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class SolverConfig:
    """
    Numeric policy of one simulation step.

    Attributes:
        gmin: Leak conductance added to every node self-term (S).
        pivot_tol: Pivot magnitude treated as structurally zero.
        internal_resistance: Series resistance of every power source (Ω).
        battery_emf: Battery electromotive force (V).
        solar_volts_per_percent: Solar panel EMF per light-level percent (V).
        default_fuse_max_current: Fuse threshold when none is configured (A).
        active_current: Current above which an actuator counts as active (A).
        wire_resistance: Nominal wire resistance for flow estimation (Ω).
        wire_active_voltage: Potential difference above which a wire is active (V).
        flow_threshold: Estimated wire current above which flow is shown (A).
        stats_current_floor: Total current below which resistance reports 0 (A).
        diode_passes: Maximum number of diode settlement passes (>= 1).
        strict_terminals: Raise on wires naming unknown terminals instead of
            ignoring them.
    """
    gmin: float = 1e-12
    pivot_tol: float = 1e-18
    internal_resistance: float = 0.1
    battery_emf: float = 9.0
    solar_volts_per_percent: float = 0.12
    default_fuse_max_current: float = 0.3
    active_current: float = 0.001
    wire_resistance: float = 0.001
    wire_active_voltage: float = 1e-6
    flow_threshold: float = 0.0001
    stats_current_floor: float = 1e-6
    diode_passes: int = 2
    strict_terminals: bool = False

    def __post_init__(self) -> None:
        if self.diode_passes < 1:
            raise ValueError("diode_passes must be at least 1.")


DEFAULT_CONFIG = SolverConfig()
