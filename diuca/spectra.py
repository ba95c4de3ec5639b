"""Response histories recorded at nodes and the response spectra computed from them."""

from __future__ import annotations

from typing import Iterable, Sequence

from diuca.utils import regularize, response_spectrum

_SPECTRUM_SUFFIXES = ("_sd", "_sv", "_sa")


class ResponseHistoryBuilder:
    """Collects the history of nodal variable values, one vector per node and variable.

    Vectors are named ``node_<id>_<variable>`` and ordered by node id, then by
    the order of ``variables``. The ``time`` vector holds the time of each step.
    """

    def __init__(self, name, variables, nodes):
        self.name = name
        self.variables = list(variables)
        if not self.variables:
            raise ValueError(
                f"Error in VectorPostprocessor, '{name}'. At least one variable is required."
            )
        history_nodes = sorted(set(nodes or ()))
        if not history_nodes:
            raise ValueError(
                f"Error in VectorPostprocessor, '{name}'. Please provide either boundary "
                "or node for response history output."
            )

        self.history_names: list[str] = [
            f"node_{node_id}_{variable}"
            for node_id in history_nodes
            for variable in self.variables
        ]
        self.histories: list[list[float]] = [[] for _ in self.history_names]
        self.time: list[float] = []
        self._node_map = {node_id: count for count, node_id in enumerate(history_nodes)}
        self._current_data: list[float] = [0.0] * len(self.histories)

    @property
    def current_data(self) -> tuple[float, ...]:
        """Values gathered during the current step."""
        return tuple(self._current_data)

    def initialize(self):
        """Reset the data of the current step."""
        self._current_data = [0.0] * len(self.histories)

    def execute(self, node_id, values: Sequence[float]):
        """Record the variable values at a node; nodes not requested are ignored."""
        values = list(values)
        if len(values) != len(self.variables):
            raise ValueError(
                f"Expected {len(self.variables)} variable values, got {len(values)}."
            )
        loc = self._node_map.get(node_id)
        if loc is None:
            return
        start = loc * len(self.variables)
        self._current_data[start : start + len(values)] = values

    def thread_join(self, other: "ResponseHistoryBuilder"):
        """Add the step data gathered by another builder into this one."""
        if len(other._current_data) != len(self._current_data):
            raise ValueError("Cannot join builders with different history layouts.")
        self._current_data = [a + b for a, b in zip(self._current_data, other._current_data)]

    def finalize(self, time, gathered: Iterable[Sequence[float]] | None = None):
        """Append the step data to the histories and ``time`` to the time vector.

        ``gathered`` holds the step data of every process; their sum is stored.
        Without it, this builder's own step data is stored.
        """
        if gathered is None:
            data = list(self._current_data)
        else:
            data = [0.0] * len(self.histories)
            for chunk in gathered:
                chunk = list(chunk)
                if len(chunk) != len(data):
                    raise ValueError("Gathered data does not match the number of histories.")
                data = [a + b for a, b in zip(data, chunk)]
        for history, value in zip(self.histories, data):
            history.append(value)
        self.time.append(time)


class ResponseSpectraCalculator:
    """Computes displacement, velocity and acceleration spectra of every history."""

    def __init__(
        self,
        name,
        history,
        damping_ratio=0.05,
        start_frequency=0.01,
        end_frequency=100.0,
        num_frequencies=401,
        regularize_dt=None,
    ):
        if regularize_dt is None or regularize_dt <= 0.0:
            raise ValueError(f"Error in {name}. 'regularize_dt' must be positive.")
        if start_frequency >= end_frequency:
            raise ValueError(
                f"Error in {name}. Starting frequency must be less than the ending frequency."
            )
        if start_frequency <= 0.0:
            raise ValueError(f"Error in {name}. Start and end frequencies must be positive.")
        if damping_ratio <= 0:
            raise ValueError(f"Error in {name}. Damping ratio must be positive.")

        self.name = name
        self.history = history
        self.damping_ratio = damping_ratio
        self.start_frequency = start_frequency
        self.end_frequency = end_frequency
        self.num_frequencies = num_frequencies
        self.regularize_dt = regularize_dt
        self.frequency: list[float] = []
        self.period: list[float] = []
        self.spectra: dict[str, list[float]] = {}

    def _clear(self):
        self.frequency = []
        self.period = []
        self.spectra = {
            history_name + suffix: []
            for history_name in self.history.history_names
            for suffix in _SPECTRUM_SUFFIXES
        }

    def execute(self):
        """Compute the spectra of all histories and return them by vector name."""
        self._clear()
        for history_name, values in zip(self.history.history_names, self.history.histories):
            _, reg_acc = regularize(values, self.history.time, self.regularize_dt)
            spectrum = response_spectrum(
                self.start_frequency,
                self.end_frequency,
                self.num_frequencies,
                reg_acc,
                self.damping_ratio,
                self.regularize_dt,
            )
            self.frequency = list(spectrum.frequency)
            self.period = list(spectrum.period)
            self.spectra[history_name + "_sd"] = list(spectrum.displacement)
            self.spectra[history_name + "_sv"] = list(spectrum.velocity)
            self.spectra[history_name + "_sa"] = list(spectrum.acceleration)
        return dict(self.spectra)