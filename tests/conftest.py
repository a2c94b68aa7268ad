import pytest

from gravity_sandbox.config import SimulationConfig


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def still_config():
    """
    Default constants with time_scale=1: per-step displacements are far
    below float64 resolution at world scale, so bodies stay put.
    """
    return SimulationConfig(time_scale=1.0)


@pytest.fixture
def unit_config():
    """
    G = D = m = 1 so accelerations are easy to reason about.
    Central mass 1e4, collision radius 5, step 0.01.
    """
    return SimulationConfig(
        gravitational_constant=1.0,
        distance_scale=1.0,
        time_scale=0.01,
        central_mass=1e4,
        body_mass=1.0,
        central_radius=5.0,
    )
