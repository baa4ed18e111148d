import math

import numpy as np
import pytest
from mass_spring import (
    MassSpringSystem,
    State,
    Parameters,
    DampingRegime,
    InvalidParameterError,
    UnknownForcingPresetError,
)


def test_constructor_defaults():
    system = MassSpringSystem()
    assert system.get_parameters() == Parameters(mass=1.0, damping=0.1, spring_constant=1.0)
    assert system.get_state() == State(position=1.0, velocity=0.0, time=0.0)
    assert system.get_forcing().name == "none"
    assert system.get_forcing().params == {}
    assert system.initial_conditions == (1.0, 0.0)


@pytest.mark.parametrize("mass", [0.0, -1.0, float("nan")])
def test_invalid_mass_rejected(mass):
    with pytest.raises(InvalidParameterError, match="mass") as exc:
        MassSpringSystem(mass=mass, damping=0.1, spring_constant=1.0)
    assert exc.value.name == "mass"


def test_invalid_damping_and_spring_rejected():
    with pytest.raises(InvalidParameterError, match="damping"):
        MassSpringSystem(damping=-0.1)
    with pytest.raises(InvalidParameterError, match="spring_constant"):
        MassSpringSystem(spring_constant=-1.0)


def test_invalid_parameter_is_a_value_error():
    with pytest.raises(ValueError):
        MassSpringSystem(mass=0.0)


def test_zero_damping_and_spring_allowed():
    system = MassSpringSystem(damping=0.0, spring_constant=0.0)
    assert system.get_parameters().damping == 0.0
    assert system.get_parameters().spring_constant == 0.0


def test_step_advances_time_by_dt():
    system = MassSpringSystem()
    for i in range(1, 101):
        state = system.step(0.016)
        assert state.time == pytest.approx(0.016 * i)
    assert system.time == pytest.approx(1.6)


def test_returned_state_is_an_independent_value():
    system = MassSpringSystem()
    state = system.step(0.01)
    with pytest.raises(AttributeError):
        state.position = 42.0

    as_dict = state.as_dict()
    as_dict["position"] = 42.0
    assert system.get_state().position != 42.0

    system.step(0.01)
    assert state.time == pytest.approx(0.01)


def test_reset_restores_initial_conditions_only():
    system = MassSpringSystem(mass=1.0, damping=0.2, spring_constant=3.0, y0=0.4, v0=-1.5)
    system.set_forcing("sine", {"amplitude": 0.5})
    system.run(0.01, 250)
    system.set_parameters(mass=2.0)

    system.reset()
    assert system.get_state() == State(position=0.4, velocity=-1.5, time=0.0)
    assert system.get_parameters().mass == 2.0
    assert system.get_forcing().name == "sine"
    assert system.get_forcing().params["amplitude"] == 0.5

    system.reset()
    assert system.get_state() == State(position=0.4, velocity=-1.5, time=0.0)


def test_reset_then_rerun_reproduces_trajectory():
    system = MassSpringSystem(damping=0.3)
    system.set_forcing("square", {"frequency": 0.3})
    first = [system.step(0.02) for _ in range(300)]
    system.reset()
    second = [system.step(0.02) for _ in range(300)]
    assert first == second


def test_partial_parameter_update():
    system = MassSpringSystem(mass=1.0, damping=0.3, spring_constant=5.0)
    system.set_parameters(mass=2.0)
    p = system.get_parameters()
    assert p.mass == 2.0
    assert p.damping == 0.3
    assert p.spring_constant == 5.0

    system.update_parameters({"spring_constant": 7.0})
    p = system.get_parameters()
    assert (p.mass, p.damping, p.spring_constant) == (2.0, 0.3, 7.0)


def test_failed_parameter_update_changes_nothing():
    system = MassSpringSystem(mass=1.0, damping=0.3, spring_constant=5.0)
    with pytest.raises(InvalidParameterError, match="damping"):
        system.set_parameters(mass=4.0, damping=-1.0)
    assert system.get_parameters() == Parameters(mass=1.0, damping=0.3, spring_constant=5.0)

    with pytest.raises(InvalidParameterError, match="mass"):
        system.set_parameters(mass=-2.0, spring_constant=9.0)
    assert system.get_parameters().spring_constant == 5.0


def test_update_parameters_rejects_unknown_key():
    system = MassSpringSystem()
    with pytest.raises(InvalidParameterError, match="stiffness"):
        system.update_parameters({"stiffness": 3.0})


def test_parameter_change_mid_run_takes_effect_next_step():
    """Switching off spring and damping leaves the mass coasting."""
    system = MassSpringSystem(mass=1.0, damping=0.5, spring_constant=2.0)
    system.run(0.01, 50)
    v = system.get_state().velocity
    system.set_parameters(damping=0.0, spring_constant=0.0)
    for _ in range(20):
        assert system.step(0.01).velocity == pytest.approx(v)


def test_set_forcing_resolves_defaults():
    system = MassSpringSystem()
    system.set_forcing("impulse", {"amplitude": 3.0})
    forcing = system.get_forcing()
    assert forcing.name == "impulse"
    assert forcing.params == {"amplitude": 3.0, "impulse_time": 1.0, "width": 0.01}


def test_set_forcing_replaces_previous_selection():
    system = MassSpringSystem()
    system.set_forcing("sine", {"amplitude": 4.0, "frequency": 2.0})
    system.set_forcing("sine", {"frequency": 3.0})
    assert system.get_forcing().params == {"amplitude": 1.0, "frequency": 3.0}


def test_unknown_forcing_keeps_previous_selection():
    system = MassSpringSystem()
    system.set_forcing("cosine", {"amplitude": 0.2})
    with pytest.raises(UnknownForcingPresetError, match="unknown"):
        system.set_forcing("unknown", {})
    forcing = system.get_forcing()
    assert forcing.name == "cosine"
    assert forcing.params["amplitude"] == 0.2


def test_bad_forcing_params_keep_previous_selection():
    system = MassSpringSystem()
    system.set_forcing("constant", {"force": 2.0})
    with pytest.raises(InvalidParameterError):
        system.set_forcing("sine", {"omega": 1.0})
    assert system.get_forcing().name == "constant"


def test_get_forcing_returns_copies():
    system = MassSpringSystem()
    system.set_forcing("sine")
    system.get_forcing().params["amplitude"] = 50.0
    assert system.get_forcing().params["amplitude"] == 1.0


def test_zero_amplitude_forcing_matches_none():
    a = MassSpringSystem(damping=0.2)
    b = MassSpringSystem(damping=0.2)
    b.set_forcing("sine", {"amplitude": 0.0, "frequency": 1.3})
    for _ in range(500):
        sa, sb = a.step(0.01), b.step(0.01)
        assert sa.position == pytest.approx(sb.position, abs=1e-12)
        assert sa.velocity == pytest.approx(sb.velocity, abs=1e-12)


def test_step_forcing_settles_at_static_deflection():
    """Constant load F on a damped spring settles at y = F/k."""
    system = MassSpringSystem(mass=1.0, damping=1.0, spring_constant=2.0, y0=0.0, v0=0.0)
    system.set_forcing("step", {"amplitude": 3.0, "step_time": 0.0})
    system.run(0.01, 4000)
    assert system.get_state().position == pytest.approx(1.5, abs=1e-3)


def test_impulse_delivers_momentum():
    """A pulse of total impulse J gives a free mass a velocity change J/m."""
    system = MassSpringSystem(mass=2.0, damping=0.0, spring_constant=0.0, y0=0.0, v0=0.0)
    system.set_forcing("impulse", {"amplitude": 3.0, "impulse_time": 0.5, "width": 0.05})
    system.run(1e-4, 8000)
    assert system.get_state().velocity == pytest.approx(1.5, abs=0.05)


def test_resonance_grows_amplitude():
    system = MassSpringSystem(mass=1.0, damping=0.05, spring_constant=1.0, y0=0.0, v0=0.0)
    f0 = system.get_system_properties().f0
    system.set_forcing("sine", {"amplitude": 0.1, "frequency": f0})

    peak_early = max(abs(system.step(0.05).position) for _ in range(200))
    peak_late = max(abs(system.step(0.05).position) for _ in range(200))
    assert peak_late > peak_early


def test_heavy_damping_creeps_back():
    system = MassSpringSystem(mass=1.0, damping=20.0, spring_constant=1.0, y0=1.0, v0=0.0)
    for _ in range(100):
        state = system.step(0.01)
        assert state.position > 0
    assert system.get_state().position > 0.5


def test_identical_systems_are_deterministic():
    def trajectory():
        system = MassSpringSystem(mass=0.7, damping=0.15, spring_constant=3.0, y0=-0.2, v0=0.9)
        system.set_forcing("square", {"amplitude": 0.4, "frequency": 0.8})
        out = [system.step(0.016) for _ in range(400)]
        system.set_parameters(spring_constant=1.0)
        out += [system.step(0.016) for _ in range(400)]
        return out

    assert trajectory() == trajectory()


def test_instances_are_independent():
    a = MassSpringSystem()
    b = MassSpringSystem()
    a.set_forcing("constant", {"force": 5.0})
    a.set_parameters(mass=3.0)
    a.run(0.01, 10)
    assert b.get_forcing().name == "none"
    assert b.get_parameters().mass == 1.0
    assert b.get_state().time == 0.0


def test_unstable_values_pass_through():
    """Absurd timesteps are not guarded against; the result just diverges."""
    system = MassSpringSystem(mass=1.0, damping=0.0, spring_constant=1e6)
    for _ in range(2000):
        system.step(0.1)
    state = system.get_state()
    assert not (math.isfinite(state.position) and abs(state.position) < 1e3)


def test_energy_value_and_decay():
    system = MassSpringSystem(mass=2.0, damping=0.0, spring_constant=3.0, y0=1.0, v0=2.0)
    assert system.get_energy() == pytest.approx(0.5 * 3.0 * 1.0 + 0.5 * 2.0 * 4.0)

    system.set_parameters(damping=0.5)
    e0 = system.get_energy()
    system.run(0.01, 500)
    assert system.get_energy() < e0


def test_energy_computed_under_forcing():
    system = MassSpringSystem(damping=0.0)
    system.set_forcing("constant", {"force": 1.0})
    system.run(0.01, 100)
    s = system.get_state()
    assert system.get_energy() == pytest.approx(0.5 * s.position ** 2 + 0.5 * s.velocity ** 2)


# -----------------------------------------------------------------------------
# Derived properties
# -----------------------------------------------------------------------------

def test_regime_classification():
    assert MassSpringSystem(mass=1.0, damping=0.5, spring_constant=1.0) \
        .get_system_properties().regime == "underdamped"
    assert MassSpringSystem(mass=1.0, damping=5.0, spring_constant=1.0) \
        .get_system_properties().regime == DampingRegime.OVERDAMPED

    m, k = 2.0, 3.0
    critical = MassSpringSystem(mass=m, damping=2 * np.sqrt(m * k), spring_constant=k)
    props = critical.get_system_properties()
    assert props.regime == "critical"
    assert abs(props.zeta - 1.0) < 1e-4
    assert props.omega_d == 0.0


def test_properties_of_underdamped_system():
    props = MassSpringSystem(mass=1.0, damping=0.5, spring_constant=1.0).get_system_properties()
    assert props.omega0 == pytest.approx(1.0)
    assert props.f0 == pytest.approx(1 / (2 * np.pi))
    assert props.period == pytest.approx(2 * np.pi)
    assert props.zeta == pytest.approx(0.25)
    assert props.omega_d == pytest.approx(np.sqrt(1 - 0.25 ** 2))
    assert props.f_d == pytest.approx(props.omega_d / (2 * np.pi))
    assert props.quality_factor == pytest.approx(2.0)
    assert props.quality_factor == pytest.approx(1 / (2 * props.zeta))


def test_undamped_quality_factor_is_infinite():
    props = MassSpringSystem(mass=1.0, damping=0.0, spring_constant=4.0).get_system_properties()
    assert props.zeta == 0.0
    assert props.regime == "underdamped"
    assert props.quality_factor == math.inf
    assert props.omega_d == pytest.approx(2.0)
    assert props.period == pytest.approx(np.pi)


def test_properties_without_spring():
    free = MassSpringSystem(damping=0.0, spring_constant=0.0).get_system_properties()
    assert free.omega0 == 0.0
    assert free.period == math.inf
    assert free.quality_factor == math.inf
    assert free.regime == "underdamped"

    dragged = MassSpringSystem(damping=1.0, spring_constant=0.0).get_system_properties()
    assert dragged.zeta == math.inf
    assert dragged.regime == "overdamped"
    assert dragged.quality_factor == 0.0
    assert dragged.omega_d == 0.0


def test_properties_follow_parameter_updates():
    system = MassSpringSystem(mass=1.0, damping=0.5, spring_constant=1.0)
    system.set_parameters(damping=2.0)
    assert system.get_system_properties().regime == "critical"
