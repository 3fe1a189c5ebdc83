import numpy as np
import pytest

from joggerload.response import acceleration, displacement, jogger_load_factor, sample_displacement, velocity

H = 1e-5


def _random_cases(n=20, seed=0):
    rng = np.random.default_rng(seed)
    a = rng.uniform(0.05, 5.0, n)
    T = rng.uniform(0.1, 10.0, n)
    return list(zip(a.tolist(), T.tolist()))


@pytest.mark.parametrize("a, T", _random_cases())
def test_velocity_is_derivative_of_displacement(a, T):
    t = np.linspace(0.0, np.pi / a, 200)
    numeric = (displacement(t + H, a, T) - displacement(t - H, a, T)) / (2 * H)
    np.testing.assert_allclose(numeric, velocity(t, a, T), rtol=1e-4, atol=1e-7)


@pytest.mark.parametrize("a, T", _random_cases(seed=1))
def test_acceleration_is_derivative_of_velocity(a, T):
    t = np.linspace(0.0, np.pi / a, 200)
    numeric = (velocity(t + H, a, T) - velocity(t - H, a, T)) / (2 * H)
    np.testing.assert_allclose(numeric, acceleration(t, a, T), rtol=1e-4, atol=1e-6)


@pytest.mark.parametrize("a, T", [(0.1, 0.1), (0.9425, 9.478), (5.0, 10.0), (2.0, 0.5)])
def test_response_starts_at_rest(a, T):
    assert displacement(0.0, a, T) == pytest.approx(0.0, abs=1e-12)
    assert velocity(0.0, a, T) == pytest.approx(0.0, abs=1e-12)


def test_fast_rise_approaches_steady_state():
    # T -> 0: amplitude is reached immediately, y -> sin(a t)
    a = 1.0
    t = np.linspace(0.0, np.pi, 50)
    np.testing.assert_allclose(displacement(t, a, 1e-6), np.sin(a * t), atol=1e-5)


def test_arrays_and_scalars_agree():
    a, T = 0.9425, 9.478
    t = np.array([0.5, 1.0, 2.5])
    y = displacement(t, a, T)
    for t_i, y_i in zip(t, y):
        assert displacement(float(t_i), a, T) == pytest.approx(y_i, rel=1e-12)


def test_repeated_calls_are_identical():
    args = (2.345, 0.9425, 9.478)
    assert displacement(*args) == displacement(*args)
    assert velocity(*args) == velocity(*args)
    assert acceleration(*args) == acceleration(*args)
    assert jogger_load_factor(2.8) == jogger_load_factor(2.8)


@pytest.mark.parametrize("f", [1.9, 3.5])
def test_load_factor_zero_at_band_edges(f):
    assert jogger_load_factor(f) == 0.0


@pytest.mark.parametrize("f", [2.2, 2.45, 2.7])
def test_load_factor_plateau(f):
    assert jogger_load_factor(f) == 1.0


@pytest.mark.parametrize("f", [0.5, 1.0, 1.899, 3.5001, 4.0, 10.0])
def test_load_factor_outside_band(f):
    assert jogger_load_factor(f) == 0.0


def test_load_factor_ramps():
    assert jogger_load_factor(2.0) == pytest.approx(0.1 * 0.3)
    assert jogger_load_factor(2.8) == pytest.approx(0.56)
    assert jogger_load_factor(3.0) == pytest.approx(0.5 * 0.8)


def test_load_factor_jumps_at_plateau_edges():
    # The ramps are not normalised: they reach 0.09 and 0.64, not 1.
    assert jogger_load_factor(2.2 - 1e-9) == pytest.approx(0.09, abs=1e-6)
    assert jogger_load_factor(2.7 + 1e-9) == pytest.approx(0.64, abs=1e-6)
    assert jogger_load_factor(2.2) == 1.0


def test_load_factor_within_unit_interval():
    for f in np.linspace(0.0, 5.0, 501):
        assert 0.0 <= jogger_load_factor(float(f)) <= 1.0


def test_sample_displacement_grid():
    a, T = 0.9425, 9.478
    t, y = sample_displacement(a, T)
    assert t.shape == y.shape == (100,)
    assert t[0] == 0.0
    assert t[1] == pytest.approx(0.2)
    assert t[-1] == pytest.approx(19.8)
    np.testing.assert_array_equal(y, displacement(t, a, T))


def test_sample_displacement_custom_grid():
    t, y = sample_displacement(1.0, 1.0, steps=10, duration=5.0)
    assert len(t) == len(y) == 10
    assert t[-1] == pytest.approx(4.5)
