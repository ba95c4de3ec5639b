import math

import pytest

from diuca.utils import (
    Spectrum,
    adjust,
    calc_log_likelihood,
    check_equal,
    check_equal_size,
    glob_files,
    greater_probability,
    is_negative_or_zero,
    log10,
    lognormal_standard_deviation,
    maximize_log_likelihood,
    mean,
    mean_history,
    median,
    percentile,
    regularize,
    response_spectrum,
    standard_deviation,
    zeropad,
)


def _pulse():
    return [math.sin(0.3 * k) for k in range(60)]


def test_response_spectrum_shape_and_frequencies():
    spec = response_spectrum(0.1, 10.0, 5, _pulse(), 0.05, 0.01)
    assert isinstance(spec, Spectrum)
    assert len(spec.frequency) == 5
    assert len(spec.acceleration) == 5
    assert spec.frequency[0] == pytest.approx(0.1)
    assert spec.frequency[-1] == pytest.approx(10.0)
    for f, p in zip(spec.frequency, spec.period):
        assert f * p == pytest.approx(1.0)
    assert spec.frequency == sorted(spec.frequency)


def test_response_spectrum_pseudo_relations():
    spec = response_spectrum(0.5, 20.0, 7, _pulse(), 0.05, 0.02)
    for sd, sv, sa in zip(spec.displacement, spec.velocity, spec.acceleration):
        assert sa * sd == pytest.approx(sv * sv)
        assert sd >= 0


def test_response_spectrum_zero_and_linear():
    zero = response_spectrum(0.5, 5.0, 4, [0.0] * 20, 0.05, 0.01)
    assert zero.displacement == [0.0] * 4
    base = response_spectrum(0.5, 5.0, 4, _pulse(), 0.05, 0.01)
    doubled = response_spectrum(0.5, 5.0, 4, [2 * a for a in _pulse()], 0.05, 0.01)
    for a, b in zip(base.displacement, doubled.displacement):
        assert b == pytest.approx(2 * a)


def test_response_spectrum_errors():
    with pytest.raises(ValueError):
        response_spectrum(0.1, 10.0, 1, _pulse(), 0.05, 0.01)
    with pytest.raises(ValueError):
        response_spectrum(0.1, 10.0, 5, [], 0.05, 0.01)


def test_regularize_uniform_is_identity():
    times = [0.0, 0.5, 1.0, 1.5, 2.0]
    values = [3.0, -1.0, 4.0, 1.0, 5.0]
    reg_t, reg_a = regularize(values, times, 0.5)
    assert reg_t == times
    assert reg_a == values


def test_regularize_linear_interpolation():
    times = [0.0, 1.0, 3.0]
    values = [2 * t + 1 for t in times]
    reg_t, reg_a = regularize(values, times, 0.25)
    assert reg_t[0] == times[0]
    assert all(t <= times[-1] for t in reg_t)
    for a, b in zip(reg_t, reg_t[1:]):
        assert b - a == pytest.approx(0.25)
    for t, a in zip(reg_t, reg_a):
        assert a == pytest.approx(2 * t + 1)


def test_regularize_errors():
    with pytest.raises(ValueError):
        regularize([], [], 0.1)
    with pytest.raises(ValueError):
        regularize([1.0, 2.0], [0.0, 1.0], 0.0)


def test_check_equal_size():
    assert check_equal_size([[1, 2], [3, 4], [5, 6]]) is True
    assert check_equal_size([[1, 2], [3]]) is False
    assert check_equal_size([]) is True


def test_check_equal():
    assert check_equal([1.0, 2.0], [1.0, 2.0]) is True
    assert check_equal([1.0, 2.0], [1.0, 2.1]) is False
    assert check_equal([100.0, 200.0], [101.0, 198.0], 1.0) is True
    assert check_equal([1.0], [1.0, 2.0]) is False


def test_is_negative_or_zero():
    assert is_negative_or_zero([1.0, 0.0]) is True
    assert is_negative_or_zero([1.0, -3.0]) is True
    assert is_negative_or_zero([1.0, 2.0]) is False


def test_mean_and_mean_history():
    assert mean([4.5, 4.5, 4.5]) == 4.5
    histories = [[1.0, 5.0], [1.0, 5.0]]
    assert mean_history(histories) == [1.0, 5.0]
    with pytest.raises(ValueError):
        mean_history([[1.0, 2.0], [1.0]])
    with pytest.raises(ValueError):
        mean([])


def test_median():
    assert median([3.0, 1.0, 2.0]) == 2.0
    assert median([4.0, 1.0, 3.0, 9.0], "lower") == 3.0
    assert median([4.0, 1.0, 3.0, 9.0], "higher") == 4.0
    assert median([3.0, 1.0]) == 2.0
    with pytest.raises(ValueError):
        median([1.0, 2.0], "nearest")


def test_percentile():
    data = [5.0, 1.0, 4.0, 2.0, 3.0]
    assert percentile(data, 40.0, "lower") == 2.0
    assert percentile(data, 40.0, "higher") == 3.0
    assert percentile(data, 40.0) == 2.0
    low = percentile(data, 50.0, "lower")
    high = percentile(data, 50.0, "higher")
    assert low <= percentile(data, 50.0) <= high
    with pytest.raises(ValueError):
        percentile(data, 120.0)
    with pytest.raises(ValueError):
        percentile(data, 50.0, "nearest")


def test_standard_deviation_invariants():
    data = [1.0, 4.0, 2.0, 8.0]
    assert standard_deviation([7.0, 7.0, 7.0]) == 0.0
    assert standard_deviation([v + 10 for v in data]) == pytest.approx(standard_deviation(data))
    assert standard_deviation([3 * v for v in data]) == pytest.approx(3 * standard_deviation(data))
    with pytest.raises(ValueError):
        standard_deviation([1.0])


def test_lognormal_standard_deviation():
    data = [1.0, 4.0, 2.0, 8.0]
    scaled = [5 * v for v in data]
    assert lognormal_standard_deviation(scaled) == pytest.approx(lognormal_standard_deviation(data))
    assert lognormal_standard_deviation([2.0, 2.0]) == 0.0
    with pytest.raises(ValueError):
        lognormal_standard_deviation([1.0, 0.0])


def test_greater_probability():
    assert greater_probability(1.5, 0.3, 1.5, 0.4) == pytest.approx(0.5)
    forward = greater_probability(2.0, 0.3, 1.0, 0.4)
    backward = greater_probability(1.0, 0.4, 2.0, 0.3)
    assert forward + backward == pytest.approx(1.0)
    assert forward > backward


def test_calc_log_likelihood_prefers_true_median():
    good = calc_log_likelihood([1.0], [0.5], 1.0, 0.5, 10)
    bad = calc_log_likelihood([1.0], [0.5], 2.0, 0.5, 10)
    assert good > bad
    assert good <= 0


@pytest.mark.parametrize(
    "im, pf, loc, sca",
    [
        ([1.0, 2.0], [0.5], 1.0, 0.5),
        ([1.0], [1.5], 1.0, 0.5),
        ([0.0], [0.5], 1.0, 0.5),
        ([1.0], [0.5], 1.0, 0.0),
        ([1.0], [0.5], 0.0, 0.5),
    ],
)
def test_calc_log_likelihood_errors(im, pf, loc, sca):
    with pytest.raises(ValueError):
        calc_log_likelihood(im, pf, loc, sca, 10)


def test_maximize_brute_force():
    im = [0.5, 1.0, 2.0]
    pf = [0.2, 0.5, 0.8]
    loc, sca = maximize_log_likelihood(im, pf, [0.5, 1.5], [0.3, 0.6], 20, True, 1e-3, 1e-4, 0, 0)
    assert 0.5 <= loc < 1.5
    assert 0.3 <= sca < 0.6
    assert calc_log_likelihood(im, pf, loc, sca, 20) >= calc_log_likelihood(im, pf, 0.5, 0.3, 20)


def test_maximize_random_is_deterministic():
    im = [0.5, 1.0, 2.0]
    pf = [0.2, 0.5, 0.8]
    args = (im, pf, [0.5, 2.0], [0.2, 1.5], 100, False, 1e-2, 1e-4, 2, 7)
    first = maximize_log_likelihood(*args)
    second = maximize_log_likelihood(*args)
    assert first == second
    loc, sca = first
    assert (loc, sca) == (0.0, 0.0) or (0.5 <= loc <= 2.0 and 0.2 <= sca <= 1.5)


def test_zeropad():
    assert zeropad(7, 100) == "007"
    assert zeropad(123, 123) == "123"
    assert zeropad(1234, 9) == "1234"


def test_glob_files(tmp_path):
    for name in ("b_2.csv", "b_1.csv", "other.txt"):
        (tmp_path / name).write_text("x")
    found = glob_files(str(tmp_path / "b_*.csv"))
    assert found == [str(tmp_path / "b_1.csv"), str(tmp_path / "b_2.csv")]
    assert glob_files(str(tmp_path / "missing_*")) == []


def test_adjust_round_trip():
    data = [1.5, -2.0, 3.25]
    assert adjust(data, 1.0, 0.0) == data
    shifted = adjust(data, 4.0, 2.0)
    assert adjust(shifted, 0.25, -0.5) == pytest.approx(data)


def test_log10():
    exponents = [0, 1, 3, -2]
    assert log10([10.0**k for k in exponents]) == pytest.approx(exponents)
    with pytest.raises(ValueError):
        log10([1.0, -1.0])