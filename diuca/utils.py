"""Numerical helpers for response histories, spectra and fragility fitting."""

from __future__ import annotations

import glob
import math
import os
import random
import sys
from dataclasses import dataclass, field
from itertools import pairwise
from typing import Sequence

_PI = 3.141593
_INTERPOLATIONS = ("linear", "lower", "higher")


@dataclass
class Spectrum:
    """Response spectrum: frequencies, periods and the three pseudo spectra."""

    frequency: list[float] = field(default_factory=list)
    period: list[float] = field(default_factory=list)
    displacement: list[float] = field(default_factory=list)
    velocity: list[float] = field(default_factory=list)
    acceleration: list[float] = field(default_factory=list)


def response_spectrum(freq_start, freq_end, freq_num, history_acc, xi, reg_dt) -> Spectrum:
    """Compute the response spectrum of an acceleration history sampled at ``reg_dt``.

    Frequencies are spaced uniformly on a logarithmic scale; each oscillator is
    integrated with the Newmark average-acceleration method.
    """
    if freq_num < 2:
        raise ValueError("At least two frequencies are needed for a response spectrum.")
    if not history_acc:
        raise ValueError("The acceleration history is empty.")

    log_start = math.log10(freq_start)
    logdf = (math.log10(freq_end) - log_start) / (freq_num - 1)
    dt2 = reg_dt * reg_dt
    spectrum = Spectrum()

    for n in range(freq_num):
        freq = 10.0 ** (log_start + n * logdf)
        om_n = 2.0 * _PI * freq
        om_d = om_n * xi
        dis1 = 0.0
        vel1 = 0.0
        acc1 = -1.0 * history_acc[0]
        kd = 1.0 + om_d * reg_dt + dt2 * om_n * om_n / 4.0
        pdmax = 0.0
        for ground in history_acc:
            dis2 = (
                (1.0 + om_d * reg_dt) * dis1
                + (reg_dt + 0.5 * om_d * dt2) * vel1
                + dt2 / 4.0 * acc1
                - dt2 / 4.0 * ground
            ) / kd
            acc2 = 4.0 / dt2 * (dis2 - dis1) - 4.0 / reg_dt * vel1 - acc1
            vel2 = vel1 + reg_dt / 2.0 * (acc1 + acc2)
            pdmax = max(pdmax, abs(dis2))
            dis1, vel1, acc1 = dis2, vel2, acc2

        spectrum.frequency.append(freq)
        spectrum.period.append(1.0 / freq)
        spectrum.displacement.append(pdmax)
        spectrum.velocity.append(pdmax * om_n)
        spectrum.acceleration.append(pdmax * om_n * om_n)
    return spectrum


def regularize(history_acc, history_time, reg_dt) -> tuple[list[float], list[float]]:
    """Resample a history onto a constant time step by linear interpolation.

    The time values must increase monotonically. Returns ``(times, values)``.
    """
    if not history_time:
        raise ValueError("The time history is empty.")
    if len(history_acc) != len(history_time):
        raise ValueError("The history and time vectors must be of the same size.")
    if reg_dt <= 0:
        raise ValueError("The regularization time step must be positive.")

    reg_time: list[float] = []
    reg_acc: list[float] = []
    current = history_time[0]
    for (t0, t1), (a0, a1) in zip(pairwise(history_time), pairwise(history_acc)):
        while t0 <= current <= t1:
            reg_acc.append(a0 + (current - t0) / (t1 - t0) * (a1 - a0))
            reg_time.append(current)
            current += reg_dt
    return reg_time, reg_acc


def check_equal_size(vectors) -> bool:
    """Return True if all the given sequences have the same length."""
    return all(len(v) == len(vectors[0]) for v in vectors)


def check_equal(vector1, vector2, percent_error=0.0) -> bool:
    """Return True if the sequences match element-wise within a percentage of the first."""
    if len(vector1) != len(vector2):
        return False
    return all(
        abs(a - b) <= abs(a * percent_error / 100) for a, b in zip(vector1, vector2)
    )


def is_negative_or_zero(values) -> bool:
    """Return True if any element is not positive."""
    return any(v <= 0 for v in values)


def mean(values) -> float:
    """Arithmetic mean of the values."""
    if not values:
        raise ValueError("Cannot compute the mean of an empty sample.")
    return sum(values) / len(values)


def mean_history(histories) -> list[float]:
    """Element-wise mean of several equally long histories."""
    if not histories:
        raise ValueError("No histories were given.")
    if not check_equal_size(histories):
        raise ValueError("Input vectors are all not of equal size.")
    count = len(histories)
    return [sum(column) / count for column in zip(*histories)]


def _check_interpolation(interpolation: str, what: str) -> None:
    if interpolation not in _INTERPOLATIONS:
        raise ValueError(f"Invalid interpolation type in {what} calculation.")


def median(values, interpolation="linear") -> float:
    """Median of the values; ``interpolation`` picks the value for even samples."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("Cannot compute the median of an empty sample.")
    size = len(ordered)
    if size % 2 != 0:
        return ordered[(size - 1) // 2]
    _check_interpolation(interpolation, "median")
    upper = ordered[size // 2]
    lower = ordered[size // 2 - 1]
    if interpolation == "linear":
        return (upper + lower) / 2.0
    if interpolation == "lower":
        return lower
    return upper


def percentile(values, percent, interpolation="linear") -> float:
    """Percentile of the values, ``percent`` being between 0 and 100."""
    ordered = sorted(values)
    if percent < 0.0 or percent > 100.0:
        raise ValueError("Percent should be between 0 and 100.")
    if not ordered:
        raise ValueError("Cannot compute a percentile of an empty sample.")
    position = percent / 100 * len(ordered)
    low_index = max(math.floor(position) - 1, 0)
    _check_interpolation(interpolation, "percentile")

    if interpolation == "lower":
        return ordered[low_index]

    remainder = math.fmod(percent / 100.0 * len(ordered), 1.0)
    if interpolation == "linear" and remainder == 0.0:
        return ordered[low_index]
    if low_index + 1 >= len(ordered):
        raise ValueError("The sample has no value above the requested percentile.")
    if interpolation == "higher":
        return ordered[low_index + 1]
    return ordered[low_index] + remainder * (ordered[low_index + 1] - ordered[low_index])


def standard_deviation(values) -> float:
    """Sample standard deviation (with the n - 1 denominator)."""
    if len(values) < 2:
        raise ValueError("At least two values are needed for a standard deviation.")
    centre = mean(values)
    total = sum((v - centre) ** 2 for v in values)
    return math.sqrt(total / (len(values) - 1))


def lognormal_standard_deviation(values) -> float:
    """Standard deviation of the natural logarithms of the values."""
    if is_negative_or_zero(values):
        raise ValueError(
            "One or more elements in the sample for calculating beta are non positive."
        )
    return standard_deviation([math.log(v) for v in values])


def _normal_cdf(x: float, mu: float, sigma: float) -> float:
    return 0.5 * (1.0 + math.erf((x - mu) / (sigma * math.sqrt(2.0))))


def greater_probability(demand_median, demand_scale, capacity_median, capacity_scale) -> float:
    """Probability that a lognormal demand exceeds a lognormal capacity."""
    location = math.log(demand_median) - math.log(capacity_median)
    scale = math.sqrt(demand_scale * demand_scale + capacity_scale * capacity_scale)
    return 1.0 - _normal_cdf(0.0, location, scale)


def _log10_or_inf(x: float) -> float:
    return -math.inf if x == 0 else math.log10(x)


def calc_log_likelihood(im, pf, loc, sca, n) -> float:
    """Log10-likelihood of failure fractions ``pf`` at intensities ``im``.

    The fragility is lognormal with median ``loc`` and log-standard deviation
    ``sca``; each observation is binomial with ``n`` trials.
    """
    if len(im) != len(pf):
        raise ValueError(
            "While calculating loglikelihood, intensity measure and failure probability "
            "vectors should be of the same size."
        )
    if is_negative_or_zero(im) or is_negative_or_zero(pf):
        raise ValueError(
            "While calculating loglikelihood, intensity measure or failure probability "
            "has a non-positive value."
        )
    if any(p > 1.0 for p in pf):
        raise ValueError(
            "While calculating loglikelihood, a value greater than 1 is found in the "
            "failure probability vector."
        )
    if sca <= 0:
        raise ValueError("While calculating loglikelihood, scale parameter should be positive.")
    if loc <= 0:
        raise ValueError(
            "While calculating loglikelihood, location parameter should be positive."
        )

    log_loc = math.log(loc)
    loglikelihood = 0.0
    for intensity, fraction in zip(im, pf):
        r = math.floor(n * fraction)
        log10_ncr = sum(math.log10(n - r + k) - math.log10(k) for k in range(1, r + 1))
        p = _normal_cdf(math.log(intensity), log_loc, sca)
        if p == 0:
            p = sys.float_info.min
        loglikelihood += log10_ncr + r * math.log10(p) + (n - r) * _log10_or_inf(1.0 - p)
    return loglikelihood


def maximize_log_likelihood(
    im, pf, loc_space, sca_space, n, brute_force, tolerance, gamma, num_rnd, seed
) -> tuple[float, float]:
    """Find the (location, scale) pair that maximizes :func:`calc_log_likelihood`.

    With ``brute_force`` the spaces are scanned with a step of 0.01; otherwise a
    randomized gradient descent with ``num_rnd`` starting points is used.
    Returns ``(0.0, 0.0)`` if no candidate improved on the start.
    """
    best = (0.0, 0.0)

    def neg_ll(loc: float, sca: float) -> float:
        return -calc_log_likelihood(im, pf, loc, sca, n)

    if brute_force:
        best_value = calc_log_likelihood(im, pf, loc_space[0], sca_space[0], n)
        loc = loc_space[0]
        while loc < loc_space[1]:
            sca = sca_space[0]
            while sca < sca_space[1]:
                value = calc_log_likelihood(im, pf, loc, sca, n)
                if value >= best_value:
                    best_value = value
                    best = (loc, sca)
                sca += 0.01
            loc += 0.01
        return best

    rng = random.Random(seed)
    dparam = 0.01
    base = sys.float_info.max
    index = 0
    while index < num_rnd:
        loc_rand = loc_space[0] + (loc_space[1] - loc_space[0]) * rng.random()
        sca_rand = sca_space[0] + (sca_space[1] - sca_space[0]) * rng.random()
        now = [loc_rand, sca_rand]
        before = [loc_rand + dparam, sca_rand + dparam]
        like_now = neg_ll(*now)
        like_before = neg_ll(*before)
        if like_now > like_before:
            now, before = before, now
            like_now, like_before = like_before, like_now

        restart = False
        while abs(like_now - like_before) > tolerance:
            grad_loc = (like_now - like_before) / (now[0] - before[0])
            grad_sca = (like_now - like_before) / (now[1] - before[1])
            like_before = like_now
            now = [now[0] - gamma * grad_loc, now[1] - gamma * grad_sca]
            if not (
                loc_space[0] <= now[0] <= loc_space[1]
                and sca_space[0] <= now[1] <= sca_space[1]
            ):
                restart = True
                break
            like_now = neg_ll(*now)
            if like_now < base:
                base = like_now
                best = (now[0], now[1])
        if not restart:
            index += 1
    return best


def zeropad(n, n_tot) -> str:
    """Pad ``n`` with leading zeros to the number of digits of ``n_tot``."""
    return str(n).zfill(len(str(n_tot)))


def glob_files(pattern) -> list[str]:
    """Sorted list of paths matching ``pattern``; a leading ``~`` is expanded."""
    return sorted(glob.glob(os.path.expanduser(pattern)))


def adjust(values, scale, offset) -> list[float]:
    """Scale and shift every value."""
    return [scale * v + offset for v in values]


def log10(values: Sequence[float]) -> list[float]:
    """Base-10 logarithm of every value; all values must be positive."""
    result = []
    for v in values:
        if v <= 0:
            raise ValueError(f"Cannot take the log of {v}.")
        result.append(math.log10(v))
    return result