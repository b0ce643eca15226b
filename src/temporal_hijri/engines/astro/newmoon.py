"""
temporal_hijri.engines.astro.newmoon
------------------------------------
Instants of true new moon (conjunction) after Meeus, Astronomical Algorithms,
ch. 49. The lunation index k counts from the new moon of 2000-01-06.
Accuracy is a few seconds of time near the present, degrading slowly over
millennia.
"""

from __future__ import annotations

import math

# Mean synodic month (days), Meeus.
SYNODIC_MONTH = 29.530588861
JDE_K0 = 2451550.09766


def jde_mean_new_moon(k: float) -> float:
    """
    Mean Julian Ephemeris Day (TT) of the k-th new moon relative to 2000.

      JDE = 2451550.09766 + 29.530588861 k
            + 0.00015437 T^2 - 0.000000150 T^3 + 0.00000000073 T^4,
      T = k / 1236.85.
    """
    T = k / 1236.85
    T2 = T * T
    T3 = T2 * T
    T4 = T2 * T2
    return (
        JDE_K0
        + SYNODIC_MONTH * k
        + 0.00015437 * T2
        - 0.000000150 * T3
        + 0.00000000073 * T4
    )


# (coefficient in days, E power, M multiple, M' multiple, F multiple, Ω multiple)
NEW_MOON_TERMS = (
    (-0.40720, 0, 0, 1, 0, 0),
    (0.17241, 1, 1, 0, 0, 0),
    (0.01608, 0, 0, 2, 0, 0),
    (0.01039, 0, 0, 0, 2, 0),
    (0.00739, 1, -1, 1, 0, 0),
    (-0.00514, 1, 1, 1, 0, 0),
    (0.00208, 2, 2, 0, 0, 0),
    (-0.00111, 0, 0, 1, -2, 0),
    (-0.00057, 0, 0, 1, 2, 0),
    (0.00056, 1, 1, 2, 0, 0),
    (-0.00042, 0, 0, 3, 0, 0),
    (0.00042, 1, 1, 0, 2, 0),
    (0.00038, 1, 1, 0, -2, 0),
    (-0.00024, 1, -1, 2, 0, 0),
    (-0.00017, 0, 0, 0, 0, 1),
    (-0.00007, 0, 2, 1, 0, 0),
    (0.00004, 0, 0, 2, -2, 0),
    (0.00004, 0, 3, 0, 0, 0),
    (0.00003, 0, 1, 1, -2, 0),
    (0.00003, 0, 0, 2, 2, 0),
    (-0.00003, 0, 1, 1, 2, 0),
    (0.00003, 0, -1, 1, 2, 0),
    (-0.00002, 0, -1, 1, -2, 0),
    (-0.00002, 0, 1, 3, 0, 0),
    (0.00002, 0, 0, 4, 0, 0),
)

# Planetary arguments A1..A14: (a0 deg, rate deg per lunation, coefficient days).
# A1 additionally carries -0.009173 T^2.
PLANETARY_TERMS = (
    (299.77, 0.107408, 0.000325),
    (251.88, 0.016321, 0.000165),
    (251.83, 26.651886, 0.000164),
    (349.42, 36.412478, 0.000126),
    (84.66, 18.206239, 0.000110),
    (141.74, 53.303771, 0.000062),
    (207.14, 2.453732, 0.000060),
    (154.84, 7.306860, 0.000056),
    (34.52, 27.261239, 0.000047),
    (207.19, 0.121824, 0.000042),
    (291.34, 1.844379, 0.000040),
    (161.72, 24.198154, 0.000037),
    (239.56, 25.513099, 0.000035),
    (331.55, 3.592518, 0.000023),
)


def jde_true_new_moon(k: int) -> float:
    """Julian Ephemeris Day (TT) of the true new moon of lunation k."""
    T = k / 1236.85
    T2 = T * T
    T3 = T2 * T
    T4 = T2 * T2

    E = 1.0 - 0.002516 * T - 0.0000074 * T2
    M = math.radians(2.5534 + 29.10535670 * k - 0.0000014 * T2 - 0.00000011 * T3)
    Mp = math.radians(
        201.5643 + 385.81693528 * k + 0.0107582 * T2 + 0.00001238 * T3 - 0.000000058 * T4
    )
    F = math.radians(
        160.7108 + 390.67050284 * k - 0.0016118 * T2 - 0.00000227 * T3 + 0.000000011 * T4
    )
    Om = math.radians(124.7746 - 1.56375588 * k + 0.0020672 * T2 + 0.00000215 * T3)

    corr = 0.0
    for coef, e_pow, m, mp, f, om in NEW_MOON_TERMS:
        corr += coef * (E ** e_pow) * math.sin(m * M + mp * Mp + f * F + om * Om)

    for i, (a0, rate, coef) in enumerate(PLANETARY_TERMS):
        a = a0 + rate * k
        if i == 0:
            a -= 0.009173 * T2
        corr += coef * math.sin(math.radians(a))

    return jde_mean_new_moon(k) + corr
