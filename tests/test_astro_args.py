# tests/test_astro_args.py

import math

import pytest
from lunaryear.reference import astro_args as aa


def test_poly_eval_horner():
    # x^2 - 0.5x + 3 at x = 2
    assert aa.poly_eval([1.0, -0.5, 3.0], 2.0) == 6.0
    assert aa.poly_eval([], 5.0) == 0.0
    assert aa.poly_eval([7.0], 123.0) == 7.0


def test_normalize360():
    assert aa.normalize360(-10.0) == 350.0
    assert aa.normalize360(725.0) == 5.0
    assert aa.normalize360(360.0) == 0.0


def test_wrap180():
    assert aa.wrap180(190.0) == pytest.approx(-170.0)
    assert aa.wrap180(180.0) == 180.0
    assert aa.wrap180(-180.0) == 180.0
    assert aa.wrap180(-0.5) == pytest.approx(-0.5)


def test_angle_conversions():
    assert aa.to_rad(180.0) == pytest.approx(math.pi)
    assert aa.to_deg(math.pi / 2) == pytest.approx(90.0)
    assert aa.to_deg(aa.to_rad(123.456)) == pytest.approx(123.456, abs=1e-12)


def test_meeus_example_25a_time_variable():
    """
    Jean Meeus, Astronomical Algorithms (2nd Ed), Example 25.a.
    Date: 1992 October 13, 0h TD. JD: 2448908.5
    """
    assert aa.T_centuries(2448908.5) == pytest.approx(-0.072183436, abs=1e-9)
    assert aa.T_millennia(2448908.5) == pytest.approx(-0.0072183436, abs=1e-10)
