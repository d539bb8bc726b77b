import pytest
from g4rings.elements import Ball, Bar, MarqueeBar, PulsingBall
from g4rings.engine.motion import move_element, sweep_phase

def test_pulsing_ball_radius_follows_time():
    b = PulsingBall.create(0.5, 400, 20, 2)
    move_element(b, 0.125, 0.125, 0.125)
    assert b.radius == pytest.approx(30)
    move_element(b, 0.25, 0.25, 0.375)      # three quarters of a period
    assert b.pulse_time == pytest.approx(0.375)
    assert b.radius == pytest.approx(10)
    assert b.base_radius == 20

def test_static_elements_do_not_move():
    ball = Ball(0.3, 200, 50)
    bar = Bar(0.1, 0.2, 300, 10)
    move_element(ball, 1.0, 1.0, 1.0)
    move_element(bar, 1.0, 1.0, 1.0)
    assert ball == Ball(0.3, 200, 50)
    assert bar == Bar(0.1, 0.2, 300, 10)

def test_marquee_window_slides_between_bounds():
    m = MarqueeBar.create(0.2, 0.4, 300, 10, 1)
    move_element(m, 0.0, 0.0, 0.0)
    assert m.angle_start == pytest.approx(0.2)
    assert m.angle_length == pytest.approx(0.2)

    move_element(m, 0.5, 0.5, 0.5)          # half period: far end
    assert m.angle_start == pytest.approx(0.4)
    assert m.angle_start + m.angle_length == pytest.approx(m.base_end)

    move_element(m, 0.5, 0.5, 1.0)          # full period: back home
    assert m.angle_start == pytest.approx(0.2)
    assert (m.base_start, m.base_end) == pytest.approx((0.2, 0.6))

def test_marquee_wraps_start():
    m = MarqueeBar.create(0.9, 0.3, 300, 10, 1)
    move_element(m, 0.5, 0.5, 0.5)
    assert m.angle_start == pytest.approx(0.05)
    assert 0.0 <= m.angle_start < 1.0

def test_sweep_phase_range():
    for i in range(100):
        assert 0.0 <= sweep_phase(1.3, i * 0.037) <= 1.0
