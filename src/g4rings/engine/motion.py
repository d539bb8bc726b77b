# src/g4rings/engine/motion.py
"""
Default per-frame motion for animated ring elements.

Only PulsingBall and MarqueeBar move on their own; Ball and Bar are carried
by their ring's rotation alone. Times are in seconds.
"""

import math
from ..elements import MarqueeBar, PulsingBall, wrap_angle

PULSE_AMPLITUDE = 0.5     # fraction of base_radius
MARQUEE_WINDOW = 0.5      # visible fraction of the base span

def pulse_radius(base_radius: float, pulse_freq: float, pulse_time: float) -> float:
    return base_radius * (1 + PULSE_AMPLITUDE * math.sin(2 * math.pi * pulse_freq * pulse_time))

def sweep_phase(sweep_freq: float, sweep_time: float) -> float:
    """0 at t=0, rising to 1 at half a period and back."""
    return (1 - math.cos(2 * math.pi * sweep_freq * sweep_time)) / 2

def move_element(element, d_time: float, d_raw_time: float, absolute_time: float) -> None:
    """
    Advance one element by d_time (already scaled by slow-motion).
    d_raw_time and absolute_time are part of the provider signature and
    unused by the built-in motion.
    """
    if isinstance(element, PulsingBall):
        element.pulse_time += d_time
        element.radius = pulse_radius(element.base_radius, element.pulse_freq, element.pulse_time)
    elif isinstance(element, MarqueeBar):
        element.sweep_time += d_time
        span = element.base_end - element.base_start
        window = span * MARQUEE_WINDOW
        p = sweep_phase(element.sweep_freq, element.sweep_time)
        element.angle_length = window
        element.angle_start = wrap_angle(element.base_start + p * (span - window))
