# src/g4rings/elements.py
# Level descriptor types. Angles are fractions of a full turn, not radians.

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

def wrap_angle(angle: float) -> float:
    """Fold an angle into [0,1)."""
    a = angle % 1.0
    # -1e-18 % 1.0 == 1.0 in floating point
    return 0.0 if a >= 1.0 else a

@dataclass
class Ball:
    angle: float
    distance: float
    radius: float
    kind = "ball"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "angle": self.angle,
                "distance": self.distance, "radius": self.radius}

@dataclass
class PulsingBall:
    angle: float
    distance: float
    radius: float
    base_radius: float
    pulse_freq: float
    pulse_time: float = 0.0
    kind = "pulsingBall"

    @classmethod
    def create(cls, angle: float, distance: float, radius: float, pulse_freq: float) -> "PulsingBall":
        return cls(angle, distance, radius, base_radius=radius, pulse_freq=pulse_freq)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "angle": self.angle,
                "distance": self.distance, "radius": self.radius,
                "baseRadius": self.base_radius, "pulseFreq": self.pulse_freq,
                "pulseTime": self.pulse_time}

@dataclass
class Bar:
    angle_start: float
    angle_length: float
    distance: float
    radius: float
    kind = "bar"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "angleStart": self.angle_start,
                "angleLength": self.angle_length,
                "distance": self.distance, "radius": self.radius}

@dataclass
class MarqueeBar:
    angle_start: float
    angle_length: float
    distance: float
    radius: float
    sweep_freq: float
    base_start: float
    base_end: float
    sweep_time: float = 0.0
    kind = "marqueeBar"

    @classmethod
    def create(cls, angle_start: float, angle_length: float, distance: float,
               radius: float, sweep_freq: float) -> "MarqueeBar":
        # base_end may run past 1.0; the sweep works on the unwrapped span
        return cls(angle_start, angle_length, distance, radius, sweep_freq,
                   base_start=angle_start, base_end=angle_start + angle_length)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "angleStart": self.angle_start,
                "angleLength": self.angle_length,
                "distance": self.distance, "radius": self.radius,
                "sweepFreq": self.sweep_freq, "sweepTime": self.sweep_time,
                "baseStart": self.base_start, "baseEnd": self.base_end}

RingElement = Union[Ball, PulsingBall, Bar, MarqueeBar]

@dataclass
class Ring:
    items: List[RingElement]
    speed_mult: float
    is_distraction: bool = False
    rotation: float = 0.0   # advanced by the animation layer

    def to_dict(self) -> Dict[str, Any]:
        return {"items": [e.to_dict() for e in self.items],
                "speedMult": self.speed_mult,
                "isDistraction": self.is_distraction,
                "rotation": self.rotation}

@dataclass
class Cannon:
    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0
    freq_multiplier: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "angle": self.angle,
                "freqMultiplier": self.freq_multiplier}

@dataclass
class SlowMode:
    is_slow: bool = False
    time: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {"isSlow": self.is_slow, "time": self.time}

@dataclass
class GameData:
    """
    Everything the game needs to start a level. Built once per level start;
    only the animation/game-state layer mutates it afterwards.
    """
    level_index: int
    user_record: float
    mode: str
    rings: List[Ring] = field(default_factory=list)
    rotation: float = 0.0
    cannon: Cannon = field(default_factory=Cannon)
    slow: SlowMode = field(default_factory=SlowMode)

    def iter_elements(self):
        for ring in self.rings:
            yield from ring.items

    def to_dict(self) -> Dict[str, Any]:
        """camelCase export with a "type" tag per element, as the front end reads it."""
        return {
            "levelIndex": self.level_index,
            "userRecord": self.user_record,
            "mode": self.mode,
            "rotation": self.rotation,
            "rings": [r.to_dict() for r in self.rings],
            "cannon": self.cannon.to_dict(),
            "slow": self.slow.to_dict(),
        }
