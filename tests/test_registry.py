# tests/test_registry.py
import math
import pytest
from g4rings.config import GeneratorConfig
from g4rings.rng import PMRandom
from g4rings.elements import Ball, Ring, PulsingBall
from g4rings.levelgen.generator import generate
from g4rings.modes.provider import BuiltinModeProvider, ThemeColors
from g4rings.modes.registry import ModeRegistry, default_registry

class JasonMode:
    """Three fixed rings of five balls that wobble in and out."""
    name = "Jason"

    def get_rings(self, level_index, rng):
        return [
            Ring([Ball(i / 5 + off, dist, 30) for i in range(5)], 1, False)
            for off, dist in ((0.0, 200), (0.033, 300), (0.066, 400))
        ]

    def move_element(self, element, d_time, d_raw_time, absolute_time):
        if isinstance(element, Ball):
            phase = absolute_time * 3 + element.angle * 2 * math.pi
            element.radius = (math.sin(phase) / 2 + 0.5) * 50 + 20

    def theme_colors(self):
        return ThemeColors(
            background="#372F33", damage="#382C2D", foreground="#B56191",
            obstacle1="#B56191", obstacle2="#FFA96B",
            cannon="#ECD037", bullet="#FFFFFF",
        )

def test_default_registry_has_builtins():
    reg = default_registry()
    assert sorted(reg.names()) == sorted(["easy", "normal", "hard", "hell", "hades", "denise", "reverse"])
    assert len(reg) == 7
    assert isinstance(reg.get("hell"), BuiltinModeProvider)
    assert reg.get("nope") is None

def test_default_registry_is_fresh_each_time():
    a = default_registry()
    a.register(JasonMode())
    assert "Jason" not in default_registry()

def test_duplicate_and_empty_names_rejected():
    reg = default_registry()
    with pytest.raises(ValueError):
        reg.register(BuiltinModeProvider("normal"))

    class Nameless(JasonMode):
        name = ""
    with pytest.raises(ValueError):
        reg.register(Nameless())

def test_replace_and_unregister():
    reg = default_registry()
    jason = JasonMode()
    jason.name = "normal"
    reg.register(jason, replace=True)
    assert reg.get("normal") is jason
    reg.unregister("normal")
    assert "normal" not in reg
    with pytest.raises(KeyError):
        reg.unregister("normal")

def test_plugin_mode_generates_its_rings():
    reg = default_registry()
    reg.register(JasonMode())
    data = generate(9, 50, "Jason", rng=PMRandom(1), registry=reg)
    assert [len(r.items) for r in data.rings] == [5, 5, 5]
    assert [r.items[0].distance for r in data.rings] == [200, 300, 400]

def test_plugin_motion_and_theme():
    mode = JasonMode()
    ball = Ball(0.0, 200, 30)
    mode.move_element(ball, 0.016, 0.016, 0.0)
    assert ball.radius == pytest.approx(45)
    assert mode.theme_colors().cannon == "#ECD037"

def test_builtin_provider_delegates():
    p = BuiltinModeProvider("reverse")
    rings = p.get_rings(4, PMRandom(9))
    assert len(rings) == 2
    assert p.theme_colors() is None

    ball = PulsingBall.create(0.1, 400, 20, 2)
    p.move_element(ball, 0.125, 0.125, 0.125)   # quarter period at 2 Hz
    assert ball.pulse_time == pytest.approx(0.125)
    assert ball.radius == pytest.approx(30)

def test_builtin_provider_carries_config():
    p = BuiltinModeProvider("reverse", GeneratorConfig(outer_ball_radius=13))
    rings = p.get_rings(4, PMRandom(9))
    balls = [e for r in rings for e in r.items if isinstance(e, (Ball, PulsingBall))]
    assert balls and all(e.radius == 13 for e in balls)
