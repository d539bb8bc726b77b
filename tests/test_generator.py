# tests/test_generator.py
from g4rings.rng import PMRandom
from g4rings.elements import Cannon, GameData, SlowMode
from g4rings.levelgen import dispatch
from g4rings.levelgen.generator import generate, get_registry
from g4rings.levelgen.progression import get_default_difficulties
from g4rings.modes.registry import ModeRegistry

def test_descriptor_fields():
    data = generate(5, 100, "hard", rng=PMRandom(77))
    assert isinstance(data, GameData)
    assert (data.level_index, data.user_record, data.mode) == (5, 100, "hard")
    assert data.rotation == 0
    assert data.cannon == Cannon(x=0, y=0, angle=0, freq_multiplier=1)
    assert data.slow == SlowMode(is_slow=False, time=0)
    assert len(data.rings) == 1   # level 5 is inner-only

def test_hard_level_five_uses_difficulty_three(monkeypatch):
    calls = []
    def fake(kind):
        def gen(difficulty, distance, rng, cfg=None):
            calls.append((kind, difficulty))
            return []
        return gen
    for kind in ("inner", "middle", "outer"):
        monkeypatch.setattr(dispatch, f"generate_{kind}_ring", fake(kind))

    generate(5, 100, "hard", rng=PMRandom(1))
    base = get_default_difficulties(5)
    want = [(k, 3) for k, d in zip(("inner", "middle", "outer"), base) if d]
    assert calls == want == [("inner", 3)]

def test_unknown_mode_gives_empty_level():
    data = generate(0, 0, "nonexistent-mode", rng=PMRandom(1))
    assert data.rings == []
    assert data.mode == "nonexistent-mode"

def test_same_seed_same_level():
    a = generate(31, 12, "normal", rng=PMRandom(2024))
    b = generate(31, 12, "normal", rng=PMRandom(2024))
    assert a.to_dict() == b.to_dict()

def test_unseeded_generation_works():
    data = generate(40, 0, "hell")
    assert len(data.rings) == 5

def test_each_call_builds_new_objects():
    a = generate(0, 0, "easy", rng=PMRandom(5))
    b = generate(0, 0, "easy", rng=PMRandom(5))
    assert a == b
    a.rings[0].items.clear()
    a.cannon.angle = 0.3
    assert b.rings[0].items and b.cannon.angle == 0

def test_custom_registry_is_used():
    class Fixed:
        name = "fixed"
        def get_rings(self, level_index, rng):
            return []
        def move_element(self, element, d_time, d_raw_time, absolute_time):
            pass
        def theme_colors(self):
            return None

    reg = ModeRegistry()
    reg.register(Fixed())
    assert generate(3, 0, "fixed", rng=PMRandom(1), registry=reg).rings == []
    # built-ins are not in this registry
    assert generate(3, 0, "normal", rng=PMRandom(1), registry=reg).rings == []

def test_process_registry_has_builtins():
    reg = get_registry()
    assert reg is get_registry()
    for name in ("easy", "normal", "hard", "hell", "hades", "denise", "reverse"):
        assert name in reg
