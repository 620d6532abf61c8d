import numpy as np
from pathlib import Path

from linkrisk.scoring import Verdict
from linkrisk.utils import meter_color, sanitize_for_json, verdict_badge


def test_verdict_badge_accepts_enum_and_string():
    assert verdict_badge(Verdict.SAFE) == "✅"
    assert verdict_badge("UNSAFE") == "❌"
    assert verdict_badge(Verdict.SUSPICIOUS) == verdict_badge("SUSPICIOUS")


def test_verdict_badge_unknown_value_is_empty():
    assert verdict_badge("MAYBE") == ""
    assert verdict_badge(None) == ""


def test_meter_color_thresholds():
    assert meter_color(100) == "#2ecc71"
    assert meter_color(80) == "#2ecc71"
    assert meter_color(79) == "#f1c40f"
    assert meter_color(50) == "#f1c40f"
    assert meter_color(49) == "#e74c3c"


def test_sanitize_for_json_unboxes_numpy_and_paths():
    out = sanitize_for_json({"n": np.int64(3), "p": Path("a/b"), "t": (1, np.float64(0.5))})
    assert out == {"n": 3, "p": "a/b", "t": [1, 0.5]}
    assert type(out["n"]) is int
