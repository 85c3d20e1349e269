import json

import numpy as np
import pytest

from enigmalab.evaluation import (
    EvaluationReport,
    analyze_all_components,
    analyze_reflector_type,
    analyze_rotor_type,
    run_all_presets,
    run_roundtrip_tests,
    trace_stepping,
)
from enigmalab.evaluation.roundtrip import normalized, random_text
from enigmalab.machine.components_builtin import RotorType
from enigmalab.machine.registry import ComponentRegistry
from enigmalab.machine.spec import MachineSpec, get_template, list_presets


# ---------------------------------------------------------------------------
# Roundtrip (involution) checks
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("preset", list_presets())
def test_preset_roundtrip(preset):
    result = run_roundtrip_tests(get_template(preset), num_vectors=20, text_length=60, seed=7)
    assert result.is_perfect, result.failures
    assert result.passed == 20
    assert result.success_rate == 1.0
    assert result.config_name == preset


def test_run_all_presets_reports_progress():
    seen = []
    results = run_all_presets(
        num_vectors=3,
        text_length=20,
        progress_callback=lambda name, idx, total: seen.append((name, idx, total)),
    )
    assert [r.config_name for r in results] == list_presets()
    assert [s[0] for s in seen] == list_presets()
    assert all(r.is_perfect for r in results)


def test_random_text_is_deterministic():
    a = random_text(np.random.default_rng(1), 50)
    b = random_text(np.random.default_rng(1), 50)
    assert a == b
    assert len(a) == 50


def test_normalized_only_touches_ascii_letters():
    assert normalized("abc, ßé€ XyZ") == "ABC, ßé€ XYZ"


# ---------------------------------------------------------------------------
# Wiring analysis
# ---------------------------------------------------------------------------

def test_all_builtin_components_valid():
    results = analyze_all_components()
    assert len(results) == 11
    assert [r.kind for r in results].count("ROTOR") == 8
    assert all(r.is_valid for r in results), [r.summary() for r in results if not r.is_valid]


def test_rotor_analysis_reports_notches():
    res = analyze_rotor_type(ComponentRegistry().rotor_type("VIII"))
    assert res.notches == "ZM"
    assert res.to_dict()["is_valid"] is True


def test_identity_rotor_reports_fixed_points():
    res = analyze_rotor_type(RotorType.from_wiring("ID", "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "A"))
    assert len(res.fixed_points) == 26
    assert res.is_involution


def test_reflector_analysis():
    res = analyze_reflector_type(ComponentRegistry().reflector_type("B"))
    assert res.is_valid
    assert res.fixed_points == []


# ---------------------------------------------------------------------------
# Stepping traces
# ---------------------------------------------------------------------------

def test_trace_finds_double_step():
    trace = trace_stepping(MachineSpec.parse("B;I-A-A,II-D-A,III-U-A"), 3)
    assert trace.start_window == "ADU"
    assert trace.windows == ["ADV", "AEW", "BFX"]
    assert trace.stepped == [[0], [0, 1], [0, 1, 2]]
    assert trace.double_steps == [3]


def test_trace_plain_odometer():
    trace = trace_stepping(get_template("enigma-i"), 26)
    assert trace.keypresses == 26
    assert trace.double_steps == []
    assert trace.windows[-1] == "ABA"


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

def test_report_to_dict_is_json_serializable():
    report = EvaluationReport(
        roundtrip_results=[run_roundtrip_tests(get_template("enigma-i"), num_vectors=2, text_length=10)],
        wiring_results=analyze_all_components(),
        stepping_traces=[trace_stepping(get_template("enigma-i"), 5)],
    )
    d = json.loads(json.dumps(report.to_dict()))
    assert set(d["summary"]) == {
        "configs_tested",
        "roundtrip_all_pass",
        "wiring_all_valid",
        "failing_configs",
        "broken_components",
    }
    assert d["summary"]["roundtrip_all_pass"] is True
    assert d["summary"]["failing_configs"] == []
    assert report.timestamp
    assert "Roundtrip Tests: 1/1" in report.to_summary()
