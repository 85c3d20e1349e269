"""Involution testing: verify that translate(translate(T)) == T.

Generates randomized texts per machine configuration, enciphers each from
a fresh machine and deciphers the result from a second fresh machine set
to the same starting positions.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field, asdict
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from enigmalab.machine.alphabet import LETTERS, is_letter
from enigmalab.machine.builder import build_machine
from enigmalab.machine.registry import ComponentRegistry
from enigmalab.machine.spec import MachineSpec, get_template, list_presets

# Letters dominate; the rest must pass through untouched
_SYMBOL_POOL = list(LETTERS + LETTERS.lower() + " .,;:!?-'0123456789") + ["é", "ß", "€", "ж"]


@dataclass
class RoundtripFailure:
    """Details of a single failed roundtrip test vector."""
    vector_index: int
    plaintext: str
    ciphertext: str
    decrypted: str           # What the second pass returned (should equal normalized plaintext)
    error: Optional[str]     # Exception message if a pass threw


@dataclass
class RoundtripResult:
    """Aggregate result of roundtrip testing for one machine configuration."""
    config_name: str
    config_string: str
    rotor_count: int
    plug_count: int
    total_vectors: int
    passed: int
    failed: int
    failures: List[RoundtripFailure] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    seed: int = 1337

    @property
    def success_rate(self) -> float:
        return self.passed / self.total_vectors if self.total_vectors > 0 else 0.0

    @property
    def is_perfect(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        status = "PASS" if self.is_perfect else "FAIL"
        return (
            f"[{status}] {self.config_name or self.config_string}: "
            f"{self.passed}/{self.total_vectors} vectors passed "
            f"({self.elapsed_seconds:.2f}s)"
        )


def random_text(rng: np.random.Generator, length: int) -> str:
    """Mostly letters, with punctuation and non-ASCII symbols mixed in."""
    weights = np.array([6.0 if ch.isascii() and ch.isalpha() else 1.0 for ch in _SYMBOL_POOL])
    idx = rng.choice(len(_SYMBOL_POOL), size=length, p=weights / weights.sum())
    return "".join(_SYMBOL_POOL[i] for i in idx)


def normalized(text: str) -> str:
    """Letters uppercased, everything else unchanged."""
    return "".join(ch.upper() if is_letter(ch) else ch for ch in text)


def run_roundtrip_tests(
    spec: MachineSpec,
    *,
    num_vectors: int = 200,
    text_length: int = 120,
    seed: int = 1337,
    max_failures_recorded: int = 10,
    registry: Optional[ComponentRegistry] = None,
) -> RoundtripResult:
    """Run involution verification across many random texts.

    Args:
        spec: Machine configuration to test.
        num_vectors: Number of random texts to test.
        text_length: Characters per text.
        seed: Random seed for deterministic reproducibility.
        max_failures_recorded: Maximum number of failure details to keep.
        registry: Optional component registry; uses default if not provided.

    Returns:
        RoundtripResult with pass/fail counts and failure details.
    """
    reg = registry or ComponentRegistry()
    rng = np.random.default_rng(seed)
    passed = 0
    failed = 0
    failures: List[RoundtripFailure] = []

    start = time.perf_counter()

    for i in range(num_vectors):
        pt = random_text(rng, text_length)
        ct = dec = "<error>"
        error: Optional[str] = None
        try:
            ct = build_machine(spec, reg).translate_text(pt)
            dec = build_machine(spec, reg).translate_text(ct)
        except Exception as exc:
            error = f"{type(exc).__name__}: {exc}"

        if error is None and dec == normalized(pt) and len(ct) == len(pt):
            passed += 1
            continue

        failed += 1
        if len(failures) < max_failures_recorded:
            failures.append(RoundtripFailure(
                vector_index=i,
                plaintext=pt,
                ciphertext=ct,
                decrypted=dec,
                error=error,
            ))

    elapsed = time.perf_counter() - start

    return RoundtripResult(
        config_name=spec.name,
        config_string=spec.to_config_string(),
        rotor_count=len(spec.rotors),
        plug_count=len(spec.plugboard),
        total_vectors=num_vectors,
        passed=passed,
        failed=failed,
        failures=failures,
        elapsed_seconds=round(elapsed, 4),
        seed=seed,
    )


def run_all_presets(
    *,
    num_vectors: int = 200,
    text_length: int = 120,
    seed: int = 1337,
    progress_callback: Optional[Callable[[str, int, int], None]] = None,
) -> List[RoundtripResult]:
    """Run roundtrip tests for every preset configuration.

    Args:
        num_vectors: Number of texts per preset.
        text_length: Characters per text.
        seed: Random seed for reproducibility.
        progress_callback: Optional callback(preset_name, current_index, total).

    Returns:
        List of RoundtripResult sorted by preset name.
    """
    presets = list_presets()
    registry = ComponentRegistry()
    results: List[RoundtripResult] = []

    for idx, name in enumerate(presets):
        if progress_callback:
            progress_callback(name, idx, len(presets))

        result = run_roundtrip_tests(
            get_template(name),
            num_vectors=num_vectors,
            text_length=text_length,
            seed=seed,
            registry=registry,
        )
        results.append(result)

    return sorted(results, key=lambda r: r.config_name)
