"""CLI entry point for the engine self-evaluation.

Usage:
    python scripts/run_evaluation.py                              # all presets
    python scripts/run_evaluation.py --presets enigma-i naval-m3  # subset
    python scripts/run_evaluation.py --vectors 20 --length 40     # quick run

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from enigmalab.config import load_settings
from enigmalab.utils.repro import make_run_dir, write_json, write_text
from enigmalab.evaluation import (
    EvaluationReport,
    analyze_all_components,
    run_roundtrip_tests,
    trace_stepping,
)
from enigmalab.machine.spec import get_template, list_presets

logger = logging.getLogger("run_evaluation")


def _cli_progress(message: str, current: int, total: int) -> None:
    """Print progress to stderr."""
    pct = (current / total * 100) if total > 0 else 0
    print(f"  [{current + 1}/{total}] ({pct:.0f}%) {message}", file=sys.stderr)


def main() -> None:
    settings = load_settings()

    parser = argparse.ArgumentParser(
        description="Rotor machine self-evaluation (involution, wiring, stepping)",
    )
    parser.add_argument(
        "--presets", nargs="+", default=None, choices=list_presets(),
        help="Preset configurations to evaluate (default: all)",
    )
    parser.add_argument(
        "--vectors", type=int, default=settings.roundtrip_vectors,
        help=f"Random texts per configuration (default: {settings.roundtrip_vectors})",
    )
    parser.add_argument(
        "--length", type=int, default=settings.roundtrip_text_length,
        help=f"Characters per text (default: {settings.roundtrip_text_length})",
    )
    parser.add_argument(
        "--trace-presses", type=int, default=26 * 26,
        help="Key presses recorded per stepping trace (default: 676)",
    )
    parser.add_argument(
        "--seed", type=int, default=settings.global_seed,
        help=f"Random seed (default: {settings.global_seed})",
    )
    parser.add_argument(
        "--output-dir", type=str, default=settings.runs_dir,
        help=f"Output directory (default: {settings.runs_dir})",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    names = args.presets or list_presets()
    specs = [get_template(n) for n in names]

    report = EvaluationReport()
    report.wiring_results = analyze_all_components()

    for idx, spec in enumerate(specs):
        _cli_progress(spec.name, idx, len(specs))
        report.roundtrip_results.append(run_roundtrip_tests(
            spec,
            num_vectors=args.vectors,
            text_length=args.length,
            seed=args.seed,
        ))
        report.stepping_traces.append(trace_stepping(spec, args.trace_presses))

    paths = make_run_dir(args.output_dir, "evaluation")
    write_json(paths.spec_json, {s.name: s.to_config_string() for s in specs})
    write_json(paths.report_json, report.to_dict())
    write_text(paths.summary_txt, report.to_summary())

    print(report.to_summary())
    print(f"\nAll results saved to: {paths.run_dir}")

    if report.failing_configs() or report.broken_components():
        logger.error(
            "Evaluation failed: configs=%s components=%s",
            report.failing_configs(), report.broken_components(),
        )
        sys.exit(1)


if __name__ == "__main__":
    main()
