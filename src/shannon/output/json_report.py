"""JSON reporter for benchmark runs."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from shannon import __version__
from shannon.bench.models import BenchReport


def to_dict(report: BenchReport) -> Dict[str, Any]:
    """Convert BenchReport to a JSON-serialisable dict."""
    results_list: List[Dict[str, Any]] = []
    for r in report.results:
        results_list.append({
            "name": r.name,
            "size": r.size,
            "iterations": r.iterations,
            "mean_ns": round(r.mean_ns, 1),
            "min_ns": r.min_ns,
            "max_ns": r.max_ns,
            "entropy": r.entropy,
            **({"ns_per_char": round(r.ns_per_code_point, 3)} if r.size else {}),
        })

    return {
        "version": __version__,
        "charset": report.charset,
        "seed": report.seed,
        "total_iterations": report.total_iterations,
        "results": results_list,
        "duration_ms": report.duration_ms,
    }


def render(report: BenchReport) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(report), indent=2)
