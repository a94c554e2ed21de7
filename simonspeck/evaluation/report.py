"""Structured evaluation report builder.

Aggregates roundtrip, SAC and known-answer results into a single
serializable report.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from simonspeck.cipher.vectors import KnownAnswerResult
from simonspeck.utils.repro import utc_timestamp, write_json

from .avalanche import SACResult
from .roundtrip import RoundtripResult


@dataclass
class EvaluationReport:
    """Complete evaluation report aggregating all analysis results."""
    timestamp: str = ""
    roundtrip_results: List[RoundtripResult] = field(default_factory=list)
    sac_results: List[SACResult] = field(default_factory=list)
    known_answer_results: List[KnownAnswerResult] = field(default_factory=list)

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = utc_timestamp()

    def failing_variants(self) -> List[str]:
        names = {r.variant_name for r in self.roundtrip_results if not r.is_perfect}
        names.update(k.variant_name for k in self.known_answer_results if not k.passed)
        return sorted(names)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize full report for JSON export."""
        return {
            "timestamp": self.timestamp,
            "roundtrip": [r.to_dict() for r in self.roundtrip_results],
            "sac": [s.to_dict() for s in self.sac_results],
            "known_answers": [
                {**asdict(k), "passed": k.passed} for k in self.known_answer_results
            ],
            "summary": {
                "total_variants_tested": len(self.roundtrip_results),
                "roundtrip_all_pass": all(r.is_perfect for r in self.roundtrip_results),
                "sac_all_pass": all(s.passes_sac for s in self.sac_results),
                "known_answers_all_pass": all(k.passed for k in self.known_answer_results),
                "failing_variants": self.failing_variants(),
            },
        }

    def to_summary(self) -> str:
        lines = [f"Evaluation Report {self.timestamp}", "=" * 50]

        if self.known_answer_results:
            ok = sum(1 for k in self.known_answer_results if k.passed)
            lines.append(f"\nKnown Answers: {ok}/{len(self.known_answer_results)} variants match")
            for k in self.known_answer_results:
                lines.append(f"  {k.summary()}")

        if self.roundtrip_results:
            rt_pass = sum(1 for r in self.roundtrip_results if r.is_perfect)
            lines.append(f"\nRoundtrip Tests: {rt_pass}/{len(self.roundtrip_results)} variants pass")
            for r in self.roundtrip_results:
                lines.append(f"  {r.summary()}")

        if self.sac_results:
            lines.append("\nStrict Avalanche Criterion:")
            for s in self.sac_results:
                lines.append(f"  {s.summary()}")

        failing = self.failing_variants()
        if failing:
            lines.append("\nFailing: " + ", ".join(failing))
        return "\n".join(lines)

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        write_json(path, self.to_dict())
        return path
