from __future__ import annotations

"""Per-run score aggregation and formatting. Nothing is persisted."""

from typing import Dict


def new_session_stats(max_points: int) -> Dict:
    """Create a new, empty stats structure."""
    return {"total": 0, "score": 0, "max_points": int(max_points), "correct": 0, "per_question": {}}


def update_stats(stats: Dict, key: str, points: int, correct: bool) -> None:
    """Record the outcome of a single question."""
    stats["total"] = int(stats.get("total", 0)) + 1
    stats["score"] = int(stats.get("score", 0)) + int(points)
    if correct:
        stats["correct"] = int(stats.get("correct", 0)) + 1
    per = stats.setdefault("per_question", {})
    per[key] = int(points)


def max_score(stats: Dict) -> int:
    return int(stats.get("total", 0)) * int(stats.get("max_points", 0))


def format_summary(stats: Dict) -> str:
    """Return a human-readable summary of stats."""
    max_points = int(stats.get("max_points", 0))
    lines = [
        f"Score: {stats.get('score', 0)}/{max_score(stats)}",
        f"Correct: {stats.get('correct', 0)}/{stats.get('total', 0)}",
    ]
    for key, points in stats.get("per_question", {}).items():
        lines.append(f"{key}: {points}/{max_points}")
    return "\n".join(lines)
