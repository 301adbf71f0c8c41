"""Cardio session parsing.

Session slots are free text such as ``"Evening 6–7pm (Cardio LISS 45')"``.
Everything here is display templating over those strings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .catalog import DayPlan, cardio_key

CARDIO_RPE = "RPE 7–9"
HIIT_INSTRUCTION = "HIIT — 8–10 × 30s (50% HRmax) & 60s (95% HRmax)"

_CARDIO_RE = re.compile(r"Cardio|LISS|HIIT", re.IGNORECASE)
_HIIT_RE = re.compile(r"HIIT", re.IGNORECASE)
_LISS_RE = re.compile(r"LISS", re.IGNORECASE)
_PAREN_RE = re.compile(r"\(([^)]+)\)")
_DIGITS_RE = re.compile(r"(\d+)")
_TIME_RE = re.compile(r"^([^(]+)")


@dataclass(frozen=True, slots=True)
class CardioSession:
    label: str
    time: str
    kind: str
    duration: str
    instruction: str


def is_cardio_session(label: str) -> bool:
    return bool(_CARDIO_RE.search(str(label or "")))


def session_time(label: str) -> str:
    m = _TIME_RE.match(str(label or ""))
    return m.group(1).strip() if m else ""


def cardio_instruction(kind: str, duration: str) -> str:
    if _HIIT_RE.search(kind):
        return HIIT_INSTRUCTION
    if _LISS_RE.search(kind):
        return f"LISS — {duration}' at 60-70% HRmax continuous"
    return kind


def parse_cardio_session(label: str) -> CardioSession:
    label = str(label or "")
    m = _PAREN_RE.search(label)
    kind = m.group(1).strip() if m else label
    d = _DIGITS_RE.search(kind)
    duration = d.group(1) if d else ""
    return CardioSession(
        label=label,
        time=session_time(label),
        kind=kind,
        duration=duration,
        instruction=cardio_instruction(kind, duration),
    )


def cardio_sessions(day_plan: DayPlan) -> list[CardioSession]:
    return [parse_cardio_session(s) for s in day_plan.sessions if is_cardio_session(s)]


def cardio_block(day_plan: DayPlan, day: str) -> dict | None:
    """Cardio card shown after the lifting groups, or None when the day has no cardio."""
    sessions = cardio_sessions(day_plan)
    if not sessions:
        return None
    return {
        "time": sessions[0].time,
        "rpe": CARDIO_RPE,
        "sessions": [
            {
                "key": cardio_key(day, i),
                "label": s.label,
                "kind": s.kind,
                "duration": s.duration,
                "instruction": s.instruction,
            }
            for i, s in enumerate(sessions)
        ],
    }
