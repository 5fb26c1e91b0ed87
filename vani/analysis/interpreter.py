"""Turns a free-form model reply into an analysis result object."""

import json

from vani.analysis.models import FALLBACK_SUMMARY, AnalysisResult

_FENCE = "```"
_TAG_CHARS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_+-")


def interpret_response(raw: str) -> AnalysisResult:
    """Extract a JSON object from ``raw`` or build the fallback result.

    Candidates are tried in order: the first fenced block whose body is a
    ``{...}`` span, then the span from the first ``{`` to the last ``}`` of
    the whole text. The first candidate that parses to an object wins. This
    function never raises.
    """
    for candidate in (_fenced_candidate(raw), _brace_candidate(raw)):
        if candidate is None:
            continue
        parsed = _parse_object(candidate)
        if parsed is not None:
            return parsed
    return {"raw_response": raw, "analysis_summary": FALLBACK_SUMMARY}


def render_result(result: AnalysisResult) -> str:
    """Pretty JSON used for display and copy-to-clipboard."""
    return json.dumps(result, indent=2, ensure_ascii=False)


def is_fallback(result: AnalysisResult) -> bool:
    return result.get("analysis_summary") == FALLBACK_SUMMARY and "raw_response" in result


def _fenced_candidate(raw: str) -> str | None:
    start = raw.find(_FENCE)
    while start != -1:
        pos = start + len(_FENCE)
        while pos < len(raw) and raw[pos] in _TAG_CHARS:
            pos += 1
        while pos < len(raw) and raw[pos].isspace():
            pos += 1
        if raw.startswith("{", pos):
            end = raw.find(_FENCE, pos)
            if end == -1:
                return None
            body = raw[pos:end].rstrip()
            if body.endswith("}"):
                return body
        start = raw.find(_FENCE, start + len(_FENCE))
    return None


def _brace_candidate(raw: str) -> str | None:
    first = raw.find("{")
    last = raw.rfind("}")
    if first == -1 or last < first:
        return None
    return raw[first : last + 1]


def _reject_constant(name: str) -> float:
    raise ValueError(f"Invalid JSON constant: {name}")


def _parse_object(candidate: str) -> AnalysisResult | None:
    try:
        parsed = json.loads(candidate, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return None
    if not isinstance(parsed, dict):
        return None
    return parsed
