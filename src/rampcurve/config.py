"""Declarative curve descriptions loaded from JSON."""

from __future__ import annotations

from dataclasses import dataclass
import json
import math
from pathlib import Path
from typing import Any

from .constants import LEAF_KINDS


def _pair(name: str, value) -> tuple[float, float]:
    try:
        low, high = value
        pair = (float(low), float(high))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a pair of numbers") from exc
    if not all(math.isfinite(v) for v in pair):
        raise ValueError(f"{name} values must be finite")
    return pair


@dataclass(frozen=True)
class SegmentConfig:
    """One leaf interpolator: its kind plus domain and range bounds.

    Domain ordering is checked when the interpolator is built, not here.
    """

    kind: str
    domain: tuple[float, float]
    range: tuple[float, float]

    def __post_init__(self) -> None:
        if self.kind not in LEAF_KINDS:
            raise ValueError(f"kind must be one of: {', '.join(LEAF_KINDS)}")
        object.__setattr__(self, "domain", _pair("domain", self.domain))
        object.__setattr__(self, "range", _pair("range", self.range))

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "SegmentConfig":
        if not isinstance(payload, dict):
            raise ValueError("segment must be an object")
        missing = [key for key in ("kind", "domain", "range") if key not in payload]
        if missing:
            raise ValueError(f"segment is missing keys: {', '.join(missing)}")
        return cls(kind=str(payload["kind"]), domain=payload["domain"], range=payload["range"])

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "domain": list(self.domain), "range": list(self.range)}


@dataclass(frozen=True)
class CurveConfig:
    """Ordered segments making up one curve."""

    segments: tuple[SegmentConfig, ...] = ()

    def __post_init__(self) -> None:
        segments = tuple(self.segments)
        for seg in segments:
            if not isinstance(seg, SegmentConfig):
                raise ValueError("segments must contain SegmentConfig entries")
        object.__setattr__(self, "segments", segments)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "CurveConfig":
        if not isinstance(payload, dict) or "segments" not in payload:
            raise ValueError("curve config requires a 'segments' list")
        raw = payload["segments"]
        if not isinstance(raw, list):
            raise ValueError("'segments' must be a list")
        return cls(tuple(SegmentConfig.from_dict(item) for item in raw))

    def to_dict(self) -> dict[str, Any]:
        return {"segments": [seg.to_dict() for seg in self.segments]}


def load_curve_config(path: str | Path) -> CurveConfig:
    with Path(path).open("r", encoding="utf-8") as fh:
        try:
            payload = json.load(fh)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{path} is not valid JSON: {exc}") from exc
    return CurveConfig.from_dict(payload)
