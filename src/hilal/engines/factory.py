"""
hilal.engines.factory
---------------------
Transforms pure data specifications into live, executable Engine objects.
"""

from __future__ import annotations
from dataclasses import replace

from hilal.core.types import EngineSpec
from hilal.engines.approx import ApproxLunarEngine, ApproxLunarParams


def tweak(spec: EngineSpec, **kwargs) -> EngineSpec:
    """Copy of spec with some payload parameters replaced."""
    return replace(spec, payload=replace(spec.payload, **kwargs))


def make_engine(spec: EngineSpec) -> ApproxLunarEngine:
    """The universal entry point."""
    if spec.kind == "approx" and isinstance(spec.payload, ApproxLunarParams):
        return ApproxLunarEngine(spec.id, spec.payload)
    raise TypeError(f"Unknown engine spec kind {spec.kind!r} with payload {type(spec.payload)}")
