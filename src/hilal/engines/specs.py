from __future__ import annotations

from datetime import date
from fractions import Fraction
from typing import Dict

from ..core.types import EngineId, EngineSpec
from .approx import ApproxLunarParams

# ============================================================
# APPROXIMATE LUNAR CONSTANTS
# ============================================================

# Mean lunar year in days (354.367)
MEAN_YEAR = Fraction(354367, 1000)

# Gregorian anchor of the lunar epoch
EPOCH = date(622, 7, 16)

APPROX_PARAMS = ApproxLunarParams(epoch=EPOCH, mean_year=MEAN_YEAR)

APPROX = EngineSpec(
    kind="approx",
    id=EngineId(family="approx", name="approx", version="1"),
    payload=APPROX_PARAMS,
)

ALL_SPECS: Dict[str, EngineSpec] = {
    "approx": APPROX,
}
