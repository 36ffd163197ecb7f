from __future__ import annotations
from typing import Any, Dict

from ..core.names import month_name, weekday_name
from ..core.types import Language
from ..events.observances import observances_on
from .registry import register_attribute

def weekday_names(info) -> Dict[str, Any]:
    return {"weekday_name": {lang.value: weekday_name(info.weekday, lang) for lang in Language}}

def month_names(info) -> Dict[str, Any]:
    g, t = info.gregorian, info.lunar
    return {
        "gregorian_month": {lang.value: month_name(g.month, g.system, lang) for lang in Language},
        "lunar_month": {lang.value: month_name(t.month, t.system, lang) for lang in Language},
    }

def observances(info) -> Dict[str, Any]:
    t = info.lunar
    return {
        "observances": [
            {lang.value: o.name(lang) for lang in Language}
            for o in observances_on(t.month, t.day)
        ]
    }

register_attribute("weekday_name", weekday_names)
register_attribute("month_names", month_names)
register_attribute("observances", observances)
