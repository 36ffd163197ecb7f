from __future__ import annotations
from types import MappingProxyType
from typing import Tuple

from ..core.types import Language, ObservanceDefinition


def _obs(key: str, en: str, ar: str, month: int, day: int) -> ObservanceDefinition:
    return ObservanceDefinition(key=key, names=MappingProxyType({Language.EN: en, Language.AR: ar}), month=month, day=day)


# Must stay sorted by (month, day); the projector relies on table order.
OBSERVANCES: Tuple[ObservanceDefinition, ...] = (
    _obs("islamic_new_year", "Islamic New Year", "رأس السنة الهجرية", 1, 1),
    _obs("ashura", "Day of Ashura", "يوم عاشوراء", 1, 10),
    _obs("mawlid", "Mawlid al-Nabi", "المولد النبوي", 3, 12),
    _obs("miraj", "Laylat al-Mi'raj", "ليلة المعراج", 7, 27),
    _obs("mid_shaban", "15th of Sha'ban", "النصف من شعبان", 8, 15),
    _obs("ramadan_start", "1st of Ramadan", "أول رمضان", 9, 1),
    _obs("laylat_al_qadr", "Laylat al-Qadr", "ليلة القدر", 9, 27),
    _obs("eid_al_fitr", "Eid al-Fitr", "عيد الفطر", 10, 1),
    _obs("arafah", "Day of Arafah", "يوم عرفة", 12, 9),
    _obs("eid_al_adha", "Eid al-Adha", "عيد الأضحى", 12, 10),
)


def observances_on(month: int, day: int) -> Tuple[ObservanceDefinition, ...]:
    return tuple(o for o in OBSERVANCES if o.month == month and o.day == day)
