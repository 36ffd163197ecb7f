"""Static name tables for months and weekdays."""
from __future__ import annotations
from typing import Dict, Tuple

from .types import CalendarSystem, Language, Weekday

MONTH_NAMES: Dict[Tuple[CalendarSystem, Language], Tuple[str, ...]] = {
    (CalendarSystem.GREGORIAN, Language.EN): (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    (CalendarSystem.GREGORIAN, Language.AR): (
        "يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
        "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
    ),
    (CalendarSystem.LUNAR, Language.EN): (
        "Muharram", "Safar", "Rabi al-Awwal", "Rabi al-Thani", "Jumada al-Awwal", "Jumada al-Thani",
        "Rajab", "Sha'ban", "Ramadan", "Shawwal", "Dhu al-Qi'dah", "Dhu al-Hijjah",
    ),
    (CalendarSystem.LUNAR, Language.AR): (
        "محرم", "صفر", "ربيع الأول", "ربيع الثاني", "جمادى الأولى", "جمادى الآخرة",
        "رجب", "شعبان", "رمضان", "شوال", "ذو القعدة", "ذو الحجة",
    ),
}

# Indexed by Weekday (Monday=0)
WEEKDAY_NAMES: Dict[Language, Tuple[str, ...]] = {
    Language.EN: ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    Language.AR: ("الاثنين", "الثلاثاء", "الأربعاء", "الخميس", "الجمعة", "السبت", "الأحد"),
}


def month_name(month: int, system: CalendarSystem | str, language: Language | str = Language.EN) -> str:
    """Month name, or "" when month is outside 1..12."""
    if month < 1 or month > 12:
        return ""
    return MONTH_NAMES[(CalendarSystem(system), Language(language))][month - 1]


def weekday_name(weekday: Weekday | int, language: Language | str = Language.EN) -> str:
    return WEEKDAY_NAMES[Language(language)][Weekday(weekday)]
