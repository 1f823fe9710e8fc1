"""
polycal.engines.specs
---------------------
Static descriptors for every supported calendar: names, eras, month names
and validity windows. Pure data; the factory turns these into converters.
"""

from __future__ import annotations

from typing import Dict, Tuple

from ..core.time import gregorian_to_jdn
from ..core.types import CalendarDescriptor, CalendarId
from .aztec import AZTEC_EPOCH
from .bahai import BAHAI_EPOCH
from .chinese import CHINESE_EPOCH
from .coptic import COPTIC_EPOCH
from .ethiopian import ETHIOPIAN_EPOCH
from .gregorian import GREGORIAN_EPOCH
from .hebrew import HEBREW_EPOCH
from .islamic import ISLAMIC_EPOCH
from .julian import JULIAN_EPOCH
from .mayan import MAYAN_EPOCH
from .persian import PERSIAN_EPOCH
from .saka import SAKA_EPOCH
from .thai import THAI_EPOCH


# ============================================================
# VALIDITY WINDOWS
# ============================================================

# Closed-form calendars: 10000 BCE .. 9999 CE (Gregorian).
ENGINE_MIN_JDN = gregorian_to_jdn(-9999, 1, 1)
ENGINE_MAX_JDN = gregorian_to_jdn(9999, 12, 31)

# Calendars driven by the solar/lunar series: 1000 BCE .. 2999 CE, where the
# truncated series and the Delta T fit stay well inside a day.
ASTRO_MIN_JDN = gregorian_to_jdn(-999, 1, 1)
ASTRO_MAX_JDN = gregorian_to_jdn(2999, 12, 31)


# ============================================================
# MONTH NAMES
# ============================================================

_ENGLISH = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_ENGLISH_SHORT = tuple(name[:3] for name in _ENGLISH)

MONTH_NAMES: Dict[CalendarId, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    CalendarId.GREGORIAN: (_ENGLISH, _ENGLISH_SHORT),
    CalendarId.JULIAN: (_ENGLISH, _ENGLISH_SHORT),
    CalendarId.ISLAMIC: (
        ("Muharram", "Safar", "Rabi' al-awwal", "Rabi' al-thani", "Jumada al-awwal", "Jumada al-thani",
         "Rajab", "Sha'ban", "Ramadan", "Shawwal", "Dhu al-Qi'dah", "Dhu al-Hijjah"),
        ("Muh", "Saf", "Rab I", "Rab II", "Jum I", "Jum II", "Raj", "Sha'", "Ram", "Shaw", "Dhu Q", "Dhu H"),
    ),
    CalendarId.HEBREW: (
        ("Nisan", "Iyar", "Sivan", "Tammuz", "Av", "Elul",
         "Tishrei", "Cheshvan", "Kislev", "Tevet", "Shevat", "Adar", "Adar II"),
        ("Nis", "Iyy", "Siv", "Tam", "Av", "Elu", "Tis", "Che", "Kis", "Tev", "She", "Ada", "Ada II"),
    ),
    CalendarId.PERSIAN: (
        ("Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
         "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand"),
        ("Far", "Ord", "Kho", "Tir", "Mor", "Sha", "Meh", "Aba", "Aza", "Dey", "Bah", "Esf"),
    ),
    CalendarId.CHINESE: (
        ("正月", "二月", "三月", "四月", "五月", "六月", "七月", "八月", "九月", "十月", "十一月", "十二月"),
        ("正", "二", "三", "四", "五", "六", "七", "八", "九", "十", "十一", "十二"),
    ),
    CalendarId.ETHIOPIAN: (
        ("Meskerem", "Tikimt", "Hidar", "Tahsas", "Tir", "Yekatit", "Megabit",
         "Miazia", "Genbot", "Sene", "Hamle", "Nehase", "Pagume"),
        ("Mes", "Tik", "Hid", "Tah", "Tir", "Yek", "Meg", "Mia", "Gen", "Sen", "Ham", "Neh", "Pag"),
    ),
    CalendarId.COPTIC: (
        ("Tout", "Baba", "Hator", "Koiak", "Tobi", "Meshir", "Paremhat",
         "Paremoude", "Pashons", "Paoni", "Epip", "Mesori", "Pi Kogi Enavot"),
        ("Tou", "Bab", "Hat", "Koi", "Tob", "Mes", "Par", "Par", "Pas", "Pao", "Epi", "Mes", "PiK"),
    ),
    CalendarId.INDIAN_SAKA: (
        ("Chaitra", "Vaisakha", "Jyeshtha", "Ashadha", "Shravana", "Bhadra",
         "Ashwin", "Kartika", "Agrahayana", "Pausha", "Magha", "Phalguna"),
        ("Cha", "Vai", "Jye", "Ash", "Shr", "Bha", "Ash", "Kar", "Agr", "Pau", "Mag", "Pha"),
    ),
    # Month 0 (Ayyám-i-Há) is named by the converter.
    CalendarId.BAHAI: (
        ("Bahá", "Jalál", "Jamál", "ʻAẓamat", "Núr", "Raḥmat", "Kalimát", "Kamál", "Asmáʼ", "ʻIzzat",
         "Mashíyyat", "ʻIlm", "Qudrat", "Qawl", "Masáʼil", "Sharaf", "Sulṭán", "Mulk", "ʻAláʼ"),
        ("Bah", "Jal", "Jam", "Aẓa", "Núr", "Raḥ", "Kal", "Kam", "Asm", "Izz",
         "Mas", "Ilm", "Qud", "Qaw", "Mas", "Sha", "Sul", "Mul", "Ala"),
    ),
    CalendarId.THAI_BUDDHIST: (
        ("มกราคม", "กุมภาพันธ์", "มีนาคม", "เมษายน", "พฤษภาคม", "มิถุนายน",
         "กรกฎาคม", "สิงหาคม", "กันยายน", "ตุลาคม", "พฤศจิกายน", "ธันวาคม"),
        ("ม.ค.", "ก.พ.", "มี.ค.", "เม.ย.", "พ.ค.", "มิ.ย.", "ก.ค.", "ส.ค.", "ก.ย.", "ต.ค.", "พ.ย.", "ธ.ค."),
    ),
    CalendarId.MAYAN_TZOLKIN: (
        ("Imix", "Ik'", "Ak'b'al", "K'an", "Chikchan", "Kimi", "Manik'", "Lamat", "Muluk", "Ok",
         "Chuwen", "Eb'", "B'en", "Ix", "Men", "K'ib'", "Kab'an", "Etz'nab'", "Kawak", "Ajaw"),
        ("Imi", "Ik", "Ak'", "K'an", "Chi", "Kim", "Man", "Lam", "Mul", "Ok",
         "Chu", "Eb", "B'en", "Ix", "Men", "K'ib", "Kab", "Etz", "Kaw", "Aja"),
    ),
    CalendarId.MAYAN_HAAB: (
        ("Pop", "Wo'", "Sip", "Sotz'", "Sek", "Xul", "Yaxk'in", "Mol", "Ch'en", "Yax",
         "Sak'", "Keh", "Mak", "K'ank'in", "Muwan", "Pax", "K'ayab'", "Kumk'u", "Wayeb'"),
        ("Pop", "Wo", "Sip", "Sot", "Sek", "Xul", "Yax", "Mol", "Ch'e", "Yax",
         "Sak", "Keh", "Mak", "K'an", "Muw", "Pax", "K'ay", "Kum", "Way"),
    ),
    CalendarId.MAYAN_LONGCOUNT: ((), ()),
    CalendarId.CHEROKEE: (
        ("Cold Moon", "Bony Moon", "Windy Moon", "Flower Moon", "Planting Moon", "Green Corn Moon",
         "Ripe Corn Moon", "Fruit Moon", "Nut Moon", "Harvest Moon", "Trading Moon", "Snow Moon"),
        ("Cold", "Bony", "Windy", "Flower", "Planting", "Green Corn",
         "Ripe Corn", "Fruit", "Nut", "Harvest", "Trading", "Snow"),
    ),
    CalendarId.IROQUOIS: (
        ("First Moon", "Second Moon", "Third Moon", "Fourth Moon", "Fifth Moon", "Sixth Moon",
         "Seventh Moon", "Eighth Moon", "Ninth Moon", "Tenth Moon", "Eleventh Moon", "Twelfth Moon",
         "Thirteenth Moon"),
        ("1st Moon", "2nd Moon", "3rd Moon", "4th Moon", "5th Moon", "6th Moon", "7th Moon",
         "8th Moon", "9th Moon", "10th Moon", "11th Moon", "12th Moon", "13th Moon"),
    ),
    CalendarId.AZTEC_XIUHPOHUALLI: (
        ("Atlcahualo", "Tlacaxipehualiztli", "Tozoztontli", "Huey Tozoztli", "Toxcatl",
         "Etzalcualiztli", "Tecuilhuitontli", "Huey Tecuilhuitl", "Tlaxochimaco", "Xocotlhuetzi",
         "Ochpaniztli", "Teotleco", "Tepeilhuitl", "Quecholli", "Panquetzaliztli", "Atemoztli",
         "Tititl", "Izcalli", "Nemontemi"),
        ("Atlc", "Tlac", "Toz", "Huey", "Tox", "Etz", "Tec", "Huey T", "Tlax", "Xoc",
         "Och", "Teot", "Tepe", "Que", "Pan", "Atem", "Titi", "Izca", "Nemo"),
    ),
}


# ============================================================
# DESCRIPTORS
# ============================================================

def _spec(
    cid: CalendarId,
    name: str,
    native_name: str,
    kind: str,
    epoch_jdn: int,
    era_name: str,
    days_in_year: str,
    *,
    min_jdn: int = ENGINE_MIN_JDN,
    max_jdn: int = ENGINE_MAX_JDN,
    description: str = "",
) -> CalendarDescriptor:
    names, short = MONTH_NAMES[cid]
    return CalendarDescriptor(
        id=cid,
        name=name,
        native_name=native_name,
        kind=kind,  # type: ignore[arg-type]
        epoch_jdn=epoch_jdn,
        era_name=era_name,
        month_names=names,
        month_names_short=short,
        days_in_year=days_in_year,
        min_jdn=min_jdn,
        max_jdn=max_jdn,
        description=description,
    )


DESCRIPTORS: Dict[CalendarId, CalendarDescriptor] = {
    d.id: d
    for d in (
        _spec(CalendarId.GREGORIAN, "Gregorian", "Gregorian", "solar", GREGORIAN_EPOCH, "", "365-366",
              description="Solar calendar of the 1582 reform; 97 leap years in 400."),
        _spec(CalendarId.JULIAN, "Julian", "Julian", "solar", JULIAN_EPOCH, "CE", "365-366",
              description="Solar calendar of 46 BCE with a leap day every fourth year."),
        _spec(CalendarId.ISLAMIC, "Islamic (Hijri)", "التقويم الهجري", "lunar", ISLAMIC_EPOCH, "AH", "354-355",
              description="Tabular lunar calendar; 11 leap years in each 30-year cycle."),
        _spec(CalendarId.HEBREW, "Hebrew (Jewish)", "הלוח העברי", "lunisolar", HEBREW_EPOCH, "AM", "353-385",
              min_jdn=HEBREW_EPOCH,
              description="Lunisolar calendar of the 19-year cycle; years start at the molad of Tishrei."),
        _spec(CalendarId.PERSIAN, "Persian (Jalali)", "گاهشماری جلالی", "solar", PERSIAN_EPOCH, "SH", "365-366",
              min_jdn=PERSIAN_EPOCH, max_jdn=ASTRO_MAX_JDN,
              description="Solar Hijri calendar; the year starts at the March equinox seen from Tehran."),
        _spec(CalendarId.CHINESE, "Chinese", "农历", "lunisolar", CHINESE_EPOCH, "CE", "353-385",
              min_jdn=ASTRO_MIN_JDN, max_jdn=ASTRO_MAX_JDN,
              description="Lunisolar calendar; new moons start months and the 24 solar terms place the leap month."),
        _spec(CalendarId.ETHIOPIAN, "Ethiopian", "የኢትዮጵያ ዘመን አቆጣጠር", "solar", ETHIOPIAN_EPOCH, "EE", "365-366",
              min_jdn=ETHIOPIAN_EPOCH,
              description="Twelve 30-day months and Pagume of 5 or 6 days (Amete Mihret era)."),
        _spec(CalendarId.COPTIC, "Coptic", "ⲛⲓⲙⲉⲧⲟⲩⲛⲓⲙⲓⲛⲓ", "solar", COPTIC_EPOCH, "AM", "365-366",
              min_jdn=COPTIC_EPOCH,
              description="Twelve 30-day months and the little month of 5 or 6 days (Era of the Martyrs)."),
        _spec(CalendarId.INDIAN_SAKA, "Indian National (Saka)", "शक संवत", "solar", SAKA_EPOCH, "Saka", "365-366",
              min_jdn=SAKA_EPOCH,
              description="Civil calendar of India (1957); Gregorian leap years."),
        _spec(CalendarId.BAHAI, "Baháʼí", "Badíʻ", "solar", BAHAI_EPOCH, "BE", "365-366",
              min_jdn=BAHAI_EPOCH,
              description="Nineteen months of nineteen days plus Ayyám-i-Há."),
        _spec(CalendarId.THAI_BUDDHIST, "Thai Buddhist", "พุทธศักราช", "solar", THAI_EPOCH, "BE", "365-366",
              min_jdn=THAI_EPOCH,
              description="Gregorian months and days counted in the Buddhist Era."),
        _spec(CalendarId.MAYAN_TZOLKIN, "Mayan Tzolk'in", "Tzolk'in", "count", MAYAN_EPOCH, "", "260",
              description="The 260-day count of 20 day names and 13 numbers."),
        _spec(CalendarId.MAYAN_HAAB, "Mayan Haab'", "Haab'", "count", MAYAN_EPOCH, "", "365",
              description="Eighteen 20-day months and the 5 days of Wayeb'."),
        _spec(CalendarId.MAYAN_LONGCOUNT, "Mayan Long Count", "Long Count", "count", MAYAN_EPOCH, "", "360 (tun)",
              min_jdn=MAYAN_EPOCH,
              description="Linear day count in baktun, katun, tun, uinal and kin."),
        _spec(CalendarId.CHEROKEE, "Cherokee", "ᎠᏂᏴᏫᏯᎢ", "solar", GREGORIAN_EPOCH, "CE", "365-366",
              description="Gregorian months under Cherokee moon names."),
        _spec(CalendarId.IROQUOIS, "Iroquois (Haudenosaunee)", "Haudenosaunee", "lunisolar", GREGORIAN_EPOCH,
              "CE", "365-366",
              description="Thirteen moons laid over the Gregorian year."),
        _spec(CalendarId.AZTEC_XIUHPOHUALLI, "Aztec Xiuhpohualli", "Xiuhpohualli", "count", AZTEC_EPOCH, "",
              "365",
              description="Eighteen 20-day veintenas and the 5 Nemontemi days, Caso correlation."),
    )
}
