from datetime import date

_MONTHS = {
    "pt_BR": (
        "janeiro", "fevereiro", "março", "abril", "maio", "junho",
        "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
    ),
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
}

# Indexed by date.weekday()
_WEEKDAYS = {
    "pt_BR": (
        "segunda-feira", "terça-feira", "quarta-feira", "quinta-feira",
        "sexta-feira", "sábado", "domingo",
    ),
    "en": ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
}

DEFAULT_LOCALE = "pt_BR"


def _locale(locale: str) -> str:
    return locale if locale in _MONTHS else DEFAULT_LOCALE


def selected_date_label(d: date, locale: str = DEFAULT_LOCALE) -> str:
    """'Dia 15 de março' (pt_BR) or 'March 15' (en)."""
    loc = _locale(locale)
    month_name = _MONTHS[loc][d.month - 1]
    if loc == "en":
        return f"{month_name} {d.day:02d}"
    return f"Dia {d.day:02d} de {month_name}"


def weekday_label(d: date, locale: str = DEFAULT_LOCALE) -> str:
    return _WEEKDAYS[_locale(locale)][d.weekday()]
