# shiftpay/core/config.py

from pathlib import Path
from typing import Final

# ==========================
# Tid och dygn
# ==========================

#: Antal minuter per dygn. Ett skift som slutar <= start flyttas fram så här mycket.
MINUTES_PER_DAY: Final[int] = 24 * 60

#: Antal minuter per timme. Används när minuter räknas om till timlön.
MINUTES_PER_HOUR: Final[int] = 60


# ==========================
# Nattillägg
# ==========================

#: Nattfönstrets start, minuter efter midnatt (22:00).
#: Fast värde. Inställningen night_shift_start påverkar inte beräkningen.
NIGHT_START_MINUTE: Final[int] = 22 * 60

#: Nattfönstrets slut, minuter efter midnatt (05:00), exklusivt.
NIGHT_END_MINUTE: Final[int] = 5 * 60

#: Multiplikator för nattminuter. Normal timlön * 1.25.
NIGHT_PREMIUM_MULTIPLIER: Final[float] = 1.25


# ==========================
# Löneperioder
# ==========================

#: Brytdag som betyder "sista dagen i månaden".
END_OF_MONTH_CLOSING_DATE: Final[int] = 31

#: Brytdag när inställningen saknas.
DEFAULT_CLOSING_DATE: Final[int] = END_OF_MONTH_CLOSING_DATE

#: Minsta tillåtna brytdag.
MIN_CLOSING_DATE: Final[int] = 1

#: Periodens sista tidpunkt på brytdagen (23:59:59.999).
PERIOD_END_MICROSECOND: Final[int] = 999_000


# ==========================
# Inställningar
# ==========================

#: Standardsökväg till inställningsfilen. Kan ersättas med SHIFTPAY_SETTINGS_FILE.
DEFAULT_SETTINGS_FILE: Final[Path] = Path("data/settings.json")

#: Företagsnamn som visas när inget är sparat.
DEFAULT_COMPANY_NAME: Final[str] = "My Company"

#: Visningsvärde för nattskiftets start när inget är sparat.
DEFAULT_NIGHT_SHIFT_START: Final[str] = "22:00"
