"""
Central configuration for the Ritmxoid rhythm engine.
All tunable parameters live here. Loaded from environment where applicable.

Numeric contracts (offsets, coefficients, periods) are NOT read from the
environment: scores are compared across profiles and exported for whole
years, so every environment must compute identical values.
"""
import os
from datetime import timedelta, timezone

from dotenv import load_dotenv

load_dotenv()

# ── Application time zone ─────────────────────────────────────────────────────
# Every instant entering the engine is reinterpreted in this fixed offset,
# keeping its wall-clock time and discarding any stored zone.
APP_UTC_OFFSET_HOURS = 5
APP_TZ = timezone(timedelta(hours=APP_UTC_OFFSET_HOURS), name="UTC+5")

# ── Balance levels ────────────────────────────────────────────────────────────
# (lower bound, level) checked top-down; anything below 30 is CRITICAL.
BALANCE_LEVELS = [
    (75, "SUPER_HIGH"),
    (60, "HIGH"),
    (45, "OPTIMAL"),
    (30, "LOW"),
]
BALANCE_LEVEL_FLOOR = "CRITICAL"

# Display colours used by the console report and the yearly calendar.
LEVEL_COLORS = {
    "CRITICAL":   "#44aa00",
    "LOW":        "#2196f3",
    "OPTIMAL":    "#ffd600",
    "HIGH":       "#ff9800",
    "SUPER_HIGH": "#ff1744",
}

RHYTHM_COLORS = {
    "motor":      "#ffd600",
    "physical":   "#cc0000",
    "sensory":    "#33b5e5",
    "analytical": "#9933cc",
}

# Allowed widths of the multi-day rhythm breakdown window.
BREAKDOWN_WINDOW_DAYS = (14, 28, 42, 49)

# ── Risk ──────────────────────────────────────────────────────────────────────
# Per rhythm category (Motor, Physical, Sensory, Analytical).
RISK_DAILY_COEFF     = (25, 13, 8, 4)
RISK_FORTNIGHT_COEFF = (15, 7, 5, 3)
RISK_MACRO_COEFF     = (10, 5, 3, 2)

# Moon within MOON_RISK_ORB degrees (exclusive) of these angles adds MOON_RISK.
MOON_RISK_ANGLES = (0.0, 90.0, 270.0)
MOON_RISK_ORB    = 7.0
MOON_RISK        = 10

# Ordinal day-of-year windows (inclusive) around equinoxes and solstices.
SEASONAL_RISK_WINDOWS = (
    (73, 86),
    (168, 176),
    (258, 271),
    (351, 359),
)
SEASONAL_RISK = 3

# Lightning marks on calendar cells: >= 25 → 1, >= 50 → 2, >= 75 → 3.
RISK_MARK_THRESHOLDS = (25, 50, 75)

# ── Celestial markers ─────────────────────────────────────────────────────────
FULL_MOON_REFERENCE = (1996, 1, 6, 16, 15)      # UTC
SYNODIC_MONTH_DAYS  = 29.530588
SUN_NOON_MINUTES    = 760                       # 12:40 → sun marker at 0°

# ── Activity schedule ─────────────────────────────────────────────────────────
# period / cycle in milliseconds.
ACTIVITY_CONFIG = {
    "digestion": {"period": 3085714,  "cycle": 86400000,  "name": "Digestion"},
    "aerobic":   {"period": 3085714,  "cycle": 86400000,  "name": "Aerobic"},
    "anaerobic": {"period": 6171428,  "cycle": 172800000, "name": "Anaerobic"},
    "sensory":   {"period": 9257142,  "cycle": 259200000, "name": "Sensory"},
    "sexual":    {"period": 64800000, "cycle": 259200000, "name": "Sexual"},
    "analytic":  {"period": 10800000, "cycle": 302400000, "name": "Analytic"},
}
ACTIVITY_SLOTS = 28
DIGESTION_SLOTS = frozenset({3, 7, 11, 15, 19, 23, 27})
# The sexual window starts this many periods into its cycle.
SEXUAL_PERIOD_OFFSET = 3

# ── Compatibility ─────────────────────────────────────────────────────────────
COMPATIBILITY_CYCLE = 14
COMPATIBILITY_BANDS = {
    "RESONANT": frozenset({0, 1, 12, 13}),
    "OPTIMAL":  frozenset({2, 3, 4, 9, 10, 11}),
    "POLAR":    frozenset({5, 6, 7, 8}),
}
BAND_COLORS = {
    "RESONANT": "cyan",
    "OPTIMAL":  "yellow",
    "POLAR":    "red",
}

RANKING_MODES = ("full", "basic", "reactive")

# ── Profiles ──────────────────────────────────────────────────────────────────
PROFILES_PATH  = os.getenv("PROFILES_PATH", "profiles.json")
ACTIVE_PROFILE = os.getenv("ACTIVE_PROFILE", "")    # id or name; empty → master

# ── Watch mode ────────────────────────────────────────────────────────────────
WATCH_INTERVAL_SECONDS = int(os.getenv("WATCH_INTERVAL_SECONDS", "60"))

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR   = os.getenv("LOG_DIR", "logs")
