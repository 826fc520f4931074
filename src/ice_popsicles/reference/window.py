"""Run window and popsicle plot constants."""

from __future__ import annotations

from datetime import date

# Winter analysis window (inclusive).
DEFAULT_START_DATE = date(2020, 11, 1)
DEFAULT_END_DATE = date(2021, 3, 31)

# USGS parameter / statistic codes: discharge, daily mean.
DISCHARGE_PARAMETER_CD = "00060"
DAILY_MEAN_STAT_CD = "00003"

# Popsicle geometry, in plot units (days on x, percent on y).
STEM_WIDTH_DAYS = 40
STEM_BOTTOM = -20.0
LABEL_Y = -12.0
X_PAD_DAYS = 90
Y_LIMITS = (-25.0, 100.0)

# Output image, 10 x 10 inches.
IMAGE_SIZE_IN = (10.0, 10.0)
DEFAULT_DPI = 300
DEFAULT_OUTPUT_PATH = "ice_popsicles.png"
