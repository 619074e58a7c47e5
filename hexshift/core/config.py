#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexshift/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Luma Coefficients (Source: ITU-R BT.601)
LUMA_R = 0.299                     # Red component contribution to luma
LUMA_G = 0.587                     # Green component contribution to luma
LUMA_B = 0.114                     # Blue component contribution to luma

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
HUE_SECTOR = 60.0                  # Degrees per HSV sector
HSV_HUE_MOD = 6.0                  # Hue sector divisor for HSV
HUE_SECTOR_BLUE = 4.0              # Sector offset when blue is the max channel
HUE_SECTOR_GREEN = 2.0             # Sector offset when green is the max channel
PERCENT_TO_FACTOR = 100.0          # Divisor to convert percentage values to decimal factors
HUE_EPS = 1e-9                     # Tolerance when truncating hue to whole degrees

# ==========================================
# Lookup Table Partitions
# ==========================================

# Luma bands: (name, low, high). Half-open except the last one.
LUMA_BANDS = (
    ("darkest", 0.0, 0.15),        # backgrounds
    ("darkish", 0.15, 0.35),       # secondary backgrounds, gutters
    ("low_text", 0.35, 0.42),      # normal low text, params
    ("keywords", 0.42, 0.60),      # keywords, numbers, classes
    ("text", 0.60, 0.75),          # text
    ("bright", 0.75, 1.0),         # everything else
)

# Hue bands in degrees: (name, low, high). Half-open except the last one.
HUE_BANDS = (
    ("red_orange", 0, 35),
    ("orange_yellow", 35, 70),
    ("yellow_green", 70, 105),
    ("green_light_green", 105, 145),
    ("light_green_teal", 145, 180),
    ("teal_blue", 180, 215),
    ("blue_dark_blue", 215, 250),
    ("dark_blue_purple", 250, 285),
    ("purple_pink", 285, 320),
    ("pink_red", 320, 360),
)

# Keywords sit mostly in teal; the boundary moves up to keep them together.
HUE_BANDS_KEYWORDS = (
    ("red_orange", 0, 35),
    ("orange_yellow", 35, 70),
    ("yellow_green", 70, 105),
    ("green_light_green", 105, 145),
    ("light_green_teal", 145, 190),
    ("teal_blue", 190, 215),
    ("blue_dark_blue", 215, 250),
    ("dark_blue_purple", 250, 285),
    ("purple_pink", 285, 320),
    ("pink_red", 320, 360),
)

HUE_BANDS_BY_LUMA = {
    "keywords": HUE_BANDS_KEYWORDS,
}

# ==========================================
# Pipeline & Theme Defaults
# ==========================================

GLOBAL_BOOST = (0, 10.0, 10.0)     # (hue, saturation, brightness) added after the table
DEFAULT_SUFFIX = "high"
DEFAULT_BASE_NAME = "retro-block"
SCHEME_EXT = ".xml"
THEME_EXT = ".theme.json"
NAME_SEPARATOR = " - "             # "<display name> - <suffix>"
FILE_SEPARATOR = "-"               # "<stem>-<suffix>.<ext>"
JSON_INDENT = 2
FILE_MODE = 0o666                  # Output permissions before the umask, as open() uses

# ==========================================
# CLI UI & Data Structures
# ==========================================

MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
