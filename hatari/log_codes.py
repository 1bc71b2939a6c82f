"""
Log codes for settings resolution.
"""

SETTINGS = "settings"

SETTINGS_RESOLVED = f"{SETTINGS}.resolved"
SETTINGS_CONFIG_MISSING_SECTION = f"{SETTINGS}.missing_section"
SETTINGS_INVALID_VALUE = f"{SETTINGS}.invalid_value"
