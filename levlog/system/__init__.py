from .settings import Settings, SettingsData, SETTINGS_FILENAME
__all__ = ["Settings", "SettingsData", "SETTINGS_FILENAME"]
