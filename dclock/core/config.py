import json
from dclock.common.logger import log
from dclock.common.setup import PATHS


#region === Helpers and Paths ===

SETTINGS_PATH = PATHS.data / "settings.json"

# Default values for every setting the app understands. Types here are also what loaded values get checked against.
_SETTINGS_DEFAULTS = {
    "accent_color": "#7BABF3",
    "font": "Arial Rounded MT Bold",
    "always_on_top": False,
    "swipe_threshold": 50,
    "tick_ms": 1000,
    "slide_ms": 300,
    "window_width": 900,
    "window_height": 400,
}
# Helper to return a truly fresh, default settings dict.
def build_default_settings():
    return dict(_SETTINGS_DEFAULTS)

# bool is an int subclass, so it gets its own check in both directions.
def _is_valid(value, default):
    if isinstance(default, bool) or isinstance(value, bool):
        return isinstance(value, bool) and isinstance(default, bool)
    if isinstance(default, int):
        return isinstance(value, int) and value > 0
    return isinstance(value, type(default))

#endregion === Helpers and Paths ===

#region === Loading Settings ===

# Loads settings.json from PATHS.data, validating each known key and falling back to defaults. This never writes to
# disk; the file is purely hand-edited.
def load_settings(path=None):
    path = path or SETTINGS_PATH
    try:
        if not path.exists():
            log.info(f"No settings file at '{path}', using defaults.")
            return build_default_settings()

        with open(path, "r", encoding="utf-8") as f:
            loaded = json.load(f)
        if not isinstance(loaded, dict):
            raise TypeError(f"Expected a JSON object in settings file, got {type(loaded).__name__}")

        settings = build_default_settings()
        defaulted_values = set()
        for key, default in _SETTINGS_DEFAULTS.items():
            if key in loaded and _is_valid(loaded[key], default):
                settings[key] = loaded[key]
            else:
                defaulted_values.add(key)

        if defaulted_values:
            log.warning(f"Loaded settings from '{path}', but with missing or invalid values that were defaulted: {', '.join(sorted(defaulted_values))}")
        else:
            log.info(f"Successfully loaded settings from '{path}'.")
        return settings
    # Fall back to defaults in case of error, but warn in log
    except (json.JSONDecodeError, OSError, TypeError):
        log.warning(f"Ran into an error while trying to load '{path}', falling back to default settings.",exc_info=True)
        return build_default_settings()

#endregion === Loading Settings ===
