# uiauto_electron/timings.py
"""
@file timings.py
@brief Timeout, polling and settle-delay presets for page objects.
"""

from __future__ import annotations
from copy import deepcopy
from typing import Any, Dict


TIMEOUT_FIELDS: Dict[str, Dict[str, Any]] = {
    # Element handle waits
    "exists_wait": {"timeout": 5.0, "interval": 0.1},
    "visibility_wait": {"timeout": 5.0, "interval": 0.1},
    "disappear_wait": {"timeout": 5.0, "interval": 0.1},
    # Collections
    "menu_open": {"timeout": 5.0, "interval": 0.1},
    "menu_settle": {"timeout": 1.0, "interval": 0.1},
    "submenu_probe": {"timeout": 2.0, "interval": 0.1},
    "suggest_loaded": {"timeout": 5.0, "interval": 0.1},
    "list_prime": {"timeout": 5.0, "interval": 0.1},
    "tree_container": {"timeout": 5.0, "interval": 0.1},
    # Frame switching
    "frame_container": {"timeout": 5.0, "interval": 0.1},
    "frame_poll": {"timeout": 5.0, "interval": 0.1},
    "active_frame": {"timeout": 5.0, "interval": 0.1},
}

PAUSE_FIELDS: Dict[str, float] = {
    "after_select_pause": 0.5,
    "scroll_page_pause": 0.1,
    "after_expand_pause": 0.2,
}

PRESET_OVERRIDES: Dict[str, Dict[str, Any]] = {
    "fast": {
        "exists_wait": {"timeout": 3.0, "interval": 0.05},
        "visibility_wait": {"timeout": 3.0, "interval": 0.05},
        "disappear_wait": {"timeout": 3.0, "interval": 0.05},
        "menu_open": {"timeout": 3.0, "interval": 0.05},
        "menu_settle": {"timeout": 0.5, "interval": 0.05},
        "submenu_probe": {"timeout": 1.0, "interval": 0.05},
        "after_select_pause": 0.25,
        "scroll_page_pause": 0.05,
        "after_expand_pause": 0.1,
    },
    "slow": {
        "exists_wait": {"timeout": 10.0, "interval": 0.2},
        "visibility_wait": {"timeout": 10.0, "interval": 0.2},
        "disappear_wait": {"timeout": 10.0, "interval": 0.2},
        "menu_open": {"timeout": 10.0, "interval": 0.2},
        "menu_settle": {"timeout": 2.0, "interval": 0.2},
        "suggest_loaded": {"timeout": 10.0, "interval": 0.2},
        "list_prime": {"timeout": 10.0, "interval": 0.2},
        "frame_container": {"timeout": 10.0, "interval": 0.2},
        "frame_poll": {"timeout": 10.0, "interval": 0.2},
        "active_frame": {"timeout": 10.0, "interval": 0.2},
        "after_select_pause": 0.8,
        "scroll_page_pause": 0.2,
        "after_expand_pause": 0.4,
    },
    "ci": {
        "exists_wait": {"timeout": 15.0, "interval": 0.3},
        "visibility_wait": {"timeout": 15.0, "interval": 0.3},
        "disappear_wait": {"timeout": 15.0, "interval": 0.3},
        "menu_open": {"timeout": 15.0, "interval": 0.3},
        "menu_settle": {"timeout": 3.0, "interval": 0.3},
        "submenu_probe": {"timeout": 3.0, "interval": 0.3},
        "suggest_loaded": {"timeout": 15.0, "interval": 0.3},
        "list_prime": {"timeout": 15.0, "interval": 0.3},
        "tree_container": {"timeout": 15.0, "interval": 0.3},
        "frame_container": {"timeout": 15.0, "interval": 0.3},
        "frame_poll": {"timeout": 15.0, "interval": 0.3},
        "active_frame": {"timeout": 15.0, "interval": 0.3},
        "after_select_pause": 1.0,
        "scroll_page_pause": 0.3,
        "after_expand_pause": 0.5,
    },
}


def list_presets() -> Dict[str, Dict[str, Any]]:
    return {"default": {}, **PRESET_OVERRIDES}


def build_preset_values(preset: str) -> Dict[str, Any]:
    preset_key = (preset or "default").lower()
    values: Dict[str, Any] = {}
    values.update(deepcopy(TIMEOUT_FIELDS))
    values.update(deepcopy(PAUSE_FIELDS))

    if preset_key == "default":
        return values

    overrides = PRESET_OVERRIDES.get(preset_key)
    if overrides is None:
        raise ValueError(f"Unknown timing preset: {preset}")

    for key, value in overrides.items():
        if key in TIMEOUT_FIELDS:
            base = deepcopy(values[key])
            base.update(value)
            values[key] = base
        else:
            values[key] = value

    return values
