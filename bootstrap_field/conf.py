from django.conf import settings

DEFAULTS = {
    "DEFAULT_LAYOUT": "default",
    "HORIZONTAL_CSS_CLASSES": {
        "offset": "col-sm-offset-3",
        "label": "col-sm-3",
        "wrapper": "col-sm-6",
        "error": "",
        "hint": "col-sm-3",
    },
    "FIELD_CONFIG": {},
}


def get_setting(name):
    """
    Read a key of the BOOTSTRAP_FIELD settings dict, falling back to DEFAULTS.
    Dict values are merged over their defaults.
    """
    user_settings = getattr(settings, "BOOTSTRAP_FIELD", {}) or {}
    default = DEFAULTS[name]
    value = user_settings.get(name, default)
    if isinstance(default, dict):
        return {**default, **value}
    return value
