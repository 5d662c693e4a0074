import logging

from django.core.exceptions import ImproperlyConfigured

from core.utilis import merge_config, merge_css_classes

from .conf import get_setting

logger = logging.getLogger(__name__)

LAYOUT_DEFAULT = "default"
LAYOUT_HORIZONTAL = "horizontal"
LAYOUT_INLINE = "inline"
LAYOUTS = (LAYOUT_DEFAULT, LAYOUT_HORIZONTAL, LAYOUT_INLINE)

HORIZONTAL_TEMPLATE = "{label}\n{beginWrapper}\n{input}\n{error}\n{endWrapper}\n{hint}"

FORM_CSS_CLASSES = {
    LAYOUT_DEFAULT: "",
    LAYOUT_HORIZONTAL: "form-horizontal",
    LAYOUT_INLINE: "form-inline",
}


def validate_layout(layout):
    if layout not in LAYOUTS:
        raise ImproperlyConfigured(
            f"Invalid layout type: {layout!r}. Expected one of: {', '.join(LAYOUTS)}."
        )
    return layout


def get_layout(form):
    """Layout of `form`; plain Django forms use the configured default."""
    return getattr(form, "layout", None) or get_setting("DEFAULT_LAYOUT")


def create_layout_config(layout, instance_config=None):
    """
    Return the layout specific default configuration for a field.

    `instance_config` is the configuration the field is being built with; only
    its `horizontal_css_classes` entry is consulted, to size the horizontal grid.
    """
    validate_layout(layout)
    instance_config = instance_config or {}
    config = {
        "hint_options": {
            "tag": "p",
            "class": "help-block",
        },
        "error_options": {
            "tag": "p",
            "class": "help-block help-block-error",
        },
        "input_options": {
            "class": "form-control",
        },
    }

    if layout == LAYOUT_HORIZONTAL:
        config["template"] = HORIZONTAL_TEMPLATE
        css_classes = merge_config(
            get_setting("HORIZONTAL_CSS_CLASSES"),
            instance_config.get("horizontal_css_classes"),
        )
        config["horizontal_css_classes"] = css_classes
        config["wrapper_options"] = {"class": css_classes["wrapper"]}
        config["label_options"] = {"class": merge_css_classes("control-label", css_classes["label"])}
        config["error_options"] = {"class": merge_css_classes("help-block help-block-error", css_classes["error"])}
        config["hint_options"] = {"class": merge_css_classes("help-block", css_classes["hint"])}
    elif layout == LAYOUT_INLINE:
        config["label_options"] = {"class": "sr-only"}
        config["enable_error"] = False

    logger.debug("Resolved %s layout defaults: %s", layout, sorted(config))
    return config
