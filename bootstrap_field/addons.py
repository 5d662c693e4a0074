"""
Prepend/append decorations around the `{input}` placeholder.

An addon configuration looks like::

    {
        "prepend": {"content": "@", "as_button": False, "options": {...}},
        "append": "<span class='icon'>.00</span>",
        "group_options": {"class": "input-group-sm"},
        "content_before": "",
        "content_after": "",
    }

`prepend`/`append` may be plain markup strings, which are used as is.
"""
from core.utilis import add_css_class

from . import html


def _addon_content(addon, css_class):
    if not isinstance(addon, dict):
        return addon
    content = addon.get("content", "")
    options = dict(addon.get("options", {}))
    if addon.get("as_button", False):
        add_css_class(options, "input-group-btn")
    else:
        add_css_class(options, css_class)
    return html.tag("span", content, options)


def get_prepend_addon_content(addon):
    return _addon_content(addon, "icon-left")


def get_append_addon_content(addon):
    return _addon_content(addon, "icon-right")


def generate_addon(addon):
    """Return the markup that replaces `{input}`, still holding `{input}` itself."""
    if not addon:
        return "{input}"
    prepend = get_prepend_addon_content(addon.get("prepend", ""))
    append = get_append_addon_content(addon.get("append", ""))
    content = f"{prepend}{{input}}{append}"
    if "group_options" in addon:
        group = dict(addon["group_options"] or {})
        add_css_class(group, "input-group")
        content = str(html.tag("div", content, group))
    return f"{addon.get('content_before', '')}{content}{addon.get('content_after', '')}"
