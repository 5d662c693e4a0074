"""
Small tag helpers on top of django.utils.html.

Content passed to these helpers is trusted markup; callers escape user data
before handing it over.
"""
from django.forms.utils import flatatt
from django.utils.html import conditional_escape, format_html
from django.utils.safestring import mark_safe

from core.utilis import add_css_class


def render_tag_attributes(options):
    """Render `options` as HTML attributes. None and False values are skipped."""
    return flatatt({key: value for key, value in (options or {}).items() if value is not None})


def begin_tag(name, options=None):
    if not name:
        return mark_safe("")
    return format_html("<{}{}>", name, render_tag_attributes(options))


def end_tag(name):
    if not name:
        return mark_safe("")
    return format_html("</{}>", name)


def tag(name, content="", options=None):
    if not name:
        return mark_safe(content)
    return mark_safe(f"{begin_tag(name, options)}{content}{end_tag(name)}")


def label(content, for_id=None, options=None):
    options = dict(options or {})
    options["for"] = for_id
    return tag("label", content, options)


def _choice_input(input_type, name, checked=False, options=None):
    """
    Render a checkbox or radio input. With a `label` option the input is
    enclosed by a label tag, configured through `label_options`.
    """
    options = dict(options or {})
    title = options.pop("label", None)
    label_options = options.pop("label_options", {})
    attrs = {"type": input_type, "name": name}
    attrs["value"] = options.pop("value", "1")
    attrs["checked"] = bool(checked)
    attrs.update(options)
    markup = format_html("<input{}>", render_tag_attributes(attrs))
    if title is None:
        return markup
    return label(f"{markup} {title}", None, label_options)


def checkbox(name, checked=False, options=None):
    return _choice_input("checkbox", name, checked, options)


def radio(name, checked=False, options=None):
    return _choice_input("radio", name, checked, options)


def static_control(value, options=None):
    options = dict(options or {})
    add_css_class(options, "form-control-static")
    encode = options.pop("encode", True)
    value = "" if value is None else value
    if encode:
        value = conditional_escape(value)
    return tag("p", value, options)
