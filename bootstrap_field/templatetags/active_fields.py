# bootstrap_field/templatetags/active_fields.py
from django import forms, template

from ..field import BootstrapActiveField
from ..layouts import FORM_CSS_CLASSES, get_layout

register = template.Library()

INPUT_METHODS = {
    "text": "text_input",
    "password": "password_input",
    "hidden": "hidden_input",
    "textarea": "textarea",
    "dropdown": "dropdown_list",
    "checkbox": "checkbox",
    "radio": "radio",
    "checkbox_list": "checkbox_list",
    "radio_list": "radio_list",
    "static": "static_control",
}

# Most specific widgets first; CheckboxSelectMultiple may subclass RadioSelect.
WIDGET_INPUTS = (
    (forms.CheckboxSelectMultiple, "checkbox_list"),
    (forms.RadioSelect, "radio_list"),
    (forms.CheckboxInput, "checkbox"),
)


def infer_input(widget):
    for widget_class, as_input in WIDGET_INPUTS:
        if isinstance(widget, widget_class):
            return as_input
    return None


def select_input(field, as_input=None):
    """Call the input method named by `as_input`, inferred from the widget when None."""
    as_input = as_input or infer_input(field.bound_field.field.widget)
    if as_input is not None:
        getattr(field, INPUT_METHODS[as_input])()
    return field


def build_field(form, name, **config):
    if hasattr(form, "field_class") and callable(getattr(form, "field", None)):
        return form.field(name, **config)
    return BootstrapActiveField(form, name, **config)


@register.simple_tag
def active_field(form, name, as_input=None, label=None, hint=None, inline=False, **config):
    """
    Render one field of `form` with its Bootstrap layout.

    Usage:
        {% active_field form "email" %}
        {% active_field form "priority" inline=True %}
        {% active_field form "notes" as_input="static" label=False %}
        {% active_field form "amount" input_template='<div class="input-group">{input}</div>' %}
    """
    if as_input is not None and as_input not in INPUT_METHODS:
        raise template.TemplateSyntaxError(
            f"active_field: unknown as_input {as_input!r}; expected one of {', '.join(INPUT_METHODS)}."
        )
    field = build_field(form, name, **config)
    if inline:
        field.inline()
    select_input(field, as_input)
    if label is not None:
        field.label(label)
    if hint is not None:
        field.hint(hint)
    return field.render()


@register.filter
def form_layout_class(form):
    css_class = getattr(form, "form_css_class", None)
    if css_class is not None:
        return css_class
    return FORM_CSS_CLASSES.get(get_layout(form), "")


@register.inclusion_tag("bootstrap_field/form.html")
def active_form(form):
    return {"form": form, "form_css_class": form_layout_class(form)}
