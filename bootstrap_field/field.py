"""
A Bootstrap 3 flavour of `ActiveField`.

Compared to the plain field it adds:

- `input_template`, an optional template wrapping the `{input}` part, e.g. an
  input group;
- `horizontal_css_classes`, the grid classes of label, wrapper, error and hint
  in horizontal forms;
- `is_inline` / `inline()` to render checkbox and radio lists inline;
- `enable_error` and `enable_label` to drop the error or the label, and
  `label(True/False)` to toggle the label;
- `addon`, prepend/append decorations around the input.

Templates may use these placeholders on top of the plain ones:

- `{beginLabel}`, `{labelTitle}`, `{endLabel}`: the label split in three;
- `{beginWrapper}`, `{endWrapper}`: the wrapper tag, used by the horizontal
  layout and some inputs.

Checkboxes, radios and inline lists switch to their own templates, which can be
replaced through the form's `field_config`. Examples::

    form = ContactForm(layout="horizontal")
    form.field("email", input_options={"placeholder": "Email"}).label(False)
    form.field("priority").inline().radio_list()
    form.field("amount", horizontal_css_classes={"wrapper": "col-sm-2"})
    form.field("amount", input_template='<div class="input-group">{input}</div>')
"""
import logging

from django.utils.html import conditional_escape, format_html

from core.utilis import add_css_class, merge_config, remove_option, strtr

from . import html
from .addons import generate_addon
from .base import ActiveField
from .layouts import LAYOUT_HORIZONTAL, create_layout_config, get_layout

logger = logging.getLogger(__name__)

LABEL_PARTS = ("{label}", "{beginLabel}", "{labelTitle}", "{endLabel}")


def _list_item(render_input, css_class, encode=True):
    def item(index, label, name, checked, value):
        if encode:
            label = conditional_escape(label)
        return format_html(
            '<div class="{}">{}</div>',
            css_class,
            render_input(name, checked, {"label": label, "value": value}),
        )

    return item


class BootstrapActiveField(ActiveField):
    # Render checkbox_list() and radio_list() inline.
    is_inline = False
    input_template = None
    wrapper_options = {}
    # Grid classes for the horizontal layout: offset, label, wrapper, error, hint.
    horizontal_css_classes = None
    checkbox_template = (
        '<div class="css-checkbox">\n{input}\n{beginLabel}\n{labelTitle}\n{endLabel}\n{error}\n{hint}\n</div>'
    )
    radio_template = (
        '<div class="radio">\n{input}\n{beginLabel}\n{labelTitle}\n{endLabel}\n{error}\n{hint}\n</div>'
    )
    horizontal_checkbox_template = (
        "{beginWrapper}\n"
        '<div class="checkbox">\n{beginLabel}\n{input}\n{labelTitle}\n{endLabel}\n</div>\n'
        "{error}\n{endWrapper}\n{hint}"
    )
    horizontal_radio_template = (
        "{beginWrapper}\n"
        '<div class="radio">\n{beginLabel}\n{input}\n{labelTitle}\n{endLabel}\n</div>\n'
        "{error}\n{endWrapper}\n{hint}"
    )
    inline_checkbox_list_template = "{label}\n{beginWrapper}\n{input}\n{error}\n{endWrapper}\n{hint}"
    inline_radio_list_template = "{beginWrapper}\n{input}\n{error}\n{endWrapper}\n{hint}"
    enable_error = True
    enable_label = True
    # Static controls hide their error unless this is True.
    show_errors = None

    options = {"class": "tag textInput"}
    template = "{input}\n{hint}\n{error}"
    input_options = {"class": "form-control"}
    error_options = {"class": "help-block"}
    label_options = {"class": "control-label"}
    hint_options = {"class": "hint-block"}

    content_before_input = ""
    content_after_input = ""
    # See bootstrap_field.addons for the accepted keys.
    addon = {}

    def __init__(self, form, attribute, **config):
        self.layout = get_layout(form)
        self._is_static = False
        config = merge_config(create_layout_config(self.layout, config), config)
        super().__init__(form, attribute, **config)

    @property
    def is_horizontal(self):
        return self.layout == LAYOUT_HORIZONTAL

    def render(self, content=None):
        if content is None:
            if "{beginWrapper}" not in self.parts:
                options = dict(self.wrapper_options)
                tag = remove_option(options, "tag", "div")
                self.parts["{beginWrapper}"] = html.begin_tag(tag, options)
                self.parts["{endWrapper}"] = html.end_tag(tag)
            if self.enable_label is False:
                for token in LABEL_PARTS:
                    self.parts[token] = ""
            elif "{beginLabel}" not in self.parts:
                self.render_label_parts()
            if self.enable_error is False or (self._is_static and self.show_errors is not True):
                self.parts["{error}"] = ""
        return super().render(content)

    def build_template(self):
        """
        Place `input_template`, the addon and the content around `{input}` in
        the template; `parts` is left untouched.
        """
        new_input = generate_addon(self.addon)
        if self.input_template:
            new_input = strtr(new_input, {"{input}": self.input_template})
        return strtr(self.template, {"{input}": f"{self.content_before_input}{new_input}{self.content_after_input}"})

    def _use_template(self, options, default):
        if "template" in options:
            self.template = options.pop("template")
        else:
            self.template = default

    def _enclosed_choice(self, options, template, horizontal_template):
        self._use_template(options, horizontal_template if self.is_horizontal else template)
        if options.get("label") is not None:
            self.parts["{labelTitle}"] = options["label"]
        if self.is_horizontal:
            add_css_class(self.wrapper_options, self.horizontal_css_classes["offset"])
        self.label_options["class"] = None

    def checkbox(self, options=None, enclosed_by_label=True):
        options = dict(options or {})
        if enclosed_by_label:
            self._enclosed_choice(options, self.checkbox_template, self.horizontal_checkbox_template)
        return super().checkbox(options, False)

    def radio(self, options=None, enclosed_by_label=True):
        options = dict(options or {})
        if enclosed_by_label:
            self._enclosed_choice(options, self.radio_template, self.horizontal_radio_template)
        return super().radio(options, False)

    def checkbox_list(self, items=None, options=None):
        options = dict(options or {})
        if self.is_inline:
            self._use_template(options, self.inline_checkbox_list_template)
            options.setdefault("item_options", {"label_options": {"class": "checkbox-inline"}})
        elif "item" not in options:
            options["item"] = _list_item(html.checkbox, "checkbox", options.get("encode", True))
        return super().checkbox_list(items, options)

    def radio_list(self, items=None, options=None):
        options = dict(options or {})
        if self.is_inline:
            self._use_template(options, self.inline_radio_list_template)
            options.setdefault("item_options", {"label_options": {"class": "radio-inline"}})
        elif "item" not in options:
            options["item"] = _list_item(html.radio, "cell", options.get("encode", True))
        return super().radio_list(items, options)

    def static_control(self, options=None):
        """
        Render the field value as a Bootstrap static form control. The value
        is escaped unless `encode` is False; a `value` option replaces it.
        """
        options = dict(options or {})
        self.adjust_label_for(options)
        value = remove_option(options, "value", self.bound_field.value())
        self.parts["{input}"] = html.static_control(value, options)
        self._is_static = True
        return self

    def label(self, label=None, options=None):
        if isinstance(label, bool):
            self.enable_label = label
            if label is False and self.is_horizontal:
                add_css_class(self.wrapper_options, self.horizontal_css_classes["offset"])
        else:
            self.enable_label = True
            self.render_label_parts(label, options)
            super().label(label, options)
        return self

    def inline(self, value=True):
        """Render lists inline; call it before checkbox_list() or radio_list()."""
        self.is_inline = bool(value)
        return self

    def render_label_parts(self, label=None, options=None):
        options = {**self.label_options, **(options or {})}
        option_label = options.pop("label", None)
        if label is None:
            if option_label is not None:
                label = option_label
            else:
                label = conditional_escape(self.bound_field.label)
        if options.get("for") is None:
            options["for"] = self.get_input_id() or None
        self.parts["{beginLabel}"] = html.begin_tag("label", options)
        self.parts["{endLabel}"] = html.end_tag("label")
        self.parts.setdefault("{labelTitle}", label)
