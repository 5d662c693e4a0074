"""
Render a single bound field of a Django form from a template of placeholders.

`ActiveField` keeps the rendered fragments of a field in `parts`, keyed by the
placeholder they replace (`{label}`, `{input}`, `{error}`, `{hint}`), and
substitutes them into `template` when the field is rendered. Every input
method fills `{input}` and returns the field, so calls can be chained::

    ActiveField(form, "email").text_input({"placeholder": "you@example.com"}).render()
"""
import copy
import logging

from django import forms
from django.core.exceptions import ImproperlyConfigured
from django.utils.html import conditional_escape
from django.utils.safestring import mark_safe

from core.utilis import merge_css_classes, remove_option, strtr

from . import html

logger = logging.getLogger(__name__)


class ActiveField:
    template = "{label}\n{input}\n{hint}\n{error}"
    # HTML attributes of the field container; "tag" picks the element.
    options = {"class": "form-group"}
    input_options = {"class": "form-control"}
    label_options = {"class": "control-label"}
    error_options = {"class": "help-block"}
    hint_options = {"class": "hint-block"}
    parts = {}

    def __init__(self, form, attribute, **config):
        self.form = form
        self.attribute = attribute
        self.bound_field = form[attribute]
        self._input_id = None
        self._skip_label_for = False
        for name in self.option_names():
            value = getattr(self, name)
            if isinstance(value, (dict, list)):
                setattr(self, name, copy.deepcopy(value))
        self.configure(config)
        logger.debug("Built %s for field %r with options %s", type(self).__name__, attribute, sorted(config))

    @classmethod
    def option_names(cls):
        names = set()
        for klass in cls.__mro__:
            for name, value in vars(klass).items():
                if name.startswith("_") or callable(value):
                    continue
                if isinstance(value, (classmethod, staticmethod, property)):
                    continue
                names.add(name)
        return names

    def configure(self, config):
        known = self.option_names()
        for name, value in config.items():
            if name not in known:
                raise ImproperlyConfigured(
                    f"Unknown option {name!r} for {type(self).__name__} ({self.attribute!r})."
                )
            setattr(self, name, copy.deepcopy(value))

    def __str__(self):
        return self.render()

    def __html__(self):
        return self.render()

    def get_input_id(self):
        return self._input_id or self.bound_field.auto_id or ""

    def begin(self):
        """Return the opening tag of the field container."""
        options = dict(self.options)
        input_id = self.get_input_id()
        classes = [options.get("class")]
        if input_id:
            classes.append(f"field-{input_id}")
        if self.bound_field.field.required:
            classes.append(getattr(self.form, "required_css_class", None) or "required")
        if self.bound_field.errors:
            classes.append(getattr(self.form, "error_css_class", None) or "has-error")
        options["class"] = merge_css_classes(*classes)
        tag = remove_option(options, "tag", "div")
        return html.begin_tag(tag, options)

    def end(self):
        return html.end_tag(self.options.get("tag", "div"))

    def build_template(self):
        return self.template

    def render(self, content=None):
        if content is None:
            if "{input}" not in self.parts:
                self.default_input()
            if "{label}" not in self.parts:
                self.label()
            if "{error}" not in self.parts:
                self.error()
            if "{hint}" not in self.parts:
                self.hint()
            content = strtr(self.build_template(), self.parts)
        elif callable(content):
            content = content(self)
        return mark_safe(f"{self.begin()}\n{content}\n{self.end()}")

    def label(self, label=None, options=None):
        """
        Render the `{label}` part. `False` hides the label, a string replaces
        the field label and is used as is.
        """
        if label is False:
            self.parts["{label}"] = ""
            return self
        options = {**self.label_options, **(options or {})}
        if label is not None:
            options["label"] = label
        if self._skip_label_for:
            options["for"] = None
        title = remove_option(options, "label")
        if title is None:
            title = conditional_escape(self.bound_field.label)
        if "for" in options:
            for_id = remove_option(options, "for")
        else:
            for_id = self.get_input_id() or None
        self.parts["{label}"] = html.label(title, for_id, options)
        return self

    def error(self, options=None):
        """Render the first error of the field; the container is kept when there is none."""
        if options is False:
            self.parts["{error}"] = ""
            return self
        options = {**self.error_options, **(options or {})}
        tag = remove_option(options, "tag", "div")
        encode = remove_option(options, "encode", True)
        errors = self.bound_field.errors
        message = errors[0] if errors else ""
        if encode:
            message = conditional_escape(message)
        self.parts["{error}"] = html.tag(tag, message, options)
        return self

    def hint(self, content=None, options=None):
        if content is False:
            self.parts["{hint}"] = ""
            return self
        options = {**self.hint_options, **(options or {})}
        if content is None:
            content = self.bound_field.help_text
        tag = remove_option(options, "tag", "div")
        self.parts["{hint}"] = html.tag(tag, content, options) if content else ""
        return self

    def adjust_label_for(self, options):
        """Point the label at a custom input id."""
        if not options.get("id"):
            return
        self._input_id = options["id"]
        if not self.label_options.get("for"):
            self.label_options["for"] = options["id"]

    def render_widget(self, widget=None, options=None):
        """Render `widget` (the form field's own by default) bound to this field."""
        attrs = {key: value for key, value in (options or {}).items() if value is not None}
        widget_attrs = getattr(widget or self.bound_field.field.widget, "attrs", {})
        if widget_attrs.get("class") and attrs.get("class"):
            attrs["class"] = merge_css_classes(widget_attrs["class"], attrs["class"])
        return self.bound_field.as_widget(widget=widget, attrs=attrs)

    def _input_attrs(self, options):
        attrs = {**self.input_options, **(options or {})}
        self.adjust_label_for(attrs)
        return attrs

    def default_input(self, options=None):
        self.parts["{input}"] = self.render_widget(None, self._input_attrs(options))
        return self

    def widget(self, widget, options=None):
        if isinstance(widget, type):
            widget = widget()
        self.parts["{input}"] = self.render_widget(widget, self._input_attrs(options))
        return self

    def input(self, input_type, options=None):
        widget = forms.TextInput()
        widget.input_type = input_type
        return self.widget(widget, options)

    def text_input(self, options=None):
        return self.widget(forms.TextInput(), options)

    def password_input(self, options=None):
        return self.widget(forms.PasswordInput(), options)

    def hidden_input(self, options=None):
        return self.widget(forms.HiddenInput(), options)

    def textarea(self, options=None):
        return self.widget(forms.Textarea(), options)

    def dropdown_list(self, items=None, options=None):
        field = self.bound_field.field
        choices = getattr(field, "choices", ()) if items is None else items
        if isinstance(field, forms.MultipleChoiceField):
            widget = forms.SelectMultiple(choices=choices)
        else:
            widget = forms.Select(choices=choices)
        return self.widget(widget, options)

    def _take_label_option(self, options, enclosed_by_label):
        """
        Pop the `label` and `label_options` entries off checkbox/radio options.
        Without an enclosing label, a given label becomes the `{label}` part.
        """
        title = options.pop("label", None)
        label_options = options.pop("label_options", None) or {}
        if not enclosed_by_label and title is not None and "{label}" not in self.parts:
            self.parts["{label}"] = title
            if label_options:
                self.label_options = dict(label_options)
        return title, label_options

    def _enclose_in_label(self, markup, title, label_options):
        if title is None:
            title = conditional_escape(self.bound_field.label)
        return html.label(f"{markup} {title}", None, label_options)

    def checkbox(self, options=None, enclosed_by_label=True):
        """
        Render the field as a single checkbox. With `enclosed_by_label` the
        checkbox sits inside its label and `{label}` is emptied.
        """
        options = dict(options or {})
        title, label_options = self._take_label_option(options, enclosed_by_label)
        markup = self.render_widget(forms.CheckboxInput(), options)
        if enclosed_by_label:
            markup = self._enclose_in_label(markup, title, label_options)
            self.parts["{label}"] = ""
        self.parts["{input}"] = markup
        self.adjust_label_for(options)
        return self

    def radio(self, options=None, enclosed_by_label=True):
        options = dict(options or {})
        title, label_options = self._take_label_option(options, enclosed_by_label)
        attrs = {"id": self.get_input_id() or None, "value": "1"}
        attrs.update(options)
        markup = html.radio(self.bound_field.html_name, bool(self.bound_field.value()), attrs)
        if enclosed_by_label:
            markup = self._enclose_in_label(markup, title, label_options)
            self.parts["{label}"] = ""
        self.parts["{input}"] = markup
        self.adjust_label_for(options)
        return self

    def checkbox_list(self, items=None, options=None):
        self.parts["{input}"] = self._choice_list(html.checkbox, items, options)
        self._skip_label_for = True
        return self

    def radio_list(self, items=None, options=None):
        self.parts["{input}"] = self._choice_list(html.radio, items, options)
        self._skip_label_for = True
        return self

    def _selected_values(self):
        value = self.bound_field.value()
        if value is None or value == "":
            return set()
        if isinstance(value, (list, tuple, set)):
            return {str(item) for item in value}
        return {str(value)}

    def _choice_list(self, render_input, items, options):
        """
        Render `items` (the field choices by default) as a list of inputs.

        Options: `item` is a callable `(index, label, name, checked, value)`
        returning the markup of one item, `item_options` are passed to every
        default item, `separator` joins the items and `tag` wraps them.
        """
        options = dict(options or {})
        if items is None:
            items = getattr(self.bound_field.field, "choices", ())
        tag = remove_option(options, "tag", "div")
        encode = remove_option(options, "encode", True)
        separator = remove_option(options, "separator", "\n")
        formatter = remove_option(options, "item")
        item_options = remove_option(options, "item_options", {})
        options.setdefault("id", self.get_input_id() or None)

        name = self.bound_field.html_name
        selected = self._selected_values()
        lines = []
        for index, (value, label) in enumerate(_flatten_choices(items)):
            checked = str(value) in selected
            if formatter is not None:
                lines.append(formatter(index, label, name, checked, value))
            else:
                item = {"value": value, "label": conditional_escape(label) if encode else label}
                item.update(item_options)
                lines.append(render_input(name, checked, item))
        return html.tag(tag, separator.join(str(line) for line in lines), options)


def _flatten_choices(choices):
    """Yield (value, label) pairs, expanding option groups."""
    if isinstance(choices, dict):
        choices = choices.items()
    for value, label in choices:
        if isinstance(label, (list, tuple, dict)):
            yield from _flatten_choices(label)
        else:
            yield value, label
