from django.template import Context, Template, TemplateSyntaxError
from django.test import SimpleTestCase

from .forms import PlainForm, SampleForm


def render(source, **context):
    return Template("{% load active_fields %}" + source).render(Context(context))


class ActiveFieldTagTests(SimpleTestCase):
    def test_text_field(self):
        html = render('{% active_field form "demo" %}', form=SampleForm())
        self.assertInHTML('<input type="text" name="demo" class="form-control" required id="id_demo">', html)

    def test_checkbox_is_inferred_from_the_widget(self):
        html = render('{% active_field form "agree" %}', form=SampleForm())
        self.assertIn('<div class="css-checkbox">', html)

    def test_lists_are_inferred_from_the_widget(self):
        html = render('{% active_field form "colors" %}{% active_field form "size" %}', form=SampleForm())
        self.assertIn('<div class="checkbox">', html)
        self.assertIn('<div class="cell">', html)

    def test_inline_list(self):
        html = render('{% active_field form "size" inline=True %}', form=SampleForm())
        self.assertIn('class="radio-inline"', html)

    def test_as_input_and_label(self):
        html = render(
            '{% active_field form "demo" as_input="password" label="Secret" template="{label}{input}" %}',
            form=SampleForm(),
        )
        self.assertInHTML('<label class="control-label" for="id_demo">Secret</label>', html)
        self.assertIn('type="password"', html)

    def test_hidden_label_in_horizontal_form(self):
        html = render('{% active_field form "demo" label=False %}', form=SampleForm(layout="horizontal"))
        self.assertNotIn("<label", html)
        self.assertIn("col-sm-offset-3", html)

    def test_hint(self):
        html = render('{% active_field form "demo" hint="Pick a name" %}', form=SampleForm())
        self.assertInHTML('<p class="help-block">Pick a name</p>', html)

    def test_config_keywords(self):
        html = render(
            '{% active_field form "demo" input_template="<div class=\'input-group\'>{input}</div>" %}',
            form=SampleForm(),
        )
        self.assertIn('<div class=\'input-group\'><input', html)

    def test_plain_form(self):
        html = render('{% active_field form "name" %}', form=PlainForm())
        self.assertIn("field-id_name", html)

    def test_unknown_input(self):
        with self.assertRaises(TemplateSyntaxError):
            render('{% active_field form "demo" as_input="slider" %}', form=SampleForm())


class FormTagsTests(SimpleTestCase):
    def test_form_layout_class(self):
        self.assertEqual(render("{{ form|form_layout_class }}", form=SampleForm(layout="inline")), "form-inline")
        self.assertEqual(render("{{ form|form_layout_class }}", form=PlainForm()), "")

    def test_active_form(self):
        html = render("{% active_form form %}", form=SampleForm(layout="horizontal"))
        self.assertIn('<div class="form-horizontal">', html)
        for name in ("demo", "code", "agree", "colors", "size", "notes"):
            self.assertIn(f"field-id_{name}", html)

    def test_active_form_non_field_errors(self):
        form = SampleForm(data={"demo": "x", "size": "s"})
        form.is_valid()
        form.add_error(None, "Something is off.")
        html = render("{% active_form form %}", form=form)
        self.assertInHTML('<div class="alert alert-danger">Something is off.</div>', html)
