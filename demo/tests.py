from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import SimpleTestCase
from django.urls import reverse

from .forms import ContactForm


class ShowcaseViewTests(SimpleTestCase):
    def test_default_layout(self):
        """Test that the showcase renders the contact form in the default layout"""
        response = self.client.get(reverse("demo:showcase"))
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'class="tag textInput field-id_email required"')
        self.assertContains(response, '<div class="css-checkbox">')

    def test_horizontal_layout(self):
        """Test that the layout is taken from the URL"""
        response = self.client.get(reverse("demo:showcase_layout", kwargs={"layout": "horizontal"}))
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'class="form-horizontal"')
        self.assertContains(response, '<div class="col-sm-6">')

    def test_inline_layout(self):
        response = self.client.get(reverse("demo:showcase_layout", kwargs={"layout": "inline"}))
        self.assertContains(response, 'class="form-inline"')
        self.assertContains(response, 'class="radio-inline"')

    def test_unknown_layout(self):
        response = self.client.get(reverse("demo:showcase_layout", kwargs={"layout": "diagonal"}))
        self.assertEqual(response.status_code, 404)

    def test_amount_addon(self):
        response = self.client.get(reverse("demo:showcase"))
        self.assertContains(response, '<span class="input-group-addon icon-left">$</span>')
        self.assertContains(response, '<div class="input-group">')

    def test_valid_post_redirects(self):
        response = self.client.post(reverse("demo:showcase"), {
            "email": "jane@example.com",
            "priority": "normal",
            "message": "Hello",
        })
        self.assertRedirects(
            response,
            reverse("demo:showcase_layout", kwargs={"layout": "default"}),
            fetch_redirect_response=False,
        )

    def test_invalid_post_shows_errors(self):
        response = self.client.post(reverse("demo:showcase_layout", kwargs={"layout": "horizontal"}), {
            "email": "jane@example.com",
            "priority": "high",
            "message": "Hello",
        })
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Pick a topic for high priority requests.")
        self.assertContains(response, "field-id_topics has-error")


class ContactFormTests(SimpleTestCase):
    def test_high_priority_needs_a_topic(self):
        form = ContactForm(data={"email": "a@b.com", "priority": "high", "message": "Hi"})
        self.assertFalse(form.is_valid())
        self.assertIn("topics", form.errors)

    def test_valid_form(self):
        form = ContactForm(data={"email": "a@b.com", "priority": "high", "message": "Hi", "topics": ["sales"]})
        self.assertTrue(form.is_valid())


class RenderShowcaseCommandTests(SimpleTestCase):
    def test_renders_one_field(self):
        out = StringIO()
        call_command("render_showcase", "--layout", "horizontal", "--field", "email", stdout=out)
        output = out.getvalue()
        self.assertIn("Rendering 1 field(s) in horizontal layout", output)
        self.assertIn('<label class="control-label col-sm-3" for="id_email">Email address</label>', output)

    def test_hidden_labels(self):
        out = StringIO()
        call_command("render_showcase", "--field", "subscribe", "--label", "hide", stdout=out)
        self.assertNotIn("<label", out.getvalue())

    def test_renders_all_fields(self):
        out = StringIO()
        call_command("render_showcase", stdout=out)
        self.assertIn("Rendering 7 field(s) in default layout", out.getvalue())

    def test_unknown_field(self):
        with self.assertRaises(CommandError):
            call_command("render_showcase", "--field", "nope")
