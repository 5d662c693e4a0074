# forms.py
from django import forms

from bootstrap_field.forms import ActiveFormMixin

TOPIC_CHOICES = [
    ("billing", "Billing"),
    ("support", "Technical support"),
    ("sales", "Sales"),
]

PRIORITY_CHOICES = [
    ("low", "Low"),
    ("normal", "Normal"),
    ("high", "High"),
]


class ContactForm(ActiveFormMixin, forms.Form):
    """Contact form exercising every input kind the Bootstrap field renders."""
    email = forms.EmailField(
        label="Email address",
        help_text="We never share your email.",
    )
    password = forms.CharField(
        required=False,
        widget=forms.PasswordInput(),
    )
    amount = forms.DecimalField(
        required=False,
        min_value=0,
        decimal_places=2,
        label="Amount",
    )
    topics = forms.MultipleChoiceField(
        choices=TOPIC_CHOICES,
        required=False,
        widget=forms.CheckboxSelectMultiple(),
    )
    priority = forms.ChoiceField(
        choices=PRIORITY_CHOICES,
        initial="normal",
        widget=forms.RadioSelect(),
    )
    message = forms.CharField(
        widget=forms.Textarea(attrs={"rows": 4}),
    )
    subscribe = forms.BooleanField(
        required=False,
        label="Subscribe to the newsletter",
    )

    field_overrides = {
        "amount": {
            "addon": {
                "prepend": {"content": "$", "options": {"class": "input-group-addon"}},
                "append": {"content": ".00", "options": {"class": "input-group-addon"}},
                "group_options": {},
            },
        },
        "email": {
            "input_options": {"placeholder": "you@example.com"},
        },
    }

    def clean(self):
        cleaned_data = super().clean()
        topics = cleaned_data.get("topics")
        priority = cleaned_data.get("priority")

        if priority == "high" and not topics:
            self.add_error("topics", "Pick a topic for high priority requests.")
        return cleaned_data
