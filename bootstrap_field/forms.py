import logging

from core.utilis import merge_config

from .conf import get_setting
from .field import BootstrapActiveField
from .layouts import FORM_CSS_CLASSES, validate_layout

logger = logging.getLogger(__name__)


class ActiveFormMixin:
    """
    Give a Django form a Bootstrap layout and a `field()` factory.

    Example usage:
        class ContactForm(ActiveFormMixin, forms.Form):
            layout = "horizontal"
            field_overrides = {"email": {"input_options": {"placeholder": "Email"}}}

        ContactForm(layout="inline").field("email").render()
    """
    layout = None
    field_class = BootstrapActiveField
    # Options applied to every field of the form.
    field_config = {}
    # Options per field name, applied over field_config.
    field_overrides = {}
    required_css_class = "required"
    error_css_class = "has-error"

    def __init__(self, *args, layout=None, **kwargs):
        super().__init__(*args, **kwargs)
        if layout is not None:
            self.layout = layout
        self.layout = validate_layout(self.layout or get_setting("DEFAULT_LAYOUT"))

    def field(self, name, **config):
        config = merge_config(
            get_setting("FIELD_CONFIG"),
            self.field_config,
            self.field_overrides.get(name),
            config,
        )
        logger.debug("Creating %s field %r in %s layout", self.field_class.__name__, name, self.layout)
        return self.field_class(self, name, **config)

    @property
    def form_css_class(self):
        return FORM_CSS_CLASSES[self.layout]
