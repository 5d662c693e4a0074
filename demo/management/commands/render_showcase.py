from django.core.management.base import BaseCommand, CommandError

from bootstrap_field.layouts import LAYOUTS
from bootstrap_field.templatetags.active_fields import select_input
from demo.forms import ContactForm


class Command(BaseCommand):
    help = "Prints the markup of the showcase contact form fields for a layout."

    def add_arguments(self, parser):
        parser.add_argument("--layout", default="default", choices=LAYOUTS)
        parser.add_argument("--field", action="append", dest="fields",
                            help="Field to render; repeat for several. Defaults to all fields.")
        parser.add_argument("--label", choices=["show", "hide"], default="show")

    def handle(self, *args, **options):
        form = ContactForm(layout=options["layout"])
        names = options["fields"] or list(form.fields)
        unknown = [name for name in names if name not in form.fields]
        if unknown:
            raise CommandError(f"Unknown field(s): {', '.join(unknown)}")

        self.stdout.write(f"Rendering {len(names)} field(s) in {options['layout']} layout:")
        for name in names:
            field = select_input(form.field(name))
            if options["label"] == "hide":
                field.label(False)
            self.stdout.write(field.render())
