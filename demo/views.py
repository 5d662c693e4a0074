from django.contrib import messages
from django.http import Http404
from django.urls import reverse
from django.views.generic import FormView

from bootstrap_field.layouts import LAYOUTS

from .forms import ContactForm


class ShowcaseView(FormView):
    form_class = ContactForm
    template_name = "demo/showcase.html"

    def dispatch(self, request, *args, **kwargs):
        self.layout = kwargs.get("layout", "default")
        if self.layout not in LAYOUTS:
            raise Http404(f"Unknown layout: {self.layout}")
        return super().dispatch(request, *args, **kwargs)

    def get_form_kwargs(self):
        """Render the form in the layout taken from the URL."""
        kwargs = super().get_form_kwargs()
        kwargs["layout"] = self.layout
        return kwargs

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update({
            "layout": self.layout,
            "layouts": LAYOUTS,
        })
        return context

    def get_success_url(self):
        return reverse("demo:showcase_layout", kwargs={"layout": self.layout})

    def form_valid(self, form):
        messages.success(self.request, "Message sent.")
        return super().form_valid(form)
