from .base import ActiveField
from .field import BootstrapActiveField
from .forms import ActiveFormMixin
from .layouts import LAYOUTS, create_layout_config

__all__ = [
    "ActiveField",
    "ActiveFormMixin",
    "BootstrapActiveField",
    "LAYOUTS",
    "create_layout_config",
]
