"""
Bootstrap step modules.
"""
from .models import BootstrapParams, Component

__all__ = [
    'BootstrapParams',
    'Component',
]
