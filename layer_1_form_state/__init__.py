"""
Layer 1: Form State
- Form State Holder (inputs, loading flag, error, generated templates)
"""
from .form_state import FormState

__all__ = [
    'FormState',
]
