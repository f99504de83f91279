# -*- coding: utf-8 -*-
"""
Dynamic Form - schema-driven wizard views.
"""

from .field_renderers import FieldRenderer, create_renderer, register_renderer
from .section_view import SectionView
from .form_wizard import DynamicFormWizard

__all__ = [
    'FieldRenderer',
    'create_renderer',
    'register_renderer',
    'SectionView',
    'DynamicFormWizard'
]
