"""
Predicates module.

Contains all built-in predicates organized by category:
- field_predicates: Presence, length and membership checks
- format_predicates: Number, network and pattern formats

All predicates are automatically registered via decorators.
"""

# Import all predicates to trigger registration
from modules.validation.predicates import field_predicates
from modules.validation.predicates import format_predicates

__all__ = ['field_predicates', 'format_predicates']
