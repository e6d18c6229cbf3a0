"""
Predicate registry system.

Provides decorator-based registration for validation predicates and
retrieval functions. Predicates are looked up by name from rule specs,
so adding a predicate never touches the engine.
"""

from functools import wraps
from typing import Any, Callable, Dict, List, Optional

from modules.validation.core.base import canonical_name
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)

# A predicate receives the normalized value list plus rule parameters
Predicate = Callable[..., bool]

# Global registry of all predicates, keyed by canonical name
PREDICATE_REGISTRY: Dict[str, Predicate] = {}


def register_predicate(name: str, elementwise: bool = True):
    """
    Decorator to register a predicate in the global registry.

    With elementwise=True the decorated function checks a single value,
    fn(value, *params), and the registered predicate passes only when
    every element of the value list passes. With elementwise=False the
    function receives the whole list: fn(values, *params).

    Usage:
        @register_predicate("minLength")
        def is_min_length(value, length):
            ...

    Args:
        name: Name used in rule specs
        elementwise: Apply the check to each element of the value list

    Returns:
        Decorator function
    """
    key = canonical_name(name)

    def decorator(func: Callable[..., bool]):
        if elementwise:
            @wraps(func)
            def predicate(values: List[Any], *params: str) -> bool:
                return all(func(value, *params) for value in values)
        else:
            predicate = func

        if key in PREDICATE_REGISTRY:
            logger.warning(
                f"Predicate '{key}' is already registered. "
                f"Overwriting with {func.__name__}"
            )

        PREDICATE_REGISTRY[key] = predicate
        logger.debug(f"Registered predicate: {key} -> {func.__name__}")
        return func

    return decorator


def get_predicate(name: str) -> Optional[Predicate]:
    """
    Get predicate by name from registry.

    Args:
        name: Predicate name in any casing ("min_length", "minLength")

    Returns:
        Predicate callable or None if not found
    """
    return PREDICATE_REGISTRY.get(canonical_name(name))


def list_predicates() -> Dict[str, str]:
    """
    List all registered predicates.

    Returns:
        Dictionary mapping predicate names to function names
    """
    return {
        name: getattr(func, '__name__', repr(func))
        for name, func in PREDICATE_REGISTRY.items()
    }


def is_registered(name: str) -> bool:
    """
    Check if a predicate is registered.

    Args:
        name: Predicate name

    Returns:
        True if registered, False otherwise
    """
    return canonical_name(name) in PREDICATE_REGISTRY
