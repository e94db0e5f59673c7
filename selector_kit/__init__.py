"""Fluent builder for CSS selector strings."""

from selector_kit.builder import SelectorBuilder
from selector_kit.combiner import CombinedSelector, combine
from selector_kit.errors import DuplicateError, OrderError, SelectorError
from selector_kit.facade import (
    attr,
    class_,
    element,
    id_,
    pseudo_class,
    pseudo_element,
)
from selector_kit.models import COMBINATORS, Category, Renderable
from selector_kit.objects import Rectangle, from_json, get_json

__all__ = [
    # Models
    "Category",
    "Renderable",
    "COMBINATORS",
    # Building
    "SelectorBuilder",
    "element",
    "id_",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    # Combining
    "CombinedSelector",
    "combine",
    # Errors
    "SelectorError",
    "DuplicateError",
    "OrderError",
    # Objects
    "Rectangle",
    "get_json",
    "from_json",
]
