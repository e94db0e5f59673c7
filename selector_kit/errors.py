"""Errors raised while assembling a selector."""

from selector_kit.models import Category

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base class for selector building errors."""

    def __init__(self, message: str, category: Category):
        super().__init__(message)
        self.category = category


class DuplicateError(SelectorError):
    """A singleton category received a second value."""

    def __init__(self, category: Category):
        super().__init__(DUPLICATE_MESSAGE, category)


class OrderError(SelectorError):
    """A category was supplied after a later category was already populated."""

    def __init__(self, category: Category, populated: Category):
        super().__init__(ORDER_MESSAGE, category)
        self.populated = populated
