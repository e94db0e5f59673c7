"""Fluent accumulator for compound CSS selectors."""

import logging
from dataclasses import dataclass, field

from selector_kit.errors import DuplicateError, OrderError
from selector_kit.models import Category

logger = logging.getLogger(__name__)


@dataclass
class SelectorBuilder:
    """Accumulate selector fragments in category order.

    A compound selector looks like::

        element#id.class[attr]:pseudo-class::pseudo-element

    Classes, attributes and pseudo-classes may repeat; element, id and
    pseudo-element may appear once. Every ``with_*`` method returns the
    builder itself so calls can be chained.
    """

    element_tag: str | None = None
    id_value: str | None = None
    class_names: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    pseudo_classes: list[str] = field(default_factory=list)
    pseudo_element: str | None = None

    def with_element(self, tag: str) -> "SelectorBuilder":
        self._check(Category.ELEMENT)
        self.element_tag = tag
        return self._added(Category.ELEMENT, tag)

    def with_id(self, value: str) -> "SelectorBuilder":
        self._check(Category.ID)
        self.id_value = value
        return self._added(Category.ID, value)

    def with_class(self, name: str) -> "SelectorBuilder":
        self._check(Category.CLASS)
        self.class_names.append(name)
        return self._added(Category.CLASS, name)

    def with_attribute(self, expr: str) -> "SelectorBuilder":
        self._check(Category.ATTRIBUTE)
        self.attributes.append(expr)
        return self._added(Category.ATTRIBUTE, expr)

    def with_pseudo_class(self, name: str) -> "SelectorBuilder":
        self._check(Category.PSEUDO_CLASS)
        self.pseudo_classes.append(name)
        return self._added(Category.PSEUDO_CLASS, name)

    def with_pseudo_element(self, name: str) -> "SelectorBuilder":
        self._check(Category.PSEUDO_ELEMENT)
        self.pseudo_element = name
        return self._added(Category.PSEUDO_ELEMENT, name)

    def add(self, category: Category, value: str) -> "SelectorBuilder":
        """Add a fragment by category (used when the category is data)."""
        adders = {
            Category.ELEMENT: self.with_element,
            Category.ID: self.with_id,
            Category.CLASS: self.with_class,
            Category.ATTRIBUTE: self.with_attribute,
            Category.PSEUDO_CLASS: self.with_pseudo_class,
            Category.PSEUDO_ELEMENT: self.with_pseudo_element,
        }
        return adders[category](value)

    def fragments(self, category: Category) -> list[str]:
        """Return the values currently held for a category."""
        if category is Category.ELEMENT:
            values = [self.element_tag]
        elif category is Category.ID:
            values = [self.id_value]
        elif category is Category.CLASS:
            values = self.class_names
        elif category is Category.ATTRIBUTE:
            values = self.attributes
        elif category is Category.PSEUDO_CLASS:
            values = self.pseudo_classes
        else:
            values = [self.pseudo_element]
        return [v for v in values if v is not None]

    def render(self) -> str:
        """Render the selector string. Does not modify the builder."""
        selector = "".join(
            category.format(value)
            for category in Category
            for value in self.fragments(category)
        )
        logger.debug(f"Rendered selector: {selector}")
        return selector

    def __str__(self) -> str:
        return self.render()

    def _check(self, category: Category) -> None:
        # Duplicate takes precedence over ordering
        if category.is_singleton and self.fragments(category):
            logger.warning(f"Rejected second {category.label} in {self.render()!r}")
            raise DuplicateError(category)
        for later in Category:
            if later > category and self.fragments(later):
                logger.warning(
                    f"Rejected {category.label} after {later.label} in {self.render()!r}"
                )
                raise OrderError(category, later)

    def _added(self, category: Category, value: str) -> "SelectorBuilder":
        logger.debug(f"Added {category.label} fragment: {value}")
        return self
