"""Entry points that start a new selector from its first fragment."""

from selector_kit.builder import SelectorBuilder


def element(value: str) -> SelectorBuilder:
    return SelectorBuilder().with_element(value)


def id_(value: str) -> SelectorBuilder:
    return SelectorBuilder().with_id(value)


def class_(value: str) -> SelectorBuilder:
    return SelectorBuilder().with_class(value)


def attr(value: str) -> SelectorBuilder:
    return SelectorBuilder().with_attribute(value)


def pseudo_class(value: str) -> SelectorBuilder:
    return SelectorBuilder().with_pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    return SelectorBuilder().with_pseudo_element(value)
