"""Join rendered selectors with a combinator."""

import logging
from dataclasses import dataclass

from selector_kit.models import COMBINATORS, Renderable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CombinedSelector:
    """A fixed selector string produced by combine()."""

    text: str

    def render(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


def combine(left: Renderable, combinator: str, right: Renderable) -> CombinedSelector:
    """Combine two selectors as ``"<left> <combinator> <right>"``.

    The combinator is always padded with one space on each side, so the
    descendant combinator yields three spaces between the operands.
    Either operand may itself be the result of an earlier combine().

    Args:
        left: Selector rendered before the combinator
        combinator: One of " ", "+", "~", ">"
        right: Selector rendered after the combinator

    Returns:
        CombinedSelector holding the joined string

    Raises:
        ValueError: If the combinator is not supported
        TypeError: If an operand has no render() method
    """
    if combinator not in COMBINATORS:
        raise ValueError(
            f"Unsupported combinator {combinator!r}, expected one of {COMBINATORS}"
        )
    for operand in (left, right):
        if not isinstance(operand, Renderable):
            raise TypeError(f"Cannot combine {type(operand).__name__}: no render()")

    text = f"{left.render()} {combinator} {right.render()}"
    logger.debug(f"Combined selector: {text}")
    return CombinedSelector(text)
