"""Tests for the selector builder."""

import pytest

from selector_kit.builder import SelectorBuilder
from selector_kit.errors import DuplicateError, OrderError
from selector_kit.models import Category


class TestSelectorBuilderRendering:
    def given_empty_builder(self):
        self.builder = SelectorBuilder()

    def given_every_category(self):
        self.builder = (
            SelectorBuilder()
            .with_element("input")
            .with_id("email")
            .with_class("field")
            .with_class("required")
            .with_attribute('type="email"')
            .with_attribute("required")
            .with_pseudo_class("focus")
            .with_pseudo_class("invalid")
            .with_pseudo_element("placeholder")
        )

    def when_rendered(self):
        self.selector = self.builder.render()

    def then_selector_is(self, expected):
        assert self.selector == expected

    def test_renders_categories_in_order_with_markers(self):
        """Each category renders with its marker, in category order."""
        self.given_every_category()
        self.when_rendered()
        self.then_selector_is(
            'input#email.field.required[type="email"][required]'
            ":focus:invalid::placeholder"
        )

    def test_empty_builder_renders_empty_string(self):
        """A builder with no fragments renders nothing."""
        self.given_empty_builder()
        self.when_rendered()
        self.then_selector_is("")

    def test_render_is_idempotent(self):
        """Rendering twice returns the same string and leaves state alone."""
        self.given_every_category()
        first = self.builder.render()
        self.when_rendered()
        self.then_selector_is(first)
        assert self.builder.class_names == ["field", "required"]

    def test_str_matches_render(self):
        """str() of a builder is its rendered selector."""
        self.given_every_category()
        self.when_rendered()
        assert str(self.builder) == self.selector

    def test_methods_return_same_instance(self):
        """Chained calls mutate and return the same builder."""
        self.given_empty_builder()
        assert self.builder.with_element("div") is self.builder
        assert self.builder.with_class("a") is self.builder

    def test_add_dispatches_by_category(self):
        """add() routes to the matching with_* method."""
        self.given_empty_builder()
        self.builder.add(Category.ELEMENT, "a").add(Category.PSEUDO_CLASS, "hover")
        self.when_rendered()
        self.then_selector_is("a:hover")


class TestSelectorBuilderDuplicates:
    def given_builder_with_element_and_id(self):
        self.builder = SelectorBuilder().with_element("div").with_id("main")

    def given_builder_with_pseudo_element(self):
        self.builder = SelectorBuilder().with_pseudo_element("after")

    def then_raises_duplicate(self, call):
        with pytest.raises(DuplicateError) as exc_info:
            call()
        self.error = exc_info.value

    def test_second_id_is_rejected(self):
        """A second id raises DuplicateError."""
        self.given_builder_with_element_and_id()
        self.then_raises_duplicate(lambda: self.builder.with_id("other"))
        assert self.error.category is Category.ID

    def test_second_element_is_rejected_as_duplicate_not_order(self):
        """A second element is a duplicate even though an id follows it."""
        self.given_builder_with_element_and_id()
        self.then_raises_duplicate(lambda: self.builder.with_element("span"))
        assert self.error.category is Category.ELEMENT

    def test_second_pseudo_element_is_rejected(self):
        """A second pseudo-element raises DuplicateError."""
        self.given_builder_with_pseudo_element()
        self.then_raises_duplicate(lambda: self.builder.with_pseudo_element("before"))

    def test_duplicate_message_names_singletons(self):
        """The error message lists the singleton categories."""
        self.given_builder_with_element_and_id()
        self.then_raises_duplicate(lambda: self.builder.with_id("other"))
        assert "more than one time" in str(self.error)

    def test_failed_call_leaves_state_unchanged(self):
        """A rejected duplicate does not modify the builder."""
        self.given_builder_with_element_and_id()
        self.then_raises_duplicate(lambda: self.builder.with_id("other"))
        assert self.builder.render() == "div#main"


class TestSelectorBuilderOrdering:
    def given_builder_with_class(self):
        self.builder = SelectorBuilder().with_class("container")

    def given_builder_with_pseudo_element(self):
        self.builder = SelectorBuilder().with_element("p").with_pseudo_element("first-line")

    def then_raises_order(self, call):
        with pytest.raises(OrderError) as exc_info:
            call()
        self.error = exc_info.value

    def test_element_after_class_is_rejected(self):
        """Adding an element after a class raises OrderError."""
        self.given_builder_with_class()
        self.then_raises_order(lambda: self.builder.with_element("div"))
        assert self.error.category is Category.ELEMENT
        assert self.error.populated is Category.CLASS

    def test_id_after_class_is_rejected(self):
        """Adding an id after a class raises OrderError."""
        self.given_builder_with_class()
        self.then_raises_order(lambda: self.builder.with_id("main"))

    @pytest.mark.parametrize(
        "method",
        ["with_element", "with_id", "with_class", "with_attribute", "with_pseudo_class"],
    )
    def test_nothing_but_duplicates_follow_pseudo_element(self, method):
        """Every earlier category is rejected once a pseudo-element is set."""
        self.given_builder_with_pseudo_element()
        if method == "with_element":
            with pytest.raises(DuplicateError):
                getattr(self.builder, method)("span")
        else:
            self.then_raises_order(lambda: getattr(self.builder, method)("x"))
            assert self.error.populated is Category.PSEUDO_ELEMENT

    def test_class_after_attribute_is_rejected(self):
        """Adding a class after an attribute raises OrderError."""
        builder = SelectorBuilder().with_attribute("disabled")
        self.then_raises_order(lambda: builder.with_class("btn"))

    def test_order_message_lists_category_order(self):
        """The error message spells out the required order."""
        self.given_builder_with_class()
        self.then_raises_order(lambda: self.builder.with_element("div"))
        assert "element, id, class, attribute, pseudo-class, pseudo-element" in str(
            self.error
        )

    def test_repeatable_categories_accept_more_values_in_place(self):
        """Classes may keep coming while no later category is set."""
        self.given_builder_with_class()
        self.builder.with_class("editable").with_attribute("title")
        assert self.builder.render() == ".container.editable[title]"
