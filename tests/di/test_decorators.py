"""Tests for component and constructor decorators."""

import pytest

from beanctx.di import (
    bean_name_for,
    component,
    constructor,
    get_component_metadata,
    is_component,
)
from beanctx.di.decorators import is_constructor


class TestBeanNames:
    """Test bean name derivation."""

    def test_first_character_lowercased(self):
        class OrderService:
            pass

        assert bean_name_for(OrderService) == "orderService"

    def test_acronym_keeps_rest_of_name(self):
        class HTTPClient:
            pass

        assert bean_name_for(HTTPClient) == "hTTPClient"

    def test_already_lowercase(self):
        class clock:
            pass

        assert bean_name_for(clock) == "clock"


class TestComponentDecorator:
    """Test the @component decorator."""

    def test_bare_decorator(self):
        """@component tags the class and returns it unchanged."""
        @component
        class PaymentGateway:
            pass

        metadata = get_component_metadata(PaymentGateway)
        assert metadata is not None
        assert metadata.name == "paymentGateway"
        assert metadata.module == __name__
        assert is_component(PaymentGateway)

    def test_called_decorator(self):
        """@component() behaves like the bare form."""
        @component()
        class Mailer:
            pass

        assert get_component_metadata(Mailer).name == "mailer"

    def test_undecorated_class(self):
        class Plain:
            pass

        assert get_component_metadata(Plain) is None
        assert not is_component(Plain)

    def test_subclass_is_not_a_component(self):
        """Component metadata is not inherited."""
        @component
        class Base:
            pass

        class Derived(Base):
            pass

        assert is_component(Base)
        assert not is_component(Derived)

    def test_rejects_non_class(self):
        with pytest.raises(TypeError):
            component(lambda: None)


class TestConstructorDecorator:
    """Test the @constructor marker."""

    def test_outside_classmethod(self):
        class Thing:
            @constructor
            @classmethod
            def build(cls):
                return cls()

        assert is_constructor(vars(Thing)["build"])

    def test_inside_classmethod(self):
        class Thing:
            @classmethod
            @constructor
            def build(cls):
                return cls()

        assert is_constructor(vars(Thing)["build"])

    def test_staticmethod(self):
        class Thing:
            @constructor
            @staticmethod
            def build():
                return Thing()

        assert is_constructor(vars(Thing)["build"])

    def test_unmarked_method(self):
        class Thing:
            @classmethod
            def build(cls):
                return cls()

        assert not is_constructor(vars(Thing)["build"])
