"""Integration tests: discovery, registration and resolution together."""

import pytest

from beanctx import ApplicationContext
from beanctx.errors import CircularDependency, DuplicateName


class TestShopApplication:
    """Resolve the sample shop package end to end."""

    def setup_method(self):
        self.context = ApplicationContext("shop_app")
        self.context.init()

    def teardown_method(self):
        self.context.close()

    def test_service_receives_cached_repository(self):
        """The service's repository is the same bean returned by name."""
        from shop_app.repositories import OrderRepository
        from shop_app.services import OrderService

        service = self.context.gen_bean("orderService", OrderService)

        assert isinstance(service.repository, OrderRepository)
        assert self.context.gen_bean("orderRepository") is service.repository
        assert service.describe(1) == "book"

    def test_repository_constructed_before_service(self):
        self.context.gen_bean("orderService")

        assert self.context.singleton_count == 2

    def test_widest_constructor_used_for_report(self):
        report = self.context.gen_bean("dailyReport")

        assert report.service is self.context.gen_bean("orderService")
        assert report.clock is self.context.gen_bean("clock")

    def test_every_bean_resolves(self):
        for name in self.context.bean_names():
            bean = self.context.gen_bean(name)
            assert type(bean) is self.context.get_definition(name).type


class TestBrokenApplications:
    """Failure modes surfaced through the context."""

    def test_cycle_in_scanned_package(self):
        context = ApplicationContext("cyclic_app")

        with pytest.raises(CircularDependency) as exc_info:
            context.gen_bean("farm")

        assert exc_info.value.chain == ("farm", "egg", "chicken", "egg")
        assert context.singleton_count == 0

    def test_duplicate_names_rejected_at_init(self):
        context = ApplicationContext("dup_app")

        with pytest.raises(DuplicateName) as exc_info:
            context.init()

        assert exc_info.value.name == "widget"
        assert not context.is_initialized
