"""Tests for the error hierarchy."""

import pytest

from beanctx.errors import (
    BeanContextError,
    CircularDependency,
    ConfigurationError,
    ConstructionFailed,
    DiscoveryError,
    DuplicateName,
    ErrorContext,
    NoSatisfyingType,
    NoSuchBean,
    TypeMismatch,
)


class Sample:
    pass


class TestBeanContextError:
    """Test base error behaviour."""

    def test_generated_error_codes(self):
        assert NoSuchBean("x").error_code == "NO_SUCH_BEAN"
        assert CircularDependency(["a", "a"]).error_code == "CIRCULAR_DEPENDENCY"
        assert ConfigurationError("bad").error_code == "CONFIGURATION"
        assert DiscoveryError("pkg").error_code == "DISCOVERY"

    def test_explicit_error_code(self):
        error = BeanContextError("custom", error_code="CUSTOM_CODE")

        assert error.error_code == "CUSTOM_CODE"

    def test_message_is_user_message(self):
        error = BeanContextError("something broke")

        assert str(error) == "something broke"
        assert error.context.user_message == "something broke"

    def test_cause_is_recorded(self):
        cause = RuntimeError("disk full")
        error = BeanContextError("disk full", cause=cause)

        assert error.cause is cause
        assert error.message == "disk full"
        assert error.context.related_errors[0]["type"] == "RuntimeError"

    def test_with_suggestion_chains(self):
        error = BeanContextError("failed").with_suggestion("Try again")

        assert error.with_suggestion("Retry later") is error
        assert error.context.suggestions == ["Try again", "Retry later"]

    def test_to_dict(self):
        error = NoSuchBean("ghost")

        data = error.to_dict()

        assert data["error_type"] == "NoSuchBean"
        assert data["error_code"] == "NO_SUCH_BEAN"
        assert data["message"] == "No bean named: ghost"
        assert data["context"]["technical_details"] == {"bean_name": "ghost"}
        assert data["cause"] is None

    def test_format_for_cli(self):
        error = NoSuchBean("ghost")

        brief = error.format_for_cli()
        verbose = error.format_for_cli(verbose=True)

        assert "No bean named: ghost" in brief
        assert "Code: NO_SUCH_BEAN" in brief
        assert "Suggestions" in brief
        assert "Technical Details" not in brief
        assert "bean_name: ghost" in verbose

    def test_errors_are_logged_at_debug(self, log_messages):
        NoSuchBean("ghost")

        assert "No bean named: ghost" in log_messages


class TestErrorTypes:
    """Test specific error types."""

    def test_no_such_bean_is_lookup_error(self):
        with pytest.raises(LookupError):
            raise NoSuchBean("ghost")

    def test_type_mismatch_is_type_error(self):
        error = TypeMismatch("sample", int, Sample)

        assert isinstance(error, TypeError)
        assert "expected int" in error.message
        assert "Sample" in error.message

    def test_no_satisfying_type_message(self):
        error = NoSatisfyingType(Sample, required_by=int)

        assert error.message.startswith("No bean of type: ")
        assert "Sample" in error.message
        assert "(required by int)" in error.message

    def test_construction_failed_keeps_cause(self):
        cause = ValueError("boom")
        error = ConstructionFailed(Sample, cause)

        assert error.bean_type is Sample
        assert error.cause is cause
        assert "Create bean failed" in error.message

    def test_circular_dependency_chain(self):
        error = CircularDependency(["a", "b", "a"])

        assert error.chain == ("a", "b", "a")
        assert error.message == "Circular dependency detected: a -> b -> a"

    def test_duplicate_name_mentions_both_types(self):
        error = DuplicateName("sample", existing=Sample, duplicate=int)

        assert error.existing is Sample
        assert error.duplicate is int
        assert "Duplicate bean name: sample" in error.message

    def test_missing_base_package(self):
        error = ConfigurationError.missing_base_package()

        assert error.error_code == "CONFIG_MISSING_FIELD"
        assert error.context.technical_details["field_path"] == "base_package"
        assert error.context.suggestions

    def test_configuration_error_path(self, tmp_path):
        path = tmp_path / "beanctx.yaml"
        error = ConfigurationError("bad file", config_path=path)

        assert error.config_path == path
        assert error.context.technical_details["config_path"] == str(path)

    def test_error_context_defaults(self):
        context = ErrorContext()

        assert context.suggestions == []
        assert context.technical_details == {}
        assert context.timestamp is not None
