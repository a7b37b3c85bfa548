"""Tests for mdengine.security: the trusted callback gate."""

from __future__ import annotations

import pytest

from mdengine.errors import (
    UntrustedCallbackDeprecationWarning,
    UntrustedCallbackError,
    UntrustedCallbackWarning,
)
from mdengine.security import (
    ErrorPolicy,
    TrustedCallbackInterface,
    do_trusted_callback,
    is_trusted_callback,
)


class Trusted(TrustedCallbackInterface):
    trusted_callbacks = frozenset({"render", "render_static"})

    def __init__(self) -> None:
        self.calls = []

    def render(self, value):
        self.calls.append(("render", value))
        return f"rendered {value}"

    def other(self, value):
        self.calls.append(("other", value))
        return f"other {value}"

    @staticmethod
    def render_static(value):
        return f"static {value}"


class Untrusted:
    def __init__(self) -> None:
        self.called = False

    def run(self, value):
        self.called = True
        return value * 2


class Plugin:
    def run(self, value):
        return f"plugin {value}"

    def _private(self, value):
        return value


def module_function(value):
    return value


# ── Trust classification ─────────────────────────────────────────────────


class TestTrustClassification:
    def test_lambda_is_trusted(self) -> None:
        assert is_trusted_callback(lambda value: value)

    def test_nested_function_is_trusted(self) -> None:
        def inner(value):
            return value

        assert is_trusted_callback(inner)

    def test_module_function_is_not_trusted(self) -> None:
        assert not is_trusted_callback(module_function)

    def test_listed_method_is_trusted(self) -> None:
        assert is_trusted_callback(Trusted().render)
        assert is_trusted_callback((Trusted(), "render"))
        assert is_trusted_callback((Trusted, "render_static"))

    def test_unlisted_method_is_not_trusted(self) -> None:
        assert not is_trusted_callback(Trusted().other)

    def test_plain_object_method_is_not_trusted(self) -> None:
        assert not is_trusted_callback(Untrusted().run)

    def test_extra_trusted_class(self) -> None:
        assert is_trusted_callback(Plugin().run, extra_trusted=Plugin)
        assert not is_trusted_callback(Plugin()._private, extra_trusted=Plugin)
        assert not is_trusted_callback(Plugin().run)

    def test_string_form(self) -> None:
        assert is_trusted_callback(f"{__name__}.Trusted::render_static")
        assert not is_trusted_callback(f"{__name__}.Trusted::other")


# ── Invocation ───────────────────────────────────────────────────────────


class TestDoTrustedCallback:
    def test_lambda_runs_under_every_policy(self) -> None:
        for policy in ErrorPolicy:
            assert do_trusted_callback(lambda v: v + 1, [1], "%s", policy) == 2

    def test_trusted_method_returns_result_unchanged(self) -> None:
        obj = Trusted()
        assert do_trusted_callback(obj.render, ["x"], "%s") == "rendered x"
        assert obj.calls == [("render", "x")]

    def test_string_callback_invokes_static_method(self) -> None:
        result = do_trusted_callback(f"{__name__}.Trusted::render_static", ["y"], "%s")
        assert result == "static y"

    def test_untrusted_raises_and_does_not_invoke(self) -> None:
        obj = Untrusted()
        with pytest.raises(UntrustedCallbackError) as exc_info:
            do_trusted_callback(obj.run, [2], "Callback %s is not trusted")
        assert not obj.called
        assert f"{__name__}.Untrusted::run" in str(exc_info.value)

    def test_default_policy_is_exception(self) -> None:
        with pytest.raises(UntrustedCallbackError):
            do_trusted_callback(module_function, [1], "untrusted")

    def test_warning_policy_warns_and_invokes(self) -> None:
        obj = Untrusted()
        with pytest.warns(UntrustedCallbackWarning, match="Untrusted::run"):
            result = do_trusted_callback(obj.run, [2], "%s", ErrorPolicy.TRIGGER_WARNING)
        assert result == 4
        assert obj.called

    def test_silenced_policy_invokes(self) -> None:
        obj = Untrusted()
        with pytest.warns(UntrustedCallbackDeprecationWarning):
            result = do_trusted_callback(obj.run, [3], "%s", "silenced_deprecation")
        assert result == 6
        assert obj.called

    def test_message_without_placeholder(self) -> None:
        with pytest.raises(UntrustedCallbackError, match="^nope$"):
            do_trusted_callback(Trusted().other, [1], "nope")

    def test_unknown_policy_rejected(self) -> None:
        with pytest.raises(ValueError):
            do_trusted_callback(lambda: None, [], "%s", "explode")

    def test_silenced_deprecation_warning_is_pending_deprecation(self) -> None:
        assert issubclass(UntrustedCallbackDeprecationWarning, PendingDeprecationWarning)

    def test_message_with_literal_percent(self) -> None:
        with pytest.raises(UntrustedCallbackError, match=r"100% sure: .*Trusted::other"):
            do_trusted_callback(Trusted().other, [1], "100% sure: %s")
