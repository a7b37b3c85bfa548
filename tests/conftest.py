"""Minimal Django setup for the test suite."""

from __future__ import annotations

import django
import pytest
from django.conf import settings


def pytest_configure() -> None:
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=["mdengine"],
            CACHES={"default": {"BACKEND": "django.core.cache.backends.locmem.LocMemCache"}},
            TEMPLATES=[{"BACKEND": "django.template.backends.django.DjangoTemplates"}],
            MARKDOWN_ENGINE={"base_url": "https://example.com", "site_name": "Example"},
        )
        django.setup()


@pytest.fixture(autouse=True)
def _reset_default_hooks():
    from django.core.cache import cache

    from mdengine.markdown.hooks import hooks

    hooks.clear()
    cache.clear()
    yield
    hooks.clear()


@pytest.fixture
def hook_registry():
    from mdengine.markdown.hooks import HookRegistry

    return HookRegistry()
