import logging
from unittest.mock import patch

import pytest
from pageharness.pages.example_page import ExamplePage
from pageharness.scenario import after_scenario, before_scenario, scenario_session
from pageharness.shared.errors import UninitializedSessionError
from pageharness.utils.config import HarnessConfig


def test_before_scenario_builds_context(fake_driver):
    factory, _, browser, context, page = fake_driver
    config = HarnessConfig(step_timeout_ms=5000, base_urls={"example": "http://localhost:8000"})

    ctx = before_scenario(config, playwright_factory=factory)

    assert ctx.config is config
    assert ctx.page is page
    assert ctx.registry.get_engine() is browser
    assert ctx.registry.get_context() is context

    example = ctx.pages.resolve("example")
    assert isinstance(example, ExamplePage)
    assert example.page is page
    assert example.timeout_ms == 5000
    assert example.base_url == "http://localhost:8000"

    after_scenario(ctx)


def test_after_scenario_resets_registry_and_cache(fake_driver):
    factory, playwright, browser, context, page = fake_driver
    ctx = before_scenario(HarnessConfig(), playwright_factory=factory)
    ctx.pages.example_page()

    after_scenario(ctx)

    page.close.assert_called_once()
    context.close.assert_called_once()
    browser.close.assert_called_once()
    playwright.stop.assert_called_once()
    assert ctx.page is None
    with pytest.raises(UninitializedSessionError):
        ctx.pages.example_page()


@pytest.mark.parametrize("missing", [
    ("page",),
    ("context",),
    ("engine",),
    ("page", "context"),
    ("page", "context", "engine"),
])
def test_after_scenario_with_missing_resources(fake_driver, missing):
    factory = fake_driver[0]
    ctx = before_scenario(HarnessConfig(), playwright_factory=factory)
    cached = ctx.pages.example_page()
    for name in missing:
        getattr(ctx.registry, f"set_{name}")(None)

    after_scenario(ctx)

    assert ctx.registry.get_engine() is None
    assert ctx.registry.get_context() is None
    assert ctx.registry.get_page() is None
    ctx.registry.set_page(fake_driver[4])
    assert ctx.pages.example_page() is not cached


def test_after_scenario_never_raises(fake_driver, caplog):
    factory = fake_driver[0]
    ctx = before_scenario(HarnessConfig(), playwright_factory=factory)
    ctx.pages.example_page()

    with patch.object(ctx.session, "close", side_effect=RuntimeError("boom")):
        with caplog.at_level(logging.WARNING):
            after_scenario(ctx)

    assert "boom" in caplog.text
    assert not ctx.registry.is_active
    assert ctx.pages._pages == {}


def test_scenario_session_tears_down_on_failure(fake_driver):
    factory, playwright, browser, _, _ = fake_driver
    with pytest.raises(AssertionError):
        with scenario_session(HarnessConfig(), playwright_factory=factory) as ctx:
            assert ctx.page is not None
            assert False, "step failed"
    browser.close.assert_called_once()
    playwright.stop.assert_called_once()
    assert ctx.page is None


def test_scenarios_get_independent_contexts(fake_driver):
    factory = fake_driver[0]
    first = before_scenario(HarnessConfig(), playwright_factory=factory)
    second = before_scenario(HarnessConfig(), playwright_factory=factory)

    assert first.registry is not second.registry
    assert first.pages is not second.pages

    after_scenario(first)
    assert second.registry.is_active
    after_scenario(second)
