import re
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from playwright.sync_api import Error as PlaywrightError, sync_playwright
from pytest_bdd import given, parsers

from pageharness.scenario import after_scenario, before_scenario
from pageharness.utils.config import HarnessConfig

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Requests to example.com are answered from a local copy so scenarios run offline
EXAMPLE_SITE = re.compile(r"^https://(www\.)?example\.com(/.*)?$")


def make_playwright_factory():
    """Returns (factory, playwright, browser, context, page) test doubles."""
    playwright = MagicMock(name="playwright")
    browser = playwright.chromium.launch.return_value
    context = browser.new_context.return_value
    page = context.new_page.return_value
    factory = MagicMock(name="sync_playwright")
    factory.return_value.start.return_value = playwright
    return factory, playwright, browser, context, page


@pytest.fixture
def fake_driver():
    return make_playwright_factory()


@pytest.fixture(scope="session")
def browser_available():
    try:
        with sync_playwright() as p:
            browser = p.chromium.launch(headless=True)
            browser.close()
    except PlaywrightError as e:
        pytest.skip(f"Playwright browser not available: {str(e).splitlines()[0]}")


@pytest.fixture
def scenario_context(browser_available):
    ctx = before_scenario(HarnessConfig.from_env())
    ctx.registry.get_context().route(
        EXAMPLE_SITE,
        lambda route: route.fulfill(path=FIXTURES_DIR / "example.html"),
    )
    yield ctx
    after_scenario(ctx)


@given(parsers.parse('I navigate to "{url}"'))
def navigate_to(scenario_context, url):
    if "example.com" in url:
        scenario_context.pages.example_page().navigate_to(url)
    else:
        scenario_context.page.goto(url, wait_until="load", timeout=scenario_context.config.step_timeout_ms)


@given("I open the example page")
def open_example_page(scenario_context):
    scenario_context.pages.example_page().open()
