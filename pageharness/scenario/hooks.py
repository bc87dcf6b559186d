"""
Scenario lifecycle hooks.

before_scenario creates a fresh session and page-object cache and returns
them as a ScenarioContext; the runner passes that context to every step and
finally to after_scenario. Nothing is kept in module globals, so scenarios
running in parallel workers never see each other's browser.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Optional
import logging

from playwright.sync_api import Page, sync_playwright

from pageharness.browser_interaction.session_manager import SessionManager
from pageharness.browser_interaction.session_registry import SessionRegistry
from pageharness.pages.page_manager import PageObjectManager
from pageharness.utils.config import HarnessConfig

logger = logging.getLogger(__name__)


@dataclass
class ScenarioContext:
    config: HarnessConfig
    registry: SessionRegistry
    session: SessionManager
    pages: PageObjectManager

    @property
    def page(self) -> Optional[Page]:
        return self.registry.get_page()


def before_scenario(
    config: Optional[HarnessConfig] = None,
    playwright_factory: Callable = sync_playwright,
) -> ScenarioContext:
    """Launches and registers a new session. Raises if the browser cannot be started."""
    config = config or HarnessConfig.from_env()
    registry = SessionRegistry()
    session = SessionManager(config, registry, playwright_factory=playwright_factory)
    session.start()
    pages = PageObjectManager(
        registry,
        timeout_ms=config.step_timeout_ms,
        base_urls=config.base_urls,
    )
    return ScenarioContext(config=config, registry=registry, session=session, pages=pages)


def after_scenario(ctx: ScenarioContext):
    """Tears the session down. Teardown failures are logged, never raised."""
    try:
        ctx.session.close()
    except Exception as e:
        logger.warning(f"Ignoring teardown error: {e}")
    finally:
        ctx.registry.reset()
        ctx.pages.reset()


@contextmanager
def scenario_session(
    config: Optional[HarnessConfig] = None,
    playwright_factory: Callable = sync_playwright,
) -> Iterator[ScenarioContext]:
    ctx = before_scenario(config, playwright_factory=playwright_factory)
    try:
        yield ctx
    finally:
        after_scenario(ctx)
