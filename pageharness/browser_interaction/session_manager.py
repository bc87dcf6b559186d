from playwright.sync_api import sync_playwright, Browser, BrowserContext, Page, Playwright
from typing import Callable, Optional
import logging

from pageharness.browser_interaction.session_registry import SessionRegistry
from pageharness.shared.errors import HarnessError
from pageharness.utils.config import HarnessConfig

logger = logging.getLogger(__name__)

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class SessionManager:
    """
    Launches the browser, context and page for one scenario, publishes them
    through a SessionRegistry and releases them again.
    """
    def __init__(
        self,
        config: Optional[HarnessConfig] = None,
        registry: Optional[SessionRegistry] = None,
        playwright_factory: Callable = sync_playwright,
    ):
        self.config = config or HarnessConfig()
        self.registry = registry if registry is not None else SessionRegistry()
        self.playwright_factory = playwright_factory
        self.playwright: Optional[Playwright] = None

    @property
    def page(self) -> Optional[Page]:
        return self.registry.get_page()

    def start(self) -> Page:
        """Starts a new browser session, registers it and returns the page."""
        if self.registry.is_active:
            return self.registry.get_page()

        if self.config.browser not in SUPPORTED_BROWSERS:
            raise HarnessError(f"Unsupported browser: {self.config.browser}")

        browser: Optional[Browser] = None
        context: Optional[BrowserContext] = None
        page: Optional[Page] = None
        try:
            self.playwright = self.playwright_factory().start()
            browser_type = getattr(self.playwright, self.config.browser)
            browser = browser_type.launch(
                headless=self.config.headless,
                timeout=self.config.session_timeout_ms,
            )
            context = browser.new_context(viewport=self.config.viewport)
            # Bounds every step-level wait issued through this context
            context.set_default_timeout(self.config.step_timeout_ms)
            page = context.new_page()
        except Exception:
            logger.error("Session start failed, releasing partially created resources")
            self._release(page, context, browser)
            raise

        self.registry.register(browser, context, page)
        logger.info(
            f"Started {self.config.browser} session "
            f"(headless={self.config.headless}, viewport={self.config.viewport})"
        )
        return page

    def close(self):
        """Closes the session. Never raises; failures are logged and skipped."""
        self._release(
            self.registry.get_page(),
            self.registry.get_context(),
            self.registry.get_engine(),
        )
        self.registry.reset()
        logger.info("Session closed")

    def _release(self, page, context, browser):
        for name, resource in (("page", page), ("context", context), ("browser", browser)):
            if resource is None:
                continue
            try:
                resource.close()
            except Exception as e:
                logger.warning(f"Ignoring error while closing {name}: {e}")

        if self.playwright is not None:
            try:
                self.playwright.stop()
            except Exception as e:
                logger.warning(f"Ignoring error while stopping playwright: {e}")
            self.playwright = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
