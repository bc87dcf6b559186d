"""Page objects and the per-scenario manager that resolves them by name."""

from pageharness.pages.base_page import BasePage
from pageharness.pages.example_page import ExamplePage
from pageharness.pages.page_manager import PageObjectManager
from pageharness.pages.registry import register_page, known_pages

__all__ = ["BasePage", "ExamplePage", "PageObjectManager", "register_page", "known_pages"]
