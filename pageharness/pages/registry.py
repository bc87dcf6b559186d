"""Table of page-object classes keyed by logical page name."""

from typing import Dict, List, Optional, Type

from pageharness.pages.base_page import BasePage

_PAGE_OBJECTS: Dict[str, Type[BasePage]] = {}


def register_page(name: str):
    """Class decorator registering a page object under a case-insensitive name."""
    def decorator(cls: Type[BasePage]) -> Type[BasePage]:
        _PAGE_OBJECTS[name.lower()] = cls
        return cls
    return decorator


def get_page_class(name: str) -> Optional[Type[BasePage]]:
    return _PAGE_OBJECTS.get(name.lower())


def known_pages() -> List[str]:
    return sorted(_PAGE_OBJECTS)
