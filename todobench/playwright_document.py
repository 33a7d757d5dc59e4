from __future__ import annotations

from typing import Any, List, Optional


class PlaywrightElement:
    """
    Thin wrapper around a Playwright `ElementHandle`.

    Gives a handle the small DOM surface the suite talks to: a writable
    `value`, `dispatch_event(...)` and a native `click()`.
    """

    def __init__(self, handle):
        self._handle = handle

    @property
    def value(self) -> str:
        return self._handle.input_value()

    @value.setter
    def value(self, value: str) -> None:
        # Plain property write, like `node.value = ...` in page script.
        self._handle.evaluate("(el, value) => { el.value = value; }", value)

    def dispatch_event(self, type: str, event_init: Optional[dict] = None) -> None:
        self._handle.dispatch_event(type, event_init)

    def click(self) -> None:
        # HTMLElement.click(), not a mouse click: no hover, no actionability
        # wait. TodoMVC only shows destroy buttons on hover.
        self._handle.evaluate("(el) => el.click()")

    def __getattr__(self, name: str) -> Any:
        return getattr(self._handle, name)


class PlaywrightDocument:
    """Thin wrapper around a Playwright `Page` exposing class-based lookup."""

    def __init__(self, page):
        self._page = page

    def get_elements_by_class_name(self, class_name: str) -> List[PlaywrightElement]:
        # Snapshot per call; each step queries again so removals are seen.
        handles = self._page.query_selector_all(f".{class_name}")
        return [PlaywrightElement(h) for h in handles]

    def __getattr__(self, name: str) -> Any:
        # Anything not wrapped is delegated to the page unchanged.
        return getattr(self._page, name)
