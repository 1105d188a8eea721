"""Element adapter the preview binder mutates.

Wraps an ElementTree element and exposes the small slice of DOM behaviour
the binder needs: a class list, inline custom properties and events.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional
from xml.etree import ElementTree as ET

Listener = Callable[[Dict[str, Any]], None]


def _parse_style(style: str) -> Dict[str, str]:
    props: Dict[str, str] = {}
    for chunk in style.split(";"):
        if ":" not in chunk:
            continue
        name, value = chunk.split(":", 1)
        name = name.strip()
        if name:
            props[name] = value.strip()
    return props


def _format_style(props: Dict[str, str]) -> str:
    return "; ".join(f"{name}: {value}" for name, value in props.items())


class StyledElement:
    """A target element with a class list, an inline style map and listeners."""

    def __init__(self, element: Optional[ET.Element] = None, tag: str = "div", text: Optional[str] = None):
        self.element = element if element is not None else ET.Element(tag)
        if text is not None:
            self.element.text = text
        self._listeners: Dict[str, List[Listener]] = {}

    # -- class list ---------------------------------------------------------

    @property
    def classes(self) -> List[str]:
        return [c for c in (self.element.get("class") or "").split() if c]

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def add_class(self, name: str) -> None:
        classes = self.classes
        if name not in classes:
            classes.append(name)
        self.element.set("class", " ".join(classes))

    def remove_class(self, name: str) -> None:
        classes = [c for c in self.classes if c != name]
        if classes:
            self.element.set("class", " ".join(classes))
        else:
            self.element.attrib.pop("class", None)

    # -- inline style -------------------------------------------------------

    @property
    def style(self) -> Dict[str, str]:
        return _parse_style(self.element.get("style") or "")

    def get_property(self, name: str) -> Optional[str]:
        return self.style.get(name)

    def set_property(self, name: str, value: str) -> None:
        props = self.style
        props[name] = value
        self.element.set("style", _format_style(props))

    def remove_property(self, name: str) -> None:
        props = self.style
        if props.pop(name, None) is None:
            return
        if props:
            self.element.set("style", _format_style(props))
        else:
            self.element.attrib.pop("style", None)

    # -- attributes ---------------------------------------------------------

    def get_attribute(self, name: str) -> Optional[str]:
        return self.element.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self.element.set(name, value)

    def remove_attribute(self, name: str) -> None:
        self.element.attrib.pop(name, None)

    # -- events -------------------------------------------------------------

    def add_event_listener(self, event: str, listener: Listener) -> None:
        self._listeners.setdefault(event, []).append(listener)

    def remove_event_listener(self, event: str, listener: Listener) -> None:
        listeners = self._listeners.get(event, [])
        if listener in listeners:
            listeners.remove(listener)

    def dispatch_event(self, event: str, detail: Optional[Dict[str, Any]] = None) -> int:
        """Call listeners for `event`; returns how many were notified."""
        listeners = list(self._listeners.get(event, []))
        for listener in listeners:
            listener(dict(detail or {}))
        return len(listeners)

    def to_html(self) -> str:
        return ET.tostring(self.element, encoding="unicode", method="html")
