"""Element refs and focus ordering.

The controller never touches a UI toolkit. The host puts an
``ElementHandle`` into each field's ``ElementRef`` once the input exists,
and the controller uses it for one thing: focusing the first invalid
field in document order, the order tab navigation follows.
"""

import logging
from collections.abc import Iterable
from functools import cmp_to_key
from typing import Protocol, runtime_checkable

logger = logging.getLogger("formcodec.refs")


@runtime_checkable
class ElementHandle(Protocol):
    """What the host must provide for a rendered input."""

    def compare_position(self, other: "ElementHandle") -> int:
        """Negative if ``self`` comes before *other* in document order, positive if after, 0 if unknown."""
        ...

    def focus(self) -> None: ...


class ElementRef:
    """A slot the host fills with the field's element handle (or leaves empty)."""

    __slots__ = ("current", "name")

    def __init__(self, name: str) -> None:
        self.name = name
        self.current: ElementHandle | None = None

    def __repr__(self) -> str:
        state = "empty" if self.current is None else "attached"
        return f"ElementRef({self.name!r}, {state})"


def _document_order(a: ElementRef, b: ElementRef) -> int:
    return a.current.compare_position(b.current)  # type: ignore[union-attr,arg-type]


def first_in_document(refs: Iterable[ElementRef]) -> ElementRef | None:
    """Return the attached ref whose element comes first in document order.

    Refs without an element are ignored. Ties keep the given order.
    """
    attached = [ref for ref in refs if ref.current is not None]
    if not attached:
        return None
    return sorted(attached, key=cmp_to_key(_document_order))[0]


def focus_first(refs: Iterable[ElementRef]) -> bool:
    """Focus the first attached element in document order.

    Never raises: a missing element is a no-op and a failing host handle
    is logged. Returns True if ``focus()`` was called successfully.
    """
    refs = list(refs)
    try:
        first = first_in_document(refs)
        if first is None:
            logger.debug("No mounted element for fields %s; skipping focus", [r.name for r in refs])
            return False
        first.current.focus()  # type: ignore[union-attr]
    except Exception:
        logger.warning("Focusing the first invalid field failed", exc_info=True)
        return False
    logger.debug("Focused field %r", first.name)
    return True
