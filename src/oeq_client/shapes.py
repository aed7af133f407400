"""
Runtime shape checks for data crossing the network boundary.

A validator is any pure, total predicate over an untyped value. ``Shape`` is
the stock one: it wraps a pydantic ``TypeAdapter`` so any model or type
annotation can be checked, and a valid value can then be parsed into the
typed model.
"""

from typing import Any, Callable, Generic, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError

from oeq_types.common import BaseEntity, PagedResult

T = TypeVar("T")

Validator = Callable[[Any], bool]
Transformer = Callable[[Any], T]


class Shape(Generic[T]):
    """
    Validator for values of type ``T``.

    Calling a Shape never raises: it answers whether the value conforms.

    Example:
        ```python
        is_drm_details = Shape(ItemDrmDetails)
        if is_drm_details(payload):
            details = is_drm_details.parse(payload)
        ```
    """

    def __init__(self, type_: Any, name: Optional[str] = None):
        self._adapter: TypeAdapter[T] = TypeAdapter(type_)
        self.name = name or getattr(type_, "__name__", repr(type_))

    def __repr__(self) -> str:
        return f"Shape({self.name})"

    def __call__(self, value: Any) -> bool:
        try:
            self._adapter.validate_python(value)
        except (ValueError, TypeError):
            return False
        return True

    def parse(self, value: Any) -> T:
        """Build the typed value. Raises pydantic.ValidationError on mismatch."""
        return self._adapter.validate_python(value)

    def explain(self, value: Any) -> str:
        """Short description of why ``value`` does not match, for error messages."""
        try:
            self._adapter.validate_python(value)
        except ValidationError as e:
            errors = e.errors()
            first = errors[0]
            location = ".".join(str(part) for part in first["loc"]) or "<root>"
            return (
                f"expected {self.name}, got {type(value).__name__} "
                f"({len(errors)} problem(s), first at '{location}': {first['msg']})"
            )
        except (ValueError, TypeError) as e:
            return f"expected {self.name}, got {type(value).__name__} ({e})"
        return f"matches {self.name}"


def is_paged_base_entity(value: Any) -> bool:
    """Standard validator for BaseEntity instances wrapped in a PagedResult."""
    return _PAGED_BASE_ENTITY(value)


_PAGED_BASE_ENTITY: Shape[PagedResult[BaseEntity]] = Shape(PagedResult[BaseEntity])
