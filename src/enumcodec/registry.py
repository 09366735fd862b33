"""Union registration for enumcodec.

Registration is the one explicit step that turns a TaggedUnion declaration
into a usable codec: it validates the declaration, computes the layout once
and stores it on the class. Every encode and decode afterwards reads that
layout and never changes it.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar, Union, overload

from structlog import get_logger

from .codec.schema import EncodingLayout, analyze
from .exceptions import SchemaError
from .models.base import TaggedUnion, UnionOptions

logger = get_logger()

U = TypeVar("U", bound=TaggedUnion)


@overload
def register_union(union_class: type[U]) -> type[U]: ...


@overload
def register_union(
    union_class: None = None, *, start_at: Optional[int] = None
) -> Callable[[type[U]], type[U]]: ...


def register_union(
    union_class: Optional[type[U]] = None, *, start_at: Optional[int] = None
) -> Union[type[U], Callable[[type[U]], type[U]]]:
    """Register a TaggedUnion subclass and compute its layout.

    Usable as a bare decorator or with options. ``start_at`` overrides the
    class's ``enumcodec_start_at``. Registering the same class again recomputes
    the same layout.

    Args:
        union_class: TaggedUnion subclass to register
        start_at: First tag assigned to auto-numbered variants

    Returns:
        The registered class (or a decorator when called with options only)

    Raises:
        SchemaError: If the class or its declaration is invalid

    Example:
        >>> @register_union(start_at=1)
        ... class Status(TaggedUnion):
        ...     enumcodec_variants: ClassVar[Sequence[VariantSpec]] = [
        ...         Unit("Idle"),
        ...         Unit("Busy"),
        ...         Constant("Unknown", 255),
        ...     ]
        >>> Status.of("Idle").encode()
        1
    """

    def _register(cls: type[U]) -> type[U]:
        if not (isinstance(cls, type) and issubclass(cls, TaggedUnion)) or cls is TaggedUnion:
            raise SchemaError(f"register_union expects a TaggedUnion subclass, got {cls!r}")

        options = UnionOptions.for_union(cls, start_at)
        layout = analyze(
            cls.enumcodec_variants,
            start_at=options.start_at,
            name=cls.__name__,
            owner=cls,
        )
        cls.enumcodec_layout = layout
        logger.debug(
            "union registered",
            union=cls.__name__,
            start_at=options.start_at,
            mask_width=layout.mask_width,
        )
        return cls

    if union_class is None:
        return _register
    return _register(union_class)


def layout_of(union: Any) -> EncodingLayout:
    """Return the layout of a registered union class or union value.

    Raises:
        SchemaError: If the class was never registered
    """
    union_class = type(union) if isinstance(union, TaggedUnion) else union
    if not (isinstance(union_class, type) and issubclass(union_class, TaggedUnion)):
        raise SchemaError(f"Expected a TaggedUnion class or value, got {union!r}")
    return union_class.layout()
