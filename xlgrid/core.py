from __future__ import annotations

__all__ = [
    "PERFORMANCE_WARNINGS",
    "RANGE_WARN_SIZE",
    "as_dataclass",
    "cached",
    "perf_warning",
    "record_fields",
    "replace",
]

import os
import warnings
from typing import TYPE_CHECKING, Any

from recordclass import as_dataclass as _as_dataclass
from typing_extensions import dataclass_transform

if TYPE_CHECKING:
    from typing import Callable, TypeVar

    from typing_extensions import ParamSpec

    T = TypeVar("T")
    P = ParamSpec("P")

    def cached(f: Callable[P, T]) -> Callable[P, T]:
        raise NotImplementedError

else:
    try:
        from functools import cache as cached
    except ImportError:
        from functools import lru_cache as cached

PERFORMANCE_WARNINGS: bool = os.environ.get("XLGRID_PERFORMANCE_WARNINGS", "0") == "1"
"Emit `UserWarning` on operations that are known to be slow (huge range enumeration, etc.)"

RANGE_WARN_SIZE: int = int(os.environ.get("XLGRID_RANGE_WARN_SIZE", "1000000"))
"Number of addresses above which range enumeration is reported (only with performance warnings on)"


def perf_warning(message: str) -> None:
    if PERFORMANCE_WARNINGS:
        warnings.warn(message, UserWarning, stacklevel=3)


@dataclass_transform()
def as_dataclass(
    cls: type[T] | None = None,
    *,
    use_dict: bool = False,
    use_weakref: bool = False,
    hashable: bool = False,
    sequence: bool = False,
    mapping: bool = False,
    iterable: bool = False,
    readonly: bool = False,
    fast_new: bool = False,
    rename: bool = False,
    gc: bool = False,
) -> Callable[[type[T]], type[T]]:
    def wrapper(cls: type[T]) -> type[T]:
        return _as_dataclass(
            use_dict=use_dict,
            use_weakref=use_weakref,
            hashable=hashable,
            sequence=sequence,
            mapping=mapping,
            iterable=iterable,
            readonly=readonly,
            fast_new=fast_new,
            rename=rename,
            gc=gc,
        )(cls)  # type: ignore

    if cls is not None:
        return wrapper(cls)  # type: ignore

    return wrapper


@cached
def record_fields(cls: type) -> tuple[str, ...]:
    """Field names of a record class, in declaration order"""
    fields = getattr(cls, "__fields__", None)
    if fields:
        return tuple(fields)
    return tuple(cls.__annotations__)


def replace(rec: T, **changes: Any) -> T:
    """Build a copy of an immutable record with some of its fields changed"""
    cls = type(rec)
    values = {name: getattr(rec, name) for name in record_fields(cls)}
    unknown = set(changes).difference(values)
    if unknown:
        raise TypeError(f"{cls.__name__} has no fields {sorted(unknown)}")
    values.update(changes)
    return cls(**values)
