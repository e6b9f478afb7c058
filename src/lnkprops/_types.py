"""Shared type aliases for lnkprops modules."""

from collections.abc import Callable

PathArg = str | list[str]
PropertyRecord = dict[str, str]
Sink = Callable[..., None]
Runner = Callable[[str], str | bytes]
