"""Entities configured from scene-script tokens, and named factory registries."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

from .vector import Vector3

log = logging.getLogger("raytrace")

PROPERTIES_END = "}"

T = TypeVar("T")


class SceneFormatError(ValueError):
    """Raised when a scene script cannot be read."""


def _next_word(words: Iterator[str], what: str) -> str:
    try:
        return next(words)
    except StopIteration:
        raise SceneFormatError(f"unexpected end of scene while reading {what}") from None


def read_float(tokens: Iterator[str]) -> float:
    """Consume one token and parse it as a number."""
    word = _next_word(tokens, "a number")
    try:
        return float(word)
    except ValueError:
        raise SceneFormatError(f"expected a number, got {word!r}") from None


def read_vector(tokens: Iterator[str]) -> Vector3:
    """Consume three tokens as the x, y and z of a vector."""
    x = read_float(tokens)
    y = read_float(tokens)
    z = read_float(tokens)
    return Vector3(x, y, z)


class Entity:
    """Something in a scene whose properties are read from a script."""

    def load_properties(self, tokens: Iterable[str]) -> None:
        """Read properties until the closing brace."""
        stream = iter(tokens)
        for word in stream:
            if word == PROPERTIES_END:
                return
            self.process_property(stream, word)
        raise SceneFormatError(f"missing {PROPERTIES_END!r} at end of properties")

    def process_property(self, tokens: Iterator[str], name: str) -> None:
        """Handle one named property; the base class rejects every name."""
        log.warning("%s is not a valid property. Please check syntax", name)


class Registry(Generic[T]):
    """Factories looked up by type name."""

    def __init__(self) -> None:
        self._factories: dict[str, Callable[[], T]] = {}

    def register(self, name: str, factory: Callable[[], T]) -> None:
        self._factories[name] = factory

    def create(self, name: str) -> T:
        try:
            factory = self._factories[name]
        except KeyError:
            raise KeyError(f"no factory registered for {name!r}") from None
        return factory()

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)