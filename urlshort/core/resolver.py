# urlshort/core/resolver.py
"""
Exact-path redirect lookup with a chain of fallbacks.

A MapResolver answers the paths in its own PathMapping and hands everything
else to its fallback. Chains always end in a DefaultHandler, so every path
resolves to something.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterable, Iterator, Optional, Protocol, Tuple, Union

from urlshort.config import DEFAULT_BODY
from urlshort.models.mappings import PathToUrl, Redirect, StaticResponse

logger = logging.getLogger(__name__)

Outcome = Union[Redirect, StaticResponse]
Pair = Union[Tuple[str, str], PathToUrl]


class Resolver(Protocol):
    def resolve(self, request_path: str) -> Outcome:
        ...


class PathMapping(Mapping):
    """
    Read-only path -> URL table.

    Accepts (path, url) tuples, PathToUrl records or a plain dict.
    Later duplicates overwrite earlier ones.
    """

    __slots__ = ("_urls",)

    def __init__(self, pairs: Union[Iterable[Pair], Mapping] = ()):
        if isinstance(pairs, Mapping):
            pairs = pairs.items()

        urls = {}
        for pair in pairs:
            if isinstance(pair, PathToUrl):
                urls[pair.path] = pair.url
            else:
                path, url = pair
                urls[path] = url

        self._urls = MappingProxyType(urls)

    def __getitem__(self, path: str) -> str:
        return self._urls[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._urls)

    def __len__(self) -> int:
        return len(self._urls)

    def __repr__(self) -> str:
        return f"PathMapping({dict(self._urls)!r})"


class DefaultHandler:
    """Terminal handler: same static body for every path."""

    def __init__(self, body: str = DEFAULT_BODY):
        self.body = body

    def resolve(self, request_path: str) -> StaticResponse:
        return StaticResponse(body=self.body)


class MapResolver:
    def __init__(self, mapping: PathMapping, fallback: Resolver):
        if not isinstance(mapping, PathMapping):
            mapping = PathMapping(mapping)
        self.mapping = mapping
        self.fallback = fallback

    def lookup(self, request_path: str) -> Optional[str]:
        return self.mapping.get(request_path)

    def resolve(self, request_path: str) -> Outcome:
        url = self.lookup(request_path)
        if url is not None:
            logger.info("Matched: %s", url)
            return Redirect(url=url)
        return self.fallback.resolve(request_path)


def chain(*mappings: PathMapping, default: Optional[Resolver] = None) -> Resolver:
    """
    Compose mappings so the first one given is consulted first.

    chain(a, b) is MapResolver(a, MapResolver(b, DefaultHandler())).
    """
    resolver = default if default is not None else DefaultHandler()
    for mapping in reversed(mappings):
        resolver = MapResolver(mapping, resolver)
    return resolver
