"""
Depth-first walk over artists and nested groups of artists.
"""

from typing import Iterable, Iterator, Tuple

from xkcdify.scene.kinds import ArtistKind, classify, group_children


def walk(items: Iterable) -> Iterator[Tuple[ArtistKind, object]]:
    """
    Yield ``(kind, artist)`` for every leaf reachable from ``items``.

    Groups are expanded in place, preserving order, using an explicit stack
    so arbitrarily deep nesting is fine. Each object is yielded at most once
    even when several groups share it. Unsupported objects are yielded too so
    the caller decides how to report them.
    """
    stack = list(reversed(list(items)))
    seen = set()

    while stack:
        obj = stack.pop()
        if id(obj) in seen:
            continue
        seen.add(id(obj))

        kind = classify(obj)
        if kind is ArtistKind.GROUP:
            stack.extend(reversed(list(group_children(obj))))
        else:
            yield kind, obj
