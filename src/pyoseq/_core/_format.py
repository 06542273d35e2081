from collections.abc import Iterable

import cytoolz as cz


def iter_repr(values: Iterable[object], max_items: int = 10) -> str:
    preview = tuple(cz.itertoolz.take(max_items + 1, values))
    body = ", ".join(repr(v) for v in preview[:max_items])
    suffix = ", ..." if len(preview) > max_items else ""
    return body + suffix
