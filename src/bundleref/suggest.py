"""Did-you-mean suggestions for unknown bundle aliases.

Candidates are checked in three passes and the first hit wins:

1. case-insensitive exact match (``foobundle`` -> ``FooBundle``)
2. closest by edit distance, within a cutoff proportional to the
   length of the unknown alias (``FoodBundle`` -> ``FooBundle``)
3. substring in either direction, longest candidate first
   (``FabpotFoo`` -> ``FabpotFooBundle``)

Every pass walks the candidates in sorted order, so equally good
matches resolve to the lexicographically first alias.
"""

from collections.abc import Iterable

DEFAULT_MAX_DISTANCE_RATIO = 1 / 3


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance between two strings.

    Used by the second suggestion pass; callers lower-case both aliases
    first so the distance ignores case.
    """
    if len(a) > len(b):
        a, b = b, a
    prev = list(range(len(a) + 1))
    for j in range(1, len(b) + 1):
        curr = [j] + [0] * len(a)
        for i in range(1, len(a) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            curr[i] = min(curr[i - 1] + 1, prev[i] + 1, prev[i - 1] + cost)
        prev = curr
    return prev[len(a)]


def _closest(target: str, candidates: list[str], *, max_dist: float) -> str | None:
    """Find the closest candidate by edit distance, or ``None`` if nothing is close."""
    best: str | None = None
    best_dist = max_dist
    for candidate in candidates:
        dist = edit_distance(target, candidate.lower())
        if dist <= best_dist and (best is None or dist < best_dist):
            best_dist = dist
            best = candidate
    return best


def suggest_alternative(
    invalid_alias: str,
    known_aliases: Iterable[str],
    *,
    max_distance_ratio: float = DEFAULT_MAX_DISTANCE_RATIO,
) -> str | None:
    """Return the registered alias the caller most likely meant.

    Returns ``None`` when no candidate is a plausible match, in which
    case error messages should carry no suggestion.
    """
    candidates = sorted(set(known_aliases))  # sorted for determinism
    if not invalid_alias or not candidates:
        return None
    needle = invalid_alias.lower()

    for candidate in candidates:
        if candidate.lower() == needle:
            return candidate

    closest = _closest(needle, candidates, max_dist=len(invalid_alias) * max_distance_ratio)
    if closest is not None:
        return closest

    partial = [c for c in candidates if needle in c.lower() or c.lower() in needle]
    if partial:
        # max() keeps the first of equal lengths, i.e. the lexicographically first
        return max(partial, key=len)
    return None
