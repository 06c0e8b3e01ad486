"""Station name normalization and fuzzy matching."""

import unicodedata

from rapidfuzz import fuzz, process


def remove_accents(text: str) -> str:
    """Remove accents from text while preserving case."""
    nfkd = unicodedata.normalize("NFKD", text)
    return "".join(c for c in nfkd if not unicodedata.combining(c))


def normalize_whitespace(text: str) -> str:
    """Normalize whitespace (collapse multiple spaces, strip)."""
    return " ".join(text.split())


def normalize_station_name(name: str) -> str:
    """
    Normalize a station name for matching.

    Converts to lowercase, removes accents, replaces hyphens and
    apostrophes with spaces, and normalizes whitespace.

    Examples:
        "Château-Rouge" -> "chateau rouge"
        "Gare d'Austerlitz" -> "gare d austerlitz"
    """
    name = remove_accents(name.lower())
    name = name.replace("-", " ").replace("'", " ")
    return normalize_whitespace(name)


def suggest_station_names(
    text: str,
    names: list[str],
    threshold: int = 70,
    limit: int = 3,
) -> list[tuple[str, int]]:
    """
    Find known station names close to a mistyped one.

    Args:
        text: Name typed by the user
        names: Known station names
        threshold: Minimum similarity score (0-100)
        limit: Maximum number of suggestions

    Returns:
        List of tuples (station_name, score) sorted by score descending
    """
    if not text or not names:
        return []

    normalized_to_original: dict[str, str] = {}
    for name in names:
        normalized_to_original.setdefault(normalize_station_name(name), name)

    results = process.extract(
        normalize_station_name(text),
        list(normalized_to_original),
        scorer=fuzz.ratio,
        limit=limit,
        score_cutoff=threshold,
    )
    return [
        (normalized_to_original[match], int(score)) for match, score, _idx in results
    ]
