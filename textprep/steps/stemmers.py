"""Stemming backends available to the stem step.

Each backend maps a sequence of tokens to a sequence of stems of the same
length and order. Options from the step configuration are passed through
as keyword arguments without inspection.
"""

from functools import lru_cache
from typing import Any, Callable, Sequence

import Stemmer

from textprep.core.exceptions import ConfigurationError

StemFunc = Callable[..., list[str]]


@lru_cache(maxsize=None)
def _snowball(language: str, max_cache_size: int) -> Stemmer.Stemmer:
    return Stemmer.Stemmer(language, max_cache_size)


def snowball_stem(
    tokens: Sequence[str],
    language: str = "porter",
    max_cache_size: int = 10000,
) -> list[str]:
    """Stem tokens with the libstemmer Snowball algorithm for ``language``.

    The default "porter" is the original Porter algorithm; pass
    ``language="english"`` for Porter2.

    Only the end of each token is stripped, so multi-word strings such as
    n-grams are not stemmed reliably.

    Examples:
        >>> snowball_stem(["organizing", "organizes", "organization"])
        ['organ', 'organ', 'organ']
    """
    return list(_snowball(language, max_cache_size).stemWords(list(tokens)))


SUPPORTED_STEMMERS: dict[str, StemFunc] = {
    "snowball": snowball_stem,
}


def resolve_stemmer(name: str) -> StemFunc:
    """Return the stemming function registered under ``name``.

    Raises:
        ConfigurationError: If the stemmer is not supported.
    """
    stem_fun = SUPPORTED_STEMMERS.get(name)
    if stem_fun is None:
        supported = ", ".join(f"'{key}'" for key in SUPPORTED_STEMMERS)
        raise ConfigurationError(
            f"stemmer should be one of the supported {supported}",
            context={"stemmer": name},
        )
    return stem_fun


def list_stemmers() -> list[str]:
    """Return the names of the supported stemmers."""
    return sorted(SUPPORTED_STEMMERS.keys())


def stem_tokens(stem_fun: StemFunc, tokens: Sequence[str] | None, options: dict[str, Any]) -> list[str]:
    """Stem one row of tokens; a missing row stems to an empty list."""
    if not tokens:
        return []
    return stem_fun(tokens, **options)
