"""Coverage scoring and ranking.

A recipe ingredient counts as matched when the pantry holds an item whose name
or barcode label is equal to it, contains it, or is contained by it (all on
normalized keys). Coverage is the matched share of the ingredient list.
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from larder.domain.Coverage import CoverageResult
from larder.domain.Recipe import Recipe
from larder.logic.matching.bank import MatchBank, find_candidates
from larder.logic.matching.normalizer import normalize, keys_match

__all__ = ["forced_total", "coverage_ratio", "score", "score_recipe", "rank_results"]

NamePool = Iterable[Optional[str]]


def forced_total(ingredient_count: int) -> int:
    """Ingredient count, but 1 for an empty recipe so the ratio stays defined."""
    return ingredient_count or 1


def coverage_ratio(total: int, missing_count: int) -> float:
    return (total - missing_count) / total


def _pool_matches(key: str, pool_keys: Sequence[str]) -> bool:
    return any(keys_match(key, m) for m in pool_keys)


def score(ingredients: Sequence[Optional[str]], bank_or_pool: Union[MatchBank, NamePool]) -> Dict[str, Any]:
    """Split ingredient names into matched / missing.

    ``bank_or_pool`` is either a MatchBank or any iterable of raw names (the
    flat pool of item names and alias labels). Both give the same verdicts.

    Returns ``{matched, missing, counts: {matched, missing, total}, coverage}``.
    """
    if isinstance(bank_or_pool, MatchBank):
        bank = bank_or_pool
        pool_keys = None
    else:
        bank = None
        pool_keys = [k for k in (normalize(n) for n in bank_or_pool) if k]

    matched: List[str] = []
    missing: List[str] = []
    for name in ingredients:
        key = normalize(name)
        if not key:
            hit = False
        elif bank is not None:
            hit = bool(find_candidates(bank, key))
        else:
            hit = _pool_matches(key, pool_keys)
        (matched if hit else missing).append(name)

    total = forced_total(len(ingredients))
    return {
        "matched": matched,
        "missing": missing,
        "counts": {"matched": len(matched), "missing": len(missing), "total": total},
        "coverage": coverage_ratio(total, len(missing)),
    }


def score_recipe(recipe: Recipe, bank_or_pool: Union[MatchBank, NamePool]) -> CoverageResult:
    # Materialize a one-shot iterator so every recipe sees the whole pool
    if not isinstance(bank_or_pool, (MatchBank, list, tuple)):
        bank_or_pool = list(bank_or_pool)
    result = score(recipe.ingredient_names, bank_or_pool)
    return CoverageResult(
        recipe_id=recipe.id,
        title=recipe.title,
        coverage=result["coverage"],
        matched=result["matched"],
        missing=result["missing"],
        total=result["counts"]["total"],
    )


def rank_results(results: Iterable[CoverageResult], min_coverage: float = 0.0,
                 limit: Optional[int] = None) -> List[CoverageResult]:
    """Filter by ``min_coverage``, order best first, then truncate.

    Order is coverage descending, then fewer total ingredients first; equal
    results keep their input order. A falsy ``limit`` returns everything,
    otherwise at least one result is kept.
    """
    kept = [r for r in results if r.coverage >= min_coverage]
    kept.sort(key=lambda r: (-r.coverage, r.total))
    if not limit:
        return kept
    return kept[:max(1, int(limit))]
