"""CoverageResult: how much of a recipe the current pantry inventory satisfies."""
from typing import List, Optional


class CoverageResult:
    def __init__(self, recipe_id: Optional[int] = None, title: str = "", coverage: float = 0.0,
                 matched: Optional[List[str]] = None, missing: Optional[List[str]] = None, total: int = 1):
        self.recipe_id = recipe_id
        self.title = title
        self.coverage = coverage
        self.matched = matched[:] if matched else []
        self.missing = missing[:] if missing else []
        self.total = total

    @property
    def counts(self):
        return {"matched": len(self.matched), "missing": len(self.missing), "total": self.total}

    def __str__(self) -> str:
        return f"{self.title} - {self.coverage:.0%} ({len(self.matched)}/{self.total})"

    __repr__ = __str__

    def to_dict(self):
        return {
            "recipe_id": self.recipe_id,
            "title": self.title,
            "coverage": self.coverage,
            "matched": self.matched,
            "missing": self.missing,
            "counts": self.counts,
        }
