# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: QuoteRecord
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class QuoteRecord:
    """One (character, quote) row read from the tabular source."""
    character: str
    quote: str
    row: Optional[int] = None  # 1-based line in the source file, header included

    def to_properties(self) -> Dict[str, str]:
        return {
            "character": self.character,
            "quote": self.quote,
        }

    def short_preview(self, n: int = 60) -> str:
        """Return a compact preview for logging/debugging."""
        clean = " ".join(self.quote.split())
        preview = (clean[:n] + "...") if len(clean) > n else clean
        return f"[{self.character}] {preview}"
