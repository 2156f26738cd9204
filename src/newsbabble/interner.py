"""Token interning."""

from __future__ import annotations

from typing import Dict, Iterator, List, NewType, Optional

TokenId = NewType("TokenId", int)

NULL_TOKEN: Optional[TokenId] = None


class TokenInterner:
    """Deduplicate token text and hand out stable integer identities.

    Ids are dense and assigned in first-seen order, so two tokens compare equal
    exactly when their texts do. Ids are never reused for the lifetime of the
    interner (``clear`` starts a fresh numbering along with a fresh table).
    """

    def __init__(self) -> None:
        self._ids: Dict[str, TokenId] = {}
        self._texts: List[str] = []
        self.lookups = 0

    def intern(self, text: str) -> TokenId:
        self.lookups += 1
        token_id = self._ids.get(text)
        if token_id is None:
            token_id = TokenId(len(self._texts))
            self._ids[text] = token_id
            self._texts.append(text)
        return token_id

    def lookup(self, text: str) -> Optional[TokenId]:
        """Return the id of ``text`` without interning it."""
        return self._ids.get(text)

    def text(self, token_id: TokenId) -> str:
        return self._texts[token_id]

    def clear(self) -> None:
        self._ids.clear()
        self._texts.clear()
        self.lookups = 0

    def __contains__(self, text: object) -> bool:
        return text in self._ids

    def __len__(self) -> int:
        return len(self._texts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._texts)


__all__ = ["NULL_TOKEN", "TokenId", "TokenInterner"]
