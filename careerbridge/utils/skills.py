# careerbridge/utils/skills.py
import re
from typing import Dict, Iterable, Iterator, List, Optional

_SPACE_RE = re.compile(r"\s+")


def normalize_skill(s: str) -> str:
    """Lowercases and collapses whitespace; the comparison key for a skill name."""
    return _SPACE_RE.sub(" ", (s or "").lower()).strip()


class SkillSet:
    """
    Case-insensitive set of skill names that remembers one display casing per skill.

    The first occurrence of a skill decides its casing and its position; later
    duplicates (in any casing) are ignored. Blank entries are dropped.
    Set operations return display strings taken from ``self``, so call them on the
    side whose casing should win (e.g. ``required.intersection(candidate)``).
    """

    __slots__ = ("_display",)

    def __init__(self, skills: Optional[Iterable[str]] = None):
        self._display: Dict[str, str] = {}
        for s in skills or ():
            self._add(s)

    def _add(self, s: str) -> None:
        if not isinstance(s, str):
            return
        key = normalize_skill(s)
        if key and key not in self._display:
            self._display[key] = s.strip()

    @classmethod
    def union_of(cls, collections: Iterable[Iterable[str]]) -> "SkillSet":
        out = cls()
        for skills in collections:
            for s in skills or ():
                out._add(s)
        return out

    # --- set protocol ---
    def __len__(self) -> int:
        return len(self._display)

    def __bool__(self) -> bool:
        return bool(self._display)

    def __iter__(self) -> Iterator[str]:
        return iter(self._display.values())

    def __contains__(self, skill: object) -> bool:
        return isinstance(skill, str) and normalize_skill(skill) in self._display

    def __repr__(self) -> str:
        return f"SkillSet({list(self)!r})"

    @property
    def keys(self) -> frozenset:
        return frozenset(self._display)

    def display(self, skill: str) -> Optional[str]:
        """Canonical casing for ``skill`` if present."""
        return self._display.get(normalize_skill(skill))

    def to_list(self) -> List[str]:
        return list(self._display.values())

    # --- reconciliation (results in self's order and casing) ---
    def intersection(self, other: "SkillSet") -> List[str]:
        return [v for k, v in self._display.items() if k in other._display]

    def difference(self, other: "SkillSet") -> List[str]:
        return [v for k, v in self._display.items() if k not in other._display]

    def overlaps(self, other: "SkillSet") -> bool:
        return any(k in other._display for k in self._display)
