"""
Core data records for the adventure browser.

Everything here is derived once from the loaded dataset and never mutated;
only the user's selection (a plain list of Keyword) changes between reruns.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set


class KeywordCategory(str, Enum):
    """The four keyword blocks of the cloud. Values double as CSS class names."""

    REQUIRED_ADVENTURE = "required"
    OPTIONAL_ADVENTURE = "not-required"
    TAG = "tag-keyword"
    SPECIAL_PROGRAM = "special-program"


# Order of the blocks in the cloud
CATEGORY_ORDER = (
    KeywordCategory.REQUIRED_ADVENTURE,
    KeywordCategory.OPTIONAL_ADVENTURE,
    KeywordCategory.TAG,
    KeywordCategory.SPECIAL_PROGRAM,
)


@dataclass(frozen=True)
class Keyword:
    """One selectable cloud item. Same text in two categories = two keywords."""

    text: str
    category: KeywordCategory


@dataclass(frozen=True)
class Requirement:
    """One requirement, flattened with the fields of its adventure and rank."""

    name: str
    description: str
    tags: List[str]
    adventure_name: str
    adventure_alternate_name: str
    adventure_required: bool
    adventure_url: Optional[str]
    rank: str
    special_program_tags: Optional[List[str]] = None


@dataclass
class AdventureGroup:
    """Matching requirements of one adventure, in flat-list order."""

    name: str
    requirements: List[Requirement] = field(default_factory=list)

    @property
    def alternate_name(self) -> str:
        if not self.requirements:
            return ""
        return self.requirements[0].adventure_alternate_name


@dataclass
class Vocabulary:
    """Output of the keyword extraction pass."""

    required_names: Set[str] = field(default_factory=set)
    not_required_names: Set[str] = field(default_factory=set)
    tags: Set[str] = field(default_factory=set)
    special_programs: Set[str] = field(default_factory=set)
    requirements: List[Requirement] = field(default_factory=list)

    def keyword_sets(self) -> Dict[KeywordCategory, Set[str]]:
        return {
            KeywordCategory.REQUIRED_ADVENTURE: self.required_names,
            KeywordCategory.OPTIONAL_ADVENTURE: self.not_required_names,
            KeywordCategory.TAG: self.tags,
            KeywordCategory.SPECIAL_PROGRAM: self.special_programs,
        }
