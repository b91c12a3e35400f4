"""
Keyword vocabulary for the adventure cloud.

Walks the parsed dataset once (ranks -> adventure_list -> requirements) and
produces the four keyword sets plus the flat requirement list, then turns
the sets into the ordered cloud shown to the user.
"""

import unicodedata
from typing import Any, Dict, Iterable, List, Mapping, Tuple, Union

from constants import SPECIAL_PROGRAM_FIELDS, UNKNOWN_ADVENTURE, UNKNOWN_RANK
from models import CATEGORY_ORDER, Keyword, KeywordCategory, Requirement, Vocabulary


# ==================== Field Normalization ====================

def _as_text(value: Any) -> str:
    """None -> "", anything else -> its string form."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def normalize_special_program_tags(value: Any) -> List[str]:
    """
    Normalize an adventure's special-program field to a list of strings.

    Args:
        value: raw field value, may be None, a single string or a list

    Returns:
        List[str]: program names in source order

    Note:
        - non-string entries and empty strings are dropped
    """
    if value is None:
        return []
    if isinstance(value, str):
        values = [value]
    elif isinstance(value, (list, tuple)):
        values = list(value)
    else:
        return []
    return [v for v in values if isinstance(v, str) and v]


def _special_program_value(adventure: Mapping[str, Any]) -> Any:
    for field_name in SPECIAL_PROGRAM_FIELDS:
        if adventure.get(field_name) is not None:
            return adventure[field_name]
    return None


def _requirement_tags(raw_tags: Any) -> List[str]:
    if not isinstance(raw_tags, list):
        return []
    return [tag for tag in raw_tags if isinstance(tag, str) and tag]


# ==================== Vocabulary Extraction ====================

def extract_keywords_and_requirements(data: Any) -> Vocabulary:
    """
    Extract the keyword sets and the flat requirement list from the dataset.

    Args:
        data: parsed dataset, expected shape
              {"ranks": [{"rank": ..., "adventure_list": [{..., "requirements": [...]}]}]}

    Returns:
        Vocabulary: four keyword sets plus requirements in traversal order

    Note:
        - missing ranks / adventure_list / requirements contribute nothing, never raise
        - alternate_name goes to the required or not-required set depending on `required`;
          an adventure without one still has its requirements flattened
        - tags are collected per requirement, special programs per adventure
        - the empty string is removed from every set at the end
    """
    vocabulary = Vocabulary()
    if not isinstance(data, Mapping):
        return vocabulary

    ranks = data.get("ranks")
    if not isinstance(ranks, list):
        return vocabulary

    for rank in ranks:
        if not isinstance(rank, Mapping):
            continue
        adventures = rank.get("adventure_list")
        if not isinstance(adventures, list):
            continue
        rank_name = _as_text(rank.get("rank")) or UNKNOWN_RANK

        for adventure in adventures:
            if not isinstance(adventure, Mapping):
                continue
            adventure_name = _as_text(adventure.get("name")) or UNKNOWN_ADVENTURE
            alternate_name = _as_text(adventure.get("alternate_name"))
            required = bool(adventure.get("required"))

            if alternate_name:
                if required:
                    vocabulary.required_names.add(alternate_name)
                else:
                    vocabulary.not_required_names.add(alternate_name)

            program_tags = normalize_special_program_tags(_special_program_value(adventure))
            vocabulary.special_programs.update(program_tags)

            requirements = adventure.get("requirements")
            if not isinstance(requirements, list):
                requirements = []

            for req in requirements:
                if not isinstance(req, Mapping):
                    continue
                tags = _requirement_tags(req.get("tags"))
                vocabulary.tags.update(tags)
                vocabulary.requirements.append(Requirement(
                    name=_as_text(req.get("name")),
                    description=_as_text(req.get("description")),
                    tags=tags,
                    adventure_name=adventure_name,
                    adventure_alternate_name=alternate_name,
                    adventure_required=required,
                    adventure_url=_as_text(adventure.get("url")) or None,
                    rank=rank_name,
                    special_program_tags=list(program_tags) if program_tags else None,
                ))

    for keyword_set in vocabulary.keyword_sets().values():
        keyword_set.discard("")
    return vocabulary


# ==================== Cloud ====================

def _strip_diacritics(s: str) -> str:
    nfkd = unicodedata.normalize("NFKD", s)
    return "".join(ch for ch in nfkd if not unicodedata.combining(ch))


def locale_sort_key(text: str) -> Tuple[str, str, str, str]:
    """
    Collation key close to a browser's localeCompare.

    Base letters compare first, then accents, then case (lowercase before
    uppercase); the raw string breaks whatever is left so the order is total.
    """
    folded = _strip_diacritics(text)
    return (folded.casefold(), text.casefold(), folded.swapcase(), text)


def build_cloud(
    keyword_sets: Union[Vocabulary, Mapping[KeywordCategory, Iterable[Any]]]
) -> List[Keyword]:
    """
    Build the ordered keyword cloud.

    Args:
        keyword_sets: a Vocabulary, or the four sets keyed by KeywordCategory

    Returns:
        List[Keyword]: required, not-required, tag, then special-program blocks,
                       each sorted with locale_sort_key

    Note:
        - sorting is explicit, set iteration order never leaks into the result
        - non-string and empty values are skipped
    """
    if isinstance(keyword_sets, Vocabulary):
        keyword_sets = keyword_sets.keyword_sets()

    cloud = []
    for category in CATEGORY_ORDER:
        texts = {text for text in keyword_sets.get(category, ()) if isinstance(text, str) and text}
        for text in sorted(texts, key=locale_sort_key):
            cloud.append(Keyword(text=text, category=category))
    return cloud


def count_by_category(cloud: Iterable[Keyword]) -> Dict[KeywordCategory, int]:
    counts = {category: 0 for category in CATEGORY_ORDER}
    for keyword in cloud:
        counts[keyword.category] += 1
    return counts
