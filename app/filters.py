"""
Selection filtering for the adventure browser.

Design:
1. OR matching: a requirement is shown when ANY selected keyword hits ANY of its
   fields (alternate name, adventure name, tags, special-program tags).
2. The keyword category is not consulted when matching; a tag keyword whose text
   equals an adventure name selects that adventure too.
3. Everything is recomputed from the full flat list on each selection change.
"""

from collections import OrderedDict
from typing import Dict, Iterable, List, Sequence

from constants import MAX_RANK_COLUMNS, UNKNOWN_ADVENTURE, UNKNOWN_RANK
from models import AdventureGroup, Keyword, Requirement


# ==================== Selection ====================

def toggle_selection(selection: Sequence[Keyword], keyword: Keyword) -> List[Keyword]:
    """
    Add or remove a keyword from the selection.

    Args:
        selection (Sequence[Keyword]): current selection, insertion ordered
        keyword (Keyword): the clicked cloud item

    Returns:
        List[Keyword]: a new selection list; the input is left untouched

    Note:
        - identity is text + category, so "Bugs" as a tag and "Bugs" as an
          adventure name toggle independently
    """
    updated = list(selection)
    if keyword in updated:
        updated.remove(keyword)
    else:
        updated.append(keyword)
    return updated


def is_selected(selection: Iterable[Keyword], keyword: Keyword) -> bool:
    return keyword in selection


# ==================== Matching ====================

def keyword_matches(requirement: Requirement, text: str) -> bool:
    """Check one keyword text against the four matchable fields."""
    if requirement.adventure_alternate_name == text:
        return True
    if requirement.adventure_name == text:
        return True
    if text in requirement.tags:
        return True
    if requirement.special_program_tags and text in requirement.special_program_tags:
        return True
    return False


def requirement_matches(requirement: Requirement, selection: Iterable[Keyword]) -> bool:
    return any(keyword_matches(requirement, keyword.text) for keyword in selection)


def filter_matching(requirements: Iterable[Requirement], selection: Sequence[Keyword]) -> List[Requirement]:
    """Requirements matching the selection, in flat-list order."""
    if not selection:
        return []
    return [req for req in requirements if requirement_matches(req, selection)]


# ==================== Grouping ====================

def filter_requirements_by_rank(
    requirements: Iterable[Requirement],
    selection: Sequence[Keyword],
) -> Dict[str, List[AdventureGroup]]:
    """
    Filter requirements by the selection and group them by rank, then adventure.

    Args:
        requirements (Iterable[Requirement]): flat list from the extraction pass
        selection (Sequence[Keyword]): current selection

    Returns:
        Dict[str, List[AdventureGroup]]: rank name -> adventure groups

    Note:
        - empty selection -> {}
        - ranks without matches are absent; adventure groups keep first-seen order
        - requirements inside a group keep flat-list order
    """
    grouped: Dict[str, Dict[str, AdventureGroup]] = OrderedDict()
    for req in filter_matching(requirements, selection):
        rank = req.rank or UNKNOWN_RANK
        adventure = req.adventure_name or UNKNOWN_ADVENTURE
        by_adventure = grouped.setdefault(rank, OrderedDict())
        if adventure not in by_adventure:
            by_adventure[adventure] = AdventureGroup(name=adventure)
        by_adventure[adventure].requirements.append(req)

    return {rank: list(by_adventure.values()) for rank, by_adventure in grouped.items()}


# ==================== Rank Order ====================

def get_rank_order(requirements: Iterable[Requirement], limit: int = MAX_RANK_COLUMNS) -> List[str]:
    """
    Ranks in order of first appearance, at most `limit` of them.

    Ranks past the cap are dropped silently; their requirements are still in
    the grouped mapping but have no column to be drawn in.
    """
    order: List[str] = []
    for req in requirements:
        rank = req.rank or UNKNOWN_RANK
        if rank not in order:
            order.append(rank)
    return order[:limit]


def visible_rank_order(requirements: Iterable[Requirement], selection: Sequence[Keyword]) -> List[str]:
    return get_rank_order(filter_matching(requirements, selection))
