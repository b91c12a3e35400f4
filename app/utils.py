from typing import Dict, Iterable, List

from constants import DEFAULT_RANK_STYLE, RANK_COLORS


#--- Rank key used for the colour table ---
def get_rank_key(rank):
    return (rank or "").strip().lower()


#--- Colours for one rank column ---
def get_rank_style(rank) -> Dict[str, str]:
    return dict(RANK_COLORS.get(get_rank_key(rank), DEFAULT_RANK_STYLE))


#--- Colours for every visible rank ---
def build_rank_styles(rank_order: Iterable[str]) -> Dict[str, Dict[str, str]]:
    return {rank: get_rank_style(rank) for rank in rank_order}


#--- Tag list for display ---
def format_tags(tags: List[str]) -> str:
    return ", ".join(tag for tag in tags if tag)
