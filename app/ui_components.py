import html
from typing import Dict, List, Optional, Sequence

import pandas as pd
import streamlit as st

from constants import MAX_RANK_COLUMNS
from filters import is_selected
from keywords import count_by_category
from models import CATEGORY_ORDER, AdventureGroup, Keyword, KeywordCategory, Requirement
from utils import format_tags

CATEGORY_LABELS = {
    KeywordCategory.REQUIRED_ADVENTURE: "Required adventures",
    KeywordCategory.OPTIONAL_ADVENTURE: "Elective adventures",
    KeywordCategory.TAG: "Tags",
    KeywordCategory.SPECIAL_PROGRAM: "Special programs",
}

CLOUD_COLUMNS = 6


# --- Keyword cloud (returns the clicked keyword, if any) ---
def render_keyword_cloud(cloud: Sequence[Keyword], selection: Sequence[Keyword]) -> Optional[Keyword]:
    clicked = None
    counts = count_by_category(cloud)
    for category in CATEGORY_ORDER:
        block = [(i, kw) for i, kw in enumerate(cloud) if kw.category == category]
        if not block:
            continue
        st.markdown(f"<div class='cloud-block-title'>{CATEGORY_LABELS[category]} ({counts[category]})</div>", unsafe_allow_html=True)
        cols = st.columns(CLOUD_COLUMNS)
        for j, (i, keyword) in enumerate(block):
            col = cols[j % CLOUD_COLUMNS]
            selected = is_selected(selection, keyword)
            if col.button(
                keyword.text,
                key=f"cloud_{category.value}_{i}",
                type="primary" if selected else "secondary",
                use_container_width=True,
            ):
                clicked = keyword
    return clicked


# --- One requirement as HTML list item ---
def create_requirement_html(req: Requirement) -> str:
    name = html.escape(req.name)
    if req.adventure_url:
        name = f"<a href='{html.escape(req.adventure_url, quote=True)}' target='_blank'>{name}</a>"
    out = f"{name}: <span class='requirement-desc'>{html.escape(req.description)}</span>"
    if req.tags:
        out += f"<br><span class='tag is-light'>{html.escape(format_tags(req.tags))}</span>"
    if req.special_program_tags:
        out += f"<br><span class='tag special-program'>{html.escape(format_tags(req.special_program_tags))}</span>"
    return f"<li>{out}</li>"


# --- One adventure box ---
def create_adventure_html(group: AdventureGroup, style: Dict[str, str]) -> str:
    title = html.escape(group.name)
    if group.alternate_name:
        title += f" <span class='adventure-altname'>{html.escape(group.alternate_name)}</span>"
    items = "<hr class='requirement-sep'>".join(create_requirement_html(req) for req in group.requirements)
    return f"""
    <div class='adventure-group'>
        <div class='adventure-box' style='background:{style["bg"]};'>
            <div class='adventure-title' style='color:{style["color"]};'>{title}</div>
            <ul>{items}</ul>
        </div>
    </div>
    """


# --- Rank columns (at most MAX_RANK_COLUMNS) ---
def render_requirements_grid(
    grouped: Dict[str, List[AdventureGroup]],
    rank_order: Sequence[str],
    rank_styles: Dict[str, Dict[str, str]],
):
    if not rank_order:
        return
    cols = st.columns(min(len(rank_order), MAX_RANK_COLUMNS))
    for col, rank in zip(cols, rank_order):
        style = rank_styles[rank]
        col.markdown(
            f"<div class='rank-header' style='background:{style['color']}; color:{style['text']};'>"
            f"{html.escape(rank)}</div>",
            unsafe_allow_html=True,
        )
        for group in grouped.get(rank, []):
            col.markdown(create_adventure_html(group, style), unsafe_allow_html=True)


# --- Table view ---
def get_requirements_df(grouped: Dict[str, List[AdventureGroup]], rank_order: Sequence[str]) -> pd.DataFrame:
    data = []
    for rank in rank_order:
        for group in grouped.get(rank, []):
            for req in group.requirements:
                data.append({
                    "Rank": rank,
                    "Adventure": group.name,
                    "Alternate name": req.adventure_alternate_name,
                    "Required": req.adventure_required,
                    "Requirement": req.name,
                    "Description": req.description,
                    "Tags": format_tags(req.tags),
                    "Special programs": format_tags(req.special_program_tags or []),
                    "URL": req.adventure_url or "",
                })
    return pd.DataFrame(data, columns=[
        "Rank", "Adventure", "Alternate name", "Required", "Requirement",
        "Description", "Tags", "Special programs", "URL",
    ])
