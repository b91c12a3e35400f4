import logging
import os

import streamlit as st

from constants import EMPTY_SELECTION_MESSAGE, LOAD_FAILED_MESSAGE, LOG_LEVEL_ENV, NO_MATCH_MESSAGE
from data_loader import DatasetLoadError, load_adventures
from filters import filter_requirements_by_rank, toggle_selection, visible_rank_order
from keywords import build_cloud, extract_keywords_and_requirements
from ui_components import get_requirements_df, render_keyword_cloud, render_requirements_grid
from utils import build_rank_styles

logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="Adventure Finder",
    layout="wide"
)


def load_css(file_name):
    with open(file_name, encoding='utf-8') as f:
        st.markdown(f'<style>{f.read()}</style>', unsafe_allow_html=True)


@st.cache_data
def build_vocabulary(data):
    vocabulary = extract_keywords_and_requirements(data)
    return vocabulary, build_cloud(vocabulary)


def main():
    logging.basicConfig(
        level=getattr(logging, os.environ.get(LOG_LEVEL_ENV, "INFO").upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    load_css(os.path.join(os.path.dirname(__file__), "styles.css"))

    st.markdown("""
        <h1 style='font-size:3rem; color:#003F87; border-bottom:3px solid #FDC116; padding-bottom:10px;'>Adventure Finder</h1>
    """, unsafe_allow_html=True)
    st.markdown("Pick keywords to see every matching requirement, grouped by rank and adventure.")

    try:
        data = load_adventures()
    except DatasetLoadError:
        logger.exception("Adventure data could not be loaded")
        st.error(LOAD_FAILED_MESSAGE)
        return

    vocabulary, cloud = build_vocabulary(data)

    if 'selected_cloud' not in st.session_state:
        st.session_state['selected_cloud'] = []
    selection = st.session_state['selected_cloud']

    # ==================== Keyword Cloud ====================
    clicked = render_keyword_cloud(cloud, selection)
    if clicked is not None:
        st.session_state['selected_cloud'] = toggle_selection(selection, clicked)
        st.rerun()

    ctrl_cols = st.columns([1, 1, 6])
    with ctrl_cols[0]:
        if st.button("Clear", key='clear_btn', disabled=not selection):
            st.session_state['selected_cloud'] = []
            st.rerun()
    with ctrl_cols[1]:
        table_view = st.toggle("Table view", key='table_view')

    # ==================== Filter Logic ====================
    grouped = filter_requirements_by_rank(vocabulary.requirements, selection)
    rank_order = visible_rank_order(vocabulary.requirements, selection)
    rank_styles = build_rank_styles(rank_order)

    st.markdown("<hr style='border:1px solid #FDC116; margin:20px 0;'>", unsafe_allow_html=True)

    # ==================== Requirements Rendering ====================
    if not selection:
        st.markdown(f"<p class='has-text-grey'>{EMPTY_SELECTION_MESSAGE}</p>", unsafe_allow_html=True)
    elif not rank_order:
        st.info(NO_MATCH_MESSAGE)
    elif table_view:
        st.dataframe(get_requirements_df(grouped, rank_order), use_container_width=True, hide_index=True)
    else:
        render_requirements_grid(grouped, rank_order, rank_styles)


if __name__ == "__main__":
    main()
