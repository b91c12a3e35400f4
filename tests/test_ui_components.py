from models import AdventureGroup, Requirement
from ui_components import create_adventure_html, create_requirement_html, get_requirements_df
from utils import build_rank_styles, format_tags, get_rank_key, get_rank_style


def make_req(**kwargs):
    fields = dict(
        name="1",
        description="Go on a hike.",
        tags=["outdoors", "fitness"],
        adventure_name="Paws on the Path",
        adventure_alternate_name="Paws",
        adventure_required=True,
        adventure_url="https://example.org/paws",
        rank="Wolf",
        special_program_tags=None,
    )
    fields.update(kwargs)
    return Requirement(**fields)


# ==================== utils ====================

def test_rank_key_trims_and_lowercases():
    assert get_rank_key("  Arrow of Light ") == "arrow of light"
    assert get_rank_key(None) == ""


def test_rank_style_known_and_default():
    assert get_rank_style("Wolf") == {"color": "#D7263D", "text": "#fff", "bg": "#FFE3E8"}
    assert get_rank_style("Unknown") == {"color": "#363636", "text": "#fff", "bg": "#f5f7fa"}


def test_build_rank_styles_keyed_by_display_name():
    styles = build_rank_styles(["Wolf", "arrow of light "])
    assert set(styles) == {"Wolf", "arrow of light "}
    assert styles["arrow of light "]["color"] == "#20B2AA"


def test_rank_style_is_a_copy():
    get_rank_style("Wolf")["color"] = "#000"
    assert get_rank_style("Wolf")["color"] == "#D7263D"


def test_format_tags():
    assert format_tags(["a", "", "b"]) == "a, b"
    assert format_tags([]) == ""


# ==================== html ====================

def test_requirement_html_links_and_escapes():
    out = create_requirement_html(make_req(description="<b>hike</b>", special_program_tags=["Let It Grow"]))
    assert "href='https://example.org/paws'" in out
    assert "&lt;b&gt;hike&lt;/b&gt;" in out
    assert "outdoors, fitness" in out
    assert "Let It Grow" in out


def test_requirement_html_without_url_or_tags():
    out = create_requirement_html(make_req(adventure_url=None, tags=[]))
    assert "<a " not in out
    assert "tag is-light" not in out


def test_adventure_html_shows_alternate_name():
    group = AdventureGroup(name="Paws on the Path", requirements=[make_req(), make_req(name="2")])
    out = create_adventure_html(group, get_rank_style("Wolf"))
    assert "adventure-altname'>Paws<" in out
    assert out.count("<li>") == 2
    assert "#FFE3E8" in out


# ==================== table view ====================

def test_requirements_df_follows_rank_order():
    wolf = AdventureGroup(name="Paws on the Path", requirements=[make_req()])
    bear = AdventureGroup(name="Bear Strong", requirements=[make_req(rank="Bear", adventure_name="Bear Strong")])
    df = get_requirements_df({"Wolf": [wolf], "Bear": [bear]}, ["Bear", "Wolf"])

    assert list(df["Rank"]) == ["Bear", "Wolf"]
    assert list(df["Adventure"]) == ["Bear Strong", "Paws on the Path"]
    assert df.iloc[0]["Tags"] == "outdoors, fitness"


def test_requirements_df_skips_ranks_outside_order():
    wolf = AdventureGroup(name="Paws on the Path", requirements=[make_req()])
    df = get_requirements_df({"Wolf": [wolf]}, [])
    assert df.empty
    assert "Requirement" in df.columns
