import os

from data_loader import load_dataset
from filters import filter_requirements_by_rank, visible_rank_order
from keywords import build_cloud, extract_keywords_and_requirements
from models import Keyword, KeywordCategory

SAMPLE_DATA = os.path.join(os.path.dirname(__file__), "..", "data", "adventure.yml")


def load_sample():
    return extract_keywords_and_requirements(load_dataset(SAMPLE_DATA))


def test_sample_cloud_blocks():
    cloud = build_cloud(load_sample())
    required = [k.text for k in cloud if k.category == KeywordCategory.REQUIRED_ADVENTURE]
    optional = [k.text for k in cloud if k.category == KeywordCategory.OPTIONAL_ADVENTURE]
    programs = [k.text for k in cloud if k.category == KeywordCategory.SPECIAL_PROGRAM]

    assert required == ["Bobcat", "Outdoor", "Paws", "Pride", "Strong", "Stronger", "Wild"]
    assert optional == ["Build It", "Code"]
    assert programs == ["Let It Grow", "Out of This World", "Science Everywhere"]


def test_sample_fitness_ranks():
    vocab = load_sample()
    selection = [Keyword("fitness", KeywordCategory.TAG)]
    assert visible_rank_order(vocab.requirements, selection) == ["Tiger", "Wolf", "Bear", "Webelos"]


def test_sample_shared_alternate_name_spans_ranks():
    vocab = load_sample()
    grouped = filter_requirements_by_rank(vocab.requirements, [Keyword("Bobcat", KeywordCategory.REQUIRED_ADVENTURE)])
    assert list(grouped) == ["Lion", "Tiger"]
    assert [g.name for g in grouped["Lion"]] == ["Bobcat Lion"]
    assert [g.name for g in grouped["Tiger"]] == ["Bobcat Tiger"]
