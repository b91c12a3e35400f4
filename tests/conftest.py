# Put `app/` on sys.path so tests import the flat modules the same way app.py does
import os
import sys

import pytest

HERE = os.path.dirname(__file__)
APP = os.path.abspath(os.path.join(HERE, "..", "app"))
if os.path.isdir(APP) and APP not in sys.path:
    sys.path.insert(0, APP)



@pytest.fixture
def wolf_dataset():
    return {
        "ranks": [
            {
                "rank": "Wolf",
                "adventure_list": [
                    {
                        "name": "Paws on the Path",
                        "alternate_name": "Paws",
                        "required": True,
                        "requirements": [{"name": "Req1", "tags": ["fitness"]}],
                    }
                ],
            }
        ]
    }


@pytest.fixture
def mixed_dataset():
    return {
        "ranks": [
            {
                "rank": "Lion",
                "adventure_list": [
                    {
                        "name": "Bobcat Lion",
                        "alternate_name": "Bobcat",
                        "required": True,
                        "url": "https://example.org/bobcat-lion",
                        "requirements": [
                            {"name": "1", "description": "Meet the den.", "tags": ["social", ""]},
                            {"name": "2", "tags": ["character"]},
                        ],
                    },
                    {
                        "name": "Build It Up",
                        "alternate_name": "Build It",
                        "stem_nova": "Science Everywhere",
                        "requirements": [{"name": "1", "tags": ["engineering"]}],
                    },
                ],
            },
            {"rank": "Tiger"},
            {
                "rank": "",
                "adventure_list": [
                    {
                        "name": "Mystery",
                        "alternate_name": "",
                        "required": False,
                        "stem_nova": ["Out of This World", 7, ""],
                        "requirements": [{"name": "1", "tags": ["social"]}],
                    },
                    {"name": "Empty", "alternate_name": "Social"},
                ],
            },
        ]
    }
