import re

import pytest

from mdblog.utils import slugify

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


def test_slugify_hello_world():
    assert slugify("Hello, World!") == "hello-world"


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("My First Post", "my-first-post"),
        ("  leading and trailing  ", "leading-and-trailing"),
        ("Go 1.22: What's New?", "go-1-22-what-s-new"),
        ("already-a-slug", "already-a-slug"),
        ("UPPER___under", "upper-under"),
        ("Café au lait", "caf-au-lait"),
        ("!!!", ""),
        ("", ""),
    ],
)
def test_slugify_examples(title, expected):
    assert slugify(title) == expected


@pytest.mark.parametrize(
    "title",
    [
        "Hello, World!",
        "  Spaces\tand\nnewlines  ",
        "--Dashes--Everywhere--",
        "Mixed CASE & punctuation; (really)",
        "ünïcödé títle",
        "2024/01/02 release notes",
    ],
)
def test_slugify_output_is_url_safe(title):
    slug = slugify(title)
    assert slug == "" or SLUG_PATTERN.match(slug)


def test_slugify_distinct_titles_can_collide():
    assert slugify("Hello World") == slugify("hello, world!")
