import pytest

from dockbuild.managers.image.utils import normalize_tag

ARBITRARY_INPUTS = [
    "",
    "---",
    "Feature/My New Branch",
    "  leading and trailing  ",
    "UPPER_case__under",
    "release/2024.01",
    "-already-dashed-",
    "ünïcödé-branch",
    "a..b",
    "feature/JIRA-123: fix the thing!",
]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Feature/My New Branch", "feature-my-new-branch"),
        ("v1.0.0", "v1.0.0"),
        ("Test-Tag", "test-tag"),
        ("", ""),
        ("***", ""),
        ("--Hello__World--", "hello-world"),
        ("feature//double  space", "feature-double-space"),
        ("ünïcödé", "n-c-d"),
    ],
)
def test_normalize_tag(raw, expected):
    assert normalize_tag(raw) == expected


@pytest.mark.parametrize("raw", ARBITRARY_INPUTS)
def test_normalize_tag_is_idempotent(raw):
    once = normalize_tag(raw)
    assert normalize_tag(once) == once


@pytest.mark.parametrize("raw", ARBITRARY_INPUTS)
def test_normalized_tag_shape(raw):
    tag = normalize_tag(raw)
    assert tag == tag.lower()
    assert not tag.startswith("-")
    assert not tag.endswith("-")
    assert all(c.isascii() and (c.isalnum() or c in ".-") for c in tag)
