import pytest

from profilescan.domain.extractor import extract_profile, split_lines
from profilescan.domain.models import ProfileRecord

_SAMPLE = "Jane Doe\nTraveler\nFoodie\n1234 Followers\n56 Following\nMumbai, India"


def test_sample_profile_fields():
    profile = extract_profile(_SAMPLE)

    assert profile.name == "Jane Doe"
    assert profile.bio.startswith("Traveler Foodie")
    # bio always spans up to three lines after the name
    assert profile.bio == "Traveler Foodie 1234 Followers"
    assert "Followers" in profile.followers
    assert "Following" in profile.following
    assert "India" in profile.guess_location


def test_no_keyword_lines_leave_keyword_fields_empty():
    profile = extract_profile("Someone\nloves coffee\n  \nbuilds things")

    assert profile.name == "Someone"
    assert profile.bio == "loves coffee builds things"
    assert profile.followers == ""
    assert profile.following == ""
    assert profile.guess_location == ""


@pytest.mark.parametrize("text", ["", None, "\n\n   \n\t\n"])
def test_empty_text_yields_empty_record(text):
    assert extract_profile(text) == ProfileRecord(
        name="", bio="", followers="", following="", guess_location=""
    )


def test_lines_are_trimmed_and_crlf_is_handled():
    assert split_lines("  a  \r\n\r\nb\rc\n") == ["a", "b", "c"]
    assert extract_profile("  Name  \r\n bio ").name == "Name"


def test_single_line_has_empty_bio():
    profile = extract_profile("Only Name")

    assert profile.name == "Only Name"
    assert profile.bio == ""


def test_keyword_match_is_case_insensitive_and_first_in_document_order():
    text = "\n".join(
        [
            "handle",
            "10K FOLLOWERS",
            "2 followers you know",
            "Following 12",
            "Location: Berlin",
            "New York City",
        ]
    )
    profile = extract_profile(text)

    assert profile.followers == "10K FOLLOWERS"
    assert profile.following == "Following 12"
    assert profile.guess_location == "Location: Berlin"


def test_location_keywords():
    assert extract_profile("x\nDelhi, INDIA").guess_location == "Delhi, INDIA"
    assert extract_profile("x\nMexico City").guess_location == "Mexico City"
    assert extract_profile("x\nlocation unknown").guess_location == "location unknown"


def test_followers_line_is_not_counted_as_following():
    profile = extract_profile("n\n500 followers")

    assert profile.followers == "500 followers"
    assert profile.following == ""


@pytest.mark.parametrize(
    "text",
    [
        _SAMPLE,
        "a\n\n b followers \nc following\n d city ",
        "   \n  x  \n",
        "1 Following\n2 Followers\nIndia\nCity\nLocation",
    ],
)
def test_keyword_fields_are_empty_or_a_literal_input_line(text):
    lines = split_lines(text)
    profile = extract_profile(text)

    for value in (profile.followers, profile.following, profile.guess_location):
        assert value == "" or value in lines


def test_extract_is_idempotent():
    assert extract_profile(_SAMPLE) == extract_profile(_SAMPLE)


def test_form_feed_does_not_break_lines():
    profile = extract_profile("Jane\x0cDoe\nbio more")

    assert profile.name == "Jane\x0cDoe"
    assert profile.bio == "bio more"


def test_trailing_page_separator_is_dropped():
    assert split_lines("Jane Doe\nbio\n\x0c") == ["Jane Doe", "bio"]
