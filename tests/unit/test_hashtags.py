"""Tests for hashtag extraction and subgraph splitting."""

from __future__ import annotations

import logging

import pytest

from microdot_labels.models import HashTag
from microdot_labels.parsing import extract_hashtags, split_subgraph


class TestExtractHashtags:
    def test_no_markup(self):
        tags, label = extract_hashtags("no hashtags")
        assert tags == []
        assert label == "no hashtags"

    def test_empty_input(self):
        assert extract_hashtags("") == ([], "")

    def test_whitespace_only_is_trimmed(self):
        assert extract_hashtags("   \t ") == ([], "")

    def test_inner_hashtag_stays_in_label(self):
        tags, label = extract_hashtags("a #hashtag in the middle")
        assert tags == [HashTag("#hashtag")]
        assert label == "a #hashtag in the middle"

    def test_trailing_hashtag_removed(self):
        tags, label = extract_hashtags("a #hashtag at the #end")
        assert tags == [HashTag("#end"), HashTag("#hashtag")]
        assert label == "a #hashtag at the"

    def test_trailing_chain_removed(self):
        tags, label = extract_hashtags("deploy  #zeta #alpha   #mid ")
        assert tags == [HashTag("#alpha"), HashTag("#mid"), HashTag("#zeta")]
        assert label == "deploy"

    def test_adjacent_trailing_tags(self):
        tags, label = extract_hashtags("x #a#b")
        assert tags == [HashTag("#a"), HashTag("#b")]
        assert label == "x"

    def test_only_hashtags(self):
        tags, label = extract_hashtags("#one #two")
        assert [str(t) for t in tags] == ["#one", "#two"]
        assert label == ""

    def test_tag_both_inside_and_trailing(self):
        tags, label = extract_hashtags("a #x b #x")
        assert tags == [HashTag("#x")]
        assert label == "a #x b"

    def test_case_sensitive_distinct_tags(self):
        tags, _ = extract_hashtags("#Tag #tag")
        assert tags == [HashTag("#Tag"), HashTag("#tag")]

    def test_sorted_lexicographically(self):
        tags, _ = extract_hashtags("#b x #a y #C z")
        assert [str(t) for t in tags] == ["#C", "#a", "#b"]

    @pytest.mark.parametrize(
        "text",
        ["# space", "#1digit", "#_under", "#-dash", "price $5 #"],
    )
    def test_malformed_tokens_not_matched(self, text: str):
        tags, label = extract_hashtags(text)
        assert tags == []
        assert label == text.strip()

    def test_tag_body_characters(self):
        tags, label = extract_hashtags("node #a1_b-c")
        assert tags == [HashTag("#a1_b-c")]
        assert label == "node"

    def test_non_ascii_letters_end_the_tag(self):
        tags, label = extract_hashtags("café #naïve")
        assert tags == [HashTag("#na")]
        assert label == "café #naïve"

    def test_cleaning_is_idempotent(self):
        _, label = extract_hashtags("a #hashtag at the #end")
        tags, again = extract_hashtags(label)
        assert again == label
        assert tags == [HashTag("#hashtag")]

    def test_cleaning_idempotent_without_inner_tags(self):
        _, label = extract_hashtags("plain words #trailing")
        assert extract_hashtags(label) == ([], label)


class TestSplitSubgraph:
    def test_no_subgraph(self):
        tags, subgraph = split_subgraph([HashTag("#b"), HashTag("#a")])
        assert tags == [HashTag("#a"), HashTag("#b")]
        assert subgraph is None

    def test_subgraph_isolated(self):
        tags, subgraph = split_subgraph([HashTag("#SG_SUBGRAPH"), HashTag("#hashtag")])
        assert tags == [HashTag("#hashtag")]
        assert subgraph == HashTag("#SG_SUBGRAPH")

    def test_multiple_subgraphs_keep_first_and_drop_rest(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.DEBUG, logger="microdot_labels.parsing.hashtags"):
            tags, subgraph = split_subgraph(
                [HashTag("#SG_B"), HashTag("#x"), HashTag("#SG_A")]
            )
        assert subgraph == HashTag("#SG_A")
        assert tags == [HashTag("#x")]
        assert "Multiple subgraph tags" in caplog.text

    def test_prefix_is_case_sensitive(self):
        tags, subgraph = split_subgraph([HashTag("#sg_lower"), HashTag("#SGX")])
        assert subgraph is None
        assert tags == [HashTag("#SGX"), HashTag("#sg_lower")]

    def test_empty(self):
        assert split_subgraph([]) == ([], None)
