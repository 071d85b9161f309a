"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from articlepull.models.config import (
    CONTENT_SELECTORS,
    ArticlepullConfig,
    ExtractionRules,
    ExtractorConfig,
    FetchConfig,
    SourceConfig,
)


class TestExtractorConfig:
    """Tests for extractor defaults and validation."""

    def test_defaults(self):
        config = ExtractorConfig()

        assert config.min_candidate_score == 100
        assert config.min_fallback_text_length == 200
        assert config.max_link_density == 0.5
        assert config.min_content_length == 500
        assert config.min_promoted_text_length == 50
        assert config.min_image_dimension == 100
        assert config.default_image_alt == "Article image"
        assert config.rules.content_selectors[:3] == ["article", '[role="main"]', "main"]

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            ExtractorConfig(min_length=10)

    def test_rejects_negative_length(self):
        with pytest.raises(ValidationError):
            ExtractorConfig(min_content_length=-1)

    def test_default_lists_are_independent(self):
        """Mutating one rule set does not leak into another."""
        first = ExtractionRules()
        first.content_selectors.append(".custom")

        assert ".custom" not in ExtractionRules().content_selectors
        assert ".custom" not in CONTENT_SELECTORS


class TestExtractionRules:
    """Tests for rule-set helpers."""

    def test_preferred_selectors_come_first(self):
        rules = ExtractionRules().with_preferred_selectors([".c-entry-content", "article"])

        assert rules.content_selectors[0] == ".c-entry-content"
        assert rules.content_selectors[1] == "article"
        assert rules.content_selectors.count("article") == 1
        assert "#main-content" in rules.content_selectors

    def test_preferred_selectors_leave_original_alone(self):
        rules = ExtractionRules()
        rules.with_preferred_selectors([".story"])

        assert ".story" not in rules.content_selectors


class TestArticlepullConfig:
    """Tests for the root configuration."""

    def test_default_sources(self):
        config = ArticlepullConfig()

        assert {s.name for s in config.sources} >= {"TechCrunch AI", "The Verge AI"}

    def test_source_lookup_ignores_www_and_path(self):
        config = ArticlepullConfig()

        source = config.source_for_url("https://techcrunch.com/2026/02/26/some-story/")
        assert source is not None
        assert source.name == "TechCrunch AI"

        verge = config.source_for_url("https://theverge.com/2026/1/1/story")
        assert verge is not None
        assert verge.name == "The Verge AI"

    def test_unknown_source(self):
        config = ArticlepullConfig()

        assert config.source_for_url("https://unknown.example.org/post") is None
        assert config.extractor_for_url("https://unknown.example.org/post") == config.extractor

    def test_extractor_for_url_prefers_source_selectors(self):
        config = ArticlepullConfig(
            sources=[SourceConfig(name="Example", url="https://example.com", content_selectors=[".story-body"])]
        )

        extractor_config = config.extractor_for_url("https://www.example.com/a/b")

        assert extractor_config.rules.content_selectors[0] == ".story-body"
        assert config.extractor.rules.content_selectors[0] == "article"

    def test_yaml_round_trip(self):
        config = ArticlepullConfig(
            extractor=ExtractorConfig(min_content_length=800),
            fetch=FetchConfig(read_timeout=15),
            log_level="DEBUG",
        )

        loaded = ArticlepullConfig.from_yaml(config.to_yaml())

        assert loaded == config

    def test_yaml_partial(self, tmp_path):
        path = tmp_path / "articlepull.yaml"
        path.write_text(
            "extractor:\n"
            "  min_content_length: 300\n"
            "sources:\n"
            "  - name: Example\n"
            "    url: https://example.com\n"
            "    content_selectors: ['.story-body']\n"
        )

        config = ArticlepullConfig.from_yaml_file(path)

        assert config.extractor.min_content_length == 300
        assert config.extractor.min_candidate_score == 100
        assert [s.name for s in config.sources] == ["Example"]

    def test_empty_yaml_gives_defaults(self):
        assert ArticlepullConfig.from_yaml("") == ArticlepullConfig()
