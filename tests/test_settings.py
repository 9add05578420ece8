# tests/test_settings.py
"""Tests for behavioral settings."""

import pydantic
import pytest

from knowledge_inbox.settings import CHUNKING_PROFILES, Settings


class TestSettingsDefaults:
    def test_chunking_defaults(self):
        settings = Settings()

        assert settings.chunk_size == 500
        assert settings.chunk_overlap == 100
        assert settings.chars_per_token == 4
        assert settings.window_chars == 2000

    def test_budget_defaults(self):
        settings = Settings()

        assert settings.max_content_length is None
        assert settings.max_chunks_per_item is None
        assert settings.max_fetch_bytes == 2_000_000
        assert settings.fetch_timeout == 10.0

    def test_retrieval_defaults(self):
        settings = Settings()

        assert settings.embedding_mode == "lazy"
        assert settings.embedding_dimensions == 1536
        assert settings.default_k == 5
        assert settings.system_prompt is None
        assert settings.synthesis_temperature == 0.7
        assert settings.synthesis_max_tokens == 500
        assert settings.keyword_confidence_scale == 10.0
        assert settings.num_retries == 0

    def test_validation_limits(self):
        settings = Settings()

        assert settings.max_text_length == 500
        assert settings.max_question_length == 1000
        assert settings.max_top_k == 20


class TestSettingsValidation:
    def test_overlap_not_limited_by_chunk_size(self):
        settings = Settings(chunk_size=150)

        assert settings.chunk_overlap == 100

    def test_negative_overlap_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(chunk_overlap=-1)

    def test_zero_overlap_allowed(self):
        assert Settings(chunk_overlap=0).chunk_overlap == 0

    def test_unknown_embedding_mode(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(embedding_mode="sometimes")

    def test_positive_default_k(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(default_k=0)


class TestProfiles:
    def test_memory_safe(self):
        settings = Settings.with_profile("memory_safe")

        assert settings.chunk_overlap == 0
        assert settings.max_content_length == 500
        assert settings.max_chunks_per_item == 1

    def test_quality(self):
        settings = Settings.with_profile("quality")

        assert settings.chunk_overlap == 100
        assert settings.max_chunks_per_item is None

    def test_overrides_win(self):
        settings = Settings.with_profile("memory_safe", max_content_length=800, default_k=3)

        assert settings.max_content_length == 800
        assert settings.default_k == 3

    def test_unknown_profile(self):
        with pytest.raises(ValueError, match="Unknown profile"):
            Settings.with_profile("fastest")  # type: ignore[arg-type]

    def test_profile_table_untouched(self):
        Settings.with_profile("memory_safe", max_content_length=800)
        assert CHUNKING_PROFILES["memory_safe"]["max_content_length"] == 500
