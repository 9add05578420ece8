# tests/commands/test_status_command.py
"""Tests for the status and config commands."""

import os

from knowledge_inbox.commands import config_cmd, ingest, status


class TestStatusCommand:
    def test_status(self, vector_inbox) -> None:
        ingest.add(content="One note", inbox=vector_inbox)
        ingest.add(content="Another note", inbox=vector_inbox)

        result = status.status(inbox=vector_inbox)

        assert result.success is True
        assert result.total_items == 2
        assert result.total_chunks == 2
        assert result.total_vectors == 0
        assert result.mode == "vector"
        assert result.embedding_mode == "lazy"

    def test_status_from_config(self, config_file) -> None:
        result = status.status(config_path=config_file)

        assert result.success is True
        assert result.total_items == 0
        assert result.mode == "keyword"


class TestConfigCommand:
    def test_config(self, config_file) -> None:
        result = config_cmd.config(config_path=config_file)

        assert result.success is True
        assert result.llm_model is None
        assert result.embedding_model is None
        assert result.storage == "local"
        assert result.config_path == config_file
        names = [s.name for s in result.settings]
        assert "chunk_size" in names
        assert "embedding_mode" in names

    def test_setting_sources(self, config_file, monkeypatch) -> None:
        with open(config_file, "a", encoding="utf-8") as f:
            f.write("settings:\n  chunk_size: 300\n")
        monkeypatch.setenv("INBOX_DEFAULT_K", "8")

        result = config_cmd.config(config_path=config_file)

        by_name = {s.name: s for s in result.settings}
        assert by_name["chunk_size"].value == "300"
        assert by_name["chunk_size"].source == "yaml"
        assert by_name["default_k"].value == "8"
        assert by_name["default_k"].source == "env var"
        assert by_name["max_content_length"].value == "unlimited"
        assert by_name["max_content_length"].source == "default"

    def test_config_error(self, temp_dir) -> None:
        result = config_cmd.config(config_path=os.path.join(temp_dir, "missing.yaml"))

        assert result.success is False
