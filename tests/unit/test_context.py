"""Unit tests for template context loading."""

import pytest

from tfsage.lib.context import load_context


def write_context(root, text):
    path = root / "configs" / "context.toml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


class TestLoadContext:
    """Tests for load_context()."""

    def test_returns_string_values_of_matching_table(self, tmp_path):
        write_context(
            tmp_path,
            '[dev]\nregion = "us-east-1"\nbucket = "dev-state"\n\n'
            '[staging]\nregion = "eu-west-1"\n',
        )

        assert load_context(tmp_path, "dev") == {"region": "us-east-1", "bucket": "dev-state"}
        assert load_context(tmp_path, "staging") == {"region": "eu-west-1"}

    def test_drops_non_string_values(self, tmp_path):
        write_context(
            tmp_path,
            "[dev]\n"
            'region = "us-east-1"\n'
            "replicas = 3\n"
            "ratio = 0.5\n"
            "enabled = true\n"
            'zones = ["a", "b"]\n'
            "created = 2024-01-01\n"
            "[dev.tags]\n"
            'owner = "ops"\n',
        )

        assert load_context(tmp_path, "dev") == {"region": "us-east-1"}

    def test_missing_file(self, tmp_path):
        assert load_context(tmp_path, "dev") == {}

    def test_missing_table(self, tmp_path):
        write_context(tmp_path, '[staging]\nregion = "eu-west-1"\n')
        assert load_context(tmp_path, "dev") == {}

    def test_top_level_value_instead_of_table(self, tmp_path):
        write_context(tmp_path, 'dev = "not a table"\n')
        assert load_context(tmp_path, "dev") == {}

    @pytest.mark.parametrize(
        "text",
        [
            "[dev\nregion = ",
            "[dev]\nregion = us-east-1\n",
            '[dev]\nregion = "a"\nregion = "b"\n',
        ],
    )
    def test_malformed_file(self, tmp_path, text):
        write_context(tmp_path, text)
        assert load_context(tmp_path, "dev") == {}

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "configs" / "context.toml"
        path.parent.mkdir(parents=True)
        path.write_bytes(b"[dev]\nregion = \"\xff\xfe\"\n")

        assert load_context(tmp_path, "dev") == {}

    def test_missing_root_directory(self, tmp_path):
        assert load_context(tmp_path / "NOT_EXISTING_DIR", "dev") == {}

    def test_loading_is_idempotent(self, tmp_path):
        write_context(tmp_path, '[dev]\nregion = "us-east-1"\n')
        assert load_context(tmp_path, "dev") == load_context(tmp_path, "dev")
