"""
Unit tests for ProjectLayout and VerifierConfig.
"""

import pytest

from migration_verifier.config import ProjectLayout, VerifierConfig
from migration_verifier.core.models import ProjectRoot


class TestProjectLayout:
    """Tests for ProjectLayout dataclass."""

    def test_defaults_match_conventional_layout(self):
        layout = ProjectLayout()

        assert layout.presence_dirs == ("src/components",)
        assert layout.alias_prefix == "@/"
        assert layout.alias_target == "src/"
        assert layout.module_extensions == (".ts", ".tsx")
        assert layout.scope_prefix == "@radix-ui/"
        assert layout.deferred_prefixes == ()

    def test_init_when_empty_extensions_then_raises_error(self):
        with pytest.raises(ValueError, match="module_extensions"):
            ProjectLayout(module_extensions=())

    def test_init_when_extension_without_dot_then_raises_error(self):
        with pytest.raises(ValueError, match="must start with '.'"):
            ProjectLayout(module_extensions=("ts",))

    def test_init_when_alias_looks_relative_then_raises_error(self):
        with pytest.raises(ValueError, match="ambiguous"):
            ProjectLayout(alias_prefix="./src/")

    def test_init_when_relative_prefix_looks_like_alias_then_raises_error(self):
        with pytest.raises(ValueError, match="ambiguous"):
            ProjectLayout(relative_prefix="@/lib")

    def test_init_when_absolute_presence_dir_then_raises_error(self):
        with pytest.raises(ValueError, match="relative to a project root"):
            ProjectLayout(presence_dirs=("/abs/components",))


class TestVerifierConfig:
    """Tests for VerifierConfig dataclass."""

    def test_from_paths_when_valid_then_creates_config(self, tmp_path):
        config = VerifierConfig.from_paths(tmp_path / "a", tmp_path / "b", seed=5)

        assert config.source_root.role == "source"
        assert config.target_root.role == "target"
        assert config.sample_count == 100
        assert config.seed == 5
        assert config.shrink is True

    def test_init_when_zero_samples_then_raises_error(self, tmp_path):
        with pytest.raises(ValueError, match="sample_count must be positive"):
            VerifierConfig.from_paths(tmp_path, tmp_path, sample_count=0)

    def test_init_when_negative_seed_then_raises_error(self, tmp_path):
        with pytest.raises(ValueError, match="seed must be non-negative"):
            VerifierConfig.from_paths(tmp_path, tmp_path, seed=-1)

    def test_init_when_roles_swapped_then_raises_error(self, tmp_path):
        with pytest.raises(ValueError, match="source_root has role"):
            VerifierConfig(
                source_root=ProjectRoot.target(tmp_path),
                target_root=ProjectRoot.target(tmp_path),
            )
