"""Unit tests for cli.config module."""

import os

import pytest

from wiki2md.cli.config import ConfigLoader
from wiki2md.cli.errors import ConfigError
from wiki2md.models.conversion_options import ConversionOptions


@pytest.fixture
def in_tmp_dir(tmp_path, monkeypatch):
    """Run the test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestLoadDefaults:
    """Test cases for default resolution."""

    def test_all_flags_on_without_config(self, in_tmp_dir):
        assert ConfigLoader.load(env={}) == ConversionOptions.uniform(True)

    def test_default_file_picked_up(self, in_tmp_dir):
        (in_tmp_dir / '.wiki2md.yaml').write_text('include_images: false\n')

        options = ConfigLoader.load(env={})

        assert options.include_images is False
        assert options.include_tables is True

    def test_empty_file(self, in_tmp_dir):
        (in_tmp_dir / '.wiki2md.yaml').write_text('')

        assert ConfigLoader.load(env={}) == ConversionOptions.uniform(True)


class TestLayering:
    """Test cases for file < env < CLI precedence."""

    def test_explicit_config_path(self, in_tmp_dir):
        config = in_tmp_dir / 'custom.yaml'
        config.write_text('include_math: false\npreserve_links: false\n')

        options = ConfigLoader.load(str(config), env={})

        assert options.include_math is False
        assert options.preserve_links is False

    def test_env_overrides_file(self, in_tmp_dir):
        (in_tmp_dir / '.wiki2md.yaml').write_text('include_tables: false\n')

        options = ConfigLoader.load(env={'WIKI2MD_INCLUDE_TABLES': 'yes'})

        assert options.include_tables is True

    def test_cli_overrides_env(self, in_tmp_dir):
        options = ConfigLoader.load(
            env={'WIKI2MD_INCLUDE_FRONTMATTER': 'true'},
            overrides={'include_frontmatter': False},
        )

        assert options.include_frontmatter is False

    def test_none_overrides_ignored(self, in_tmp_dir):
        options = ConfigLoader.load(
            env={'WIKI2MD_INCLUDE_MATH': '0'},
            overrides={'include_math': None},
        )

        assert options.include_math is False

    def test_empty_env_value_ignored(self, in_tmp_dir):
        options = ConfigLoader.load(env={'WIKI2MD_INCLUDE_MATH': '  '})

        assert options.include_math is True

    def test_reads_dotenv_file(self, in_tmp_dir, monkeypatch):
        """Without an explicit env mapping, .env is loaded into os.environ."""
        monkeypatch.delenv('WIKI2MD_PRESERVE_LINKS', raising=False)
        (in_tmp_dir / '.env').write_text('WIKI2MD_PRESERVE_LINKS=off\n')

        try:
            options = ConfigLoader.load()
        finally:
            os.environ.pop('WIKI2MD_PRESERVE_LINKS', None)

        assert options.preserve_links is False


class TestValidation:
    """Test cases for invalid configuration."""

    def test_missing_explicit_file(self, in_tmp_dir):
        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader.load(str(in_tmp_dir / 'nope.yaml'), env={})

        assert 'not found' in str(exc_info.value)

    def test_invalid_yaml(self, in_tmp_dir):
        (in_tmp_dir / '.wiki2md.yaml').write_text('include_tables: [\n')

        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader.load(env={})

        assert 'Invalid YAML syntax' in str(exc_info.value)

    def test_not_a_mapping(self, in_tmp_dir):
        (in_tmp_dir / '.wiki2md.yaml').write_text('- include_tables\n')

        with pytest.raises(ConfigError):
            ConfigLoader.load(env={})

    def test_unknown_key(self, in_tmp_dir):
        (in_tmp_dir / '.wiki2md.yaml').write_text('include_videos: true\n')

        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader.load(env={})

        assert exc_info.value.config_field == 'include_videos'

    def test_non_boolean_value(self, in_tmp_dir):
        (in_tmp_dir / '.wiki2md.yaml').write_text('include_tables: "sometimes"\n')

        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader.load(env={})

        assert exc_info.value.config_field == 'include_tables'

    def test_invalid_env_value(self, in_tmp_dir):
        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader.load(env={'WIKI2MD_INCLUDE_IMAGES': 'maybe'})

        assert exc_info.value.config_field == 'WIKI2MD_INCLUDE_IMAGES'


class TestParseBool:
    """Test cases for ConfigLoader.parse_bool()."""

    @pytest.mark.parametrize('raw', ['1', 'true', 'TRUE', ' yes ', 'on'])
    def test_true_values(self, raw):
        assert ConfigLoader.parse_bool(raw, 'X') is True

    @pytest.mark.parametrize('raw', ['0', 'false', 'No', 'off'])
    def test_false_values(self, raw):
        assert ConfigLoader.parse_bool(raw, 'X') is False
