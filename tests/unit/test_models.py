"""Unit tests for models module."""

import dataclasses

import pytest

from wiki2md.models import (
    ConversionFailure,
    ConversionOptions,
    ConversionSuccess,
    FailureKind,
)


class TestConversionOptions:
    """Test cases for ConversionOptions."""

    def test_uniform(self):
        options = ConversionOptions.uniform(False)

        assert options == ConversionOptions(
            include_tables=False,
            preserve_links=False,
            include_images=False,
            include_math=False,
            include_frontmatter=False,
        )

    def test_no_field_defaults(self):
        """Every flag must be supplied."""
        with pytest.raises(TypeError):
            ConversionOptions(include_tables=True)

    def test_frozen(self):
        options = ConversionOptions.uniform(True)

        with pytest.raises(dataclasses.FrozenInstanceError):
            options.include_math = False

    def test_from_dict_camel_case(self):
        options = ConversionOptions.from_dict(
            {'includeTables': False, 'preserveLinks': True},
            default=True,
        )

        assert options.include_tables is False
        assert options.preserve_links is True
        assert options.include_images is True

    def test_from_dict_snake_case(self):
        options = ConversionOptions.from_dict({'include_math': True}, default=False)

        assert options.include_math is True
        assert options.include_tables is False

    def test_from_dict_caller_default(self):
        assert ConversionOptions.from_dict({}, default=False) == ConversionOptions.uniform(False)
        assert ConversionOptions.from_dict({}, default=True) == ConversionOptions.uniform(True)

    def test_to_dict(self):
        options = ConversionOptions.from_dict({'includeImages': False}, default=True)

        assert options.to_dict() == {
            'includeTables': True,
            'preserveLinks': True,
            'includeImages': False,
            'includeMath': True,
            'includeFrontmatter': True,
        }

    def test_to_dict_from_dict_inverse(self):
        options = ConversionOptions.from_dict({'includeMath': False}, default=True)

        assert ConversionOptions.from_dict(options.to_dict(), default=False) == options

    @pytest.mark.parametrize('data', [
        {'includeTables': 'false'},
        {'preserveLinks': 0},
        {'include_math': None},
    ])
    def test_from_dict_rejects_non_boolean(self, data):
        """Values are never coerced by truthiness."""
        with pytest.raises(ValueError):
            ConversionOptions.from_dict(data, default=True)


class TestConversionResult:
    """Test cases for ConversionSuccess and ConversionFailure."""

    def test_success(self):
        result = ConversionSuccess(markdown='# T\n', title='T')

        assert result.success is True
        assert result.to_dict() == {'success': True, 'markdown': '# T\n', 'title': 'T'}

    def test_failure(self):
        result = ConversionFailure(reason='content not found', kind=FailureKind.CONTENT_NOT_FOUND)

        assert result.success is False
        assert result.to_dict() == {'success': False, 'error': 'content not found'}

    def test_failure_default_kind(self):
        assert ConversionFailure(reason='x').kind is FailureKind.INTERNAL_ERROR
