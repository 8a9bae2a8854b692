"""Unit tests for the wiki2md exception hierarchy."""

import pytest

from wiki2md.cli.errors import CLIError, ConfigError, OutputWriteError
from wiki2md.content_converter.errors import (
    ContentNotFoundError,
    ConversionError,
    FrontmatterError,
    InternalRenderingError,
    NotApplicableError,
    Wiki2MdError,
)
from wiki2md.document.errors import DocumentError, DocumentLoadError
from wiki2md.messaging.errors import RequestError


class TestHierarchy:
    """Every application error derives from Wiki2MdError."""

    @pytest.mark.parametrize('error_class', [
        ConversionError,
        FrontmatterError,
        DocumentError,
        DocumentLoadError,
        RequestError,
        CLIError,
        ConfigError,
        OutputWriteError,
    ])
    def test_inherits_from_base(self, error_class):
        assert issubclass(error_class, Wiki2MdError)

    @pytest.mark.parametrize('error_class', [
        NotApplicableError,
        ContentNotFoundError,
        InternalRenderingError,
    ])
    def test_conversion_errors(self, error_class):
        assert issubclass(error_class, ConversionError)


class TestConversionErrors:
    """Test cases for conversion error messages."""

    def test_not_applicable(self):
        error = NotApplicableError('/wiki/Special:Search')

        assert str(error) == 'not an article page'
        assert error.path == '/wiki/Special:Search'

    def test_content_not_found(self):
        error = ContentNotFoundError('.mw-parser-output')

        assert str(error) == 'content not found'
        assert error.selector == '.mw-parser-output'

    def test_internal_rendering_keeps_original_message(self):
        original = KeyError('missing')
        error = InternalRenderingError(original)

        assert str(error) == str(original)
        assert error.original is original

    def test_frontmatter(self):
        error = FrontmatterError('bad')

        assert str(error) == 'Frontmatter error: bad'
        assert error.message == 'bad'


class TestOtherErrors:
    """Test cases for document, request and CLI errors."""

    def test_document_load_error(self):
        error = DocumentLoadError('page.html', 'File not found')

        assert str(error) == 'Could not load document page.html: File not found'
        assert error.file_path == 'page.html'
        assert error.reason == 'File not found'

    def test_request_error(self):
        assert str(RequestError('no action')) == 'Invalid request: no action'

    def test_config_error_with_field(self):
        error = ConfigError('Unknown option', config_field='colour')

        assert str(error) == "Configuration error in field 'colour': Unknown option"
        assert error.config_field == 'colour'
        assert error.original_message == 'Unknown option'

    def test_config_error_without_field(self):
        assert str(ConfigError('broken')) == 'Configuration error: broken'

    def test_output_write_error(self):
        error = OutputWriteError('out.md', 'Permission denied')

        assert str(error) == 'Could not write out.md: Permission denied'
