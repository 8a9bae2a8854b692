"""Unit tests for content_converter.sanitizer module."""

import pytest

from wiki2md.content_converter.sanitizer import is_removed, sanitize
from wiki2md.document.html_document import parse_fragment
from wiki2md.document.node import ElementNode


class TestSanitize:
    """Test cases for sanitize()."""

    @pytest.mark.parametrize('css_class', [
        'mw-editsection', 'reference', 'navbox', 'ambox', 'sistersitebox',
        'toc', 'infobox', 'metadata', 'catlinks', 'printfooter',
        'mw-jump-link', 'noprint', 'hatnote', 'mw-empty-elt',
    ])
    def test_removes_denylisted_classes(self, css_class):
        """Elements with a denylisted class are dropped with their subtree."""
        root = parse_fragment(f'<p>keep</p><div class="other {css_class}"><p>drop</p></div>')

        clean = sanitize(root)

        assert clean.text_content() == 'keep'

    @pytest.mark.parametrize('tag', ['style', 'script'])
    def test_removes_style_and_script(self, tag):
        """style and script elements are dropped."""
        root = parse_fragment(f'<div><p>keep</p><{tag}>x = 1</{tag}></div>')

        clean = sanitize(root)

        assert clean.text_content() == 'keep'

    def test_removes_toc_by_id(self):
        """The table of contents is recognised by id too."""
        root = parse_fragment('<div id="toc"><ul><li>Contents</li></ul></div><p>keep</p>')

        assert sanitize(root).text_content() == 'keep'

    @pytest.mark.parametrize('style', ['display: none', 'color: red; display:none'])
    def test_removes_hidden_elements(self, style):
        """Inline display:none hides an element from the export."""
        root = parse_fragment(f'<p>keep</p><span style="{style}">hidden</span>')

        assert sanitize(root).text_content() == 'keep'

    def test_keeps_visible_styles(self):
        """Other inline styles do not trigger removal."""
        root = parse_fragment('<span style="display: inline">shown</span>')

        assert sanitize(root).text_content() == 'shown'

    def test_removes_nested_matches(self):
        """Denylisted nodes deep in the tree are found."""
        root = parse_fragment(
            '<h2>Heading<span class="mw-editsection"><a href="#">edit</a></span></h2>'
        )

        clean = sanitize(root)

        assert clean.text_content() == 'Heading'

    def test_node_matching_several_rules_removed_once(self):
        """A node matching several rules disappears exactly once."""
        root = parse_fragment(
            '<p>a</p><div class="navbox noprint" style="display:none">x</div><p>b</p>'
        )

        clean = sanitize(root)

        assert [child.tag for child in clean.element_children()] == ['p', 'p']
        assert clean.text_content() == 'ab'

    def test_source_tree_untouched(self):
        """The input tree is never mutated."""
        root = parse_fragment('<p>keep</p><div class="navbox">drop</div>')
        before = root.text_content()

        clean = sanitize(root)

        assert clean is not root
        assert root.text_content() == before == 'keepdrop'

    def test_copy_has_consistent_parents(self):
        """The copy's parent links point into the copy."""
        root = parse_fragment('<div><p>x</p></div>')

        clean = sanitize(root)
        div = clean.children[0]

        assert div.parent is clean
        assert div.children[0].parent is div

    def test_clean_tree_unchanged(self):
        """An already clean tree yields an equal copy."""
        root = parse_fragment('<p>Hello <b>world</b></p>')

        assert sanitize(root) == root

    def test_root_is_never_removed(self):
        """The root is kept even if it matches a rule."""
        root = ElementNode(tag='div', classes=frozenset({'navbox'}))

        clean = sanitize(root)

        assert clean.tag == 'div'
        assert clean.has_class('navbox')


class TestIsRemoved:
    """Test cases for is_removed()."""

    def test_plain_paragraph_kept(self):
        assert not is_removed(ElementNode(tag='p'))

    def test_reference_removed(self):
        assert is_removed(ElementNode(tag='sup', classes=frozenset({'reference'})))
