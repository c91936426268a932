"""Property-based tests for escaping and render-order invariants."""

import html as stdlib_html

from hypothesis import given, settings
from hypothesis import strategies as st

from plume import Fragment, SimpleElement, compile_template, escape_html, render
from plume.descriptors import Children, Constant

# Leaf nodes that render without error
leaves = st.one_of(
    st.text(max_size=20),
    st.integers(min_value=-(10**6), max_value=10**6),
    st.none(),
)

trees = st.recursive(
    leaves,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.tuples(children, children),
        st.builds(Fragment, children),
        st.builds(lambda c: SimpleElement("span", {}, c), children),
    ),
    max_leaves=25,
)


class TestEscaping:
    """The escaper is total and leaves no reserved characters behind."""

    @given(st.text())
    @settings(max_examples=300)
    def test_no_reserved_characters_survive(self, text: str) -> None:
        escaped = escape_html(text)
        for char in "<>\"'":
            assert char not in escaped

    @given(st.text())
    def test_never_shorter(self, text: str) -> None:
        assert len(escape_html(text)) >= len(text)

    @given(st.text())
    def test_unescape_recovers_input(self, text: str) -> None:
        assert stdlib_html.unescape(escape_html(text)) == text

    @given(st.text(alphabet=st.characters(blacklist_characters="<>&\"'")))
    def test_identity_without_reserved_characters(self, text: str) -> None:
        assert escape_html(text) == text


class TestRenderOrder:
    """Members render strictly left to right."""

    @given(st.lists(st.text(max_size=10), max_size=20))
    def test_sequence_order(self, texts: list[str]) -> None:
        assert render(texts) == "".join(escape_html(t) for t in texts)

    @given(trees, trees)
    @settings(max_examples=200)
    def test_fragment_transparency(self, a: object, b: object) -> None:
        assert render(Fragment((a, b))) == render(a) + render(b)

    @given(trees)
    def test_list_tuple_and_generator_agree(self, node: object) -> None:
        items = [node, "|", node]
        expected = render(items)
        assert render(tuple(items)) == expected
        assert render(iter(items)) == expected

    @given(st.lists(st.text(max_size=5), max_size=30))
    def test_children_fold_preserves_order(self, texts: list[str]) -> None:
        children = Children(tuple(Constant(t) for t in texts))
        assert render(children.build({})) == "".join(escape_html(t) for t in texts)


class TestTemplateProperties:
    @given(st.text(max_size=50))
    @settings(max_examples=100)
    def test_expression_values_are_escaped(self, value: str) -> None:
        template = compile_template("<p title={value}>{value}</p>")
        escaped = escape_html(value)
        assert template.render(value=value) == f'<p title="{escaped}">{escaped}</p>'
