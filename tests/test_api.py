"""End-to-end tests for the public API: compile, build and render."""

import pytest

import plume
from plume import (
    Err,
    Fragment,
    Ok,
    PlumeError,
    SimpleElement,
    Template,
    compile_template,
    component,
    html,
    render,
    rsx,
)


class TestHtml:
    """html() compiles, builds and renders in one call."""

    def test_list_items(self) -> None:
        assert html('<ul><li>{"1"}</li><li>{"2"}</li></ul>') == "<ul><li>1</li><li>2</li></ul>"

    def test_dashed_attribute(self) -> None:
        assert html('<div data-test-id={"x"} />') == '<div data-test-id="x"/>'

    def test_duplicate_attribute_keeps_first(self) -> None:
        assert html('<div a="1" a="2"/>') == '<div a="1"/>'

    def test_text_and_expression_escaping(self) -> None:
        assert html("<p>Fish &amp; chips {note}</p>", note="<new>") == (
            "<p>Fish &amp;amp; chips&lt;new&gt;</p>"
        )

    def test_whitespace_next_to_blocks_is_dropped(self) -> None:
        assert html("<p>Hi {name} !</p>", name="Ada") == "<p>HiAda!</p>"
        assert html('<p>{"Hi "}{name}</p>', name="Ada") == "<p>Hi Ada</p>"

    def test_whitespace_between_words_collapses(self) -> None:
        assert html("<p>\n  one\n\n  two   three\n</p>") == "<p>one two three</p>"

    def test_scope_mapping_and_names(self) -> None:
        scope = {"a": "from scope", "b": "from scope"}
        assert html("<p>{a}|{b}</p>", scope, b="override") == "<p>from scope|override</p>"

    def test_punned_keyword_attribute(self) -> None:
        assert html("<div class/>", {"class": "box"}) == '<div class="box"/>'

    def test_none_attribute_omitted(self) -> None:
        assert html("<input value={v} disabled={None}/>", v="x") == '<input value="x"/>'

    def test_fragment_root(self) -> None:
        assert html("<><dt>{k}</dt><dd>{v}</dd></>", k="a", v=1) == "<dt>a</dt><dd>1</dd>"

    def test_fragment_by_name(self) -> None:
        assert html("<Fragment><br/>x</Fragment>") == "<br/>x"

    def test_doctype_builtin(self) -> None:
        assert html("<><HTML5Doctype/><html></html></>") == "<!DOCTYPE html><html></html>"

    def test_raw_builtin(self) -> None:
        assert html("<div>{raw(markup)}</div>", markup="<b>ok</b>") == "<div><b>ok</b></div>"

    def test_sequence_of_nodes(self) -> None:
        items = ["a", "b", "c"]
        result = html(
            "<ul>{[SimpleElement('li', {}, item) for item in items]}</ul>",
            items=items,
            SimpleElement=SimpleElement,
        )
        assert result == "<ul><li>a</li><li>b</li><li>c</li></ul>"

    def test_optional_and_result_values(self) -> None:
        assert html("<p>{maybe}</p>", maybe=None) == "<p></p>"
        assert html("<p>{r}</p>", r=Ok("yes")) == "<p>yes</p>"
        assert html("<p>{r}</p>", r=Err("no")) == "<p>no</p>"

    def test_conditional_expression(self) -> None:
        template = "<p>{'on' if flag else ()}</p>"
        assert html(template, flag=True) == "<p>on</p>"
        assert html(template, flag=False) == "<p></p>"


class TestRsx:
    """rsx() returns a render tree usable as a child of other trees."""

    def test_returns_node_tree(self) -> None:
        node = rsx("<li>{text}</li>", text="one")
        assert node == SimpleElement("li", {}, "one")

    def test_composition(self) -> None:
        item = rsx("<li>{text}</li>", text="one")
        assert render(rsx("<ul>{items}</ul>", items=[item, item])) == (
            "<ul><li>one</li><li>one</li></ul>"
        )

    def test_fragment_tree(self) -> None:
        assert rsx("<>{a}{b}</>", a="x", b="y") == Fragment(("x", "y"))


class TestCustomElements:
    """Custom elements are called with attributes as keyword fields."""

    def test_plain_function_component(self) -> None:
        def Link(href, children=()):
            return SimpleElement("a", {"href": href}, children)

        assert html("<Link href={'/x'}>go</Link>", Link=Link) == '<a href="/x">go</a>'

    def test_dotted_component_path(self) -> None:
        class ui:
            @staticmethod
            def Badge(label):
                return SimpleElement("span", {}, label)

        assert html('<ui.Badge label="new"/>', ui=ui) == "<span>new</span>"

    def test_children_left_nested(self) -> None:
        received = []

        def Box(children=()):
            received.append(children)
            return children

        html("<Box>a{b}<br/></Box>", Box=Box, b="B")
        assert received == [(("a", "B"), SimpleElement("br", self_closing=True))]

    def test_single_child_is_passed_directly(self) -> None:
        received = []

        def Box(children=()):
            received.append(children)
            return ()

        html("<Box>{value}</Box>", Box=Box, value=7)
        assert received == [7]

    def test_no_children_field_without_body(self) -> None:
        def Strict(title):
            return title

        assert html("<Strict title={'t'}></Strict>", Strict=Strict) == "t"

    def test_bare_reference_to_instance(self) -> None:
        logo = SimpleElement("img", {"src": "/logo.png"}, self_closing=True)
        assert html("<div><Logo/></div>", Logo=logo) == '<div><img src="/logo.png"/></div>'

    def test_punned_field(self) -> None:
        def Greeting(name):
            return f"Hello, {name}"

        assert html("<Greeting name/>", Greeting=Greeting, name="Ada") == "Hello, Ada"


class TestCompileTemplate:
    """compile_template() returns a reusable Template."""

    def test_template_render_many(self) -> None:
        template = compile_template("<tr><td>{name}</td><td>{qty}</td></tr>")
        assert isinstance(template, Template)
        assert template.render(name="Pears", qty=3) == "<tr><td>Pears</td><td>3</td></tr>"
        assert template.render(name="Figs", qty=0.5) == "<tr><td>Figs</td><td>0.5</td></tr>"

    def test_template_diagnostics(self) -> None:
        template = compile_template('<div a="1" a="2"></span>')
        assert template.ok is False
        assert [d.message for d in template.diagnostics] == [
            "There is a previous definition of the a attribute",
            "Expected closing tag for <div>",
        ]
        assert compile_template("<div/>").ok is True

    def test_template_render_into(self) -> None:
        import io

        buffer = io.StringIO()
        compile_template("<p>{x}</p>").render_into(buffer, x="y")
        assert buffer.getvalue() == "<p>y</p>"

    def test_template_is_frozen(self) -> None:
        template = compile_template("<br/>")
        with pytest.raises(AttributeError):
            template.source_file = "x"  # type: ignore[misc]

    def test_source_file_recorded(self) -> None:
        assert compile_template("<br/>", source_file="a.plume").source_file == "a.plume"

    def test_scope_overrides_builtins(self) -> None:
        assert html("<p>{raw}</p>", raw="<shadowed>") == "<p>&lt;shadowed&gt;</p>"


class TestPackage:
    def test_version(self) -> None:
        assert plume.__version__ == "0.1.0"

    def test_all_exports_resolve(self) -> None:
        for name in plume.__all__:
            assert hasattr(plume, name), name


class TestPageLayout:
    """A layout component wrapping a page body."""

    @staticmethod
    def page(title, children=()):
        return rsx(
            """
            <>
              <HTML5Doctype />
              <html>
                <head><title>{title}</title></head>
                <body>
                  {children}
                </body>
              </html>
            </>
            """,
            title=title,
            children=children,
        )

    def test_page(self) -> None:
        actual = html(
            """
            <Page title={"Home"}>
              {"Welcome, {}".format("Gal")}
            </Page>
            """,
            Page=component(self.page),
        )
        assert actual == (
            "<!DOCTYPE html>"
            "<html>"
            "<head><title>Home</title></head>"
            "<body>"
            "Welcome, Gal"
            "</body>"
            "</html>"
        )

    def test_raw_child(self) -> None:
        assert html('<div>{raw("<Hello />")}</div>') == "<div><Hello /></div>"

    def test_unexpected_field(self) -> None:
        @component
        def Heading(title):
            return rsx("<h1>{title}</h1>", title=title)

        with pytest.raises(PlumeError, match="unexpected keyword argument 't'"):
            html('<Heading t={"Hello world!"} />', Heading=Heading)
