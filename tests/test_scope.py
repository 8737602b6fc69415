"""Tests for SoupScope and the scope factory."""

import pytest

from domassert.assertions import ScopeError, SelectorError
from domassert.schema_parsing import DocumentConfig
from domassert.scope import SoupScope, create_scope


# --- SoupScope ---


def test_query_all_and_first(scope):
    assert len(scope.query_all(".choice")) == 4
    assert scope.query_first(".choice").get_text() == "One"
    assert scope.query_first(".missing") is None


def test_empty_selector_matches_nothing(scope):
    assert scope.query_all("") == []
    assert scope.query_first("") is None


def test_invalid_selector(scope):
    with pytest.raises(SelectorError) as exc_info:
        scope.query_all("div[[[")
    assert exc_info.value.selector == "div[[["


def test_unsupported_parser():
    with pytest.raises(ValueError):
        SoupScope.from_html("<p></p>", parser="regex")


def test_class_list(scope):
    assert scope.class_list(scope.query_first("input.username")) == ["username", "form-control"]
    assert scope.class_list(scope.query_first("#title")) == []


def test_element_id(scope):
    assert scope.element_id(scope.query_first("#title")) == "title"
    assert scope.element_id(scope.query_first(".xyz")) is None


def test_option_value_falls_back_to_text():
    scope = SoupScope.from_html("<select><option> Only   one </option></select>")
    assert scope.form_value(scope.query_first("select")) == "Only one"


def test_empty_select_has_empty_value():
    scope = SoupScope.from_html("<select></select>")
    assert scope.form_value(scope.query_first("select")) == ""


def test_focus_and_blur(scope):
    email = scope.query_first("input.email")
    scope.focus(email)
    assert scope.active_element() is email
    scope.blur()
    assert scope.active_element() is None


def test_focus_rejects_non_elements(scope):
    with pytest.raises(TypeError):
        scope.focus("input.email")


def test_within_shares_focus_with_document(scope):
    app = scope.within(scope.query_first("#app"))
    email = app.query_first("input.email")
    app.focus(email)
    assert scope.active_element() is email
    assert app.within(app.query_first("#menu")).active_element() is email


def test_within_limits_queries(scope):
    footer = scope.within(scope.query_first("#footer"))
    assert footer.query_all(".choice") == []
    assert len(footer.query_all("p")) == 1


# --- create_scope ---


def test_create_scope_from_inline_html():
    scope = create_scope(DocumentConfig(html="<div id='a'><input class='x'></div>", focus="input.x"))
    assert scope.active_element() is scope.query_first("input.x")


def test_create_scope_from_file(tmp_path):
    (tmp_path / "page.html").write_text("<main><h1>Hi</h1></main><footer><h1>Bye</h1></footer>")
    scope = create_scope(DocumentConfig(path="page.html", root="main"), base_dir=tmp_path)
    assert [h.get_text() for h in scope.query_all("h1")] == ["Hi"]


def test_create_scope_missing_file(tmp_path):
    with pytest.raises(ScopeError):
        create_scope(DocumentConfig(path="nope.html"), base_dir=tmp_path)


@pytest.mark.parametrize("field", ["root", "focus"])
def test_create_scope_unmatched_selector(field):
    with pytest.raises(ScopeError):
        create_scope(DocumentConfig(html="<p></p>", **{field: "#missing"}))


# --- text and form values ---


def test_text_content_includes_script_style_and_template_text():
    scope = SoupScope.from_html(
        "<div id='d'>a<script>var x=1;</script><style>p{}</style>"
        "<template>t</template><!-- note --></div>"
    )
    assert scope.text_content(scope.query_first("#d")) == "avar x=1;p{}t"


def test_textarea_drops_newline_after_start_tag():
    scope = SoupScope.from_html("<textarea id='a'>\nfoo</textarea><textarea id='b'>\n\nbar</textarea>")
    assert scope.form_value(scope.query_first("#a")) == "foo"
    assert scope.form_value(scope.query_first("#b")) == "\nbar"


def test_text_content_includes_ruby_annotations():
    scope = SoupScope.from_html("<ruby id='r'>漢<rp>(</rp><rt>kan</rt><rp>)</rp></ruby>")
    assert scope.text_content(scope.query_first("#r")) == "漢(kan)"
