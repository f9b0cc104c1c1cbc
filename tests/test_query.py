import pytest

from acc_jabra_ui.query import (
    ABSENT,
    ElementAbsent,
    UnknownBackend,
    document_factory,
    open_document,
    parse_inline_style,
)


def test_body_class_name():
    document = open_document('<html><body class="mini-view"><p>x</p></body></html>')
    assert document.class_name(document.body()) == "mini-view"


def test_class_name_is_raw_attribute():
    document = open_document('<body class="mini-view  dark"></body>')
    assert document.class_name(document.body()) == "mini-view  dark"


def test_class_name_defaults_to_empty():
    document = open_document("<body><div id='a'></div></body>")
    assert document.class_name(document.get_element_by_id("a")) == ""


def test_inline_display_none():
    document = open_document('<div id="full-view-only" style="display:none">h</div>')
    element = document.get_element_by_id("full-view-only")
    assert document.style_property(element, "display") == "none"


def test_missing_style_property_is_empty():
    document = open_document('<div id="a" style="color: red"></div><div id="b"></div>')
    assert document.style_property(document.get_element_by_id("a"), "display") == ""
    assert document.style_property(document.get_element_by_id("b"), "display") == ""


def test_missing_id_is_absent():
    document = open_document("<body><div id='clock'></div></body>")
    element = document.get_element_by_id("does-not-exist")
    assert element is ABSENT
    assert not element


def test_reading_from_absent_raises_element_absent():
    document = open_document("<body></body>")
    with pytest.raises(ElementAbsent):
        document.class_name(ABSENT)
    with pytest.raises(ElementAbsent):
        document.style_property(ABSENT, "display")


def test_body_absent_without_body_tag():
    assert open_document("<div></div>").body() is ABSENT


def test_duplicate_ids_resolve_to_first():
    document = open_document('<p id="x" class="first"></p><p id="x" class="second"></p>')
    assert document.class_name(document.get_element_by_id("x")) == "first"


def test_two_parses_are_independent():
    markup = '<body class="mini-view"><div id="full-view-only" style="display: none"></div></body>'
    first = open_document(markup)
    second = open_document(markup)
    first.get_element_by_id("full-view-only")["style"] = "display: block"
    first.body()["class"] = "full-view"

    element = second.get_element_by_id("full-view-only")
    assert second.style_property(element, "display") == "none"
    assert second.class_name(second.body()) == "mini-view"


@pytest.mark.parametrize(
    "style, expected",
    [
        ("display:none", {"display": "none"}),
        (" Display : none ; color:red;", {"display": "none", "color": "red"}),
        ("display: block; display: none", {"display": "none"}),
        ("display: none !important; display: block", {"display": "none"}),
        ("display: none ! IMPORTANT", {"display": "none"}),
        ("display:; :none; junk", {}),
        ("/* hidden */ display: none", {"display": "none"}),
        ("display: none /* ; display: block */", {"display": "none"}),
        ("display: none; /* display: block", {"display": "none"}),
        ('content: "a;b"; display: none', {"content": '"a;b"', "display": "none"}),
        ("content: 'it\\'s;x'", {"content": "'it\\'s;x'"}),
        (
            "background: url(data:image/png;base64,AAA); display: none",
            {"background": "url(data:image/png;base64,AAA)", "display": "none"},
        ),
        ("", {}),
    ],
)
def test_parse_inline_style(style, expected):
    assert parse_inline_style(style) == expected


def test_soup_factory_yields_fresh_documents():
    with document_factory("soup") as open_doc:
        assert open_doc("<body></body>") is not open_doc("<body></body>")


def test_unknown_backend():
    with pytest.raises(UnknownBackend):
        with document_factory("jsdom"):
            pass


def test_commented_inline_style_still_hides():
    document = open_document('<div id="full-view-only" style="/* hidden */ display: none"></div>')
    element = document.get_element_by_id("full-view-only")
    assert document.style_property(element, "display") == "none"


def test_repeated_attribute_keeps_first():
    document = open_document('<body class="mini-view" class="full-view"></body>')
    assert document.class_name(document.body()) == "mini-view"
