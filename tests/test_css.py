import pytest

from shellcss.css.lexer import Lexer, ParseError
from shellcss.css.parser import AtRule, Declaration, Parse, QualifiedRule, Stylesheet
from shellcss.css.render import render, render_rule
from shellcss.css.tokens import *


def lex(source):
    return [token for token in Lexer(source).process() if not isinstance(token, Whitespace)]


class TestLexer:
    def test_dimensions(self):
        [px, em_, neg] = lex("16px 1.5em -1px")
        assert isinstance(px, Dimension) and px.value == 16 and px.unit == "px"
        assert em_.value == 1.5 and em_.type == "number" and em_.unit == "em"
        assert neg.value == -1 and str(neg) == "-1px"

    def test_numbers_and_percentages(self):
        [integer, fraction, percent, exponent] = lex("12 .5 50% 2e3")
        assert isinstance(integer, Number) and integer.value == 12
        assert fraction.value == 0.5
        assert isinstance(percent, Percentage) and str(percent) == "50%"
        assert exponent.value == 2000

    def test_idents_and_functions(self):
        tokens = lex("-webkit-box rect(0 0)")
        assert tokens[0] == Ident("-webkit-box")
        assert tokens[1] == Function("rect")
        assert isinstance(tokens[-1], RParantheses)

    def test_strings(self):
        [single, double] = lex("'a b' \"c\\\"d\"")
        assert single.raw == "a b" and str(single) == "'a b'"
        assert double.raw == 'c"d'

    def test_unclosed_string_is_recorded(self):
        lexer = Lexer('"open')
        [token] = lexer.process()
        assert token.raw == "open"
        assert len(lexer.errors) == 1

    def test_hash_and_at_keyword(self):
        [color, media] = lex("#fff @media")
        assert isinstance(color, Hash) and str(color) == "#fff"
        assert isinstance(media, AtKeyword) and str(media) == "@media"

    def test_punctuation(self):
        tokens = lex("a:b;c,{}[]")
        assert [type(t) for t in tokens] == [
            Ident, Colon, Ident, Semicolon, Ident, Comma,
            LCurlyBracket, RCurlyBracket, LSquareBracket, RSquareBracket,
        ]

    def test_comments(self):
        [comment] = Lexer("/* note */").process()
        assert comment.text == " note "

    def test_unclosed_comment(self):
        with pytest.raises(ParseError):
            Lexer("/* note").process()

    def test_escape_in_ident(self):
        [ident] = lex("\\31 0")
        assert ident == Ident("10")


class TestParser:
    def test_declaration(self):
        decl = Parse.parse_declaration("margin : 0 auto")
        assert decl.name == "margin"
        assert decl.text == "0 auto"
        assert not decl.important

    def test_important(self):
        decl = Parse.parse_declaration("display: none !important")
        assert decl.important
        assert decl.text == "none"

    def test_decl_list(self):
        decls = Parse.parse_decl_list("display: none; clip: rect(0 0 0 0);\n color: rgba(0, 0, 0, .5)")
        assert [d.name for d in decls] == ["display", "clip", "color"]
        assert decls[1].text == "rect(0 0 0 0)"
        assert decls[2].text == "rgba(0, 0, 0, .5)"

    def test_semicolon_inside_function(self):
        [decl] = Parse.parse_decl_list('background: url("a;b")')
        assert decl.text == 'url("a;b")'

    def test_missing_colon(self):
        with pytest.raises(ParseError, match="colon"):
            Parse.parse_decl_list("display none")

    def test_missing_value(self):
        with pytest.raises(ParseError):
            Parse.parse_declaration("display:")

    def test_declarations_from_mapping(self):
        decls = Parse.declarations({"width": 0, "margin": "-1px", "height": Dimension(1, unit="px")})
        assert [d.text for d in decls] == ["0", "-1px", "1px"]

    def test_declarations_rejects_other_items(self):
        with pytest.raises(TypeError):
            Parse.declarations([("display", "none")])


class TestRender:
    def test_declaration(self):
        assert render_rule(Declaration.new("color", "red !important")) == "color: red !important;"

    def test_stylesheet(self):
        stylesheet = Stylesheet([
            QualifiedRule(".a", [Declaration.new("width", "50%")]),
            AtRule("media", "(min-width: 45em)", [QualifiedRule(".a-from-lap", [Declaration.new("width", 25)])]),
        ])
        assert len(stylesheet) == 2
        assert str(stylesheet) == (
            ".a {\n"
            "  width: 50%;\n"
            "}\n"
            "\n"
            "@media (min-width: 45em) {\n"
            "  .a-from-lap {\n"
            "    width: 25;\n"
            "  }\n"
            "}\n"
        )

    def test_statement_at_rule(self):
        assert render_rule(AtRule("charset", '"utf-8"')) == '@charset "utf-8";'

    def test_empty(self):
        assert render([]) == ""

    def test_custom_indent(self):
        rule = QualifiedRule(".a", [Declaration.new("color", "red")])
        assert render_rule(rule, indent="\t") == ".a {\n\tcolor: red;\n}"
