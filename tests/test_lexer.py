import pytest

from errors import LexerError
from lexer import Lexer
from tests.utils import lex
from tokens import Token, TokenKind


def kinds(text, **kwargs):
    return [t.kind for t in lex(text, **kwargs)]


def test_lexer_recognizes_keywords_and_punctuation():
    src = "if else while print putc ( ) { } ; ,"
    assert kinds(src) == [
        TokenKind.KEYWORD_IF,
        TokenKind.KEYWORD_ELSE,
        TokenKind.KEYWORD_WHILE,
        TokenKind.KEYWORD_PRINT,
        TokenKind.KEYWORD_PUTC,
        TokenKind.LEFT_PAREN,
        TokenKind.RIGHT_PAREN,
        TokenKind.LEFT_BRACE,
        TokenKind.RIGHT_BRACE,
        TokenKind.SEMICOLON,
        TokenKind.COMMA,
        TokenKind.END_OF_INPUT,
    ]


def test_lexer_recognizes_operators():
    src = "* / % + - < <= > >= == != = ! && ||"
    assert kinds(src) == [
        TokenKind.OP_MULTIPLY,
        TokenKind.OP_DIVIDE,
        TokenKind.OP_MOD,
        TokenKind.OP_ADD,
        TokenKind.OP_SUBTRACT,
        TokenKind.OP_LESS,
        TokenKind.OP_LESSEQUAL,
        TokenKind.OP_GREATER,
        TokenKind.OP_GREATEREQUAL,
        TokenKind.OP_EQUAL,
        TokenKind.OP_NOTEQUAL,
        TokenKind.OP_ASSIGN,
        TokenKind.OP_NOT,
        TokenKind.OP_AND,
        TokenKind.OP_OR,
        TokenKind.END_OF_INPUT,
    ]


def test_two_char_operators_without_spaces():
    assert kinds("a<=b==c!d") == [
        TokenKind.IDENTIFIER,
        TokenKind.OP_LESSEQUAL,
        TokenKind.IDENTIFIER,
        TokenKind.OP_EQUAL,
        TokenKind.IDENTIFIER,
        TokenKind.OP_NOT,
        TokenKind.IDENTIFIER,
        TokenKind.END_OF_INPUT,
    ]


def test_token_positions_are_one_based_and_track_newlines():
    tokens = lex("x = 1;\n  y")
    positions = [(t.kind, t.text, t.line, t.column) for t in tokens]
    assert positions == [
        (TokenKind.IDENTIFIER, "x", 1, 1),
        (TokenKind.OP_ASSIGN, "", 1, 3),
        (TokenKind.INTEGER, "1", 1, 5),
        (TokenKind.SEMICOLON, "", 1, 6),
        (TokenKind.IDENTIFIER, "y", 2, 3),
        (TokenKind.END_OF_INPUT, "", 2, 4),
    ]


@pytest.mark.parametrize(
    "src",
    ["", "   \n\t ", "// just a comment", "/* block */", "/* multi\nline */ // x\n\n"],
)
def test_whitespace_and_comments_yield_only_end_of_input(src):
    assert kinds(src) == [TokenKind.END_OF_INPUT]


def test_block_comment_keeps_line_and_column_tracking():
    tokens = lex("/* a\n b */ x")
    assert tokens[0] == Token(TokenKind.IDENTIFIER, "x", 2, 7)


def test_block_comment_closed_by_double_star():
    tokens = lex("/* a **/ y")
    assert [t.text for t in tokens] == ["y", ""]


def test_line_comment_resumes_on_next_line():
    tokens = lex("x // comment ( ) \ny")
    assert [(t.text, t.line, t.column) for t in tokens[:2]] == [("x", 1, 1), ("y", 2, 1)]


def test_division_is_not_a_comment():
    assert kinds("a / b") == [
        TokenKind.IDENTIFIER,
        TokenKind.OP_DIVIDE,
        TokenKind.IDENTIFIER,
        TokenKind.END_OF_INPUT,
    ]


@pytest.mark.parametrize(
    "src, code",
    [("'a'", "97"), ("'\\n'", "10"), ("'\\\\'", "92"), ("'\\t'", "116"), ("' '", "32")],
)
def test_char_literal_becomes_integer_code_point(src, code):
    token = lex(src)[0]
    assert token.kind == TokenKind.INTEGER
    assert token.text == code


def test_char_literal_closing_quote_is_optional():
    tokens = lex("x = 'a;")
    assert [t.kind for t in tokens] == [
        TokenKind.IDENTIFIER,
        TokenKind.OP_ASSIGN,
        TokenKind.INTEGER,
        TokenKind.SEMICOLON,
        TokenKind.END_OF_INPUT,
    ]


def test_strict_lexer_requires_char_literal_closing_quote():
    with pytest.raises(LexerError, match="closing quote"):
        lex("'a;", strict=True)


def test_unterminated_char_literal():
    with pytest.raises(LexerError, match="Unterminated character literal"):
        lex("'")


def test_string_literal_keeps_escapes_verbatim():
    token = lex('"hello, world\\n"')[0]
    assert token.kind == TokenKind.STRING
    assert token.text == "hello, world\\n"
    assert (token.line, token.column) == (1, 1)


def test_unterminated_string_literal():
    with pytest.raises(LexerError, match="Unterminated string literal") as exc:
        lex('x = "abc')
    assert (exc.value.line, exc.value.column) == (1, 5)


def test_unterminated_block_comment():
    with pytest.raises(LexerError, match="Unterminated block comment") as exc:
        lex("x /* abc\n def")
    assert (exc.value.line, exc.value.column) == (1, 3)


def test_lone_ampersand_is_fatal():
    with pytest.raises(LexerError) as exc:
        lex("a & b")
    err = exc.value
    assert (err.line, err.column) == (1, 3)
    assert "(38)" in str(err)
    assert "'&'" in str(err)
    assert str(err).endswith("in line 1, pos 3")


def test_lone_pipe_at_end_of_input_is_fatal():
    with pytest.raises(LexerError, match=r"\(124\)"):
        lex("\n  |")


def test_unrecognized_character():
    with pytest.raises(LexerError, match=r"\(64\) '@'") as exc:
        lex("x = @;")
    assert (exc.value.line, exc.value.column) == (1, 5)


def test_lexer_errors_are_syntax_errors():
    with pytest.raises(SyntaxError):
        lex("#")


@pytest.mark.parametrize(
    "src, kind, text",
    [
        ("123", TokenKind.INTEGER, "123"),
        ("foo_1", TokenKind.IDENTIFIER, "foo_1"),
        ("_x", TokenKind.IDENTIFIER, "_x"),
        ("12ab", TokenKind.IDENTIFIER, "12ab"),
        ("iffy", TokenKind.IDENTIFIER, "iffy"),
        ("while", TokenKind.KEYWORD_WHILE, ""),
    ],
)
def test_identifier_or_integer(src, kind, text):
    token = lex(src)[0]
    assert (token.kind, token.text) == (kind, text)


def test_end_of_input_is_returned_repeatedly():
    lexer = Lexer("x")
    assert lexer.get_next_token().kind == TokenKind.IDENTIFIER
    for _ in range(3):
        assert lexer.get_next_token().kind == TokenKind.END_OF_INPUT


def test_iterating_a_lexer_stops_after_end_of_input():
    tokens = list(Lexer("a b"))
    assert [t.kind for t in tokens][-1] == TokenKind.END_OF_INPUT
    assert len(tokens) == 3
