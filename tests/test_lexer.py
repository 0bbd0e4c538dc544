import pytest

from rzozowski.lexer import RegexSyntaxError, Token, TokenKind, tokenize


def test_lex_unescaped_literal():
    assert tokenize("a") == [Token(TokenKind.LITERAL, "a")]


def test_lex_escaped_literal():
    tokens = tokenize("\\[")
    assert tokens == [
        Token(TokenKind.BACKSLASH, "\\"),
        Token(TokenKind.OPEN_BRACKET, "["),
    ]


def test_empty_input_raises():
    with pytest.raises(RegexSyntaxError):
        tokenize("")


@pytest.mark.parametrize(
    "char, kind",
    [
        ("(", TokenKind.OPEN_PAREN),
        (")", TokenKind.CLOSE_PAREN),
        ("{", TokenKind.OPEN_CURLY),
        ("}", TokenKind.CLOSE_CURLY),
        ("[", TokenKind.OPEN_BRACKET),
        ("]", TokenKind.CLOSE_BRACKET),
        ("|", TokenKind.PIPE),
        ("*", TokenKind.STAR),
        ("+", TokenKind.PLUS),
        ("?", TokenKind.QUESTION),
        ("-", TokenKind.HYPHEN),
        ("\\", TokenKind.BACKSLASH),
        (",", TokenKind.COMMA),
        ("%", TokenKind.PERCENT),
        (".", TokenKind.DOT),
        ("@", TokenKind.AT),
        ("z", TokenKind.LITERAL),
        ("7", TokenKind.LITERAL),
        ("\n", TokenKind.LITERAL),
        ("💕", TokenKind.LITERAL),
    ],
)
def test_each_character_kind(char, kind):
    (token,) = tokenize(char)
    assert token.kind is kind
    assert token.as_char() == char


def test_tokenize_sequence_round_trips():
    pattern = "[a-z]{2,}(b|c)*"
    assert "".join(token.as_char() for token in tokenize(pattern)) == pattern


def test_token_str():
    assert str(Token(TokenKind.LITERAL, "a")) == "Literal('a')"
    assert str(Token(TokenKind.OPEN_PAREN, "(")) == "OpenParen"
    assert str(Token(TokenKind.CLOSE_CURLY, "}")) == "CloseCurly"


def test_token_rejects_mismatched_char():
    with pytest.raises(ValueError):
        Token(TokenKind.STAR, "+")


def test_literal_token_rejects_punctuation():
    with pytest.raises(ValueError):
        Token(TokenKind.LITERAL, "*")


def test_syntax_error_is_value_error():
    with pytest.raises(ValueError):
        tokenize("")