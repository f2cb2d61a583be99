"""
Tests for the command line tokenizer.

Focus Areas:
1. Whitespace splitting and source ordering
2. Quoting and escape resolution
3. Flag and project mention classification
4. Lenient recovery from malformed quoting
"""

import pytest

from projterm.core.types import Token, TokenKind
from projterm.exceptions import CommandInputTypeError
from projterm.parsing.tokenizer import tokenize


def kinds(tokens: list[Token]) -> list[TokenKind]:
    return [token.kind for token in tokens]


def values(tokens: list[Token]) -> list[str]:
    return [token.value for token in tokens]


class TestWords:
    """Tests for plain word splitting."""

    def test_splits_on_whitespace(self):
        """Words separated by any amount of whitespace."""
        tokens = tokenize("add  todo\tbuy   milk")

        assert values(tokens) == ["add", "todo", "buy", "milk"]
        assert kinds(tokens) == [TokenKind.WORD] * 4

    def test_empty_input(self):
        """Empty and blank input produce no tokens."""
        assert tokenize("") == []
        assert tokenize("   ") == []

    def test_punctuation_stays_in_words(self):
        """Ordinary punctuation does not split words."""
        assert values(tokenize("fix bug, then ship!")) == ["fix", "bug,", "then", "ship!"]

    def test_backslash_escapes_whitespace(self):
        """An escaped space joins two words."""
        assert values(tokenize(r"my\ file other")) == ["my file", "other"]

    def test_lone_backslash_is_literal(self):
        """A backslash before an ordinary character is kept."""
        assert values(tokenize(r"C:\temp")) == [r"C:\temp"]


class TestQuotedStrings:
    """Tests for quoted runs."""

    @pytest.mark.parametrize("quote", ['"', "'"])
    def test_quoted_run_is_one_token(self, quote):
        """Both quote styles group whitespace-separated text."""
        tokens = tokenize(f"note {quote}a b c{quote}")

        assert tokens[1] == Token(TokenKind.QUOTED_STRING, "a b c")

    def test_escaped_double_quote(self):
        """Backslash-quote inside double quotes becomes a literal quote."""
        tokens = tokenize(r'"say \"hi\""')

        assert tokens == [Token(TokenKind.QUOTED_STRING, 'say "hi"')]

    def test_escaped_single_quote(self):
        """Backslash-quote inside single quotes becomes a literal quote."""
        assert values(tokenize(r"'it\'s'")) == ["it's"]

    def test_other_quote_char_is_literal_inside_quotes(self):
        """A single quote inside double quotes needs no escape."""
        assert values(tokenize('"it\'s fine"')) == ["it's fine"]

    def test_escaped_backslash(self):
        """A doubled backslash inside quotes is one backslash."""
        assert values(tokenize(r'"a\\"')) == ["a\\"]

    def test_empty_quotes(self):
        """An empty quoted run is an empty quoted string."""
        assert tokenize('""') == [Token(TokenKind.QUOTED_STRING, "")]

    def test_quoted_content_is_opaque(self):
        """Flag and mention syntax inside quotes is plain data."""
        tokens = tokenize('"--flag @proj" "x=y"')

        assert kinds(tokens) == [TokenKind.QUOTED_STRING, TokenKind.QUOTED_STRING]
        assert values(tokens) == ["--flag @proj", "x=y"]

    def test_unterminated_quote_takes_rest(self):
        """An unterminated quote swallows the remainder without raising."""
        tokens = tokenize('note "half open --x @y')

        assert tokens[1] == Token(TokenKind.QUOTED_STRING, "half open --x @y")
        assert len(tokens) == 2

    def test_quote_adjacent_to_word_joins(self):
        """Quotes in the middle of a word are dequoted in place."""
        assert tokenize('ab"c d"e') == [Token(TokenKind.WORD, "abc de")]


class TestFlags:
    """Tests for --flag tokens."""

    def test_boolean_flag(self):
        """A flag without '=' has no value."""
        assert tokenize("--urgent") == [Token(TokenKind.FLAG, "urgent", None)]

    def test_valued_flag(self):
        """Text after '=' is the value."""
        assert tokenize("--priority=high") == [Token(TokenKind.FLAG, "priority", "high")]

    def test_quoted_flag_value(self):
        """A quoted value keeps its spaces and loses its quotes."""
        assert tokenize('--title="My Task" x') == [
            Token(TokenKind.FLAG, "title", "My Task"),
            Token(TokenKind.WORD, "x"),
        ]

    def test_value_split_on_first_equals(self):
        """Only the first '=' separates name and value."""
        assert tokenize("--expr=a=b") == [Token(TokenKind.FLAG, "expr", "a=b")]

    def test_empty_value(self):
        """'--name=' yields an empty string value, not a boolean."""
        assert tokenize("--title=") == [Token(TokenKind.FLAG, "title", "")]

    def test_quoted_equals_is_not_a_separator(self):
        """An '=' inside quotes belongs to the name."""
        assert tokenize('--"a=b"') == [Token(TokenKind.FLAG, "a=b", None)]

    @pytest.mark.parametrize("text", ["--", "--=x", "-x"])
    def test_nameless_or_single_dash_is_a_word(self, text):
        """Without a name after '--' the token is an ordinary word."""
        assert kinds(tokenize(text)) == [TokenKind.WORD]


class TestProjectMentions:
    """Tests for @project tokens."""

    def test_simple_mention(self):
        """Everything after '@' up to whitespace."""
        assert tokenize("@MyProject") == [Token(TokenKind.PROJECT_MENTION, "MyProject")]

    def test_quoted_mention(self):
        """A quoted run after '@' binds the full content."""
        assert tokenize('@"My Cool Project" x') == [
            Token(TokenKind.PROJECT_MENTION, "My Cool Project"),
            Token(TokenKind.WORD, "x"),
        ]

    def test_unquoted_multi_word_mention(self):
        """Unquoted mentions stop at the first whitespace."""
        tokens = tokenize("@My Cool Project")

        assert kinds(tokens) == [TokenKind.PROJECT_MENTION, TokenKind.WORD, TokenKind.WORD]
        assert values(tokens) == ["My", "Cool", "Project"]

    def test_escaped_space_in_mention(self):
        """An escaped space extends an unquoted mention."""
        assert tokenize(r"@My\ Project") == [Token(TokenKind.PROJECT_MENTION, "My Project")]

    def test_bare_at_is_a_word(self):
        """A lone '@' names nothing."""
        assert tokenize("@") == [Token(TokenKind.WORD, "@")]

    def test_at_inside_word(self):
        """Email addresses are words."""
        assert kinds(tokenize("user@example.com")) == [TokenKind.WORD]


class TestOrdering:
    """Tests for source ordering."""

    def test_mixed_tokens_in_source_order(self):
        """Tokens of all kinds keep their relative order."""
        tokens = tokenize('add todo --urgent "buy milk" @home later')

        assert kinds(tokens) == [
            TokenKind.WORD,
            TokenKind.WORD,
            TokenKind.FLAG,
            TokenKind.QUOTED_STRING,
            TokenKind.PROJECT_MENTION,
            TokenKind.WORD,
        ]
        assert values(tokens) == ["add", "todo", "urgent", "buy milk", "home", "later"]

    def test_positional_property(self):
        """Words and quoted strings are positional; flags and mentions are not."""
        tokens = tokenize('a "b" --c @d')

        assert [token.is_positional for token in tokens] == [True, True, False, False]


def test_non_string_input_raises():
    """Tokenizing a non-string is a programming error."""
    with pytest.raises(CommandInputTypeError):
        tokenize(None)
