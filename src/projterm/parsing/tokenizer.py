"""
Tokenizer for terminal command lines.

Splits the text after the leading slash into words, quoted strings, flags
(``--name`` or ``--name=value``) and project mentions (``@project``).

Quoting rules:
- Single- or double-quoted runs keep whitespace and are dequoted in place, so
  ``--title="My Task"`` is one flag token with value ``My Task``.
- Inside a quoted run a backslash escapes the active quote character or a
  backslash; any other backslash is kept literally.
- Outside quotes a backslash escapes whitespace, a quote character or a
  backslash.
- An unterminated quote swallows the rest of the line instead of failing.

Only unquoted prefixes are significant: ``"--draft"`` is a quoted string and
``"@home"`` is not a project mention. Once dequoted, content is never split or
classified again.
"""

from dataclasses import dataclass

from projterm.core.types import Token, TokenKind
from projterm.exceptions import CommandInputTypeError

QUOTE_CHARS = ('"', "'")
ESCAPE_CHAR = "\\"
FLAG_PREFIX = "--"
FLAG_VALUE_SEPARATOR = "="
MENTION_PREFIX = "@"


@dataclass
class _RawWord:
    """A whitespace-delimited run of the source with quoting resolved."""

    text: str
    starts_quoted: bool
    leading_unquoted: int  # length of the literal prefix of text
    separator_index: int | None  # index in text of the first unquoted '='


def tokenize(text: str) -> list[Token]:
    """
    Split a command line into tokens.

    Params:
        text: Command text, normally without the leading slash

    Returns:
        Tokens in source order

    Raises:
        CommandInputTypeError: If text is not a string
    """
    if not isinstance(text, str):
        raise CommandInputTypeError("tokenize", text)

    tokens: list[Token] = []
    pos = 0
    length = len(text)
    while pos < length:
        if text[pos].isspace():
            pos += 1
            continue
        word, pos = _read_word(text, pos)
        tokens.append(_classify(word))
    return tokens


def _read_word(text: str, start: int) -> tuple[_RawWord, int]:
    """Read one word starting at a non-whitespace character."""
    chars: list[str] = []
    quote: str | None = None
    literal_prefix = True
    leading_unquoted = 0
    separator_index = None
    pos = start
    length = len(text)

    while pos < length:
        char = text[pos]
        following = text[pos + 1] if pos + 1 < length else ""

        if quote is not None:
            if char == ESCAPE_CHAR and following in (quote, ESCAPE_CHAR):
                chars.append(following)
                pos += 2
            elif char == quote:
                quote = None
                pos += 1
            else:
                chars.append(char)
                pos += 1
            continue

        if char.isspace():
            break
        if char in QUOTE_CHARS:
            quote = char
            literal_prefix = False
            pos += 1
            continue
        if char == ESCAPE_CHAR and following and (
            following.isspace() or following in QUOTE_CHARS or following == ESCAPE_CHAR
        ):
            chars.append(following)
            literal_prefix = False
            pos += 2
            continue

        if char == FLAG_VALUE_SEPARATOR and separator_index is None:
            separator_index = len(chars)
        chars.append(char)
        if literal_prefix:
            leading_unquoted += 1
        pos += 1

    word = _RawWord(
        text="".join(chars),
        starts_quoted=text[start] in QUOTE_CHARS,
        leading_unquoted=leading_unquoted,
        separator_index=separator_index,
    )
    return word, pos


def _classify(word: _RawWord) -> Token:
    """Assign a token kind based on the unquoted prefix of a word."""
    if word.starts_quoted:
        return Token(TokenKind.QUOTED_STRING, word.text)

    if word.leading_unquoted >= len(FLAG_PREFIX) and word.text.startswith(FLAG_PREFIX):
        if word.separator_index is None:
            name, value = word.text[len(FLAG_PREFIX) :], None
        else:
            name = word.text[len(FLAG_PREFIX) : word.separator_index]
            value = word.text[word.separator_index + 1 :]
        if name:
            return Token(TokenKind.FLAG, name, value)
        return Token(TokenKind.WORD, word.text)

    if (
        word.leading_unquoted >= len(MENTION_PREFIX)
        and word.text.startswith(MENTION_PREFIX)
        and len(word.text) > len(MENTION_PREFIX)
    ):
        return Token(TokenKind.PROJECT_MENTION, word.text[len(MENTION_PREFIX) :])

    return Token(TokenKind.WORD, word.text)
