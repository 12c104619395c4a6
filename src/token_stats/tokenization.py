from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator, List, Sequence, Tuple

from .models import Rule

logger = logging.getLogger(__name__)

# Word-character lookarounds are ASCII-only; accented letters count as non-word.
_FLAGS = re.ASCII

DEFAULT_SLASH_EXCEPTIONS: Tuple[str, ...] = ("w",)


def _rule(name: str, pattern: str, replacement: str) -> Rule:
    return Rule(name=name, pattern=re.compile(pattern, _FLAGS), replacement=replacement)


def _pad(name: str, literal: str) -> Rule:
    """Rule that surrounds every occurrence of literal with spaces."""
    return _rule(name, re.escape(literal), f" {literal} ")


CLITIC_RULES: Tuple[Rule, ...] = (
    _rule("clitic-not", r"(?<=\w)n't(?![\w-])", " not"),
    _rule("clitic-will", r"(?<=\w)'ll(?![\w-])", " will"),
    _rule("clitic-have", r"(?<=\w)'ve(?![\w-])", " have"),
    _rule("clitic-would", r"(?<=\w)'d(?![\w-])", " would"),
    _rule("clitic-are", r"(?<=\w)'re(?![\w-])", " are"),
    _rule("clitic-is", r"\b([Ss]?[Hh]e|[Ii]t|[Tt]?[Hh]ere)'s(?![\w-])", r"\1 is"),
    _rule("clitic-s", r"(?<=\w)'s(?![\w-])", " 's"),
    _rule("clitic-am", r"\bI'm(?![\w-])", "I am"),
)

QUOTE_RULES: Tuple[Rule, ...] = (
    _pad("double-quote", '"'),
    # An apostrophe opening a word, unless it starts a split-off 's token.
    _rule("leading-apostrophe", r"(?<!\w)'(?!s(?!\w))", " ' "),
    _rule("trailing-apostrophe", r"(?<=\w)'(?!\w)", " ' "),
)

BRACKET_RULES: Tuple[Rule, ...] = tuple(
    _pad(f"bracket-{name}", literal)
    for name, literal in (
        ("open-paren", "("),
        ("close-paren", ")"),
        ("open-brace", "{"),
        ("close-brace", "}"),
        ("open-square", "["),
        ("close-square", "]"),
    )
)

PUNCTUATION_RULES: Tuple[Rule, ...] = (
    _rule("trailing-full-stop", r"\.(?!\w)", " . "),
    _rule("leading-full-stop", r"(?<!\w)\.", " . "),
    _rule("comma", r",(?!\d)", " , "),
    _pad("semicolon", ";"),
    _pad("colon", ":"),
    _pad("bang", "!"),
    _pad("query", "?"),
    _rule("dollar", r"\s*\$(?=\d)", " $ "),
    _pad("double-hyphen", "--"),
)

SYMBOL_RULES: Tuple[Rule, ...] = (
    _pad("star", "*"),
    _pad("tilde", "~"),
)


def slash_rule(exceptions: Iterable[str] = DEFAULT_SLASH_EXCEPTIONS) -> Rule:
    """Isolate '/' unless it directly follows one of the given whole-word prefixes."""
    guards = "".join(
        rf"(?<!\b{re.escape(prefix)})" for prefix in exceptions if prefix
    )
    return _rule("slash", guards + "/", " / ")


def build_rules(
    slash_exceptions: Iterable[str] = DEFAULT_SLASH_EXCEPTIONS,
) -> Tuple[Rule, ...]:
    """Return the ordered rule table, customizing the slash exception list."""
    return (
        CLITIC_RULES
        + QUOTE_RULES
        + BRACKET_RULES
        + PUNCTUATION_RULES
        + (slash_rule(slash_exceptions),)
        + SYMBOL_RULES
    )


DEFAULT_RULES: Tuple[Rule, ...] = build_rules()


def apply_rules(text: str, rules: Sequence[Rule] = DEFAULT_RULES) -> str:
    """Run every rule over the whole text, in order, and return the rewritten text."""
    for rule in rules:
        text = rule.apply(text)
    return text


def trace_rules(
    text: str, rules: Sequence[Rule] = DEFAULT_RULES
) -> Iterator[Tuple[Rule, str, str]]:
    """Yield (rule, before, after) for each rule as it is applied."""
    for rule in rules:
        rewritten = rule.apply(text)
        if rewritten != text:
            logger.debug("Rule %s rewrote %r -> %r", rule.name, text, rewritten)
        yield rule, text, rewritten
        text = rewritten


def tokenize(text: str | None, rules: Sequence[Rule] = DEFAULT_RULES) -> List[str]:
    """Split text into tokens after clitic expansion and punctuation isolation."""
    if text is None:
        return []
    return apply_rules(text, rules).split()
