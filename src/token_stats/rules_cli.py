from __future__ import annotations

from typing import Tuple

import click

from .tokenization import DEFAULT_SLASH_EXCEPTIONS, build_rules, trace_rules


@click.group(name="rules")
def rules_group() -> None:
    """Commands for inspecting the ordered tokenization rules."""


@rules_group.command("list")
@click.option(
    "--slash-exception",
    "slash_exceptions",
    multiple=True,
    help="Prefix after which '/' is kept attached (repeatable).",
)
def rules_list(slash_exceptions: Tuple[str, ...]) -> None:
    """Print the rule table in application order."""
    rules = build_rules(slash_exceptions or DEFAULT_SLASH_EXCEPTIONS)
    for position, rule in enumerate(rules, start=1):
        click.echo(f"{position:2d} {rule.name}\t{rule.pattern.pattern}")


@rules_group.command("trace")
@click.argument("text")
def rules_trace(text: str) -> None:
    """Show the text after every rule that changed it, then the final tokens."""
    rewritten = text
    for rule, before, after in trace_rules(text):
        if before != after:
            click.echo(f"{rule.name}: {after!r}")
        rewritten = after
    click.echo(" | ".join(rewritten.split()))
