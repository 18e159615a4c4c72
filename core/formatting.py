# =============================================================================
# core/formatting.py  -  Itinerary Markup Renderer
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns the model's free-text itinerary (lightweight markdown) into HTML
#   fragments that the results page drops into its content region.
#
# HOW IT WORKS:
#   text -> split on "\n" -> classify each line -> transform it -> join
#
#   Every line is handled on its own.  There is no state carried between
#   lines, so the output always has exactly one fragment per input line,
#   in the same order.
#
# THE RULE TABLE:
#   Classification is an ordered list of (kind, predicate, transform)
#   rules.  The first predicate that matches wins.  Prefixes overlap
#   ("### " also starts with "#"), so the order of _RULES is part of the
#   contract.
#
# WHAT IT DOES NOT DO:
#   - No escaping.  "<" and "&" pass straight through.  Callers that show
#     untrusted text must sanitize it themselves.
#   - No list containers.  "- item" becomes a bare <li>; the page template
#     supplies the surrounding <ul> if it wants one.
#   - A line that is entirely **bold** becomes an <h3>, not <strong>.
#     The planner prompt asks the model to use bold lines as day headers.
# =============================================================================

import re
from typing import Callable, NamedTuple

from core.models import LineKind


# Fixed separator for "---" lines.
HORIZONTAL_RULE = (
    '<hr style="margin: 2rem 0; border: none; border-top: 2px solid #e0e0e0;">'
)

_BOLD_DELIMITER = "**"

# Each heading rule strips EVERY hash run of its length (plus trailing
# whitespace) anywhere in the line, not just the leading prefix.
_H3_MARKER = re.compile(r"###\s*")
_H2_MARKER = re.compile(r"##\s*")
_H1_MARKER = re.compile(r"#\s*")
_LIST_MARKER = re.compile(r"^-\s*")
_INLINE_BOLD = re.compile(r"\*\*(.*?)\*\*")


class Rule(NamedTuple):
    """One row of the classification table."""

    kind: LineKind
    matches: Callable[[str], bool]
    render: Callable[[str], str]


# -----------------------------------------------------------------------------
# Inline transform
# -----------------------------------------------------------------------------
def render_inline(line: str) -> str:
    """Wrap every non-greedy ``**...**`` span in ``<strong>``.

    Matches are found left to right and never overlap.  An unterminated
    ``**`` is left as literal text.
    """
    return _INLINE_BOLD.sub(r"<strong>\1</strong>", line)


def _is_standalone_bold(line: str) -> bool:
    return line.startswith(_BOLD_DELIMITER) and line.endswith(_BOLD_DELIMITER)


# -----------------------------------------------------------------------------
# The rule table (priority order)
# -----------------------------------------------------------------------------
_RULES: tuple[Rule, ...] = (
    Rule(
        LineKind.HEADING3,
        lambda line: line.startswith("### "),
        lambda line: f"<h3>{_H3_MARKER.sub('', line)}</h3>",
    ),
    Rule(
        LineKind.HEADING2,
        lambda line: line.startswith("## "),
        lambda line: f"<h2>{_H2_MARKER.sub('', line)}</h2>",
    ),
    Rule(
        LineKind.HEADING1,
        lambda line: line.startswith("# "),
        lambda line: f"<h1>{_H1_MARKER.sub('', line)}</h1>",
    ),
    Rule(
        LineKind.STANDALONE_BOLD,
        _is_standalone_bold,
        lambda line: f"<h3>{line.replace(_BOLD_DELIMITER, '')}</h3>",
    ),
    Rule(
        LineKind.LIST_ITEM,
        lambda line: line.startswith("- "),
        lambda line: f"<li>{_LIST_MARKER.sub('', line, count=1)}</li>",
    ),
    Rule(
        LineKind.RULE,
        lambda line: line.strip() == "---",
        lambda line: HORIZONTAL_RULE,
    ),
    Rule(
        LineKind.PARAGRAPH,
        lambda line: bool(line.strip()),
        lambda line: f"<p>{render_inline(line)}</p>",
    ),
    Rule(
        LineKind.BLANK,
        lambda line: True,
        lambda line: "",
    ),
)


def _rule_for(line: str) -> Rule:
    # BLANK matches everything, so this always returns.
    return next(rule for rule in _RULES if rule.matches(line))


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------
def classify_line(line: str) -> LineKind:
    """Return the LineKind of a single line (first matching rule wins)."""
    return _rule_for(line).kind


def render_line(line: str) -> str:
    """Render a single line to its HTML fragment."""
    return _rule_for(line).render(line)


def render_fragments(text: str) -> list[str]:
    """Render ``text`` to a list with exactly one fragment per line.

    Lines are split on ``\\n`` only.  Blank lines yield an empty fragment
    so the list stays aligned with the input.
    """
    return [render_line(line) for line in text.split("\n")]


def render_itinerary(text: str) -> str:
    """Convert itinerary markdown into one HTML string.

    This is the function the results page and the HTTP endpoint use.
    Fragments are joined with no separator, in input order.

    Args:
        text: The model's raw response.  Any string is accepted;
              ``""`` renders to ``""``.

    Returns:
        The concatenated HTML fragments.
    """
    return "".join(render_fragments(text))
