"""Lab value extraction from free text (OCR output or document text)."""

import logging
import re

from labdecoder.models import RawMatch

logger = logging.getLogger(__name__)


# ========================================
# Patterns
# ========================================

_NUMBER = r"\d+(?:\.\d+)?"

# Longest label kept; longer labels keep only their trailing tokens
MAX_LABEL_TOKENS = 8

# Percent sign, or a token starting with a letter with an optional "/denominator" (mg/dL, mEq/L, ng/mL)
_UNIT = r"%|[A-Za-zµμ][\w%]*(?:/\w+)?"

# "<label tokens>: <number> <unit>" optionally followed by "(... <min> - <max> ...)".
# Label tokens are separated by spaces/tabs only (a label never spans lines) and are
# capped at MAX_LABEL_TOKENS.
GENERIC_PATTERN = re.compile(
    rf"""
    \b(?P<name>[A-Za-z]\w*(?:[ \t]+\w+){{0,{MAX_LABEL_TOKENS - 1}}})     # label tokens
    [ \t]*:[ \t]*
    (?P<value>{_NUMBER})[ \t]*
    (?P<unit>{_UNIT})
    (?:[ \t]*\(
        [^()\n]*?(?P<min>{_NUMBER})[ \t]*-[ \t]*(?P<max>{_NUMBER})[^()\n]*
    \))?
    """,
    re.IGNORECASE | re.VERBOSE,
)

KNOWN_PARAMETERS = (
    "GLUCOSE",
    "CHOLESTEROL",
    "HDL",
    "LDL",
    "TRIGLYCERIDES",
    "HEMOGLOBIN",
    "CREATININE",
    "BUN",
    "SODIUM",
    "POTASSIUM",
    "VITAMIN",
    "TSH",
)

# Known parameter keyword followed by "," or ":" then "<number> <unit>"
KEYWORD_PATTERN = re.compile(
    rf"\b(?P<name>{'|'.join(KNOWN_PARAMETERS)})[ \t]*[,:][ \t]*(?P<value>{_NUMBER})[ \t]*(?P<unit>{_UNIT})",
    re.IGNORECASE,
)

EXTRACTION_PASSES = (GENERIC_PATTERN, KEYWORD_PATTERN)


# ========================================
# Matching
# ========================================


def normalize_parameter_name(name: str) -> str:
    """Uppercase, trim and collapse inner whitespace."""
    return " ".join(name.split()).upper()


def _parse_number(text: str | None) -> float | None:
    """Parse a captured numeric group, returning None instead of raising."""

    # Guard: group did not participate in the match
    if text is None:
        return None

    try:
        return float(text)
    except ValueError:
        logger.debug(f"Could not parse numeric text: {text[:50]}")
        return None


def _match_to_raw(match: re.Match) -> RawMatch | None:
    """Build a RawMatch from a regex match, or None when the value is not numeric."""

    groups = match.groupdict()

    value = _parse_number(groups["value"])
    if value is None:
        return None

    name = normalize_parameter_name(groups["name"])
    if not name:
        return None

    # Range is only kept when both bounds parse
    min_range = _parse_number(groups.get("min"))
    max_range = _parse_number(groups.get("max"))
    if min_range is None or max_range is None:
        min_range = max_range = None

    return RawMatch(
        name=name,
        value=value,
        unit=(groups["unit"] or "").strip(),
        min_range=min_range,
        max_range=max_range,
    )


def extract_raw_matches(text: str) -> list[RawMatch]:
    """
    Run both extraction passes over the text and merge them by parameter name.

    The generic pass runs first; the keyword pass only adds parameters the
    generic pass did not produce. Within a pass, the first match of a name wins.

    Args:
        text: Raw report text

    Returns:
        Matches in extraction order, one per normalized parameter name.
        Empty when nothing matched.
    """

    # Guard: nothing to scan
    if not text:
        return []

    matches: dict[str, RawMatch] = {}

    for pass_index, pattern in enumerate(EXTRACTION_PASSES, start=1):
        for match in pattern.finditer(text):
            raw = _match_to_raw(match)

            # Malformed candidate, skip it
            if raw is None:
                continue

            # First match for a name wins
            if raw.name in matches:
                logger.debug(f"Pass {pass_index}: dropping duplicate match for {raw.name}")
                continue

            matches[raw.name] = raw

    logger.info(f"Extracted {len(matches)} lab parameters from {len(text)} characters of text")
    return list(matches.values())
