"""Position-accurate redaction of scan findings.

Replacements are applied right to left, so replacing one span never moves
the offsets of spans that have not been processed yet and every finding's
original position stays valid whatever the placeholder length.
"""

import logging
from collections.abc import Sequence

from ..core.exceptions import InvalidSpanError
from .models import Finding

logger = logging.getLogger("promptguard.redactor")


def check_span(text: str, finding: Finding) -> None:
    """Ensure ``finding`` describes characters that exist in ``text``.

    Raises:
        InvalidSpanError: if the span is out of range or the characters at
            the span are not the finding's matched text
    """
    if finding.position < 0 or finding.end > len(text):
        raise InvalidSpanError(
            f"{finding.type} span [{finding.position}, {finding.end}) "
            f"is outside text of length {len(text)}",
            position=finding.position,
            length=finding.length,
        )
    if text[finding.position:finding.end] != finding.matched_text:
        raise InvalidSpanError(
            f"{finding.type} span [{finding.position}, {finding.end}) "
            "does not match the finding's text",
            position=finding.position,
            length=finding.length,
        )


def _union(primary: Finding, other: Finding) -> Finding:
    """Widen ``primary`` to also cover ``other``; the spans must overlap."""
    left, right = sorted((primary, other), key=lambda f: f.position)
    matched = left.matched_text
    if right.end > left.end:
        matched += right.matched_text[left.end - right.position:]
    return primary.model_copy(
        update={"position": left.position, "length": len(matched), "matched_text": matched}
    )


def resolve_overlaps(findings: Sequence[Finding], strict: bool = False) -> list[Finding]:
    """
    Select a non-overlapping set of spans covering every finding.

    Different patterns can match the same characters (a card number is also
    a long digit run). The more severe finding wins, then the longer span,
    then the one discovered first. A weaker finding that lies inside a kept
    span is dropped; one that extends past it is merged into the winner,
    which then covers both spans. The merged span takes the placeholder of
    the weaker finding when that finding covers all of it, and the
    winner's placeholder otherwise.

    Args:
        findings: Findings from one scan
        strict: Raise instead of resolving when two spans overlap

    Returns:
        Kept findings, sorted by descending position

    Raises:
        InvalidSpanError: in strict mode, if any two spans overlap
    """
    ranked = sorted(
        enumerate(findings),
        key=lambda item: (-item[1].severity.rank, -item[1].length, item[0]),
    )

    kept: list[Finding] = []
    for _, finding in ranked:
        hits = [i for i, k in enumerate(kept) if k.overlaps(finding)]
        if not hits:
            kept.append(finding)
            continue
        winner = kept[hits[0]]
        if strict:
            raise InvalidSpanError(
                f"{finding.type} span [{finding.position}, {finding.end}) overlaps "
                f"{winner.type} span [{winner.position}, {winner.end})",
                position=finding.position,
                length=finding.length,
            )
        if any(kept[i].position <= finding.position and finding.end <= kept[i].end for i in hits):
            logger.debug(
                f"Skipping {finding.type} at {finding.position}: "
                f"inside {winner.type} at {winner.position}"
            )
            continue

        merged = _union(winner, finding)
        for i in hits[1:]:
            merged = _union(merged, kept[i])
        if (finding.position, finding.end) == (merged.position, merged.end):
            merged = merged.model_copy(update={"suggestion": finding.suggestion})
        logger.debug(
            f"Merged {finding.type} at {finding.position} into {winner.type}; "
            f"span now [{merged.position}, {merged.end})"
        )
        kept[hits[0]] = merged
        for i in reversed(hits[1:]):
            del kept[i]

    kept.sort(key=lambda f: f.position, reverse=True)
    return kept


def redact(text: str, findings: Sequence[Finding], strict: bool = False) -> str:
    """
    Replace every finding's span in ``text`` with its suggestion.

    All characters outside the replaced spans are preserved in order.
    ``findings`` must come from scanning this same ``text``.

    Args:
        text: The text that was scanned
        findings: Findings returned by that scan
        strict: Raise on overlapping spans instead of resolving them

    Returns:
        The redacted text

    Raises:
        InvalidSpanError: if a finding does not fit ``text``, or in strict
            mode if two findings overlap
    """
    if not findings:
        return text

    for finding in findings:
        check_span(text, finding)

    parts: list[str] = []
    cursor = len(text)
    for finding in resolve_overlaps(findings, strict=strict):
        parts.append(text[finding.end:cursor])
        parts.append(finding.suggestion)
        cursor = finding.position
    parts.append(text[:cursor])

    redacted = "".join(reversed(parts))
    logger.debug(f"Redacted {len(findings)} finding(s); length {len(text)} -> {len(redacted)}")
    return redacted
