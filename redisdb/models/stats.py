"""
Parsing of the Redis INFO statistics report.
"""

# Value reported for report lines that carry no "name:value" separator
NOT_AVAILABLE = "n/a"


def parse_stats(report: str | bytes) -> dict[str, str]:
    """
    Parse a textual INFO report into a name -> value mapping.

    Lines are split at the first ':' so values may contain further colons.
    Lines without a separator map to "n/a". Section headers (lines starting
    with '#') and blank lines are skipped.

    Args:
        report: The raw report, CRLF or LF separated.

    Returns:
        Dict of statistic name to textual value.
    """
    if isinstance(report, bytes):
        report = report.decode("utf-8", errors="replace")

    stats: dict[str, str] = {}
    for line in report.splitlines():
        if not line or line.startswith("#"):
            continue
        name, sep, value = line.partition(":")
        stats[name if sep else line] = value if sep else NOT_AVAILABLE
    return stats
