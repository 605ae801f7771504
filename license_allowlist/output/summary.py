"""Plain text license summary formatter."""

from license_allowlist.models.summary import LicenseSummary


class SummaryFormatter:
    """Format a LicenseSummary as a tree-style text report.

    Each group lists one ``├─`` line per entry with the last entry drawn
    with ``└─``. Empty groups print ``None``.
    """

    BRANCH = "├─"
    LAST_BRANCH = "└─"
    EMPTY = "  None"

    def format_summary(self, summary: LicenseSummary) -> str:
        """Format summary as a text string.

        Args:
            summary: The license summary to format.

        Returns:
            Text report, without a trailing newline after the last blank line.
        """
        lines: list[str] = ["Licenses", ""]

        lines.append("APPROVED:")
        lines.extend(self._format_counts(summary.approved))
        lines.append("")

        lines.append("UNAPPROVED:")
        lines.extend(self._format_counts(summary.unapproved))
        lines.append("")

        lines.append("UNPROCESSED:")
        lines.extend(self._format_entries(summary.unprocessed))
        lines.append("")

        return "\n".join(lines)

    def _format_counts(self, counts: dict[str, int]) -> list[str]:
        return self._format_entries([f"{lic}: {n}" for lic, n in counts.items()])

    def _format_entries(self, entries: list[str]) -> list[str]:
        if not entries:
            return [self.EMPTY]
        last = len(entries) - 1
        return [
            f"{self.LAST_BRANCH if i == last else self.BRANCH} {entry}"
            for i, entry in enumerate(entries)
        ]
