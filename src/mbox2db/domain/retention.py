"""Label-based retention filter for Spam and Trash messages."""

from __future__ import annotations

from dataclasses import dataclass


def should_skip(labels: str, include_spam: bool, include_trash: bool, include_both: bool) -> bool:
    """Return True when a message with these labels must not be stored.

    Args:
        labels: Raw X-Gmail-Labels header value (comma separated)
        include_spam: Keep messages labelled Spam
        include_trash: Keep messages labelled Trash
        include_both: Keep everything, overrides the other two flags
    """
    if include_both:
        return False

    labels_lower = labels.lower()
    if "spam" in labels_lower and not include_spam:
        return True
    if "trash" in labels_lower and not include_trash:
        return True
    return False


@dataclass(frozen=True)
class RetentionPolicy:
    include_spam: bool = False
    include_trash: bool = False
    include_both: bool = False

    def should_skip(self, labels: str) -> bool:
        return should_skip(labels, self.include_spam, self.include_trash, self.include_both)

    def describe_skipped(self, count: int) -> str:
        """Human readable hint about skipped messages and the flag that keeps them."""
        if count <= 0 or self.include_both:
            return ""
        if not self.include_spam and not self.include_trash:
            return f"{count} Spam/Trash emails skipped (pass --include-spam-and-trash to include them)"
        if not self.include_spam:
            return f"{count} Spam emails skipped (pass --include-spam to include them)"
        if not self.include_trash:
            return f"{count} Trash emails skipped (pass --include-trash to include them)"
        return ""
