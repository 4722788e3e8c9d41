"""GitHub-style heading slugs with per-page uniqueness."""

import re

_REMOVE_RE = re.compile(r"[^\w\- ]")


def heading_slug(s: str) -> str:
    """Lower-case, drop punctuation and turn spaces into hyphens."""
    return _REMOVE_RE.sub("", s.strip().lower()).replace(" ", "-")


class Slugger:
    """Generates slugs that are unique among those produced by this instance."""

    def __init__(self) -> None:
        """Start with no slugs taken."""
        self.occurrences: dict[str, int] = {}

    def slug(self, value: str) -> str:
        """Return a unique slug, appending ``-1``, ``-2``, ... on collisions."""
        slug = original = heading_slug(value)
        while slug in self.occurrences:
            self.occurrences[original] += 1
            slug = f"{original}-{self.occurrences[original]}"
        self.occurrences[slug] = 0
        return slug
