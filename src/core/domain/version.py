"""Tag-to-version parsing."""

from __future__ import annotations


def parse_version(tag_text: str) -> str | None:
    """Return the segment after the last `@` of a tag description.

    `@fast-components@2.3.1` gives `2.3.1`; a tag without `@` is returned
    whole. Blank output yields `None`. The result is an opaque path segment,
    not validated as semver.
    """

    text = tag_text.strip()
    if not text:
        return None
    version = text.split("@")[-1].strip()
    return version or None
