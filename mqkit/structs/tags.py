"""Parsing of ``name,option,option`` field tags."""

from typing import Tuple


class TagOptions(tuple):
    """The options that follow the name in a field tag."""

    def has(self, option: str) -> bool:
        """Return whether ``option`` is one of the options, compared exactly."""
        return option in self


def parse_tag(tag: str) -> Tuple[str, TagOptions]:
    """Split ``tag`` into its name and its options.

    The name may be empty, as in ``",omitempty"``. No whitespace is stripped.
    """
    name, *options = tag.split(",")
    return name, TagOptions(options)