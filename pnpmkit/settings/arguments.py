"""Ordered argument list shared by every pnpm command's settings."""

from typing import Iterator, List, Tuple

from pnpmkit import utils


class ProcessArgumentBuilder:
    """Collects command-line tokens in the order they are appended.

    Example:
        >>> args = ProcessArgumentBuilder().append("remove").append_switch("--loglevel", "warn")
        >>> args.render()
        'remove --loglevel warn'
    """

    def __init__(self) -> None:
        self._tokens: List[str] = []

    def append(self, token: str) -> "ProcessArgumentBuilder":
        """Append a positional token."""
        self._tokens.append(token)
        return self

    def append_quoted(self, token: str) -> "ProcessArgumentBuilder":
        """Append a token wrapped in double quotes."""
        self._tokens.append(utils.quote_value(token))
        return self

    def append_switch(self, switch: str, value: str) -> "ProcessArgumentBuilder":
        """Append `switch` followed by its `value` as two tokens."""
        self._tokens.extend((switch, value))
        return self

    @property
    def tokens(self) -> Tuple[str, ...]:
        return tuple(self._tokens)

    def render(self) -> str:
        return " ".join(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __str__(self) -> str:
        return self.render()
