from typing import Sequence

from pnpmkit.exceptions import PnpmkitError


class PnpmNotFoundError(PnpmkitError):
    def __init__(self, searched: Sequence[str]):
        super().__init__(
            201, f"Could not find or install a pnpm executable. Searched: {', '.join(searched)}."
        )


class PnpmCommandError(PnpmkitError):
    def __init__(self, command: str, returncode: int):
        super().__init__(
            202, f"pnpm command `{command}` failed with exit code {returncode}."
        )
        self.returncode = returncode
