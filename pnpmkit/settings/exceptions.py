from pnpmkit.exceptions import PnpmkitError


class InvalidArgumentError(PnpmkitError, ValueError):
    def __init__(self, message: str):
        super().__init__(401, message)
