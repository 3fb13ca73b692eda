from .arguments import ProcessArgumentBuilder
from .base import ArgumentRenderer, CommandArguments, PnpmLogLevel, PnpmSettings, evaluate
from .exceptions import InvalidArgumentError
from .remove import RemovePackagesSettings
