import importlib.metadata as _metadata

__version__ = _metadata.version(__package__)
