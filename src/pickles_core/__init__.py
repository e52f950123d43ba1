from importlib.metadata import version, PackageNotFoundError


try:
    __version__ = version('pickles-core')
except PackageNotFoundError:
    __version__ = 'unknown'
