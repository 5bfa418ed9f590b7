from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "statusboard"
DEFAULT_VERSION = "1.0.0"


def get_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return DEFAULT_VERSION
