# This file is used to define the version of localmin which is then used
# by setup.py and by the package itself.

__version__ = '1.0.0'


def gitversion():
    try:
        from .git_version import gitversion
    except ImportError:
        return "unknown"
    return gitversion
