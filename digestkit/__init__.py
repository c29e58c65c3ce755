"""
digestkit - hex digests of in-memory data and files.

The digest functions (md5, sha1, sha256, md5_file, ...) are re-exported
from digestkit.digest; which names exist depends on the extended setting.
"""

from .digest import *  # noqa: F403
from .digest import __all__ as _digest_all

__version__ = "0.1.0"

__all__ = [*_digest_all, "__version__"]
