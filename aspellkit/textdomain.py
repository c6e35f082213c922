"""One-time binding of the message catalogue domain."""

from __future__ import annotations

import gettext
import threading
from typing import Optional

from .dirs import DirectoryResolver

DOMAIN = "aspell"

_lock = threading.Lock()
_did_init = False


def gettext_init(resolver: Optional[DirectoryResolver] = None) -> str:
    """Bind the catalogue domain to the locale directory, once per process.

    The first call binds the domain to *resolver*'s locale directory; later
    calls leave the binding alone. Returns the directory the domain is
    bound to.
    """
    global _did_init
    with _lock:
        if _did_init:
            return gettext.bindtextdomain(DOMAIN)
        _did_init = True
    if resolver is None:
        resolver = DirectoryResolver()
    return gettext.bindtextdomain(DOMAIN, resolver.locale_dir())