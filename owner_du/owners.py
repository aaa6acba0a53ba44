# owner_du/owners.py

import logging

logger = logging.getLogger(__name__)

# The pwd module is not available on Windows; names then fall back to uids.
try:
    import pwd
except ImportError:
    pwd = None


def resolve_owner_name(uid: int) -> str:
    """Return the login name for `uid`, or the uid itself when it cannot be resolved."""
    if pwd is None:
        return str(uid)
    try:
        return pwd.getpwuid(uid).pw_name
    except (KeyError, OverflowError, TypeError) as e:
        logger.debug("No user name for uid %s: %s", uid, e)
        return str(uid)
