"""Admin client for Sigpair servers."""

__version__ = '1.0.0-dev0'

from .admin import SigpairAdmin, UserId
from .upstream import SigpairError, MalformedResponseError, SigpairServer

__all__ = ['SigpairAdmin', 'UserId', 'SigpairServer', 'SigpairError', 'MalformedResponseError']
