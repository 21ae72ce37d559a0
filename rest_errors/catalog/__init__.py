"""Status code catalog: ``RestErrors`` and its 4xx/5xx constructor mixins."""

from .client_errors import ClientErrorsMixin
from .rest_errors import RestErrors
from .server_errors import ServerErrorsMixin

__all__ = ["ClientErrorsMixin", "RestErrors", "ServerErrorsMixin"]
