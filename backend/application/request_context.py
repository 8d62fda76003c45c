"""Request-scoped context passed to every service call."""

from dataclasses import dataclass
from typing import Any, Optional

from domain.user.core.ports.datastore import IDatastore


@dataclass(frozen=True)
class RequestContext:
    """Handles a single request needs to reach the datastore.

    Attributes:
        datastore: Datastore client, long-lived and owned by the caller
        session: Opaque execution scope (e.g. a Motor ClientSession) handed
            to every datastore call. None means no explicit scope.

    Examples:
        >>> ctx = RequestContext(datastore=InMemoryDatastore())
        >>> user = await UserService().get_by_email(ctx, "pedro@pedrocelso.com.br")
    """

    datastore: IDatastore
    session: Optional[Any] = None
