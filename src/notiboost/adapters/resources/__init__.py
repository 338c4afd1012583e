"""Wrappers de recursos de la API.

Por qué un paquete:
- Agrupa un módulo por grupo de recursos (events, users, ...).
- Cada wrapper solo arma paths/payloads y delega en un `Dispatcher`.
"""

from notiboost.adapters.resources.events import EventsResource
from notiboost.adapters.resources.flows import FlowsResource
from notiboost.adapters.resources.templates import TemplatesResource
from notiboost.adapters.resources.users import UsersResource
from notiboost.adapters.resources.webhooks import WebhooksResource

__all__ = [
	"EventsResource",
	"FlowsResource",
	"TemplatesResource",
	"UsersResource",
	"WebhooksResource",
]
