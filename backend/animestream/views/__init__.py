from .admin_shell import AdminShell, ShellState
from .advertisement import AdvertisementEmbed, AdvertisementWidget, ClickThrough
from .catalog import CatalogView, filter_by_title
from .detail import DetailView
from .forms import AdvertisementForm, AnimeForm, FormValidationError
from .managers import AdvertisementManager, AnimeManager, EntityManager
from .notifications import Notification, Notifier, Variant

__all__ = [
    "AdminShell",
    "ShellState",
    "AdvertisementEmbed",
    "AdvertisementWidget",
    "ClickThrough",
    "CatalogView",
    "filter_by_title",
    "DetailView",
    "AdvertisementForm",
    "AnimeForm",
    "FormValidationError",
    "AdvertisementManager",
    "AnimeManager",
    "EntityManager",
    "Notification",
    "Notifier",
    "Variant",
]
