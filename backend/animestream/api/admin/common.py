from ...errors import ConfirmationRequiredError, NotFoundError, StoreError
from ...schemas.notification import notifications_payload
from ...views.forms import FormValidationError
from ...views.managers import EntityManager


def raise_submit_failure(manager: EntityManager) -> None:
    """Translate a failed form submit into the matching API error."""
    form = manager.form
    if form is not None and form.errors:
        raise FormValidationError(details=dict(form.errors))
    raise_store_failure(manager)


def raise_store_failure(manager: EntityManager) -> None:
    notifications = manager.notifier.items
    message = notifications[-1].description if notifications else StoreError.message
    raise StoreError(
        message,
        details={"notifications": [item.model_dump() for item in notifications_payload(manager.notifier)]},
    )


async def require_listed(manager: EntityManager, row_id: str):
    """Load the panel list and return the row, as the panel would show it."""
    if not await manager.refresh():
        raise_store_failure(manager)
    row = manager.find(row_id)
    if row is None:
        raise NotFoundError(details={"id": row_id})
    return row


def require_confirmation(manager: EntityManager, confirm: bool) -> None:
    if not confirm:
        raise ConfirmationRequiredError(details={"prompt": manager.delete_prompt})
