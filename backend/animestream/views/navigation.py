"""Browser routes the views may send the user to."""

CATALOG_ROUTE = "/"
AUTH_ROUTE = "/auth"
