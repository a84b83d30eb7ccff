class InternalURIs:
    INDEX = "/"
    HEALTHZ = "/healthz"
    LOGIN = "/login"
    LOGOUT = "/logout"
    API = "/api"
    NAMESPACES = API + "/namespaces"
    OBJECTS = API + "/objects"


class ExternalURIs:
    # Relative to settings.CF_API_BASE_URL
    NAMESPACES = "/accounts/{account_id}/workers/durable_objects/namespaces"
    OBJECTS = NAMESPACES + "/{namespace_id}/objects"


class CookieNames:
    ACCOUNT_ID = "accountId"
    API_KEY = "apiKey"
