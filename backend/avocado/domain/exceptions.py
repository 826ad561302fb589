"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class InvalidInputError(Exception):
    """Raised when an operation receives input it cannot act on."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"Invalid {field}: {message}")


class PermissionDeniedError(Exception):
    """Raised when the signed-in user may not perform an action."""

    def __init__(self, action: str, role: str | None):
        self.action = action
        self.role = role
        who = f"role '{role}'" if role else "anonymous caller"
        super().__init__(f"{who} is not allowed to {action}")


class StorageError(Exception):
    """Base class for persisted-state failures."""


class StorageDecodeError(StorageError):
    """Raised when a stored value cannot be decoded into the expected shape."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Could not decode stored value for '{key}': {reason}")


class ExternalServiceError(Exception):
    """Base class for failures of third-party services (AI providers)."""


class ChatProviderError(ExternalServiceError):
    """Raised when a chat provider returns an error.

    Provider-agnostic: works for OpenRouter, Groq, OpenAI, etc.
    """

    def __init__(self, provider: str, status_code: int, message: str):
        self.provider = provider
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{provider}] {status_code}: {message}")


class MissingCredentialError(ExternalServiceError):
    """Raised when a provider client is built without an API key."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"No API key configured for '{provider}'")
