"""Exception hierarchy shared across agichat modules."""


class AgiChatError(Exception):
    """Base class for all agichat errors."""


class StorageError(AgiChatError):
    """A key-value storage backend failed to read or write."""


class SettingsError(AgiChatError):
    """User configuration could not be saved."""


class GenerationError(AgiChatError):
    """The generative service failed to produce a reply.

    Transport, quota, content-policy and empty-reply failures all collapse
    into this one condition; callers never need to tell them apart.
    """
