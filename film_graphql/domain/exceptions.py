class DomainError(Exception):
    pass


class ClientInputError(DomainError):
    pass


class StorageError(DomainError):
    pass


class UpstreamError(DomainError):
    pass


class ConfigurationError(DomainError):
    pass


class SchemaConfigurationError(ConfigurationError):
    pass
