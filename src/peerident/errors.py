class RegistryError(ValueError):
    # Raised when a client registry fails its consistency check
    pass
