class ModelStateError(RuntimeError):
    """Raised when a model or table is used out of its train-once, read-many order."""
