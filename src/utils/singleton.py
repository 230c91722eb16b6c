class Singleton:
    """
    Base class for the gateway's service objects.

    Any class that inherits from this is created once and reused by every
    request handler. Subclasses guard their own __init__ with a marker
    attribute since __init__ runs on every instantiation.
    """

    _instances = {}

    def __new__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super(Singleton, cls).__new__(cls)
        return cls._instances[cls]

    def __init__(self, *args, **kwargs):
        if hasattr(self, "_initialized"):
            return
        self._initialized = True
        super().__init__()

    @classmethod
    def reset_instance(cls):
        """Forget the cached instance so the next call builds a fresh one."""
        cls._instances.pop(cls, None)
