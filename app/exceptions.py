class RegistryError(Exception):
    """Base class for errors raised by the registry services."""


class SoldierNotFoundError(RegistryError):
    def __init__(self, soldier_id: str):
        self.soldier_id = soldier_id
        super().__init__(f"Soldier not found: {soldier_id}")


class TemplateNotFoundError(RegistryError):
    def __init__(self):
        super().__init__("Fingerprint not found in system")
