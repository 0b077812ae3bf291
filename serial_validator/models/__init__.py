from serial_validator.models.asset import Asset

__all__ = ["Asset"]
