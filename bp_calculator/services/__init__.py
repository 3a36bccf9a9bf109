from .blood_pressure import BloodPressureService, validate_reading

__all__ = ["BloodPressureService", "validate_reading"]
