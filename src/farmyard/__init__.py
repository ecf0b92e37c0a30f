"""farmyard — validated farm animal records with species behaviour."""

from farmyard.animal import Animal
from farmyard.models import Err, InvalidField, Ok, Sex, ValidationError

__all__ = ["Animal", "Err", "InvalidField", "Ok", "Sex", "ValidationError"]
