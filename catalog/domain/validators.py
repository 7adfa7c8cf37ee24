"""
Field validation for domain entities.

Entities describe their field rules as Pydantic models. Validation
failures are collected into a mapping of field name to the list of
violated rule messages, which is what EntityValidationError carries.
"""

from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

FieldsErrors = Dict[str, List[str]]

T = TypeVar("T", bound=BaseModel)


class PydanticValidatorFields(Generic[T]):
    """
    Validate raw entity data against a Pydantic rules model.

    Attributes:
        rules: Pydantic model class holding the field rules
        errors: Field errors of the last failed validation, None otherwise
        validated_data: Rules instance of the last successful validation
    """

    rules: Type[T]

    def __init__(self) -> None:
        self.errors: Optional[FieldsErrors] = None
        self.validated_data: Optional[T] = None

    def validate(self, data: Mapping[str, Any]) -> bool:
        """
        Validate data against the rules model.

        Args:
            data: Field values to validate

        Returns:
            True if every rule passed, False otherwise
        """
        self.errors = None
        self.validated_data = None

        try:
            self.validated_data = self.rules.model_validate(dict(data))
        except ValidationError as e:
            self.errors = self._collect_errors(e)
            return False

        return True

    @staticmethod
    def _collect_errors(error: ValidationError) -> FieldsErrors:
        errors: FieldsErrors = {}
        for item in error.errors():
            field_name = str(item["loc"][0]) if item["loc"] else "__root__"
            errors.setdefault(field_name, []).append(item["msg"])
        return errors
