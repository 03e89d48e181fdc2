"""
bundlekit Exception Classes

This module defines the exception hierarchy for all bundlekit packages.
All custom exceptions inherit from BundleKitError to enable consistent error handling.

Usage:
    from bundlekit_common.errors import ValidationError, ConflictingExportTypesError

    if field not in collectors:
        raise ValidationError(f"Unknown entry field: {field}")
"""


class BundleKitError(Exception):
    """
    Base exception for all bundlekit errors.

    All custom bundlekit exceptions should inherit from this class to enable
    consistent error handling across packages.

    Attributes:
        message: Human-readable error message
        code: Error code for programmatic handling
    """

    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """
        Serialize error to dictionary for structured output.

        Returns:
            dict with error details including class name, code, and message
        """
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code='{self.code}', message='{self.message}')"


class ValidationError(BundleKitError):
    """
    Raised when input validation fails.

    Use this for:
    - Manifest fields with unsupported values (e.g. an unknown "type")
    - Unknown entry field names requested from the resolver
    - Objects passed where a manifest is expected

    Example:
        if value not in PACKAGE_TYPES:
            raise ValidationError(f"Unsupported package type: '{value}'")
    """

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class ConflictError(BundleKitError):
    """
    Raised when two declarations cannot both hold.

    Use this for:
    - Manifest fields that disagree about the same artifact
    """

    def __init__(self, message: str, code: str = "CONFLICT"):
        super().__init__(message, code=code)


class ConflictingExportTypesError(ConflictError):
    """
    Raised when one output path is declared with two different module formats.

    The package cannot be built unambiguously, so resolution aborts instead of
    picking one side.

    Attributes:
        output_path: Normalized output path both declarations point at
        existing_type: Format recorded by the earlier declaration
        incoming_type: Format asserted by the later declaration

    Example:
        raise ConflictingExportTypesError("dist/index.js", "commonjs", "module")
    """

    def __init__(self, output_path: str, existing_type: str, incoming_type: str):
        self.output_path = output_path
        self.existing_type = existing_type
        self.incoming_type = incoming_type
        super().__init__(
            f'Conflicting export types "{existing_type}" & "{incoming_type}" '
            f"found for {output_path}",
            code="CONFLICTING_EXPORT_TYPES",
        )

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(
            {
                "output_path": self.output_path,
                "existing_type": self.existing_type,
                "incoming_type": self.incoming_type,
            }
        )
        return data
