"""Domain layer errors.

Every error carries a stable ``code`` string. The interface layer only exposes
the code of errors it explicitly allows; everything else collapses to a
generic message.
"""


class DomainError(Exception):
    """Base domain error."""

    code = "domainError"


class ValidationError(DomainError):
    """Domain validation error."""

    code = "validationError"


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    code = "businessRuleViolation"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = "notFound"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotFoundCharacteristicError(NotFoundError):
    """Characteristic does not exist in the caller's entity."""

    code = "characteristicNotFound"

    def __init__(self, identifier: str):
        super().__init__("Characteristic", identifier)


class NotFoundTagError(NotFoundError):
    """Tag does not exist in the caller's entity."""

    code = "tagNotFound"

    def __init__(self, identifier: str):
        super().__init__("Tag", identifier)


class NotFoundMaterialError(NotFoundError):
    """Material does not exist in the caller's entity."""

    code = "materialNotFound"

    def __init__(self, identifier: str):
        super().__init__("Material", identifier)


class NotFoundRoleError(NotFoundError):
    """Role does not exist."""

    code = "roleNotFound"

    def __init__(self, identifier: str):
        super().__init__("Role", identifier)


class NotFoundUserError(NotFoundError):
    """User does not exist or was deleted."""

    code = "userNotFound"

    def __init__(self, identifier: str):
        super().__init__("User", identifier)


class NotFoundEntityError(NotFoundError):
    """Entity does not exist."""

    code = "entityNotFound"

    def __init__(self, identifier: str):
        super().__init__("Entity", identifier)


class NotFoundFileError(NotFoundError):
    """File is not attached to a material of the caller's entity."""

    code = "fileNotFound"

    def __init__(self, identifier: str):
        super().__init__("File", identifier)


class DeleteCharacteristicUsedByMaterialsError(BusinessRuleViolationError):
    """Raised when deleting a characteristic still used by active materials."""

    code = "characteristicHasMaterials"


class DeleteTagUsedByMaterialsError(BusinessRuleViolationError):
    """Raised when deleting a tag still attached to materials."""

    code = "tagHasMaterials"


class DeleteRoleUserAssignedError(BusinessRuleViolationError):
    """Raised when deleting a role still assigned to users."""

    code = "roleHasUsers"


class ProtectedRoleError(BusinessRuleViolationError):
    """Raised when modifying or deleting the Super Admin role."""

    code = "roleProtected"


class RoleLimitReachedError(BusinessRuleViolationError):
    """Raised when the configured maximum number of roles is reached."""

    code = "roleLimitReached"


class EmailInUseError(BusinessRuleViolationError):
    """Raised when an email already belongs to another user."""

    code = "emailInUse"


class ProtectedUserError(BusinessRuleViolationError):
    """Raised when changing oneself or deleting a Super Admin user."""

    code = "userProtected"


class EntityNotAssignedError(BusinessRuleViolationError):
    """Raised when selecting an entity the user has no access to."""

    code = "entityNotAssigned"


class UserLimitReachedError(BusinessRuleViolationError):
    """Raised when the configured maximum number of users is reached."""

    code = "userLimitReached"


class UserWithoutEntityError(ValidationError):
    """Raised when an update would leave a user without any entity."""

    code = "userWithoutEntity"


class UnknownVariantError(ValidationError):
    """Raised for a characteristic type outside the closed enumeration."""

    code = "unknownCharacteristicType"

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unknown characteristic type: {value!r}")


class ShapeMismatchError(ValidationError):
    """Raised when a value does not match its characteristic's shape."""

    code = "characteristicValueMismatch"


class UnauthorizedError(DomainError):
    """Base authorization error."""

    code = "unauthorized"


class NoActiveSessionError(UnauthorizedError):
    """No session, an expired session, or an inactive user."""

    code = "noActiveSession"


class MissingPermissionError(UnauthorizedError):
    """The actor lacks the permission required by the action."""

    code = "missingPermission"

    def __init__(self, permission: str):
        self.permission = permission
        super().__init__(f"Unauthorized: Missing permission {permission}")


class StorageError(DomainError):
    """Raised when the backing store fails.

    Wraps the underlying driver error, which is logged but never exposed.
    """

    code = "storageError"
