"""Domain enumerations: resource types and per-resource lifecycle states."""

from enum import Enum


class ResourceType(str, Enum):
    """Directory resource kinds. Values double as cache key prefixes and topic prefixes."""

    USER = "user"
    PROPERTY = "property"
    TENANT = "tenant"
    CARETAKER = "caretaker"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class UserRole(str, Enum):
    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    CARETAKER = "caretaker"
    TENANT = "tenant"


class UserStatus(str, Enum):
    """User account lifecycle status."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"
    BANNED = "banned"
    PENDING_VERIFICATION = "pending_verification"


class PropertyType(str, Enum):
    APARTMENT = "apartment"
    HOUSE = "house"
    COMMERCIAL = "commercial"
    LAND = "land"


class PropertyStatus(str, Enum):
    """Property occupancy status. New properties start as available."""

    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"
    RENTED = "rented"


class TenantType(str, Enum):
    INDIVIDUAL = "individual"
    FAMILY = "family"
    CORPORATE = "corporate"


class TenantStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"
    BLACKLISTED = "blacklisted"


class CaretakerType(str, Enum):
    INDIVIDUAL = "individual"
    COMPANY = "company"
    AGENCY = "agency"


class CaretakerStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"
