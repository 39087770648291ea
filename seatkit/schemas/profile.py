"""User profile schemas"""

import enum
from typing import Dict, Optional

from pydantic import AnyUrl

from seatkit.schemas.common import BaseEntity, CamelModel, DateTime, Email, NonEmptyString, Phone


class UserRole(str, enum.Enum):
    """Roles, most to least privileged"""
    OWNER = "owner"
    MANAGER = "manager"
    STAFF = "staff"


class Permissions(CamelModel):
    can_view_reservations: bool
    can_create_reservations: bool
    can_edit_reservations: bool
    can_delete_reservations: bool

    can_view_tables: bool
    can_edit_tables: bool

    can_view_sales: bool
    can_edit_sales: bool

    can_manage_users: bool
    can_manage_settings: bool

    can_access_analytics: bool


class Theme(str, enum.Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class DefaultView(str, enum.Enum):
    TIMELINE = "timeline"
    LIST = "list"
    TABLE_LAYOUT = "table_layout"


class UserPreferences(CamelModel):
    theme: Optional[Theme] = None
    language: Optional[str] = None
    timezone: Optional[str] = None
    email_notifications: Optional[bool] = None
    push_notifications: Optional[bool] = None
    default_view: Optional[DefaultView] = None
    show_table_layout: Optional[bool] = None
    compact_mode: Optional[bool] = None


class Profile(BaseEntity):
    """A staff account"""
    email: Email
    username: Optional[NonEmptyString] = None

    first_name: NonEmptyString
    last_name: NonEmptyString
    display_name: Optional[NonEmptyString] = None
    avatar: Optional[AnyUrl] = None

    phone: Optional[Phone] = None

    role: UserRole
    permissions: Permissions
    is_active: bool

    preferences: Optional[UserPreferences] = None

    last_login_at: Optional[DateTime] = None
    last_active_at: Optional[DateTime] = None

    notes: Optional[str] = None

    @property
    def full_name(self) -> str:
        return self.display_name or f"{self.first_name} {self.last_name}"


def _permissions(**granted: bool) -> Permissions:
    flags = {name: False for name in Permissions.model_fields}
    flags.update(granted)
    return Permissions(**flags)


DEFAULT_PERMISSIONS: Dict[UserRole, Permissions] = {
    UserRole.OWNER: _permissions(**{name: True for name in Permissions.model_fields}),
    UserRole.MANAGER: _permissions(
        can_view_reservations=True,
        can_create_reservations=True,
        can_edit_reservations=True,
        can_delete_reservations=True,
        can_view_tables=True,
        can_edit_tables=True,
        can_view_sales=True,
        can_edit_sales=True,
        can_access_analytics=True,
    ),
    UserRole.STAFF: _permissions(
        can_view_reservations=True,
        can_create_reservations=True,
        can_view_tables=True,
    ),
}


class ProfileCreate(CamelModel):
    """Create profile request; permissions default to the role's"""
    email: Email
    username: Optional[NonEmptyString] = None
    first_name: NonEmptyString
    last_name: NonEmptyString
    avatar: Optional[AnyUrl] = None
    phone: Optional[Phone] = None
    role: UserRole
    is_active: bool = True
    permissions: Optional[Permissions] = None
    preferences: Optional[UserPreferences] = None
    notes: Optional[str] = None

    def resolved_permissions(self) -> Permissions:
        return self.permissions or DEFAULT_PERMISSIONS[self.role]
