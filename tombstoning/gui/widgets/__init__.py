from .settings_item import SettingsItem
from .status_badge import GameStatusBadge

__all__ = ["SettingsItem", "GameStatusBadge"]
