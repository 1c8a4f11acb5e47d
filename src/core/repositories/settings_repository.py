"""Abstract contract for avatar upload settings."""

from abc import ABC, abstractmethod

from core.models.avatar import AvatarPolicy


class AvatarSettingsProvider(ABC):
    """Source of the upload policy for the current site."""

    @abstractmethod
    def current_policy(self) -> AvatarPolicy | None:
        """Return the policy in effect right now.

        Returns:
            The policy, or None when no site context is available.
            Callers must treat None as "nothing is allowed".

        Raises:
            SettingsError: If stored settings are unreadable or malformed
        """
