"""App directory port."""

from abc import ABC, abstractmethod

from sso.domain.app.app import App


class AppProvider(ABC):
    """Read access to provisioned apps."""

    @abstractmethod
    async def find_by_id(self, app_id: int) -> App:
        """
        Find an app, including its key pair, by id.

        Raises
        ------
        AppRecordNotFoundError
            If no app is provisioned under this id
        """
