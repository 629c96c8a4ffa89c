"""App directory exceptions."""

from sso.domain.shared.exceptions import RecordNotFoundError


class AppRecordNotFoundError(RecordNotFoundError):
    """No app is provisioned under the given id."""

    def __init__(self, app_id: int) -> None:
        self.app_id = app_id
        super().__init__(f"App not found: {app_id}")
