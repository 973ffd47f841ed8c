from src.pm_account.domain.models import PlayerId
from src.pm_common.errors import UnauthorizedError


def check_admin(pid: PlayerId, admin_pid: PlayerId, operation: str) -> None:
    """Raise Unauthorized unless pid is the configured admin."""
    if tuple(pid) != tuple(admin_pid):
        raise UnauthorizedError(operation)
