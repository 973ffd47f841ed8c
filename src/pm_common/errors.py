"""Unified error codes and custom exceptions.

Every core operation either commits fully or raises exactly one of these.
The ``kind`` attribute is the stable name surfaced to the dispatcher.

Error code ranges:
  1xxx: Player/Auth
  2xxx: Account
  3xxx: Market
  4xxx: Trade (AMM)
  6xxx: IDO project
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    kind: str = "AppError"

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Player/Auth ---

class UnauthorizedError(AppError):
    kind = "Unauthorized"

    def __init__(self, operation: str) -> None:
        super().__init__(1001, f"Operation requires admin: {operation}", 403)


class PlayerAlreadyExistsError(AppError):
    kind = "PlayerAlreadyExists"

    def __init__(self, pid: tuple[int, int]) -> None:
        super().__init__(1002, f"Player already exists: {pid[0]}:{pid[1]}", 409)


class PlayerNotExistError(AppError):
    kind = "PlayerNotExist"

    def __init__(self, pid: tuple[int, int]) -> None:
        super().__init__(1003, f"Player does not exist: {pid[0]}:{pid[1]}", 404)


# --- 2xxx: Account ---

class InsufficientBalanceError(AppError):
    kind = "InsufficientBalance"

    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            2001,
            f"Insufficient balance: required {required}, available {available}",
            422,
        )


class InvalidAmountError(AppError):
    kind = "InvalidAmount"

    def __init__(self, amount: int, detail: str = "must be positive") -> None:
        super().__init__(2002, f"Invalid amount {amount}: {detail}", 422)


# --- 3xxx: Market ---

class MarketNotFoundError(AppError):
    kind = "MarketNotFound"

    def __init__(self, market_id: int) -> None:
        super().__init__(3001, f"Market not found: {market_id}", 404)


class MarketNotActiveError(AppError):
    kind = "MarketNotActive"

    def __init__(self, market_id: int, status: str) -> None:
        super().__init__(3002, f"Market {market_id} is not active (status={status})", 422)


class AlreadyResolvedError(AppError):
    kind = "AlreadyResolved"

    def __init__(self, market_id: int) -> None:
        super().__init__(3003, f"Market already resolved: {market_id}", 409)


class NotResolvedYetError(AppError):
    kind = "NotResolvedYet"

    def __init__(self, market_id: int) -> None:
        super().__init__(3004, f"Market not resolved yet: {market_id}", 422)


class AlreadyClaimedError(AppError):
    kind = "AlreadyClaimed"

    def __init__(self, market_id: int) -> None:
        super().__init__(3005, f"Winnings already claimed for market {market_id}", 409)


class NoWinningPositionError(AppError):
    kind = "NoWinningPosition"

    def __init__(self, market_id: int) -> None:
        super().__init__(3006, f"No winning shares to claim in market {market_id}", 422)


class InvalidMarketParamsError(AppError):
    kind = "InvalidMarketParams"

    def __init__(self, detail: str) -> None:
        super().__init__(3007, f"Invalid market parameters: {detail}", 422)


# --- 4xxx: Trade (AMM) ---

class InsufficientLiquidityError(AppError):
    kind = "InsufficientLiquidity"

    def __init__(self, detail: str, code: int = 4000) -> None:
        super().__init__(code, f"Insufficient liquidity: {detail}", 422)


class DegenerateTradeError(InsufficientLiquidityError):
    """A computed reserve would reach zero (or a divisor already is zero)."""

    kind = "DegenerateTrade"

    def __init__(self, detail: str) -> None:
        super().__init__(detail, code=4001)


class InsufficientSharesError(AppError):
    kind = "InsufficientShares"

    def __init__(self, side: str, required: int, available: int) -> None:
        super().__init__(
            4002,
            f"Insufficient {side} shares: required {required}, available {available}",
            422,
        )


# --- 6xxx: IDO project ---

class ProjectNotFoundError(AppError):
    kind = "ProjectNotFound"

    def __init__(self, project_id: int) -> None:
        super().__init__(6001, f"Project not found: {project_id}", 404)


class InvalidProjectParamsError(AppError):
    kind = "InvalidProjectParams"

    def __init__(self, detail: str) -> None:
        super().__init__(6002, f"Invalid project parameters: {detail}", 422)


class ProjectNotPendingError(AppError):
    kind = "ProjectNotPending"

    def __init__(self, project_id: int, status: str) -> None:
        super().__init__(
            6003, f"Project {project_id} can only be edited while PENDING (status={status})", 422
        )


class ProjectNotActiveError(AppError):
    kind = "ProjectNotActive"

    def __init__(self, project_id: int, status: str) -> None:
        super().__init__(6004, f"Project {project_id} is not active (status={status})", 422)


class ProjectNotEndedError(AppError):
    kind = "ProjectNotEnded"

    def __init__(self, project_id: int, status: str) -> None:
        super().__init__(6005, f"Project {project_id} has not ended (status={status})", 422)


class CapExceededError(AppError):
    kind = "CapExceeded"

    def __init__(self, cap: int, attempted_total: int) -> None:
        super().__init__(
            6006,
            f"Individual cap exceeded: cap {cap}, cumulative investment would be {attempted_total}",
            422,
        )


class AlreadyWithdrawnError(AppError):
    kind = "AlreadyWithdrawn"

    def __init__(self, project_id: int) -> None:
        super().__init__(6007, f"Tokens already withdrawn for project {project_id}", 409)


class NoInvestmentError(AppError):
    kind = "NoInvestment"

    def __init__(self, project_id: int) -> None:
        super().__init__(6008, f"No investment in project {project_id}", 422)


# --- 9xxx: System ---

class InternalError(AppError):
    kind = "InternalError"

    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)


_KIND_BY_CODE: dict[int, str] = {
    1001: UnauthorizedError.kind,
    1002: PlayerAlreadyExistsError.kind,
    1003: PlayerNotExistError.kind,
    2001: InsufficientBalanceError.kind,
    2002: InvalidAmountError.kind,
    3001: MarketNotFoundError.kind,
    3002: MarketNotActiveError.kind,
    3003: AlreadyResolvedError.kind,
    3004: NotResolvedYetError.kind,
    3005: AlreadyClaimedError.kind,
    3006: NoWinningPositionError.kind,
    3007: InvalidMarketParamsError.kind,
    4000: InsufficientLiquidityError.kind,
    4001: DegenerateTradeError.kind,
    4002: InsufficientSharesError.kind,
    6001: ProjectNotFoundError.kind,
    6002: InvalidProjectParamsError.kind,
    6003: ProjectNotPendingError.kind,
    6004: ProjectNotActiveError.kind,
    6005: ProjectNotEndedError.kind,
    6006: CapExceededError.kind,
    6007: AlreadyWithdrawnError.kind,
    6008: NoInvestmentError.kind,
    9002: InternalError.kind,
}


def decode_error(code: int) -> str:
    """Map an error code back to its kind name; 'Unknown' for foreign codes."""
    return _KIND_BY_CODE.get(code, "Unknown")
