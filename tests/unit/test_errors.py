"""Tests for pm_common.errors, pm_common.response and pm_common.enums."""

from src.pm_common.enums import CommandKind, Phase, Side
from src.pm_common.errors import (
    AppError,
    CapExceededError,
    DegenerateTradeError,
    InsufficientBalanceError,
    InsufficientLiquidityError,
    MarketNotActiveError,
    PlayerNotExistError,
    UnauthorizedError,
    decode_error,
)
from src.pm_common.response import ApiResponse, error_response, success_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500

    def test_is_exception(self) -> None:
        assert isinstance(AppError(code=1, message="x"), Exception)


class TestSpecificErrors:
    def test_insufficient_balance(self) -> None:
        err = InsufficientBalanceError(required=6500, available=3000)
        assert err.code == 2001
        assert err.kind == "InsufficientBalance"
        assert "6500" in err.message
        assert "3000" in err.message

    def test_unauthorized(self) -> None:
        err = UnauthorizedError("Resolve")
        assert err.code == 1001
        assert err.http_status == 403
        assert "Resolve" in err.message

    def test_player_not_exist(self) -> None:
        err = PlayerNotExistError((4, 5))
        assert err.http_status == 404
        assert "4:5" in err.message

    def test_market_not_active_carries_status(self) -> None:
        err = MarketNotActiveError(3, "ENDED")
        assert err.code == 3002
        assert "ENDED" in err.message

    def test_degenerate_trade_is_liquidity_error(self) -> None:
        err = DegenerateTradeError("drained")
        assert isinstance(err, InsufficientLiquidityError)
        assert err.code == 4001
        assert err.kind == "DegenerateTrade"
        assert InsufficientLiquidityError("x").kind == "InsufficientLiquidity"

    def test_cap_exceeded(self) -> None:
        err = CapExceededError(cap=100, attempted_total=101)
        assert err.code == 6006
        assert "101" in err.message


class TestDecodeError:
    def test_known_codes(self) -> None:
        assert decode_error(1001) == "Unauthorized"
        assert decode_error(3005) == "AlreadyClaimed"
        assert decode_error(4001) == "DegenerateTrade"
        assert decode_error(6007) == "AlreadyWithdrawn"

    def test_foreign_code(self) -> None:
        assert decode_error(12345) == "Unknown"


class TestApiResponse:
    def test_success(self) -> None:
        resp = success_response({"x": 1}, tick=7)
        assert resp.code == 0
        assert resp.message == "success"
        assert resp.data == {"x": 1}
        assert resp.tick == 7
        assert resp.request_id.startswith("req_")

    def test_error(self) -> None:
        resp = error_response(3001, "Market not found: 9")
        assert resp.code == 3001
        assert resp.data is None

    def test_typed_payload(self) -> None:
        resp = ApiResponse[int](data=5)
        assert resp.model_dump()["data"] == 5


class TestEnums:
    def test_side_from_flag(self) -> None:
        assert Side.from_flag(1) is Side.YES
        assert Side.from_flag(0) is Side.NO
        assert Side.from_flag(7) is Side.NO

    def test_side_opposite(self) -> None:
        assert Side.YES.opposite is Side.NO
        assert Side.NO.opposite is Side.YES

    def test_phase_values(self) -> None:
        assert Phase("ACTIVE") is Phase.ACTIVE
        assert {p.value for p in Phase} == {"PENDING", "ACTIVE", "ENDED", "RESOLVED"}

    def test_command_kinds_are_stable(self) -> None:
        assert CommandKind.TICK == 0
        assert CommandKind.BET == 4
        assert CommandKind.WITHDRAW_TOKENS == 13
