from weekly_recs.app.use_cases.invitations.dtos import SweepExpiredInvitationsResponse
from weekly_recs.domain.result import Error, ErrorCode, Return


def test_error_accepts_error_code():
    error = Error(ErrorCode.no_active_window, "nothing open")

    assert error.code == "NO_ACTIVE_WINDOW"
    assert error == Error("NO_ACTIVE_WINDOW", "nothing open")


def test_err_payload():
    result = Return.err(Error(ErrorCode.conflict, "Cycle 202504 is already open"))

    assert result.is_err()
    assert result.to_payload() == {
        "success": False,
        "code": "CONFLICT",
        "reason": "Cycle 202504 is already open",
    }


def test_ok_payload_flattens_model():
    result = Return.ok(SweepExpiredInvitationsResponse(expired_count=3))

    assert result.is_ok()
    assert result.to_payload() == {"success": True, "expired_count": 3}
