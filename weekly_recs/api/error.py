from fastapi import status

from weekly_recs.domain.result import Error, ErrorCode


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


STATUS_BY_CODE = {
    ErrorCode.not_found.value: status.HTTP_404_NOT_FOUND,
    ErrorCode.conflict.value: status.HTTP_409_CONFLICT,
    ErrorCode.already_processed.value: status.HTTP_409_CONFLICT,
    ErrorCode.already_member.value: status.HTTP_409_CONFLICT,
    ErrorCode.already_compiled.value: status.HTTP_409_CONFLICT,
    ErrorCode.duplicate_submission.value: status.HTTP_409_CONFLICT,
    ErrorCode.duplicate_pending_invite.value: status.HTTP_409_CONFLICT,
    ErrorCode.no_active_window.value: status.HTTP_409_CONFLICT,
    ErrorCode.expired.value: status.HTTP_410_GONE,
    ErrorCode.validation_error.value: 422,
}


def raise_for_error(error: Error):
    """Translate a use case Error into the matching HTTP exception"""
    status_code = STATUS_BY_CODE.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
