"""Root exceptions for uirecorder.

Recorder operations that touch untrusted input or the filesystem report
failures through these types. ``load_from_json`` and ``export_to_file``
catch them at the recorder boundary; ``RecorderConfig.validate`` lets
them reach the caller.
"""

from __future__ import annotations

from uirecorder.error_codes import ErrorCode


class RecorderBaseException(Exception):  # noqa: N818
    """Carries a numeric ``code``, the underlying ``cause`` and an ErrorCode."""

    code: int = 0
    default_error_code: ErrorCode = ErrorCode.UNKNOWN

    def __init__(
        self,
        message: str,
        *,
        code: int | None = None,
        cause: Exception | None = None,
        error_code: ErrorCode | None = None,
    ) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code
        self.cause = cause
        self._error_code = error_code

    @property
    def error_code(self) -> ErrorCode:
        return self._error_code or self.default_error_code

    def __str__(self) -> str:
        text = super().__str__()
        if self.code:
            text += f" (code={self.code})"
        if self.cause is not None:
            text += f" caused by: {self.cause}"
        return text


class RecorderError(RecorderBaseException):
    """Parent of every error the recorder raises itself."""

    code: int = 100
    default_error_code = ErrorCode.SYSTEM_ERROR
