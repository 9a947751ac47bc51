"""
异常处理模块

定义业务异常、错误类型目录和全局异常处理器
"""
from enum import Enum

from fastapi import Request, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from loguru import logger

from .response import error_response


class ErrorType(Enum):
    """
    业务错误类型目录

    每个类型对应固定的 (状态码, 提示信息)，不可在运行时修改
    """
    NOT_FOUND_USER = (404, "企业用户不存在")
    NOT_FOUND_POST = (404, "招聘公告不存在")
    NOT_FOUND_APPLICATION = (404, "应聘申请不存在")
    ALREADY_DISCARDED = (409, "招聘公告已处于废弃状态")
    FILE_STORE_ERROR = (500, "招聘公告文件保存失败")
    ACCESS_DENIED = (403, "无权访问该资源")
    INVALID_PERIOD = (422, "截止日期不能早于开始日期")

    @property
    def code(self) -> int:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


class AppException(Exception):
    """应用基础异常"""

    def __init__(
        self,
        message: str = "服务器内部错误",
        code: int = 500,
        data: dict = None
    ):
        self.message = message
        self.code = code
        self.data = data
        super().__init__(self.message)


class DomainException(AppException):
    """绑定错误类型的业务异常"""

    error_type: ErrorType

    def __init__(self, detail: str = None):
        message = self.error_type.message
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message=message, code=self.error_type.code)


class NotFoundUser(DomainException):
    """认证邮箱找不到对应企业"""
    error_type = ErrorType.NOT_FOUND_USER


class NotFoundPost(DomainException):
    """招聘公告不存在"""
    error_type = ErrorType.NOT_FOUND_POST


class NotFoundApplication(DomainException):
    """应聘申请不存在"""
    error_type = ErrorType.NOT_FOUND_APPLICATION


class AlreadyDiscarded(DomainException):
    """对已废弃的公告再次废弃"""
    error_type = ErrorType.ALREADY_DISCARDED


class FileStoreError(DomainException):
    """公告文件写入失败"""
    error_type = ErrorType.FILE_STORE_ERROR


class AccessDenied(DomainException):
    """访问其他企业的资源"""
    error_type = ErrorType.ACCESS_DENIED


class InvalidPeriod(DomainException):
    """修改后的截止日期早于开始日期"""
    error_type = ErrorType.INVALID_PERIOD


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """应用异常处理器"""
    logger.warning(f"AppException: {exc.message} | Path: {request.url.path}")
    return JSONResponse(
        status_code=exc.code,
        content=error_response(message=exc.message, code=exc.code, data=exc.data)
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """HTTP 异常处理器"""
    logger.warning(f"HTTPException: {exc.detail} | Path: {request.url.path}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(message=str(exc.detail), code=exc.status_code),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """请求验证异常处理器"""
    errors = exc.errors()
    error_messages = []
    for error in errors:
        loc = " -> ".join(str(l) for l in error["loc"])
        error_messages.append(f"{loc}: {error['msg']}")

    message = "; ".join(error_messages)
    logger.warning(f"ValidationError: {message} | Path: {request.url.path}")

    return JSONResponse(
        status_code=422,
        content=error_response(
            message="请求参数验证失败",
            code=422,
            data={"errors": jsonable_encoder(errors)}
        )
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """通用异常处理器"""
    logger.exception(f"Unhandled Exception: {exc} | Path: {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=error_response(message="服务器内部错误", code=500)
    )
