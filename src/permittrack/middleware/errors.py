from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from permittrack.errors import PermitNotFoundError


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(PermitNotFoundError)
    async def permit_not_found(request: Request, exc: PermitNotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={"detail": str(exc)},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()

        # Malformed path ids are reported as a missing resource; the bad input is not echoed
        if any(err["loc"][0] == "path" for err in errors):
            return JSONResponse(status_code=404, content={"detail": "Invalid UUID"})

        if any(err["type"] == "json_invalid" for err in errors):
            return JSONResponse(
                status_code=400,
                content={
                    "error": "Invalid request",
                    "details": ["Malformed JSON or unsupported value"],
                },
            )

        fields: dict[str, str] = {}
        for err in errors:
            name = str(err["loc"][-1]) if len(err["loc"]) > 1 else str(err["loc"][0])
            fields[name] = err["msg"]
        return JSONResponse(status_code=400, content=fields)
