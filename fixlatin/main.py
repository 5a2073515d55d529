import logging

from fastapi import FastAPI, UploadFile, File, HTTPException, Query

from .errors import ControlCharacterError, FixLatinError
from .fixer import fix_latin_bytes
from .models import FixResponse, HealthResponse, ErrorDetail, make_options

_LOGGER = logging.getLogger(__name__)

app = FastAPI(
    title="fix-latin",
    description="Repair mixed UTF-8 / Latin-1 / CP1252 byte streams into clean UTF-8",
    version="0.1.0",
)


def _error_detail(exc: FixLatinError) -> dict:
    detail = ErrorDetail(issue=exc.issue, message=str(exc))
    if isinstance(exc, ControlCharacterError):
        detail.offset = exc.offset
        detail.byte = f"0x{exc.byte:02X}"
    return detail.model_dump()


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/fix", response_model=FixResponse, responses={422: {"model": ErrorDetail}})
async def fix_upload(
    file: UploadFile = File(...),
    allow_control: bool = Query(False, description="Pass C1 control bytes through as U+0080..U+009F"),
    assume: str = Query("none", description="Legacy encoding of stray bytes: none, cp1252 or iso-8859-15"),
):
    raw = await file.read()
    _LOGGER.debug("fixing %s (%d bytes, assume=%s, allow_control=%s)",
                  file.filename, len(raw), assume, allow_control)

    try:
        options = make_options(allow_control=allow_control, assume=assume)
        return fix_latin_bytes(raw, options)
    except FixLatinError as exc:
        _LOGGER.warning("rejected %s: %s", file.filename, exc)
        raise HTTPException(status_code=422, detail=_error_detail(exc))
