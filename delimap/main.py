from typing import List, Optional

from fastapi import FastAPI, File, HTTPException, Query, UploadFile

from .errors import UnsupportedFormatError
from .factory import get_manager
from .loader import split_text
from .models import HealthResponse, ParseResponse
from .rules import DEFAULT_SAMPLE_SIZE, TEXT_ENCODING

app = FastAPI(
    title="delimap",
    description="Delimiter inference and header-keyed record mapping for delimited text files",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/parse", response_model=ParseResponse)
async def parse_file(
    file: UploadFile = File(...),
    separator: Optional[str] = Query(default=None),
    candidates: List[str] = Query(default=[]),
    sample_size: int = Query(default=DEFAULT_SAMPLE_SIZE, ge=1),
):
    filename = file.filename or ""
    extension = filename[filename.rfind("."):] if "." in filename else ""
    try:
        manager = get_manager(extension)
    except UnsupportedFormatError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    raw = await file.read()
    try:
        text = raw.decode(TEXT_ENCODING)
    except UnicodeDecodeError:
        raise HTTPException(status_code=422, detail=f"File is not valid {TEXT_ENCODING} text")

    manager.load(split_text(text)).set_separator(separator).set_sample_size(sample_size)
    for candidate in candidates:
        manager.add_candidate(candidate)

    result = manager.parse()
    return ParseResponse(filename=file.filename, **result.model_dump())
