import logging

from fastapi import FastAPI, UploadFile, File, HTTPException, Query
from .errors import InvalidInputError, MalformedInputError
from .models import ParseResponse, HealthResponse
from .parser import parse, width_issues
from .rules import ACCEPTED_SUFFIXES, DEFAULT_SEPARATOR
from .source import decode_text, require_csv_name, split_lines

logger = logging.getLogger(__name__)

app = FastAPI(
    title="csv-records",
    description="Header-keyed records from delimiter-separated text",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/parse", response_model=ParseResponse)
async def parse_csv(
    file: UploadFile = File(...),
    separator: str = Query(DEFAULT_SEPARATOR, min_length=1),
):
    try:
        require_csv_name(file.filename)
    except InvalidInputError:
        logger.warning("rejected upload %r: not a delimited text file", file.filename)
        raise HTTPException(
            status_code=422,
            detail=f"Only delimited text files are supported ({', '.join(ACCEPTED_SUFFIXES)})",
        )

    try:
        raw = await file.read()
    finally:
        await file.close()

    text, encoding = decode_text(raw)
    lines = split_lines(text)

    try:
        records = parse(lines, separator)
        issues = width_issues(lines, separator)
    except MalformedInputError as e:
        logger.warning("rejected upload %r: %s", file.filename, e)
        raise HTTPException(status_code=422, detail=str(e))

    # Short rows only lose keys; long rows lose data.
    warnings = [i for i in issues if i["issue"] == "row_too_short"]
    errors = [i for i in issues if i["issue"] == "row_too_long"]

    header = lines[0].split(separator) if lines else []
    logger.info("parsed %r: %d records, %d columns", file.filename, len(records), len(header))

    return {
        "separator": separator,
        "header": header,
        "records": records,
        "report": {
            "summary": {
                "rows": len(records),
                "columns": len(header),
                "warnings": len(warnings),
                "errors": len(errors),
            },
            "encoding": encoding,
            "warnings": warnings,
            "errors": errors,
        },
    }
