from pydantic import BaseModel


class Credential(BaseModel):
    db_url: str
    api_key: str

    model_config = {"frozen": True}


class ReportLine(BaseModel):
    index: int
    done: bool
    title: str
    start: str | None = None
    end: str | None = None

    model_config = {"frozen": True}


class ProcessingOutcome(BaseModel):
    lines: list[str] = []
    errors: list[str] = []
