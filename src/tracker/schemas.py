from pydantic import BaseModel


class ReportRequest(BaseModel):
    data: str
    weight: float
    height: float


class ReportResponse(BaseModel):
    report: str


class ErrorResponse(BaseModel):
    error: str
    detail: str
