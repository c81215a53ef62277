from pydantic import BaseModel


class FormListOut(BaseModel):
    message: str
    forms: list[dict]


class FormOut(BaseModel):
    message: str
    form: dict | None


class FormDeleteOut(BaseModel):
    message: str


class FormResponseListOut(BaseModel):
    message: str
    responses: list[dict]


class FormResponseOut(BaseModel):
    message: str
    response: dict | None


class ErrorOut(BaseModel):
    error: str
