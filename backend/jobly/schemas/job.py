from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator
from pydantic.alias_generators import to_camel

from jobly.schemas.company import CompanyResponse


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class JobCreate(_CamelModel):
    model_config = ConfigDict(extra="forbid")

    title: StrictStr = Field(min_length=1)
    salary: int | None = Field(default=None, ge=0, strict=True)
    equity: float | None = Field(default=None, ge=0, le=1)
    company_handle: StrictStr = Field(min_length=1)


class JobUpdate(_CamelModel):
    model_config = ConfigDict(extra="forbid")

    title: StrictStr | None = Field(default=None, min_length=1)
    salary: int | None = Field(default=None, ge=0, strict=True)
    equity: float | None = Field(default=None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, value):
        if value is None:
            raise ValueError("title cannot be null")
        return value


class JobSearch(_CamelModel):
    model_config = ConfigDict(extra="forbid")

    minimum_salary: float | None = Field(default=None, ge=0)
    equity_check: StrictBool = False
    title: StrictStr | None = None


class JobResponse(_CamelModel):
    id: int
    title: str
    salary: int | None
    equity: float | None
    company_handle: str


class JobDetail(_CamelModel):
    id: int
    title: str
    salary: int | None
    equity: float | None
    company: CompanyResponse | None = None


class JobEnvelope(BaseModel):
    job: JobResponse


class JobDetailEnvelope(BaseModel):
    job: JobDetail


class JobListResponse(BaseModel):
    jobs: list[JobResponse]


class JobDeleted(BaseModel):
    deleted: str
