from pydantic import BaseModel, ConfigDict, Field, StrictStr
from pydantic.alias_generators import to_camel


class CompanySearch(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    min_employees: int | None = Field(default=None, ge=0)
    max_employees: int | None = Field(default=None, ge=0)
    name: StrictStr | None = None


class CompanyResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    handle: str
    name: str
    description: str
    num_employees: int | None
    logo_url: str | None


class CompanyJob(BaseModel):
    id: int
    title: str
    salary: int | None
    equity: float | None


class CompanyDetail(CompanyResponse):
    jobs: list[CompanyJob] = []


class CompanyListResponse(BaseModel):
    companies: list[CompanyResponse]


class CompanyDetailEnvelope(BaseModel):
    company: CompanyDetail
