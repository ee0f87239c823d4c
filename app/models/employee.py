"""Employee models for the upstream employee API."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Employee(BaseModel):
    """Employee record as returned by the upstream service.

    Upstream uses ``employee_*`` keys; plain field names are accepted too.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str | None = Field(default=None, validation_alias=AliasChoices("employee_name", "name"))
    salary: int = Field(default=0, ge=0, validation_alias=AliasChoices("employee_salary", "salary"))
    age: int | None = Field(default=None, validation_alias=AliasChoices("employee_age", "age"))
    title: str | None = Field(default=None, validation_alias=AliasChoices("employee_title", "title"))
    email: str | None = Field(default=None, validation_alias=AliasChoices("employee_email", "email"))


class CreateEmployeeRequest(BaseModel):
    name: str
    salary: int
    age: int
    title: str


class DeleteEmployeeRequest(BaseModel):
    """Upstream deletes by name, not by id."""

    name: str
