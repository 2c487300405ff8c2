"""
Course Catalog — Course schemas (camelCase on the wire)
"""
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class CourseRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    course_name: str | None = Field(None, alias="courseName", max_length=255, examples=["Algorithms"])
    course_description: str | None = Field(None, alias="courseDescription", max_length=5000)
    instructor: str | None = Field(None, max_length=255, examples=["Dr. X"])


class CourseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    course_name: str = Field(..., alias="courseName")
    course_description: str = Field(..., alias="courseDescription")
    instructor: str
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")


class MessageResponse(BaseModel):
    message: str
