from pydantic import BaseModel


class SubjectIn(BaseModel):
    title: str
    maximum_capacity: int


class EnrolledStudentOut(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class SubjectOut(BaseModel):
    id: int
    title: str
    maximum_capacity: int
    students: list[EnrolledStudentOut] = []

    class Config:
        from_attributes = True
