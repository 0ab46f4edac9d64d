from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class StudentIn(BaseModel):
    name: str
    enrollment_date: Optional[datetime] = None
