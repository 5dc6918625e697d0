from sqlmodel import SQLModel, Field
from .helper import id_generator


class User(SQLModel, table=True):
    """Team member who can be assigned to tasks."""
    id: str = Field(default_factory=id_generator('user', 10), primary_key=True)
    name: str = Field(index=True)
    role: str
    avatar: str = Field(default="")
    capacity: int = Field(default=0, description="Weekly capacity in hours")


class WorkloadDay(SQLModel, table=True):
    """Hours booked for a user on one day of the week."""
    __tablename__ = "workload_day"

    user_id: str = Field(foreign_key="user.id", primary_key=True)
    position: int = Field(primary_key=True)
    day: str
    load: int = Field(default=0)
