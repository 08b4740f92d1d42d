from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, Text
from jobly.database import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    salary = Column(Integer)
    equity = Column(Numeric)
    company_handle = Column(
        Text, ForeignKey("companies.handle", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary"),
        CheckConstraint("equity <= 1.0", name="ck_jobs_equity"),
    )
