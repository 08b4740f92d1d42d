from sqlalchemy import CheckConstraint, Column, Integer, Text
from jobly.database import Base


class Company(Base):
    __tablename__ = "companies"

    handle = Column(Text, primary_key=True)
    name = Column(Text, nullable=False, unique=True)
    num_employees = Column(Integer)
    description = Column(Text, nullable=False)
    logo_url = Column(Text)

    __table_args__ = (CheckConstraint("num_employees >= 0", name="ck_companies_num_employees"),)
