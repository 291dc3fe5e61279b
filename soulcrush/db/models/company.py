from sqlalchemy import Column, Text
from sqlalchemy.orm import relationship

from soulcrush.db.base import Base


class Company(Base):
    __tablename__ = "companies"

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    website = Column(Text, nullable=False)
    ceo = Column(Text, nullable=False)
    industry = Column(Text, nullable=False)

    # Rows are removed by the database (FK cascade and trigger), never by the ORM
    applications = relationship(
        "Application",
        back_populates="company",
        passive_deletes="all",
        order_by="Application.date.desc()",
    )
