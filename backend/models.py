from sqlalchemy import Column, String, Integer, Float, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship
from database import Base


class Company(Base):
    """
    Root of the company aggregate.

    A company exclusively owns its employees and its (optional) profile.
    Deleting a company removes both, through the ORM cascade and through
    the ON DELETE CASCADE foreign keys on the child tables.
    """
    __tablename__ = 'companies'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)

    employees = relationship(
        "Employee",
        back_populates="company",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Employee.id",
    )
    profile = relationship(
        "Profile",
        back_populates="company",
        cascade="all, delete-orphan",
        passive_deletes=True,
        uselist=False,
    )

    __table_args__ = (
        CheckConstraint("name != ''", name='ck_company_name_not_empty'),
    )

    def __repr__(self):
        return f"<Company id={self.id} name={self.name!r}>"


class Employee(Base):
    __tablename__ = 'employees'

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(Integer, ForeignKey('companies.id', ondelete='CASCADE'), nullable=False)
    name = Column(String, nullable=False)
    age = Column(Integer, nullable=False)

    company = relationship("Company", back_populates="employees")

    __table_args__ = (
        CheckConstraint("age >= 0", name='ck_employee_age_non_negative'),
        Index('idx_employees_company', 'company_id'),
    )

    def __repr__(self):
        return f"<Employee id={self.id} name={self.name!r} age={self.age}>"


class Profile(Base):
    __tablename__ = 'profiles'

    id = Column(Integer, primary_key=True, autoincrement=True)
    # unique: at most one profile per company
    company_id = Column(Integer, ForeignKey('companies.id', ondelete='CASCADE'), nullable=False, unique=True)
    registered_capital = Column(Float, nullable=False)
    cert_id = Column(String, nullable=False)

    company = relationship("Company", back_populates="profile")

    def __repr__(self):
        return f"<Profile id={self.id} cert_id={self.cert_id!r}>"
