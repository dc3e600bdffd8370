from personnel_api.models.department import Department
from personnel_api.models.employee import Employee
from personnel_api.models.salary_grade import SalaryGrade
from personnel_api.models.user import User

__all__ = [ "Department", "Employee", "SalaryGrade", "User" ]
