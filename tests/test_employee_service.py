import pytest
from pydantic import ValidationError

from hmac_auth.services.employee import Employee, create_employee, verify_salary
from hmac_auth.services.hmac_codec import HmacCodec
from hmac_auth.services.result import ClientError, Success

SALARY_DIGEST = "1e4d8db2735cfbd5197ef9b785951eb0d90456afa3f197f360939438a5696733"


@pytest.fixture
def codec() -> HmacCodec:
    return HmacCodec(key="hmac")


def test_create_employee_signs_salary(codec: HmacCodec) -> None:
    out = create_employee(Employee(empName="John Doe", empSalary="50000"), codec)
    assert out == Success({"empName": "John Doe", "empSalary": SALARY_DIGEST})


@pytest.mark.parametrize("salary", [None, "", "   ", "\t\n", "\x01", "\x1f\x00"])
def test_create_employee_blank_salary(codec: HmacCodec, salary: str | None) -> None:
    out = create_employee(Employee(empName="John Doe", empSalary=salary), codec)
    assert out == ClientError(reason="blank_salary")


def test_create_employee_keeps_missing_name(codec: HmacCodec) -> None:
    out = create_employee(Employee(empSalary="50000"), codec)
    assert isinstance(out, Success)
    assert out.value["empName"] is None


def test_create_employee_hash_failure_is_client_error() -> None:
    broken = HmacCodec(key="hmac", algorithm="no-such-hash")
    out = create_employee(Employee(empName="x", empSalary="50000"), broken)
    assert out == ClientError(reason="hmac_failed")


def test_employee_accepts_numeric_salary() -> None:
    emp = Employee.model_validate({"empName": "John Doe", "empSalary": 50000})
    assert emp.emp_salary == "50000"


def test_employee_rejects_structured_salary() -> None:
    with pytest.raises(ValidationError):
        Employee.model_validate({"empSalary": {"amount": 50000}})
    with pytest.raises(ValidationError):
        Employee.model_validate({"empSalary": True})


def test_verify_salary(codec: HmacCodec) -> None:
    assert verify_salary("50000", SALARY_DIGEST, codec) == Success(True)
    assert verify_salary("50000", "deadbeef", codec) == Success(False)


def test_verify_salary_hash_failure() -> None:
    broken = HmacCodec(key="hmac", algorithm="no-such-hash")
    assert verify_salary("50000", SALARY_DIGEST, broken) == ClientError(reason="hmac_failed")


@pytest.mark.parametrize("salary", ["\u00a0", "\u2003", " \u3000 "])
def test_create_employee_unicode_spaces_are_not_blank(codec: HmacCodec, salary: str) -> None:
    # Как Java `trim()`: срезаются только символы <= U+0020.
    out = create_employee(Employee(empName="x", empSalary=salary), codec)
    assert out == Success({"empName": "x", "empSalary": codec.compute(salary)})


def test_employee_rejects_fractional_salary() -> None:
    with pytest.raises(ValidationError):
        Employee.model_validate({"empSalary": 50000.50})
    with pytest.raises(ValidationError):
        Employee.model_validate({"empSalary": 5e4})


def test_employee_rejects_lone_surrogates() -> None:
    with pytest.raises(ValidationError):
        Employee.model_validate({"empName": "\ud800", "empSalary": "1"})
    with pytest.raises(ValidationError):
        Employee.model_validate({"empName": "x", "empSalary": "\udfff"})


def test_create_employee_unencodable_salary_is_client_error(codec: HmacCodec) -> None:
    emp = Employee.model_construct(emp_name="x", emp_salary="\ud800")
    assert create_employee(emp, codec) == ClientError(reason="hmac_failed")
