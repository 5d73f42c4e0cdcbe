from datetime import datetime


def _create(client, payload):
    response = client.post("/add-employee", json=payload)
    assert response.status_code == 200, response.json()
    return response.json()["employeeId"]


def test_create_get_delete_roundtrip(client, make_payload):
    response = client.post("/add-employee", json=make_payload())
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Employee added successfully"
    new_pk = body["employeeId"]

    response = client.get(f"/api/employees/{new_pk}")
    assert response.status_code == 200
    employee = response.json()["employee"]
    assert employee["employee_id"] == "E1"
    assert employee["permissions"] == "employee"
    assert employee["start_date"] == "2024-01-01"
    assert employee["phone"] is None
    assert employee["salary"] is None
    assert "password" not in employee

    response = client.delete(f"/api/employees/{new_pk}")
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Employee deleted successfully"}

    response = client.get(f"/api/employees/{new_pk}")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Employee not found"}


def test_create_missing_required_field(client, make_payload):
    response = client.post("/add-employee", json=make_payload(lastName=""))
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "All required fields must be filled"}

    payload = make_payload()
    del payload["password"]
    response = client.post("/add-employee", json=payload)
    assert response.status_code == 400


def test_create_duplicates_name_the_column(client, make_payload):
    _create(client, make_payload())

    cases = [
        (make_payload(email="other@b.com", username="other"), "Employee ID already exists"),
        (make_payload(employeeId="E2", username="other"), "Email already exists"),
        (make_payload(employeeId="E2", email="other@b.com"), "Username already exists"),
    ]
    for payload, message in cases:
        response = client.post("/add-employee", json=payload)
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": message}

    assert len(client.get("/api/employees").json()["employees"]) == 1


def test_create_rejects_malformed_values(client, make_payload):
    response = client.post("/add-employee", json=make_payload(startDate="01/02/2024"))
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid value for startDate"

    response = client.post("/add-employee", json=make_payload(employmentType="freelance"))
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid value for employmentType"

    response = client.post("/add-employee", json=make_payload(salary="lots"))
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid value for salary"


def test_create_from_form_post(client, make_payload):
    form = make_payload(dob="1990-05-17", gender="female", salary="1234.5", permissions="manager")
    response = client.post("/add-employee", data=form)
    assert response.status_code == 200

    employee = client.get(f"/api/employees/{response.json()['employeeId']}").json()["employee"]
    assert employee["date_of_birth"] == "1990-05-17"
    assert employee["gender"] == "female"
    assert employee["salary"] == 1234.5
    assert employee["permissions"] == "manager"


def test_list_is_newest_first(client, make_payload):
    assert client.get("/api/employees").json() == {"success": True, "employees": []}

    first = _create(client, make_payload())
    second = _create(client, make_payload(employeeId="E2", email="c@d.com", username="cd2"))

    employees = client.get("/api/employees").json()["employees"]
    assert [e["id"] for e in employees] == [second, first]
    # the listing returns every column, password included
    assert employees[0]["password"] == "x"


def test_update_replaces_mutable_fields(client, make_payload):
    pk = _create(client, make_payload(phone="555-0100"))
    before = client.get("/api/employees").json()["employees"][0]

    changes = make_payload(
        employeeId="CHANGED",
        password="changed",
        firstName="Alice",
        department="Ops",
        permissions="admin",
        salary="50000",
    )
    response = client.put(f"/api/employees/{pk}", json=changes)
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Employee updated successfully"}

    after = client.get("/api/employees").json()["employees"][0]
    assert after["first_name"] == "Alice"
    assert after["department"] == "Ops"
    assert after["permissions"] == "admin"
    assert after["salary"] == 50000
    # omitted optional fields are cleared, not preserved
    assert after["phone"] is None
    assert after["employee_id"] == "E1"
    assert after["password"] == "x"
    assert after["created_at"] == before["created_at"]
    assert datetime.fromisoformat(after["updated_at"]) > datetime.fromisoformat(before["updated_at"])


def test_update_defaults_permissions(client, make_payload):
    pk = _create(client, make_payload(permissions="admin"))
    payload = make_payload()
    assert "permissions" not in payload

    assert client.put(f"/api/employees/{pk}", json=payload).status_code == 200
    assert client.get(f"/api/employees/{pk}").json()["employee"]["permissions"] == "employee"


def test_update_missing_employee(client, make_payload):
    response = client.put("/api/employees/999", json=make_payload())
    assert response.status_code == 404
    assert response.json()["message"] == "Employee not found"

    response = client.put("/api/employees/abc", json=make_payload())
    assert response.status_code == 404


def test_update_duplicate_email_and_username(client, make_payload):
    _create(client, make_payload())
    pk = _create(client, make_payload(employeeId="E2", email="c@d.com", username="cd2"))

    response = client.put(f"/api/employees/{pk}", json=make_payload(username="cd2"))
    assert response.status_code == 400
    assert response.json()["message"] == "Email already exists"

    response = client.put(f"/api/employees/{pk}", json=make_payload(email="c@d.com"))
    assert response.status_code == 400
    assert response.json()["message"] == "Username already exists"

    # keeping its own email and username is not a collision
    response = client.put(f"/api/employees/{pk}", json=make_payload(email="c@d.com", username="cd2"))
    assert response.status_code == 200


def test_update_cannot_blank_required_column(client, make_payload):
    pk = _create(client, make_payload())

    response = client.put(f"/api/employees/{pk}", json=make_payload(firstName=""))
    assert response.status_code == 500
    assert response.json()["message"].startswith("Database error: ")
    assert client.get(f"/api/employees/{pk}").json()["employee"]["first_name"] == "A"


def test_update_rejects_bad_enum(client, make_payload):
    pk = _create(client, make_payload())
    response = client.put(f"/api/employees/{pk}", json=make_payload(gender="unknown"))
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid value for gender"


def test_delete_missing_employee(client):
    response = client.delete("/api/employees/42")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Employee not found"}


def test_non_object_json_body(client):
    response = client.post("/add-employee", json=["E1"])
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_salary_out_of_column_range(client, make_payload):
    for salary in ("1e30", "100000000", "99999999.999", "-123456789"):
        response = client.post("/add-employee", json=make_payload(salary=salary))
        assert response.status_code == 400, salary
        assert response.json() == {"success": False, "message": "Invalid value for salary"}

    pk = _create(client, make_payload(salary="99999999.99"))
    response = client.put(f"/api/employees/{pk}", json=make_payload(salary="1e30"))
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid value for salary"


def test_unusable_ids_are_not_found(client, make_payload):
    for raw in ("²", "99999999999999999999999", "2147483648"):
        for response in (
            client.get(f"/api/employees/{raw}"),
            client.put(f"/api/employees/{raw}", json=make_payload()),
            client.delete(f"/api/employees/{raw}"),
        ):
            assert response.status_code == 404, raw
            assert response.json() == {"success": False, "message": "Employee not found"}

        response = client.get(f"/edit-employee/{raw}")
        assert response.status_code == 404
        assert response.text == "Employee not found"
