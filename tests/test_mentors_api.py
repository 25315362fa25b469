# Larger than any SQLite INTEGER, so it can never name a stored row.
OUT_OF_RANGE_ID = 2 ** 70


def _student(client, student_id):
    unassigned = {s["id"]: s for s in client.get("/api/students/unassigned").json()}
    if student_id in unassigned:
        return unassigned[student_id]
    raise AssertionError(f"student {student_id} is assigned")


def test_create_mentor(client):
    r = client.post("/api/mentor", json={"name": "Alice"})
    assert r.status_code == 200
    body = r.json()
    assert body["name"] == "Alice"
    assert body["students"] == []
    assert isinstance(body["id"], int)


def test_create_mentor_ids_are_unique(mentor_factory):
    ids = {mentor_factory(f"M{i}")["id"] for i in range(5)}
    assert len(ids) == 5


def test_create_mentor_without_name(client):
    r = client.post("/api/mentor", json={})
    assert r.status_code == 200
    assert r.json()["name"] is None


def test_bulk_assign(client, mentor_factory, student_factory):
    mentor = mentor_factory("Alice")
    s1 = student_factory("Bob")
    s2 = student_factory("Carol")
    r = client.put(f"/api/mentor/{mentor['id']}/assign", json={"studentIds": [s1["id"], s2["id"]]})
    assert r.status_code == 200
    assert r.json()["students"] == [s1["id"], s2["id"]]

    students = client.get(f"/api/mentor/{mentor['id']}/students").json()
    assert [s["id"] for s in students] == [s1["id"], s2["id"]]
    assert all(s["mentor"] == mentor["id"] for s in students)


def test_bulk_assign_appends_to_existing_students(client, mentor_factory, student_factory):
    mentor = mentor_factory()
    first = student_factory()
    second = student_factory()
    third = student_factory()
    client.put(f"/api/mentor/{mentor['id']}/assign", json={"studentIds": [first["id"]]})
    r = client.put(f"/api/mentor/{mentor['id']}/assign", json={"studentIds": [third["id"], second["id"]]})
    assert r.status_code == 200
    assert r.json()["students"] == [first["id"], third["id"], second["id"]]


def test_bulk_assign_accepts_snake_case_body(client, mentor_factory, student_factory):
    mentor = mentor_factory()
    s = student_factory()
    r = client.put(f"/api/mentor/{mentor['id']}/assign", json={"student_ids": [s["id"]]})
    assert r.status_code == 200
    assert r.json()["students"] == [s["id"]]


def test_bulk_assign_empty_list_is_noop(client, mentor_factory):
    mentor = mentor_factory()
    r = client.put(f"/api/mentor/{mentor['id']}/assign", json={"studentIds": []})
    assert r.status_code == 200
    assert r.json()["students"] == []


def test_bulk_assign_mentor_not_found(client, student_factory):
    s = student_factory()
    r = client.put("/api/mentor/9999/assign", json={"studentIds": [s["id"]]})
    assert r.status_code == 404
    assert r.json() == {"error": "Mentor not found"}
    assert _student(client, s["id"])["mentor"] is None


def test_bulk_assign_rejects_already_assigned(client, mentor_factory, student_factory):
    m1 = mentor_factory()
    m2 = mentor_factory()
    taken = student_factory()
    free = student_factory()
    client.put(f"/api/mentor/{m1['id']}/assign", json={"studentIds": [taken["id"]]})

    r = client.put(f"/api/mentor/{m2['id']}/assign", json={"studentIds": [free["id"], taken["id"]]})
    assert r.status_code == 400
    assert r.json() == {"error": "Some students already have a mentor"}

    # Nothing in the request was changed.
    assert _student(client, free["id"])["mentor"] is None
    assert client.get(f"/api/mentor/{m2['id']}/students").json() == []
    assert [s["id"] for s in client.get(f"/api/mentor/{m1['id']}/students").json()] == [taken["id"]]


def test_bulk_assign_rejects_unknown_student(client, mentor_factory, student_factory):
    mentor = mentor_factory()
    s = student_factory()
    r = client.put(f"/api/mentor/{mentor['id']}/assign", json={"studentIds": [s["id"], 424242]})
    assert r.status_code == 400
    assert _student(client, s["id"])["mentor"] is None


def test_bulk_assign_rejects_duplicate_ids(client, mentor_factory, student_factory):
    mentor = mentor_factory()
    s = student_factory()
    r = client.put(f"/api/mentor/{mentor['id']}/assign", json={"studentIds": [s["id"], s["id"]]})
    assert r.status_code == 400
    assert _student(client, s["id"])["mentor"] is None


def test_bulk_assign_missing_body_field(client, mentor_factory):
    mentor = mentor_factory()
    r = client.put(f"/api/mentor/{mentor['id']}/assign", json={})
    assert r.status_code == 422
    assert set(r.json()) == {"error"}


def test_list_students_of_unknown_mentor_is_empty(client):
    r = client.get("/api/mentor/9999/students")
    assert r.status_code == 200
    assert r.json() == []


def test_create_mentor_with_numeric_name(client):
    r = client.post("/api/mentor", json={"name": 123})
    assert r.status_code == 200
    assert r.json()["name"] == "123"


def test_bulk_assign_out_of_range_mentor_id(client, student_factory):
    s = student_factory()
    r = client.put(f"/api/mentor/{OUT_OF_RANGE_ID}/assign", json={"studentIds": [s["id"]]})
    assert r.status_code == 404
    assert r.json() == {"error": "Mentor not found"}
    assert _student(client, s["id"])["mentor"] is None


def test_bulk_assign_out_of_range_student_id(client, mentor_factory, student_factory):
    mentor = mentor_factory()
    s = student_factory()
    r = client.put(f"/api/mentor/{mentor['id']}/assign", json={"studentIds": [s["id"], OUT_OF_RANGE_ID]})
    assert r.status_code == 400
    assert r.json() == {"error": "Some students already have a mentor"}
    assert _student(client, s["id"])["mentor"] is None

    r = client.put(f"/api/mentor/{mentor['id']}/assign", json={"studentIds": [OUT_OF_RANGE_ID]})
    assert r.status_code == 400


def test_list_students_of_out_of_range_mentor_is_empty(client):
    r = client.get(f"/api/mentor/{OUT_OF_RANGE_ID}/students")
    assert r.status_code == 200
    assert r.json() == []
