from tests.conftest import ADMIN, JOB


def test_admin_publishes_and_hides_a_job(client):
    assert client.post("/api/auth/signup", json=ADMIN).status_code == 200
    client.post("/api/auth/logout")

    login = client.post(
        "/api/auth/login", json={"username": "alice", "password": "secret1"}
    )
    assert login.status_code == 200

    job = client.post("/api/admin/jobs", json=JOB).json()
    assert job["isActive"] is True

    assert job["id"] in [j["id"] for j in client.get("/api/admin/jobs").json()]
    assert job["id"] in [j["id"] for j in client.get("/api/jobs").json()]

    toggled = client.post(f"/api/admin/jobs/{job['id']}/toggle")
    assert toggled.json()["isActive"] is False

    assert job["id"] not in [j["id"] for j in client.get("/api/jobs").json()]
    admin_view = {j["id"]: j for j in client.get("/api/admin/jobs").json()}
    assert admin_view[job["id"]]["isActive"] is False


def test_candidate_applies_and_admin_reviews(client):
    client.post("/api/auth/signup", json=ADMIN)
    job = client.post("/api/admin/jobs", json={**JOB, "skills": "Python, FastAPI"}).json()
    client.post("/api/auth/logout")

    # Anonymous candidate
    listing = client.get("/api/jobs").json()
    assert [j["id"] for j in listing] == [job["id"]]

    upload = client.post(
        "/api/upload",
        files={"resume": ("cv.docx", b"docx bytes", "application/octet-stream")},
    ).json()
    submitted = client.post(
        "/api/applications",
        json={
            "jobId": job["id"],
            "firstName": "Dana",
            "lastName": "Scully",
            "email": "dana@example.com",
            "phone": "555-0199",
            "resumeUrl": upload["url"],
            "coverLetter": "Hello",
        },
    ).json()
    assert submitted["status"] == "pending"
    assert client.get("/api/admin/applications").status_code == 401

    # Admin reviews
    client.post("/api/auth/login", json={"username": "alice", "password": "secret1"})
    applications = client.get("/api/admin/applications").json()
    assert len(applications) == 1
    assert applications[0]["jobTitle"] == "Engineer"
    assert applications[0]["resumeUrl"] == upload["url"]

    approved = client.put(
        f"/api/admin/applications/{submitted['id']}/status", json={"status": "approved"}
    )
    assert approved.json()["status"] == "approved"


def test_health_and_root(client):
    assert client.get("/health").json() == {"status": "healthy"}
    root = client.get("/", follow_redirects=False)
    assert root.status_code in (302, 307)
    assert root.headers["location"] == "/docs"
