from sqlalchemy.exc import SQLAlchemyError

from jobboard.services import crud_jobs
from tests.conftest import JOB


def test_create_job_defaults(create_job):
    job = create_job()

    assert job["id"]
    assert job["isActive"] is True
    assert job["title"] == "Engineer"
    assert job["type"] == "full-time"
    assert job["createdAt"]
    assert job["updatedAt"] is None
    assert job["salary"] is None


def test_create_job_splits_comma_separated_skills(create_job):
    job = create_job(skills="React, Node.js, ")
    assert job["skills"] == ["React", "Node.js"]


def test_create_job_keeps_skill_list_order(create_job):
    job = create_job(skills=["Python", "SQL", "Docker"])
    assert job["skills"] == ["Python", "SQL", "Docker"]


def test_create_job_inactive(create_job):
    job = create_job(isActive=False)
    assert job["isActive"] is False


def test_create_job_validation(admin_client):
    response = admin_client.post("/api/admin/jobs", json={**JOB, "title": ""})
    assert response.status_code == 400
    assert response.json() == {"message": "Title is required"}

    response = admin_client.post("/api/admin/jobs", json={**JOB, "company": "   "})
    assert response.status_code == 400
    assert response.json() == {"message": "Company is required"}

    missing_type = {key: value for key, value in JOB.items() if key != "type"}
    response = admin_client.post("/api/admin/jobs", json=missing_type)
    assert response.status_code == 400
    assert response.json() == {"message": "type is required"}


def test_create_job_rejects_unknown_type(admin_client):
    response = admin_client.post("/api/admin/jobs", json={**JOB, "type": "full time"})
    assert response.status_code == 400
    assert response.json()["message"].startswith("type:")


def test_public_listing_hides_inactive_jobs(client, create_job):
    active = create_job(title="Visible")
    hidden = create_job(title="Hidden", isActive=False)

    client.cookies.clear()
    response = client.get("/api/jobs")

    assert response.status_code == 200
    ids = [job["id"] for job in response.json()]
    assert active["id"] in ids
    assert hidden["id"] not in ids


def test_public_fetch_inactive_or_missing_is_404(client, create_job):
    active = create_job()
    hidden = create_job(isActive=False)
    client.cookies.clear()

    assert client.get(f"/api/jobs/{active['id']}").status_code == 200

    for job_id in (hidden["id"], "does-not-exist"):
        response = client.get(f"/api/jobs/{job_id}")
        assert response.status_code == 404
        assert response.json() == {"message": "Job not found"}


def test_admin_listing_includes_inactive_newest_first(admin_client, create_job):
    first = create_job(title="First")
    second = create_job(title="Second", isActive=False)

    response = admin_client.get("/api/admin/jobs")

    assert response.status_code == 200
    ids = [job["id"] for job in response.json()]
    assert ids == [second["id"], first["id"]]


def test_update_job_is_partial(admin_client, create_job):
    job = create_job(skills="Go")

    response = admin_client.put(
        f"/api/admin/jobs/{job['id']}",
        json={"title": "Senior Engineer", "skills": "Go, Rust"},
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated["title"] == "Senior Engineer"
    assert updated["skills"] == ["Go", "Rust"]
    assert updated["company"] == "Acme"
    assert updated["description"] == "Build things"
    assert updated["id"] == job["id"]
    assert updated["createdAt"] == job["createdAt"]
    assert updated["updatedAt"] is not None


def test_update_job_rejects_blank_required_field(admin_client, create_job):
    job = create_job()
    response = admin_client.put(f"/api/admin/jobs/{job['id']}", json={"location": ""})
    assert response.status_code == 400
    assert response.json() == {"message": "Location is required"}


def test_update_missing_job(admin_client):
    response = admin_client.put("/api/admin/jobs/nope", json={"title": "X"})
    assert response.status_code == 404
    assert response.json() == {"message": "Job not found"}


def test_toggle_is_its_own_inverse(admin_client, create_job):
    job = create_job()

    once = admin_client.post(f"/api/admin/jobs/{job['id']}/toggle")
    twice = admin_client.post(f"/api/admin/jobs/{job['id']}/toggle")

    assert once.status_code == twice.status_code == 200
    assert once.json()["isActive"] is False
    assert twice.json()["isActive"] is True


def test_toggle_missing_job(admin_client):
    response = admin_client.post("/api/admin/jobs/nope/toggle")
    assert response.status_code == 404


def test_delete_job(admin_client, create_job):
    job = create_job()

    response = admin_client.delete(f"/api/admin/jobs/{job['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Job deleted successfully"}

    again = admin_client.delete(f"/api/admin/jobs/{job['id']}")
    assert again.status_code == 404
    assert admin_client.get("/api/admin/jobs").json() == []


def test_storage_failure_is_a_generic_500(client, monkeypatch):
    def boom(db):
        raise SQLAlchemyError("connection reset by peer")

    monkeypatch.setattr(crud_jobs, "list_active_jobs", boom)
    response = client.get("/api/jobs")

    assert response.status_code == 500
    assert response.json() == {"message": "Failed to fetch jobs"}
    assert "connection reset" not in response.text


class TestJobService:
    """crud_jobs used directly, without the HTTP layer."""

    def test_toggle_twice_restores_flag(self, db, create_job):
        job = create_job()
        assert crud_jobs.toggle_job_active(db, job["id"]).is_active is False
        assert crud_jobs.toggle_job_active(db, job["id"]).is_active is True

    def test_toggle_unknown_id(self, db):
        assert crud_jobs.toggle_job_active(db, "missing") is None

    def test_delete_unknown_id(self, db):
        assert crud_jobs.delete_job(db, "missing") is False

    def test_active_filters(self, db, create_job):
        visible = create_job()
        hidden = create_job(isActive=False)
        assert [job.id for job in crud_jobs.list_active_jobs(db)] == [visible["id"]]
        assert crud_jobs.get_active_job(db, hidden["id"]) is None
        assert crud_jobs.get_job(db, hidden["id"]) is not None
