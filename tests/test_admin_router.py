import jobboard.routers.admin as admin_mod
from jobboard.core.security import create_access_token


def test_stats_success(monkeypatch, admin_client):
    stats = {"users_total": 3, "admins": 1, "jobs_total": 4, "jobs_approved": 3, "jobs_pending": 1, "applications": 2}
    monkeypatch.setattr(admin_mod, "get_stats", lambda db: stats)
    resp = admin_client.get("/api/admin/stats")
    assert resp.status_code == 200
    assert resp.json() == stats


def test_stats_failure_is_500(monkeypatch, admin_client):
    def _boom(db):
        raise RuntimeError("db down")

    monkeypatch.setattr(admin_mod, "get_stats", _boom)
    resp = admin_client.get("/api/admin/stats")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to load admin stats"}


def test_list_passes_query_and_includes_pending(monkeypatch, admin_client):
    calls = []
    monkeypatch.setattr(admin_mod, "search_jobs", lambda db, query, approved_only: calls.append((query, approved_only)) or [])
    resp = admin_client.get("/api/admin/jobs", params={"query": "nurse"})
    assert resp.status_code == 200
    assert calls == [("nurse", False)]


def test_approve_missing_job_is_404(monkeypatch, admin_client):
    monkeypatch.setattr(admin_mod, "set_approved", lambda db, job_id, approved: None)
    resp = admin_client.patch("/api/admin/jobs/nope/approve")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Job not found"}


def test_get_job_missing_is_404(monkeypatch, admin_client):
    monkeypatch.setattr(admin_mod, "get_job_by_id", lambda db, job_id: None)
    assert admin_client.get("/api/admin/jobs/nope").status_code == 404


def test_non_admin_is_forbidden(db_client, make_user):
    user = make_user(email="plain@example.com")
    headers = {"Authorization": f"Bearer {create_access_token(user.id)}"}
    resp = db_client.get("/api/admin/stats", headers=headers)
    assert resp.status_code == 403
    assert resp.json() == {"error": "Access denied. Admin privileges required."}


def test_admin_views_against_database(db_client, make_user, make_job):
    admin = make_user(email="boss@example.com", is_admin=True)
    poster = make_user(email="poster@example.com")
    make_job(poster, title="Live", is_approved=True)
    pending = make_job(poster, title="Waiting", is_approved=False)
    headers = {"Authorization": f"Bearer {create_access_token(admin.id)}"}

    stats = db_client.get("/api/admin/stats", headers=headers).json()
    assert stats == {"users_total": 2, "admins": 1, "jobs_total": 2, "jobs_approved": 1, "jobs_pending": 1, "applications": 0}

    titles = [j["title"] for j in db_client.get("/api/admin/jobs", headers=headers).json()]
    assert titles == ["Waiting", "Live"]

    searched = db_client.get("/api/admin/jobs", params={"query": "wait"}, headers=headers).json()
    assert [j["id"] for j in searched] == [pending.id]

    approved = db_client.patch(f"/api/admin/jobs/{pending.id}/approve", headers=headers)
    assert approved.status_code == 200
    assert approved.json()["is_approved"] is True
