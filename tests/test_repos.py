from jobboard.models import JobApplication, JobCategory
from jobboard.models.user import AuthProvider
from jobboard.repos import admin_repo, application_repo, job_repo, user_repo


def test_user_create_and_lookup(db_session):
    user = user_repo.create(db_session, "a@example.com", "Password123", name="A")
    assert user.password_hash and user.password_hash != "Password123"
    assert user.auth_provider == AuthProvider.EMAIL
    assert user_repo.get_by_email(db_session, "a@example.com").id == user.id
    assert user_repo.get_by_id(db_session, "missing") is None

    oauth = user_repo.create(db_session, "g@example.com", auth_provider=AuthProvider.GOOGLE, avatar="pic")
    assert oauth.password_hash is None


def test_user_update_only_touches_given_fields(db_session, make_user):
    user = make_user(name="Before")
    updated = user_repo.update(db_session, user.id, is_admin=True)
    assert updated.is_admin is True and updated.name == "Before"
    assert user_repo.update(db_session, "missing", name="x") is None


def test_list_jobs_filters_and_orders(db_session, make_user, make_job):
    alice = make_user(email="alice@example.com")
    bob = make_user(email="bob@example.com")
    first = make_job(alice, title="First")
    second = make_job(bob, title="Second", category=JobCategory.TRADE)
    pending = make_job(alice, title="Pending", is_approved=False)

    assert [j.id for j in job_repo.list_jobs(db_session)] == [second.id, first.id]
    assert [j.id for j in job_repo.list_jobs(db_session, approved_only=False)] == [pending.id, second.id, first.id]
    assert [j.id for j in job_repo.list_jobs(db_session, category=JobCategory.TRADE)] == [second.id]
    assert [j.id for j in job_repo.list_jobs(db_session, approved_only=False, user_id=alice.id)] == [pending.id, first.id]


def test_update_and_approve(db_session, make_user, make_job):
    job = make_job(make_user(), title="Old", is_approved=False)
    updated = job_repo.update(db_session, job.id, title="New")
    assert updated.title == "New" and updated.company == "ACME"
    assert job_repo.set_approved(db_session, job.id).is_approved is True
    assert job_repo.update(db_session, "missing", title="x") is None
    assert job_repo.set_approved(db_session, "missing") is None


def test_delete_removes_applications(db_session, make_user, make_job):
    owner = make_user(email="o@example.com")
    applicant = make_user(email="p@example.com")
    job = make_job(owner)
    application_repo.create(
        db_session, job_id=job.id, user_id=applicant.id, name="P", email="p@example.com", phone="(555) 123-4567"
    )
    assert len(application_repo.list_for_job(db_session, job.id)) == 1

    assert job_repo.delete(db_session, job.id) is True
    assert job_repo.get_by_id(db_session, job.id) is None
    assert db_session.query(JobApplication).count() == 0
    assert job_repo.delete(db_session, job.id) is False


def test_admin_stats(db_session, make_user, make_job):
    owner = make_user(email="o@example.com")
    make_user(email="admin@example.com", is_admin=True)
    make_job(owner)
    make_job(owner, is_approved=False)
    assert admin_repo.get_stats(db_session) == {
        "users_total": 2,
        "admins": 1,
        "jobs_total": 2,
        "jobs_approved": 1,
        "jobs_pending": 1,
        "applications": 0,
    }
