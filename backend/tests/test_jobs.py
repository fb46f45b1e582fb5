from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration

JOB1 = {"title": "Job1", "salary": 100, "equity": 0.1, "company_handle": "c1"}
JOB2 = {"title": "Job2", "salary": 200, "equity": 0.2, "company_handle": "c1"}
JOB3 = {"title": "Job3", "salary": 300, "equity": 0.0, "company_handle": "c1"}
JOB4 = {"title": "Job4", "salary": None, "equity": None, "company_handle": "c1"}


def _with_ids(seed, *jobs) -> list:
    by_title = {f"Job{i}": job_id for i, job_id in enumerate(seed["job_ids"], start=1)}
    return [{"id": by_title[job["title"]], **job} for job in jobs]


def test_create_job_as_admin(client, admin_headers) -> None:
    payload = {"title": "new", "salary": 10, "equity": 0.2, "company_handle": "c1"}

    response = client.post("/jobs/", json=payload, headers=admin_headers)

    assert response.status_code == 201
    assert response.json() == {"job": {"id": 5, **payload}}


def test_create_job_forbidden_for_user(client, u1_headers) -> None:
    response = client.post("/jobs/", json={"title": "new"}, headers=u1_headers)

    assert response.status_code == 403


@pytest.mark.parametrize("body", [{}, {"title": "x", "salary": "lots"}, {"title": "x", "equity": 1.5}])
def test_create_job_invalid_body(client, admin_headers, body) -> None:
    assert client.post("/jobs/", json=body, headers=admin_headers).status_code == 422


def test_list_jobs_for_anon(client, seed) -> None:
    response = client.get("/jobs/")

    assert response.status_code == 200
    assert response.json() == {"jobs": _with_ids(seed, JOB1, JOB2, JOB3, JOB4)}


def test_list_jobs_filter_by_title(client, seed) -> None:
    response = client.get("/jobs/", params={"title": "job1"})

    assert response.json() == {"jobs": _with_ids(seed, JOB1)}


@pytest.mark.parametrize("title", ["%", "_", "job%"])
def test_list_jobs_title_wildcards_match_literally(client, seed, title) -> None:
    response = client.get("/jobs/", params={"title": title})

    assert response.json() == {"jobs": []}


def test_list_jobs_filter_by_min_salary(client, seed) -> None:
    response = client.get("/jobs/", params={"min_salary": 200})

    assert response.json() == {"jobs": _with_ids(seed, JOB2, JOB3)}


def test_list_jobs_filter_has_equity(client, seed) -> None:
    response = client.get("/jobs/", params={"has_equity": "true"})

    assert response.json() == {"jobs": _with_ids(seed, JOB1, JOB2)}


def test_list_jobs_has_equity_false_does_not_restrict(client, seed) -> None:
    response = client.get("/jobs/", params={"has_equity": "false"})

    assert len(response.json()["jobs"]) == 4


def test_list_jobs_combined_filters(client, seed) -> None:
    response = client.get("/jobs/", params={"min_salary": 150, "has_equity": "true"})

    assert response.json() == {"jobs": _with_ids(seed, JOB2)}


def test_list_jobs_rejects_unknown_filter(client) -> None:
    response = client.get("/jobs/", params={"company": "c1"})

    assert response.status_code == 422


def test_get_job_with_requirements(client, seed) -> None:
    job_id = seed["job_ids"][0]
    tech_ids = seed["tech_ids"]

    response = client.get(f"/jobs/{job_id}")

    assert response.json() == {
        "job": {
            "id": job_id,
            **JOB1,
            "requirements": [
                {"tech_id": tech_ids[0], "tech_name": "tech1"},
                {"tech_id": tech_ids[1], "tech_name": "tech2"},
            ],
        }
    }


def test_get_missing_job(client) -> None:
    assert client.get("/jobs/0").status_code == 404


def test_update_job_as_admin(client, seed, admin_headers) -> None:
    job_id = seed["job_ids"][0]

    response = client.patch(f"/jobs/{job_id}", json={"title": "J-New", "salary": 500}, headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {
        "job": {"id": job_id, "title": "J-New", "salary": 500, "equity": 0.1, "company_handle": "c1"}
    }


def test_update_job_rejects_company_change(client, seed, admin_headers) -> None:
    response = client.patch(f"/jobs/{seed['job_ids'][0]}", json={"company_handle": "c2"}, headers=admin_headers)

    assert response.status_code == 422


def test_update_job_empty_body(client, seed, admin_headers) -> None:
    response = client.patch(f"/jobs/{seed['job_ids'][0]}", json={}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_UPDATE"


def test_update_missing_job(client, admin_headers) -> None:
    assert client.patch("/jobs/0", json={"title": "x"}, headers=admin_headers).status_code == 404


def test_update_job_unauthenticated(client, seed) -> None:
    assert client.patch(f"/jobs/{seed['job_ids'][0]}", json={"title": "x"}).status_code == 401


def test_delete_job_as_admin(client, seed, admin_headers) -> None:
    job_id = seed["job_ids"][0]

    response = client.delete(f"/jobs/{job_id}", headers=admin_headers)

    assert response.json() == {"deleted": job_id}
    assert client.get(f"/jobs/{job_id}").status_code == 404


def test_delete_job_forbidden_for_user(client, seed, u1_headers) -> None:
    assert client.delete(f"/jobs/{seed['job_ids'][0]}", headers=u1_headers).status_code == 403


def test_delete_missing_job(client, admin_headers) -> None:
    assert client.delete("/jobs/0", headers=admin_headers).status_code == 404


def test_require_tech_as_admin(client, seed, admin_headers) -> None:
    job_id, tech_id = seed["job_ids"][2], seed["tech_ids"][2]

    response = client.post(f"/jobs/{job_id}/techs/{tech_id}", headers=admin_headers)

    assert response.json() == {"required": tech_id}
    requirements = client.get(f"/jobs/{job_id}").json()["job"]["requirements"]
    assert requirements == [{"tech_id": tech_id, "tech_name": "tech3"}]


def test_require_tech_duplicate(client, seed, admin_headers) -> None:
    job_id, tech_id = seed["job_ids"][0], seed["tech_ids"][0]

    response = client.post(f"/jobs/{job_id}/techs/{tech_id}", headers=admin_headers)

    assert response.status_code == 400


def test_require_tech_missing_job_or_tech(client, seed, admin_headers) -> None:
    assert client.post(f"/jobs/0/techs/{seed['tech_ids'][0]}", headers=admin_headers).status_code == 404
    assert client.post(f"/jobs/{seed['job_ids'][0]}/techs/0", headers=admin_headers).status_code == 404


def test_require_tech_forbidden_for_user(client, seed, u1_headers) -> None:
    response = client.post(f"/jobs/{seed['job_ids'][0]}/techs/{seed['tech_ids'][2]}", headers=u1_headers)

    assert response.status_code == 403
